"""
Conversion between WebhookConfig and the webhook fields of a prediction or
training request body.
"""
from typing import Any, Mapping, Optional

from pydantic import ValidationError

from ..models.webhook_config_model import WebhookConfig
from ..models.webhook_payload_model import WebhookPayload
from ..singletons.logs_manager import LogsManager

logger = LogsManager().get_logger()


def build_webhook_payload(config: WebhookConfig, x_request_id: Optional[str] = None) -> WebhookPayload:
    """
    Build the ``webhook`` / ``webhook_events_filter`` request fields

    Args:
        config: The webhook subscription
        x_request_id: Request ID for logging

    Returns:
        WebhookPayload with events in declaration order
    """
    payload = WebhookPayload(
        webhook=str(config.endpoint),
        webhook_events_filter=config.ordered_triggers()
    )
    logger.debug(
        f"Built webhook payload for {payload.webhook} with events {[str(e) for e in payload.webhook_events_filter]}",
        x_request_id=x_request_id
    )
    return payload


def parse_webhook_payload(data: Mapping[str, Any], x_request_id: Optional[str] = None) -> WebhookConfig:
    """
    Read a WebhookConfig back from request fields. A missing
    ``webhook_events_filter`` subscribes to all events.
    """
    try:
        kwargs: dict[str, Any] = {"endpoint": data.get("webhook")}
        if data.get("webhook_events_filter") is not None:
            kwargs["triggers"] = data["webhook_events_filter"]
        return WebhookConfig(**kwargs)

    except ValidationError as e:
        logger.error(f"Invalid webhook payload: {str(e)}", x_request_id=x_request_id)
        raise
