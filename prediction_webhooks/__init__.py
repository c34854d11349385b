from .models.webhook_config_model import ALL_TRIGGER_EVENTS, TriggerEvent, WebhookConfig
from .models.prediction_status_model import PredictionStatus
from .models.webhook_payload_model import WebhookPayload
from .controller.build_webhook_payload import build_webhook_payload, parse_webhook_payload

__all__ = [
    "ALL_TRIGGER_EVENTS",
    "TriggerEvent",
    "WebhookConfig",
    "PredictionStatus",
    "WebhookPayload",
    "build_webhook_payload",
    "parse_webhook_payload",
]
