from pydantic import BaseModel, ConfigDict, Field
from typing import List

from .webhook_config_model import TriggerEvent


class WebhookPayload(BaseModel):
    model_config = ConfigDict(frozen=True)

    webhook: str = Field(..., description="Webhook endpoint URL")
    webhook_events_filter: List[TriggerEvent] = Field(
        default_factory=lambda: list(TriggerEvent),
        description="Events that trigger the webhook, in declaration order"
    )
