from enum import Enum
from typing import Annotated, FrozenSet, List, Union

from pydantic import AnyUrl, BaseModel, ConfigDict, Field, UrlConstraints


class TriggerEvent(str, Enum):
    """Events that can trigger a webhook request."""

    # immediately on job start
    START = "start"
    # each time the job generates an output
    OUTPUT = "output"
    # each time the job generates log output
    LOGS = "logs"
    # once, when the job reaches a terminal state (succeeded / canceled / failed)
    COMPLETED = "completed"

    def __str__(self) -> str:
        return self.value


ALL_TRIGGER_EVENTS: FrozenSet[TriggerEvent] = frozenset(TriggerEvent)

# absolute URL: any scheme, host required
EndpointUrl = Annotated[AnyUrl, UrlConstraints(host_required=True)]


class WebhookConfig(BaseModel):
    """
    A webhook subscription: an HTTPS endpoint that receives a POST request
    when a prediction or training generates output, logs, or reaches a
    terminal state.

    Omitting ``triggers`` subscribes to every event. An explicit empty
    collection is kept as is and selects no events.
    """
    model_config = ConfigDict(frozen=True)

    endpoint: EndpointUrl = Field(..., description="Webhook endpoint URL")
    triggers: FrozenSet[TriggerEvent] = Field(
        default=ALL_TRIGGER_EVENTS,
        description="Events that trigger the webhook, defaults to all events"
    )

    def fires_on(self, event: Union[TriggerEvent, str]) -> bool:
        try:
            return TriggerEvent(event) in self.triggers
        except ValueError:
            return False

    def ordered_triggers(self) -> List[TriggerEvent]:
        return [event for event in TriggerEvent if event in self.triggers]
