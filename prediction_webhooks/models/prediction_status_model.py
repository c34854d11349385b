from enum import Enum

from .webhook_config_model import TriggerEvent


class PredictionStatus(str, Enum):
    STARTING = "starting"
    PROCESSING = "processing"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    CANCELED = "canceled"

    def __str__(self) -> str:
        return self.value

    @property
    def terminated(self) -> bool:
        """Whether no further transition can happen from this status."""
        return self in _TERMINAL_STATUSES

    @property
    def trigger_event(self) -> TriggerEvent | None:
        """The webhook event a transition into this status fires, if any."""
        if self is PredictionStatus.STARTING:
            return TriggerEvent.START
        if self.terminated:
            return TriggerEvent.COMPLETED
        return None


_TERMINAL_STATUSES = frozenset({
    PredictionStatus.SUCCEEDED,
    PredictionStatus.FAILED,
    PredictionStatus.CANCELED,
})
