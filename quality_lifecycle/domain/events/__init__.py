"""Domain events emitted by the lifecycle engine."""

from quality_lifecycle.domain.events.status_changed import (
    STATUS_CHANGED_EVENT_TYPE,
    STATUS_CHANGED_SCHEMA_VERSION,
    StatusChangedEvent,
)

__all__: list[str] = [
    "STATUS_CHANGED_EVENT_TYPE",
    "STATUS_CHANGED_SCHEMA_VERSION",
    "StatusChangedEvent",
]
