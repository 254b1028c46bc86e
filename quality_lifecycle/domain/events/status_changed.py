"""Status changed domain event.

Emitted exactly once per accepted transition, after the compare-and-swap
write has succeeded. Persistence, notification and audit collaborators
consume it through the EventSink port.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any
from uuid import UUID, uuid4

from quality_lifecycle.domain.models.record_kind import RecordKind, Status

# Event emitted when a quality record moves along a transition edge
STATUS_CHANGED_EVENT_TYPE: str = "quality_record.status_changed"

# Schema version for forward/backward compatibility
STATUS_CHANGED_SCHEMA_VERSION: int = 1


@dataclass(frozen=True, eq=True)
class StatusChangedEvent:
    """A quality record changed status.

    Attributes:
        event_id: Unique event identifier.
        record_id: Record that changed.
        kind: Record kind.
        from_status: Status before the transition.
        to_status: Status after the transition.
        actor: Who performed the transition.
        comment: Normalized comment, None when not supplied.
        timestamp: When the transition was applied.
        schema_version: Event schema version.
    """

    event_id: UUID
    record_id: str
    kind: RecordKind
    from_status: Status
    to_status: Status
    actor: str
    timestamp: datetime
    comment: str | None = None
    schema_version: int = field(default=STATUS_CHANGED_SCHEMA_VERSION)

    def __post_init__(self) -> None:
        """Validate event invariants.

        Raises:
            ValueError: If any invariant is violated.
        """
        if not self.record_id:
            raise ValueError("record_id is required")
        if not self.actor or not self.actor.strip():
            raise ValueError("actor is required")
        if self.from_status == self.to_status:
            raise ValueError("a status change must change the status")

    @classmethod
    def create(
        cls,
        record_id: str,
        kind: RecordKind,
        from_status: Status,
        to_status: Status,
        actor: str,
        timestamp: datetime,
        comment: str | None = None,
    ) -> StatusChangedEvent:
        """Create a new event with a generated id."""
        return cls(
            event_id=uuid4(),
            record_id=record_id,
            kind=kind,
            from_status=from_status,
            to_status=to_status,
            actor=actor,
            timestamp=timestamp,
            comment=comment,
        )

    @property
    def event_type(self) -> str:
        """Return the event type constant."""
        return STATUS_CHANGED_EVENT_TYPE

    def to_dict(self) -> dict[str, Any]:
        """Serialize the event payload."""
        return {
            "event_id": str(self.event_id),
            "event_type": STATUS_CHANGED_EVENT_TYPE,
            "record_id": self.record_id,
            "kind": self.kind.value,
            "from_status": self.from_status.value,
            "to_status": self.to_status.value,
            "actor": self.actor,
            "comment": self.comment,
            "timestamp": self.timestamp.isoformat(),
            "schema_version": self.schema_version,
        }
