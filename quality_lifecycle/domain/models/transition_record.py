"""Audit trail entry for an accepted status transition."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Any

from quality_lifecycle.domain.models.record_kind import (
    RecordKind,
    Status,
    display_status,
)

if TYPE_CHECKING:
    from quality_lifecycle.domain.events.status_changed import StatusChangedEvent


@dataclass(frozen=True, eq=True)
class TransitionRecord:
    """One append-only audit entry.

    Attributes:
        record_id: Record that changed.
        kind: Record kind.
        from_status: Status before the transition.
        to_status: Status after the transition.
        actor: Who performed the transition.
        timestamp: When the transition was applied.
        comment: Comment supplied with the transition, if any.
    """

    record_id: str
    kind: RecordKind
    from_status: Status
    to_status: Status
    actor: str
    timestamp: datetime
    comment: str | None = None

    @classmethod
    def from_event(cls, event: StatusChangedEvent) -> TransitionRecord:
        """Build the audit entry for a status changed event."""
        return cls(
            record_id=event.record_id,
            kind=event.kind,
            from_status=event.from_status,
            to_status=event.to_status,
            actor=event.actor,
            timestamp=event.timestamp,
            comment=event.comment,
        )

    def describe(self) -> str:
        """Render the entry as a sentence for history views."""
        return (
            f'{self.actor} changed status from "{display_status(self.from_status)}" '
            f'to "{display_status(self.to_status)}"'
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "record_id": self.record_id,
            "kind": self.kind.value,
            "from_status": self.from_status.value,
            "to_status": self.to_status.value,
            "actor": self.actor,
            "comment": self.comment,
            "timestamp": self.timestamp.isoformat(),
        }
