"""In-memory audit trail.

An EventSink that turns every StatusChangedEvent into an append-only
TransitionRecord.
"""

from __future__ import annotations

from quality_lifecycle.application.ports.event_sink import EventSinkProtocol
from quality_lifecycle.domain.events.status_changed import StatusChangedEvent
from quality_lifecycle.domain.models.transition_record import TransitionRecord


class InMemoryAuditTrail(EventSinkProtocol):
    """Append-only audit trail held in memory.

    Entries are never updated or removed except by ``clear()``.
    """

    def __init__(self) -> None:
        """Initialize with an empty trail."""
        self._entries: list[TransitionRecord] = []

    async def publish(self, event: StatusChangedEvent) -> None:
        """Append the audit entry for ``event``."""
        self._entries.append(TransitionRecord.from_event(event))

    def history(self, record_id: str) -> list[TransitionRecord]:
        """Return a record's entries in insertion order."""
        return [entry for entry in self._entries if entry.record_id == record_id]

    def __len__(self) -> int:
        return len(self._entries)

    def clear(self) -> None:
        """Clear all entries."""
        self._entries.clear()
