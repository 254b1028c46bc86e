"""Event sink stubs."""

from __future__ import annotations

from quality_lifecycle.application.ports.event_sink import EventSinkProtocol
from quality_lifecycle.domain.events.status_changed import StatusChangedEvent


class InMemoryEventSink(EventSinkProtocol):
    """Collects published events in memory.

    Attributes:
        events: Published events in publication order.
    """

    def __init__(self) -> None:
        """Initialize with no events."""
        self.events: list[StatusChangedEvent] = []
        self._should_fail = False
        self._failure_message = "Simulated publish failure"

    async def publish(self, event: StatusChangedEvent) -> None:
        """Record the event.

        Raises:
            RuntimeError: If configured to fail.
        """
        if self._should_fail:
            raise RuntimeError(self._failure_message)
        self.events.append(event)

    def configure_failure(
        self,
        should_fail: bool,
        message: str = "Simulated publish failure",
    ) -> None:
        """Configure whether publishing should fail.

        Args:
            should_fail: Whether to raise on publish.
            message: Error message to use.
        """
        self._should_fail = should_fail
        self._failure_message = message

    def events_for(self, record_id: str) -> list[StatusChangedEvent]:
        """Return the events published for one record."""
        return [e for e in self.events if e.record_id == record_id]

    def clear(self) -> None:
        """Clear events and failure configuration."""
        self.events.clear()
        self._should_fail = False
