"""Event sink port.

Persistence, notification and audit collaborators receive StatusChangedEvent
through this interface. The orchestrator publishes exactly one event per
accepted transition.
"""

from __future__ import annotations

from typing import Protocol

from quality_lifecycle.domain.events.status_changed import StatusChangedEvent


class EventSinkProtocol(Protocol):
    """Protocol for publishing status changed events."""

    async def publish(self, event: StatusChangedEvent) -> None:
        """Publish an event.

        Args:
            event: The event to publish.

        Raises:
            Exception: Any delivery failure; the orchestrator compensates.
        """
        ...
