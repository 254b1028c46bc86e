"""Time authority port - the single source of timestamps.

Status mutations, milestone dates and StatusChangedEvent timestamps are all
taken from one ``now()`` call per transition, so the stamped date, the
record's ``updated_at`` and the event always agree. Services never call
``datetime.now()`` directly.
"""

from abc import ABC, abstractmethod
from datetime import datetime


class TimeAuthorityProtocol(ABC):
    """Clock used by the lifecycle services.

    Implementations:
        SystemTimeAuthority (quality_lifecycle.application.services) for
        production, FakeTimeAuthority (tests/helpers) for tests.
    """

    @abstractmethod
    def now(self) -> datetime:
        """Return the transition timestamp; must be timezone-aware."""
        ...
