"""System clock implementation of the time authority port."""

from datetime import datetime, timezone

from quality_lifecycle.application.ports.time_authority import TimeAuthorityProtocol


class SystemTimeAuthority(TimeAuthorityProtocol):
    """Production time authority backed by the system clock.

    All returned datetimes are timezone-aware UTC.
    """

    def now(self) -> datetime:
        """Return the current UTC time."""
        return datetime.now(timezone.utc)
