"""Bootstrap wiring for logging configuration."""

from __future__ import annotations

from quality_lifecycle.bootstrap.lifecycle import get_lifecycle_config
from quality_lifecycle.infrastructure.observability import (
    configure_structlog as _configure_structlog,
)


def configure_structlog(environment: str | None = None) -> None:
    """Configure structlog, defaulting to the configured log environment."""
    _configure_structlog(
        environment=environment or get_lifecycle_config().log_environment
    )


__all__ = ["configure_structlog"]
