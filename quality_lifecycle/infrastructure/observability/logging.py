"""Structured logging configuration with structlog.

Production renders one JSON object per line for log aggregation;
development renders colored console output.

Log Entry Format (production):
    {
        "timestamp": "2026-01-01T00:00:00.000000Z",
        "level": "info",
        "event": "status_update_completed",
        "correlation_id": "uuid",
        "service": "StatusUpdateOrchestrator",
        "record_id": "NCR-1",
        ...
    }

Usage:
    from quality_lifecycle.infrastructure.observability import configure_structlog

    configure_structlog(environment="development")
"""

import logging
import os
from typing import cast

import structlog
from structlog.typing import Processor

from quality_lifecycle.infrastructure.observability.correlation import (
    correlation_id_processor,
)

LOG_LEVEL_ENV = "LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"

PRODUCTION = "production"
DEVELOPMENT = "development"


def _resolve_log_level(level: str | None = None) -> int:
    """Map a level name (argument or LOG_LEVEL env var) to a logging level."""
    level_name = (level or os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)).upper()
    resolved = logging.getLevelName(level_name)
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_structlog(
    environment: str = PRODUCTION, level: str | None = None
) -> None:
    """Configure structlog for the process.

    Should be called once at startup.

    Args:
        environment: 'production' for JSON output, anything else for console.
        level: Log level name; defaults to the LOG_LEVEL env var, then INFO.
    """
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        cast(Processor, correlation_id_processor),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if environment == PRODUCTION:
        renderer: Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=True)

    structlog.configure(
        processors=[*shared_processors, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(_resolve_log_level(level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger_for_service(
    service_name: str, component: str = "lifecycle"
) -> structlog.BoundLogger:
    """Return a logger with service and component already bound."""
    return structlog.get_logger().bind(service=service_name, component=component)
