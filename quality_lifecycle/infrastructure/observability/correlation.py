"""Correlation ID propagation for lifecycle operations.

A correlation id ties together every log line emitted while one status
update (or one lifecycle view) is being served. It lives in a contextvar so
it survives ``await`` boundaries and concurrent tasks do not see each
other's ids.

Usage:
    # At the request boundary
    set_correlation_id(incoming_id or generate_correlation_id())

    # Anywhere below it
    log = structlog.get_logger().bind(correlation_id=get_correlation_id())
"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any
from uuid import uuid4

# Empty string means "not set"
_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def generate_correlation_id() -> str:
    """Return a fresh UUID4 correlation id."""
    return str(uuid4())


def get_correlation_id() -> str:
    """Return the correlation id of the current context, or "" if unset."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str) -> None:
    """Set the correlation id for the current context."""
    _correlation_id.set(correlation_id)


@contextmanager
def correlation_scope(correlation_id: str | None = None) -> Iterator[str]:
    """Bind a correlation id for the duration of a block.

    Args:
        correlation_id: Id to bind; a new one is generated when omitted.

    Yields:
        The bound correlation id.
    """
    token = _correlation_id.set(correlation_id or generate_correlation_id())
    try:
        yield _correlation_id.get()
    finally:
        _correlation_id.reset(token)


def correlation_id_processor(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Structlog processor adding the context's correlation id.

    An id already bound on the logger wins over the context value.
    """
    correlation_id = get_correlation_id()
    if correlation_id and "correlation_id" not in event_dict:
        event_dict["correlation_id"] = correlation_id
    return event_dict
