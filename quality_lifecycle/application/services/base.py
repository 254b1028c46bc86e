"""Structured logging mixin shared by the lifecycle services.

Usage:
    class LifecycleQueryService(LoggingMixin):
        def __init__(self, store: RecordStoreProtocol) -> None:
            self._store = store
            self._init_logger()

        async def get_lifecycle_view(self, record_id: str) -> RecordLifecycleView:
            log = self._log_operation("get_lifecycle_view", record_id=record_id)
            log.info("record_not_found")
"""

import structlog

from quality_lifecycle.infrastructure.observability.correlation import (
    get_correlation_id,
)


class LoggingMixin:
    """Gives a service a ``_log`` bound to its class name and component.

    Operation loggers add the operation name, the current correlation id and
    any per-call context such as ``record_id`` or ``kind``.
    """

    _log: structlog.BoundLogger

    def _init_logger(self, component: str = "lifecycle") -> None:
        """Bind the service logger; call at the end of ``__init__``."""
        self._log = structlog.get_logger().bind(
            service=type(self).__name__,
            component=component,
        )

    def _log_operation(self, operation: str, **context: object) -> structlog.BoundLogger:
        """Return a logger scoped to one operation call."""
        return self._log.bind(
            operation=operation,
            correlation_id=get_correlation_id(),
            **context,
        )
