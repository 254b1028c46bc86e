"""Lifecycle query service.

Read side of the engine: loads a record and returns its milestone stages,
timeline and available transitions as one view. Never mutates anything.
"""

from __future__ import annotations

from quality_lifecycle.application.dtos.lifecycle_views import RecordLifecycleView
from quality_lifecycle.application.ports.record_store import RecordStoreProtocol
from quality_lifecycle.application.services.base import LoggingMixin
from quality_lifecycle.config.lifecycle_config import (
    DEFAULT_LIFECYCLE_CONFIG,
    LifecycleConfig,
)
from quality_lifecycle.domain.errors import RecordNotFoundError
from quality_lifecycle.domain.models.quality_record import QualityRecord
from quality_lifecycle.domain.services.milestone_projector import (
    current_stage,
    project,
)
from quality_lifecycle.domain.services.timeline_builder import build
from quality_lifecycle.domain.services.transition_validator import (
    available_transitions,
)


class LifecycleQueryService(LoggingMixin):
    """Builds lifecycle views for presentation collaborators."""

    def __init__(
        self,
        store: RecordStoreProtocol,
        config: LifecycleConfig | None = None,
    ) -> None:
        """Initialize the query service.

        Args:
            store: Record store to load records from.
            config: Engine configuration (defaults to DEFAULT_LIFECYCLE_CONFIG).
        """
        self._store = store
        self._config = config or DEFAULT_LIFECYCLE_CONFIG
        self._init_logger()

    async def get_lifecycle_view(self, record_id: str) -> RecordLifecycleView:
        """Load a record and build its lifecycle view.

        Raises:
            RecordNotFoundError: If the record does not exist.
        """
        log = self._log_operation("get_lifecycle_view", record_id=record_id)
        record = await self._store.load(record_id)
        if record is None:
            log.info("record_not_found")
            raise RecordNotFoundError(record_id)
        view = self.view_for(record)
        log.debug(
            "lifecycle_view_built",
            status=view.status,
            current_stage_id=view.current_stage_id,
        )
        return view

    def view_for(self, record: QualityRecord) -> RecordLifecycleView:
        """Build the lifecycle view of an already loaded record."""
        stage = current_stage(record.kind, record.status)
        return RecordLifecycleView.build(
            record=record,
            stages=project(record.kind, record.status),
            timeline=build(
                record.kind,
                record,
                date_format=self._config.tooltip_date_format,
            ),
            transitions=available_transitions(record.kind, record.status),
            current_stage_id=stage.id if stage else None,
        )
