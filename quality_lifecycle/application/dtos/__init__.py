"""Application DTOs: raw snapshot ingestion and presentation views."""

from quality_lifecycle.application.dtos.lifecycle_views import (
    MilestoneStageView,
    RecordLifecycleView,
    TimelineItemView,
    TransitionEdgeView,
)
from quality_lifecycle.application.dtos.snapshot import (
    LEGACY_STATUS_ALIASES,
    DispositionSnapshot,
    QualityRecordSnapshot,
    SupplierResponseSnapshot,
)

__all__: list[str] = [
    "DispositionSnapshot",
    "LEGACY_STATUS_ALIASES",
    "MilestoneStageView",
    "QualityRecordSnapshot",
    "RecordLifecycleView",
    "SupplierResponseSnapshot",
    "TimelineItemView",
    "TransitionEdgeView",
]
