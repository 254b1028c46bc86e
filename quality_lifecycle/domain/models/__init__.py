"""Domain models for the quality lifecycle engine."""

from quality_lifecycle.domain.models.lifecycle import (
    CanonicalStage,
    LifecycleDefinition,
    StatusDeclaration,
    TransitionEdge,
)
from quality_lifecycle.domain.models.lifecycles import (
    ALL_LIFECYCLES,
    CAPA_LIFECYCLE,
    MRB_LIFECYCLE,
    NCR_LIFECYCLE,
    SCAR_LIFECYCLE,
    get_lifecycle,
)
from quality_lifecycle.domain.models.milestone import (
    MilestoneStage,
    StageState,
    TimelineItem,
)
from quality_lifecycle.domain.models.quality_record import QualityRecord
from quality_lifecycle.domain.models.record_kind import (
    CAPAStatus,
    MilestoneDateField,
    MRBStatus,
    NCRStatus,
    RecordKind,
    SCARStatus,
    Status,
    StatusPhase,
    coerce_status,
    display_status,
    status_type_for,
)
from quality_lifecycle.domain.models.transition_record import TransitionRecord

__all__: list[str] = [
    "ALL_LIFECYCLES",
    "CAPAStatus",
    "CAPA_LIFECYCLE",
    "CanonicalStage",
    "LifecycleDefinition",
    "MRBStatus",
    "MRB_LIFECYCLE",
    "MilestoneDateField",
    "MilestoneStage",
    "NCRStatus",
    "NCR_LIFECYCLE",
    "QualityRecord",
    "RecordKind",
    "SCARStatus",
    "SCAR_LIFECYCLE",
    "StageState",
    "Status",
    "StatusDeclaration",
    "StatusPhase",
    "TimelineItem",
    "TransitionEdge",
    "TransitionRecord",
    "coerce_status",
    "display_status",
    "get_lifecycle",
    "status_type_for",
]
