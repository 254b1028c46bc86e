"""Milestone projection domain service.

Projects a status onto its kind's canonical stage list. All completion and
reachability knowledge comes from the LifecycleDefinition; this module keeps
no status sets of its own.

Per stage S, in canonical order:
    current    - the status is a member of S
    completed  - the status is in S's reached-or-passed set
    pending    - some member of S is still reachable along forward edges
    skipped    - the path actually taken bypassed S

Note: This is pure domain logic with no infrastructure dependencies.
"""

from __future__ import annotations

from quality_lifecycle.domain.models.lifecycle import (
    CanonicalStage,
    LifecycleDefinition,
)
from quality_lifecycle.domain.models.lifecycles import get_lifecycle
from quality_lifecycle.domain.models.milestone import MilestoneStage, StageState
from quality_lifecycle.domain.models.record_kind import RecordKind, Status


def stage_state(
    lifecycle: LifecycleDefinition, stage: CanonicalStage, status: Status
) -> StageState:
    """Derive the state of one stage for a status already in the vocabulary."""
    if status in stage.statuses:
        return StageState.CURRENT
    if status in lifecycle.passed_set(stage):
        return StageState.COMPLETED
    if stage.statuses & lifecycle.reachable_from(status):
        return StageState.PENDING
    return StageState.SKIPPED


def project(kind: RecordKind, status: Status | str) -> list[MilestoneStage]:
    """Project a status onto the kind's ordered milestone stages.

    Args:
        kind: Record kind.
        status: Current status (enum member or its string value).

    Returns:
        One MilestoneStage per canonical stage, in canonical order.

    Raises:
        UnknownStatusError: If status is not in the kind's vocabulary.
    """
    lifecycle = get_lifecycle(kind)
    current = lifecycle.coerce(status)
    return [
        MilestoneStage(
            id=stage.id,
            label=stage.label,
            state=stage_state(lifecycle, stage, current),
        )
        for stage in lifecycle.stages
    ]


def current_stage(kind: RecordKind, status: Status | str) -> CanonicalStage | None:
    """Return the stage the status belongs to.

    Returns None for off-path statuses such as a cancelled CAPA or a
    rejected MRB.
    """
    lifecycle = get_lifecycle(kind)
    return lifecycle.stage_for(lifecycle.coerce(status))
