"""Presentation views of lifecycle projections.

Pydantic models consumed by list and detail views. Serialized with camelCase
keys (``model_dump(by_alias=True)``) to match the console's JSON conventions.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from quality_lifecycle.domain.models.lifecycle import TransitionEdge
from quality_lifecycle.domain.models.milestone import (
    MilestoneStage,
    StageState,
    TimelineItem,
)
from quality_lifecycle.domain.models.quality_record import QualityRecord
from quality_lifecycle.domain.models.record_kind import RecordKind, display_status


class _ViewModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class MilestoneStageView(_ViewModel):
    """One projected milestone stage."""

    id: str = Field(description="Stage identifier")
    label: str = Field(description="Stage label")
    state: StageState = Field(description="pending, current, completed or skipped")
    timestamp: datetime | None = Field(default=None, description="Stage timestamp")

    @classmethod
    def from_domain(cls, stage: MilestoneStage) -> MilestoneStageView:
        return cls(
            id=stage.id, label=stage.label, state=stage.state, timestamp=stage.timestamp
        )


class TimelineItemView(_ViewModel):
    """One timeline item with its tooltip."""

    id: str = Field(description="Stage identifier")
    label: str = Field(description="Stage label")
    state: StageState = Field(description="pending, current, completed or skipped")
    tooltip: str = Field(description="Annotation for the item's state")
    date: datetime | None = Field(
        default=None, description="When the record entered the stage"
    )

    @classmethod
    def from_domain(cls, item: TimelineItem) -> TimelineItemView:
        return cls(
            id=item.id,
            label=item.label,
            state=item.state,
            tooltip=item.tooltip,
            date=item.date,
        )


class TransitionEdgeView(_ViewModel):
    """A legal next action offered to the user."""

    from_status: str = Field(description="Current status value")
    to_status: str = Field(description="Target status value")
    to_status_label: str = Field(description="Target status for display")
    label: str = Field(description="Action label")
    requires_comment: bool = Field(description="Whether a comment is mandatory")
    requires_approval: bool = Field(description="Whether approval is required")
    reasons: list[str] = Field(
        default_factory=list, description="Suggested reasons for the action"
    )

    @classmethod
    def from_domain(cls, edge: TransitionEdge) -> TransitionEdgeView:
        return cls(
            from_status=edge.from_status.value,
            to_status=edge.to_status.value,
            to_status_label=display_status(edge.to_status),
            label=edge.label,
            requires_comment=edge.requires_comment,
            requires_approval=edge.requires_approval,
            reasons=list(edge.reasons),
        )


class RecordLifecycleView(_ViewModel):
    """Everything a detail view needs to render a record's lifecycle."""

    record_id: str = Field(description="Record identifier")
    number: str | None = Field(default=None, description="Tracking number")
    kind: RecordKind = Field(description="Record kind")
    status: str = Field(description="Current status value")
    status_label: str = Field(description="Current status for display")
    current_stage_id: str | None = Field(
        default=None, description="Stage holding the status, None when off-path"
    )
    is_terminal: bool = Field(description="Whether no further transition exists")
    stages: list[MilestoneStageView] = Field(default_factory=list)
    timeline: list[TimelineItemView] = Field(default_factory=list)
    available_transitions: list[TransitionEdgeView] = Field(default_factory=list)

    @classmethod
    def build(
        cls,
        record: QualityRecord,
        stages: list[MilestoneStage],
        timeline: list[TimelineItem],
        transitions: tuple[TransitionEdge, ...],
        current_stage_id: str | None,
    ) -> RecordLifecycleView:
        """Assemble the view from already computed projections."""
        return cls(
            record_id=record.id,
            number=record.number,
            kind=record.kind,
            status=record.status.value,
            status_label=display_status(record.status),
            current_stage_id=current_stage_id,
            is_terminal=not transitions,
            stages=[MilestoneStageView.from_domain(s) for s in stages],
            timeline=[TimelineItemView.from_domain(i) for i in timeline],
            available_transitions=[TransitionEdgeView.from_domain(e) for e in transitions],
        )
