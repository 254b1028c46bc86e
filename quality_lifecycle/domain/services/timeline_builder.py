"""Timeline domain service.

Composes the milestone projection with the record's own milestone dates.
Order is always the canonical stage order; dates never reorder items, and a
missing or malformed date only produces an item without a date.
"""

from __future__ import annotations

from datetime import datetime
from typing import assert_never

from quality_lifecycle.domain.models.lifecycle import CanonicalStage
from quality_lifecycle.domain.models.lifecycles import get_lifecycle
from quality_lifecycle.domain.models.milestone import StageState, TimelineItem
from quality_lifecycle.domain.models.quality_record import QualityRecord
from quality_lifecycle.domain.models.record_kind import RecordKind
from quality_lifecycle.domain.services.milestone_projector import stage_state

DEFAULT_DATE_FORMAT: str = "%b %d, %Y"

# Only these states carry a date, even if a stale one is stored
_DATED_STATES: frozenset[StageState] = frozenset(
    {StageState.COMPLETED, StageState.CURRENT}
)


def build(
    kind: RecordKind,
    record: QualityRecord,
    *,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> list[TimelineItem]:
    """Build the display timeline for a record.

    Args:
        kind: Record kind; must match the record's kind.
        record: Record snapshot to read status and dates from.
        date_format: strftime format used in tooltips.

    Returns:
        One TimelineItem per canonical stage, in canonical order.

    Raises:
        ValueError: If ``kind`` does not match ``record.kind``.
    """
    if record.kind is not kind:
        raise ValueError(
            f"Cannot build a {kind.display_name} timeline for "
            f"{record.kind.display_name} record {record.id}"
        )
    lifecycle = get_lifecycle(kind)
    items: list[TimelineItem] = []
    for stage in lifecycle.stages:
        state = stage_state(lifecycle, stage, record.status)
        date = _stage_date(stage, record) if state in _DATED_STATES else None
        items.append(
            TimelineItem(
                id=stage.id,
                label=stage.label,
                state=state,
                tooltip=tooltip_for(stage.label, state, date, date_format),
                date=date,
            )
        )
    return items


def tooltip_for(
    label: str,
    state: StageState,
    date: datetime | None = None,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> str:
    """Render the annotation for a stage in a given state."""
    match state:
        case StageState.CURRENT:
            return f"{label} in progress"
        case StageState.COMPLETED:
            if date is not None:
                return f"{label} completed on {date.strftime(date_format)}"
            return f"{label} completed"
        case StageState.PENDING:
            return f"Awaiting {label}"
        case StageState.SKIPPED:
            return f"{label} bypassed"
        case _:
            assert_never(state)


def _stage_date(stage: CanonicalStage, record: QualityRecord) -> datetime | None:
    if stage.date_field is None:
        return None
    value = record.date_of(stage.date_field)
    # Snapshots from loose sources may carry strings or numbers; drop them
    return value if isinstance(value, datetime) else None
