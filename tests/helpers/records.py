"""Record builders shared by lifecycle tests."""

from __future__ import annotations

from datetime import datetime, timezone

from quality_lifecycle.domain.models.quality_record import QualityRecord
from quality_lifecycle.domain.models.record_kind import (
    MilestoneDateField,
    RecordKind,
    Status,
)

CREATED_AT = datetime(2026, 1, 5, 8, 30, tzinfo=timezone.utc)


def make_record(
    kind: RecordKind,
    status: Status | str,
    record_id: str | None = None,
    created_at: datetime = CREATED_AT,
    **dates: datetime,
) -> QualityRecord:
    """Build a record in ``status`` with milestone dates given by field value.

    Example:
        make_record(RecordKind.SCAR, "supplier_response", issue_date=...)
    """
    return QualityRecord(
        id=record_id or f"{kind.value}-1",
        kind=kind,
        status=status,
        created_at=created_at,
        updated_at=created_at,
        number=f"{kind.display_name}-2026-0001",
        milestone_dates={MilestoneDateField(k): v for k, v in dates.items()},
    )
