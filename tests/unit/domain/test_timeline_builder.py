"""Unit tests for the timeline builder."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from quality_lifecycle.domain.models import (
    CAPAStatus,
    MilestoneDateField,
    NCRStatus,
    RecordKind,
    SCARStatus,
    StageState,
)
from quality_lifecycle.domain.services import build, tooltip_for
from tests.helpers import CREATED_AT, make_record

ISSUED = datetime(2026, 2, 3, 10, 0, tzinfo=timezone.utc)
RESPONDED = datetime(2026, 2, 20, 16, 45, tzinfo=timezone.utc)


class TestBuild:
    """Timeline composition."""

    def test_scar_awaiting_review(self) -> None:
        """Completed and current items carry dates and dated tooltips."""
        record = make_record(
            RecordKind.SCAR,
            SCARStatus.SUPPLIER_RESPONSE,
            issue_date=ISSUED,
            response_date=RESPONDED,
        )

        items = build(RecordKind.SCAR, record)

        assert [i.label for i in items] == ["Draft", "Issued", "Response", "Review", "Closed"]
        assert [i.tooltip for i in items] == [
            "Draft completed on Jan 05, 2026",
            "Issued completed on Feb 03, 2026",
            "Response in progress",
            "Awaiting Review",
            "Awaiting Closed",
        ]
        assert items[0].date == CREATED_AT
        assert items[1].date == ISSUED
        assert items[2].date == RESPONDED
        assert items[3].date is None

    def test_completed_without_date(self) -> None:
        """A completed stage with no recorded date says so without a date."""
        record = make_record(RecordKind.NCR, NCRStatus.UNDER_REVIEW)

        items = build(RecordKind.NCR, record)

        assert items[1].state is StageState.COMPLETED
        assert items[1].date is None
        assert items[1].tooltip == "Open completed"

    def test_stale_future_dates_are_dropped(self) -> None:
        """Pending stages never show a date even if one is stored."""
        record = make_record(
            RecordKind.NCR,
            NCRStatus.OPEN,
            opened_date=ISSUED,
            closed_date=RESPONDED,
        )

        items = build(RecordKind.NCR, record)

        closed = items[-1]
        assert closed.state is StageState.PENDING
        assert closed.date is None
        assert closed.tooltip == "Awaiting Closed"

    def test_skipped_stage_tooltip(self) -> None:
        """A cancelled CAPA shows Verification as bypassed."""
        record = make_record(
            RecordKind.CAPA,
            CAPAStatus.CANCELLED,
            cancelled_date=ISSUED,
        )

        items = build(RecordKind.CAPA, record)

        verification = next(i for i in items if i.id == "verification")
        assert verification.state is StageState.SKIPPED
        assert verification.tooltip == "Verification bypassed"
        assert verification.date is None

    def test_capa_verification_dated_from_submission(self) -> None:
        """Verification shows when the CAPA was submitted for verification."""
        submitted = datetime(2026, 3, 9, 14, 0, tzinfo=timezone.utc)
        for status in (CAPAStatus.PENDING_VERIFICATION, CAPAStatus.CLOSED):
            record = make_record(
                RecordKind.CAPA,
                status,
                implementation_end_date=submitted,
                closed_date=submitted,
            )

            items = build(RecordKind.CAPA, record)

            verification = next(i for i in items if i.id == "verification")
            assert verification.date == submitted, status
            assert verification.state in (StageState.CURRENT, StageState.COMPLETED)

    def test_order_is_canonical_not_chronological(self) -> None:
        """Out-of-order dates do not reorder items."""
        record = make_record(
            RecordKind.NCR,
            NCRStatus.CLOSED,
            opened_date=RESPONDED,
            review_date=ISSUED,
            closed_date=ISSUED,
        )

        items = build(RecordKind.NCR, record)

        assert [i.id for i in items] == [
            "draft",
            "open",
            "under_review",
            "pending_disposition",
            "closed",
        ]

    def test_custom_date_format(self) -> None:
        """Tooltip dates follow the given strftime format."""
        record = make_record(RecordKind.SCAR, SCARStatus.ISSUED, issue_date=ISSUED)

        items = build(RecordKind.SCAR, record, date_format="%Y-%m-%d")

        assert items[0].tooltip == "Draft completed on 2026-01-05"

    def test_kind_mismatch_rejected(self) -> None:
        """The kind argument must match the record."""
        record = make_record(RecordKind.NCR, NCRStatus.OPEN)

        with pytest.raises(ValueError, match="SCAR timeline"):
            build(RecordKind.SCAR, record)

    def test_items_serialize(self) -> None:
        """to_dict renders state and ISO date."""
        record = make_record(RecordKind.SCAR, SCARStatus.ISSUED, issue_date=ISSUED)

        data = build(RecordKind.SCAR, record)[1].to_dict()

        assert data == {
            "id": "issued",
            "label": "Issued",
            "state": "current",
            "tooltip": "Issued in progress",
            "date": ISSUED.isoformat(),
        }


class TestTooltipFor:
    """Tooltip wording per state."""

    @pytest.mark.parametrize(
        ("state", "expected"),
        [
            (StageState.CURRENT, "Review in progress"),
            (StageState.COMPLETED, "Review completed"),
            (StageState.PENDING, "Awaiting Review"),
            (StageState.SKIPPED, "Review bypassed"),
        ],
    )
    def test_wording(self, state: StageState, expected: str) -> None:
        """Each state has its own phrasing."""
        assert tooltip_for("Review", state) == expected

    def test_completed_with_date(self) -> None:
        """A completed date is rendered with the default format."""
        assert (
            tooltip_for("Review", StageState.COMPLETED, RESPONDED)
            == "Review completed on Feb 20, 2026"
        )

    def test_date_field_for_created_stage(self) -> None:
        """The first stage reads the record's creation time."""
        record = make_record(RecordKind.NCR, NCRStatus.DRAFT)
        assert record.date_of(MilestoneDateField.CREATED_AT) == CREATED_AT
