"""Quality record snapshot ingestion.

Document-store and import payloads use camelCase keys and drift in field
naming between record kinds (SCAR stores ``closeDate`` where the others use
``closedDate``, MRB keeps its decision date under ``disposition.approvalDate``,
...). QualityRecordSnapshot absorbs that drift once and produces the
normalized QualityRecord the engine works with.

Dates are parsed leniently: anything that cannot be read as a timestamp
becomes a missing date instead of a validation error.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Annotated, Any, assert_never

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from quality_lifecycle.domain.models.quality_record import QualityRecord
from quality_lifecycle.domain.models.record_kind import (
    MilestoneDateField,
    RecordKind,
    coerce_status,
)

D = MilestoneDateField

# Statuses written by older clients, mapped onto the current vocabularies
LEGACY_STATUS_ALIASES: Mapping[RecordKind, Mapping[str, str]] = {
    RecordKind.NCR: {},
    RecordKind.CAPA: {
        "pending_review": "open",
        "under_investigation": "in_progress",
        "implementing": "in_progress",
    },
    RecordKind.SCAR: {},
    RecordKind.MRB: {"pending_disposition": "disposition_pending"},
}


def _lenient_datetime(value: Any) -> datetime | None:
    """Parse a loosely typed timestamp; return None when it cannot be read."""
    if value is None or value == "":
        return None
    parsed: datetime | None = None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        try:
            parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError:
            return None
    elif isinstance(value, Mapping):
        # Document-store timestamp objects: {"seconds": ..., "nanoseconds": ...}
        seconds = value.get("seconds", value.get("_seconds"))
        if isinstance(seconds, (int, float)) and not isinstance(seconds, bool):
            try:
                parsed = datetime.fromtimestamp(seconds, tz=timezone.utc)
            except (OverflowError, OSError, ValueError):
                return None
    if parsed is None:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


LenientDatetime = Annotated[datetime | None, BeforeValidator(_lenient_datetime)]


class _SnapshotModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


class SupplierResponseSnapshot(_SnapshotModel):
    """A supplier's response to a SCAR.

    Acceptance is kept for display only; it never drives a status change.
    """

    response_date: LenientDatetime = Field(
        default=None, description="When the supplier responded"
    )
    responded_by: str | None = Field(default=None, description="Responding contact")
    accepted: bool | None = Field(
        default=None, description="Whether the response was accepted on review"
    )
    rejection_reason: str | None = Field(
        default=None, description="Why the response was rejected, if it was"
    )


class DispositionSnapshot(_SnapshotModel):
    """Disposition decision block of an NCR or MRB."""

    decision: str | None = Field(default=None, description="Disposition decision")
    approval_date: LenientDatetime = Field(
        default=None, description="When the disposition was approved"
    )


class QualityRecordSnapshot(_SnapshotModel):
    """Raw quality record payload as stored by the surrounding application."""

    id: str = Field(min_length=1, description="Record identifier")
    kind: RecordKind = Field(description="Record kind (ncr, capa, scar, mrb)")
    status: str = Field(min_length=1, description="Raw status value")
    number: str | None = Field(default=None, description="Tracking number")
    created_at: datetime = Field(description="Creation timestamp")
    updated_at: LenientDatetime = Field(
        default=None, description="Last update timestamp; defaults to created_at"
    )

    opened_date: LenientDatetime = None
    submitted_date: LenientDatetime = None
    review_date: LenientDatetime = None
    review_start_date: LenientDatetime = None
    disposition_date: LenientDatetime = None
    disposition_requested_date: LenientDatetime = None
    decision_date: LenientDatetime = None
    implementation_start_date: LenientDatetime = None
    implementation_end_date: LenientDatetime = None
    verification_date: LenientDatetime = None
    cancelled_date: LenientDatetime = None
    issue_date: LenientDatetime = None
    response_date: LenientDatetime = None
    closed_date: LenientDatetime = None
    close_date: LenientDatetime = None

    supplier_response: SupplierResponseSnapshot | None = None
    disposition: DispositionSnapshot | None = None

    @field_validator("kind", mode="before")
    @classmethod
    def _normalize_kind(cls, value: Any) -> Any:
        return value.strip().lower() if isinstance(value, str) else value

    @field_validator("created_at", mode="before")
    @classmethod
    def _parse_created_at(cls, value: Any) -> Any:
        parsed = _lenient_datetime(value)
        if parsed is None:
            raise ValueError("createdAt must be a readable timestamp")
        return parsed

    @classmethod
    def from_payload(
        cls, payload: Mapping[str, Any], kind: RecordKind | None = None
    ) -> QualityRecordSnapshot:
        """Validate a raw payload, supplying ``kind`` when the payload lacks it.

        Raises:
            pydantic.ValidationError: If required fields are missing or invalid.
        """
        data = dict(payload)
        if kind is not None:
            data["kind"] = kind
        return cls.model_validate(data)

    def milestone_dates(self) -> dict[MilestoneDateField, datetime]:
        """Resolve the kind's milestone dates from whichever field carries them."""
        response = self.supplier_response.response_date if self.supplier_response else None
        approval = self.disposition.approval_date if self.disposition else None
        closed = self.closed_date or self.close_date

        candidates: dict[MilestoneDateField, datetime | None]
        match self.kind:
            case RecordKind.NCR:
                candidates = {
                    D.OPENED_DATE: self.opened_date or self.submitted_date,
                    D.REVIEW_DATE: self.review_date,
                    D.DISPOSITION_DATE: self.disposition_date or approval,
                    D.CLOSED_DATE: closed,
                }
            case RecordKind.CAPA:
                candidates = {
                    D.OPENED_DATE: self.opened_date or self.submitted_date,
                    D.IMPLEMENTATION_START_DATE: self.implementation_start_date,
                    D.IMPLEMENTATION_END_DATE: self.implementation_end_date,
                    D.VERIFICATION_DATE: self.verification_date,
                    D.CANCELLED_DATE: self.cancelled_date,
                    D.CLOSED_DATE: closed,
                }
            case RecordKind.SCAR:
                candidates = {
                    D.ISSUE_DATE: self.issue_date,
                    D.RESPONSE_DATE: response or self.response_date,
                    D.REVIEW_DATE: self.review_date,
                    D.CLOSED_DATE: closed,
                }
            case RecordKind.MRB:
                candidates = {
                    D.REVIEW_START_DATE: self.review_start_date or self.review_date,
                    D.DISPOSITION_REQUESTED_DATE: self.disposition_requested_date,
                    D.DECISION_DATE: self.decision_date or approval,
                    D.CLOSED_DATE: closed,
                }
            case _:
                assert_never(self.kind)
        return {key: value for key, value in candidates.items() if value is not None}

    def normalized_status(self) -> str:
        """Raw status with legacy aliases resolved."""
        raw = self.status.strip().lower()
        return LEGACY_STATUS_ALIASES[self.kind].get(raw, raw)

    def to_record(self) -> QualityRecord:
        """Build the normalized record.

        Raises:
            UnknownStatusError: If the status is not in the kind's vocabulary.
        """
        return QualityRecord(
            id=self.id,
            kind=self.kind,
            status=coerce_status(self.kind, self.normalized_status()),
            created_at=self.created_at,
            updated_at=self.updated_at or self.created_at,
            number=self.number,
            milestone_dates=self.milestone_dates(),
        )
