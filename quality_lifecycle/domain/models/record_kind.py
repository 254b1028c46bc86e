"""Record kinds and their status vocabularies.

Each quality-record kind owns a closed, string-valued status enumeration.
There is no shared status type: an NCR can never hold a SCAR status. Every
kind-specific branch goes through ``match`` with an ``assert_never`` fallback.

Vocabulary order (member declaration order) is significant. It is the
ordinal the rule tables use to tell forward edges from return edges.
"""

from __future__ import annotations

from enum import Enum
from typing import TypeAlias, assert_never

from quality_lifecycle.domain.errors.lifecycle_definition import UnknownStatusError


class RecordKind(str, Enum):
    """Quality-record kind. Fixed at creation, never changes afterwards.

    Values:
        NCR: Non-Conformance Report
        CAPA: Corrective/Preventive Action
        SCAR: Supplier Corrective Action Request
        MRB: Material Review Board disposition
    """

    NCR = "ncr"
    CAPA = "capa"
    SCAR = "scar"
    MRB = "mrb"

    @property
    def display_name(self) -> str:
        """Short upper-case name used in labels and messages."""
        return self.value.upper()


class StatusPhase(str, Enum):
    """Ordering role a status plays in its lifecycle."""

    DRAFT = "draft"
    OPEN = "open"
    INVESTIGATION = "investigation"
    DISPOSITION = "disposition"
    CLOSED = "closed"


class NCRStatus(str, Enum):
    """Non-Conformance Report statuses."""

    DRAFT = "draft"
    OPEN = "open"
    UNDER_REVIEW = "under_review"
    PENDING_DISPOSITION = "pending_disposition"
    CLOSED = "closed"


class CAPAStatus(str, Enum):
    """Corrective/Preventive Action statuses.

    CANCELLED sits after IN_PROGRESS because a CAPA can only be cancelled
    before it is submitted for verification.
    """

    DRAFT = "draft"
    OPEN = "open"
    IN_PROGRESS = "in_progress"
    CANCELLED = "cancelled"
    PENDING_VERIFICATION = "pending_verification"
    VERIFIED = "verified"
    CLOSED = "closed"


class SCARStatus(str, Enum):
    """Supplier Corrective Action Request statuses."""

    DRAFT = "draft"
    ISSUED = "issued"
    SUPPLIER_RESPONSE = "supplier_response"
    REVIEW = "review"
    CLOSED = "closed"


class MRBStatus(str, Enum):
    """Material Review Board disposition statuses.

    REJECTED is declared before APPROVED so that a rejected record shows the
    Approved milestone as bypassed rather than still ahead.
    """

    PENDING_REVIEW = "pending_review"
    IN_REVIEW = "in_review"
    DISPOSITION_PENDING = "disposition_pending"
    REJECTED = "rejected"
    APPROVED = "approved"
    CLOSED = "closed"


Status: TypeAlias = NCRStatus | CAPAStatus | SCARStatus | MRBStatus


class MilestoneDateField(str, Enum):
    """Normalized "when did the record enter state X" fields.

    CREATED_AT is a pseudo field resolved from ``QualityRecord.created_at``;
    every other member lives in ``QualityRecord.milestone_dates``.
    """

    CREATED_AT = "created_at"
    OPENED_DATE = "opened_date"
    REVIEW_DATE = "review_date"
    DISPOSITION_DATE = "disposition_date"
    IMPLEMENTATION_START_DATE = "implementation_start_date"
    IMPLEMENTATION_END_DATE = "implementation_end_date"
    VERIFICATION_DATE = "verification_date"
    CANCELLED_DATE = "cancelled_date"
    ISSUE_DATE = "issue_date"
    RESPONSE_DATE = "response_date"
    REVIEW_START_DATE = "review_start_date"
    DISPOSITION_REQUESTED_DATE = "disposition_requested_date"
    DECISION_DATE = "decision_date"
    CLOSED_DATE = "closed_date"


def status_type_for(kind: RecordKind) -> type[Status]:
    """Return the status enumeration that belongs to a record kind."""
    match kind:
        case RecordKind.NCR:
            return NCRStatus
        case RecordKind.CAPA:
            return CAPAStatus
        case RecordKind.SCAR:
            return SCARStatus
        case RecordKind.MRB:
            return MRBStatus
        case _:
            assert_never(kind)


def coerce_status(kind: RecordKind, value: Status | str) -> Status:
    """Convert a raw value into a member of the kind's vocabulary.

    Args:
        kind: Record kind whose vocabulary applies.
        value: A status enum member or its string value.

    Returns:
        The matching status member.

    Raises:
        UnknownStatusError: If the value is not in the kind's vocabulary,
            including members of another kind's enumeration.
    """
    status_type = status_type_for(kind)
    if isinstance(value, Enum):
        if isinstance(value, status_type):
            return value
        raise UnknownStatusError(kind.value, value.value)
    try:
        return status_type(value)
    except ValueError:
        raise UnknownStatusError(kind.value, value) from None


def display_status(status: Status | str) -> str:
    """Render a status for humans: ``under_review`` -> ``Under Review``."""
    raw = status.value if isinstance(status, Enum) else str(status)
    return " ".join(part.capitalize() for part in raw.split("_") if part)
