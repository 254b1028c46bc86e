"""The four fixed quality-record lifecycles.

Flows (forward edges):
    NCR:  draft -> open -> under_review -> pending_disposition -> closed
    CAPA: draft -> open -> in_progress -> pending_verification -> verified -> closed
          (draft | open | in_progress) -> cancelled -> closed
          pending_verification -> closed
    SCAR: draft -> issued -> supplier_response -> review -> closed
    MRB:  pending_review -> in_review -> disposition_pending -> (approved | rejected) -> closed

Each table is built once at import time; construction runs the static
well-formedness checks in LifecycleDefinition.
"""

from __future__ import annotations

from typing import assert_never

from quality_lifecycle.domain.models.lifecycle import (
    CanonicalStage,
    LifecycleDefinition,
    StatusDeclaration,
    TransitionEdge,
)
from quality_lifecycle.domain.models.record_kind import (
    CAPAStatus,
    MilestoneDateField,
    MRBStatus,
    NCRStatus,
    RecordKind,
    SCARStatus,
    StatusPhase,
)

D = MilestoneDateField

NCR_LIFECYCLE = LifecycleDefinition(
    kind=RecordKind.NCR,
    vocabulary=(
        StatusDeclaration(NCRStatus.DRAFT, StatusPhase.DRAFT),
        StatusDeclaration(NCRStatus.OPEN, StatusPhase.OPEN),
        StatusDeclaration(NCRStatus.UNDER_REVIEW, StatusPhase.INVESTIGATION),
        StatusDeclaration(NCRStatus.PENDING_DISPOSITION, StatusPhase.DISPOSITION),
        StatusDeclaration(NCRStatus.CLOSED, StatusPhase.CLOSED),
    ),
    initial_status=NCRStatus.DRAFT,
    stages=(
        CanonicalStage("draft", "Draft", frozenset({NCRStatus.DRAFT}), D.CREATED_AT),
        CanonicalStage("open", "Open", frozenset({NCRStatus.OPEN}), D.OPENED_DATE),
        CanonicalStage(
            "under_review",
            "Under Review",
            frozenset({NCRStatus.UNDER_REVIEW}),
            D.REVIEW_DATE,
        ),
        CanonicalStage(
            "pending_disposition",
            "Pending Disposition",
            frozenset({NCRStatus.PENDING_DISPOSITION}),
            D.DISPOSITION_DATE,
        ),
        CanonicalStage("closed", "Closed", frozenset({NCRStatus.CLOSED}), D.CLOSED_DATE),
    ),
    edges=(
        TransitionEdge(
            RecordKind.NCR,
            NCRStatus.DRAFT,
            NCRStatus.OPEN,
            "Open NCR",
            sets_date_field=D.OPENED_DATE,
        ),
        TransitionEdge(
            RecordKind.NCR,
            NCRStatus.OPEN,
            NCRStatus.UNDER_REVIEW,
            "Start Review",
            sets_date_field=D.REVIEW_DATE,
        ),
        TransitionEdge(
            RecordKind.NCR,
            NCRStatus.UNDER_REVIEW,
            NCRStatus.PENDING_DISPOSITION,
            "Request Disposition",
            sets_date_field=D.DISPOSITION_DATE,
        ),
        TransitionEdge(
            RecordKind.NCR,
            NCRStatus.PENDING_DISPOSITION,
            NCRStatus.CLOSED,
            "Close NCR",
            requires_comment=True,
            sets_date_field=D.CLOSED_DATE,
        ),
        TransitionEdge(
            RecordKind.NCR,
            NCRStatus.UNDER_REVIEW,
            NCRStatus.OPEN,
            "Return to Open",
            requires_comment=True,
            reasons=(
                "Incomplete information",
                "Incorrect classification",
                "Additional investigation needed",
            ),
        ),
        TransitionEdge(
            RecordKind.NCR,
            NCRStatus.PENDING_DISPOSITION,
            NCRStatus.UNDER_REVIEW,
            "Return to Review",
            requires_comment=True,
            reasons=(
                "Additional analysis required",
                "New information available",
                "Disposition requires clarification",
            ),
        ),
    ),
    date_fields=frozenset(
        {D.OPENED_DATE, D.REVIEW_DATE, D.DISPOSITION_DATE, D.CLOSED_DATE}
    ),
)

CAPA_LIFECYCLE = LifecycleDefinition(
    kind=RecordKind.CAPA,
    vocabulary=(
        StatusDeclaration(CAPAStatus.DRAFT, StatusPhase.DRAFT),
        StatusDeclaration(CAPAStatus.OPEN, StatusPhase.OPEN),
        StatusDeclaration(CAPAStatus.IN_PROGRESS, StatusPhase.INVESTIGATION),
        StatusDeclaration(CAPAStatus.CANCELLED, StatusPhase.CLOSED),
        StatusDeclaration(CAPAStatus.PENDING_VERIFICATION, StatusPhase.DISPOSITION),
        StatusDeclaration(CAPAStatus.VERIFIED, StatusPhase.DISPOSITION),
        StatusDeclaration(CAPAStatus.CLOSED, StatusPhase.CLOSED),
    ),
    initial_status=CAPAStatus.DRAFT,
    stages=(
        CanonicalStage("draft", "Draft", frozenset({CAPAStatus.DRAFT}), D.CREATED_AT),
        CanonicalStage("open", "Open", frozenset({CAPAStatus.OPEN}), D.OPENED_DATE),
        CanonicalStage(
            "in_progress",
            "In Progress",
            frozenset({CAPAStatus.IN_PROGRESS}),
            D.IMPLEMENTATION_START_DATE,
        ),
        CanonicalStage(
            "verification",
            "Verification",
            frozenset({CAPAStatus.PENDING_VERIFICATION, CAPAStatus.VERIFIED}),
            D.IMPLEMENTATION_END_DATE,
        ),
        CanonicalStage("closed", "Closed", frozenset({CAPAStatus.CLOSED}), D.CLOSED_DATE),
    ),
    edges=(
        TransitionEdge(
            RecordKind.CAPA,
            CAPAStatus.DRAFT,
            CAPAStatus.OPEN,
            "Submit CAPA",
            sets_date_field=D.OPENED_DATE,
        ),
        TransitionEdge(
            RecordKind.CAPA,
            CAPAStatus.OPEN,
            CAPAStatus.IN_PROGRESS,
            "Start Implementation",
            sets_date_field=D.IMPLEMENTATION_START_DATE,
        ),
        TransitionEdge(
            RecordKind.CAPA,
            CAPAStatus.IN_PROGRESS,
            CAPAStatus.PENDING_VERIFICATION,
            "Submit for Verification",
            requires_comment=True,
            sets_date_field=D.IMPLEMENTATION_END_DATE,
        ),
        TransitionEdge(
            RecordKind.CAPA,
            CAPAStatus.PENDING_VERIFICATION,
            CAPAStatus.VERIFIED,
            "Verify Effectiveness",
            requires_comment=True,
            sets_date_field=D.VERIFICATION_DATE,
        ),
        TransitionEdge(
            RecordKind.CAPA,
            CAPAStatus.PENDING_VERIFICATION,
            CAPAStatus.CLOSED,
            "Verify and Close",
            requires_comment=True,
            sets_date_field=D.CLOSED_DATE,
        ),
        TransitionEdge(
            RecordKind.CAPA,
            CAPAStatus.VERIFIED,
            CAPAStatus.CLOSED,
            "Close CAPA",
            sets_date_field=D.CLOSED_DATE,
        ),
        *(
            TransitionEdge(
                RecordKind.CAPA,
                source,
                CAPAStatus.CANCELLED,
                "Cancel CAPA",
                requires_comment=True,
                sets_date_field=D.CANCELLED_DATE,
                reasons=(
                    "Duplicate of another CAPA",
                    "Root cause addressed elsewhere",
                    "No longer applicable",
                ),
            )
            for source in (CAPAStatus.DRAFT, CAPAStatus.OPEN, CAPAStatus.IN_PROGRESS)
        ),
        TransitionEdge(
            RecordKind.CAPA,
            CAPAStatus.CANCELLED,
            CAPAStatus.CLOSED,
            "Close Cancelled CAPA",
            sets_date_field=D.CLOSED_DATE,
        ),
        TransitionEdge(
            RecordKind.CAPA,
            CAPAStatus.OPEN,
            CAPAStatus.DRAFT,
            "Return to Draft",
            requires_comment=True,
            reasons=(
                "Incomplete information",
                "Requires revision",
                "Further planning needed",
            ),
        ),
        TransitionEdge(
            RecordKind.CAPA,
            CAPAStatus.IN_PROGRESS,
            CAPAStatus.OPEN,
            "Return to Open",
            requires_comment=True,
            reasons=(
                "Implementation issues encountered",
                "Change in scope required",
                "Resource constraints",
            ),
        ),
        TransitionEdge(
            RecordKind.CAPA,
            CAPAStatus.PENDING_VERIFICATION,
            CAPAStatus.IN_PROGRESS,
            "Return to Implementation",
            requires_comment=True,
            reasons=(
                "Additional actions required",
                "Verification criteria not met",
                "Implementation incomplete",
            ),
        ),
    ),
    date_fields=frozenset(
        {
            D.OPENED_DATE,
            D.IMPLEMENTATION_START_DATE,
            D.IMPLEMENTATION_END_DATE,
            D.VERIFICATION_DATE,
            D.CANCELLED_DATE,
            D.CLOSED_DATE,
        }
    ),
)

SCAR_LIFECYCLE = LifecycleDefinition(
    kind=RecordKind.SCAR,
    vocabulary=(
        StatusDeclaration(SCARStatus.DRAFT, StatusPhase.DRAFT),
        StatusDeclaration(SCARStatus.ISSUED, StatusPhase.OPEN),
        StatusDeclaration(SCARStatus.SUPPLIER_RESPONSE, StatusPhase.INVESTIGATION),
        StatusDeclaration(SCARStatus.REVIEW, StatusPhase.DISPOSITION),
        StatusDeclaration(SCARStatus.CLOSED, StatusPhase.CLOSED),
    ),
    initial_status=SCARStatus.DRAFT,
    stages=(
        CanonicalStage("draft", "Draft", frozenset({SCARStatus.DRAFT}), D.CREATED_AT),
        CanonicalStage("issued", "Issued", frozenset({SCARStatus.ISSUED}), D.ISSUE_DATE),
        CanonicalStage(
            "supplier_response",
            "Response",
            frozenset({SCARStatus.SUPPLIER_RESPONSE}),
            D.RESPONSE_DATE,
        ),
        CanonicalStage("review", "Review", frozenset({SCARStatus.REVIEW}), D.REVIEW_DATE),
        CanonicalStage("closed", "Closed", frozenset({SCARStatus.CLOSED}), D.CLOSED_DATE),
    ),
    edges=(
        TransitionEdge(
            RecordKind.SCAR,
            SCARStatus.DRAFT,
            SCARStatus.ISSUED,
            "Issue to Supplier",
            sets_date_field=D.ISSUE_DATE,
        ),
        TransitionEdge(
            RecordKind.SCAR,
            SCARStatus.ISSUED,
            SCARStatus.SUPPLIER_RESPONSE,
            "Record Response",
            requires_comment=True,
            sets_date_field=D.RESPONSE_DATE,
        ),
        TransitionEdge(
            RecordKind.SCAR,
            SCARStatus.SUPPLIER_RESPONSE,
            SCARStatus.REVIEW,
            "Accept Response",
            sets_date_field=D.REVIEW_DATE,
        ),
        TransitionEdge(
            RecordKind.SCAR,
            SCARStatus.REVIEW,
            SCARStatus.CLOSED,
            "Close SCAR",
            requires_comment=True,
            sets_date_field=D.CLOSED_DATE,
        ),
        TransitionEdge(
            RecordKind.SCAR,
            SCARStatus.SUPPLIER_RESPONSE,
            SCARStatus.ISSUED,
            "Request Clarification",
            requires_comment=True,
            reasons=(
                "Incomplete response",
                "Inadequate root cause analysis",
                "Insufficient corrective actions",
                "Missing evidence",
            ),
        ),
        TransitionEdge(
            RecordKind.SCAR,
            SCARStatus.REVIEW,
            SCARStatus.SUPPLIER_RESPONSE,
            "Request Additional Information",
            requires_comment=True,
            reasons=(
                "Additional evidence required",
                "Effectiveness verification needed",
                "Implementation timeline unclear",
            ),
        ),
    ),
    date_fields=frozenset(
        {D.ISSUE_DATE, D.RESPONSE_DATE, D.REVIEW_DATE, D.CLOSED_DATE}
    ),
)

MRB_LIFECYCLE = LifecycleDefinition(
    kind=RecordKind.MRB,
    vocabulary=(
        StatusDeclaration(MRBStatus.PENDING_REVIEW, StatusPhase.DRAFT),
        StatusDeclaration(MRBStatus.IN_REVIEW, StatusPhase.INVESTIGATION),
        StatusDeclaration(MRBStatus.DISPOSITION_PENDING, StatusPhase.DISPOSITION),
        StatusDeclaration(MRBStatus.REJECTED, StatusPhase.DISPOSITION),
        StatusDeclaration(MRBStatus.APPROVED, StatusPhase.DISPOSITION),
        StatusDeclaration(MRBStatus.CLOSED, StatusPhase.CLOSED),
    ),
    initial_status=MRBStatus.PENDING_REVIEW,
    stages=(
        CanonicalStage(
            "pending_review",
            "Pending Review",
            frozenset({MRBStatus.PENDING_REVIEW}),
            D.CREATED_AT,
        ),
        CanonicalStage(
            "in_review", "In Review", frozenset({MRBStatus.IN_REVIEW}), D.REVIEW_START_DATE
        ),
        CanonicalStage(
            "disposition_pending",
            "Disposition",
            frozenset({MRBStatus.DISPOSITION_PENDING}),
            D.DISPOSITION_REQUESTED_DATE,
        ),
        CanonicalStage(
            "approved", "Approved", frozenset({MRBStatus.APPROVED}), D.DECISION_DATE
        ),
        CanonicalStage("closed", "Closed", frozenset({MRBStatus.CLOSED}), D.CLOSED_DATE),
    ),
    edges=(
        TransitionEdge(
            RecordKind.MRB,
            MRBStatus.PENDING_REVIEW,
            MRBStatus.IN_REVIEW,
            "Start Review",
            sets_date_field=D.REVIEW_START_DATE,
        ),
        TransitionEdge(
            RecordKind.MRB,
            MRBStatus.IN_REVIEW,
            MRBStatus.DISPOSITION_PENDING,
            "Request Disposition",
            sets_date_field=D.DISPOSITION_REQUESTED_DATE,
        ),
        TransitionEdge(
            RecordKind.MRB,
            MRBStatus.DISPOSITION_PENDING,
            MRBStatus.APPROVED,
            "Approve",
            requires_comment=True,
            requires_approval=True,
            sets_date_field=D.DECISION_DATE,
        ),
        TransitionEdge(
            RecordKind.MRB,
            MRBStatus.DISPOSITION_PENDING,
            MRBStatus.REJECTED,
            "Reject",
            requires_comment=True,
            requires_approval=True,
            sets_date_field=D.DECISION_DATE,
        ),
        TransitionEdge(
            RecordKind.MRB,
            MRBStatus.APPROVED,
            MRBStatus.CLOSED,
            "Close MRB",
            sets_date_field=D.CLOSED_DATE,
        ),
        TransitionEdge(
            RecordKind.MRB,
            MRBStatus.REJECTED,
            MRBStatus.CLOSED,
            "Close MRB",
            sets_date_field=D.CLOSED_DATE,
        ),
        TransitionEdge(
            RecordKind.MRB,
            MRBStatus.IN_REVIEW,
            MRBStatus.PENDING_REVIEW,
            "Return to Pending",
            requires_comment=True,
            reasons=(
                "Additional information needed",
                "Key stakeholders unavailable",
                "Reschedule required",
            ),
        ),
        TransitionEdge(
            RecordKind.MRB,
            MRBStatus.DISPOSITION_PENDING,
            MRBStatus.IN_REVIEW,
            "Return to Review",
            requires_comment=True,
            reasons=(
                "Further analysis required",
                "New information available",
                "Additional testing needed",
            ),
        ),
    ),
    date_fields=frozenset(
        {
            D.REVIEW_START_DATE,
            D.DISPOSITION_REQUESTED_DATE,
            D.DECISION_DATE,
            D.CLOSED_DATE,
        }
    ),
)


def get_lifecycle(kind: RecordKind) -> LifecycleDefinition:
    """Return the rule table for a record kind."""
    match kind:
        case RecordKind.NCR:
            return NCR_LIFECYCLE
        case RecordKind.CAPA:
            return CAPA_LIFECYCLE
        case RecordKind.SCAR:
            return SCAR_LIFECYCLE
        case RecordKind.MRB:
            return MRB_LIFECYCLE
        case _:
            assert_never(kind)


ALL_LIFECYCLES: tuple[LifecycleDefinition, ...] = tuple(
    get_lifecycle(kind) for kind in RecordKind
)
