"""Unit tests for the transition validator.

Tests:
- Exact edge lookup, no implicit transitions
- Rejection reasons (unknown, idempotent, terminal, missing edge)
- Agreement between the validator and the projector
"""

from __future__ import annotations

import pytest

from quality_lifecycle.domain.errors import InvalidTransitionError, UnknownStatusError
from quality_lifecycle.domain.models import (
    ALL_LIFECYCLES,
    CAPAStatus,
    LifecycleDefinition,
    MRBStatus,
    NCRStatus,
    RecordKind,
    SCARStatus,
    StageState,
)
from quality_lifecycle.domain.services import (
    TransitionValidation,
    available_transitions,
    project,
    validate,
)


class TestValidate:
    """validate() outcomes."""

    def test_accepts_existing_edge(self) -> None:
        """A table edge is returned with its gating flags."""
        result = validate(RecordKind.SCAR, SCARStatus.ISSUED, SCARStatus.SUPPLIER_RESPONSE)

        assert result.is_valid
        assert result.error is None
        assert result.edge is not None
        assert result.edge.label == "Record Response"
        assert result.edge.requires_comment is True

    def test_accepts_string_values(self) -> None:
        """Raw values are coerced before lookup."""
        result = validate(RecordKind.NCR, "pending_disposition", "closed")

        assert result.is_valid
        assert result.edge is not None
        assert result.edge.to_status is NCRStatus.CLOSED

    def test_rejects_skip_ahead(self) -> None:
        """Draft cannot jump to Closed."""
        result = validate(RecordKind.NCR, NCRStatus.DRAFT, NCRStatus.CLOSED)

        assert not result.is_valid
        assert result.error is not None
        assert result.error.reason == "No NCR transition from Draft to Closed"
        assert result.error.allowed == ["open"]

    def test_rejects_same_status(self) -> None:
        """Re-applying the current status is rejected, not a no-op."""
        result = validate(RecordKind.CAPA, CAPAStatus.OPEN, CAPAStatus.OPEN)

        assert result.error is not None
        assert result.error.reason == "Record is already Open"

    def test_rejects_from_terminal(self) -> None:
        """Nothing leaves a terminal status."""
        result = validate(RecordKind.MRB, MRBStatus.CLOSED, MRBStatus.IN_REVIEW)

        assert result.error is not None
        assert result.error.reason == "Closed is a terminal status"
        assert result.error.allowed == []

    def test_rejects_unknown_target(self) -> None:
        """An unknown target is reported with the legal options."""
        result = validate(RecordKind.NCR, NCRStatus.OPEN, "approved")

        assert result.error is not None
        assert "'approved' is not a valid NCR status" in result.error.reason
        assert result.error.allowed == ["under_review"]
        assert result.error.to_status == "approved"

    def test_rejects_unknown_current(self) -> None:
        """A corrupt current status is reported, not raised."""
        result = validate(RecordKind.SCAR, "pending", "issued")

        assert result.error is not None
        assert "'pending' is not a valid SCAR status" in result.error.reason

    def test_rejects_status_of_another_kind(self) -> None:
        """Statuses are never shared between kinds."""
        result = validate(RecordKind.NCR, NCRStatus.DRAFT, CAPAStatus.OPEN)

        assert not result.is_valid

    def test_error_serializes(self) -> None:
        """The error carries a stable code and its context."""
        result = validate(RecordKind.NCR, NCRStatus.DRAFT, NCRStatus.CLOSED)
        assert result.error is not None

        data = result.error.to_dict()

        assert data["error_code"] == "INVALID_TRANSITION"
        assert data["from_status"] == "draft"
        assert data["to_status"] == "closed"
        assert data["retryable"] is False

    def test_validation_requires_exactly_one_outcome(self) -> None:
        """A validation is either an edge or an error."""
        with pytest.raises(ValueError):
            TransitionValidation()

        edge = validate(RecordKind.NCR, "draft", "open").edge
        error = InvalidTransitionError("draft", "closed", "nope")
        with pytest.raises(ValueError):
            TransitionValidation(edge=edge, error=error)


class TestAvailableTransitions:
    """available_transitions() lists the legal next moves."""

    def test_under_review_offers_forward_and_return(self) -> None:
        """Table order is kept."""
        edges = available_transitions(RecordKind.NCR, NCRStatus.UNDER_REVIEW)

        assert [(e.to_status, e.label) for e in edges] == [
            (NCRStatus.PENDING_DISPOSITION, "Request Disposition"),
            (NCRStatus.OPEN, "Return to Open"),
        ]

    def test_terminal_offers_nothing(self) -> None:
        """Closed records have no actions."""
        assert available_transitions(RecordKind.SCAR, "closed") == ()

    def test_unknown_status_raises(self) -> None:
        """Unlike validate(), an unknown status here is a caller error."""
        with pytest.raises(UnknownStatusError):
            available_transitions(RecordKind.CAPA, "implementing")

    @pytest.mark.parametrize("lifecycle", ALL_LIFECYCLES, ids=lambda t: t.kind.value)
    def test_every_offered_edge_validates(self, lifecycle: LifecycleDefinition) -> None:
        """The validator accepts exactly what is offered."""
        for status in lifecycle.statuses:
            offered = {e.to_status for e in available_transitions(lifecycle.kind, status)}
            for target in lifecycle.statuses:
                result = validate(lifecycle.kind, status, target)
                assert result.is_valid == (target in offered), (status, target)


class TestValidatorProjectorAgreement:
    """The validator never offers a move the projector considers bypassed."""

    @pytest.mark.parametrize("lifecycle", ALL_LIFECYCLES, ids=lambda t: t.kind.value)
    def test_forward_targets_are_pending_or_current(
        self, lifecycle: LifecycleDefinition
    ) -> None:
        """A forward move lands in a stage that was pending, or off the stage list."""
        for edge in lifecycle.edges:
            if lifecycle.is_return_edge(edge):
                continue
            target_stage = lifecycle.stage_for(edge.to_status)
            if target_stage is None:
                continue
            states = {s.id: s.state for s in project(lifecycle.kind, edge.from_status)}
            assert states[target_stage.id] in (StageState.PENDING, StageState.CURRENT)

    @pytest.mark.parametrize("lifecycle", ALL_LIFECYCLES, ids=lambda t: t.kind.value)
    def test_return_targets_are_completed_or_current(
        self, lifecycle: LifecycleDefinition
    ) -> None:
        """A return move lands in a stage that was already reached."""
        for edge in lifecycle.edges:
            if not lifecycle.is_return_edge(edge):
                continue
            target_stage = lifecycle.stage_for(edge.to_status)
            assert target_stage is not None
            states = {s.id: s.state for s in project(lifecycle.kind, edge.from_status)}
            assert states[target_stage.id] in (StageState.COMPLETED, StageState.CURRENT)

    @pytest.mark.parametrize("lifecycle", ALL_LIFECYCLES, ids=lambda t: t.kind.value)
    def test_accepted_target_projects_reached_stages(
        self, lifecycle: LifecycleDefinition
    ) -> None:
        """After an accepted move, every stage up to the target's is reached."""
        for source in lifecycle.statuses:
            for target in lifecycle.statuses:
                if not validate(lifecycle.kind, source, target).is_valid:
                    continue
                target_stage = lifecycle.stage_for(target)
                if target_stage is None:
                    continue
                stages = project(lifecycle.kind, target)
                position = [s.id for s in stages].index(target_stage.id)
                for stage in stages[: position + 1]:
                    assert stage.state in (StageState.COMPLETED, StageState.CURRENT), (
                        source,
                        target,
                        stage.id,
                    )
