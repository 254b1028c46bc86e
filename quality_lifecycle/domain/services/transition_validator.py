"""Transition validation domain service.

Looks up the exact (kind, current, requested) edge in the rule table. There
are no implicit transitions. Rejections are returned as values, so callers
must branch on the outcome; nothing here raises for a bad request.
"""

from __future__ import annotations

from dataclasses import dataclass

from quality_lifecycle.domain.errors.lifecycle_definition import UnknownStatusError
from quality_lifecycle.domain.errors.transition import InvalidTransitionError
from quality_lifecycle.domain.models.lifecycle import TransitionEdge
from quality_lifecycle.domain.models.lifecycles import get_lifecycle
from quality_lifecycle.domain.models.record_kind import (
    RecordKind,
    Status,
    display_status,
)


@dataclass(frozen=True)
class TransitionValidation:
    """Outcome of validating a requested status change.

    Exactly one of ``edge`` and ``error`` is set.
    """

    edge: TransitionEdge | None = None
    error: InvalidTransitionError | None = None

    def __post_init__(self) -> None:
        if (self.edge is None) == (self.error is None):
            raise ValueError("TransitionValidation needs exactly one of edge or error")

    @property
    def is_valid(self) -> bool:
        """Return True if a matching edge was found."""
        return self.edge is not None

    @classmethod
    def accept(cls, edge: TransitionEdge) -> TransitionValidation:
        """Create a successful validation."""
        return cls(edge=edge)

    @classmethod
    def reject(cls, error: InvalidTransitionError) -> TransitionValidation:
        """Create a failed validation."""
        return cls(error=error)


def validate(
    kind: RecordKind,
    current: Status | str,
    requested: Status | str,
) -> TransitionValidation:
    """Validate a requested transition against the kind's rule table.

    Args:
        kind: Record kind.
        current: The record's current status.
        requested: The requested target status.

    Returns:
        TransitionValidation carrying the matching edge, or an
        InvalidTransitionError describing why the request was rejected.
    """
    lifecycle = get_lifecycle(kind)
    try:
        from_status = lifecycle.coerce(current)
    except UnknownStatusError as exc:
        return TransitionValidation.reject(
            InvalidTransitionError(current, requested, reason=str(exc))
        )

    allowed = [edge.to_status for edge in lifecycle.edges_from(from_status)]
    try:
        to_status = lifecycle.coerce(requested)
    except UnknownStatusError as exc:
        return TransitionValidation.reject(
            InvalidTransitionError(from_status, requested, str(exc), allowed)
        )

    if to_status == from_status:
        reason = f"Record is already {display_status(from_status)}"
    elif lifecycle.is_terminal(from_status):
        reason = f"{display_status(from_status)} is a terminal status"
    else:
        edge = lifecycle.find_edge(from_status, to_status)
        if edge is not None:
            return TransitionValidation.accept(edge)
        reason = (
            f"No {kind.display_name} transition from "
            f"{display_status(from_status)} to {display_status(to_status)}"
        )
    return TransitionValidation.reject(
        InvalidTransitionError(from_status, to_status, reason, allowed)
    )


def available_transitions(
    kind: RecordKind, status: Status | str
) -> tuple[TransitionEdge, ...]:
    """Return the legal next moves from a status, in table order.

    Raises:
        UnknownStatusError: If status is not in the kind's vocabulary.
    """
    lifecycle = get_lifecycle(kind)
    return lifecycle.edges_from(lifecycle.coerce(status))
