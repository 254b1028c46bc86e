"""Transition errors for the quality-record state machine.

These errors are recoverable and client visible. The validator and the
orchestrator return them inside result objects; they are never raised across
the core's public boundary.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from quality_lifecycle.domain.exceptions import QualityLifecycleError

if TYPE_CHECKING:
    from quality_lifecycle.domain.models.lifecycle import TransitionEdge


def _status_value(status: object) -> str:
    return str(getattr(status, "value", status))


class TransitionValidationError(QualityLifecycleError):
    """Base class for rejections caused by the request itself."""

    error_code = "TRANSITION_VALIDATION_FAILED"


class InvalidTransitionError(TransitionValidationError):
    """Raised when no edge exists for the requested status change.

    Attributes:
        from_status: Current status (or the raw value if it is unknown).
        to_status: Requested status (or the raw value if it is unknown).
        reason: Why the transition was rejected.
        allowed: Status values reachable in one step from ``from_status``.
    """

    error_code = "INVALID_TRANSITION"

    def __init__(
        self,
        from_status: object,
        to_status: object,
        reason: str,
        allowed: Sequence[object] | None = None,
    ) -> None:
        """Initialize invalid transition error.

        Args:
            from_status: Current status of the record.
            to_status: Requested target status.
            reason: Human-readable rejection reason.
            allowed: Legal target statuses from the current status.
        """
        self.from_status = from_status
        self.to_status = to_status
        self.reason = reason
        self.allowed = [_status_value(s) for s in (allowed or [])]

        allowed_str = f" Valid transitions: {self.allowed}" if self.allowed else ""
        super().__init__(
            f"Invalid transition: {_status_value(from_status)} -> "
            f"{_status_value(to_status)}. {reason}.{allowed_str}"
        )

    def to_dict(self) -> dict[str, object]:
        """Convert to dictionary for error responses."""
        return {
            **super().to_dict(),
            "from_status": _status_value(self.from_status),
            "to_status": _status_value(self.to_status),
            "reason": self.reason,
            "allowed": list(self.allowed),
        }


class MissingRequiredCommentError(TransitionValidationError):
    """Raised when an edge mandates a comment and none was supplied."""

    error_code = "MISSING_REQUIRED_COMMENT"

    def __init__(self, edge: TransitionEdge) -> None:
        self.edge = edge
        super().__init__(
            f"A comment is required to {edge.label.lower()} "
            f"({edge.from_status.value} -> {edge.to_status.value})"
        )


class CommentTooLongError(TransitionValidationError):
    """Raised when a transition comment exceeds the configured maximum."""

    error_code = "COMMENT_TOO_LONG"

    def __init__(self, length: int, max_length: int) -> None:
        self.length = length
        self.max_length = max_length
        super().__init__(
            f"Comment of {length} characters exceeds maximum length of {max_length}"
        )


class UnauthorizedTransitionError(QualityLifecycleError):
    """Raised when the approval gate rejects an actor for an approval edge.

    Attributes:
        actor: The actor that attempted the transition.
        edge: The approval-requiring edge.
        reason: Why authorization failed.
    """

    error_code = "UNAUTHORIZED_TRANSITION"

    def __init__(
        self,
        actor: str,
        edge: TransitionEdge,
        reason: str = "approval gate rejected the actor",
    ) -> None:
        self.actor = actor
        self.edge = edge
        self.reason = reason
        super().__init__(
            f"Actor {actor} is not authorized to {edge.label.lower()} "
            f"({edge.from_status.value} -> {edge.to_status.value}): {reason}"
        )
