"""Approval gate stubs."""

from __future__ import annotations

from collections.abc import Iterable

from quality_lifecycle.application.ports.approval_gate import ApprovalGateProtocol
from quality_lifecycle.domain.models.lifecycle import TransitionEdge


class AllowListApprovalGate(ApprovalGateProtocol):
    """Authorizes a fixed set of actors for every approval edge.

    Also records each decision so tests can assert the gate was consulted.
    """

    def __init__(self, approvers: Iterable[str] = ()) -> None:
        """Initialize the gate.

        Args:
            approvers: Actors allowed to take approval-requiring edges.
        """
        self._approvers: set[str] = set(approvers)
        self._failure: Exception | None = None
        self.decisions: list[tuple[str, TransitionEdge, bool]] = []

    async def is_authorized(self, actor: str, edge: TransitionEdge) -> bool:
        """Return True if ``actor`` is on the allow list.

        Raises:
            Exception: The configured failure, if any.
        """
        if self._failure is not None:
            raise self._failure
        authorized = actor in self._approvers
        self.decisions.append((actor, edge, authorized))
        return authorized

    def grant(self, actor: str) -> None:
        """Add an actor to the allow list."""
        self._approvers.add(actor)

    def revoke(self, actor: str) -> None:
        """Remove an actor from the allow list."""
        self._approvers.discard(actor)

    def configure_failure(self, error: Exception | None) -> None:
        """Make every decision raise ``error``; pass None to stop."""
        self._failure = error

    def clear(self) -> None:
        """Reset decisions and failure; the allow list is kept."""
        self.decisions.clear()
        self._failure = None
