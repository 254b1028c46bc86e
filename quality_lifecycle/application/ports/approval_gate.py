"""Approval gate port.

The orchestrator performs no authorization of its own. For edges marked
``requires_approval`` it asks this collaborator whether the actor may take
the edge.
"""

from __future__ import annotations

from typing import Protocol

from quality_lifecycle.domain.models.lifecycle import TransitionEdge


class ApprovalGateProtocol(Protocol):
    """Protocol for approval decisions on gated transitions."""

    async def is_authorized(self, actor: str, edge: TransitionEdge) -> bool:
        """Return True if ``actor`` may take ``edge``.

        Args:
            actor: Identity of the actor requesting the transition.
            edge: The approval-requiring edge.

        Returns:
            True if authorized, False otherwise.
        """
        ...
