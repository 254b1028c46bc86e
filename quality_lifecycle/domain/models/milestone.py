"""Milestone projection value objects.

These are computed on every read and never persisted.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any


class StageState(str, Enum):
    """Display state of a canonical stage relative to the record's status."""

    PENDING = "pending"
    CURRENT = "current"
    COMPLETED = "completed"
    SKIPPED = "skipped"


@dataclass(frozen=True, eq=True)
class MilestoneStage:
    """One canonical stage tagged with its projected state."""

    id: str
    label: str
    state: StageState
    timestamp: datetime | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "label": self.label,
            "state": self.state.value,
            "timestamp": self.timestamp.isoformat() if self.timestamp else None,
        }


@dataclass(frozen=True, eq=True)
class TimelineItem:
    """A milestone stage annotated for display.

    Attributes:
        id: Stage identifier.
        label: Stage label.
        state: Projected stage state.
        tooltip: Human-readable annotation for the state.
        date: When the record entered the stage; only set for completed and
            current items.
    """

    id: str
    label: str
    state: StageState
    tooltip: str
    date: datetime | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "label": self.label,
            "state": self.state.value,
            "tooltip": self.tooltip,
            "date": self.date.isoformat() if self.date else None,
        }
