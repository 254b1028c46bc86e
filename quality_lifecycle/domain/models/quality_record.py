"""Normalized quality record model.

A QualityRecord is the one shape every projection and the orchestrator work
with, whatever kind it is. Kind-specific date names from the document store
(``closeDate``, ``supplierResponse.responseDate``, ...) are resolved once at
ingestion into ``milestone_dates``, keyed by MilestoneDateField and restricted
to the kind's date schema.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from datetime import datetime
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from quality_lifecycle.domain.models.lifecycles import get_lifecycle
from quality_lifecycle.domain.models.record_kind import (
    MilestoneDateField,
    RecordKind,
    Status,
    coerce_status,
)

if TYPE_CHECKING:
    from quality_lifecycle.domain.models.lifecycle import TransitionEdge


@dataclass(frozen=True, eq=True)
class QualityRecord:
    """A quality record as seen by the lifecycle engine.

    Attributes:
        id: Record identifier.
        kind: Record kind; fixed for the record's lifetime.
        status: Current status, always a member of the kind's vocabulary.
        created_at: Creation timestamp.
        updated_at: Timestamp of the last status mutation.
        number: Human tracking number (e.g. "NCR-2024-0042"), if assigned.
        milestone_dates: When the record entered each milestone.
    """

    id: str
    kind: RecordKind
    status: Status
    created_at: datetime
    updated_at: datetime
    number: str | None = None
    milestone_dates: Mapping[MilestoneDateField, datetime] = field(
        default_factory=lambda: MappingProxyType({}), hash=False
    )

    def __post_init__(self) -> None:
        """Normalize status and freeze the date mapping.

        Raises:
            UnknownStatusError: If status is not in the kind's vocabulary.
            ValueError: If a milestone date is outside the kind's date schema.
        """
        object.__setattr__(self, "status", coerce_status(self.kind, self.status))

        allowed = get_lifecycle(self.kind).date_fields
        dates: dict[MilestoneDateField, datetime] = {}
        for key, value in self.milestone_dates.items():
            date_field = MilestoneDateField(key)
            if date_field not in allowed:
                raise ValueError(
                    f"{date_field.value} is not a {self.kind.display_name} date field"
                )
            if not isinstance(value, datetime):
                raise ValueError(f"{date_field.value} must be a datetime")
            dates[date_field] = value
        object.__setattr__(self, "milestone_dates", MappingProxyType(dates))

    @classmethod
    def create(
        cls,
        id: str,
        kind: RecordKind,
        created_at: datetime,
        number: str | None = None,
    ) -> QualityRecord:
        """Create a new record in its kind's initial status.

        Args:
            id: Record identifier.
            kind: Record kind.
            created_at: Creation timestamp, also used as updated_at.
            number: Optional tracking number.

        Returns:
            A record in the kind's designated creation status.
        """
        return cls(
            id=id,
            kind=kind,
            status=get_lifecycle(kind).initial_status,
            created_at=created_at,
            updated_at=created_at,
            number=number,
        )

    def date_of(self, date_field: MilestoneDateField) -> datetime | None:
        """Resolve a milestone date, including the created_at pseudo field."""
        if date_field is MilestoneDateField.CREATED_AT:
            return self.created_at
        return self.milestone_dates.get(date_field)

    def with_status(self, edge: TransitionEdge, timestamp: datetime) -> QualityRecord:
        """Return a copy moved along ``edge`` at ``timestamp``.

        The edge's designated date field, if any, is stamped with the same
        timestamp. Validation of the edge is the caller's job.
        """
        dates = dict(self.milestone_dates)
        if edge.sets_date_field is not None:
            dates[edge.sets_date_field] = timestamp
        return replace(
            self,
            status=edge.to_status,
            updated_at=timestamp,
            milestone_dates=dates,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "kind": self.kind.value,
            "status": self.status.value,
            "number": self.number,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
            "milestone_dates": {
                key.value: value.isoformat()
                for key, value in self.milestone_dates.items()
            },
        }
