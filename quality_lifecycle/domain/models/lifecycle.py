"""Transition rule table model.

A ``LifecycleDefinition`` is the single source of truth for one record kind:
its ordered vocabulary, its canonical milestone stages and its transition
edges. Everything the projector and the validator need ("which statuses
count as having passed stage X", "which edges leave status Y") is derived
from that one object. No other module keeps its own status sets.

Derivation rules:
    - A status' ordinal is its position in the vocabulary.
    - An edge is a return edge when its target ordinal is lower than its
      source ordinal; every other edge is a forward edge.
    - Reached-or-passed sets are computed over forward edges only, so rework
      loops never make a stage appear both behind and ahead of a record.

Tables are validated on construction and raise LifecycleDefinitionError if
they are not well formed. They are immutable for the process lifetime.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from functools import cached_property
from typing import Any

from quality_lifecycle.domain.errors.lifecycle_definition import (
    LifecycleDefinitionError,
)
from quality_lifecycle.domain.models.record_kind import (
    MilestoneDateField,
    RecordKind,
    Status,
    StatusPhase,
    coerce_status,
    status_type_for,
)


@dataclass(frozen=True)
class StatusDeclaration:
    """One vocabulary entry: a status and its ordering role."""

    status: Status
    phase: StatusPhase


@dataclass(frozen=True)
class CanonicalStage:
    """A display checkpoint of a lifecycle.

    Attributes:
        id: Stable stage identifier (the primary member status value).
        label: Human-readable stage name.
        statuses: Member statuses; the stage is current while the record
            holds any of them.
        date_field: Where the timeline reads this stage's date from.
    """

    id: str
    label: str
    statuses: frozenset[Status]
    date_field: MilestoneDateField | None = None


@dataclass(frozen=True)
class TransitionEdge:
    """A permitted status-to-status move with its gating rules.

    Attributes:
        kind: Record kind the edge belongs to.
        from_status: Source status.
        to_status: Target status.
        label: Action label shown to users (e.g. "Close NCR").
        requires_comment: Whether a non-blank comment is mandatory.
        requires_approval: Whether the approval gate must authorize the actor.
        sets_date_field: Milestone date stamped when the edge is taken.
        reasons: Suggested reasons offered for this action.
    """

    kind: RecordKind
    from_status: Status
    to_status: Status
    label: str
    requires_comment: bool = False
    requires_approval: bool = False
    sets_date_field: MilestoneDateField | None = None
    reasons: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "kind": self.kind.value,
            "from_status": self.from_status.value,
            "to_status": self.to_status.value,
            "label": self.label,
            "requires_comment": self.requires_comment,
            "requires_approval": self.requires_approval,
            "sets_date_field": (
                self.sets_date_field.value if self.sets_date_field else None
            ),
            "reasons": list(self.reasons),
        }


@dataclass(frozen=True)
class LifecycleDefinition:
    """Status vocabulary, canonical stages and transition edges of one kind.

    Attributes:
        kind: The record kind described.
        vocabulary: Ordered status declarations.
        initial_status: Status every new record starts in.
        stages: Canonical milestone stages in display order.
        edges: All legal transitions.
        date_fields: The kind's milestone date schema.
    """

    kind: RecordKind
    vocabulary: tuple[StatusDeclaration, ...]
    initial_status: Status
    stages: tuple[CanonicalStage, ...]
    edges: tuple[TransitionEdge, ...]
    date_fields: frozenset[MilestoneDateField] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        """Validate that the table is well formed."""
        self._check_vocabulary()
        self._check_edges()
        self._check_stages()
        self._check_date_fields()
        self._check_terminal_reachability()

    # Vocabulary

    @cached_property
    def statuses(self) -> tuple[Status, ...]:
        """All statuses in vocabulary order."""
        return tuple(d.status for d in self.vocabulary)

    @cached_property
    def _ordinals(self) -> dict[Status, int]:
        return {status: index for index, status in enumerate(self.statuses)}

    @cached_property
    def _phases(self) -> dict[Status, StatusPhase]:
        return {d.status: d.phase for d in self.vocabulary}

    def coerce(self, value: Status | str) -> Status:
        """Convert a raw value into a status of this kind.

        Raises:
            UnknownStatusError: If the value is not in the vocabulary.
        """
        return coerce_status(self.kind, value)

    def ordinal(self, status: Status) -> int:
        """Position of a status in the vocabulary."""
        return self._ordinals[status]

    def phase_of(self, status: Status) -> StatusPhase:
        """Declared ordering role of a status."""
        return self._phases[status]

    # Edges

    @cached_property
    def _edges_by_source(self) -> dict[Status, tuple[TransitionEdge, ...]]:
        grouped: dict[Status, list[TransitionEdge]] = {s: [] for s in self.statuses}
        for edge in self.edges:
            grouped[edge.from_status].append(edge)
        return {status: tuple(edges) for status, edges in grouped.items()}

    @cached_property
    def _edge_index(self) -> dict[tuple[Status, Status], TransitionEdge]:
        return {(e.from_status, e.to_status): e for e in self.edges}

    def edges_from(self, status: Status) -> tuple[TransitionEdge, ...]:
        """Outgoing edges of a status, in declaration order."""
        return self._edges_by_source.get(status, ())

    def find_edge(self, from_status: Status, to_status: Status) -> TransitionEdge | None:
        """Return the edge for an exact (from, to) pair, if one exists."""
        return self._edge_index.get((from_status, to_status))

    def is_return_edge(self, edge: TransitionEdge) -> bool:
        """Whether the edge moves a record back to an earlier status."""
        return self.ordinal(edge.to_status) < self.ordinal(edge.from_status)

    @cached_property
    def terminal_statuses(self) -> frozenset[Status]:
        """Statuses with no outgoing edges."""
        return frozenset(s for s in self.statuses if not self.edges_from(s))

    def is_terminal(self, status: Status) -> bool:
        """Whether no transition leaves the status."""
        return status in self.terminal_statuses

    # Reachability

    @cached_property
    def _forward_reach(self) -> dict[Status, frozenset[Status]]:
        successors: dict[Status, set[Status]] = {s: set() for s in self.statuses}
        for edge in self.edges:
            if not self.is_return_edge(edge):
                successors[edge.from_status].add(edge.to_status)
        # Forward edges strictly increase the ordinal, so walking the
        # vocabulary backwards visits every successor before its source.
        reach: dict[Status, frozenset[Status]] = {}
        for status in reversed(self.statuses):
            collected: set[Status] = set()
            for successor in successors[status]:
                collected.add(successor)
                collected.update(reach[successor])
            reach[status] = frozenset(collected)
        return reach

    def reachable_from(self, status: Status) -> frozenset[Status]:
        """Statuses strictly ahead of ``status`` along forward edges."""
        return self._forward_reach[status]

    # Stages

    @cached_property
    def _stage_by_status(self) -> dict[Status, CanonicalStage]:
        return {status: stage for stage in self.stages for status in stage.statuses}

    def stage_for(self, status: Status) -> CanonicalStage | None:
        """The stage a status belongs to, or None for off-path statuses."""
        return self._stage_by_status.get(status)

    def passed_set(self, stage: CanonicalStage) -> frozenset[Status]:
        """Statuses that count as having reached and passed ``stage``."""
        reached: set[Status] = set()
        for member in stage.statuses:
            reached.update(self.reachable_from(member))
        return frozenset(reached - stage.statuses)

    # Validation

    def _fail(self, message: str) -> None:
        raise LifecycleDefinitionError(f"{self.kind.display_name} lifecycle: {message}")

    def _check_vocabulary(self) -> None:
        if not self.vocabulary:
            self._fail("vocabulary is empty")
        status_type = status_type_for(self.kind)
        seen: set[Status] = set()
        for declaration in self.vocabulary:
            if not isinstance(declaration.status, status_type):
                self._fail(f"{declaration.status!r} is not a {status_type.__name__}")
            if declaration.status in seen:
                self._fail(f"status {declaration.status.value} declared twice")
            seen.add(declaration.status)
        if not self._declares(self.initial_status):
            self._fail(f"initial status {self.initial_status!r} not in vocabulary")

    def _declares(self, status: object) -> bool:
        # str-valued enums of different kinds compare equal ("draft" == "draft"),
        # so membership alone is not enough.
        return isinstance(status, status_type_for(self.kind)) and status in self._ordinals

    def _check_edges(self) -> None:
        pairs: set[tuple[Status, Status]] = set()
        for edge in self.edges:
            if edge.kind is not self.kind:
                self._fail(f"edge {edge.label!r} belongs to {edge.kind.display_name}")
            if not (self._declares(edge.from_status) and self._declares(edge.to_status)):
                self._fail(f"edge {edge.label!r} references a status outside the vocabulary")
            if edge.from_status == edge.to_status:
                self._fail(f"edge {edge.label!r} is a self-loop on {edge.from_status.value}")
            pair = (edge.from_status, edge.to_status)
            if pair in pairs:
                self._fail(
                    f"duplicate edge {edge.from_status.value} -> {edge.to_status.value}"
                )
            pairs.add(pair)

    def _check_stages(self) -> None:
        if not self.stages:
            self._fail("no canonical stages declared")
        claimed: dict[Status, str] = {}
        ids: set[str] = set()
        previous_high = -1
        for stage in self.stages:
            if stage.id in ids:
                self._fail(f"stage id {stage.id!r} declared twice")
            ids.add(stage.id)
            if not stage.statuses:
                self._fail(f"stage {stage.id!r} has no member statuses")
            for status in stage.statuses:
                if not self._declares(status):
                    self._fail(f"stage {stage.id!r} references unknown status {status!r}")
                if status in claimed:
                    self._fail(
                        f"status {status.value} belongs to stages "
                        f"{claimed[status]!r} and {stage.id!r}"
                    )
                claimed[status] = stage.id
            ordinals = [self.ordinal(s) for s in stage.statuses]
            if min(ordinals) <= previous_high:
                self._fail(f"stage {stage.id!r} is out of vocabulary order")
            previous_high = max(ordinals)
        if self.initial_status not in self.stages[0].statuses:
            self._fail("initial status must belong to the first stage")

    def _check_date_fields(self) -> None:
        allowed = set(self.date_fields) | {MilestoneDateField.CREATED_AT}
        for edge in self.edges:
            if edge.sets_date_field is None:
                continue
            if edge.sets_date_field is MilestoneDateField.CREATED_AT:
                self._fail(f"edge {edge.label!r} may not stamp created_at")
            if edge.sets_date_field not in allowed:
                self._fail(
                    f"edge {edge.label!r} stamps {edge.sets_date_field.value}, "
                    "which is not in the date schema"
                )
        for stage in self.stages:
            if stage.date_field is not None and stage.date_field not in allowed:
                self._fail(
                    f"stage {stage.id!r} reads {stage.date_field.value}, "
                    "which is not in the date schema"
                )

    def _check_terminal_reachability(self) -> None:
        terminals = self.terminal_statuses
        for status in terminals:
            if self.phase_of(status) is not StatusPhase.CLOSED:
                self._fail(f"terminal status {status.value} is not in the closed phase")
        for status in _walk(self.initial_status, self._all_successors):
            if not terminals.intersection(_walk(status, self._all_successors)):
                self._fail(f"status {status.value} cannot reach a terminal status")

    def _all_successors(self, status: Status) -> Iterable[Status]:
        return (edge.to_status for edge in self.edges_from(status))


def _walk(
    start: Status, successors: Callable[[Status], Iterable[Status]]
) -> set[Status]:
    """Breadth-first closure of ``start`` (inclusive) under ``successors``."""
    seen = {start}
    queue = deque([start])
    while queue:
        for nxt in successors(queue.popleft()):
            if nxt not in seen:
                seen.add(nxt)
                queue.append(nxt)
    return seen
