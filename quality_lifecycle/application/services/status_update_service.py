"""Status Update Orchestrator.

The only component in the lifecycle engine with side effects. It validates a
requested transition, enforces the comment and approval gates, writes the new
record with a compare-and-swap, and publishes exactly one StatusChangedEvent.

Every outcome is returned as a StatusUpdateResult. Collaborator exceptions
are converted into typed errors on the result; nothing propagates to the
caller.

Developer Golden Rules:
1. VALIDATE FIRST - No side effects until every check has passed
2. CAS FOR STATUS - The write only succeeds from the status that was validated
3. EVENT AFTER SAVE - Publish only after the write; compensate if it fails
4. NO INTERNAL RETRY - A conflict may change which edge is valid
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from quality_lifecycle.application.ports.approval_gate import ApprovalGateProtocol
from quality_lifecycle.application.ports.event_sink import EventSinkProtocol
from quality_lifecycle.application.ports.record_store import RecordStoreProtocol
from quality_lifecycle.application.ports.time_authority import TimeAuthorityProtocol
from quality_lifecycle.application.services.base import LoggingMixin
from quality_lifecycle.config.lifecycle_config import (
    DEFAULT_LIFECYCLE_CONFIG,
    LifecycleConfig,
)
from quality_lifecycle.domain.errors import (
    CommentTooLongError,
    ConcurrentModificationError,
    MissingRequiredCommentError,
    PersistenceError,
    RecordNotFoundError,
    UnauthorizedTransitionError,
)
from quality_lifecycle.domain.events.status_changed import StatusChangedEvent
from quality_lifecycle.domain.exceptions import QualityLifecycleError
from quality_lifecycle.domain.models.lifecycle import TransitionEdge
from quality_lifecycle.domain.models.quality_record import QualityRecord
from quality_lifecycle.domain.models.record_kind import Status
from quality_lifecycle.domain.services.transition_validator import validate


@dataclass(frozen=True)
class StatusUpdateResult:
    """Outcome of a status update request.

    Attributes:
        success: Whether the transition was applied and published.
        record: The updated record on success; otherwise the record as it
            was before the request (None if it could not be loaded).
        edge: The matched edge, once validation has found one.
        event: The published event on success.
        error: Why the request failed.
    """

    success: bool
    record: QualityRecord | None
    edge: TransitionEdge | None = None
    event: StatusChangedEvent | None = None
    error: QualityLifecycleError | None = None

    @classmethod
    def applied(
        cls,
        record: QualityRecord,
        edge: TransitionEdge,
        event: StatusChangedEvent,
    ) -> StatusUpdateResult:
        """Create a successful result."""
        return cls(success=True, record=record, edge=edge, event=event)

    @classmethod
    def failed(
        cls,
        record: QualityRecord | None,
        error: QualityLifecycleError,
        edge: TransitionEdge | None = None,
    ) -> StatusUpdateResult:
        """Create a failed result."""
        return cls(success=False, record=record, edge=edge, error=error)

    @property
    def retryable(self) -> bool:
        """Whether re-running the whole request against fresh data may succeed."""
        return self.error is not None and self.error.retryable


class StatusUpdateOrchestrator(LoggingMixin):
    """Applies validated status transitions to quality records.

    Attributes:
        _store: Record persistence with compare-and-swap writes.
        _event_sink: Receives one StatusChangedEvent per accepted transition.
        _time: Source of all timestamps.
        _approval_gate: Decides approval-requiring edges; when absent, those
            edges are always denied.
        _config: Comment limits.
    """

    def __init__(
        self,
        store: RecordStoreProtocol,
        event_sink: EventSinkProtocol,
        time_authority: TimeAuthorityProtocol,
        approval_gate: ApprovalGateProtocol | None = None,
        config: LifecycleConfig | None = None,
    ) -> None:
        """Initialize the orchestrator.

        Args:
            store: Record store used for the compare-and-swap write.
            event_sink: Sink for StatusChangedEvent.
            time_authority: Time authority for the mutation timestamp.
            approval_gate: Optional approval gate for gated edges.
            config: Engine configuration (defaults to DEFAULT_LIFECYCLE_CONFIG).
        """
        self._store = store
        self._event_sink = event_sink
        self._time = time_authority
        self._approval_gate = approval_gate
        self._config = config or DEFAULT_LIFECYCLE_CONFIG
        self._init_logger()

    async def apply(
        self,
        record: QualityRecord,
        requested_status: Status | str,
        comment: str | None,
        actor: str,
    ) -> StatusUpdateResult:
        """Move a record to ``requested_status``.

        Args:
            record: The record as read by the caller.
            requested_status: Target status (enum member or its value).
            comment: Free-text comment; blank counts as absent.
            actor: Identity of the actor performing the transition.

        Returns:
            StatusUpdateResult. On failure the stored record is unchanged and
            no event has been published.
        """
        log = self._log_operation(
            "apply",
            record_id=record.id,
            kind=record.kind.value,
            from_status=record.status.value,
            requested_status=str(getattr(requested_status, "value", requested_status)),
            actor=actor,
        )
        log.info("status_update_started")

        validation = validate(record.kind, record.status, requested_status)
        if validation.error is not None:
            log.info("status_update_rejected", reason=validation.error.reason)
            return StatusUpdateResult.failed(record, validation.error)
        edge = validation.edge
        assert edge is not None

        normalized_comment = (comment or "").strip()
        gate_error = self._check_comment(edge, normalized_comment)
        if gate_error is None:
            gate_error = await self._check_approval(edge, actor)
        if gate_error is not None:
            log.info(
                "status_update_rejected",
                error_code=gate_error.error_code,
                reason=str(gate_error),
            )
            return StatusUpdateResult.failed(record, gate_error, edge)

        now = self._time.now()
        updated = record.with_status(edge, now)

        try:
            stored = await self._store.compare_and_swap(record.id, record.status, updated)
        except ConcurrentModificationError as exc:
            log.warning(
                "status_update_conflict",
                actual_status=exc.actual_status.value if exc.actual_status else None,
            )
            return StatusUpdateResult.failed(record, exc, edge)
        except PersistenceError as exc:
            log.error("status_write_failed", error=str(exc))
            return StatusUpdateResult.failed(record, exc, edge)
        except Exception as exc:
            log.error(
                "status_write_failed",
                error=str(exc),
                error_type=type(exc).__name__,
            )
            return StatusUpdateResult.failed(
                record, PersistenceError("compare_and_swap", exc), edge
            )

        event = StatusChangedEvent.create(
            record_id=record.id,
            kind=record.kind,
            from_status=record.status,
            to_status=edge.to_status,
            actor=actor,
            timestamp=now,
            comment=normalized_comment or None,
        )
        try:
            await self._event_sink.publish(event)
        except Exception as exc:
            log.error(
                "event_publish_failed",
                event_id=str(event.event_id),
                error=str(exc),
                error_type=type(exc).__name__,
            )
            restored = await self._compensate(record, stored, log)
            message = None if restored else (
                f"{exc}; compensation failed, record left in {stored.status.value}"
            )
            return StatusUpdateResult.failed(
                record, PersistenceError("publish", exc, message), edge
            )

        log.info(
            "status_update_completed",
            to_status=edge.to_status.value,
            event_id=str(event.event_id),
        )
        return StatusUpdateResult.applied(stored, edge, event)

    async def apply_by_id(
        self,
        record_id: str,
        requested_status: Status | str,
        comment: str | None,
        actor: str,
    ) -> StatusUpdateResult:
        """Load a record and apply a transition to it.

        Returns:
            StatusUpdateResult; RecordNotFoundError if the id is unknown.
        """
        log = self._log_operation("apply_by_id", record_id=record_id)
        try:
            record = await self._store.load(record_id)
        except Exception as exc:
            log.error("record_load_failed", error=str(exc))
            return StatusUpdateResult.failed(None, PersistenceError("load", exc))
        if record is None:
            log.info("record_not_found")
            return StatusUpdateResult.failed(None, RecordNotFoundError(record_id))
        return await self.apply(record, requested_status, comment, actor)

    def _check_comment(
        self, edge: TransitionEdge, comment: str
    ) -> QualityLifecycleError | None:
        if edge.requires_comment and not comment:
            return MissingRequiredCommentError(edge)
        if len(comment) > self._config.max_comment_length:
            return CommentTooLongError(len(comment), self._config.max_comment_length)
        return None

    async def _check_approval(
        self, edge: TransitionEdge, actor: str
    ) -> QualityLifecycleError | None:
        if not actor or not actor.strip():
            return UnauthorizedTransitionError(
                actor, edge, reason="an actor identity is required"
            )
        if not edge.requires_approval:
            return None
        if self._approval_gate is None:
            return UnauthorizedTransitionError(
                actor, edge, reason="no approval gate is configured"
            )
        try:
            authorized = await self._approval_gate.is_authorized(actor, edge)
        except Exception as exc:
            # Fail closed
            self._log.warning(
                "approval_gate_failed",
                actor=actor,
                edge=edge.label,
                error=str(exc),
                error_type=type(exc).__name__,
            )
            return UnauthorizedTransitionError(
                actor, edge, reason=f"approval gate failed: {exc}"
            )
        if not authorized:
            return UnauthorizedTransitionError(actor, edge)
        return None

    async def _compensate(
        self,
        original: QualityRecord,
        stored: QualityRecord,
        log: structlog.BoundLogger,
    ) -> bool:
        """Restore ``original`` after an unpublished write.

        Returns:
            True if the original record was restored.
        """
        try:
            await self._store.compare_and_swap(original.id, stored.status, original)
        except Exception as exc:
            log.critical(
                "status_update_compensation_failed",
                restored_status=original.status.value,
                error=str(exc),
                error_type=type(exc).__name__,
            )
            return False
        log.warning(
            "status_update_compensated",
            restored_status=original.status.value,
        )
        return True
