"""Bootstrap wiring for lifecycle engine dependencies.

Collaborators default to the in-memory stubs; production callers replace
them with ``set_*`` before the first ``get_status_update_orchestrator()``.
"""

from __future__ import annotations

from structlog import get_logger

from quality_lifecycle.application.ports.approval_gate import ApprovalGateProtocol
from quality_lifecycle.application.ports.event_sink import EventSinkProtocol
from quality_lifecycle.application.ports.record_store import RecordStoreProtocol
from quality_lifecycle.application.ports.time_authority import TimeAuthorityProtocol
from quality_lifecycle.application.services.lifecycle_query_service import (
    LifecycleQueryService,
)
from quality_lifecycle.application.services.status_update_service import (
    StatusUpdateOrchestrator,
)
from quality_lifecycle.application.services.time_authority_service import (
    SystemTimeAuthority,
)
from quality_lifecycle.config.lifecycle_config import LifecycleConfig
from quality_lifecycle.infrastructure.stubs.audit_trail_stub import InMemoryAuditTrail
from quality_lifecycle.infrastructure.stubs.record_store_stub import (
    InMemoryRecordStore,
)

logger = get_logger()

_config: LifecycleConfig | None = None
_record_store: RecordStoreProtocol | None = None
_event_sink: EventSinkProtocol | None = None
_approval_gate: ApprovalGateProtocol | None = None
_time_authority: TimeAuthorityProtocol | None = None
_orchestrator: StatusUpdateOrchestrator | None = None
_query_service: LifecycleQueryService | None = None


def get_lifecycle_config() -> LifecycleConfig:
    """Get the engine configuration, read from the environment once."""
    global _config
    if _config is None:
        _config = LifecycleConfig.from_environment()
    return _config


def get_record_store() -> RecordStoreProtocol:
    """Get the record store instance."""
    global _record_store
    if _record_store is None:
        logger.warning(
            "record_store_initialized",
            store_type="in_memory",
            message="No record store configured, using in-memory store",
        )
        _record_store = InMemoryRecordStore()
    return _record_store


def set_record_store(store: RecordStoreProtocol) -> None:
    """Set the record store instance (for production use)."""
    global _record_store, _orchestrator, _query_service
    _record_store = store
    _orchestrator = None
    _query_service = None


def get_event_sink() -> EventSinkProtocol:
    """Get the event sink; defaults to an in-memory audit trail."""
    global _event_sink
    if _event_sink is None:
        _event_sink = InMemoryAuditTrail()
    return _event_sink


def set_event_sink(sink: EventSinkProtocol) -> None:
    """Set the event sink instance (for production use)."""
    global _event_sink, _orchestrator
    _event_sink = sink
    _orchestrator = None


def get_approval_gate() -> ApprovalGateProtocol | None:
    """Get the approval gate; None means approval edges are always denied."""
    return _approval_gate


def set_approval_gate(gate: ApprovalGateProtocol | None) -> None:
    """Set the approval gate instance."""
    global _approval_gate, _orchestrator
    _approval_gate = gate
    _orchestrator = None


def get_time_authority() -> TimeAuthorityProtocol:
    """Get the time authority instance."""
    global _time_authority
    if _time_authority is None:
        _time_authority = SystemTimeAuthority()
    return _time_authority


def set_time_authority(time_authority: TimeAuthorityProtocol) -> None:
    """Set the time authority instance (tests inject a fake clock)."""
    global _time_authority, _orchestrator
    _time_authority = time_authority
    _orchestrator = None


def get_status_update_orchestrator() -> StatusUpdateOrchestrator:
    """Get the status update orchestrator wired to the current collaborators."""
    global _orchestrator
    if _orchestrator is None:
        _orchestrator = StatusUpdateOrchestrator(
            store=get_record_store(),
            event_sink=get_event_sink(),
            time_authority=get_time_authority(),
            approval_gate=get_approval_gate(),
            config=get_lifecycle_config(),
        )
    return _orchestrator


def get_lifecycle_query_service() -> LifecycleQueryService:
    """Get the lifecycle query service."""
    global _query_service
    if _query_service is None:
        _query_service = LifecycleQueryService(
            store=get_record_store(),
            config=get_lifecycle_config(),
        )
    return _query_service


def reset_lifecycle_dependencies() -> None:
    """Drop every singleton (for tests)."""
    global _config, _record_store, _event_sink, _approval_gate
    global _time_authority, _orchestrator, _query_service
    _config = None
    _record_store = None
    _event_sink = None
    _approval_gate = None
    _time_authority = None
    _orchestrator = None
    _query_service = None
