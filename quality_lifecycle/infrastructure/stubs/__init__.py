"""In-memory collaborators for development and testing.

Available stubs:
- InMemoryRecordStore: Record storage with lock-based compare-and-swap and
  failure injection
- AllowListApprovalGate: Approval decisions
- InMemoryEventSink: Collects published events, can be told to fail
- InMemoryAuditTrail: Append-only TransitionRecord history

WARNING: These stubs are NOT for production use.
"""

from quality_lifecycle.infrastructure.stubs.approval_gate_stub import AllowListApprovalGate
from quality_lifecycle.infrastructure.stubs.audit_trail_stub import InMemoryAuditTrail
from quality_lifecycle.infrastructure.stubs.event_sink_stub import InMemoryEventSink
from quality_lifecycle.infrastructure.stubs.record_store_stub import (
    InMemoryRecordStore,
)

__all__: list[str] = [
    "AllowListApprovalGate",
    "InMemoryAuditTrail",
    "InMemoryEventSink",
    "InMemoryRecordStore",
]
