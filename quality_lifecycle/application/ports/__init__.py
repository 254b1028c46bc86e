"""Application ports: the collaborator interfaces the lifecycle core consumes."""

from quality_lifecycle.application.ports.approval_gate import ApprovalGateProtocol
from quality_lifecycle.application.ports.event_sink import EventSinkProtocol
from quality_lifecycle.application.ports.record_store import RecordStoreProtocol
from quality_lifecycle.application.ports.time_authority import TimeAuthorityProtocol

__all__: list[str] = [
    "ApprovalGateProtocol",
    "EventSinkProtocol",
    "RecordStoreProtocol",
    "TimeAuthorityProtocol",
]
