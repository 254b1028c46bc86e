"""Application services for the quality lifecycle engine.

Available services:
- StatusUpdateOrchestrator: Validates and applies status transitions
- LifecycleQueryService: Builds lifecycle views for presentation
- SystemTimeAuthority: Production time authority
"""

from quality_lifecycle.application.services.lifecycle_query_service import (
    LifecycleQueryService,
)
from quality_lifecycle.application.services.status_update_service import (
    StatusUpdateOrchestrator,
    StatusUpdateResult,
)
from quality_lifecycle.application.services.time_authority_service import (
    SystemTimeAuthority,
)

__all__: list[str] = [
    "LifecycleQueryService",
    "StatusUpdateOrchestrator",
    "StatusUpdateResult",
    "SystemTimeAuthority",
]
