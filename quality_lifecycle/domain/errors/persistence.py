"""Persistence errors surfaced from record store and event sink collaborators."""

from __future__ import annotations

from quality_lifecycle.domain.exceptions import QualityLifecycleError


class PersistenceError(QualityLifecycleError):
    """Raised when a collaborator fails for reasons unrelated to business rules.

    Attributes:
        operation: The collaborator operation that failed (e.g. "compare_and_swap").
        cause: The underlying exception, if any.
    """

    error_code = "PERSISTENCE_FAILURE"

    def __init__(
        self,
        operation: str,
        cause: BaseException | None = None,
        message: str | None = None,
    ) -> None:
        self.operation = operation
        self.cause = cause
        detail = message or (str(cause) if cause is not None else "unknown failure")
        super().__init__(f"{operation} failed: {detail}")


class RecordNotFoundError(PersistenceError):
    """Raised when a record id is not present in the record store."""

    error_code = "RECORD_NOT_FOUND"

    def __init__(self, record_id: str) -> None:
        self.record_id = record_id
        super().__init__(operation="load", message=f"record {record_id} not found")
