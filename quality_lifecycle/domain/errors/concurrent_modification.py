"""Concurrent modification error for compare-and-swap status writes.

Raised by record stores when the status read at validation time no longer
matches the stored status at write time.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from quality_lifecycle.domain.exceptions import QualityLifecycleError

if TYPE_CHECKING:
    from quality_lifecycle.domain.models.record_kind import Status


class ConcurrentModificationError(QualityLifecycleError):
    """Raised when a compare-and-swap fails due to a concurrent write.

    This is a recoverable error - the caller should refetch the record and
    retry the whole operation, since a different edge may now apply.

    Attributes:
        record_id: Identifier of the record being modified.
        expected_status: The status the write expected to replace.
        actual_status: The status found in the store, when known.
    """

    error_code = "CONCURRENT_MODIFICATION"
    retryable = True

    def __init__(
        self,
        record_id: str,
        expected_status: Status,
        actual_status: Status | None = None,
    ) -> None:
        """Initialize concurrent modification error.

        Args:
            record_id: Identifier of the record being modified.
            expected_status: The status expected for the swap.
            actual_status: The status currently stored, if known.
        """
        self.record_id = record_id
        self.expected_status = expected_status
        self.actual_status = actual_status
        found = f" Found: {actual_status.value}." if actual_status is not None else ""
        super().__init__(
            f"Concurrent modification detected for record {record_id}. "
            f"Expected status: {expected_status.value}.{found}"
        )
