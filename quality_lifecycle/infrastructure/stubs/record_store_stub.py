"""In-memory record store.

Simulates atomic compare-and-swap with an ``asyncio.Lock``; a document
store adapter would use a conditional update on the status field instead.
"""

from __future__ import annotations

import asyncio

from quality_lifecycle.application.ports.record_store import RecordStoreProtocol
from quality_lifecycle.domain.errors.concurrent_modification import (
    ConcurrentModificationError,
)
from quality_lifecycle.domain.errors.persistence import RecordNotFoundError
from quality_lifecycle.domain.models.quality_record import QualityRecord
from quality_lifecycle.domain.models.record_kind import RecordKind, Status


class InMemoryRecordStore(RecordStoreProtocol):
    """In-memory implementation of RecordStoreProtocol.

    It is NOT suitable for production use.

    Attributes:
        _records: Dictionary mapping record.id to QualityRecord.
    """

    def __init__(self) -> None:
        """Initialize the store with empty storage."""
        self._records: dict[str, QualityRecord] = {}
        self._cas_lock = asyncio.Lock()
        self._cas_failure: Exception | None = None
        self._load_failure: Exception | None = None
        self._cas_calls = 0

    async def load(self, record_id: str) -> QualityRecord | None:
        """Retrieve a record by id.

        Raises:
            Exception: The configured load failure, if any.
        """
        if self._load_failure is not None:
            raise self._load_failure
        return self._records.get(record_id)

    async def save(self, record: QualityRecord) -> None:
        """Store a new record.

        Raises:
            ValueError: If record.id already exists.
        """
        if record.id in self._records:
            raise ValueError(f"Record already exists: {record.id}")
        self._records[record.id] = record

    async def compare_and_swap(
        self,
        record_id: str,
        expected_status: Status,
        new_record: QualityRecord,
    ) -> QualityRecord:
        """Replace a record only if it still holds ``expected_status``.

        Raises:
            ConcurrentModificationError: If the stored status differs.
            RecordNotFoundError: If the record does not exist.
            ValueError: If the replacement changes the record's id or kind.
            Exception: The configured CAS failure, if any.
        """
        async with self._cas_lock:
            self._cas_calls += 1
            if self._cas_failure is not None:
                failure, self._cas_failure = self._cas_failure, None
                raise failure

            current = self._records.get(record_id)
            if current is None:
                raise RecordNotFoundError(record_id)
            if new_record.id != record_id or new_record.kind is not current.kind:
                raise ValueError(
                    f"Replacement for {record_id} must keep its id and kind"
                )
            if current.status != expected_status:
                raise ConcurrentModificationError(
                    record_id=record_id,
                    expected_status=expected_status,
                    actual_status=current.status,
                )
            # Yield while holding the lock so racing callers actually interleave
            await asyncio.sleep(0)
            self._records[record_id] = new_record
            return new_record

    # Test helpers

    def fail_next_compare_and_swap(self, error: Exception) -> None:
        """Make the next compare_and_swap call raise ``error``."""
        self._cas_failure = error

    def fail_loads(self, error: Exception | None) -> None:
        """Make every load raise ``error``; pass None to stop."""
        self._load_failure = error

    @property
    def compare_and_swap_calls(self) -> int:
        """Number of compare_and_swap calls, including failed ones."""
        return self._cas_calls

    def get_all(self, kind: RecordKind | None = None) -> list[QualityRecord]:
        """Return stored records, optionally filtered by kind."""
        records = list(self._records.values())
        if kind is not None:
            records = [r for r in records if r.kind is kind]
        return records

    def clear(self) -> None:
        """Clear all stored data and injected failures."""
        self._records.clear()
        self._cas_failure = None
        self._load_failure = None
        self._cas_calls = 0
