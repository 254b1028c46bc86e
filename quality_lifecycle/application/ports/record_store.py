"""Record store port.

Defines the persistence contract the status update orchestrator depends on.
The store is the only place a record's status is written, and every status
write is a compare-and-swap against the status read at validation time.

Developer Golden Rules:
1. FAIL LOUD - Stores raise on errors; the orchestrator maps them to results
2. CAS FOR STATUS - Status writes go through compare_and_swap() only
3. NO BUSINESS RULES - Stores never validate transitions
"""

from __future__ import annotations

from typing import Protocol

from quality_lifecycle.domain.models.quality_record import QualityRecord
from quality_lifecycle.domain.models.record_kind import Status


class RecordStoreProtocol(Protocol):
    """Protocol for quality record persistence.

    Implementations may use a document store, a relational database, or
    in-memory storage.

    Methods:
        load: Retrieve a record by id
        save: Store a new record
        compare_and_swap: Replace a record only if its status is unchanged
    """

    async def load(self, record_id: str) -> QualityRecord | None:
        """Retrieve a record by id.

        Args:
            record_id: The record identifier.

        Returns:
            The record if found, None otherwise.
        """
        ...

    async def save(self, record: QualityRecord) -> None:
        """Store a new record.

        Args:
            record: The record to store.

        Raises:
            ValueError: If a record with the same id already exists.
        """
        ...

    async def compare_and_swap(
        self,
        record_id: str,
        expected_status: Status,
        new_record: QualityRecord,
    ) -> QualityRecord:
        """Atomically replace a record if its stored status is unchanged.

        Args:
            record_id: The record to replace.
            expected_status: The status the stored record must still hold.
            new_record: The replacement record.

        Returns:
            The stored replacement.

        Raises:
            ConcurrentModificationError: If the stored status differs.
            RecordNotFoundError: If the record does not exist.
        """
        ...
