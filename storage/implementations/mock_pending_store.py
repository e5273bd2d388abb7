"""
Mock Pending Upload Store

In-memory store for testing without a database.
Can simulate an unavailable store.
"""

import logging
from typing import Dict, List, Tuple

from storage.constants import StoreState
from storage.interfaces.pending_store_interface import (
    PendingUploadStoreInterface,
    StoreUnavailableError,
)
from storage.models.pending_upload import PendingUploadRecord


class MockPendingStore(PendingUploadStoreInterface):
    """
    Mock pending upload store for testing.

    Keeps records in insertion order in memory. Set fail_operations
    (all operations) or fail_removals (remove only) to simulate disk errors.
    """

    def __init__(self):
        self.logger = logging.getLogger(__name__)

        # Python dicts keep insertion order
        self._records: Dict[Tuple[str, str], PendingUploadRecord] = {}
        self._next_id = 1
        self.state = StoreState.CLOSED

        self.fail_operations = False
        self.fail_removals = False

        # Track operations for test verification
        self.operation_log: List[str] = []

        self.logger.info("[MOCK] Pending store initialized (simulation mode)")

    def _log_operation(self, operation: str) -> None:
        """Log operation for test verification"""
        self.operation_log.append(operation)
        self.logger.debug(f"[MOCK] {operation}")

    def _check(self, operation: str) -> None:
        if self.fail_operations:
            self.state = StoreState.ERROR
            raise StoreUnavailableError(f"Simulated store failure during {operation}")

    def initialize(self) -> None:
        self._check("initialize")
        self.state = StoreState.READY
        self._log_operation("initialize")

    def enqueue(self, record: PendingUploadRecord) -> bool:
        self._check("enqueue")

        if record.key in self._records:
            self._log_operation(f"enqueue (duplicate): {record.file_path}")
            return False

        record.id = self._next_id
        self._next_id += 1
        self._records[record.key] = record
        self._log_operation(f"enqueue: {record.file_path}")
        return True

    def list_all(self) -> List[PendingUploadRecord]:
        self._check("list_all")
        return list(self._records.values())

    def remove(self, record: PendingUploadRecord) -> bool:
        self._check("remove")
        if self.fail_removals:
            raise StoreUnavailableError("Simulated store failure during remove")

        removed = self._records.pop(record.key, None) is not None
        self._log_operation(f"remove: {record.file_path} ({removed})")
        return removed

    def count(self) -> int:
        self._check("count")
        return len(self._records)

    def is_available(self) -> bool:
        return not self.fail_operations

    def cleanup(self) -> None:
        self.state = StoreState.CLOSED
        self._log_operation("cleanup")
