"""
Storage Factory

Factory pattern for creating pending upload store implementations.
"""

import logging
from pathlib import Path
from typing import Literal, Optional, Union

from storage.implementations.mock_pending_store import MockPendingStore
from storage.implementations.sqlite_pending_store import SQLitePendingStore
from storage.interfaces.pending_store_interface import PendingUploadStoreInterface

# Type alias for better type hints
StorageMode = Literal["auto", "sqlite", "mock"]


class StorageFactory:
    """
    Factory for creating pending upload stores.

    Usage:
        # Real store at the configured path
        store = StorageFactory.create_store()

        # Force mock mode (useful for testing)
        store = StorageFactory.create_store(mode="mock")
    """

    _logger = logging.getLogger(__name__)

    @classmethod
    def create_store(
        cls,
        mode: StorageMode = "auto",
        db_path: Optional[Union[str, Path]] = None,
        initialize: bool = True,
    ) -> PendingUploadStoreInterface:
        """
        Create a pending upload store.

        Args:
            mode: "auto"/"sqlite" (SQLite file), "mock" (in memory)
            db_path: Database path (None = PENDING_DB_PATH from settings)
            initialize: If True, call initialize() before returning

        Returns:
            PendingUploadStoreInterface implementation

        Raises:
            StoreUnavailableError: If initialize=True and the store cannot open
        """
        if mode == "mock":
            cls._logger.info("Creating Mock Pending Store (forced)")
            store: PendingUploadStoreInterface = MockPendingStore()
        else:
            # Local SQLite is always available, no fallback needed
            cls._logger.info("Creating SQLite Pending Store")
            store = SQLitePendingStore(db_path)

        if initialize:
            store.initialize()

        return store


# Convenience function for quick creation


def create_pending_store(
    force_mock: bool = False,
    db_path: Optional[Union[str, Path]] = None,
) -> PendingUploadStoreInterface:
    """
    Quick store creation with simple mock override.

    Args:
        force_mock: If True, always use mock (good for testing)
        db_path: Database path

    Returns:
        Initialized pending upload store

    Example:
        store = create_pending_store()
        store.enqueue(PendingUploadRecord("alice", "/sdcard/DCIM/IMG_1.jpg"))
    """
    mode = "mock" if force_mock else "auto"
    return StorageFactory.create_store(mode=mode, db_path=db_path)
