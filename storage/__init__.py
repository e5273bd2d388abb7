"""
Storage Module

Durable queue of uploads deferred until network conditions allow them.

Architecture:
- interfaces/: Abstract base classes (contracts)
- implementations/: Concrete implementations (SQLite and mock)
- models/: Data structures
- utils/: Shared path utilities
"""

from storage.constants import StoreState
from storage.factory import StorageFactory, create_pending_store
from storage.implementations.mock_pending_store import MockPendingStore
from storage.implementations.sqlite_pending_store import SQLitePendingStore
from storage.interfaces.pending_store_interface import (
    PendingUploadStoreInterface,
    StorageError,
    StoreUnavailableError,
)
from storage.models.pending_upload import PendingUploadRecord

# Public API - what users import
__all__ = [
    "MockPendingStore",
    # Models
    "PendingUploadRecord",
    # Interfaces
    "PendingUploadStoreInterface",
    "SQLitePendingStore",
    "StorageError",
    # Factory for creating stores
    "StorageFactory",
    "StoreState",
    "StoreUnavailableError",
    "create_pending_store",
]
