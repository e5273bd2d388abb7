"""
Interfaces Package

Abstract interfaces for pending upload storage.
"""

from storage.interfaces.pending_store_interface import (
    PendingUploadStoreInterface,
    StorageError,
    StoreUnavailableError,
)

__all__ = [
    "PendingUploadStoreInterface",
    "StorageError",
    "StoreUnavailableError",
]
