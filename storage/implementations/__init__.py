"""
Implementations Package

Concrete pending upload stores.
"""

from storage.implementations.mock_pending_store import MockPendingStore
from storage.implementations.sqlite_pending_store import SQLitePendingStore

__all__ = [
    "MockPendingStore",
    "SQLitePendingStore",
]
