"""
Pending Upload Store Interface

Abstract interface for the durable queue of deferred uploads, following the
Dependency Inversion Principle. The scheduler depends on this interface, not
on SQLite.
"""

from abc import ABC, abstractmethod
from typing import List

from storage.models.pending_upload import PendingUploadRecord


class PendingUploadStoreInterface(ABC):
    """
    Abstract base class for pending upload stores.

    Any implementation must keep records across process restarts
    (except test doubles) and return them in insertion order.
    """

    @abstractmethod
    def initialize(self) -> None:
        """
        Prepare the store (create database, schema, directories).

        Raises:
            StoreUnavailableError: If the store cannot be opened
        """

    @abstractmethod
    def enqueue(self, record: PendingUploadRecord) -> bool:
        """
        Queue a record.

        Queuing a record that is already present is tolerated and leaves
        a single entry.

        Args:
            record: Record to queue

        Returns:
            True if a new entry was stored, False if it was already queued

        Raises:
            StoreUnavailableError: If the record cannot be persisted
        """

    @abstractmethod
    def list_all(self) -> List[PendingUploadRecord]:
        """
        Snapshot every queued record.

        Returns:
            Records in insertion order

        Raises:
            StoreUnavailableError: If the store cannot be read
        """

    @abstractmethod
    def remove(self, record: PendingUploadRecord) -> bool:
        """
        Delete the record matching (account_name, file_path).

        Args:
            record: Record to delete

        Returns:
            True if a record was deleted, False if none matched

        Raises:
            StoreUnavailableError: If the store cannot be written
        """

    @abstractmethod
    def count(self) -> int:
        """
        Number of queued records.

        Raises:
            StoreUnavailableError: If the store cannot be read
        """

    @abstractmethod
    def is_available(self) -> bool:
        """
        Check if the store is usable.

        Returns:
            True if ready, False otherwise
        """

    @abstractmethod
    def cleanup(self) -> None:
        """
        Release store resources (close database connections, etc.).
        """


class StorageError(Exception):
    """
    Custom exception for storage-related errors.

    Makes it easy to catch storage-specific errors:
        except StorageError as e:
            logger.error(f"Storage failed: {e}")
    """


class StoreUnavailableError(StorageError):
    """The pending upload store could not be read or written"""
