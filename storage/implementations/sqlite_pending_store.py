"""
SQLite Pending Upload Store

Durable queue of deferred uploads in a SQLite database.
Single responsibility: Database operations only.
"""

import logging
import sqlite3
import threading
from pathlib import Path
from typing import List, Optional, Union

from config.settings import PENDING_DB_PATH, PENDING_TABLE_NAME
from storage.constants import StoreState
from storage.interfaces.pending_store_interface import (
    PendingUploadStoreInterface,
    StoreUnavailableError,
)
from storage.models.pending_upload import PendingUploadRecord
from storage.utils.path_utils import ensure_directory


class SQLitePendingStore(PendingUploadStoreInterface):
    """
    Pending upload queue in SQLite.

    Responsibilities:
    - Create and maintain database schema
    - Queue, list and remove pending upload records
    - Keep records across process restarts

    Thread Safety:
    - READ operations (list, count) are non-blocking
    - WRITE operations (enqueue, remove) use threading.Lock
    - SQLite's database-level locking handles read/write conflicts
    """

    def __init__(self, db_path: Optional[Union[str, Path]] = None):
        """
        Initialize store.

        Args:
            db_path: Database file (None = PENDING_DB_PATH from settings,
                ":memory:" = throwaway in-memory database)
        """
        self.logger = logging.getLogger(__name__)
        self.db_path = str(db_path or PENDING_DB_PATH)
        self._connection: Optional[sqlite3.Connection] = None
        self.state = StoreState.CLOSED

        # Serialises INSERT/DELETE when events and the uploader's
        # callbacks run on different threads
        self._write_lock = threading.Lock()

    def initialize(self) -> None:
        """Create database and tables if they don't exist"""
        if self.db_path != ":memory:":
            if not ensure_directory(Path(self.db_path).parent):
                self.state = StoreState.ERROR
                raise StoreUnavailableError(
                    f"Cannot create database directory for {self.db_path}"
                )

        try:
            conn = self._get_connection()
            cursor = conn.cursor()

            cursor.execute(
                f"""
                CREATE TABLE IF NOT EXISTS {PENDING_TABLE_NAME} (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    account_name TEXT NOT NULL,
                    file_path TEXT NOT NULL,
                    kind TEXT NOT NULL DEFAULT 'picture',
                    created_at TEXT NOT NULL,
                    UNIQUE (account_name, file_path)
                )
            """,
            )

            conn.commit()
            self.state = StoreState.READY
            self.logger.info(f"Pending upload store initialized (db: {self.db_path})")

        except sqlite3.Error as e:
            self.state = StoreState.ERROR
            raise StoreUnavailableError(f"Failed to initialize database: {e}") from e

    def _get_connection(self) -> sqlite3.Connection:
        """Get database connection (reuses existing or creates new)"""
        if self._connection is None:
            try:
                self._connection = sqlite3.connect(
                    self.db_path,
                    check_same_thread=False,  # Allow multi-threaded access
                )
                # Return rows as dictionaries
                self._connection.row_factory = sqlite3.Row
            except sqlite3.Error as e:
                self.state = StoreState.ERROR
                raise StoreUnavailableError(f"Failed to connect to database: {e}") from e

        return self._connection

    def enqueue(self, record: PendingUploadRecord) -> bool:
        """
        Queue a record.

        Thread-safe: Uses lock to prevent concurrent inserts.
        Duplicates of (account_name, file_path) are ignored.
        """
        with self._write_lock:
            try:
                conn = self._get_connection()
                cursor = conn.cursor()

                data = record.to_dict()

                cursor.execute(
                    f"""
                    INSERT OR IGNORE INTO {PENDING_TABLE_NAME} (
                        account_name, file_path, kind, created_at
                    ) VALUES (?, ?, ?, ?)
                """,
                    (
                        data["account_name"],
                        data["file_path"],
                        data["kind"],
                        data["created_at"],
                    ),
                )

                conn.commit()

                if cursor.rowcount == 0:
                    self.logger.debug(f"Already queued: {record}")
                    return False

                record.id = cursor.lastrowid
                self.logger.debug(f"Queued: {record} (id={record.id})")
                return True

            except sqlite3.Error as e:
                self.state = StoreState.ERROR
                raise StoreUnavailableError(f"Failed to queue {record}: {e}") from e

    def list_all(self) -> List[PendingUploadRecord]:
        """Snapshot of every queued record, oldest first"""
        try:
            conn = self._get_connection()
            cursor = conn.cursor()

            cursor.execute(f"SELECT * FROM {PENDING_TABLE_NAME} ORDER BY id ASC")
            rows = cursor.fetchall()

            return [PendingUploadRecord.from_dict(dict(row)) for row in rows]

        except sqlite3.Error as e:
            self.state = StoreState.ERROR
            raise StoreUnavailableError(f"Failed to list pending uploads: {e}") from e

    def remove(self, record: PendingUploadRecord) -> bool:
        """
        Delete the matching record.

        Thread-safe: Uses lock to prevent concurrent deletes.
        """
        with self._write_lock:
            try:
                conn = self._get_connection()
                cursor = conn.cursor()

                cursor.execute(
                    f"DELETE FROM {PENDING_TABLE_NAME} "
                    f"WHERE account_name = ? AND file_path = ?",
                    (record.account_name, record.file_path),
                )
                conn.commit()

                removed = cursor.rowcount > 0
                if removed:
                    self.logger.debug(f"Removed: {record}")
                return removed

            except sqlite3.Error as e:
                self.state = StoreState.ERROR
                raise StoreUnavailableError(f"Failed to remove {record}: {e}") from e

    def count(self) -> int:
        """Get total number of queued records"""
        try:
            conn = self._get_connection()
            cursor = conn.cursor()

            cursor.execute(f"SELECT COUNT(*) as count FROM {PENDING_TABLE_NAME}")
            row = cursor.fetchone()

            return row["count"] if row else 0

        except sqlite3.Error as e:
            self.state = StoreState.ERROR
            raise StoreUnavailableError(f"Failed to count pending uploads: {e}") from e

    def is_available(self) -> bool:
        """Check database is reachable"""
        try:
            self.count()
            return True
        except StoreUnavailableError as e:
            self.logger.warning(f"Pending upload store unavailable: {e}")
            return False

    def cleanup(self) -> None:
        """Close database connection"""
        if self._connection:
            try:
                self._connection.close()
                self.logger.debug("Database connection closed")
            except sqlite3.Error as e:
                self.logger.warning(f"Error closing database: {e}")
            finally:
                self._connection = None
                self.state = StoreState.CLOSED

    def __del__(self):
        """Destructor - ensure connection is closed"""
        self.cleanup()

    def __repr__(self) -> str:
        return f"SQLitePendingStore(db={self.db_path}, state={self.state.value})"
