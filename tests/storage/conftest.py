"""
Storage Test Configuration and Fixtures

This file contains pytest fixtures shared across storage tests.

To use pytest:
    pip install pytest
    pytest tests/storage/
"""

import tempfile
from pathlib import Path

import pytest

from core.constants import MediaKind
from storage import MockPendingStore, PendingUploadRecord, SQLitePendingStore

# =============================================================================
# STORE FIXTURES
# =============================================================================


@pytest.fixture
def temp_storage_dir():
    """
    Provide a temporary directory for storage tests.

    Automatically cleaned up after test.
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def db_path(temp_storage_dir):
    """Database file inside a not-yet-existing subdirectory"""
    return temp_storage_dir / "instant_upload" / "pending_uploads.db"


@pytest.fixture
def sqlite_store(db_path):
    """
    Provide an initialized SQLitePendingStore on a temp file.

    Usage:
        def test_queue(sqlite_store):
            sqlite_store.enqueue(record)
    """
    store = SQLitePendingStore(db_path)
    store.initialize()
    yield store
    store.cleanup()


@pytest.fixture
def mock_store():
    """Provide a fresh, initialized MockPendingStore"""
    store = MockPendingStore()
    store.initialize()
    yield store
    store.cleanup()


@pytest.fixture(params=["sqlite", "mock"])
def any_store(request, db_path):
    """
    Run a test against both store implementations.

    Both must honour the same contract.
    """
    if request.param == "sqlite":
        store = SQLitePendingStore(db_path)
    else:
        store = MockPendingStore()
    store.initialize()
    yield store
    store.cleanup()


# =============================================================================
# RECORD FIXTURES
# =============================================================================


@pytest.fixture
def make_record():
    """
    Factory for pending upload records.

    Usage:
        def test_x(make_record):
            record = make_record("alice", "/sdcard/IMG_1.jpg")
    """

    def _make(account_name="alice", file_path="/sdcard/DCIM/IMG_0001.jpg",
              kind=MediaKind.PICTURE):
        return PendingUploadRecord(account_name, file_path, kind)

    return _make


# =============================================================================
# PYTEST CONFIGURATION
# =============================================================================

def pytest_configure(config):
    """
    Configure pytest with custom markers.

    Same markers as the other test packages for consistency.
    """
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Full integration tests")
