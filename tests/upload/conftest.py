"""
Upload Test Configuration and Fixtures

To run:
    pytest tests/upload/
"""

import pytest

from accounts import Account
from content import MediaInfo
from core.constants import MediaKind
from upload import MockUploader, QueuedUploader, UploadJob


@pytest.fixture
def mock_uploader():
    """Provide a fresh MockUploader"""
    return MockUploader()


@pytest.fixture
def account():
    return Account("alice@cloud.example.com")


@pytest.fixture
def media_info():
    """Resolved picture details (file does not need to exist)"""
    return MediaInfo(
        file_path="/sdcard/DCIM/Camera/IMG_0001.jpg",
        display_name="IMG_0001.jpg",
        mime_type="image/jpeg",
    )


@pytest.fixture
def sample_media_file(tmp_path):
    """A small real file to transfer"""
    media = tmp_path / "IMG_0042.jpg"
    media.write_bytes(b"fake jpeg data")
    return media


@pytest.fixture
def make_job():
    """
    Factory for upload jobs.

    Usage:
        def test_x(make_job, sample_media_file):
            job = make_job(sample_media_file)
    """

    def _make(local_path, account_name="alice", **kwargs):
        return UploadJob(
            account_name=account_name,
            local_file_path=str(local_path),
            remote_file_path=f"/InstantUpload/{local_path.name}",
            **kwargs,
        )

    return _make


@pytest.fixture
def transfer_tracker():
    """
    Transfer callable that records jobs and can be told to fail.

    Usage:
        def test_x(transfer_tracker):
            uploader = QueuedUploader(transfer=transfer_tracker)
            transfer_tracker.failures_left = 1
    """

    class TransferTracker:
        def __init__(self):
            self.jobs = []
            self.failures_left = 0
            self.raise_errors = False

        def __call__(self, job):
            self.jobs.append(job)
            if self.failures_left > 0:
                self.failures_left -= 1
                if self.raise_errors:
                    raise ConnectionError("Simulated network error")
                return False
            return True

    return TransferTracker()


@pytest.fixture
def queued_uploader(transfer_tracker, tmp_path):
    """
    Provide a started QueuedUploader without retry delays.

    Stopped automatically after the test.
    """
    uploader = QueuedUploader(
        transfer=transfer_tracker,
        move_dir=tmp_path / "uploaded",
        max_attempts=3,
        retry_delay_seconds=0,
    )
    uploader.start()
    yield uploader
    uploader.stop()


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Full integration tests")
