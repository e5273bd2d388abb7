"""
Uploader Tests

Tests cover:
1. Mock uploader records and rejects jobs
2. Queued uploader transfers in the background with retries
3. Local file handling after success
4. Factory creates correct implementations

To run these tests:
    pytest tests/upload/test_uploaders.py -v
"""

import threading
from pathlib import Path

import pytest

from core.constants import LocalBehaviour
from upload import (
    MockUploader,
    QueuedUploader,
    UploaderError,
    UploaderFactory,
    UploadStatus,
    create_uploader,
)

# =============================================================================
# MOCK UPLOADER TESTS
# =============================================================================


@pytest.mark.unit
def test_mock_records_jobs(mock_uploader, make_job, sample_media_file):
    job = make_job(sample_media_file)

    mock_uploader.submit(job)

    assert mock_uploader.get_submitted_jobs() == [job]
    assert mock_uploader.get_last_job() == job
    assert mock_uploader.was_submitted(str(sample_media_file), "alice")
    assert not mock_uploader.was_submitted(str(sample_media_file), "bob")


@pytest.mark.unit
def test_mock_simulated_rejection(make_job, sample_media_file):
    uploader = MockUploader(fail_submissions=True)

    with pytest.raises(UploaderError) as exc_info:
        uploader.submit(make_job(sample_media_file))

    assert exc_info.value.status == UploadStatus.REJECTED
    assert uploader.submitted_jobs == []
    assert uploader.is_available() is False


@pytest.mark.unit
def test_mock_rejects_listed_paths_only(mock_uploader, make_job, tmp_path):
    bad = tmp_path / "bad.jpg"
    good = tmp_path / "good.jpg"
    mock_uploader.fail_paths.add(str(bad))

    with pytest.raises(UploaderError):
        mock_uploader.submit(make_job(bad))
    mock_uploader.submit(make_job(good))

    assert len(mock_uploader.submitted_jobs) == 1


@pytest.mark.unit
def test_mock_clear_history(mock_uploader, make_job, sample_media_file):
    mock_uploader.submit(make_job(sample_media_file))
    mock_uploader.clear_history()

    assert mock_uploader.get_last_job() is None


# =============================================================================
# QUEUED UPLOADER TESTS
# =============================================================================


@pytest.mark.integration
def test_queued_transfer_success(queued_uploader, transfer_tracker, make_job, sample_media_file):
    """
    Test a job is transferred by the worker thread.

    Should:
    - Return from submit() immediately
    - Call the transfer once
    - Record a successful result
    """
    job = make_job(sample_media_file)

    queued_uploader.submit(job)

    assert queued_uploader.wait_until_idle(timeout=5)
    assert transfer_tracker.jobs == [job]
    (result,) = queued_uploader.results
    assert result.success is True
    assert result.status == UploadStatus.SUCCESS
    assert queued_uploader.pending_count() == 0


@pytest.mark.integration
def test_queued_retries_then_succeeds(queued_uploader, transfer_tracker, make_job, sample_media_file):
    transfer_tracker.failures_left = 2
    transfer_tracker.raise_errors = True

    queued_uploader.submit(make_job(sample_media_file))

    assert queued_uploader.wait_until_idle(timeout=5)
    assert len(transfer_tracker.jobs) == 3
    assert queued_uploader.results[0].success is True


@pytest.mark.integration
def test_queued_gives_up_after_max_attempts(queued_uploader, transfer_tracker, make_job, sample_media_file):
    transfer_tracker.failures_left = 10

    queued_uploader.submit(make_job(sample_media_file))

    assert queued_uploader.wait_until_idle(timeout=5)
    assert len(transfer_tracker.jobs) == 3
    result = queued_uploader.results[0]
    assert result.success is False
    assert result.status == UploadStatus.FAILED


@pytest.mark.integration
def test_queued_missing_file(queued_uploader, transfer_tracker, make_job, tmp_path):
    queued_uploader.submit(make_job(tmp_path / "deleted.jpg"))

    assert queued_uploader.wait_until_idle(timeout=5)
    assert transfer_tracker.jobs == []
    assert queued_uploader.results[0].status == UploadStatus.INVALID_FILE


@pytest.mark.integration
def test_queued_move_after_success(queued_uploader, make_job, sample_media_file, tmp_path):
    """MOVE puts the uploaded file under move_dir/<account>/"""
    job = make_job(sample_media_file, local_behaviour=LocalBehaviour.MOVE)

    queued_uploader.submit(job)

    assert queued_uploader.wait_until_idle(timeout=5)
    assert not sample_media_file.exists()
    assert (tmp_path / "uploaded" / "alice" / sample_media_file.name).exists()


@pytest.mark.integration
def test_queued_forget_leaves_file(queued_uploader, make_job, sample_media_file):
    queued_uploader.submit(make_job(sample_media_file))

    assert queued_uploader.wait_until_idle(timeout=5)
    assert sample_media_file.exists()


@pytest.mark.integration
def test_queued_move_waits_for_every_account(make_job, sample_media_file, tmp_path):
    """
    Should:
    - Transfer the same file to both accounts
    - Move it only after the last job for that file finished
    """
    release = threading.Event()
    sent = []

    def gated_transfer(job):
        release.wait(timeout=5)
        sent.append((job.account_name, Path(job.local_file_path).exists()))
        return True

    uploader = QueuedUploader(
        transfer=gated_transfer,
        move_dir=tmp_path / "uploaded",
        retry_delay_seconds=0,
    )
    uploader.start()
    uploader.submit(make_job(sample_media_file, "alice", local_behaviour=LocalBehaviour.MOVE))
    uploader.submit(make_job(sample_media_file, "bob", local_behaviour=LocalBehaviour.MOVE))
    release.set()

    assert uploader.wait_until_idle(timeout=5)
    uploader.stop()

    assert sent == [("alice", True), ("bob", True)]
    assert [result.status for result in uploader.results] == [
        UploadStatus.SUCCESS,
        UploadStatus.SUCCESS,
    ]
    assert not sample_media_file.exists()
    assert (tmp_path / "uploaded" / "bob" / sample_media_file.name).exists()


@pytest.mark.integration
def test_queued_move_skipped_when_another_account_failed(
    queued_uploader, transfer_tracker, make_job, sample_media_file
):
    """A file is kept when one of its uploads failed"""
    release = threading.Event()
    blocker = make_job(sample_media_file, "carol")

    def gated_transfer(job):
        if job is blocker:
            release.wait(timeout=5)
            return True
        return transfer_tracker(job)

    queued_uploader.transfer = gated_transfer
    queued_uploader.submit(blocker)
    transfer_tracker.failures_left = 3
    queued_uploader.submit(make_job(sample_media_file, "alice"))
    queued_uploader.submit(make_job(sample_media_file, "bob", local_behaviour=LocalBehaviour.MOVE))
    release.set()

    assert queued_uploader.wait_until_idle(timeout=5)
    assert [result.success for result in queued_uploader.results] == [True, False, True]
    assert sample_media_file.exists()


@pytest.mark.integration
def test_queued_stop_releases_waiters(make_job, sample_media_file, tmp_path):
    """
    Should:
    - Drop jobs still queued when stopped
    - Let wait_until_idle() return once the running transfer ends
    """
    started = threading.Event()
    release = threading.Event()
    sent = []

    def gated_transfer(job):
        started.set()
        release.wait(timeout=5)
        sent.append(job.account_name)
        return True

    uploader = QueuedUploader(transfer=gated_transfer, retry_delay_seconds=0)
    uploader.start()
    for name in ("alice", "bob", "carol"):
        uploader.submit(make_job(sample_media_file, name))

    assert started.wait(timeout=5)

    uploader.stop(timeout=0.1)
    release.set()

    assert uploader.wait_until_idle(timeout=5)
    assert uploader.pending_count() == 0
    assert sent == ["alice"]


@pytest.mark.unit
def test_queued_stop_with_empty_queue(queued_uploader):
    queued_uploader.stop()

    assert queued_uploader.wait_until_idle(timeout=1)
    assert queued_uploader.pending_count() == 0


@pytest.mark.integration
def test_queued_result_callback(transfer_tracker, make_job, sample_media_file):
    results = []
    uploader = QueuedUploader(
        transfer=transfer_tracker,
        retry_delay_seconds=0,
        on_result=results.append,
    )
    uploader.start()

    uploader.submit(make_job(sample_media_file))
    assert uploader.wait_until_idle(timeout=5)
    uploader.stop()

    assert len(results) == 1
    assert results[0].success


@pytest.mark.unit
def test_queued_rejects_when_stopped(transfer_tracker, make_job, sample_media_file):
    uploader = QueuedUploader(transfer=transfer_tracker)

    assert uploader.is_available() is False
    with pytest.raises(UploaderError) as exc_info:
        uploader.submit(make_job(sample_media_file))
    assert exc_info.value.status == UploadStatus.REJECTED


# =============================================================================
# FACTORY TESTS
# =============================================================================


@pytest.mark.unit
def test_factory_force_mock():
    assert isinstance(create_uploader(force_mock=True), MockUploader)


@pytest.mark.unit
def test_factory_auto_without_transport():
    """No transport configured falls back to the mock uploader"""
    assert isinstance(create_uploader(), MockUploader)


@pytest.mark.unit
def test_factory_queued_without_transport():
    with pytest.raises(RuntimeError):
        UploaderFactory.create_uploader(mode="queued")


@pytest.mark.unit
def test_factory_queued_is_started(transfer_tracker):
    uploader = create_uploader(transfer=transfer_tracker)

    assert isinstance(uploader, QueuedUploader)
    assert uploader.is_available()
    uploader.stop()
