"""
Queued Uploader Implementation

Background uploader: submit() only queues the job, a worker thread runs
the transfers one at a time (oldest first) with a small retry budget.
The byte transfer itself is delegated to a transfer callable, so any
transport can be plugged in.
"""

import logging
import queue
import shutil
import threading
import time
from pathlib import Path
from typing import Callable, Dict, List, Optional, Set

from config.settings import UPLOAD_QUEUE_POLL_SECONDS
from core.constants import LocalBehaviour
from storage.utils.path_utils import ensure_directory
from upload.constants import UploadStatus
from upload.interfaces.uploader_interface import (
    UploaderError,
    UploaderInterface,
    UploadJob,
    UploadResult,
)

# transfer(job) -> True on success; exceptions count as failures
TransferFunction = Callable[[UploadJob], bool]


class QueuedUploader(UploaderInterface):
    """
    Uploader with a background transfer queue.

    Usage:
        uploader = QueuedUploader(transfer=webdav_put, move_dir=Path("uploaded"))
        uploader.start()
        uploader.submit(job)       # Returns immediately
        uploader.wait_until_idle(timeout=30)
        uploader.stop()
    """

    def __init__(
        self,
        transfer: TransferFunction,
        move_dir: Optional[Path] = None,
        max_attempts: int = 3,
        retry_delay_seconds: float = 5.0,
        on_result: Optional[Callable[[UploadResult], None]] = None,
    ):
        """
        Initialize queued uploader.

        Args:
            transfer: Callable performing one transfer
            move_dir: Local folder for LocalBehaviour.MOVE (None = never move)
            max_attempts: Transfer attempts per job
            retry_delay_seconds: Wait between attempts
            on_result: Called with every finished job's result
        """
        self.logger = logging.getLogger(__name__)
        self.transfer = transfer
        self.move_dir = Path(move_dir) if move_dir else None
        self.max_attempts = max(1, max_attempts)
        self.retry_delay_seconds = retry_delay_seconds
        self.on_result = on_result

        self._queue: queue.Queue = queue.Queue()
        self._worker_thread: Optional[threading.Thread] = None
        self._running = False

        # Jobs queued or in transfer, guarded by _idle
        self._outstanding = 0
        self._idle = threading.Condition()

        # Per local file, guarded by _idle: unfinished jobs, successful MOVE
        # job waiting for the others, files with a failed or dropped job
        self._path_jobs: Dict[str, int] = {}
        self._pending_moves: Dict[str, UploadJob] = {}
        self._failed_paths: Set[str] = set()

        self.results: List[UploadResult] = []

    # =========================================================================
    # LIFECYCLE
    # =========================================================================

    def start(self) -> None:
        """Start background transfer worker thread"""
        if self._running:
            return

        self._running = True
        self._worker_thread = threading.Thread(
            target=self._upload_worker,
            daemon=True,
            name="UploadWorker",
        )
        self._worker_thread.start()
        self.logger.info("Upload worker started")

    def stop(self, timeout: float = 5.0) -> None:
        """
        Stop the worker thread.

        Jobs still queued are dropped unsent; deferred records are the
        durable copy of unsent work. A transfer already running finishes
        in the background when the join times out.
        """
        self._running = False
        if self._worker_thread and self._worker_thread.is_alive():
            self.logger.info("Waiting for upload worker to stop...")
            self._worker_thread.join(timeout=timeout)
        self._worker_thread = None

        dropped = 0
        while True:
            try:
                job = self._queue.get_nowait()
            except queue.Empty:
                break
            self._release_path(job, None)
            dropped += 1

        if dropped:
            with self._idle:
                self._outstanding -= dropped
                self._idle.notify_all()
            self.logger.warning(f"Dropped {dropped} queued upload(s) at stop")

    def wait_until_idle(self, timeout: Optional[float] = None) -> bool:
        """
        Block until every submitted job has finished.

        Returns:
            True if idle, False if the timeout expired first
        """
        with self._idle:
            return self._idle.wait_for(lambda: self._outstanding == 0, timeout=timeout)

    # =========================================================================
    # UPLOADER INTERFACE
    # =========================================================================

    def submit(self, job: UploadJob) -> None:
        if not self._running:
            raise UploaderError(
                "Uploader is not running, call start() first",
                status=UploadStatus.REJECTED,
            )

        with self._idle:
            self._outstanding += 1
            path = job.local_file_path
            self._path_jobs[path] = self._path_jobs.get(path, 0) + 1
        self._queue.put(job)
        self.logger.info(
            f"Queued upload: {job.local_file_path} → "
            f"{job.account_name}:{job.remote_file_path}"
        )

    def is_available(self) -> bool:
        return self._running

    def pending_count(self) -> int:
        """Number of jobs queued or in transfer"""
        with self._idle:
            return self._outstanding

    # =========================================================================
    # WORKER
    # =========================================================================

    def _upload_worker(self) -> None:
        """Process queued jobs until stopped"""
        self.logger.info("Upload worker thread started")

        while self._running:
            try:
                job = self._queue.get(timeout=UPLOAD_QUEUE_POLL_SECONDS)
            except queue.Empty:
                continue

            result: Optional[UploadResult] = None
            try:
                result = self._process_upload(job)
                self.results.append(result)
                if self.on_result:
                    self.on_result(result)
            except Exception as e:
                self.logger.error(f"Upload worker error: {e}", exc_info=True)
            finally:
                self._release_path(job, result)
                with self._idle:
                    self._outstanding -= 1
                    self._idle.notify_all()

        self.logger.info("Upload worker thread stopped")

    def _process_upload(self, job: UploadJob) -> UploadResult:
        """Transfer one job, retrying up to max_attempts"""
        start_time = time.time()

        if not Path(job.local_file_path).is_file():
            self.logger.error(f"Upload skipped, file missing: {job.local_file_path}")
            return UploadResult(
                job=job,
                success=False,
                status=UploadStatus.INVALID_FILE,
                error_message="Local file not found",
            )

        error_message = None
        for attempt in range(1, self.max_attempts + 1):
            try:
                if self.transfer(job):
                    duration = time.time() - start_time
                    self.logger.info(
                        f"✅ Upload successful: {job.remote_file_path} "
                        f"({job.account_name}, {duration:.1f}s)"
                    )
                    return UploadResult(job=job, success=True, upload_duration=duration)
                error_message = "Transfer reported failure"
            except Exception as e:
                error_message = str(e)

            self.logger.warning(
                f"Upload attempt {attempt}/{self.max_attempts} failed: "
                f"{job.local_file_path} - {error_message}"
            )
            if attempt < self.max_attempts and self._running:
                time.sleep(self.retry_delay_seconds)

        self.logger.error(f"❌ Upload failed: {job.local_file_path} - {error_message}")
        return UploadResult(
            job=job,
            success=False,
            status=UploadStatus.FAILED,
            error_message=error_message,
            upload_duration=time.time() - start_time,
        )

    def _release_path(self, job: UploadJob, result: Optional[UploadResult]) -> None:
        """
        Account for a finished (or dropped) job on its local file.

        The file is moved only once every job queued for it has finished,
        and only if all of them succeeded, so one account's MOVE never
        pulls the file away from another account's upload.

        Args:
            job: Finished job
            result: Its result, None if it never ran
        """
        path = job.local_file_path
        succeeded = result is not None and result.success

        with self._idle:
            if succeeded and job.local_behaviour == LocalBehaviour.MOVE:
                self._pending_moves[path] = job
            elif not succeeded:
                self._failed_paths.add(path)

            remaining = self._path_jobs.get(path, 1) - 1
            if remaining > 0:
                self._path_jobs[path] = remaining
                return

            self._path_jobs.pop(path, None)
            move_job = self._pending_moves.pop(path, None)
            failed = path in self._failed_paths
            self._failed_paths.discard(path)

        if move_job is None:
            return
        if failed:
            self.logger.info(f"Keeping {path}: not every account received it")
            return
        self._apply_local_behaviour(move_job)

    def _apply_local_behaviour(self, job: UploadJob) -> None:
        """Move the local file into the job account's upload folder"""
        if job.local_behaviour != LocalBehaviour.MOVE or self.move_dir is None:
            return

        target_dir = self.move_dir / job.account_name
        if not ensure_directory(target_dir):
            return

        source = Path(job.local_file_path)
        try:
            shutil.move(str(source), str(target_dir / source.name))
            self.logger.debug(f"Moved {source} to {target_dir}")
        except OSError as e:
            self.logger.error(f"Failed to move {source} after upload: {e}")
