"""
Mock Uploader Implementation

Records submitted jobs instead of transferring anything.
Used by tests and when no transport is configured.
"""

import logging
from typing import List, Optional

from upload.constants import UploadStatus
from upload.interfaces.uploader_interface import (
    UploaderError,
    UploaderInterface,
    UploadJob,
)


class MockUploader(UploaderInterface):
    """
    Mock uploader for testing.

    Useful for:
    - Unit tests
    - Running the scheduler without a configured transport
    - CI/CD pipelines
    """

    def __init__(self, fail_submissions: bool = False):
        """
        Initialize mock uploader.

        Args:
            fail_submissions: If True, submit() raises UploaderError

        Example:
            uploader = MockUploader()
            uploader = MockUploader(fail_submissions=True)  # Test error handling
        """
        self.logger = logging.getLogger(__name__)
        self.fail_submissions = fail_submissions

        # Only jobs whose path is listed here are rejected (if set)
        self.fail_paths: set = set()

        # Track submissions for testing
        self.submitted_jobs: List[UploadJob] = []

        self.logger.info(f"Mock Uploader initialized (fail: {fail_submissions})")

    def submit(self, job: UploadJob) -> None:
        if self.fail_submissions or job.local_file_path in self.fail_paths:
            raise UploaderError(
                f"Simulated submit failure: {job.local_file_path}",
                status=UploadStatus.REJECTED,
            )

        self.submitted_jobs.append(job)
        self.logger.info(
            f"[MOCK] Job accepted: {job.local_file_path} → "
            f"{job.account_name}:{job.remote_file_path}"
        )

    def is_available(self) -> bool:
        """Mock uploader is available unless told to fail"""
        return not self.fail_submissions

    # =========================================================================
    # TESTING HELPER METHODS
    # =========================================================================

    def get_submitted_jobs(self) -> List[UploadJob]:
        """Get list of all submitted jobs"""
        return self.submitted_jobs.copy()

    def clear_history(self) -> None:
        """Clear submission history"""
        self.submitted_jobs.clear()
        self.logger.debug("[MOCK] Submission history cleared")

    def get_last_job(self) -> Optional[UploadJob]:
        """Get most recent job, or None"""
        return self.submitted_jobs[-1] if self.submitted_jobs else None

    def was_submitted(self, file_path: str, account_name: Optional[str] = None) -> bool:
        """
        Check if a file was submitted.

        Args:
            file_path: Local path to check
            account_name: Also require this account (optional)
        """
        return any(
            job.local_file_path == file_path
            and (account_name is None or job.account_name == account_name)
            for job in self.submitted_jobs
        )
