"""
Uploader Interface

Abstract interface for the component that performs file transfers.
Follows Dependency Inversion Principle - the scheduler hands jobs to this
abstraction and never waits for the transfer itself.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from core.constants import LocalBehaviour, MediaKind
from upload.constants import UploadStatus


@dataclass(frozen=True)
class UploadJob:
    """
    Descriptor of one file transfer.

    Attributes:
        account_name: Account that receives the file
        local_file_path: File to upload
        remote_file_path: Destination path in the account
        mime_type: MIME type (optional)
        local_behaviour: What to do with the local file after success
        kind: Kind of media being uploaded
        instant_upload: True for capture-triggered uploads
    """

    account_name: str
    local_file_path: str
    remote_file_path: str
    mime_type: Optional[str] = None
    local_behaviour: LocalBehaviour = LocalBehaviour.FORGET
    kind: MediaKind = MediaKind.PICTURE
    instant_upload: bool = True

    def to_dict(self) -> dict:
        """Convert to dictionary for logging/transport"""
        return {
            "account_name": self.account_name,
            "local_file_path": self.local_file_path,
            "remote_file_path": self.remote_file_path,
            "mime_type": self.mime_type,
            "local_behaviour": self.local_behaviour.value,
            "kind": self.kind.value,
            "instant_upload": self.instant_upload,
        }


@dataclass
class UploadResult:
    """
    Result of a transfer, reported by uploaders that run jobs themselves.

    Attributes:
        job: Transferred job
        success: True if transfer completed successfully
        status: Upload status code
        error_message: Error description (if failed)
        upload_duration: Time taken in seconds
    """

    job: UploadJob
    success: bool
    status: UploadStatus = UploadStatus.SUCCESS
    error_message: Optional[str] = None
    upload_duration: float = 0.0


class UploaderInterface(ABC):
    """
    Abstract base class for uploaders.

    submit() is fire-and-forget: it returns as soon as the job is accepted.
    Transport-level retry and backoff belong to the implementation.
    """

    @abstractmethod
    def submit(self, job: UploadJob) -> None:
        """
        Hand a job over for transfer.

        Args:
            job: Job to transfer

        Raises:
            UploaderError: If the job cannot be accepted

        Example:
            uploader.submit(builder.build(account, info, MediaKind.PICTURE, policy))
        """

    @abstractmethod
    def is_available(self) -> bool:
        """
        Check if uploader accepts jobs.

        Returns:
            True if submit() would accept a job
        """


class UploaderError(Exception):
    """
    Exception raised for upload-related errors.

    Examples:
    - Uploader stopped
    - Transfer failed
    - Local file missing
    """

    def __init__(self, message: str, status: UploadStatus = UploadStatus.FAILED):
        super().__init__(message)
        self.status = status
