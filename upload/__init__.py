"""
Upload Module

Job descriptors, remote naming and uploader implementations for instant
uploads.

Public API:
    - UploadJob: Transfer descriptor
    - UploadJobBuilder: Builds jobs from (account, media, policy)
    - RemoteNamingPolicy: Remote destination paths
    - UploaderInterface / UploaderError: Uploader contract
    - MockUploader / QueuedUploader: Implementations
    - create_uploader: Factory function

Usage:
    from upload import UploadJobBuilder, create_uploader

    uploader = create_uploader(force_mock=True)
    uploader.submit(UploadJobBuilder().build(account, info, kind, policy))
"""

from upload.constants import UploadStatus
from upload.factory import UploaderFactory, create_uploader
from upload.implementations.mock_uploader import MockUploader
from upload.implementations.queued_uploader import QueuedUploader
from upload.interfaces.uploader_interface import (
    UploaderError,
    UploaderInterface,
    UploadJob,
    UploadResult,
)
from upload.job_builder import UploadJobBuilder
from upload.naming import RemoteNamingPolicy

# Public API
__all__ = [
    "MockUploader",
    "QueuedUploader",
    "RemoteNamingPolicy",
    "UploadJob",
    "UploadJobBuilder",
    "UploadResult",
    "UploadStatus",
    "UploaderError",
    "UploaderFactory",
    "UploaderInterface",
    "create_uploader",
]
