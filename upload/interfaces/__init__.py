"""
Interfaces Package

Abstract interfaces for upload implementations.
"""

from upload.interfaces.uploader_interface import (
    UploaderError,
    UploaderInterface,
    UploadJob,
    UploadResult,
)

__all__ = [
    "UploaderInterface",
    "UploadJob",
    "UploadResult",
    "UploaderError",
]
