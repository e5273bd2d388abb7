"""
Implementations Package

Concrete uploader implementations.
"""

from upload.implementations.mock_uploader import MockUploader
from upload.implementations.queued_uploader import QueuedUploader

__all__ = [
    "MockUploader",
    "QueuedUploader",
]
