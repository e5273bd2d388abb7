"""
Models Package
"""

from storage.models.pending_upload import PendingUploadRecord

__all__ = [
    "PendingUploadRecord",
]
