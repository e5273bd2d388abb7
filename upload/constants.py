"""
Upload Constants

Centralized definitions for the upload module.
"""

from enum import Enum

# =============================================================================
# UPLOAD JOB DEFAULTS
# =============================================================================

# Timestamp in names generated for captures without a usable file name
GENERATED_NAME_TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"

# Remote paths always use forward slashes
REMOTE_PATH_SEPARATOR = "/"

# =============================================================================
# UPLOAD STATUS
# =============================================================================


class UploadStatus(Enum):
    """Upload operation status codes"""

    SUCCESS = "success"
    FAILED = "failed"
    INVALID_FILE = "invalid_file"
    REJECTED = "rejected"  # Uploader not accepting jobs
