"""
Central Configuration File

ALL static configuration values live here. This is the single source of truth.

Guidelines:
- Secrets and machine-specific paths should be in .env, NOT here
- Import these settings in modules: from config.settings import PENDING_DB_PATH
- Per-deployment upload policy (toggles, accounts) lives in the YAML file
  pointed to by INSTANT_UPLOAD_CONFIG_PATH, see scheduling/config.py
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# =============================================================================
# INSTANT UPLOAD CONFIGURATION
# =============================================================================

# YAML file with upload toggles, Wi-Fi restrictions and account selection
INSTANT_UPLOAD_CONFIG_PATH = Path(
    os.getenv("INSTANT_UPLOAD_CONFIG_PATH", "config/instant_upload.yaml"),
)

# Remote folders (same default for pictures and videos)
DEFAULT_PICTURE_UPLOAD_PATH = "/InstantUpload"
DEFAULT_VIDEO_UPLOAD_PATH = "/InstantUpload"

# Local behaviour after a successful upload: "NOTHING" (forget) or "MOVE"
DEFAULT_LOCAL_BEHAVIOUR = "NOTHING"

# Where MOVE puts local files once uploaded
LOCAL_MOVE_DIR = Path(os.getenv("LOCAL_MOVE_DIR", "./uploaded_media"))

# Account selection strategy: "current", "all" or "allow_list"
DEFAULT_ACCOUNT_STRATEGY = "current"

# Account type attached to accounts loaded from configuration
DEFAULT_ACCOUNT_TYPE = "owncloud"

# MIME type used when the extension lookup gives nothing
DEFAULT_MIME_TYPE = "application/octet-stream"

# =============================================================================
# PENDING UPLOAD STORE
# =============================================================================

PENDING_DB_PATH = Path(
    os.getenv("PENDING_DB_PATH", "./instant_upload/pending_uploads.db"),
)
PENDING_TABLE_NAME = "pending_uploads"

# =============================================================================
# NETWORK CONFIGURATION
# =============================================================================

NETWORK_CHECK_TIMEOUT = 3  # Timeout for connectivity check (seconds)
NETWORK_CHECK_HOST = os.getenv("NETWORK_CHECK_HOST", "8.8.8.8")  # Google DNS
NETWORK_CHECK_PORT = 53  # DNS port

# Linux exposes interfaces here; wireless ones carry a "wireless" entry
SYS_CLASS_NET = Path("/sys/class/net")

# =============================================================================
# UPLOAD QUEUE CONFIGURATION
# =============================================================================

# How long the background uploader waits for a job before re-checking stop
UPLOAD_QUEUE_POLL_SECONDS = 0.5

# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================

LOG_DIR = os.getenv("LOG_DIR", "/var/log/instant-upload")
LOG_SERVICE_FILE = "service.log"
LOG_FALLBACK_DIR = "logs"
LOG_BACKUP_COUNT = 7  # Days of rotated logs to keep

# =============================================================================
# SERVICE FRONT-END
# =============================================================================

# Local folder standing in for the remote accounts when set: uploads are
# copied to <UPLOAD_MIRROR_DIR>/<account>/<remote path>. Unset = mock uploader
UPLOAD_MIRROR_DIR = os.getenv("UPLOAD_MIRROR_DIR") or None

# How long the CLI waits for queued transfers before exiting (seconds)
UPLOAD_WAIT_TIMEOUT = 60
