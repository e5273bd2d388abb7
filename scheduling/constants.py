"""
Scheduling Module Enums

Type definitions for policy decisions and event outcomes.
"""

from enum import Enum


class PolicyDecision(Enum):
    """Outcome of the upload policy for one capture"""

    ALLOW = "allow"  # Upload now
    DEFER = "defer"  # Remember for later
    DISABLED = "disabled"  # Feature off, do nothing


class CaptureOutcome(Enum):
    """What the scheduler did with a capture event"""

    DISPATCHED = "dispatched"  # Jobs handed to the uploader
    DEFERRED = "deferred"  # Records queued for a later connectivity event
    DISABLED = "disabled"  # Upload toggle off for this kind
    RESOLUTION_FAILED = "resolution_failed"  # Media reference not found
    NO_TARGET_ACCOUNTS = "no_target_accounts"  # Account resolver found nobody
    STORE_UNAVAILABLE = "store_unavailable"  # Deferral could not be persisted
