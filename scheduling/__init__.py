"""
Scheduling Module

Decides when captured media is uploaded and drains deferred uploads when
connectivity changes.

Usage:
    from scheduling import InstantUploadScheduler, MediaCaptureEvent

    scheduler = InstantUploadScheduler(...)
    scheduler.on_media_captured(MediaCaptureEvent(MediaKind.PICTURE, path))
"""

from scheduling.config import ConfigError, InstantUploadConfig, UploadPolicyConfig
from scheduling.constants import CaptureOutcome, PolicyDecision
from scheduling.models import (
    CaptureResult,
    ConnectivityEvent,
    DrainResult,
    MediaCaptureEvent,
)
from scheduling.policy_evaluator import decide, is_upload_enabled, requires_wifi
from scheduling.scheduler import InstantUploadScheduler

__all__ = [
    "ConfigError",
    "InstantUploadConfig",
    "UploadPolicyConfig",
    "CaptureOutcome",
    "PolicyDecision",
    "CaptureResult",
    "ConnectivityEvent",
    "DrainResult",
    "MediaCaptureEvent",
    "decide",
    "is_upload_enabled",
    "requires_wifi",
    "InstantUploadScheduler",
]
