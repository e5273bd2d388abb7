"""
Scheduling Models

Events delivered to the scheduler and the summaries it reports back.
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional

from core.constants import MediaKind
from core.network import NetworkSnapshot
from scheduling.constants import CaptureOutcome


@dataclass(frozen=True)
class MediaCaptureEvent:
    """
    A new picture or video exists locally.

    Attributes:
        kind: Kind of captured media
        media_ref: Opaque locator understood by the content resolver
    """

    kind: MediaKind
    media_ref: Any


@dataclass(frozen=True)
class ConnectivityEvent:
    """
    Network conditions changed.

    Attributes:
        has_connectivity: True if a connection is up
        is_wifi: True if that connection is Wi-Fi
    """

    has_connectivity: bool
    is_wifi: bool = False

    def to_snapshot(self) -> NetworkSnapshot:
        """Network conditions reported by this event"""
        return NetworkSnapshot(
            has_connectivity=bool(self.has_connectivity),
            is_wifi=bool(self.has_connectivity and self.is_wifi),
        )


@dataclass
class CaptureResult:
    """
    Summary of one handled capture event.

    Attributes:
        outcome: What happened
        dispatched: Jobs handed to the uploader
        deferred: Records queued (new or already present)
        failed: Accounts whose job or record could not be handed off
    """

    outcome: CaptureOutcome
    dispatched: int = 0
    deferred: int = 0
    failed: int = 0


@dataclass
class DrainResult:
    """
    Summary of one handled connectivity event.

    Attributes:
        dispatched: Records turned into jobs and removed
        stale_removed: Records removed because their file is gone
        kept: Records left queued (policy still defers them)
        failed: Records skipped because of an error
        skipped_reason: Why the whole drain was skipped (None = it ran)
    """

    dispatched: int = 0
    stale_removed: int = 0
    kept: int = 0
    failed: int = 0
    skipped_reason: Optional[str] = None
    errors: List[str] = field(default_factory=list)

    @property
    def ran(self) -> bool:
        """True if the pending records were examined"""
        return self.skipped_reason is None
