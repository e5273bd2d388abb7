"""
Policy Evaluator

Pure decision logic: given the kind of capture, the upload policy and the
network conditions, decide whether to upload now, defer, or do nothing.
No I/O, no logging, no global configuration reads.
"""

from core.constants import MediaKind
from core.network import NetworkSnapshot
from scheduling.config import UploadPolicyConfig
from scheduling.constants import PolicyDecision


def is_upload_enabled(kind: MediaKind, config: UploadPolicyConfig) -> bool:
    """Check the upload toggle for a media kind"""
    if not isinstance(config, UploadPolicyConfig):
        return False
    if kind == MediaKind.PICTURE:
        return config.picture_upload_enabled
    if kind == MediaKind.VIDEO:
        return config.video_upload_enabled
    return False


def requires_wifi(kind: MediaKind, config: UploadPolicyConfig) -> bool:
    """Check the Wi-Fi-only restriction for a media kind"""
    if kind == MediaKind.VIDEO:
        return config.video_wifi_only
    return config.picture_wifi_only


def decide(
    kind: MediaKind,
    config: UploadPolicyConfig,
    network: NetworkSnapshot,
) -> PolicyDecision:
    """
    Decide what to do with a capture.

    Args:
        kind: Kind of captured media
        config: Upload policy
        network: Current network conditions

    Returns:
        DISABLED if the kind's upload toggle is off (or inputs are invalid),
        DEFER if offline or Wi-Fi is required but not in use,
        ALLOW otherwise

    Example:
        policy = UploadPolicyConfig(picture_upload_enabled=True, picture_wifi_only=True)
        decide(MediaKind.PICTURE, policy, NetworkSnapshot(True, is_wifi=False))
        # PolicyDecision.DEFER
    """
    if not isinstance(kind, MediaKind) or not isinstance(network, NetworkSnapshot):
        return PolicyDecision.DISABLED

    if not is_upload_enabled(kind, config):
        return PolicyDecision.DISABLED

    if not network.has_connectivity:
        return PolicyDecision.DEFER

    if requires_wifi(kind, config) and not network.is_wifi:
        return PolicyDecision.DEFER

    return PolicyDecision.ALLOW
