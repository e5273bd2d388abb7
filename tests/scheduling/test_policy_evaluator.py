"""
Policy Evaluator Tests

Tests cover the full decision table:
toggle x Wi-Fi restriction x network conditions, for both media kinds.

To run these tests:
    pytest tests/scheduling/test_policy_evaluator.py -v
"""

import pytest

from core.constants import MediaKind
from core.network import OFFLINE, NetworkSnapshot
from scheduling import PolicyDecision, UploadPolicyConfig, decide, is_upload_enabled

WIFI = NetworkSnapshot(has_connectivity=True, is_wifi=True)
MOBILE = NetworkSnapshot(has_connectivity=True, is_wifi=False)


# =============================================================================
# DECISION TABLE
# =============================================================================


@pytest.mark.unit
@pytest.mark.parametrize(
    "enabled, wifi_only, network, expected",
    [
        (False, False, WIFI, PolicyDecision.DISABLED),
        (False, True, OFFLINE, PolicyDecision.DISABLED),
        (True, False, OFFLINE, PolicyDecision.DEFER),
        (True, True, OFFLINE, PolicyDecision.DEFER),
        (True, True, MOBILE, PolicyDecision.DEFER),
        (True, True, WIFI, PolicyDecision.ALLOW),
        (True, False, MOBILE, PolicyDecision.ALLOW),
        (True, False, WIFI, PolicyDecision.ALLOW),
    ],
)
def test_picture_decisions(enabled, wifi_only, network, expected):
    policy = UploadPolicyConfig(
        picture_upload_enabled=enabled,
        picture_wifi_only=wifi_only,
    )

    assert decide(MediaKind.PICTURE, policy, network) == expected


@pytest.mark.unit
@pytest.mark.parametrize(
    "enabled, wifi_only, network, expected",
    [
        (False, False, WIFI, PolicyDecision.DISABLED),
        (True, False, OFFLINE, PolicyDecision.DEFER),
        (True, True, MOBILE, PolicyDecision.DEFER),
        (True, True, WIFI, PolicyDecision.ALLOW),
        (True, False, MOBILE, PolicyDecision.ALLOW),
    ],
)
def test_video_decisions(enabled, wifi_only, network, expected):
    policy = UploadPolicyConfig(
        video_upload_enabled=enabled,
        video_wifi_only=wifi_only,
    )

    assert decide(MediaKind.VIDEO, policy, network) == expected


@pytest.mark.unit
def test_kinds_use_their_own_settings():
    """Picture settings never affect videos and the other way round"""
    policy = UploadPolicyConfig(
        picture_upload_enabled=True,
        picture_wifi_only=False,
        video_upload_enabled=True,
        video_wifi_only=True,
    )

    assert decide(MediaKind.PICTURE, policy, MOBILE) == PolicyDecision.ALLOW
    assert decide(MediaKind.VIDEO, policy, MOBILE) == PolicyDecision.DEFER


@pytest.mark.unit
def test_defaults_are_disabled():
    assert decide(MediaKind.PICTURE, UploadPolicyConfig(), WIFI) == PolicyDecision.DISABLED
    assert decide(MediaKind.VIDEO, UploadPolicyConfig(), WIFI) == PolicyDecision.DISABLED


# =============================================================================
# INVALID INPUT
# =============================================================================


@pytest.mark.unit
@pytest.mark.parametrize(
    "kind, config, network",
    [
        ("picture", UploadPolicyConfig(picture_upload_enabled=True), WIFI),
        (MediaKind.PICTURE, None, WIFI),
        (MediaKind.PICTURE, {"picture_upload_enabled": True}, WIFI),
        (MediaKind.PICTURE, UploadPolicyConfig(picture_upload_enabled=True), None),
    ],
)
def test_invalid_inputs_are_disabled(kind, config, network):
    assert decide(kind, config, network) == PolicyDecision.DISABLED


@pytest.mark.unit
def test_is_upload_enabled():
    policy = UploadPolicyConfig(video_upload_enabled=True)

    assert is_upload_enabled(MediaKind.VIDEO, policy) is True
    assert is_upload_enabled(MediaKind.PICTURE, policy) is False
