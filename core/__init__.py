"""
Core utilities and modules.

Public API:
    - MediaKind / LocalBehaviour: Shared enums
    - NetworkSnapshot: Network conditions at one point in time
    - SystemNetworkState / StaticNetworkState: Network state sources
    - check_internet_connectivity: Check if internet is available
    - is_connected_via_wifi: Check if a wireless interface is up
    - get_network_status: Get human-readable network status

Usage:
    from core.network import SystemNetworkState

    if SystemNetworkState().snapshot().is_wifi:
        print("On Wi-Fi")
"""

from core.constants import LocalBehaviour, MediaKind
from core.network import (
    OFFLINE,
    NetworkSnapshot,
    NetworkStateInterface,
    StaticNetworkState,
    SystemNetworkState,
    check_internet_connectivity,
    get_network_status,
    is_connected_via_wifi,
)

__all__ = [
    "LocalBehaviour",
    "MediaKind",
    "OFFLINE",
    "NetworkSnapshot",
    "NetworkStateInterface",
    "StaticNetworkState",
    "SystemNetworkState",
    "check_internet_connectivity",
    "get_network_status",
    "is_connected_via_wifi",
]
