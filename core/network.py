"""
Network State

Answers "are we online, and is it Wi-Fi?" for the upload scheduler.
Uses a socket connection to an external host for the online check and the
Linux sysfs interface table for the Wi-Fi check.
"""

import logging
import socket
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from config.settings import (
    NETWORK_CHECK_HOST,
    NETWORK_CHECK_PORT,
    NETWORK_CHECK_TIMEOUT,
    SYS_CLASS_NET,
)


@dataclass(frozen=True)
class NetworkSnapshot:
    """
    Network conditions at one point in time.

    Attributes:
        has_connectivity: True if any connection is up
        is_wifi: True if the active connection is Wi-Fi
    """

    has_connectivity: bool
    is_wifi: bool = False

    @property
    def label(self) -> str:
        """Short human-readable form for logs"""
        if not self.has_connectivity:
            return "offline"
        return "wifi" if self.is_wifi else "mobile"


OFFLINE = NetworkSnapshot(has_connectivity=False, is_wifi=False)


def check_internet_connectivity() -> bool:
    """
    Check if internet connection is available.

    Attempts a socket connection to a reliable external host (Google DNS).

    Returns:
        True if internet is available, False otherwise
    """
    logger = logging.getLogger(__name__)

    try:
        connection = socket.create_connection(
            (NETWORK_CHECK_HOST, NETWORK_CHECK_PORT),
            timeout=NETWORK_CHECK_TIMEOUT,
        )
        connection.close()
        return True
    except (socket.timeout, OSError):
        # Network unavailable, timeout, or DNS lookup failed
        return False
    except Exception as e:
        logger.debug(f"Unexpected error in connectivity check: {e}")
        return False


def is_connected_via_wifi(sys_class_net: Path = SYS_CLASS_NET) -> bool:
    """
    Check if a wireless interface is up.

    An interface counts as Wi-Fi when its sysfs directory has a
    "wireless" entry and its operstate is "up".

    Args:
        sys_class_net: Interface table directory (overridable for tests)

    Returns:
        True if at least one wireless interface is up
    """
    logger = logging.getLogger(__name__)

    try:
        for interface in sys_class_net.iterdir():
            if not (interface / "wireless").exists():
                continue

            operstate = interface / "operstate"
            if operstate.exists() and operstate.read_text().strip() == "up":
                return True
    except OSError as e:
        logger.debug(f"Cannot read interface table {sys_class_net}: {e}")

    return False


def get_network_status() -> Tuple[bool, str]:
    """
    Get human-readable network status.

    Returns:
        Tuple of (is_connected, status_string)
    """
    snapshot = SystemNetworkState().snapshot()
    if snapshot.has_connectivity:
        return True, f"Internet available ({snapshot.label})"
    return False, "No internet connection"


class NetworkStateInterface(ABC):
    """Source of the current network conditions"""

    @abstractmethod
    def snapshot(self) -> NetworkSnapshot:
        """
        Take a snapshot of current network conditions.

        Returns:
            NetworkSnapshot
        """


class SystemNetworkState(NetworkStateInterface):
    """
    Network state read from the running system.

    Usage:
        network = SystemNetworkState()
        if network.snapshot().is_wifi:
            ...
    """

    def __init__(self, sys_class_net: Optional[Path] = None):
        self.logger = logging.getLogger(__name__)
        self.sys_class_net = sys_class_net or SYS_CLASS_NET

    def snapshot(self) -> NetworkSnapshot:
        if not check_internet_connectivity():
            return OFFLINE

        snapshot = NetworkSnapshot(
            has_connectivity=True,
            is_wifi=is_connected_via_wifi(self.sys_class_net),
        )
        self.logger.debug(f"Network snapshot: {snapshot.label}")
        return snapshot


class StaticNetworkState(NetworkStateInterface):
    """
    Fixed network state.

    Used by tests and by the command line when the caller already knows
    the conditions. The snapshot can be changed between events.
    """

    def __init__(self, snapshot: NetworkSnapshot = OFFLINE):
        self.current = snapshot

    def set(self, has_connectivity: bool, is_wifi: bool = False) -> None:
        """Replace the reported conditions"""
        self.current = NetworkSnapshot(has_connectivity, is_wifi)

    def snapshot(self) -> NetworkSnapshot:
        return self.current
