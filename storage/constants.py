"""
Storage Module Enums

Type definitions for the pending upload store.
Configuration values live in config/settings.py.
"""

from enum import Enum

# =============================================================================
# ENUMS
# =============================================================================


class StoreState(Enum):
    """Pending upload store states"""

    CLOSED = "closed"  # Not initialized yet, or cleaned up
    READY = "ready"  # Normal operation
    ERROR = "error"  # Last operation failed
