"""
Shared Enums

Type definitions used across the accounts, storage, upload and scheduling
modules. Kept free of imports so every module can depend on it.
"""

from enum import Enum


class MediaKind(Enum):
    """Kind of captured media"""

    PICTURE = "picture"
    VIDEO = "video"


class LocalBehaviour(Enum):
    """What happens to the local file after a successful upload"""

    FORGET = "forget"  # Leave the file where it is
    MOVE = "move"  # Move the file into the app's local folder

    @classmethod
    def from_setting(cls, value) -> "LocalBehaviour":
        """
        Parse a configured behaviour.

        Accepts the enum itself, "forget"/"move", and the legacy
        preference values "NOTHING"/"MOVE" (any case). Anything
        unrecognised means FORGET.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str) and value.strip().lower() == "move":
            return cls.MOVE
        return cls.FORGET
