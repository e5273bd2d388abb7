"""
Content Resolver Interface

Abstract interface for turning a capture's media reference into the local
file details needed to upload it.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from core.constants import MediaKind


@dataclass(frozen=True)
class MediaInfo:
    """
    Local details of a captured media file.

    Attributes:
        file_path: Absolute path of the local file
        display_name: File name shown to the user (may be missing)
        mime_type: MIME type reported by the media source (may be missing)
    """

    file_path: str
    display_name: Optional[str] = None
    mime_type: Optional[str] = None

    @property
    def file_name(self) -> str:
        """Basename of file_path"""
        return Path(self.file_path).name


class ContentResolverInterface(ABC):
    """
    Abstract base class for media content resolution.

    Implementations return None for a reference they cannot resolve;
    they do not raise for a plain lookup miss.
    """

    @abstractmethod
    def resolve(self, media_ref, kind: MediaKind) -> Optional[MediaInfo]:
        """
        Resolve a media reference.

        Args:
            media_ref: Opaque locator delivered with the capture event
            kind: Kind of captured media

        Returns:
            MediaInfo, or None if the reference is not found
        """
