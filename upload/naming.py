"""
Remote Naming Policy

Computes where an instant upload lands in the remote account.
Pictures and videos each have their own configurable folder.
"""

import logging
from typing import Optional

from config.settings import DEFAULT_PICTURE_UPLOAD_PATH, DEFAULT_VIDEO_UPLOAD_PATH
from core.constants import MediaKind
from storage.utils.path_utils import safe_filename
from upload.constants import REMOTE_PATH_SEPARATOR


def normalize_remote_folder(folder: Optional[str]) -> str:
    """
    Normalize a remote folder path.

    Ensures a single leading slash, no trailing slash and no empty segments.
    An empty folder means the account root ("").

    Example:
        normalize_remote_folder("InstantUpload//Camera/")  # "/InstantUpload/Camera"
    """
    if not folder:
        return ""

    unified = folder.replace("\\", REMOTE_PATH_SEPARATOR)
    segments = [s for s in unified.split(REMOTE_PATH_SEPARATOR) if s]
    if not segments:
        return ""
    return REMOTE_PATH_SEPARATOR + REMOTE_PATH_SEPARATOR.join(segments)


class RemoteNamingPolicy:
    """
    Remote destination naming for instant uploads.

    Usage:
        naming = RemoteNamingPolicy(picture_folder="/InstantUpload")
        naming.remote_path(MediaKind.PICTURE, "IMG_0001.jpg")
        # "/InstantUpload/IMG_0001.jpg"
    """

    def __init__(
        self,
        picture_folder: str = DEFAULT_PICTURE_UPLOAD_PATH,
        video_folder: str = DEFAULT_VIDEO_UPLOAD_PATH,
    ):
        self.logger = logging.getLogger(__name__)
        self.picture_folder = normalize_remote_folder(picture_folder)
        self.video_folder = normalize_remote_folder(video_folder)

    def folder_for(self, kind: MediaKind) -> str:
        """Remote folder for a media kind"""
        return self.video_folder if kind == MediaKind.VIDEO else self.picture_folder

    def remote_path(self, kind: MediaKind, display_name: str) -> str:
        """
        Remote path for a captured file.

        Args:
            kind: Kind of media
            display_name: File name to use remotely

        Returns:
            Absolute remote path
        """
        name = safe_filename(display_name or "")
        return f"{self.folder_for(kind)}{REMOTE_PATH_SEPARATOR}{name}"

    def __repr__(self) -> str:
        return (
            f"RemoteNamingPolicy(pictures='{self.picture_folder}', "
            f"videos='{self.video_folder}')"
        )
