"""
Filesystem Content Resolver

Resolves media references that point at local files (plain paths or
file:// URIs). The display name is the file's basename and the MIME type
comes from the extension.
"""

import logging
from typing import Optional

from content.interfaces.content_resolver_interface import (
    ContentResolverInterface,
    MediaInfo,
)
from core.constants import MediaKind
from storage.utils.path_utils import guess_mime_type, local_path_from_ref


class FileSystemContentResolver(ContentResolverInterface):
    """
    Content resolver for media stored on the local filesystem.

    Usage:
        resolver = FileSystemContentResolver()
        info = resolver.resolve("/sdcard/DCIM/IMG_0001.jpg", MediaKind.PICTURE)
    """

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def resolve(self, media_ref, kind: MediaKind) -> Optional[MediaInfo]:
        path = local_path_from_ref(media_ref)
        if path is None:
            self.logger.error(f"Not a local media reference: {media_ref!r}")
            return None

        try:
            if not path.is_file():
                self.logger.error(f"Couldn't resolve {kind.value}: {path}")
                return None
            path = path.resolve()
        except OSError as e:
            self.logger.error(f"Couldn't resolve {kind.value} {path}: {e}")
            return None

        return MediaInfo(
            file_path=str(path),
            display_name=path.name,
            mime_type=guess_mime_type(path),
        )
