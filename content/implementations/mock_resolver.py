"""
Mock Content Resolver

Dictionary-backed resolver for testing without real media files.
"""

import logging
from typing import Dict, Optional

from content.interfaces.content_resolver_interface import (
    ContentResolverInterface,
    MediaInfo,
)
from core.constants import MediaKind


class MockContentResolver(ContentResolverInterface):
    """
    Mock content resolver for testing.

    Usage:
        resolver = MockContentResolver()
        resolver.add("content://media/1", MediaInfo("/tmp/IMG_1.jpg", "IMG_1.jpg"))
    """

    def __init__(self, entries: Optional[Dict[str, MediaInfo]] = None):
        self.logger = logging.getLogger(__name__)
        self._entries: Dict[str, MediaInfo] = dict(entries or {})
        self.fail_lookups = False
        self.lookups: list = []

    def add(self, media_ref: str, info: MediaInfo) -> None:
        """Register a resolvable reference"""
        self._entries[media_ref] = info

    def resolve(self, media_ref, kind: MediaKind) -> Optional[MediaInfo]:
        self.lookups.append((media_ref, kind))

        if self.fail_lookups:
            raise RuntimeError("Simulated content provider failure")

        info = self._entries.get(media_ref)
        if info is None:
            self.logger.debug(f"[MOCK] Unknown media reference: {media_ref}")
        return info
