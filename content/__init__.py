"""
Content Module

Resolves the media reference delivered with a capture event into the local
file path, display name and MIME type.

Public API:
    - MediaInfo: Resolved media details
    - ContentResolverInterface: Resolver contract
    - FileSystemContentResolver: Local path / file:// resolver
    - MockContentResolver: Dictionary-backed resolver for tests
"""

from content.implementations.filesystem_resolver import FileSystemContentResolver
from content.implementations.mock_resolver import MockContentResolver
from content.interfaces.content_resolver_interface import (
    ContentResolverInterface,
    MediaInfo,
)

__all__ = [
    "ContentResolverInterface",
    "FileSystemContentResolver",
    "MediaInfo",
    "MockContentResolver",
]
