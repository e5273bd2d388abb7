"""
Implementations Package

Concrete content resolvers.
"""

from content.implementations.filesystem_resolver import FileSystemContentResolver
from content.implementations.mock_resolver import MockContentResolver

__all__ = [
    "FileSystemContentResolver",
    "MockContentResolver",
]
