"""
Interfaces Package

Abstract interfaces for media content resolution.
"""

from content.interfaces.content_resolver_interface import (
    ContentResolverInterface,
    MediaInfo,
)

__all__ = [
    "ContentResolverInterface",
    "MediaInfo",
]
