"""
Implementations Package

Concrete account registries.
"""

from accounts.implementations.configured_registry import ConfiguredAccountRegistry
from accounts.implementations.mock_registry import MockAccountRegistry

__all__ = [
    "ConfiguredAccountRegistry",
    "MockAccountRegistry",
]
