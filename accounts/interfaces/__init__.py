"""
Interfaces Package

Abstract interfaces for account lookup and resolution.
"""

from accounts.interfaces.account_registry_interface import (
    Account,
    AccountRegistryInterface,
    AccountResolverInterface,
)

__all__ = [
    "Account",
    "AccountRegistryInterface",
    "AccountResolverInterface",
]
