"""
Accounts Module

Decides which remote accounts receive an instant upload.

Public API:
    - Account: Remote account value
    - AccountStrategy: current / all / allow_list
    - create_account_resolver: Build the resolver for a strategy
    - ConfiguredAccountRegistry / MockAccountRegistry: Account sources

Usage:
    from accounts import ConfiguredAccountRegistry, create_account_resolver

    registry = ConfiguredAccountRegistry(["alice", "bob"], current_account="alice")
    resolver = create_account_resolver("all", registry)
    targets = resolver.resolve()
"""

from accounts.constants import AccountStrategy
from accounts.factory import AccountResolverFactory, create_account_resolver
from accounts.implementations.configured_registry import ConfiguredAccountRegistry
from accounts.implementations.mock_registry import MockAccountRegistry
from accounts.interfaces.account_registry_interface import (
    Account,
    AccountRegistryInterface,
    AccountResolverInterface,
)
from accounts.resolvers import (
    AllAccountsResolver,
    AllowListResolver,
    CurrentAccountResolver,
)

__all__ = [
    "Account",
    "AccountRegistryInterface",
    "AccountResolverFactory",
    "AccountResolverInterface",
    "AccountStrategy",
    "AllAccountsResolver",
    "AllowListResolver",
    "ConfiguredAccountRegistry",
    "CurrentAccountResolver",
    "MockAccountRegistry",
    "create_account_resolver",
]
