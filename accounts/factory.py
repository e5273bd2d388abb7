"""
Account Resolver Factory

Picks the resolver for the configured strategy once, at construction time,
so the scheduler never branches on the strategy itself.
"""

import logging
from typing import Iterable, Optional, Union

from accounts.constants import AccountStrategy
from accounts.interfaces.account_registry_interface import (
    AccountRegistryInterface,
    AccountResolverInterface,
)
from accounts.resolvers import (
    AllAccountsResolver,
    AllowListResolver,
    CurrentAccountResolver,
)


class AccountResolverFactory:
    """
    Factory for account resolvers.

    Usage:
        resolver = AccountResolverFactory.create_resolver(
            AccountStrategy.ALLOW_LIST,
            registry,
            allowed_names=["alice"],
        )
    """

    _logger = logging.getLogger(__name__)

    @classmethod
    def create_resolver(
        cls,
        strategy: Union[AccountStrategy, str],
        registry: AccountRegistryInterface,
        allowed_names: Optional[Iterable[str]] = None,
    ) -> AccountResolverInterface:
        """
        Create the resolver for a strategy.

        Args:
            strategy: AccountStrategy or its configured name
            registry: Source of registered accounts
            allowed_names: Account names for the allow-list strategy

        Returns:
            AccountResolverInterface implementation

        Raises:
            ValueError: If the strategy name is unknown
        """
        strategy = AccountStrategy.from_setting(strategy)

        if strategy == AccountStrategy.ALL:
            cls._logger.info("Creating all-accounts resolver")
            return AllAccountsResolver(registry)

        if strategy == AccountStrategy.ALLOW_LIST:
            names = list(allowed_names or [])
            if not names:
                cls._logger.warning(
                    "Allow-list strategy selected with an empty allow-list, "
                    "no account will receive uploads"
                )
            cls._logger.info(f"Creating allow-list resolver ({len(names)} names)")
            return AllowListResolver(registry, names)

        cls._logger.info("Creating current-account resolver")
        return CurrentAccountResolver(registry)


def create_account_resolver(
    strategy: Union[AccountStrategy, str],
    registry: AccountRegistryInterface,
    allowed_names: Optional[Iterable[str]] = None,
) -> AccountResolverInterface:
    """Quick resolver creation, see AccountResolverFactory.create_resolver"""
    return AccountResolverFactory.create_resolver(strategy, registry, allowed_names)
