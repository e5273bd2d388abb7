"""
Account Resolvers

One resolver per account selection strategy:
- CurrentAccountResolver: the account bound to the active session
- AllAccountsResolver: every registered account
- AllowListResolver: registered accounts whose names are pre-selected

Resolvers never raise. A registry failure is logged and treated as
"no target accounts".
"""

import logging
from typing import Iterable, List

from accounts.interfaces.account_registry_interface import (
    Account,
    AccountRegistryInterface,
    AccountResolverInterface,
)


def _unique(accounts: Iterable[Account]) -> List[Account]:
    """Drop repeated account names, keeping first occurrence order"""
    seen = set()
    result = []
    for account in accounts:
        if account.name not in seen:
            seen.add(account.name)
            result.append(account)
    return result


class CurrentAccountResolver(AccountResolverInterface):
    """Uploads go to the active account only"""

    def __init__(self, registry: AccountRegistryInterface):
        self.logger = logging.getLogger(__name__)
        self.registry = registry

    def resolve(self) -> List[Account]:
        try:
            account = self.registry.current()
        except Exception as e:
            self.logger.error(f"Failed to look up current account: {e}")
            return []

        return [account] if account is not None else []


class AllAccountsResolver(AccountResolverInterface):
    """Uploads go to every registered account"""

    def __init__(self, registry: AccountRegistryInterface):
        self.logger = logging.getLogger(__name__)
        self.registry = registry

    def resolve(self) -> List[Account]:
        try:
            return _unique(self.registry.all())
        except Exception as e:
            self.logger.error(f"Failed to list accounts: {e}")
            return []


class AllowListResolver(AccountResolverInterface):
    """
    Uploads go to a fixed set of accounts.

    Only registered accounts are returned, in registry order. Allowed
    names without a registered account are ignored with a warning.
    """

    def __init__(
        self,
        registry: AccountRegistryInterface,
        allowed_names: Iterable[str],
    ):
        self.logger = logging.getLogger(__name__)
        self.registry = registry
        self.allowed_names = list(dict.fromkeys(allowed_names))

    def resolve(self) -> List[Account]:
        try:
            registered = self.registry.all()
        except Exception as e:
            self.logger.error(f"Failed to list accounts: {e}")
            return []

        allowed = set(self.allowed_names)
        selected = _unique(a for a in registered if a.name in allowed)

        missing = allowed - {account.name for account in selected}
        if missing:
            self.logger.warning(
                f"Allow-listed accounts not registered: {', '.join(sorted(missing))}"
            )

        return selected
