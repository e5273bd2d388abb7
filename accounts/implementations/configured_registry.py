"""
Configured Account Registry

Account registry backed by the instant upload configuration file:

    accounts:
      - alice@cloud.example.com
      - bob@cloud.example.com
    current_account: alice@cloud.example.com
"""

import logging
from typing import Iterable, List, Optional, Union

from accounts.interfaces.account_registry_interface import (
    Account,
    AccountRegistryInterface,
)


class ConfiguredAccountRegistry(AccountRegistryInterface):
    """
    Account registry built from a fixed list of account names.

    Duplicate names are registered once, first occurrence wins.
    """

    def __init__(
        self,
        accounts: Iterable[Union[str, Account]],
        current_account: Optional[str] = None,
    ):
        """
        Initialize registry.

        Args:
            accounts: Account names or Account objects, in registration order
            current_account: Name of the active account (None = first account)
        """
        self.logger = logging.getLogger(__name__)

        self._accounts: List[Account] = []
        seen = set()
        for entry in accounts:
            account = entry if isinstance(entry, Account) else Account(str(entry))
            if account.name in seen:
                continue
            seen.add(account.name)
            self._accounts.append(account)

        self._current_name = current_account

        if current_account and current_account not in seen:
            self.logger.warning(
                f"Current account {current_account} is not registered, "
                f"no account will be active"
            )

        self.logger.info(
            f"Account registry loaded ({len(self._accounts)} accounts)"
        )

    def current(self) -> Optional[Account]:
        if self._current_name is None:
            return self._accounts[0] if self._accounts else None

        for account in self._accounts:
            if account.name == self._current_name:
                return account
        return None

    def all(self) -> List[Account]:
        return list(self._accounts)

    def __repr__(self) -> str:
        return (
            f"ConfiguredAccountRegistry(accounts={len(self._accounts)}, "
            f"current={self._current_name})"
        )
