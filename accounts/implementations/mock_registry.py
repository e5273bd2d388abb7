"""
Mock Account Registry

In-memory registry for testing. Accounts and the active account can be
changed at any time, and lookups can be made to fail.
"""

import logging
from typing import List, Optional

from accounts.interfaces.account_registry_interface import (
    Account,
    AccountRegistryInterface,
)


class MockAccountRegistry(AccountRegistryInterface):
    """
    Mock account registry for testing.

    Usage:
        registry = MockAccountRegistry(["alice", "bob"], current="alice")
        registry.fail_lookups = True  # Simulate a broken account manager
    """

    def __init__(self, names: Optional[List[str]] = None, current: Optional[str] = None):
        self.logger = logging.getLogger(__name__)
        self._accounts: List[Account] = [Account(name) for name in names or []]
        self._current = current
        self.fail_lookups = False
        self.lookup_count = 0

    def add_account(self, name: str) -> Account:
        """Register another account"""
        account = Account(name)
        self._accounts.append(account)
        return account

    def set_current(self, name: Optional[str]) -> None:
        """Change the active account (None = no active account)"""
        self._current = name

    def _check(self) -> None:
        self.lookup_count += 1
        if self.fail_lookups:
            raise RuntimeError("Simulated account lookup failure")

    def current(self) -> Optional[Account]:
        self._check()
        for account in self._accounts:
            if account.name == self._current:
                return account
        return None

    def all(self) -> List[Account]:
        self._check()
        return list(self._accounts)
