"""
Account Registry Interface

Abstract interfaces for account lookup and target-account resolution.
The scheduler depends on these abstractions, not on where accounts come from.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional

from config.settings import DEFAULT_ACCOUNT_TYPE


@dataclass(frozen=True)
class Account:
    """
    A remote account that can receive uploads.

    Attributes:
        name: Account name, e.g. "alice@cloud.example.com"
        account_type: Account type tag
    """

    name: str
    account_type: str = DEFAULT_ACCOUNT_TYPE

    def __str__(self) -> str:
        return self.name


class AccountRegistryInterface(ABC):
    """
    Abstract source of registered accounts.

    Backing data for the account resolvers.
    """

    @abstractmethod
    def current(self) -> Optional[Account]:
        """
        Get the account bound to the active session.

        Returns:
            Account, or None if no account is active
        """

    @abstractmethod
    def all(self) -> List[Account]:
        """
        Get every registered account.

        Returns:
            Accounts in registration order (may be empty)
        """


class AccountResolverInterface(ABC):
    """
    Decides which accounts a capture is uploaded to.

    Implementations never raise: an empty list means "no target accounts".
    """

    @abstractmethod
    def resolve(self) -> List[Account]:
        """
        Resolve target accounts.

        Returns:
            Accounts in stable order, without duplicates
        """
