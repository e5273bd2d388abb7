"""
Accounts Module Enums
"""

from enum import Enum


class AccountStrategy(Enum):
    """Which accounts receive an instant upload"""

    CURRENT = "current"  # Account bound to the active session
    ALL = "all"  # Every registered account
    ALLOW_LIST = "allow_list"  # Fixed set of configured account names

    @classmethod
    def from_setting(cls, value) -> "AccountStrategy":
        """
        Parse a configured strategy name.

        Raises:
            ValueError: If the name is not a known strategy
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as e:
            valid = ", ".join(strategy.value for strategy in cls)
            raise ValueError(
                f"Unknown account strategy: {value!r} (expected one of: {valid})"
            ) from e
