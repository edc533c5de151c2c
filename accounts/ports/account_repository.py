"""
Account repository port (interface).

This defines the contract for account persistence operations.
Implementations are in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import Optional

from accounts.domain.account import Account


class AccountRepository(ABC):
    """
    Abstract repository for Account entities.

    This is a port in hexagonal architecture - it defines
    what operations are available, not how they're implemented.
    """

    @abstractmethod
    async def is_login_free(self, login: str) -> bool:
        """
        Check whether a login is unused.

        Args:
            login: Account login

        Returns:
            True if no account has this login
        """
        pass

    @abstractmethod
    async def create(self, account: Account) -> Account:
        """
        Insert a new account.

        Args:
            account: Account entity to insert

        Returns:
            Stored account entity

        Raises:
            ConflictError: If the login violates the uniqueness constraint
        """
        pass

    @abstractmethod
    async def find_by_login(self, login: str) -> Optional[Account]:
        """
        Find an account by login.

        Args:
            login: Account login

        Returns:
            Account entity or None if not found
        """
        pass
