"""
Account domain services.
"""
from typing import Optional

from accounts.domain.account import Account
from core.domain.exceptions import ConflictError, NotFoundError


class AccountDirectory:
    """
    Domain service owning login uniqueness and lookup.

    The storage unique constraint on login is the authoritative gate;
    the free-check before insert only gives an early, friendlier error.
    """

    def __init__(self, repository: "AccountRepository"):  # noqa: F821
        self.repository = repository

    async def is_login_free(self, login: str) -> bool:
        """Return True if no account uses login."""
        return await self.repository.is_login_free(login)

    async def create(self, account: Account) -> Account:
        """
        Create an account.

        Args:
            account: Account entity to persist

        Returns:
            Stored account entity

        Raises:
            ConflictError: If the login is already taken
        """
        if not await self.repository.is_login_free(account.login):
            raise ConflictError()
        return await self.repository.create(account)

    async def find_by_login(self, login: str) -> Account:
        """
        Look up an account by login.

        Raises:
            NotFoundError: If no account has the login
        """
        account: Optional[Account] = await self.repository.find_by_login(login)
        if account is None:
            raise NotFoundError("Account not found")
        return account
