"""
Django implementation of AccountRepository port.

This adapter converts between domain entities and Django ORM models.
"""
from typing import Optional

from asgiref.sync import sync_to_async
from django.db import IntegrityError, transaction

from accounts.domain.account import Account
from accounts.infrastructure.models import Account as AccountModel
from accounts.ports.account_repository import AccountRepository
from core.domain.exceptions import ConflictError


class DjangoAccountRepository(AccountRepository):
    """Django ORM implementation of AccountRepository."""

    def _to_domain(self, model: AccountModel) -> Account:
        """
        Convert Django model to domain entity.

        Args:
            model: Django Account model

        Returns:
            Account domain entity
        """
        return Account(login=model.login, password_hash=model.password_hash)

    @sync_to_async
    def is_login_free(self, login: str) -> bool:
        """
        Check whether a login is unused.

        Args:
            login: Account login

        Returns:
            True if no account has this login
        """
        # pylint: disable=no-member
        return not AccountModel.objects.filter(login=login).exists()

    @sync_to_async
    def create(self, account: Account) -> Account:
        """
        Insert a new account.

        Args:
            account: Account entity to insert

        Returns:
            Stored account entity

        Raises:
            ConflictError: If another account won the race for this login
        """
        model = AccountModel(login=account.login, password_hash=account.password_hash)
        try:
            with transaction.atomic():
                model.save(force_insert=True)
        except IntegrityError as e:
            raise ConflictError() from e
        return self._to_domain(model)

    @sync_to_async
    def find_by_login(self, login: str) -> Optional[Account]:
        """
        Find an account by login.

        Args:
            login: Account login

        Returns:
            Account entity or None if not found
        """
        try:
            # pylint: disable=no-member
            model = AccountModel.objects.get(login=login)
            return self._to_domain(model)
        except AccountModel.DoesNotExist:  # pylint: disable=no-member
            return None
