"""
Account handlers.

Handlers for registration and login. Both return a fresh access token.
"""
import logging

from asgiref.sync import sync_to_async

from accounts.application.commands.login import LoginCommand
from accounts.application.commands.register_account import RegisterAccountCommand
from accounts.application.dto.account_dto import AccessTokenDTO
from accounts.domain.account import Account, require_credentials, validate_registration
from accounts.domain.credentials import PasswordHasher, TokenService
from accounts.domain.events import AccountRegistered, LoginFailed, LoginSucceeded
from accounts.domain.services import AccountDirectory
from accounts.ports.account_repository import AccountRepository
from core.domain.exceptions import AuthError, NotFoundError
from core.infrastructure.events import event_bus

logger = logging.getLogger(__name__)

LOGIN_FAILED_MESSAGE = "Incorrect login or password"


class RegisterAccountHandler:
    """Handler for RegisterAccountCommand."""

    def __init__(
        self,
        account_repository: AccountRepository,
        password_hasher: PasswordHasher,
        token_service: TokenService,
    ):
        """Initialize handler with repository and credential services."""
        self.directory = AccountDirectory(account_repository)
        self.password_hasher = password_hasher
        self.token_service = token_service

    async def handle(self, command: RegisterAccountCommand) -> AccessTokenDTO:
        """
        Handle register account command.

        Args:
            command: RegisterAccountCommand

        Returns:
            AccessTokenDTO for the new account

        Raises:
            ValidationError: If login or password break the length rules
            ConflictError: If the login is already taken
        """
        validate_registration(command.login, command.password)

        # Hashing is CPU-bound; keep it off the event loop
        password_hash = await sync_to_async(self.password_hasher.hash)(command.password)
        account = Account(login=command.login, password_hash=password_hash)
        saved = await self.directory.create(account)

        logger.info("Account registered", extra={"login": saved.login})
        await event_bus.publish(AccountRegistered(login=saved.login))

        return AccessTokenDTO(
            login=saved.login,
            access_token=self.token_service.issue(saved.login),
        )


class LoginHandler:
    """Handler for LoginCommand."""

    def __init__(
        self,
        account_repository: AccountRepository,
        password_hasher: PasswordHasher,
        token_service: TokenService,
    ):
        """Initialize handler with repository and credential services."""
        self.directory = AccountDirectory(account_repository)
        self.password_hasher = password_hasher
        self.token_service = token_service

    async def handle(self, command: LoginCommand) -> AccessTokenDTO:
        """
        Handle login command.

        An unknown login and a wrong password fail the same way.

        Args:
            command: LoginCommand

        Returns:
            AccessTokenDTO for the account

        Raises:
            ValidationError: If login or password is empty
            AuthError: If the credentials do not match an account
        """
        require_credentials(command.login, command.password)

        try:
            account = await self.directory.find_by_login(command.login)
        except NotFoundError as e:
            await self._reject(command.login)
            raise AuthError(LOGIN_FAILED_MESSAGE) from e

        matches = await sync_to_async(self.password_hasher.verify)(
            command.password, account.password_hash
        )
        if not matches:
            await self._reject(command.login)
            raise AuthError(LOGIN_FAILED_MESSAGE)

        logger.info("Login succeeded", extra={"login": account.login})
        await event_bus.publish(LoginSucceeded(login=account.login))

        return AccessTokenDTO(
            login=account.login,
            access_token=self.token_service.issue(account.login),
        )

    async def _reject(self, login: str) -> None:
        logger.warning("Login failed", extra={"login": login})
        await event_bus.publish(LoginFailed(login=login))
