"""
Account domain entity.

An account is a login plus a one-way hash of its password.
"""
from dataclasses import dataclass

from core.domain.exceptions import ValidationError

MIN_LOGIN_LENGTH = 6
MIN_PASSWORD_LENGTH = 8


def require_credentials(login: str, password: str) -> None:
    """Raise ValidationError unless both login and password are non-empty."""
    if not login or not password:
        raise ValidationError("Login and password are required")


def validate_registration(login: str, password: str) -> None:
    """
    Check login and password against the registration rules.

    Args:
        login: Requested account identity
        password: Plain-text secret

    Raises:
        ValidationError: If either value is empty or too short
    """
    require_credentials(login, password)
    if len(login) < MIN_LOGIN_LENGTH:
        raise ValidationError(
            f"Login must be at least {MIN_LOGIN_LENGTH} characters"
        )
    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
        )


@dataclass(frozen=True)
class Account:
    """
    Account domain entity.

    Immutable once created; there is no update or delete.
    """

    login: str
    password_hash: str

    def __post_init__(self):
        """Validate account entity."""
        if not self.login:
            raise ValueError("Account login cannot be empty")
        if not self.password_hash:
            raise ValueError("Account password hash cannot be empty")
