"""
Django-backed credential adapters.

Password hashing goes through ``django.contrib.auth.hashers`` so the
algorithm list comes from ``PASSWORD_HASHERS``; token configuration is
read from ``LICENSE_SERVICE``.
"""
from django.conf import settings
from django.contrib.auth.hashers import (
    BCryptSHA256PasswordHasher,
    check_password,
    make_password,
)

from accounts.domain.credentials import (
    ACCESS_TOKEN_TTL_MINUTES,
    JWT_ALGORITHM,
    PasswordHasher,
    TokenService,
    TokenSettings,
)

DEFAULT_PASSWORD_HASH_ROUNDS = 12


class TunableBCryptSHA256PasswordHasher(BCryptSHA256PasswordHasher):
    """bcrypt-SHA256 hasher whose work factor comes from settings."""

    @property
    def rounds(self) -> int:
        return settings.LICENSE_SERVICE.get(
            "PASSWORD_HASH_ROUNDS", DEFAULT_PASSWORD_HASH_ROUNDS
        )


class DjangoPasswordHasher(PasswordHasher):
    """PasswordHasher using the configured Django password hashers."""

    def hash(self, password: str) -> str:
        return make_password(password)

    def verify(self, password: str, encoded: str) -> bool:
        return check_password(password, encoded)


def token_settings_from_django() -> TokenSettings:
    """
    Build token settings from ``settings.LICENSE_SERVICE``.

    Returns:
        TokenSettings instance
    """
    config = settings.LICENSE_SERVICE
    return TokenSettings(
        secret=config.get("JWT_SECRET", ""),
        algorithm=config.get("JWT_ALGORITHM", JWT_ALGORITHM),
        ttl_minutes=config.get("ACCESS_TOKEN_TTL_MINUTES", ACCESS_TOKEN_TTL_MINUTES),
    )


def build_token_service() -> TokenService:
    """Create a TokenService from Django settings."""
    return TokenService(token_settings_from_django())
