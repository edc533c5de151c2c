"""
Credential engine.

Turns a password into a verifiable hash and an identity into a
short-lived signed bearer token, and verifies both directions.
"""
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

import jwt
from jwt.exceptions import InvalidTokenError

from core.domain.exceptions import AuthError

logger = logging.getLogger(__name__)

ACCESS_TOKEN_TTL_MINUTES = 15
JWT_ALGORITHM = "HS256"
# Any algorithm of the HMAC family is accepted on verification.
HMAC_ALGORITHMS = ["HS256", "HS384", "HS512"]
LOGIN_CLAIM = "login"


class PasswordHasher(ABC):
    """
    One-way password hashing port.

    Implementations choose the algorithm and its work factor.
    """

    @abstractmethod
    def hash(self, password: str) -> str:
        """Return an encoded one-way hash of password."""
        pass

    @abstractmethod
    def verify(self, password: str, encoded: str) -> bool:
        """Return True if password matches the encoded hash."""
        pass


@dataclass(frozen=True)
class TokenSettings:
    """
    Bearer token configuration.

    An empty ``secret`` is accepted and still used for signing.
    """

    secret: str
    algorithm: str = JWT_ALGORITHM
    ttl_minutes: int = ACCESS_TOKEN_TTL_MINUTES


class TokenService:
    """Issues and verifies HMAC-signed, time-boxed access tokens."""

    def __init__(
        self,
        settings: TokenSettings,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """
        Initialize token service.

        Args:
            settings: Signing configuration
            clock: Source of the current time (defaults to UTC now)
        """
        if not settings.secret:
            logger.warning("Token signing secret is empty; tokens are signed with an empty key")
        self.settings = settings
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def issue(self, login: str) -> str:
        """
        Create a signed access token for login.

        Args:
            login: Account identity

        Returns:
            Encoded JWT with ``login``, ``iat`` and ``exp`` claims
        """
        now = self._clock()
        payload = {
            LOGIN_CLAIM: login,
            "iat": now,
            "exp": now + timedelta(minutes=self.settings.ttl_minutes),
        }
        return jwt.encode(payload, self.settings.secret, algorithm=self.settings.algorithm)

    def verify(self, token: str) -> str:
        """
        Validate an access token and return its login.

        Args:
            token: Encoded JWT

        Returns:
            The ``login`` claim

        Raises:
            AuthError: If the token is malformed, badly signed, signed with
                a non-HMAC algorithm, expired, or lacks a string login
        """
        try:
            payload = jwt.decode(
                token,
                self.settings.secret,
                algorithms=HMAC_ALGORITHMS,
                options={"require": ["exp", "iat"]},
            )
        except jwt.ExpiredSignatureError as e:
            raise AuthError("Access token expired") from e
        except InvalidTokenError as e:
            raise AuthError(f"Invalid access token: {e}") from e

        login = payload.get(LOGIN_CLAIM)
        if not isinstance(login, str) or not login:
            raise AuthError("Invalid token payload")
        return login
