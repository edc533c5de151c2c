"""
Unit tests for TokenService.
"""

import logging
from datetime import datetime, timedelta, timezone

import jwt
import pytest

from accounts.domain.credentials import TokenService, TokenSettings
from core.domain.exceptions import AuthError

SECRET = "unit-test-signing-secret-long-enough-for-every-hmac-variant-0123456789abcdef"
OTHER_SECRET = "another-signing-secret-also-long-enough-for-every-hmac-variant-0123456789"


def service_at(instant, secret=SECRET, **kwargs):
    return TokenService(TokenSettings(secret=secret, **kwargs), clock=lambda: instant)


class TestTokenService:
    """Tests for TokenService."""

    def test_issue_and_verify(self, token_service):
        """Test a fresh token verifies to its login."""
        token = token_service.issue("alice_owner")

        assert token_service.verify(token) == "alice_owner"

    def test_claims(self):
        """Test the token carries login, iat and a fifteen minute exp."""
        issued_at = datetime.now(timezone.utc).replace(microsecond=0)
        token = service_at(issued_at).issue("alice_owner")

        payload = jwt.decode(token, SECRET, algorithms=["HS256"])

        assert payload["login"] == "alice_owner"
        assert payload["exp"] - payload["iat"] == 15 * 60

    def test_token_within_lifetime(self):
        """Test a token issued fourteen minutes ago still verifies."""
        token = service_at(datetime.now(timezone.utc) - timedelta(minutes=14)).issue(
            "alice_owner"
        )

        assert TokenService(TokenSettings(secret=SECRET)).verify(token) == "alice_owner"

    def test_expired_token(self):
        """Test a token issued sixteen minutes ago is rejected."""
        token = service_at(datetime.now(timezone.utc) - timedelta(minutes=16)).issue(
            "alice_owner"
        )

        with pytest.raises(AuthError) as exc_info:
            TokenService(TokenSettings(secret=SECRET)).verify(token)

        assert "expired" in exc_info.value.message

    def test_wrong_secret(self, token_service):
        """Test a token signed with another secret is rejected."""
        other = TokenService(TokenSettings(secret=OTHER_SECRET))
        token = other.issue("alice_owner")

        with pytest.raises(AuthError):
            token_service.verify(token)

    def test_tampered_token(self, token_service):
        """Test a modified payload fails signature verification."""
        header, payload, signature = token_service.issue("alice_owner").split(".")
        forged_payload = jwt.encode(
            {"login": "mallory", "iat": 0, "exp": 9999999999}, "x", algorithm="HS256"
        ).split(".")[1]

        with pytest.raises(AuthError):
            token_service.verify(".".join([header, forged_payload, signature]))

    def test_malformed_token(self, token_service):
        """Test a string that is not a JWT is rejected."""
        with pytest.raises(AuthError):
            token_service.verify("not-a-token")

    def test_other_hmac_algorithm_accepted(self, token_service):
        """Test tokens signed with HS512 and the same secret verify."""
        token = service_at(datetime.now(timezone.utc), algorithm="HS512").issue("alice_owner")

        assert token_service.verify(token) == "alice_owner"

    def test_none_algorithm_rejected(self, token_service):
        """Test an unsigned token is rejected."""
        now = datetime.now(timezone.utc)
        token = jwt.encode(
            {"login": "alice_owner", "iat": now, "exp": now + timedelta(minutes=5)},
            None,
            algorithm="none",
        )

        with pytest.raises(AuthError):
            token_service.verify(token)

    def test_missing_login_claim(self, token_service):
        """Test a correctly signed token without a login is rejected."""
        now = datetime.now(timezone.utc)
        token = jwt.encode(
            {"sub": "alice_owner", "iat": now, "exp": now + timedelta(minutes=5)},
            SECRET,
            algorithm="HS256",
        )

        with pytest.raises(AuthError) as exc_info:
            token_service.verify(token)

        assert exc_info.value.message == "Invalid token payload"

    def test_non_string_login_claim(self, token_service):
        """Test a numeric login claim is rejected."""
        now = datetime.now(timezone.utc)
        token = jwt.encode(
            {"login": 42, "iat": now, "exp": now + timedelta(minutes=5)},
            SECRET,
            algorithm="HS256",
        )

        with pytest.raises(AuthError):
            token_service.verify(token)

    def test_missing_exp_claim(self, token_service):
        """Test a token without an expiry is rejected."""
        token = jwt.encode(
            {"login": "alice_owner", "iat": datetime.now(timezone.utc)},
            SECRET,
            algorithm="HS256",
        )

        with pytest.raises(AuthError):
            token_service.verify(token)

    def test_empty_secret_warns(self, caplog):
        """Test an empty secret is accepted but logged."""
        with caplog.at_level(logging.WARNING, logger="accounts.domain.credentials"):
            TokenService(TokenSettings(secret=""))

        assert "secret is empty" in caplog.text
