"""
Unit tests for Account domain entity and registration rules.
"""

import pytest

from accounts.domain.account import Account, validate_registration
from core.domain.exceptions import ValidationError


class TestValidateRegistration:
    """Tests for validate_registration."""

    def test_accepts_minimum_lengths(self):
        """Test a six character login and eight character password pass."""
        validate_registration("alice1", "12345678")

    @pytest.mark.parametrize(
        "login,password",
        [("", "password123"), ("alice_owner", ""), ("", "")],
    )
    def test_requires_both(self, login, password):
        """Test empty values are rejected."""
        with pytest.raises(ValidationError) as exc_info:
            validate_registration(login, password)

        assert exc_info.value.message == "Login and password are required"

    def test_short_login(self):
        """Test a five character login is rejected."""
        with pytest.raises(ValidationError) as exc_info:
            validate_registration("alice", "password123")

        assert "Login" in exc_info.value.message

    def test_short_password(self):
        """Test a seven character password is rejected."""
        with pytest.raises(ValidationError) as exc_info:
            validate_registration("alice_owner", "1234567")

        assert "Password" in exc_info.value.message


class TestAccountEntity:
    """Tests for Account domain entity."""

    def test_create_account(self):
        """Test creating an account entity."""
        account = Account(login="alice_owner", password_hash="hash")

        assert account.login == "alice_owner"

    def test_empty_login(self):
        """Test an empty login is rejected."""
        with pytest.raises(ValueError):
            Account(login="", password_hash="hash")

    def test_empty_hash(self):
        """Test an empty password hash is rejected."""
        with pytest.raises(ValueError):
            Account(login="alice_owner", password_hash="")
