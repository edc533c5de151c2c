"""
Unit tests for License domain services.
"""

from datetime import timedelta

import pytest

from core.domain.exceptions import ForbiddenError, NotFoundOrForbiddenError, ValidationError
from licenses.domain.services import (
    EXPIRED_MESSAGE,
    INVALID_KEY_MESSAGE,
    VALID_MESSAGE,
    LicenseLifecycleManager,
    LicenseValidator,
)


class TestLicenseValidator:
    """Tests for LicenseValidator service."""

    def test_check_valid_license(self, sample_license, now):
        """Test checking a live license."""
        valid, message = LicenseValidator.check(sample_license, now)

        assert valid is True
        assert message == VALID_MESSAGE

    def test_check_expired_license(self, sample_license, now):
        """Test checking a license past its expiry."""
        valid, message = LicenseValidator.check(sample_license, now + timedelta(hours=2))

        assert valid is False
        assert message == EXPIRED_MESSAGE

    def test_check_unknown_key(self, now):
        """Test checking a key that does not exist."""
        valid, message = LicenseValidator.check(None, now)

        assert valid is False
        assert message == INVALID_KEY_MESSAGE

    def test_ensure_owner_passes_for_owner(self, sample_license):
        """Test the owner is let through."""
        LicenseValidator.ensure_owner(sample_license, "alice_owner")

    def test_ensure_owner_rejects_stranger(self, sample_license):
        """Test another identity is refused."""
        with pytest.raises(ForbiddenError):
            LicenseValidator.ensure_owner(sample_license, "bob_owner")


@pytest.mark.asyncio
class TestLicenseLifecycleManager:
    """Tests for LicenseLifecycleManager service."""

    async def test_extend_license(self, memory_license_repository, sample_license, now):
        """Test extending a live license writes the grown expiry."""
        await memory_license_repository.add(sample_license)

        extended = await LicenseLifecycleManager.extend_license(
            sample_license, "alice_owner", 30, memory_license_repository, now
        )

        assert extended.expire_time == sample_license.expire_time + timedelta(minutes=30)
        stored = await memory_license_repository.find_by_key(sample_license.key)
        assert stored.expire_time == extended.expire_time

    async def test_extend_license_not_owner(
        self, memory_license_repository, sample_license, now
    ):
        """Test extending someone else's license writes nothing."""
        await memory_license_repository.add(sample_license)

        with pytest.raises(ForbiddenError):
            await LicenseLifecycleManager.extend_license(
                sample_license, "bob_owner", 30, memory_license_repository, now
            )

        assert memory_license_repository.update_calls == []

    async def test_extend_license_too_short(
        self, memory_license_repository, sample_license, now
    ):
        """Test a sub-minimum extension is rejected before any write."""
        await memory_license_repository.add(sample_license)

        with pytest.raises(ValidationError):
            await LicenseLifecycleManager.extend_license(
                sample_license, "alice_owner", 4, memory_license_repository, now
            )

        assert memory_license_repository.update_calls == []

    async def test_extend_license_vanished(
        self, memory_license_repository, sample_license, now
    ):
        """Test a license removed between read and write is reported as not found."""
        with pytest.raises(NotFoundOrForbiddenError):
            await LicenseLifecycleManager.extend_license(
                sample_license, "alice_owner", 30, memory_license_repository, now
            )

    async def test_invalidate_license(self, memory_license_repository, sample_license, now):
        """Test invalidating sets expiry to now."""
        await memory_license_repository.add(sample_license)
        at = now + timedelta(minutes=1)

        written = await LicenseLifecycleManager.invalidate_license(
            sample_license.key, "alice_owner", memory_license_repository, at
        )

        assert written == at
        stored = await memory_license_repository.find_by_key(sample_license.key)
        assert stored.is_valid(at) is False

    async def test_invalidate_license_not_owner(
        self, memory_license_repository, sample_license, now
    ):
        """Test invalidating someone else's license changes nothing."""
        await memory_license_repository.add(sample_license)

        with pytest.raises(NotFoundOrForbiddenError):
            await LicenseLifecycleManager.invalidate_license(
                sample_license.key, "bob_owner", memory_license_repository, now
            )

        stored = await memory_license_repository.find_by_key(sample_license.key)
        assert stored.expire_time == sample_license.expire_time

    async def test_invalidate_unknown_key(self, memory_license_repository, now):
        """Test invalidating a key that does not exist."""
        with pytest.raises(NotFoundOrForbiddenError):
            await LicenseLifecycleManager.invalidate_license(
                "no-such-key", "alice_owner", memory_license_repository, now
            )
