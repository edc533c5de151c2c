"""
License domain services.

Domain services contain business logic that doesn't naturally
fit within a single entity.
"""
from datetime import datetime
from typing import Optional

from core.domain.exceptions import ForbiddenError, NotFoundOrForbiddenError
from licenses.domain.license import License, utcnow
from licenses.domain.license_key import DEFAULT_KEY_BYTES, generate_license_key

VALID_MESSAGE = "valid"
EXPIRED_MESSAGE = "expired"
INVALID_KEY_MESSAGE = "invalid key"


class LicenseKeyGenerator:
    """Domain service for license key generation."""

    def __init__(self, num_bytes: int = DEFAULT_KEY_BYTES):
        self.num_bytes = num_bytes

    def generate(self) -> str:
        """
        Generate a license key.

        Returns:
            Generated license key string
        """
        return generate_license_key(self.num_bytes)


class LicenseValidator:
    """Domain service for license validation."""

    @staticmethod
    def check(
        license: Optional[License], current_time: Optional[datetime] = None
    ) -> tuple[bool, str]:
        """
        Evaluate a license for the public validity check.

        Args:
            license: License entity, or None if the key is unknown
            current_time: Current time (defaults to now)

        Returns:
            Tuple of (is_valid, message)
        """
        if license is None:
            return False, INVALID_KEY_MESSAGE
        if license.is_valid(current_time):
            return True, VALID_MESSAGE
        return False, EXPIRED_MESSAGE

    @staticmethod
    def ensure_owner(license: License, identity: str) -> None:
        """
        Check that identity owns the license.

        Raises:
            ForbiddenError: If identity is not the owner
        """
        if not license.is_owned_by(identity):
            raise ForbiddenError()


class LicenseLifecycleManager:
    """Domain service for owner-gated license mutations."""

    @staticmethod
    async def extend_license(
        license: License,
        identity: str,
        additional_minutes: int,
        repository: "LicenseRepository",  # noqa: F821
        current_time: Optional[datetime] = None,
    ) -> License:
        """
        Extend a license the caller owns.

        Args:
            license: License entity read before the write
            identity: Caller identity
            additional_minutes: Minutes to add
            repository: License repository
            current_time: Current time (defaults to now)

        Returns:
            Extended license entity

        Raises:
            ValidationError: If additional_minutes is out of bounds
            ForbiddenError: If identity is not the owner
            NotFoundOrForbiddenError: If the conditional write matched nothing
        """
        LicenseValidator.ensure_owner(license, identity)
        extended = license.extend(additional_minutes, current_time)
        updated = await repository.update_expiry(
            extended.key, identity, extended.expire_time
        )
        if updated == 0:
            raise NotFoundOrForbiddenError()
        return extended

    @staticmethod
    async def invalidate_license(
        key: str,
        identity: str,
        repository: "LicenseRepository",  # noqa: F821
        current_time: Optional[datetime] = None,
    ) -> datetime:
        """
        Expire a license the caller owns, right now.

        No read precedes the write; the conditional update alone decides
        existence and ownership.

        Args:
            key: License key
            identity: Caller identity
            repository: License repository
            current_time: Current time (defaults to now)

        Returns:
            The expiry that was written

        Raises:
            NotFoundOrForbiddenError: If no license matched key and owner
        """
        now = current_time or utcnow()
        updated = await repository.update_expiry(key, identity, now)
        if updated == 0:
            raise NotFoundOrForbiddenError()
        return now
