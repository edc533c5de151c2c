"""
License domain entity.

This is the core domain entity representing a license.
It contains business logic and is independent of infrastructure.

Validity is derived only from ``expire_time``: there is no status
field, and an invalidated license looks exactly like one that expired
naturally.
"""
from dataclasses import dataclass, replace
from datetime import datetime, timedelta, timezone
from typing import Optional

from core.domain.exceptions import ValidationError

MIN_DURATION_MINUTES = 5
# One thousand years
MAX_DURATION_MINUTES = 1000 * 365 * 24 * 60


def utcnow() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def validate_duration(minutes: int, what: str = "Expire time") -> None:
    """
    Enforce the bounds of a license window.

    Args:
        minutes: Requested duration in minutes
        what: Field name used in the error message

    Raises:
        ValidationError: If minutes is below the minimum or above the maximum
    """
    if minutes < MIN_DURATION_MINUTES:
        raise ValidationError(
            f"{what} must be at least {MIN_DURATION_MINUTES} minutes"
        )
    if minutes > MAX_DURATION_MINUTES:
        raise ValidationError(
            f"{what} must be at most {MAX_DURATION_MINUTES} minutes"
        )


def add_minutes(start: datetime, minutes: int, what: str = "Expire time") -> datetime:
    """
    Return start shifted by minutes.

    Raises:
        ValidationError: If the result falls outside the datetime range
    """
    try:
        return start + timedelta(minutes=minutes)
    except OverflowError as e:
        raise ValidationError(f"{what} pushes the expiry out of range") from e


@dataclass(frozen=True)
class License:
    """
    License domain entity.

    Represents a time-bounded license owned by one account.
    This is an immutable value object with business logic.
    """

    key: str
    owner: str
    product: str
    one_time: bool
    expire_time: datetime
    created_at: datetime

    def __post_init__(self):
        """Validate license entity."""
        if not self.key or len(self.key.strip()) == 0:
            raise ValueError("License key cannot be empty")
        if not self.owner:
            raise ValueError("License owner is required")

    @classmethod
    def create(
        cls,
        key: str,
        owner: str,
        product: str,
        duration_minutes: int,
        one_time: bool = False,
        current_time: Optional[datetime] = None,
    ) -> "License":
        """
        Create a new License entity.

        Args:
            key: Generated license key
            owner: Identity of the issuing account
            product: Label of what the license governs
            duration_minutes: Minutes until expiry, at least 5
            one_time: Single-use flag (stored, not enforced)
            current_time: Creation instant (defaults to now)

        Returns:
            License entity instance

        Raises:
            ValidationError: If duration is out of bounds
        """
        validate_duration(duration_minutes)
        now = current_time or utcnow()
        return cls(
            key=key,
            owner=owner,
            product=product,
            one_time=one_time,
            expire_time=add_minutes(now, duration_minutes),
            created_at=now,
        )

    def is_valid(self, current_time: Optional[datetime] = None) -> bool:
        """
        Check if license is currently valid.

        Args:
            current_time: Current time (defaults to now)

        Returns:
            True if the license has not yet expired
        """
        check_time = current_time or utcnow()
        return check_time < self.expire_time

    def is_owned_by(self, identity: str) -> bool:
        """Return True if identity may mutate this license."""
        return self.owner == identity

    def extended_expiry(
        self, additional_minutes: int, current_time: Optional[datetime] = None
    ) -> datetime:
        """
        Compute the expiry after an extension.

        A live license grows from its current expiry; a lapsed one
        restarts from now so it is never revived with a backdated window.

        Args:
            additional_minutes: Minutes to add, at least 5
            current_time: Current time (defaults to now)

        Returns:
            New expiry datetime

        Raises:
            ValidationError: If additional_minutes is out of bounds or the
                new expiry is not representable
        """
        validate_duration(additional_minutes, what="Additional time")
        now = current_time or utcnow()
        start = self.expire_time if self.expire_time > now else now
        return add_minutes(start, additional_minutes, what="Additional time")

    def extend(
        self, additional_minutes: int, current_time: Optional[datetime] = None
    ) -> "License":
        """
        Create a new License instance with an extended expiry.

        Args:
            additional_minutes: Minutes to add, at least 5
            current_time: Current time (defaults to now)

        Returns:
            New License instance
        """
        return replace(
            self,
            expire_time=self.extended_expiry(additional_minutes, current_time),
        )

    def invalidate(self, current_time: Optional[datetime] = None) -> "License":
        """
        Create a new License instance that expires now.

        Args:
            current_time: Current time (defaults to now)

        Returns:
            New License instance with expire_time set to now
        """
        return replace(self, expire_time=current_time or utcnow())
