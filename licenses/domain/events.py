"""
License domain events.

Domain events represent something that happened in the license domain.
Events carry the key and owner only; product is not broadcast.
"""

from datetime import datetime
from typing import Optional

from core.domain.events import DomainEvent


class LicenseIssued(DomainEvent):
    """Event raised when a license is issued."""

    def __init__(
        self,
        key: str,
        owner: str,
        expire_time: datetime,
        occurred_at: Optional[datetime] = None,
    ):
        """
        Initialize LicenseIssued event.

        Args:
            key: License key
            owner: Owning identity
            expire_time: Initial expiry
            occurred_at: When the event occurred
        """
        super().__init__(aggregate_id=key, occurred_at=occurred_at)
        self.key = key
        self.owner = owner
        self.expire_time = expire_time


class LicenseExtended(DomainEvent):
    """Event raised when a license is extended."""

    def __init__(
        self,
        key: str,
        owner: str,
        new_expire_time: datetime,
        occurred_at: Optional[datetime] = None,
    ):
        """
        Initialize LicenseExtended event.

        Args:
            key: License key
            owner: Owning identity
            new_expire_time: Expiry after the extension
            occurred_at: When the event occurred
        """
        super().__init__(aggregate_id=key, occurred_at=occurred_at)
        self.key = key
        self.owner = owner
        self.new_expire_time = new_expire_time


class LicenseInvalidated(DomainEvent):
    """Event raised when a license is invalidated by its owner."""

    def __init__(
        self,
        key: str,
        owner: str,
        occurred_at: Optional[datetime] = None,
    ):
        super().__init__(aggregate_id=key, occurred_at=occurred_at)
        self.key = key
        self.owner = owner


class LicenseChecked(DomainEvent):
    """Event raised when a key goes through the public validity check."""

    def __init__(
        self,
        key: str,
        valid: bool,
        result: str,
        occurred_at: Optional[datetime] = None,
    ):
        """
        Initialize LicenseChecked event.

        Args:
            key: License key that was checked
            valid: Outcome of the check
            result: Check message ("valid", "expired" or "invalid key")
            occurred_at: When the event occurred
        """
        super().__init__(aggregate_id=key, occurred_at=occurred_at)
        self.key = key
        self.valid = valid
        self.result = result
