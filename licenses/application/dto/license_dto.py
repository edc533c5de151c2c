"""
License DTOs for API responses.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class LicenseDTO:
    """DTO for a full license record."""

    key: str
    owner: str
    product: str
    one_time: bool
    expire_time: datetime
    created_at: datetime


@dataclass
class IssuedLicenseDTO:
    """DTO for a freshly issued license."""

    key: str
    expire_time: datetime


@dataclass
class LicenseValidityDTO:
    """
    DTO for the public validity check.

    Carries no owner or product.
    """

    valid: bool
    expire_time: Optional[datetime]
    message: str
