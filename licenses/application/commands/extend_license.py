"""
ExtendLicenseCommand.

Command to push a license's expiry further out.
"""
from dataclasses import dataclass


@dataclass
class ExtendLicenseCommand:
    """Command to extend a license the caller owns."""

    owner: str
    key: str
    additional_minutes: int
