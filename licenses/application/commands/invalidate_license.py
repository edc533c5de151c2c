"""
InvalidateLicenseCommand.

Command to expire a license immediately.
"""
from dataclasses import dataclass


@dataclass
class InvalidateLicenseCommand:
    """Command to invalidate a license the caller owns."""

    owner: str
    key: str
