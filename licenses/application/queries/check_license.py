"""
CheckLicenseQuery.

Query for the public validity check of a license key.
"""
from dataclasses import dataclass


@dataclass
class CheckLicenseQuery:
    """Query to check whether a license key is currently valid."""

    key: str
