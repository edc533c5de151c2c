"""
GetLicenseQuery.

Query to fetch a full license record by key.
"""
from dataclasses import dataclass


@dataclass
class GetLicenseQuery:
    """Query to fetch a license by key."""

    key: str
