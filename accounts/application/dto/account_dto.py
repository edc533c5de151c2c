"""
Account DTOs for API responses.
"""
from dataclasses import dataclass


@dataclass
class AccessTokenDTO:
    """DTO for an issued access token."""

    login: str
    access_token: str
