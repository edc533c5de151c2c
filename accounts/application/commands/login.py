"""
LoginCommand.

Command to exchange a login and password for an access token.
"""
from dataclasses import dataclass, field


@dataclass
class LoginCommand:
    """Command to log in."""

    login: str
    password: str = field(repr=False)
