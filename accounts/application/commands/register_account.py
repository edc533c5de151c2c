"""
RegisterAccountCommand.

Command to create an account and sign it in.
"""
from dataclasses import dataclass, field


@dataclass
class RegisterAccountCommand:
    """Command to register a login with a password."""

    login: str
    password: str = field(repr=False)
