"""
Account domain events.
"""

from datetime import datetime
from typing import Optional

from core.domain.events import DomainEvent


class AccountRegistered(DomainEvent):
    """Event raised when a new account is registered."""

    def __init__(self, login: str, occurred_at: Optional[datetime] = None):
        super().__init__(aggregate_id=login, occurred_at=occurred_at)
        self.login = login


class LoginSucceeded(DomainEvent):
    """Event raised when an account logs in."""

    def __init__(self, login: str, occurred_at: Optional[datetime] = None):
        super().__init__(aggregate_id=login, occurred_at=occurred_at)
        self.login = login


class LoginFailed(DomainEvent):
    """Event raised when a login attempt is rejected."""

    def __init__(self, login: str, occurred_at: Optional[datetime] = None):
        super().__init__(aggregate_id=login, occurred_at=occurred_at)
        self.login = login
