"""
Pytest configuration and shared fixtures.
"""

from datetime import datetime, timezone

import pytest
from asgiref.sync import async_to_sync

from accounts.domain.credentials import TokenService, TokenSettings
from accounts.infrastructure.repositories.django_account_repository import (
    DjangoAccountRepository,
)
from core.infrastructure.events import event_bus
from licenses.domain.license import License
from licenses.infrastructure.repositories.django_license_repository import DjangoLicenseRepository
from tests.fakes import (
    InMemoryAccountRepository,
    InMemoryLicenseRepository,
    PlainPasswordHasher,
    RecordingEventHandler,
)

TEST_SECRET = "unit-test-signing-secret-long-enough-for-every-hmac-variant-0123456789abcdef"


@pytest.fixture
def license_repository():
    """Fixture for DjangoLicenseRepository."""
    return DjangoLicenseRepository()


@pytest.fixture
def account_repository():
    """Fixture for DjangoAccountRepository."""
    return DjangoAccountRepository()


@pytest.fixture
def memory_license_repository():
    """Fixture for an empty in-memory license repository."""
    return InMemoryLicenseRepository()


@pytest.fixture
def memory_account_repository():
    """Fixture for an empty in-memory account repository."""
    return InMemoryAccountRepository()


@pytest.fixture
def password_hasher():
    """Fixture for a fast, inspectable password hasher."""
    return PlainPasswordHasher()


@pytest.fixture
def token_service():
    """Fixture for a TokenService with a fixed secret."""
    return TokenService(TokenSettings(secret=TEST_SECRET))


@pytest.fixture
def now():
    """Fixture for a fixed aware UTC instant."""
    return datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def sample_license(now):
    """Fixture for a License owned by alice_owner, valid for 60 minutes."""
    return License.create(
        key="abcd-ef01-2345-6789-abcd-ef01-2345-6789",
        owner="alice_owner",
        product="photo-editor",
        duration_minutes=60,
        current_time=now,
    )


@pytest.fixture
def recorded_events():
    """
    Fixture capturing every event published on the global bus.

    Yields a callable returning the events of one type.
    """
    recorder = RecordingEventHandler()
    subscribed = []

    def subscribe(event_type):
        event_bus.subscribe(event_type, recorder)
        subscribed.append(event_type)
        return recorder.events

    yield subscribe

    for event_type in subscribed:
        handlers = event_bus._handlers.get(event_type, [])
        if recorder in handlers:
            handlers.remove(recorder)


@pytest.fixture
def db_license(db, license_repository):
    """Fixture for a License owned by alice_owner saved in database."""
    license = License.create(
        key="1111-2222-3333-4444-5555-6666-7777-8888",
        owner="alice_owner",
        product="photo-editor",
        duration_minutes=60,
    )
    return async_to_sync(license_repository.add)(license)


@pytest.fixture
def api_client():
    """Fixture for DRF API client."""
    from rest_framework.test import APIClient

    return APIClient()


@pytest.fixture
def register(api_client):
    """
    Fixture registering an account through the API.

    Returns a callable taking login and password and returning the
    access token.
    """

    def _register(login, password="correct-horse"):
        response = api_client.post(
            "/api/v1/auth/register",
            {"login": login, "password": password},
            format="json",
        )
        assert response.status_code == 201, response.content
        return response.json()["access_token"]

    return _register
