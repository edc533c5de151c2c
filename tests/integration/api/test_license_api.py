"""
Integration tests for the license API.
"""

from datetime import timedelta

import pytest
from django.utils.dateparse import parse_datetime

from licenses.infrastructure.models import License as LicenseModel

ADD_URL = "/api/v1/licenses/add"
CHECK_URL = "/api/v1/licenses/check"
INVALIDATE_URL = "/api/v1/licenses/invalidate"
EXTEND_URL = "/api/v1/licenses/extend"


def bearer(token):
    return {"HTTP_AUTHORIZATION": f"Bearer {token}"}


def add_license(api_client, token, minutes=10, product="foo", one_time=False):
    response = api_client.post(
        ADD_URL,
        {"product": product, "one_time": one_time, "expire_time": minutes},
        format="json",
        **bearer(token),
    )
    assert response.status_code == 201, response.content
    return response.json()["key"]


@pytest.mark.django_db
@pytest.mark.integration
class TestLicenseLifecycleAPI:
    """End-to-end lifecycle through the HTTP API."""

    def test_owner_lifecycle(self, api_client, register):
        """Test issue, check, extend and invalidate by the owner, then a stranger's attempt."""
        alice = register("alice_owner", "password123")
        bob = register("bob_owner", "password123")

        key = add_license(api_client, alice, minutes=10)

        check = api_client.get(CHECK_URL, {"key": key}).json()
        assert check["valid"] is True
        assert check["message"] == "valid"
        expiry = parse_datetime(check["expire_time"])

        response = api_client.post(
            f"{EXTEND_URL}?key={key}", {"additional_time": 5}, format="json", **bearer(alice)
        )
        assert response.status_code == 200
        assert response.json() == {"message": "License extended successfully", "key": key}
        extended = parse_datetime(api_client.get(CHECK_URL, {"key": key}).json()["expire_time"])
        assert extended - expiry == timedelta(minutes=5)

        response = api_client.post(f"{INVALIDATE_URL}?key={key}", **bearer(alice))
        assert response.status_code == 200
        assert response.json()["key"] == key

        check = api_client.get(CHECK_URL, {"key": key}).json()
        assert check["valid"] is False
        assert check["message"] == "expired"

        response = api_client.post(f"{INVALIDATE_URL}?key={key}", **bearer(bob))
        assert response.status_code == 403
        assert response.json()["error"]["message"] == "License not found or access denied"


@pytest.mark.django_db
@pytest.mark.integration
class TestAddLicenseAPI:
    """Integration tests for POST /api/v1/licenses/add."""

    def test_add_license(self, api_client, register):
        """Test the caller becomes the owner of the new license."""
        token = register("alice_owner")

        key = add_license(api_client, token, minutes=30, product="photo-editor", one_time=True)

        stored = LicenseModel.objects.get(key=key)
        assert stored.owner == "alice_owner"
        assert stored.product == "photo-editor"
        assert stored.one_time is True

    def test_add_license_ignores_owner_in_body(self, api_client, register):
        """Test an owner field in the body cannot override the token's identity."""
        token = register("alice_owner")

        response = api_client.post(
            ADD_URL,
            {"owner": "bob_owner", "product": "foo", "expire_time": 10},
            format="json",
            **bearer(token),
        )

        assert response.status_code == 201
        assert LicenseModel.objects.get(key=response.json()["key"]).owner == "alice_owner"

    def test_add_license_too_short(self, api_client, register):
        """Test a duration under five minutes is rejected and nothing is stored."""
        token = register("alice_owner")

        response = api_client.post(
            ADD_URL, {"product": "foo", "expire_time": 4}, format="json", **bearer(token)
        )

        assert response.status_code == 400
        assert "at least 5 minutes" in response.json()["error"]["message"]
        assert LicenseModel.objects.count() == 0

    def test_add_license_too_long(self, api_client, register):
        """Test a duration past the maximum is a 400 and nothing is stored."""
        token = register("alice_owner")

        response = api_client.post(
            ADD_URL, {"product": "foo", "expire_time": 10**10}, format="json", **bearer(token)
        )

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"
        assert LicenseModel.objects.count() == 0

    def test_add_license_bad_body(self, api_client, register):
        """Test a non-numeric duration is rejected."""
        token = register("alice_owner")

        response = api_client.post(
            ADD_URL, {"product": "foo", "expire_time": "soon"}, format="json", **bearer(token)
        )

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"


@pytest.mark.django_db
@pytest.mark.integration
class TestCheckLicenseAPI:
    """Integration tests for GET /api/v1/licenses/check."""

    def test_check_unknown_key(self, api_client):
        """Test an unknown key is reported invalid with a 200."""
        response = api_client.get(CHECK_URL, {"key": "no-such-key"})

        assert response.status_code == 200
        body = response.json()
        assert body["valid"] is False
        assert body["message"] == "invalid key"
        assert body["expire_time"] is None

    def test_check_missing_key(self, api_client):
        """Test a missing key parameter is a 400."""
        response = api_client.get(CHECK_URL)

        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Key is required"

    def test_check_does_not_leak_owner(self, api_client, db_license):
        """Test the public check exposes no owner or product."""
        body = api_client.get(CHECK_URL, {"key": db_license.key}).json()

        assert set(body) == {"valid", "expire_time", "message"}


@pytest.mark.django_db
@pytest.mark.integration
class TestExtendLicenseAPI:
    """Integration tests for POST /api/v1/licenses/extend."""

    def test_extend_too_short(self, api_client, register):
        """Test an extension under five minutes is rejected without changes."""
        token = register("alice_owner")
        key = add_license(api_client, token)
        before = LicenseModel.objects.get(key=key).expire_time

        response = api_client.post(
            f"{EXTEND_URL}?key={key}", {"additional_time": 4}, format="json", **bearer(token)
        )

        assert response.status_code == 400
        assert LicenseModel.objects.get(key=key).expire_time == before

    def test_extend_too_long(self, api_client, register):
        """Test an extension past the maximum is a 400 and the expiry is unchanged."""
        token = register("alice_owner")
        key = add_license(api_client, token)
        before = LicenseModel.objects.get(key=key).expire_time

        response = api_client.post(
            f"{EXTEND_URL}?key={key}",
            {"additional_time": 10**10},
            format="json",
            **bearer(token),
        )

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"
        assert LicenseModel.objects.get(key=key).expire_time == before

    def test_extend_not_owner(self, api_client, register):
        """Test another owner cannot extend the license."""
        alice = register("alice_owner")
        bob = register("bob_owner")
        key = add_license(api_client, alice)
        before = LicenseModel.objects.get(key=key).expire_time

        response = api_client.post(
            f"{EXTEND_URL}?key={key}", {"additional_time": 30}, format="json", **bearer(bob)
        )

        assert response.status_code == 403
        assert LicenseModel.objects.get(key=key).expire_time == before

    def test_extend_unknown_key(self, api_client, register):
        """Test an unknown key is indistinguishable from a foreign one."""
        token = register("alice_owner")

        response = api_client.post(
            f"{EXTEND_URL}?key=missing", {"additional_time": 30}, format="json", **bearer(token)
        )

        assert response.status_code == 403
        assert response.json()["error"]["message"] == "License not found or access denied"

    def test_extend_missing_key(self, api_client, register):
        """Test a missing key parameter is a 400."""
        token = register("alice_owner")

        response = api_client.post(
            EXTEND_URL, {"additional_time": 30}, format="json", **bearer(token)
        )

        assert response.status_code == 400


@pytest.mark.django_db
@pytest.mark.integration
class TestInvalidateLicenseAPI:
    """Integration tests for POST /api/v1/licenses/invalidate."""

    def test_invalidate_unknown_key(self, api_client, register):
        """Test invalidating a missing key is refused."""
        token = register("alice_owner")

        response = api_client.post(f"{INVALIDATE_URL}?key=missing", **bearer(token))

        assert response.status_code == 403

    def test_invalidate_not_owner_leaves_license_valid(self, api_client, register):
        """Test a stranger's invalidation leaves the license valid."""
        alice = register("alice_owner")
        bob = register("bob_owner")
        key = add_license(api_client, alice)

        api_client.post(f"{INVALIDATE_URL}?key={key}", **bearer(bob))

        assert api_client.get(CHECK_URL, {"key": key}).json()["valid"] is True


@pytest.mark.django_db
@pytest.mark.integration
class TestHealthAPI:
    """Integration tests for health endpoints."""

    def test_health(self, api_client):
        """Test the liveness endpoint."""
        response = api_client.get("/health/")

        assert response.status_code == 200
        assert response.json()["health"] is True

    def test_health_db(self, api_client):
        """Test the database health endpoint."""
        response = api_client.get("/health/db/")

        assert response.status_code == 200
        assert response.json()["database"] == "connected"

    def test_ready(self, api_client):
        """Test the readiness endpoint."""
        response = api_client.get("/ready/")

        assert response.status_code == 200
        assert response.json()["checks"] == {"database": True}
