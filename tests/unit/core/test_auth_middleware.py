"""
Unit tests for BearerTokenAuthenticationMiddleware.
"""

import logging

from django.http import HttpResponse
from django.test import RequestFactory

from core.middleware.auth import BearerTokenAuthenticationMiddleware


def ok_response(request):
    return HttpResponse("ok")


class TestBearerTokenAuthenticationMiddleware:
    """Tests for BearerTokenAuthenticationMiddleware."""

    def test_public_path_passes_through(self):
        """Test public paths need no token."""
        middleware = BearerTokenAuthenticationMiddleware(ok_response)

        response = middleware(RequestFactory().get("/api/v1/licenses/check"))

        assert response.status_code == 200

    def test_empty_secret_warns_once(self, settings, caplog):
        """Test an empty signing secret is reported once, not per request."""
        settings.LICENSE_SERVICE = {**settings.LICENSE_SERVICE, "JWT_SECRET": ""}
        factory = RequestFactory()

        with caplog.at_level(logging.WARNING, logger="accounts.domain.credentials"):
            middleware = BearerTokenAuthenticationMiddleware(ok_response)
            for _ in range(3):
                response = middleware(
                    factory.post("/api/v1/licenses/add", HTTP_AUTHORIZATION="Bearer not-a-token")
                )
                assert response.status_code == 401

        warnings = [
            r for r in caplog.records
            if r.name == "accounts.domain.credentials" and "secret is empty" in r.getMessage()
        ]
        assert len(warnings) == 1
