"""
Bearer token authentication middleware.

Owner-scoped license endpoints require an ``Authorization: Bearer``
header carrying an access token issued at register or login.
"""

import logging
from typing import Optional

from django.http import HttpRequest, HttpResponse, JsonResponse
from django.utils.deprecation import MiddlewareMixin

from accounts.infrastructure.credentials import build_token_service
from core.domain.exceptions import AuthError

logger = logging.getLogger(__name__)

PROTECTED_PATHS = (
    "/api/v1/licenses/add",
    "/api/v1/licenses/invalidate",
    "/api/v1/licenses/extend",
)

BEARER_PREFIX = "Bearer "


class BearerTokenAuthenticationMiddleware(MiddlewareMixin):
    """
    Middleware for bearer token authentication.

    This middleware:
    1. Leaves public paths (register, login, check, health, docs) alone
    2. Verifies the access token on owner-scoped license paths
    3. Stores the token's login on ``request.login``
    4. Returns 401 Unauthorized if authentication fails
    """

    def __init__(self, get_response):
        super().__init__(get_response)
        # Built once; settings are read at startup
        self.token_service = build_token_service()

    def process_request(self, request: HttpRequest) -> Optional[HttpResponse]:
        """
        Process request and validate authentication.

        Args:
            request: HTTP request

        Returns:
            HttpResponse with 401 if authentication fails, None otherwise
        """
        if not self._requires_auth(request.path):
            return None

        header = request.headers.get("Authorization", "")
        if not header:
            return self._unauthorized("Missing authorization header")

        if not header.startswith(BEARER_PREFIX) or not header[len(BEARER_PREFIX):].strip():
            return self._unauthorized("Invalid authorization header")

        token = header[len(BEARER_PREFIX):].strip()
        try:
            login = self.token_service.verify(token)
        except AuthError as e:
            logger.warning("Rejected access token: %s", e.message)
            return self._unauthorized("Invalid or expired access token")

        request.login = login  # type: ignore
        return None

    def _requires_auth(self, path: str) -> bool:
        normalized = path.rstrip("/")
        return normalized in PROTECTED_PATHS

    def _unauthorized(self, message: str) -> JsonResponse:
        return JsonResponse(
            {"error": {"code": "AUTHENTICATION_FAILED", "message": message}},
            status=401,
        )
