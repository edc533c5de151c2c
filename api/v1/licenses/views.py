"""
License API views.

These endpoints are used by license owners to:
- Issue licenses for their products
- Invalidate or extend licenses they own

and by anyone holding a key to check whether it is currently valid.
"""

from asgiref.sync import async_to_sync
from django.conf import settings
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from api.exceptions import validation_error_response
from api.v1.licenses.serializers import (
    AddLicenseRequestSerializer,
    CheckLicenseResponseSerializer,
    ExtendLicenseRequestSerializer,
    LicenseKeyResponseSerializer,
)
from core.domain.exceptions import AuthError, ValidationError
from core.instrumentation import Status, StatusCode, get_tracer
from licenses.application.commands.extend_license import ExtendLicenseCommand
from licenses.application.commands.invalidate_license import InvalidateLicenseCommand
from licenses.application.commands.issue_license import IssueLicenseCommand
from licenses.application.handlers.license_lifecycle_handlers import (
    CheckLicenseHandler,
    ExtendLicenseHandler,
    InvalidateLicenseHandler,
    IssueLicenseHandler,
)
from licenses.application.queries.check_license import CheckLicenseQuery
from licenses.domain.services import LicenseKeyGenerator
from licenses.infrastructure.repositories.django_license_repository import DjangoLicenseRepository

# Initialize repositories (in production, use DI container)
_license_repo = DjangoLicenseRepository()

tracer = get_tracer(__name__)

BEARER_AUTH = [{"BearerAuth": []}]

KEY_PARAMETER = OpenApiParameter(
    name="key",
    type=OpenApiTypes.STR,
    location=OpenApiParameter.QUERY,
    required=True,
    description="License key",
)


def _caller_login(request: Request) -> str:
    """Return the login set by BearerTokenAuthenticationMiddleware."""
    login = getattr(request, "login", None)
    if not login:
        raise AuthError("Unauthorized")
    return login


def _required_key(request: Request) -> str:
    key = request.query_params.get("key", "")
    if not key:
        raise ValidationError("Key is required")
    return key


class AddLicenseView(APIView):
    """View for issuing licenses."""

    @extend_schema(
        operation_id="add_license",
        summary="Add License",
        description=(
            "Issue a license owned by the caller. ``expire_time`` is a duration "
            "in minutes and must be at least 5."
        ),
        tags=["Licenses"],
        auth=BEARER_AUTH,
        request=AddLicenseRequestSerializer,
        responses={
            201: LicenseKeyResponseSerializer,
            400: {"description": "Bad Request"},
            401: {"description": "Unauthorized - Missing or invalid access token"},
        },
    )
    def post(self, request: Request) -> Response:
        """Issue a license."""
        return async_to_sync(self._handle_add_license)(request)

    async def _handle_add_license(self, request: Request) -> Response:
        """Async handler for add license."""
        with tracer.start_as_current_span("issue_license") as span:
            span.set_attribute("operation", "issue_license")
            owner = _caller_login(request)

            serializer = AddLicenseRequestSerializer(data=request.data)
            if not serializer.is_valid():
                span.set_status(Status(StatusCode.ERROR, "Validation failed"))
                return validation_error_response(serializer.errors)

            span.set_attribute("owner", owner)
            span.set_attribute("duration_minutes", serializer.validated_data["expire_time"])

            handler = IssueLicenseHandler(
                license_repository=_license_repo,
                key_generator=LicenseKeyGenerator(settings.LICENSE_SERVICE["LICENSE_KEY_BYTES"]),
            )
            result = await handler.handle(
                IssueLicenseCommand(
                    owner=owner,
                    product=serializer.validated_data["product"],
                    duration_minutes=serializer.validated_data["expire_time"],
                    one_time=serializer.validated_data["one_time"],
                )
            )

            span.set_status(Status(StatusCode.OK))
            response_serializer = LicenseKeyResponseSerializer(
                {"message": "License added successfully", "key": result.key}
            )
            return Response(response_serializer.data, status=status.HTTP_201_CREATED)


class CheckLicenseView(APIView):
    """View for the public validity check."""

    @extend_schema(
        operation_id="check_license",
        summary="Check License",
        description=(
            "Report whether a license key is currently valid. Unknown keys are "
            "reported as invalid rather than as an error."
        ),
        tags=["Licenses"],
        auth=[],
        parameters=[KEY_PARAMETER],
        responses={
            200: CheckLicenseResponseSerializer,
            400: {"description": "Key is required"},
        },
    )
    def get(self, request: Request) -> Response:
        """Check a license key."""
        return async_to_sync(self._handle_check_license)(request)

    async def _handle_check_license(self, request: Request) -> Response:
        """Async handler for check license."""
        with tracer.start_as_current_span("check_license") as span:
            span.set_attribute("operation", "check_license")
            key = _required_key(request)

            handler = CheckLicenseHandler(license_repository=_license_repo)
            result = await handler.handle(CheckLicenseQuery(key=key))

            span.set_attribute("license.valid", result.valid)
            span.set_status(Status(StatusCode.OK))
            return Response(CheckLicenseResponseSerializer(result).data, status=status.HTTP_200_OK)


class InvalidateLicenseView(APIView):
    """View for invalidating licenses."""

    @extend_schema(
        operation_id="invalidate_license",
        summary="Invalidate License",
        description="Expire a license the caller owns, effective immediately.",
        tags=["Licenses"],
        auth=BEARER_AUTH,
        request=None,
        parameters=[KEY_PARAMETER],
        responses={
            200: LicenseKeyResponseSerializer,
            400: {"description": "Key is required"},
            401: {"description": "Unauthorized - Missing or invalid access token"},
            403: {"description": "License not found or access denied"},
        },
    )
    def post(self, request: Request) -> Response:
        """Invalidate a license."""
        return async_to_sync(self._handle_invalidate_license)(request)

    async def _handle_invalidate_license(self, request: Request) -> Response:
        """Async handler for invalidate license."""
        with tracer.start_as_current_span("invalidate_license") as span:
            span.set_attribute("operation", "invalidate_license")
            owner = _caller_login(request)
            key = _required_key(request)
            span.set_attribute("owner", owner)

            handler = InvalidateLicenseHandler(license_repository=_license_repo)
            await handler.handle(InvalidateLicenseCommand(owner=owner, key=key))

            span.set_status(Status(StatusCode.OK))
            response_serializer = LicenseKeyResponseSerializer(
                {"message": "License invalidated successfully", "key": key}
            )
            return Response(response_serializer.data, status=status.HTTP_200_OK)


class ExtendLicenseView(APIView):
    """View for extending licenses."""

    @extend_schema(
        operation_id="extend_license",
        summary="Extend License",
        description=(
            "Add ``additional_time`` minutes (at least 5) to a license the caller "
            "owns. An expired license restarts from now."
        ),
        tags=["Licenses"],
        auth=BEARER_AUTH,
        request=ExtendLicenseRequestSerializer,
        parameters=[KEY_PARAMETER],
        responses={
            200: LicenseKeyResponseSerializer,
            400: {"description": "Bad Request"},
            401: {"description": "Unauthorized - Missing or invalid access token"},
            403: {"description": "License not found or access denied"},
        },
    )
    def post(self, request: Request) -> Response:
        """Extend a license."""
        return async_to_sync(self._handle_extend_license)(request)

    async def _handle_extend_license(self, request: Request) -> Response:
        """Async handler for extend license."""
        with tracer.start_as_current_span("extend_license") as span:
            span.set_attribute("operation", "extend_license")
            owner = _caller_login(request)
            key = _required_key(request)

            serializer = ExtendLicenseRequestSerializer(data=request.data)
            if not serializer.is_valid():
                span.set_status(Status(StatusCode.ERROR, "Validation failed"))
                return validation_error_response(serializer.errors)

            span.set_attribute("owner", owner)
            span.set_attribute("additional_minutes", serializer.validated_data["additional_time"])

            handler = ExtendLicenseHandler(license_repository=_license_repo)
            result = await handler.handle(
                ExtendLicenseCommand(
                    owner=owner,
                    key=key,
                    additional_minutes=serializer.validated_data["additional_time"],
                )
            )

            span.set_status(Status(StatusCode.OK))
            response_serializer = LicenseKeyResponseSerializer(
                {"message": "License extended successfully", "key": result.key}
            )
            return Response(response_serializer.data, status=status.HTTP_200_OK)
