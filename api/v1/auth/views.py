"""
Auth API views.

These endpoints let a license owner:
- Register an account
- Log in to obtain a fresh access token
"""

from asgiref.sync import async_to_sync
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.application.commands.login import LoginCommand
from accounts.application.commands.register_account import RegisterAccountCommand
from accounts.application.handlers.account_handlers import LoginHandler, RegisterAccountHandler
from accounts.infrastructure.credentials import DjangoPasswordHasher, build_token_service
from accounts.infrastructure.repositories.django_account_repository import (
    DjangoAccountRepository,
)
from api.exceptions import validation_error_response
from api.v1.auth.serializers import AccessTokenResponseSerializer, CredentialsRequestSerializer
from core.instrumentation import Status, StatusCode, get_tracer

# Initialize repositories (in production, use DI container)
_account_repo = DjangoAccountRepository()
_password_hasher = DjangoPasswordHasher()

tracer = get_tracer(__name__)


class RegisterView(APIView):
    """View for account registration."""

    @extend_schema(
        operation_id="register",
        summary="Register",
        description=(
            "Create an account and return an access token. The login must be at "
            "least 6 characters and the password at least 8."
        ),
        tags=["Auth"],
        request=CredentialsRequestSerializer,
        responses={
            201: AccessTokenResponseSerializer,
            400: {"description": "Bad Request"},
            409: {"description": "Login is already taken"},
        },
    )
    def post(self, request: Request) -> Response:
        """Register an account."""
        return async_to_sync(self._handle_register)(request)

    async def _handle_register(self, request: Request) -> Response:
        """Async handler for register."""
        with tracer.start_as_current_span("register_account") as span:
            span.set_attribute("operation", "register_account")

            serializer = CredentialsRequestSerializer(data=request.data)
            if not serializer.is_valid():
                span.set_status(Status(StatusCode.ERROR, "Validation failed"))
                return validation_error_response(serializer.errors)

            handler = RegisterAccountHandler(
                account_repository=_account_repo,
                password_hasher=_password_hasher,
                token_service=build_token_service(),
            )
            result = await handler.handle(
                RegisterAccountCommand(
                    login=serializer.validated_data["login"],
                    password=serializer.validated_data["password"],
                )
            )

            span.set_status(Status(StatusCode.OK))
            response_serializer = AccessTokenResponseSerializer(
                {
                    "ok": True,
                    "message": "User successfully created",
                    "access_token": result.access_token,
                }
            )
            return Response(response_serializer.data, status=status.HTTP_201_CREATED)


class LoginView(APIView):
    """View for account login."""

    @extend_schema(
        operation_id="login",
        summary="Login",
        description="Exchange login and password for a fresh access token.",
        tags=["Auth"],
        request=CredentialsRequestSerializer,
        responses={
            200: AccessTokenResponseSerializer,
            400: {"description": "Bad Request"},
            401: {"description": "Incorrect login or password"},
        },
    )
    def post(self, request: Request) -> Response:
        """Log in to an account."""
        return async_to_sync(self._handle_login)(request)

    async def _handle_login(self, request: Request) -> Response:
        """Async handler for login."""
        with tracer.start_as_current_span("login") as span:
            span.set_attribute("operation", "login")

            serializer = CredentialsRequestSerializer(data=request.data)
            if not serializer.is_valid():
                span.set_status(Status(StatusCode.ERROR, "Validation failed"))
                return validation_error_response(serializer.errors)

            handler = LoginHandler(
                account_repository=_account_repo,
                password_hasher=_password_hasher,
                token_service=build_token_service(),
            )
            result = await handler.handle(
                LoginCommand(
                    login=serializer.validated_data["login"],
                    password=serializer.validated_data["password"],
                )
            )

            span.set_status(Status(StatusCode.OK))
            response_serializer = AccessTokenResponseSerializer(
                {
                    "ok": True,
                    "message": "User successfully logged in",
                    "access_token": result.access_token,
                }
            )
            return Response(response_serializer.data, status=status.HTTP_200_OK)
