"""
Domain exceptions.

Domain exceptions represent business rule violations
and domain-specific error conditions.
"""


class DomainException(Exception):
    """Base exception for all domain exceptions."""

    def __init__(self, message: str, code: str = None):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class ValidationError(DomainException):
    """Raised when input is malformed or out of range."""

    def __init__(self, message: str = "Invalid input"):
        super().__init__(message, code="VALIDATION_ERROR")


class AuthError(DomainException):
    """Raised when a token or login credentials are rejected."""

    def __init__(self, message: str = "Authentication failed"):
        super().__init__(message, code="AUTHENTICATION_FAILED")


class ConflictError(DomainException):
    """Raised when an account identity is already registered."""

    def __init__(self, message: str = "Login is already taken"):
        super().__init__(message, code="CONFLICT")


class NotFoundError(DomainException):
    """Raised when a license key or account identity does not exist."""

    def __init__(self, message: str = "Not found"):
        super().__init__(message, code="NOT_FOUND")


class ForbiddenError(DomainException):
    """Raised when the caller is not the owner of a license."""

    def __init__(self, message: str = "License does not belong to user"):
        super().__init__(message, code="FORBIDDEN")


class NotFoundOrForbiddenError(DomainException):
    """
    Raised by owner-gated mutations when nothing matched.

    Covers both a missing key and a key owned by someone else.
    """

    def __init__(self, message: str = "License not found or access denied"):
        super().__init__(message, code="NOT_FOUND_OR_FORBIDDEN")


class EntropyError(DomainException):
    """Raised when the system randomness source is unavailable."""

    def __init__(self, message: str = "Randomness source unavailable"):
        super().__init__(message, code="ENTROPY_UNAVAILABLE")
