"""
Authentication module exceptions.

These exceptions are raised by the auth module and can be caught
by API error handlers to return appropriate HTTP responses.
"""

from shared.exceptions import (
    AuthenticationError,
    ConflictError,
    StorageError,
    ValidationError,
)


class MissingFieldsError(ValidationError):
    """Raised when required registration or login fields are empty."""

    def __init__(self, fields: list[str]):
        super().__init__(
            "Please enter all required fields",
            code="MISSING_FIELDS",
            details={"fields": fields},
        )


class PasswordTooLongError(ValidationError):
    """Raised when a password exceeds the bcrypt input limit."""

    def __init__(self, max_bytes: int):
        super().__init__(
            f"Password must not exceed {max_bytes} bytes",
            code="PASSWORD_TOO_LONG",
            details={"max_bytes": max_bytes},
        )


class InvalidCredentialsError(AuthenticationError):
    """Raised for any failed login (unknown email or wrong password alike)."""

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message, code="INVALID_CREDENTIALS")


class MissingSessionError(AuthenticationError):
    """Raised when no session cookie is provided."""

    def __init__(self, message: str = "Not authenticated"):
        super().__init__(message, code="MISSING_SESSION")


class InvalidSessionError(AuthenticationError):
    """Raised when a session cookie is malformed, forged or revoked."""

    def __init__(self, message: str = "Invalid session"):
        super().__init__(message, code="INVALID_SESSION")


class ExpiredSessionError(AuthenticationError):
    """Raised when a session has expired."""

    def __init__(self, message: str = "Session has expired"):
        super().__init__(message, code="SESSION_EXPIRED")


class EmailAlreadyRegisteredError(ConflictError, StorageError):
    """Raised when the store rejects a duplicate email."""

    def __init__(self, email: str):
        super().__init__(
            "Email is already registered",
            code="EMAIL_TAKEN",
            details={"email": email},
        )


class RegistrationFailedError(StorageError):
    """Raised when the registration transaction fails in the store."""

    def __init__(self, store_message: str):
        super().__init__(
            store_message,
            code="REGISTRATION_FAILED",
        )
