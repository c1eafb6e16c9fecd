"""
Base exception classes for the WordCapture backend.

Each module should define its own exceptions that inherit from these bases.
The API layer maps each base class to one HTTP status code.
"""

from typing import Optional, Any


class WordCaptureError(Exception):
    """
    Base exception for all WordCapture errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(WordCaptureError):
    """Resource not found."""

    pass


class ValidationError(WordCaptureError):
    """Input validation failed."""

    pass


class AuthenticationError(WordCaptureError):
    """Authentication failed (invalid credentials or missing session)."""

    pass


class ConflictError(WordCaptureError):
    """The request conflicts with existing state."""

    pass


class ConfigurationError(WordCaptureError):
    """A service or provider is missing required configuration."""

    pass


class StorageError(WordCaptureError):
    """The relational store rejected or failed an operation."""

    pass


class ExternalServiceError(WordCaptureError):
    """Error communicating with an external service."""

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service


class ProviderError(ExternalServiceError):
    """An OCR or LLM provider failed or returned unusable data."""

    def __init__(
        self,
        provider: str,
        message: str,
        original_error: Optional[str] = None,
    ):
        super().__init__(
            f"Provider error ({provider}): {message}",
            service=provider,
            code="PROVIDER_ERROR",
            details={"original_error": original_error},
        )


# First match wins; ConflictError precedes StorageError so a duplicate
# email maps to 409.
STATUS_BY_ERROR: list[tuple[type[WordCaptureError], int]] = [
    (ValidationError, 400),
    (AuthenticationError, 401),
    (NotFoundError, 404),
    (ConflictError, 409),
    (ConfigurationError, 500),
    (StorageError, 500),
    (ExternalServiceError, 502),
]


def status_for(exc: WordCaptureError) -> int:
    """HTTP status for an application exception."""
    for error_type, status_code in STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status_code
    return 500
