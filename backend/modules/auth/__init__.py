"""
Authentication module.

Handles email/password registration, login, and cookie-backed sessions.

Public API:
- IAuthService: Interface for auth operations
- AuthService: SQL-backed implementation
- AuthenticatedUser: Minimal user info from a session
- UserProfile: Stored user profile
- Auth exceptions: InvalidCredentialsError, EmailAlreadyRegisteredError, etc.
"""

from .interfaces import IAuthService
from .models import (
    AuthenticatedUser,
    IssuedSession,
    LoginRequest,
    RegisterRequest,
    SessionPayload,
    UserProfile,
)
from .exceptions import (
    EmailAlreadyRegisteredError,
    ExpiredSessionError,
    InvalidCredentialsError,
    InvalidSessionError,
    MissingFieldsError,
    MissingSessionError,
    PasswordTooLongError,
    RegistrationFailedError,
)
from .password import BcryptHasher, PasswordHasher
from .repository import CredentialRepository, SessionRepository
from .service import AuthService, SessionSettings

__all__ = [
    # Interface
    "IAuthService",
    # Implementation
    "AuthService",
    "SessionSettings",
    "CredentialRepository",
    "SessionRepository",
    "BcryptHasher",
    "PasswordHasher",
    # Models
    "AuthenticatedUser",
    "IssuedSession",
    "LoginRequest",
    "RegisterRequest",
    "SessionPayload",
    "UserProfile",
    # Exceptions
    "EmailAlreadyRegisteredError",
    "ExpiredSessionError",
    "InvalidCredentialsError",
    "InvalidSessionError",
    "MissingFieldsError",
    "MissingSessionError",
    "PasswordTooLongError",
    "RegistrationFailedError",
]
