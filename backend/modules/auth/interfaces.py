"""
Authentication module interface.

Other modules should depend on IAuthService, not the concrete implementation.
This enables testing with mocks and swapping the credential store.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import (
    AuthenticatedUser,
    IssuedSession,
    LoginRequest,
    RegisterRequest,
    UserProfile,
)


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for authentication operations.

    This protocol defines the contract that the auth module exposes
    to other modules. Implementations must provide all these methods.
    """

    async def register(self, request: RegisterRequest) -> int:
        """
        Register a user with email/password credentials.

        Creates the user, its "credentials" auth provider and the password
        hash in one transaction.

        Args:
            request: Username, email and password

        Returns:
            The new user's ID

        Raises:
            ValidationError: If any field is empty
            StorageError: If the store rejects the insert (e.g. duplicate email)
        """
        ...

    async def login(self, request: LoginRequest) -> AuthenticatedUser:
        """
        Check email/password credentials.

        Does not create a session; callers do that on success.

        Raises:
            AuthenticationError: For missing fields, unknown email or wrong
                password, with the same message in every case
        """
        ...

    async def create_session(self, user_id: int) -> IssuedSession:
        """Create a server-side session and return its signed cookie value."""
        ...

    async def resolve_session(self, token: Optional[str]) -> AuthenticatedUser:
        """
        Resolve a session cookie to the authenticated user.

        Raises:
            AuthenticationError: If the cookie is missing, invalid, expired
                or its session was destroyed
        """
        ...

    async def destroy_session(self, token: Optional[str]) -> None:
        """Delete the session behind a cookie (no-op if it is unknown)."""
        ...

    async def get_user_by_id(self, user_id: int) -> Optional[UserProfile]:
        """Get a user's profile by ID, or None if not found."""
        ...
