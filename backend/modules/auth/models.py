"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from shared.models import AuthenticatedUser


class RegisterRequest(BaseModel):
    """
    Registration payload.

    Fields default to empty strings so the service can report every
    missing field at once with a 400 instead of a schema error.
    """

    username: str = Field(default="", description="Display name")
    email: str = Field(default="", description="Email address (unique)")
    password: str = Field(default="", description="Plaintext password")


class LoginRequest(BaseModel):
    """Login payload."""

    email: str = Field(default="", description="Email address")
    password: str = Field(default="", description="Plaintext password")


class UserIdResponse(BaseModel):
    """Response carrying only the user's ID."""

    id: int


class MessageResponse(BaseModel):
    """Plain message response."""

    message: str


class UserProfile(BaseModel):
    """Stored user profile."""

    id: int = Field(..., description="User ID")
    username: str = Field(..., description="Display name")
    email: str = Field(..., description="Email address")
    created_at: Optional[datetime] = Field(None, description="Account creation time")


class UserCredentials(BaseModel):
    """A user joined with its password hash, for login checks only."""

    id: int
    email: str
    username: str
    password_hash: str


class SessionPayload(BaseModel):
    """
    Decoded session cookie.

    The cookie is an HS256 token signed with the session secret; it only
    points at a server-side session row.
    """

    sid: str = Field(..., description="Server-side session ID")
    sub: str = Field(..., description="Subject (user ID)")
    exp: int = Field(..., description="Expiration timestamp")
    iat: int = Field(..., description="Issued at timestamp")


class IssuedSession(BaseModel):
    """A newly created session and the cookie value that carries it."""

    token: str
    session_id: str
    user_id: int
    expires_at: datetime
    max_age: int = Field(..., description="Cookie lifetime in seconds")


__all__ = [
    "AuthenticatedUser",
    "RegisterRequest",
    "LoginRequest",
    "UserIdResponse",
    "MessageResponse",
    "UserProfile",
    "UserCredentials",
    "SessionPayload",
    "IssuedSession",
]
