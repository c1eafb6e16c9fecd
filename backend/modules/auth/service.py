"""
Authentication service implementation.

Registers users against the relational credential store, checks
email/password logins, and manages cookie-backed server-side sessions.
"""

import logging
import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional
import jwt

from shared.config import Settings
from shared.exceptions import ConfigurationError

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
    ExpiredSessionError,
    InvalidCredentialsError,
    InvalidSessionError,
    MissingFieldsError,
    MissingSessionError,
    PasswordTooLongError,
)
from .password import PasswordHasher
from .repository import CredentialRepository, SessionRepository

logger = logging.getLogger(__name__)

# bcrypt only reads the first 72 bytes of its input
PASSWORD_MAX_BYTES = 72
SESSION_ALGORITHM = "HS256"


@dataclass(frozen=True)
class SessionSettings:
    """Session cookie signing and lifetime."""

    secret: str
    ttl: timedelta = timedelta(hours=24)

    @classmethod
    def from_settings(cls, settings: Settings) -> "SessionSettings":
        if not settings.session_secret:
            raise ConfigurationError(
                "SESSION_SECRET must be set to sign session cookies",
                code="SESSION_NOT_CONFIGURED",
            )
        return cls(
            secret=settings.session_secret,
            ttl=timedelta(hours=settings.session_ttl_hours),
        )


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Passwords are stored as bcrypt hashes in the credentials table.
    Sessions are rows in the sessions table; the cookie carries a signed
    token pointing at the row, so logout revokes it server-side.
    """

    def __init__(
        self,
        credentials: CredentialRepository,
        sessions: SessionRepository,
        session_settings: SessionSettings,
        *,
        password_hasher: PasswordHasher,
    ):
        self._credentials = credentials
        self._sessions = sessions
        self._session_settings = session_settings
        self._hasher = password_hasher

    async def register(self, request: RegisterRequest) -> int:
        """
        Register a user with email/password credentials.

        The password is hashed before the transaction opens so the
        transaction only spans the three inserts.
        """
        username = request.username.strip()
        email = request.email.strip()
        password = request.password

        missing = [
            name
            for name, value in (("username", username), ("email", email), ("password", password))
            if not value
        ]
        if missing:
            raise MissingFieldsError(missing)
        if len(password.encode("utf-8")) > PASSWORD_MAX_BYTES:
            raise PasswordTooLongError(PASSWORD_MAX_BYTES)

        password_hash = await self._hasher.hash(password)
        user_id = self._credentials.create_user_with_credentials(
            username=username,
            email=email,
            password_hash=password_hash,
        )

        logger.info(f"Registered user {user_id}")
        return user_id

    async def login(self, request: LoginRequest) -> AuthenticatedUser:
        """
        Check email/password credentials.

        Unknown emails and wrong passwords fail identically, including
        spending the same bcrypt time.
        """
        email = request.email.strip()
        password = request.password

        if not email or not password:
            raise InvalidCredentialsError("Email and password required")

        user = self._credentials.get_credentials_by_email(email)
        if user is None:
            await self._hasher.burn(password)
            logger.info("Login rejected: unknown account")
            raise InvalidCredentialsError()

        if not await self._hasher.verify(password, user.password_hash):
            logger.info(f"Login rejected for user {user.id}: wrong password")
            raise InvalidCredentialsError()

        return AuthenticatedUser(id=user.id)

    async def create_session(self, user_id: int) -> IssuedSession:
        """Create a session row and sign a cookie token for it."""
        now = datetime.now(timezone.utc)
        expires_at = now + self._session_settings.ttl
        session_id = secrets.token_urlsafe(32)

        self._sessions.create(session_id, user_id, expires_at)

        token = jwt.encode(
            {
                "sid": session_id,
                "sub": str(user_id),
                "iat": int(now.timestamp()),
                "exp": int(expires_at.timestamp()),
            },
            self._session_settings.secret,
            algorithm=SESSION_ALGORITHM,
        )

        return IssuedSession(
            token=token,
            session_id=session_id,
            user_id=user_id,
            expires_at=expires_at,
            max_age=int(self._session_settings.ttl.total_seconds()),
        )

    async def resolve_session(self, token: Optional[str]) -> AuthenticatedUser:
        """
        Resolve a session cookie to the authenticated user.

        The signature and expiry are checked first, then the session row
        must still exist and be unexpired.
        """
        payload = self._decode(token)

        active = self._sessions.get_active(payload.sid, datetime.now(timezone.utc))
        if active is None:
            raise InvalidSessionError("Session not found or expired")

        user_id, expires_at = active
        if str(user_id) != payload.sub:
            raise InvalidSessionError()

        return AuthenticatedUser(id=user_id, session_id=payload.sid, expires_at=expires_at)

    async def destroy_session(self, token: Optional[str]) -> None:
        """Delete the session behind a cookie (no-op if it is unknown)."""
        if not token:
            return
        try:
            payload = self._decode(token, verify_exp=False)
        except InvalidSessionError:
            return
        self._sessions.delete(payload.sid)

    async def get_user_by_id(self, user_id: int) -> Optional[UserProfile]:
        """Get a user's profile by ID."""
        return self._credentials.get_user_by_id(user_id)

    def purge_expired_sessions(self) -> int:
        """Delete expired session rows. Returns the number removed."""
        removed = self._sessions.delete_expired(datetime.now(timezone.utc))
        if removed:
            logger.info(f"Purged {removed} expired sessions")
        return removed

    def _decode(self, token: Optional[str], verify_exp: bool = True) -> SessionPayload:
        if not token:
            raise MissingSessionError()

        try:
            payload = jwt.decode(
                token,
                self._session_settings.secret,
                algorithms=[SESSION_ALGORITHM],
                options={"verify_exp": verify_exp},
            )
            return SessionPayload(**payload)
        except jwt.ExpiredSignatureError:
            raise ExpiredSessionError()
        except (jwt.InvalidTokenError, ValueError) as e:
            raise InvalidSessionError(f"Invalid session: {e}")
