"""
Credential store repositories.

Encapsulates all SQL for the auth tables:
- users
- auth_providers
- credentials
- sessions
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from shared.exceptions import StorageError
from shared.repository import BaseRepository

from .exceptions import EmailAlreadyRegisteredError, RegistrationFailedError
from .models import UserCredentials, UserProfile
from .schema import AuthProvider, Credential, SessionRecord, User

logger = logging.getLogger(__name__)

CREDENTIALS_PROVIDER = "credentials"


def _as_utc(value: datetime) -> datetime:
    # SQLite drops tzinfo on round-trip; stored values are always UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _store_message(error: SQLAlchemyError) -> str:
    orig = getattr(error, "orig", None)
    return str(orig) if orig is not None else str(error)


class CredentialRepository(BaseRepository[UserProfile]):
    """
    Repository for users and their login methods.

    Note: This repository does NOT hash or verify passwords.
    The service layer owns all credential checks.
    """

    def create_user_with_credentials(
        self,
        username: str,
        email: str,
        password_hash: str,
    ) -> int:
        """
        Insert a user, its "credentials" auth provider and its password hash.

        All three rows are written in one transaction: either all commit
        or none do.

        Args:
            username: Display name
            email: Unique email address
            password_hash: bcrypt hash of the password

        Returns:
            The new user's ID.

        Raises:
            EmailAlreadyRegisteredError: If the email already exists.
            RegistrationFailedError: For any other store failure.
        """
        try:
            with self._db.begin() as session:
                user = User(email=email, username=username)
                session.add(user)
                try:
                    session.flush()
                except IntegrityError as e:
                    raise EmailAlreadyRegisteredError(email) from e

                provider = AuthProvider(
                    user_id=user.id,
                    provider=CREDENTIALS_PROVIDER,
                    provider_user_id=str(user.id),
                )
                session.add(provider)
                session.flush()

                session.add(Credential(provider_id=provider.id, password_hash=password_hash))
                user_id = user.id
        except SQLAlchemyError as e:
            logger.error(f"Registration transaction failed: {_store_message(e)}")
            raise RegistrationFailedError(_store_message(e)) from e

        return user_id

    def get_credentials_by_email(self, email: str) -> Optional[UserCredentials]:
        """
        Look up a user and password hash by email.

        Only users with a "credentials" auth provider are returned.
        """
        stmt = (
            select(User.id, User.email, User.username, Credential.password_hash)
            .join(AuthProvider, AuthProvider.user_id == User.id)
            .join(Credential, Credential.provider_id == AuthProvider.id)
            .where(AuthProvider.provider == CREDENTIALS_PROVIDER)
            .where(User.email == email)
            .limit(1)
        )
        try:
            with self._db() as session:
                row = session.execute(stmt).first()
        except SQLAlchemyError as e:
            raise StorageError(_store_message(e), code="STORE_READ_FAILED") from e

        if row is None:
            return None
        return UserCredentials(
            id=row.id,
            email=row.email,
            username=row.username,
            password_hash=row.password_hash,
        )

    def get_user_by_id(self, user_id: int) -> Optional[UserProfile]:
        """Get a user's profile by ID."""
        try:
            with self._db() as session:
                user = session.get(User, user_id)
                if user is None:
                    return None
                return self._map_to_profile(user)
        except SQLAlchemyError as e:
            raise StorageError(_store_message(e), code="STORE_READ_FAILED") from e

    def count_rows(self) -> dict[str, int]:
        """Row counts per auth table (used by maintenance tooling and tests)."""
        with self._db() as session:
            return {
                model.__tablename__: session.scalar(select(func.count()).select_from(model)) or 0
                for model in (User, AuthProvider, Credential, SessionRecord)
            }

    # -------------------------------------------------------------------------
    # Mapping helpers
    # -------------------------------------------------------------------------

    def _map_to_profile(self, user: User) -> UserProfile:
        return UserProfile(
            id=user.id,
            username=user.username,
            email=user.email,
            created_at=_as_utc(user.created_at) if user.created_at else None,
        )


class SessionRepository(BaseRepository[SessionRecord]):
    """Repository for server-side session rows."""

    def create(self, session_id: str, user_id: int, expires_at: datetime) -> None:
        """Insert a session row."""
        try:
            with self._db.begin() as session:
                session.add(SessionRecord(id=session_id, user_id=user_id, expires_at=expires_at))
        except SQLAlchemyError as e:
            raise StorageError(_store_message(e), code="SESSION_WRITE_FAILED") from e

    def get_active(self, session_id: str, now: datetime) -> Optional[tuple[int, datetime]]:
        """
        Get a session that has not expired.

        Returns:
            (user_id, expires_at) or None if missing or expired.
        """
        stmt = select(SessionRecord.user_id, SessionRecord.expires_at).where(
            SessionRecord.id == session_id,
            SessionRecord.expires_at > now,
        )
        try:
            with self._db() as session:
                row = session.execute(stmt).first()
        except SQLAlchemyError as e:
            raise StorageError(_store_message(e), code="SESSION_READ_FAILED") from e

        if row is None:
            return None
        return row.user_id, _as_utc(row.expires_at)

    def delete(self, session_id: str) -> None:
        """Delete a session row (no-op if absent)."""
        try:
            with self._db.begin() as session:
                session.execute(delete(SessionRecord).where(SessionRecord.id == session_id))
        except SQLAlchemyError as e:
            raise StorageError(_store_message(e), code="SESSION_WRITE_FAILED") from e

    def delete_expired(self, now: datetime) -> int:
        """Delete every session that expired before now. Returns rows removed."""
        with self._db.begin() as session:
            result = session.execute(delete(SessionRecord).where(SessionRecord.expires_at <= now))
            return result.rowcount or 0
