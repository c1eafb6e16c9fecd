"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
session-factory access and providing shared utilities for data operations.
"""

from typing import TypeVar, Generic
from sqlalchemy.orm import Session, sessionmaker


T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - SQLAlchemy session factory access via self._db
    - Generic type parameter for model type hints

    Subclasses open one session per unit of work and map ORM rows to
    Pydantic models internally, so callers never hold ORM instances.

    Example:
        class UserRepository(BaseRepository[UserProfile]):
            def get_by_id(self, user_id: int) -> Optional[UserProfile]:
                with self._db() as session:
                    row = session.get(User, user_id)
                    return self._map_to_profile(row) if row else None
    """

    def __init__(self, db: sessionmaker[Session]) -> None:
        """
        Initialize the repository with a session factory.

        Args:
            db: sessionmaker bound to the application engine.
        """
        self._db = db
