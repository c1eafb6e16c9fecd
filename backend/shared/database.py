"""
Relational store setup.

Provides the SQLAlchemy declarative base, engine construction and the
session factory used by repositories. The engine is created once per
process by the service container and passed to repositories explicitly.
"""

from sqlalchemy import create_engine, Engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker, Session
from sqlalchemy.pool import StaticPool

from .config import Settings


class Base(DeclarativeBase):
    """Declarative base for all ORM models."""

    pass


def create_db_engine(url: str, pool_size: int = 7, echo: bool = False) -> Engine:
    """
    Create a SQLAlchemy engine for the given URL.

    SQLite URLs get thread-sharing enabled, and in-memory databases use a
    single static connection so every session sees the same data.

    Args:
        url: SQLAlchemy database URL
        pool_size: Connection pool size for server databases
        echo: Log emitted SQL

    Returns:
        Configured Engine
    """
    if url.startswith("sqlite"):
        kwargs: dict = {"connect_args": {"check_same_thread": False}}
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(url, echo=echo, **kwargs)

    return create_engine(
        url,
        echo=echo,
        pool_size=pool_size,
        pool_pre_ping=True,
    )


def engine_from_settings(settings: Settings) -> Engine:
    """Create the engine described by application settings."""
    return create_db_engine(settings.sqlalchemy_url, pool_size=settings.db_pool_size)


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Create the session factory repositories use for units of work."""
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


def create_schema(engine: Engine) -> None:
    """Create all tables registered on Base.metadata (idempotent)."""
    # Registers the ORM tables on Base.metadata
    import modules.auth.schema  # noqa: F401

    Base.metadata.create_all(bind=engine)


def drop_schema(engine: Engine) -> None:
    """Drop all tables registered on Base.metadata."""
    import modules.auth.schema  # noqa: F401

    Base.metadata.drop_all(bind=engine)
