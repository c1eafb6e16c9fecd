"""
Shared infrastructure for the WordCapture backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: SQLAlchemy engine and session factory
- exceptions: Base exception classes
- logging: Root logger setup

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import Base, create_db_engine, create_session_factory, create_schema
from .exceptions import (
    WordCaptureError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    ConflictError,
    ConfigurationError,
    StorageError,
    ExternalServiceError,
    ProviderError,
)
from .models import AuthenticatedUser, CamelModel

__all__ = [
    "Settings",
    "get_settings",
    "Base",
    "create_db_engine",
    "create_session_factory",
    "create_schema",
    "WordCaptureError",
    "NotFoundError",
    "ValidationError",
    "AuthenticationError",
    "ConflictError",
    "ConfigurationError",
    "StorageError",
    "ExternalServiceError",
    "ProviderError",
    "AuthenticatedUser",
    "CamelModel",
]
