"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.

The container is built once, eagerly, in the application lifespan and
stored on app.state.container. Tests substitute services through
app.dependency_overrides or by passing a prebuilt container to create_app.
"""

import asyncio
import logging
import secrets
from datetime import timedelta
from typing import TYPE_CHECKING, Optional

from anyio import to_thread
from fastapi import Request
from sqlalchemy import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from shared.config import Settings
from shared.exceptions import ConfigurationError

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.interfaces import IAuthService
    from modules.auth.service import SessionSettings
    from modules.analysis.interfaces import ILanguageAnalysisService
    from modules.capture.interfaces import ICaptureService
    from modules.extraction.interfaces import IDocumentExtractionService

logger = logging.getLogger(__name__)


class ServiceContainer:
    """
    Container for all service instances.

    Holds the database engine, the provider clients and every service
    built on top of them. One container lives for the whole process.
    """

    def __init__(
        self,
        auth: "IAuthService",
        extraction: "IDocumentExtractionService",
        analysis: "ILanguageAnalysisService",
        capture: "ICaptureService",
        engine: Optional[Engine] = None,
        session_factory: Optional[sessionmaker[Session]] = None,
    ) -> None:
        self.auth = auth
        self.extraction = extraction
        self.analysis = analysis
        self.capture = capture
        self.engine = engine
        self.session_factory = session_factory
        self._cleanup_task: Optional[asyncio.Task] = None

    @classmethod
    def build(cls, settings: Settings) -> "ServiceContainer":
        """
        Create the engine, provider clients and services.

        Must run inside the event loop (the Document AI client binds to it).

        Raises:
            ConfigurationError: In production, if a provider or the session
                secret is not configured
        """
        from modules.auth.password import BcryptHasher
        from modules.auth.repository import CredentialRepository, SessionRepository
        from modules.auth.service import AuthService
        from modules.analysis.service import LanguageAnalysisService
        from modules.capture.service import CaptureService
        from modules.extraction.service import DocumentExtractionService
        from providers import DocumentAIConfig, OpenAIConfig, build_clients
        from shared.database import create_schema, create_session_factory, engine_from_settings

        engine = engine_from_settings(settings)
        create_schema(engine)
        session_factory = create_session_factory(engine)

        documentai_config = DocumentAIConfig.from_settings(settings)
        openai_config = OpenAIConfig.from_settings(settings)
        clients = build_clients(
            documentai_config,
            openai_config,
            fail_fast=settings.is_production,
        )

        extraction = DocumentExtractionService(
            documentai_config,
            client=clients.documentai,
            init_error=clients.errors.get("documentai"),
        )
        analysis = LanguageAnalysisService(
            openai_config,
            llm=clients.llm,
            init_error=clients.errors.get("openai"),
        )

        auth = AuthService(
            CredentialRepository(session_factory),
            SessionRepository(session_factory),
            cls._session_settings(settings),
            password_hasher=BcryptHasher(),
        )

        return cls(
            auth=auth,
            extraction=extraction,
            analysis=analysis,
            capture=CaptureService(extraction, analysis),
            engine=engine,
            session_factory=session_factory,
        )

    @staticmethod
    def _session_settings(settings: Settings) -> "SessionSettings":
        from modules.auth.service import SessionSettings

        if settings.session_secret or settings.is_production:
            return SessionSettings.from_settings(settings)
        logger.warning(
            "SESSION_SECRET is not set; using a random secret. "
            "Sessions will not survive a restart."
        )
        return SessionSettings(
            secret=secrets.token_urlsafe(32),
            ttl=timedelta(hours=settings.session_ttl_hours),
        )

    def start_session_cleanup(self, interval: float) -> None:
        """Start purging expired sessions every `interval` seconds."""
        purge = getattr(self.auth, "purge_expired_sessions", None)
        if purge is None or interval <= 0 or self._cleanup_task is not None:
            return
        self._cleanup_task = asyncio.create_task(self._purge_loop(purge, interval))

    async def stop_session_cleanup(self) -> None:
        if self._cleanup_task is None:
            return
        self._cleanup_task.cancel()
        try:
            await self._cleanup_task
        except asyncio.CancelledError:
            pass
        self._cleanup_task = None

    async def _purge_loop(self, purge, interval: float) -> None:
        while True:
            await asyncio.sleep(interval)
            try:
                await to_thread.run_sync(purge)
            except SQLAlchemyError as e:
                logger.error(f"Session cleanup failed: {e}")

    def close(self) -> None:
        """Release the database engine."""
        if self.engine is not None:
            self.engine.dispose()


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_container(request: Request) -> ServiceContainer:
    """The container built for this application."""
    container = getattr(request.app.state, "container", None)
    if container is None:
        raise ConfigurationError(
            "Service container is not initialized",
            code="CONTAINER_NOT_INITIALIZED",
        )
    return container


def get_app_settings(request: Request) -> Settings:
    """FastAPI dependency for the application's settings."""
    return request.app.state.settings


def get_auth_service(request: Request) -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container(request).auth


def get_extraction_service(request: Request) -> "IDocumentExtractionService":
    """FastAPI dependency for document extraction service."""
    return get_container(request).extraction


def get_analysis_service(request: Request) -> "ILanguageAnalysisService":
    """FastAPI dependency for language analysis service."""
    return get_container(request).analysis


def get_capture_service(request: Request) -> "ICaptureService":
    """FastAPI dependency for capture service."""
    return get_container(request).capture
