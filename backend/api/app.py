"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.config import Settings, get_settings
from shared.logging import setup_logging

from .dependencies import ServiceContainer
from .middleware.auth import require_capture_access
from .middleware.errors import register_exception_handlers
from .routes import health
from modules.analysis.routes import router as analysis_router
from modules.auth.routes import router as auth_router
from modules.capture.routes import router as capture_router
from modules.extraction.routes import router as extraction_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Builds the service container on startup (unless one was injected),
    starts the expired-session purge, and releases everything on shutdown.
    """
    # Startup
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_dir)

    owns_container = getattr(app.state, "container", None) is None
    if owns_container:
        app.state.container = ServiceContainer.build(settings)
    container: ServiceContainer = app.state.container
    container.start_session_cleanup(settings.session_cleanup_interval)

    logger.info(
        f"Starting {settings.app_name} on {settings.host}:{settings.port} "
        f"({settings.environment})"
    )
    yield
    # Shutdown
    await container.stop_session_cleanup()
    if owns_container:
        container.close()
        app.state.container = None
    logger.info(f"Shutting down {settings.app_name}")


def create_app(
    settings: Optional[Settings] = None,
    container: Optional[ServiceContainer] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Settings to use (defaults to get_settings())
        container: Prebuilt service container; when omitted one is built
                   in the lifespan

    Returns:
        Configured FastAPI instance
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Capture words and phrases from images for language learners",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )
    app.state.settings = settings
    app.state.container = container

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
        expose_headers=["X-Capture-Language", "X-Capture-Contract", "X-OCR-Processing-Time"],
    )

    register_exception_handlers(app, debug=settings.debug)

    # Register routes
    capture_gate = [Depends(require_capture_access)]
    app.include_router(health.router, tags=["health"])
    app.include_router(auth_router, prefix="/api/auth", tags=["auth"])
    app.include_router(capture_router, prefix="/api/capture", tags=["capture"], dependencies=capture_gate)
    app.include_router(extraction_router, prefix="/api/documentai", tags=["documentai"], dependencies=capture_gate)
    app.include_router(analysis_router, prefix="/api/openai", tags=["openai"], dependencies=capture_gate)

    return app


# Application instance for uvicorn
app = create_app()
