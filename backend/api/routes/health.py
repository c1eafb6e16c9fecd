"""
Health check endpoints.

Provides the welcome route and a liveness probe.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from ..dependencies import get_app_settings
from shared.config import Settings

router = APIRouter()


class WelcomeResponse(BaseModel):
    """Root route response model."""

    message: str
    version: str
    status: str


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    timestamp: datetime


@router.get("/", response_model=WelcomeResponse)
async def welcome(settings: Settings = Depends(get_app_settings)) -> WelcomeResponse:
    """Identify the API."""
    return WelcomeResponse(
        message=f"Welcome to {settings.app_name}",
        version=settings.app_version,
        status="running",
    )


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the API is running.
    """
    return HealthResponse(status="OK", timestamp=datetime.now(timezone.utc))
