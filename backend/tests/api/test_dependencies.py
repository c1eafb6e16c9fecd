"""
Tests for the service container and application lifespan.
"""

import pytest
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import ServiceContainer
from modules.analysis.service import LanguageAnalysisService
from modules.extraction.service import DocumentExtractionService
from shared.config import Settings
from shared.exceptions import ConfigurationError

UNCONFIGURED = {
    "google_cloud_project_id": "",
    "google_cloud_location": "",
    "google_cloud_processor_id": "",
    "google_application_credentials": "",
    "openai_api_key": "",
    "openai_model": "",
}


@pytest.fixture
def bare_settings() -> Settings:
    """Development settings with no provider configured."""
    return Settings(_env_file=None, database_url="sqlite://", environment="development", **UNCONFIGURED)


class TestServiceContainer:

    def test_build_without_providers(self, bare_settings):
        """Development builds should survive missing providers."""
        container = ServiceContainer.build(bare_settings)
        try:
            assert isinstance(container.extraction, DocumentExtractionService)
            assert isinstance(container.analysis, LanguageAnalysisService)
            assert container.extraction.get_status().status == "configuration_error"
            assert container.analysis.get_status().status == "error"
            assert container.engine is not None
        finally:
            container.close()

    @pytest.mark.asyncio
    async def test_random_secret_in_development(self, bare_settings):
        """Without a session secret, development should still issue sessions."""
        container = ServiceContainer.build(bare_settings)
        try:
            session = await container.auth.create_session(1)
            assert session.token
        finally:
            container.close()

    def test_production_fails_fast(self, bare_settings):
        """Production builds should refuse missing providers."""
        settings = bare_settings.model_copy(update={"environment": "production"})

        with pytest.raises(ConfigurationError):
            ServiceContainer.build(settings)

    @pytest.mark.asyncio
    async def test_session_cleanup_task(self, container):
        """Starting cleanup twice should keep one task; stopping clears it."""
        container.start_session_cleanup(3600)
        task = container._cleanup_task
        container.start_session_cleanup(3600)

        assert container._cleanup_task is task

        await container.stop_session_cleanup()
        assert container._cleanup_task is None
        assert task.cancelled()


class TestLifespan:

    def test_lifespan_builds_container(self, bare_settings):
        """Startup should build the container and shutdown should drop it."""
        settings = bare_settings.model_copy(update={"capture_requires_auth": False})
        app = create_app(settings)

        with TestClient(app) as client:
            assert app.state.container is not None
            response = client.get("/api/documentai/status")
            assert response.status_code == 200
            assert response.json()["status"] == "configuration_error"

        assert app.state.container is None
