"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules:
an in-memory SQLite credential store, a fast bcrypt hasher, fake gateways
and an application wired to them.
"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import ServiceContainer
from modules.auth.password import BcryptHasher
from modules.auth.repository import CredentialRepository, SessionRepository
from modules.auth.service import AuthService, SessionSettings
from modules.capture.service import CaptureService
from shared.config import Settings
from shared.database import create_db_engine, create_schema, create_session_factory

from fakes import TEST_SESSION_SECRET, make_capture_result, make_extraction_result


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from any local .env file."""
    return Settings(
        _env_file=None,
        database_url="sqlite://",
        session_secret=TEST_SESSION_SECRET,
        capture_requires_auth=True,
        debug=False,
    )


@pytest.fixture
def engine():
    """In-memory SQLite engine with the auth schema."""
    engine = create_db_engine("sqlite://")
    create_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return create_session_factory(engine)


@pytest.fixture
def credential_repository(session_factory) -> CredentialRepository:
    return CredentialRepository(session_factory)


@pytest.fixture
def session_repository(session_factory) -> SessionRepository:
    return SessionRepository(session_factory)


@pytest.fixture
def hasher() -> BcryptHasher:
    """bcrypt at the minimum cost factor so tests stay fast."""
    return BcryptHasher(rounds=4)


@pytest.fixture
def auth_service(credential_repository, session_repository, hasher) -> AuthService:
    return AuthService(
        credential_repository,
        session_repository,
        SessionSettings(secret=TEST_SESSION_SECRET),
        password_hasher=hasher,
    )


@pytest.fixture
def extraction_service() -> MagicMock:
    """Fake extraction gateway that reads "Hola mundo"."""
    service = MagicMock()
    service.process_document = AsyncMock(return_value=make_extraction_result())
    return service


@pytest.fixture
def analysis_service() -> MagicMock:
    """Fake analysis gateway returning the "Hola mundo" result."""
    service = MagicMock()
    service.process_text = AsyncMock(return_value=make_capture_result())
    return service


@pytest.fixture
def container(auth_service, extraction_service, analysis_service) -> ServiceContainer:
    return ServiceContainer(
        auth=auth_service,
        extraction=extraction_service,
        analysis=analysis_service,
        capture=CaptureService(extraction_service, analysis_service),
    )


@pytest.fixture
def app(settings, container):
    return create_app(settings, container=container)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def registered_user(client) -> dict:
    """Register a user through the API and return its credentials and ID."""
    credentials = {"username": "ana", "email": "ana@example.com", "password": "s3cret-pass"}
    response = client.post("/api/auth/register", json=credentials)
    assert response.status_code == 201
    return {**credentials, "id": response.json()["id"]}


@pytest.fixture
def logged_in_client(client, registered_user) -> TestClient:
    """Client holding a valid session cookie."""
    response = client.post(
        "/api/auth/login",
        json={"email": registered_user["email"], "password": registered_user["password"]},
    )
    assert response.status_code == 200
    return client
