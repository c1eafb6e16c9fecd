"""
Centralized configuration for the WordCapture backend.

All settings are loaded from environment variables with sensible defaults.
Provider settings keep the names the deployment already uses
(GOOGLE_CLOUD_*, OPENAI_*, DB_*, SESSION_*).
"""

from functools import lru_cache
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "WordCapture API"
    app_version: str = "1.0.0"
    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"
    log_dir: Optional[str] = None

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["http://localhost:5173"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Relational store. DATABASE_URL wins; otherwise DB_* builds a MySQL URL.
    database_url: str = ""
    db_host: str = ""
    db_user: str = ""
    db_password: str = ""
    db_name: str = ""
    db_pool_size: int = 7

    # Sessions
    session_secret: str = ""
    session_cookie_name: str = "wordcapture.sid"
    session_ttl_hours: int = 24
    session_cookie_secure: bool = False
    session_cleanup_interval: int = 60  # seconds

    # Google Document AI
    google_cloud_project_id: str = ""
    google_cloud_location: str = ""
    google_cloud_processor_id: str = ""
    google_application_credentials: str = ""

    # OpenAI
    openai_api_key: str = ""
    openai_model: str = ""
    openai_organization: str = ""

    # Upper bound for each outbound provider call
    provider_timeout_seconds: float = 30.0

    # Policy: capture and diagnostic routes require a logged-in session
    capture_requires_auth: bool = True

    @property
    def is_production(self) -> bool:
        """Whether the app runs in the production environment."""
        return self.environment.lower() == "production"

    @property
    def sqlalchemy_url(self) -> str:
        """Resolve the SQLAlchemy connection URL."""
        if self.database_url:
            return self.database_url
        if self.db_host:
            return (
                f"mysql+pymysql://{self.db_user}:{self.db_password}"
                f"@{self.db_host}/{self.db_name}"
            )
        return "sqlite:///./wordcapture.db"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
