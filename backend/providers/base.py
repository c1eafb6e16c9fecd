"""Base classes and configuration models for external providers."""

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

from shared.config import Settings


class DocumentAIConfig(BaseModel):
    """Configuration for the Google Document AI processor.

    Attributes:
        project_id: Google Cloud project ID
        location: Processor location (e.g., "us", "eu")
        processor_id: Document AI processor ID
        credentials_path: Path to a service-account JSON file (optional,
            falls back to application default credentials)
        timeout: Upper bound in seconds for one process call
    """

    model_config = {"frozen": True}

    project_id: str = ""
    location: str = ""
    processor_id: str = ""
    credentials_path: str = ""
    timeout: float = 30.0

    @classmethod
    def from_settings(cls, settings: Settings) -> "DocumentAIConfig":
        return cls(
            project_id=settings.google_cloud_project_id,
            location=settings.google_cloud_location,
            processor_id=settings.google_cloud_processor_id,
            credentials_path=settings.google_application_credentials,
            timeout=settings.provider_timeout_seconds,
        )

    @property
    def processor_name(self) -> str:
        """Fully-qualified processor resource name."""
        return (
            f"projects/{self.project_id}/locations/{self.location}"
            f"/processors/{self.processor_id}"
        )

    def validate_config(self) -> list[str]:
        """Return a list of configuration errors (empty when valid)."""
        errors = []
        if not self.project_id:
            errors.append("Project ID is required")
        if not self.location:
            errors.append("Location is required")
        if not self.processor_id:
            errors.append("Processor ID is required")
        return errors


class OpenAIConfig(BaseModel):
    """Configuration for the OpenAI chat model.

    Attributes:
        api_key: OpenAI API key
        model: Model identifier (e.g., "gpt-4.1-2025-04-14")
        organization: Optional OpenAI organization ID
        timeout: Upper bound in seconds for one completion call
    """

    model_config = {"frozen": True}

    api_key: str = ""
    model: str = ""
    organization: str = ""
    timeout: float = 30.0

    @classmethod
    def from_settings(cls, settings: Settings) -> "OpenAIConfig":
        return cls(
            api_key=settings.openai_api_key,
            model=settings.openai_model,
            organization=settings.openai_organization,
            timeout=settings.provider_timeout_seconds,
        )

    def validate_config(self) -> list[str]:
        """Return a list of configuration errors (empty when valid)."""
        errors = []
        if not self.api_key:
            errors.append("API key is required")
        if not self.model:
            errors.append("Model is required")
        return errors


ConfigT = TypeVar("ConfigT", bound=BaseModel)


class Provider(ABC, Generic[ConfigT]):
    """Abstract base class for external provider client factories.

    Each provider turns its configuration into a ready-to-use client.
    Clients are created once at application startup and injected into
    the gateway services that use them.
    """

    name: str = "provider"

    @abstractmethod
    def create_client(self, config: ConfigT) -> Any:
        """Return a configured client for the given config.

        Raises:
            ConfigurationError: If the config is incomplete or credentials
                cannot be loaded
        """
        pass
