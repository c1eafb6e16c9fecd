"""Tests for the Google Document AI provider."""

import pytest
from unittest.mock import patch, MagicMock

from providers.base import DocumentAIConfig
from providers.documentai import DocumentAIProvider
from shared.exceptions import ConfigurationError


@pytest.fixture
def config() -> DocumentAIConfig:
    return DocumentAIConfig(project_id="my-project", location="eu", processor_id="abc123")


class TestDocumentAIConfig:
    def test_processor_name(self, config):
        """Processor name should be the full resource path."""
        assert config.processor_name == "projects/my-project/locations/eu/processors/abc123"

    def test_missing_fields(self):
        """Every missing identifier should be reported."""
        assert DocumentAIConfig().validate_config() == [
            "Project ID is required",
            "Location is required",
            "Processor ID is required",
        ]

    def test_from_settings(self, settings):
        """Config should be read from settings."""
        settings = settings.model_copy(update={
            "google_cloud_project_id": "p",
            "google_cloud_location": "us",
            "google_cloud_processor_id": "x",
            "google_application_credentials": "/keys/sa.json",
        })
        config = DocumentAIConfig.from_settings(settings)
        assert config.processor_name == "projects/p/locations/us/processors/x"
        assert config.credentials_path == "/keys/sa.json"
        assert config.timeout == 30.0


class TestDocumentAIProvider:
    def test_missing_config_raises(self):
        """Should raise ConfigurationError naming the env vars."""
        with pytest.raises(ConfigurationError) as exc_info:
            DocumentAIProvider().create_client(DocumentAIConfig())

        assert exc_info.value.code == "DOCUMENTAI_NOT_CONFIGURED"
        assert "GOOGLE_CLOUD_PROJECT_ID" in exc_info.value.message

    @patch("providers.documentai.documentai.DocumentProcessorServiceAsyncClient")
    def test_uses_regional_endpoint(self, mock_client_cls, config):
        """Client should talk to the processor's regional endpoint."""
        mock_client_cls.return_value = MagicMock()

        client = DocumentAIProvider().create_client(config)

        assert client is mock_client_cls.return_value
        options = mock_client_cls.call_args.kwargs["client_options"]
        assert options.api_endpoint == "eu-documentai.googleapis.com"
        assert mock_client_cls.call_args.kwargs["credentials"] is None

    @patch("providers.documentai.documentai.DocumentProcessorServiceAsyncClient")
    @patch("providers.documentai.service_account.Credentials.from_service_account_file")
    def test_service_account_file(self, mock_from_file, mock_client_cls):
        """A configured key file should be loaded as service-account credentials."""
        config = DocumentAIConfig(
            project_id="p", location="us", processor_id="x", credentials_path="/keys/sa.json"
        )

        DocumentAIProvider().create_client(config)

        mock_from_file.assert_called_once_with("/keys/sa.json")
        assert mock_client_cls.call_args.kwargs["credentials"] is mock_from_file.return_value

    @patch("providers.documentai.service_account.Credentials.from_service_account_file")
    def test_unreadable_credentials(self, mock_from_file):
        """A missing key file should become a ConfigurationError."""
        mock_from_file.side_effect = FileNotFoundError("/keys/missing.json")
        config = DocumentAIConfig(
            project_id="p", location="us", processor_id="x", credentials_path="/keys/missing.json"
        )

        with pytest.raises(ConfigurationError) as exc_info:
            DocumentAIProvider().create_client(config)

        assert exc_info.value.code == "DOCUMENTAI_CREDENTIALS"
