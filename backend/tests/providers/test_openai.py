"""Tests for the OpenAI chat model provider."""

import pytest
from unittest.mock import patch, MagicMock

from providers.base import OpenAIConfig
from providers.openai import OpenAIProvider
from shared.exceptions import ConfigurationError


class TestOpenAIConfig:
    def test_valid_config(self):
        """A key and a model should be enough."""
        config = OpenAIConfig(api_key="sk-test", model="gpt-4.1-2025-04-14")
        assert config.validate_config() == []

    def test_missing_fields(self):
        """Missing key and model should both be reported."""
        assert OpenAIConfig().validate_config() == ["API key is required", "Model is required"]

    def test_from_settings(self, settings):
        """Config should be read from settings, including the timeout."""
        settings = settings.model_copy(update={
            "openai_api_key": "sk-test",
            "openai_model": "gpt-4.1-2025-04-14",
            "provider_timeout_seconds": 12.5,
        })
        config = OpenAIConfig.from_settings(settings)
        assert config.api_key == "sk-test"
        assert config.model == "gpt-4.1-2025-04-14"
        assert config.timeout == 12.5


class TestOpenAIProvider:
    """Test suite for OpenAIProvider."""

    def test_provider_instantiation(self):
        """Provider should instantiate without errors."""
        provider = OpenAIProvider()
        assert provider.name == "openai"

    def test_api_key_required(self):
        """Should raise ConfigurationError if no API key provided."""
        provider = OpenAIProvider()
        config = OpenAIConfig(api_key="", model="gpt-4.1-2025-04-14")

        with pytest.raises(ConfigurationError, match="API key is required") as exc_info:
            provider.create_client(config)

        assert "OPENAI_API_KEY" in exc_info.value.message
        assert exc_info.value.code == "OPENAI_NOT_CONFIGURED"

    @patch("providers.openai.ChatOpenAI")
    def test_create_client_returns_chat_openai(self, mock_chat_openai):
        """Should return a ChatOpenAI instance when configured properly."""
        mock_instance = MagicMock()
        mock_chat_openai.return_value = mock_instance

        provider = OpenAIProvider()
        config = OpenAIConfig(api_key="sk-test", model="gpt-4.1-2025-04-14", timeout=30.0)

        assert provider.create_client(config) is mock_instance

    @patch("providers.openai.ChatOpenAI")
    def test_client_settings(self, mock_chat_openai):
        """Client should use low temperature, a timeout and no retries."""
        provider = OpenAIProvider()
        config = OpenAIConfig(api_key="sk-test", model="gpt-4.1-2025-04-14", timeout=30.0)

        provider.create_client(config)

        kwargs = mock_chat_openai.call_args.kwargs
        assert kwargs["model"] == "gpt-4.1-2025-04-14"
        assert kwargs["api_key"] == "sk-test"
        assert kwargs["organization"] is None
        assert kwargs["temperature"] == 0.2
        assert kwargs["timeout"] == 30.0
        assert kwargs["max_retries"] == 0
