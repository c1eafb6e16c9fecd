"""Tests for provider client construction at startup."""

import pytest
from unittest.mock import patch, MagicMock

from providers.base import DocumentAIConfig, OpenAIConfig
from providers.factory import build_clients, get_providers
from providers.documentai import DocumentAIProvider
from providers.openai import OpenAIProvider
from shared.exceptions import ConfigurationError

VALID_DOCUMENTAI = DocumentAIConfig(project_id="p", location="us", processor_id="x")
VALID_OPENAI = OpenAIConfig(api_key="sk-test", model="gpt-4.1-2025-04-14")


class TestGetProviders:
    def test_returns_both_providers(self):
        """Should return one instance of each provider."""
        providers = get_providers()
        assert isinstance(providers["documentai"], DocumentAIProvider)
        assert isinstance(providers["openai"], OpenAIProvider)


class TestBuildClients:
    def test_unconfigured_providers_are_recorded(self):
        """Without fail_fast, misconfigured providers should be logged and skipped."""
        clients = build_clients(DocumentAIConfig(), OpenAIConfig())

        assert clients.documentai is None
        assert clients.llm is None
        assert set(clients.errors) == {"documentai", "openai"}
        assert "Project ID is required" in clients.errors["documentai"]

    def test_fail_fast_raises(self):
        """With fail_fast, the first misconfigured provider should abort."""
        with pytest.raises(ConfigurationError):
            build_clients(DocumentAIConfig(), OpenAIConfig(), fail_fast=True)

    @patch("providers.documentai.documentai.DocumentProcessorServiceAsyncClient")
    @patch("providers.openai.ChatOpenAI")
    def test_builds_configured_clients(self, mock_chat_openai, mock_documentai):
        """Configured providers should produce clients and no errors."""
        clients = build_clients(VALID_DOCUMENTAI, VALID_OPENAI, fail_fast=True)

        assert clients.documentai is mock_documentai.return_value
        assert clients.llm is mock_chat_openai.return_value
        assert clients.errors == {}

    @patch("providers.openai.ChatOpenAI")
    def test_partial_configuration(self, mock_chat_openai):
        """One misconfigured provider should not block the other."""
        clients = build_clients(DocumentAIConfig(), VALID_OPENAI)

        assert clients.documentai is None
        assert clients.llm is mock_chat_openai.return_value
        assert list(clients.errors) == ["documentai"]
