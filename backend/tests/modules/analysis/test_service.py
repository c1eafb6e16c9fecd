"""Tests for the language analysis gateway."""

import json

import httpx
import openai
import pytest
from unittest.mock import AsyncMock, MagicMock

from langchain_core.messages import AIMessage, HumanMessage
from langchain_core.outputs import ChatGeneration, LLMResult

from modules.analysis.interfaces import ILanguageAnalysisService
from modules.analysis.prompts import RESPONSE_FORMAT
from modules.analysis.service import LanguageAnalysisService
from providers.base import OpenAIConfig
from shared.exceptions import ConfigurationError, ProviderError

CONFIG = OpenAIConfig(api_key="sk-test", model="gpt-4.1-2025-04-14")

HOLA_MUNDO = {
    "words": [
        {"text": "Hola", "translation": ["Hello"]},
        {"text": "mundo", "translation": ["world"]},
    ],
    "phrases": [{"text": "Hola mundo", "translation": ["Hello world"]}],
}


def llm_result(content: str) -> LLMResult:
    return LLMResult(generations=[[ChatGeneration(message=AIMessage(content=content))]])


@pytest.fixture
def llm() -> MagicMock:
    llm = MagicMock()
    llm.agenerate = AsyncMock(return_value=llm_result(json.dumps(HOLA_MUNDO)))
    return llm


@pytest.fixture
def service(llm) -> LanguageAnalysisService:
    return LanguageAnalysisService(CONFIG, llm=llm)


class TestProcessText:
    def test_implements_interface(self, service):
        """Service should satisfy ILanguageAnalysisService."""
        assert isinstance(service, ILanguageAnalysisService)

    @pytest.mark.asyncio
    async def test_parses_result(self, service):
        """Model output should be parsed into a CaptureResult."""
        result = await service.process_text("Hola mundo", "Spanish")

        assert [w.text for w in result.words] == ["Hola", "mundo"]
        assert result.words[0].translation == ["Hello"]
        assert result.phrases[0].translation == ["Hello world"]

    @pytest.mark.asyncio
    async def test_sends_one_prompt_with_schema(self, service, llm):
        """One human message should be sent with the strict response format."""
        await service.process_text("Hola mundo", "Spanish")

        args, kwargs = llm.agenerate.call_args
        batch = args[0]
        assert len(batch) == 1
        assert len(batch[0]) == 1
        message = batch[0][0]
        assert isinstance(message, HumanMessage)
        assert "Spanish" in message.content
        assert '"Hola mundo"' in message.content
        assert kwargs["response_format"] == RESPONSE_FORMAT

    @pytest.mark.asyncio
    async def test_empty_content_is_none(self, service, llm):
        """Empty model output should give no result."""
        llm.agenerate.return_value = llm_result("")

        assert await service.process_text("Hola", "Spanish") is None

    @pytest.mark.asyncio
    async def test_no_choices_is_none(self, service, llm):
        """A response without choices should give no result."""
        llm.agenerate.return_value = LLMResult(generations=[[]])

        assert await service.process_text("Hola", "Spanish") is None

    @pytest.mark.asyncio
    async def test_invalid_json_raises(self, service, llm):
        """Output that is not JSON should raise ProviderError."""
        llm.agenerate.return_value = llm_result("not json")

        with pytest.raises(ProviderError, match="Malformed capture result"):
            await service.process_text("Hola", "Spanish")

    @pytest.mark.asyncio
    async def test_wrong_shape_raises(self, service, llm):
        """JSON with the wrong keys should raise ProviderError."""
        llm.agenerate.return_value = llm_result(json.dumps({"words": [{"text": "Hola", "translations": ["Hi"]}]}))

        with pytest.raises(ProviderError):
            await service.process_text("Hola", "Spanish")

    @pytest.mark.asyncio
    async def test_api_failure_raises(self, service, llm):
        """OpenAI client errors should raise ProviderError."""
        request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
        llm.agenerate.side_effect = openai.APIConnectionError(request=request)

        with pytest.raises(ProviderError) as exc_info:
            await service.process_text("Hola", "Spanish")

        assert exc_info.value.service == "openai"
        assert exc_info.value.code == "PROVIDER_ERROR"

    @pytest.mark.asyncio
    async def test_unconfigured_raises(self):
        """Missing key or model should raise ConfigurationError."""
        service = LanguageAnalysisService(OpenAIConfig(), llm=None)

        with pytest.raises(ConfigurationError) as exc_info:
            await service.process_text("Hola", "Spanish")

        assert exc_info.value.code == "OPENAI_NOT_CONFIGURED"
        assert "API key is required" in exc_info.value.message


class TestGetStatus:
    def test_healthy(self, service, llm):
        """A configured gateway should be healthy without calling the model."""
        status = service.get_status()

        assert status.status == "healthy"
        assert status.message == "OpenAI service is configured"
        assert status.model == "gpt-4.1-2025-04-14"
        llm.agenerate.assert_not_called()

    def test_missing_configuration(self):
        """Missing configuration should be listed in the message."""
        status = LanguageAnalysisService(OpenAIConfig()).get_status()

        assert status.status == "error"
        assert status.message.startswith("Configuration validation failed:")
        assert status.model is None

    def test_client_init_failure(self):
        """A model that failed to build should be reported."""
        status = LanguageAnalysisService(CONFIG, llm=None, init_error="bad key").get_status()

        assert status.status == "error"
        assert status.message == "bad key"
