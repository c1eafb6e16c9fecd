"""
Language analysis service implementation.

Sends OCR text to an OpenAI chat model and parses its structured output
into a CaptureResult.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

import openai
from langchain_core.language_models import BaseChatModel
from langchain_core.messages import HumanMessage
from pydantic import ValidationError as SchemaValidationError

from providers.base import OpenAIConfig
from shared.exceptions import ConfigurationError, ProviderError

from .interfaces import ILanguageAnalysisService
from .models import AnalysisServiceStatus, CaptureResult
from .prompts import RESPONSE_FORMAT, build_capture_prompt

logger = logging.getLogger(__name__)

PROVIDER_NAME = "openai"


class LanguageAnalysisService(ILanguageAnalysisService):
    """
    OpenAI backed analysis gateway.

    The chat model is created once at startup and injected. One prompt is
    sent per call, with the result schema enforced through response_format.
    """

    def __init__(
        self,
        config: OpenAIConfig,
        llm: Optional[BaseChatModel] = None,
        init_error: Optional[str] = None,
    ):
        self._config = config
        self._llm = llm
        self._init_error = init_error

    async def process_text(self, text: str, language: str) -> Optional[CaptureResult]:
        """Run the capture prompt and parse the model's JSON output."""
        errors = self._config.validate_config()
        if errors or self._llm is None:
            raise ConfigurationError(
                self._init_error or f"OpenAI is not configured: {', '.join(errors)}",
                code="OPENAI_NOT_CONFIGURED",
            )

        messages = [HumanMessage(content=build_capture_prompt(text, language))]
        try:
            result = await self._llm.agenerate([messages], response_format=RESPONSE_FORMAT)
        except openai.OpenAIError as e:
            logger.error(f"OpenAI call failed: {e}")
            raise ProviderError(PROVIDER_NAME, "Chat completion failed", str(e)) from e

        generations = result.generations[0] if result.generations else []
        if not generations:
            logger.warning("OpenAI returned no choices")
            return None

        content = generations[0].text
        if not content or not content.strip():
            logger.warning("OpenAI returned empty content")
            return None

        try:
            capture = CaptureResult.model_validate_json(content)
        except SchemaValidationError as e:
            logger.error(f"OpenAI output does not match the capture schema: {e}")
            raise ProviderError(PROVIDER_NAME, "Malformed capture result", str(e)) from e

        logger.info(
            f"Analyzed {len(text)} chars of {language}: "
            f"{len(capture.words)} words, {len(capture.phrases)} phrases"
        )
        return capture

    def get_status(self) -> AnalysisServiceStatus:
        """Report configuration errors without calling the API."""
        now = datetime.now(timezone.utc)
        errors = self._config.validate_config()
        if errors:
            return AnalysisServiceStatus(
                status="error",
                message=f"Configuration validation failed: {', '.join(errors)}",
                model=self._config.model or None,
                timestamp=now,
            )
        if self._llm is None:
            return AnalysisServiceStatus(
                status="error",
                message=self._init_error or "OpenAI client is not initialized",
                model=self._config.model,
                timestamp=now,
            )
        return AnalysisServiceStatus(
            status="healthy",
            message="OpenAI service is configured",
            model=self._config.model,
            timestamp=now,
        )
