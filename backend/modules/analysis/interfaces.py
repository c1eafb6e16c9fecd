"""
Language analysis module interface.
"""

from typing import Optional, Protocol, runtime_checkable

from .models import AnalysisServiceStatus, CaptureResult


@runtime_checkable
class ILanguageAnalysisService(Protocol):
    """Interface for turning text into learnable words and phrases."""

    async def process_text(self, text: str, language: str) -> Optional[CaptureResult]:
        """
        Segment a text into words and phrases with English translations.

        Args:
            text: Source text (typically OCR output)
            language: Language of the text, as given by the client

        Returns:
            CaptureResult, or None if the model produced no output

        Raises:
            ConfigurationError: If the LLM provider is not configured
            ProviderError: If the call fails or the output does not match
                the result schema
        """
        ...

    def get_status(self) -> AnalysisServiceStatus:
        """Report whether the LLM provider is configured."""
        ...
