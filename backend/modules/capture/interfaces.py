"""
Capture module interface.
"""

from typing import Optional, Protocol, runtime_checkable

from modules.extraction.models import ImageUpload

from .models import CaptureOutcome


@runtime_checkable
class ICaptureService(Protocol):
    """Interface for the image -> words/phrases pipeline."""

    async def capture(
        self,
        image: Optional[ImageUpload],
        language: Optional[str],
    ) -> CaptureOutcome:
        """
        Run OCR on an image, then analyze the extracted text.

        Failures at any stage are returned as a CaptureOutcome in a
        terminal failure stage, carrying the results of earlier stages.

        Args:
            image: The uploaded image, or None if none was sent
            language: Language of the text in the image

        Returns:
            CaptureOutcome in stage DONE, REJECTED, EXTRACTION_FAILED or
            ANALYSIS_FAILED

        Raises:
            ConfigurationError: If a provider is not configured
        """
        ...
