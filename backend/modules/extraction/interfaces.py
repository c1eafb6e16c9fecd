"""
Document extraction module interface.
"""

from typing import Protocol, runtime_checkable

from .models import DocumentExtractionResult, ExtractionServiceStatus, ImageUpload


@runtime_checkable
class IDocumentExtractionService(Protocol):
    """
    Interface for OCR of uploaded images.

    Implementations report validation and provider failures as an
    unsuccessful DocumentExtractionResult instead of raising.
    """

    async def process_document(self, image: ImageUpload) -> DocumentExtractionResult:
        """
        Extract text and entities from an image.

        Args:
            image: The uploaded image

        Returns:
            DocumentExtractionResult with data on success, error on failure.
            Metadata (processor, location, elapsed ms) is always present.

        Raises:
            ConfigurationError: If the OCR provider is not configured
        """
        ...

    def get_status(self) -> ExtractionServiceStatus:
        """Report whether the OCR provider is configured."""
        ...
