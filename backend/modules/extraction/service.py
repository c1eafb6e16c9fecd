"""
Document extraction service implementation.

Validates uploaded images and sends them to a Google Document AI
processor, returning a normalized document.
"""

import asyncio
import logging
import time
from typing import Optional

from google.api_core.exceptions import GoogleAPIError
from google.auth.exceptions import GoogleAuthError
from google.cloud import documentai

from providers.base import DocumentAIConfig
from shared.exceptions import ConfigurationError, ValidationError

from .exceptions import EmptyImageError, ImageTooLargeError, UnsupportedImageTypeError
from .interfaces import IDocumentExtractionService
from .models import (
    DocumentExtractionResult,
    ExtractionMetadata,
    ExtractionServiceStatus,
    ImageUpload,
)
from .normalize import normalize_document

logger = logging.getLogger(__name__)

ALLOWED_MIME_TYPES: tuple[str, ...] = (
    "image/jpeg",
    "image/png",
    "image/tiff",
    "image/bmp",
    "image/webp",
)
MAX_IMAGE_BYTES = 5 * 1024 * 1024


def validate_image(image: Optional[ImageUpload]) -> None:
    """
    Check an image before it is sent to the processor.

    Raises:
        EmptyImageError: No image or zero bytes
        UnsupportedImageTypeError: MIME type not in ALLOWED_MIME_TYPES
        ImageTooLargeError: More than MAX_IMAGE_BYTES
    """
    if image is None or not image.content:
        raise EmptyImageError()
    if image.mime_type not in ALLOWED_MIME_TYPES:
        raise UnsupportedImageTypeError(image.mime_type, ALLOWED_MIME_TYPES)
    if len(image.content) > MAX_IMAGE_BYTES:
        raise ImageTooLargeError(len(image.content), MAX_IMAGE_BYTES)


class DocumentExtractionService(IDocumentExtractionService):
    """
    Document AI backed extraction gateway.

    The async client is created once at startup and shared across
    requests. When it could not be created the service still answers
    status checks, and process_document raises ConfigurationError.
    """

    def __init__(
        self,
        config: DocumentAIConfig,
        client: Optional[documentai.DocumentProcessorServiceAsyncClient] = None,
        init_error: Optional[str] = None,
    ):
        self._config = config
        self._client = client
        self._init_error = init_error

    async def process_document(self, image: ImageUpload) -> DocumentExtractionResult:
        """Validate the image, call the processor and normalize its response."""
        started = time.perf_counter()
        try:
            validate_image(image)
        except ValidationError as e:
            logger.warning(f"Image rejected before OCR: {e.message}")
            return self._failure(e.message, started)

        if self._client is None:
            raise ConfigurationError(
                self._init_error or "Document AI client is not initialized",
                code="DOCUMENTAI_NOT_CONFIGURED",
            )

        request = documentai.ProcessRequest(
            name=self._config.processor_name,
            raw_document=documentai.RawDocument(
                content=image.content,
                mime_type=image.mime_type,
            ),
        )

        try:
            response = await self._client.process_document(
                request=request,
                timeout=self._config.timeout,
                retry=None,
            )
        except (GoogleAPIError, GoogleAuthError, asyncio.TimeoutError) as e:
            logger.error(f"Document AI processing failed: {e}")
            return self._failure(str(e) or e.__class__.__name__, started)

        document = normalize_document(response.document)
        metadata = self._metadata(started)
        logger.info(
            f"Document AI extracted {len(document.text)} chars, "
            f"{len(document.entities)} entities in {metadata.processing_time}ms"
        )
        return DocumentExtractionResult(success=True, data=document, metadata=metadata)

    def get_status(self) -> ExtractionServiceStatus:
        """Report configuration errors, if any."""
        errors = self._config.validate_config()
        if not errors and self._client is None and self._init_error:
            errors = [self._init_error]
        return ExtractionServiceStatus(
            status="configuration_error" if errors else "ready",
            processor=self._config.processor_id,
            errors=errors,
        )

    def _metadata(self, started: float) -> ExtractionMetadata:
        return ExtractionMetadata(
            processor_id=self._config.processor_id,
            location=self._config.location,
            processing_time=int((time.perf_counter() - started) * 1000),
        )

    def _failure(self, error: str, started: float) -> DocumentExtractionResult:
        return DocumentExtractionResult(
            success=False,
            error=error,
            metadata=self._metadata(started),
        )
