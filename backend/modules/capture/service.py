"""
Capture pipeline service.

Sequences the extraction and analysis gateways for one uploaded image.
Each stage failure ends the pipeline with a tagged outcome; nothing is
retried and nothing is persisted.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from modules.analysis.interfaces import ILanguageAnalysisService
from modules.extraction.interfaces import IDocumentExtractionService
from modules.extraction.models import ImageInfo, ImageUpload
from shared.exceptions import WordCaptureError, status_for

from .interfaces import ICaptureService
from .models import AnalysisStage, CaptureMetadata, CaptureOutcome, CaptureStage

logger = logging.getLogger(__name__)

NO_IMAGE_MESSAGE = 'No image file uploaded. Please provide an image file using field name "image".'
NO_LANGUAGE_MESSAGE = "Language parameter is required"
NO_TEXT_MESSAGE = "No text could be extracted from the image"
NO_ANALYSIS_MESSAGE = "Failed to generate response from OpenAI"


class CaptureService(ICaptureService):
    """Image -> OCR text -> words and phrases."""

    def __init__(
        self,
        extraction: IDocumentExtractionService,
        analysis: ILanguageAnalysisService,
    ):
        self._extraction = extraction
        self._analysis = analysis

    async def capture(
        self,
        image: Optional[ImageUpload],
        language: Optional[str],
    ) -> CaptureOutcome:
        """Run the pipeline and return its outcome."""
        # RECEIVED
        if image is None:
            return self._rejected(NO_IMAGE_MESSAGE)
        language = (language or "").strip()
        if not language:
            return self._rejected(NO_LANGUAGE_MESSAGE)

        # EXTRACTING
        logger.info(
            f"Capture started: {image.filename or '<unnamed>'} "
            f"({image.mime_type}, {image.size} bytes), language={language}"
        )
        extraction = await self._extraction.process_document(image)
        if not extraction.success or not extraction.text.strip():
            error = extraction.error or NO_TEXT_MESSAGE
            logger.warning(f"Capture stopped at extraction: {error}")
            return CaptureOutcome(
                stage=CaptureStage.EXTRACTION_FAILED,
                status_code=400,
                error=error,
                extraction=extraction,
            )

        text = extraction.text
        metadata = CaptureMetadata(
            extracted_text=text,
            language=language,
            document_ai=extraction.metadata,
            image_info=ImageInfo.from_upload(image),
            timestamp=datetime.now(timezone.utc),
        )

        # ANALYZING
        try:
            result = await self._analysis.process_text(text, language)
        except WordCaptureError as e:
            logger.error(f"Capture stopped at analysis: {e.code}: {e.message}")
            return CaptureOutcome(
                stage=CaptureStage.ANALYSIS_FAILED,
                status_code=status_for(e),
                error=e.message,
                extraction=extraction,
                analysis=AnalysisStage(success=False, error=e.message),
                metadata=metadata,
            )

        if result is None:
            logger.warning("Capture stopped at analysis: no model output")
            return CaptureOutcome(
                stage=CaptureStage.ANALYSIS_FAILED,
                status_code=400,
                error=NO_ANALYSIS_MESSAGE,
                extraction=extraction,
                analysis=AnalysisStage(success=False, error=NO_ANALYSIS_MESSAGE),
                metadata=metadata,
            )

        # DONE
        logger.info(
            f"Capture finished: {len(result.words)} words, {len(result.phrases)} phrases "
            f"(OCR {extraction.metadata.processing_time}ms)"
        )
        return CaptureOutcome(
            stage=CaptureStage.DONE,
            extraction=extraction,
            analysis=AnalysisStage(success=True, result=result),
            metadata=metadata,
        )

    def _rejected(self, message: str) -> CaptureOutcome:
        logger.info(f"Capture rejected: {message}")
        return CaptureOutcome(stage=CaptureStage.REJECTED, status_code=400, error=message)
