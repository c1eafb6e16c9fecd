"""
Capture pipeline data models.

A capture moves through RECEIVED -> EXTRACTING -> ANALYZING -> DONE and
stops early in REJECTED, EXTRACTION_FAILED or ANALYSIS_FAILED. The outcome
keeps the result of every stage that ran.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Optional
from pydantic import BaseModel, Field

from modules.analysis.models import CAPTURE_CONTRACT_VERSION, CaptureResult
from modules.extraction.models import DocumentExtractionResult, ExtractionMetadata, ImageInfo
from shared.models import CamelModel


class CaptureStage(str, Enum):
    """Pipeline stage a capture reached."""

    RECEIVED = "received"
    EXTRACTING = "extracting"
    ANALYZING = "analyzing"
    DONE = "done"
    REJECTED = "rejected"
    EXTRACTION_FAILED = "extraction_failed"
    ANALYSIS_FAILED = "analysis_failed"


class AnalysisStage(BaseModel):
    """Result of the analysis stage."""

    success: bool
    result: Optional[CaptureResult] = None
    error: Optional[str] = None


class CaptureMetadata(CamelModel):
    """Request-scoped capture metadata. Never persisted."""

    extracted_text: str
    language: str
    contract_version: str = CAPTURE_CONTRACT_VERSION
    document_ai: Optional[ExtractionMetadata] = Field(default=None, alias="documentAI")
    image_info: Optional[ImageInfo] = None
    timestamp: datetime


class CaptureOutcome(BaseModel):
    """Tagged result of one capture request."""

    stage: CaptureStage
    status_code: int = 200
    error: Optional[str] = None
    extraction: Optional[DocumentExtractionResult] = None
    analysis: Optional[AnalysisStage] = None
    metadata: Optional[CaptureMetadata] = None

    @property
    def succeeded(self) -> bool:
        return self.stage == CaptureStage.DONE

    @property
    def result(self) -> Optional[CaptureResult]:
        """The capture result, set only when the pipeline finished."""
        if self.succeeded and self.analysis:
            return self.analysis.result
        return None

    @property
    def extracted_text(self) -> str:
        return self.extraction.text if self.extraction else ""

    def error_body(self) -> dict[str, Any]:
        """JSON body for a failed capture."""
        body: dict[str, Any] = {"success": False, "error": self.error}
        if self.stage == CaptureStage.REJECTED:
            return body

        body["stage"] = self.stage.value
        if self.stage == CaptureStage.EXTRACTION_FAILED and self.extraction:
            body["documentAI"] = self.extraction.model_dump(
                mode="json", by_alias=True, exclude_none=True
            )
        elif self.stage == CaptureStage.ANALYSIS_FAILED:
            body["documentAI"] = {"success": True, "extractedText": self.extracted_text}
            if self.metadata:
                body["metadata"] = self.metadata.model_dump(
                    mode="json", by_alias=True, exclude_none=True
                )
        return body
