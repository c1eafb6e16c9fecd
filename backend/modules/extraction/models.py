"""
Document extraction data models.

Wire models use camelCase keys (pageNumber, processingTime, ...).
"""

from typing import Optional
from pydantic import BaseModel, Field

from shared.models import CamelModel


class ImageUpload(BaseModel):
    """An uploaded image held in memory."""

    model_config = {"frozen": True}

    content: bytes = Field(..., repr=False)
    mime_type: str
    size: int
    filename: str = ""


class ImageInfo(CamelModel):
    """Descriptive metadata about an uploaded image."""

    original_name: str
    size: int
    mime_type: str

    @classmethod
    def from_upload(cls, image: ImageUpload) -> "ImageInfo":
        return cls(original_name=image.filename, size=image.size, mime_type=image.mime_type)


class BoundingBox(CamelModel):
    """Normalized (0-1) box from the first and third polygon vertices."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0


class DocumentEntity(CamelModel):
    """An entity detected by the OCR processor."""

    type: str
    value: str
    confidence: float = 0.0
    bounding_box: Optional[BoundingBox] = None


class DocumentPage(CamelModel):
    """One page of the processed document."""

    page_number: int
    text: str = ""
    entities: list[DocumentEntity] = Field(default_factory=list)
    confidence: float = 0.0


class ExtractedDocument(CamelModel):
    """Normalized OCR output."""

    text: str = ""
    entities: list[DocumentEntity] = Field(default_factory=list)
    pages: list[DocumentPage] = Field(default_factory=list)
    confidence: float = 0.0


class ExtractionMetadata(CamelModel):
    """Processor identity and timing, present on success and failure."""

    processor_id: str
    location: str
    processing_time: int = Field(..., description="Wall-clock milliseconds")


class DocumentExtractionResult(CamelModel):
    """Tagged extraction result: data on success, error on failure."""

    success: bool
    data: Optional[ExtractedDocument] = None
    error: Optional[str] = None
    metadata: ExtractionMetadata

    @property
    def text(self) -> str:
        """Extracted text, or empty string when extraction failed."""
        return self.data.text if self.success and self.data else ""


class ProcessImageResponse(DocumentExtractionResult):
    """Extraction result returned by the diagnostic endpoint."""

    image_info: ImageInfo


class ExtractionServiceStatus(CamelModel):
    """Configuration status of the extraction gateway."""

    status: str = Field(..., description="ready | configuration_error")
    processor: str
    errors: list[str] = Field(default_factory=list)
