"""
Document extraction module.

OCR of uploaded images through Google Document AI.

Public API:
- IDocumentExtractionService: Interface for OCR operations
- DocumentExtractionService: Document AI implementation
- validate_image: Pre-flight image checks
- Models: ImageUpload, ExtractedDocument, DocumentExtractionResult, etc.
"""

from .interfaces import IDocumentExtractionService
from .models import (
    BoundingBox,
    DocumentEntity,
    DocumentExtractionResult,
    DocumentPage,
    ExtractedDocument,
    ExtractionMetadata,
    ExtractionServiceStatus,
    ImageInfo,
    ImageUpload,
)
from .exceptions import EmptyImageError, ImageTooLargeError, UnsupportedImageTypeError
from .service import (
    ALLOWED_MIME_TYPES,
    MAX_IMAGE_BYTES,
    DocumentExtractionService,
    validate_image,
)

__all__ = [
    # Interface
    "IDocumentExtractionService",
    # Implementation
    "DocumentExtractionService",
    "validate_image",
    "ALLOWED_MIME_TYPES",
    "MAX_IMAGE_BYTES",
    # Models
    "BoundingBox",
    "DocumentEntity",
    "DocumentExtractionResult",
    "DocumentPage",
    "ExtractedDocument",
    "ExtractionMetadata",
    "ExtractionServiceStatus",
    "ImageInfo",
    "ImageUpload",
    # Exceptions
    "EmptyImageError",
    "ImageTooLargeError",
    "UnsupportedImageTypeError",
]
