"""
Capture module.

The image -> OCR -> language analysis pipeline behind POST /api/capture.

Public API:
- ICaptureService: Interface for the pipeline
- CaptureService: Implementation over the extraction and analysis gateways
- CaptureOutcome, CaptureStage: Tagged pipeline result
"""

from .interfaces import ICaptureService
from .models import AnalysisStage, CaptureMetadata, CaptureOutcome, CaptureStage
from .service import CaptureService

__all__ = [
    "ICaptureService",
    "CaptureService",
    "AnalysisStage",
    "CaptureMetadata",
    "CaptureOutcome",
    "CaptureStage",
]
