"""
Capture API endpoint.

POST an image and a language code, get back the words and phrases found
in the image with their English translations.
"""

import logging
from typing import Optional
from urllib.parse import quote

from fastapi import APIRouter, Depends, Query, Request, Response
from fastapi.responses import JSONResponse

from api.dependencies import get_capture_service
from api.middleware.upload import read_image_upload
from modules.analysis.models import CaptureResult
from modules.extraction.models import ImageUpload

from .interfaces import ICaptureService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=CaptureResult)
async def capture(
    request: Request,
    response: Response,
    language: Optional[str] = Query(default=None, description="Language of the text in the image"),
    image: Optional[ImageUpload] = Depends(read_image_upload),
    service: ICaptureService = Depends(get_capture_service),
):
    """
    Capture words and phrases from an image.

    The body of a successful response is exactly {words, phrases}.
    Capture metadata is returned in X-Capture-* headers.
    """
    outcome = await service.capture(image, language)

    if not outcome.succeeded:
        return JSONResponse(status_code=outcome.status_code, content=outcome.error_body())

    metadata = outcome.metadata
    request.state.capture_metadata = metadata
    if metadata is not None:
        logger.info(
            f"Capture metadata: language={metadata.language}, "
            f"text_length={len(metadata.extracted_text)}, "
            f"contract={metadata.contract_version}"
        )
        # Header values are latin-1 on the wire
        response.headers["X-Capture-Language"] = quote(metadata.language, safe="")
        response.headers["X-Capture-Contract"] = metadata.contract_version
        if metadata.document_ai is not None:
            response.headers["X-OCR-Processing-Time"] = str(metadata.document_ai.processing_time)

    return outcome.result
