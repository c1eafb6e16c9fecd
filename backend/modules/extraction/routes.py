"""
Document extraction API endpoints.

Diagnostic access to the OCR gateway on its own.
"""

from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from api.dependencies import get_extraction_service
from api.middleware.upload import read_image_upload

from .interfaces import IDocumentExtractionService
from .models import ExtractionServiceStatus, ImageInfo, ImageUpload, ProcessImageResponse

router = APIRouter()


@router.post("/process-image", response_model=ProcessImageResponse, response_model_exclude_none=True)
async def process_image(
    image: Optional[ImageUpload] = Depends(read_image_upload),
    service: IDocumentExtractionService = Depends(get_extraction_service),
):
    """
    Run OCR on one uploaded image.

    Returns the normalized document plus information about the upload.
    Extraction failures are returned with status 400.
    """
    if image is None:
        return JSONResponse(
            status_code=400,
            content={"success": False, "error": "No image file provided"},
        )

    result = await service.process_document(image)
    response = ProcessImageResponse(
        **result.model_dump(),
        image_info=ImageInfo.from_upload(image),
    )
    if not result.success:
        return JSONResponse(
            status_code=400,
            content=response.model_dump(by_alias=True, exclude_none=True),
        )
    return response


@router.get("/status", response_model=ExtractionServiceStatus)
async def extraction_status(
    service: IDocumentExtractionService = Depends(get_extraction_service),
) -> ExtractionServiceStatus:
    """Report whether Document AI is configured."""
    return service.get_status()
