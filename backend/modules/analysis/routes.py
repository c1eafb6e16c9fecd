"""
Language analysis API endpoints.

Text-only access to the analysis gateway, without OCR.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from api.dependencies import get_analysis_service

from .interfaces import ILanguageAnalysisService
from .models import AnalysisServiceStatus, ChatRequest, ChatResponse

router = APIRouter()


@router.post("/chat", response_model=ChatResponse)
async def chat(
    request: ChatRequest,
    service: ILanguageAnalysisService = Depends(get_analysis_service),
):
    """
    Split a text into words and phrases with translations.

    Returns 400 when no text or language is supplied or the model gives no output.
    Provider failures surface as 502 through the error handlers.
    """
    if not request.text.strip():
        return JSONResponse(status_code=400, content={"success": False, "error": "No text supplied"})
    if not request.language.strip():
        return JSONResponse(
            status_code=400,
            content={"success": False, "error": "Language parameter is required"},
        )

    result = await service.process_text(request.text, request.language)
    if result is None:
        return JSONResponse(
            status_code=400,
            content={"success": False, "error": "Failed to generate response"},
        )

    return ChatResponse(data=result, timestamp=datetime.now(timezone.utc))


@router.get("/status", response_model=AnalysisServiceStatus)
async def analysis_status(
    service: ILanguageAnalysisService = Depends(get_analysis_service),
) -> AnalysisServiceStatus:
    """Report whether OpenAI is configured."""
    return service.get_status()
