"""
Language analysis data models.

The capture result contract: every word and phrase carries its English
translations under the key "translation".
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from shared.models import CamelModel

CAPTURE_CONTRACT_VERSION = "v1"


class WordPhrase(BaseModel):
    """A word or phrase from the source text with its translations."""

    model_config = ConfigDict(extra="forbid")

    text: str = Field(..., description="Word or phrase as it appears in the text")
    translation: list[str] = Field(..., description="English translations")


class CaptureResult(BaseModel):
    """Learnable words and phrases extracted from a text."""

    model_config = ConfigDict(extra="forbid")

    words: list[WordPhrase]
    phrases: list[WordPhrase]


class ChatRequest(BaseModel):
    """Body of the text-only analysis endpoint."""

    text: str = ""
    language: str = ""


class ChatResponse(BaseModel):
    """Successful text-only analysis."""

    success: bool = True
    data: CaptureResult
    timestamp: datetime


class AnalysisServiceStatus(CamelModel):
    """Configuration status of the analysis gateway."""

    status: str = Field(..., description="healthy | error")
    message: str
    model: Optional[str] = None
    timestamp: datetime
