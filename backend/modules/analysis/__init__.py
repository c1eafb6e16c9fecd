"""
Language analysis module.

Turns text into learnable words and phrases with English translations
using an OpenAI chat model.

Public API:
- ILanguageAnalysisService: Interface for analysis operations
- LanguageAnalysisService: OpenAI implementation
- CaptureResult, WordPhrase: Result contract (CAPTURE_CONTRACT_VERSION)
"""

from .interfaces import ILanguageAnalysisService
from .models import (
    CAPTURE_CONTRACT_VERSION,
    AnalysisServiceStatus,
    CaptureResult,
    ChatRequest,
    ChatResponse,
    WordPhrase,
)
from .prompts import RESPONSE_FORMAT, WORD_CAPTURE_SCHEMA, build_capture_prompt
from .service import LanguageAnalysisService

__all__ = [
    # Interface
    "ILanguageAnalysisService",
    # Implementation
    "LanguageAnalysisService",
    "build_capture_prompt",
    "RESPONSE_FORMAT",
    "WORD_CAPTURE_SCHEMA",
    # Models
    "CAPTURE_CONTRACT_VERSION",
    "AnalysisServiceStatus",
    "CaptureResult",
    "ChatRequest",
    "ChatResponse",
    "WordPhrase",
]
