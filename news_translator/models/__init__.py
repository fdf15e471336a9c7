"""
News Translator - Data Models
"""
from news_translator.models.translation import (
    TranslationRequest,
    SummaryResult,
    ValidationVerdict,
    FallbackOutcome
)
from news_translator.models.schemas import (
    TranslateRequest,
    BatchTranslateRequest,
    SummarizeRequest,
    TranslationResponse,
    HealthStatus
)

__all__ = [
    "TranslationRequest",
    "SummaryResult",
    "ValidationVerdict",
    "FallbackOutcome",
    "TranslateRequest",
    "BatchTranslateRequest",
    "SummarizeRequest",
    "TranslationResponse",
    "HealthStatus"
]
