"""
Translation Data Models
=======================
Request-scoped data structures passed between the pipeline stages.
"""
from dataclasses import dataclass, field
from typing import Optional, List
from news_translator.config.constants import FallbackStage, Sentiment, SUPPORTED_LANGUAGES


@dataclass
class TranslationRequest:
    """
    Text to translate and the language to translate it into.

    Blank text is valid; it short-circuits to an identity result.
    """
    text: str
    target_lang: str = 'tr'

    def validate(self) -> List[str]:
        """Validate the request and return list of errors."""
        errors = []
        if self.text is not None and not isinstance(self.text, str):
            errors.append("text must be a string")
        if self.target_lang not in SUPPORTED_LANGUAGES:
            errors.append(f"Unsupported target language: {self.target_lang}")
        return errors


@dataclass
class SummaryResult:
    """Summary of a news item with its sentiment."""
    summary: str
    sentiment: Sentiment = Sentiment.NEUTRAL

    def __post_init__(self):
        self.sentiment = Sentiment.coerce(self.sentiment)

    def to_dict(self) -> dict:
        return {
            'summary': self.summary,
            'sentiment': self.sentiment.value,
        }


@dataclass
class ValidationVerdict:
    """Accept/reject decision over one candidate translation."""
    accepted: bool
    text: str = ""
    kept_sentences: int = 0
    total_sentences: int = 0
    reason: Optional[str] = None


@dataclass
class FallbackOutcome:
    """Result of walking a provider chain for one piece of text."""
    text: Optional[str]
    stage: FallbackStage
    provider: Optional[str] = None
    errors: List[str] = field(default_factory=list)

    @property
    def exhausted(self) -> bool:
        return self.stage == FallbackStage.EXHAUSTED
