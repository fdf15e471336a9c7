"""
Request/Response Schemas
========================
Validation schemas for API requests and responses.
"""
from dataclasses import dataclass, field
from typing import Optional, List, Dict, Any

from news_translator.utils.validators import validate_language, validate_text, validate_texts


@dataclass
class TranslateRequest:
    """Request schema for the translate endpoint."""
    text: Any = None

    @classmethod
    def from_json(cls, payload: Optional[Dict[str, Any]]) -> "TranslateRequest":
        payload = payload or {}
        return cls(text=payload.get('text'))

    def validate(self) -> List[str]:
        """Validate the request and return list of errors."""
        valid, error = validate_text(self.text)
        return [] if valid else [error]


@dataclass
class BatchTranslateRequest:
    """Request schema for the batch endpoint."""
    texts: Any = None
    target_lang: str = 'tr'

    @classmethod
    def from_json(cls, payload: Optional[Dict[str, Any]]) -> "BatchTranslateRequest":
        payload = payload or {}
        return cls(texts=payload.get('texts'), target_lang=payload.get('target_lang') or 'tr')

    def validate(self, max_items: int) -> List[str]:
        errors = []
        valid, error = validate_texts(self.texts, max_items)
        if not valid:
            errors.append(error)
        valid, error = validate_language(self.target_lang)
        if not valid:
            errors.append(error)
        return errors


@dataclass
class SummarizeRequest:
    """Request schema for the summarize endpoint."""
    title: Any = None
    text: Optional[str] = None
    language: str = 'tr'

    @classmethod
    def from_json(cls, payload: Optional[Dict[str, Any]]) -> "SummarizeRequest":
        payload = payload or {}
        return cls(
            title=payload.get('title'),
            text=payload.get('text'),
            language=payload.get('language') or 'tr'
        )

    def validate(self) -> List[str]:
        errors = []
        if not isinstance(self.title, str):
            errors.append("title must be a string")
        if self.text is not None and not isinstance(self.text, str):
            errors.append("text must be a string")
        valid, error = validate_language(self.language)
        if not valid:
            errors.append(error)
        return errors


@dataclass
class TranslationResponse:
    """Response schema for the translate endpoint."""
    translation: str
    error: Optional[str] = None

    def to_dict(self) -> dict:
        result = {'translation': self.translation}
        if self.error:
            result['error'] = self.error
        return result


@dataclass
class HealthStatus:
    """Health check response."""
    status: str
    version: str
    providers: Dict[str, bool] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            'status': self.status,
            'version': self.version,
            'providers': self.providers,
        }
