"""
Provider Base Classes
=====================
Shared result type, exceptions and HTTP plumbing of the translation providers.
"""
import json
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Any, Dict

import requests

from news_translator.config.constants import SOURCE_LANGUAGE_FOR
from news_translator.config.settings import ProviderConfig
from news_translator.config import config
from news_translator.utils.logging import get_logger, debug_print


class TranslationError(Exception):
    """Base error of the translation pipeline."""


class ProviderError(TranslationError):
    """A provider call failed where the caller expects an exception."""

    def __init__(self, message: str, provider: str = None):
        super().__init__(message)
        self.provider = provider


class TranslationExhaustedError(TranslationError):
    """Every provider of a fallback chain failed."""

    def __init__(self, message: str = "Translation failed", best_effort: str = ""):
        super().__init__(message)
        self.best_effort = best_effort


@dataclass
class ProviderResult:
    """Response from a translation provider."""
    success: bool
    text: Optional[str] = None
    error: Optional[str] = None
    provider: Optional[str] = None
    status_code: Optional[int] = None

    @classmethod
    def failure(cls, provider: str, error: str, status_code: int = None) -> "ProviderResult":
        return cls(success=False, error=error, provider=provider, status_code=status_code)


def resolve_source_language(target_lang: str, source_lang: str = None) -> str:
    """Source defaults to the opposite side of the en/tr pair."""
    return source_lang or SOURCE_LANGUAGE_FOR.get(target_lang, 'en')


class TranslationProvider(ABC):
    """A single translation backend."""

    name: str = "provider"

    def __init__(self, settings: ProviderConfig = None):
        self.settings = settings or config.providers
        self.logger = get_logger().provider_logger

    def is_configured(self) -> bool:
        """Whether the provider has what it needs to be called."""
        return True

    @abstractmethod
    def translate(self, text: str, target_lang: str = 'tr', source_lang: str = None) -> ProviderResult:
        """Translate text; expected failures come back as a failed result."""

    def _fail(self, error: str, status_code: int = None) -> ProviderResult:
        self.logger.warning(f"{self.name} failed: {error}")
        debug_print(f"[{self.name.upper()}] {error}", 'WARNING', 'PROVIDER')
        return ProviderResult.failure(self.name, error, status_code)


class HTTPProvider(TranslationProvider):
    """Provider reached over plain HTTP with a pooled session."""

    def __init__(self, settings: ProviderConfig = None, session: requests.Session = None):
        super().__init__(settings)

        if session is None:
            # Set up session with connection pooling
            session = requests.Session()
            adapter = requests.adapters.HTTPAdapter(pool_connections=10, pool_maxsize=10)
            session.mount('http://', adapter)
            session.mount('https://', adapter)
        session.headers.update({'User-Agent': self.settings.user_agent})
        self.session = session

    @property
    def timeout(self):
        return (self.settings.connect_timeout, self.settings.read_timeout)

    def _request(self, method: str, url: str, **kwargs) -> Dict[str, Any]:
        """
        Send a request and decode its JSON body.

        Returns:
            Dict with either 'data' or 'error' (and 'status_code' when a
            response arrived)
        """
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.Timeout:
            return {'error': "Request timed out"}
        except requests.RequestException as e:
            return {'error': str(e)}

        status_code = getattr(response, 'status_code', None)
        if status_code is None or not 200 <= status_code < 300:
            return {'error': f"HTTP {status_code}", 'status_code': status_code}

        try:
            return {'data': response.json(), 'status_code': status_code}
        except (ValueError, json.JSONDecodeError) as e:
            return {'error': f"Invalid JSON response: {e}", 'status_code': status_code}
