"""
News Translator - Services
"""
from news_translator.services.base import (
    ProviderResult,
    TranslationError,
    ProviderError,
    TranslationExhaustedError
)
from news_translator.services.openai_client import OpenAIChatProvider
from news_translator.services.deepl_client import DeepLProvider
from news_translator.services.google_client import GoogleWebProvider
from news_translator.services.libre_client import LibreTranslateProvider
from news_translator.services.translator import NewsTranslator, get_translator
from news_translator.services.summarizer import NewsSummarizer, get_summarizer
from news_translator.services.terminology import TerminologyManager

__all__ = [
    "ProviderResult",
    "TranslationError",
    "ProviderError",
    "TranslationExhaustedError",
    "OpenAIChatProvider",
    "DeepLProvider",
    "GoogleWebProvider",
    "LibreTranslateProvider",
    "NewsTranslator",
    "get_translator",
    "NewsSummarizer",
    "get_summarizer",
    "TerminologyManager"
]
