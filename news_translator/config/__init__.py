"""
News Translator - Configuration Module
"""
from news_translator.config.settings import Config, config
from news_translator.config.constants import (
    LANGUAGE_PROFILES,
    PRESERVED_TERMS,
    SUPPORTED_LANGUAGES,
    FallbackStage,
    ProviderName,
    Sentiment
)

__all__ = [
    "Config",
    "config",
    "LANGUAGE_PROFILES",
    "PRESERVED_TERMS",
    "SUPPORTED_LANGUAGES",
    "FallbackStage",
    "ProviderName",
    "Sentiment"
]
