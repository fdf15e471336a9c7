"""
News Translator - Utility Functions
"""
from news_translator.utils.language_detection import (
    has_diagnostic_chars,
    is_likely_translated,
    validate_translation
)
from news_translator.utils.text_processing import (
    split_into_chunks,
    clean_translation_response,
    clean_summary_text,
    normalize_text
)
from news_translator.utils.validators import (
    validate_text,
    validate_texts,
    validate_language
)
from news_translator.utils.logging import (
    LogBuffer,
    AppLogger,
    get_logger,
    debug_print
)

__all__ = [
    "has_diagnostic_chars",
    "is_likely_translated",
    "validate_translation",
    "split_into_chunks",
    "clean_translation_response",
    "clean_summary_text",
    "normalize_text",
    "validate_text",
    "validate_texts",
    "validate_language",
    "LogBuffer",
    "AppLogger",
    "get_logger",
    "debug_print"
]
