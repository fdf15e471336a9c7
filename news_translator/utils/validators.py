"""
Validation Utilities
====================
Functions for validating input data.
"""
from typing import Any, Tuple, Optional
from news_translator.config import SUPPORTED_LANGUAGES


def validate_text(text: Any) -> Tuple[bool, Optional[str]]:
    """
    Validate a text field of a translation request.

    Args:
        text: The value received for the text field

    Returns:
        Tuple of (is_valid, error_message)
    """
    if text is None:
        return False, "text is required"

    if not isinstance(text, str):
        return False, "text must be a string"

    if not text.strip():
        return False, "text must not be empty"

    return True, None


def validate_language(lang_code: str) -> Tuple[bool, Optional[str]]:
    """
    Validate a language code.

    Args:
        lang_code: The language code to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not lang_code:
        return False, "Language code is required"

    if lang_code not in SUPPORTED_LANGUAGES:
        supported = ', '.join(SUPPORTED_LANGUAGES.keys())
        return False, f"Unsupported language: {lang_code}. Supported: {supported}"

    return True, None


def validate_texts(texts: Any, max_items: int) -> Tuple[bool, Optional[str]]:
    """Validate the list of a batch request."""
    if not isinstance(texts, list) or not texts:
        return False, "texts must be a non-empty list"

    if len(texts) > max_items:
        return False, f"Too many texts. Maximum: {max_items}"

    for index, text in enumerate(texts):
        if not isinstance(text, str):
            return False, f"texts[{index}] must be a string"

    return True, None
