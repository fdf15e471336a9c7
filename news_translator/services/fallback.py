"""
Fallback Helpers
================
Ordered provider chains and retry with exponential backoff.
"""
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Sequence, TypeVar

from news_translator.config.constants import FallbackStage
from news_translator.models.translation import FallbackOutcome
from news_translator.services.base import TranslationProvider
from news_translator.utils.logging import get_logger, debug_print

T = TypeVar('T')

# (source_text, candidate) -> text to keep, or None to reject
AcceptFn = Callable[[str, str], Optional[str]]


@dataclass
class FallbackStep:
    """One provider in a fallback chain together with its acceptance rule."""
    stage: FallbackStage
    provider: TranslationProvider
    accept: AcceptFn
    options: Dict[str, Any] = field(default_factory=dict)


def accept_non_empty(source: str, candidate: str) -> Optional[str]:
    """Accept any non-blank candidate."""
    if candidate and candidate.strip():
        return candidate.strip()
    return None


def first_acceptable(text: str, steps: Sequence[FallbackStep], target_lang: str = 'tr') -> FallbackOutcome:
    """
    Walk the steps in order and return the first accepted translation.

    A step is skipped when its provider is not configured, raises, returns a
    failed result or its accept function rejects the output.

    Returns:
        FallbackOutcome; stage is EXHAUSTED and text None when no step succeeded
    """
    logger = get_logger().translation_logger
    errors = []

    for step in steps:
        name = step.provider.name
        if not step.provider.is_configured():
            errors.append(f"{name}: not configured")
            continue

        try:
            result = step.provider.translate(text, target_lang=target_lang, **step.options)
        except Exception as e:
            logger.warning(f"{name} raised during {step.stage.value} stage: {e}")
            errors.append(f"{name}: {e}")
            continue

        if not result.success:
            errors.append(f"{name}: {result.error}")
            debug_print(f"[FALLBACK] {step.stage.value} ({name}) failed: {result.error}", 'WARNING', 'FALLBACK')
            continue

        accepted = step.accept(text, result.text)
        if accepted is None:
            errors.append(f"{name}: rejected")
            debug_print(f"[FALLBACK] {step.stage.value} ({name}) output rejected", 'WARNING', 'FALLBACK')
            continue

        debug_print(f"[FALLBACK] Accepted {step.stage.value} ({name})", 'DEBUG', 'FALLBACK')
        return FallbackOutcome(text=accepted, stage=step.stage, provider=name, errors=errors)

    logger.warning(f"All providers failed: {'; '.join(errors)}")
    return FallbackOutcome(text=None, stage=FallbackStage.EXHAUSTED, errors=errors)


def retry_with_backoff(
    fn: Callable[[], T],
    max_attempts: int,
    initial_delay: float,
    sleep: Callable[[float], Any] = time.sleep
) -> T:
    """
    Call fn until it returns without raising.

    Waits initial_delay * 2**attempt between attempts.

    Raises:
        The last exception raised by fn once max_attempts are used up
    """
    if max_attempts < 1:
        raise ValueError("max_attempts must be at least 1")

    logger = get_logger().app_logger
    for attempt in range(max_attempts):
        try:
            return fn()
        except Exception as e:
            if attempt == max_attempts - 1:
                raise
            delay = initial_delay * 2 ** attempt
            logger.warning(f"Attempt {attempt + 1}/{max_attempts} failed: {e}; retrying in {delay:.1f}s")
            sleep(delay)
