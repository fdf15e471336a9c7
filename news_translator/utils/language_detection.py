"""
Language Detection Utilities
=============================
Heuristic checks deciding whether provider output is really in the target
language. All word lists and patterns come from the language profiles in
``config.constants``.
"""
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import FrozenSet, Optional, Pattern, Tuple

from news_translator.config import config
from news_translator.config.constants import LANGUAGE_PROFILES
from news_translator.models.translation import ValidationVerdict
from news_translator.utils.text_processing import split_sentences

WORD_PATTERN = re.compile(r'\w+')


@dataclass(frozen=True)
class LanguageProfile:
    """Compiled form of one entry of LANGUAGE_PROFILES."""
    code: str
    version: int
    name: str
    source_language: str
    diagnostic_chars: FrozenSet[str]
    indicator_words: FrozenSet[str]
    native_suffixes: Tuple[str, ...]
    residue_patterns: Tuple[Pattern, ...]


@lru_cache(maxsize=None)
def get_language_profile(target_lang: str) -> LanguageProfile:
    """
    Build the validation profile for a target language.

    Raises:
        KeyError: If no profile exists for the language
    """
    data = LANGUAGE_PROFILES[target_lang]
    patterns = tuple(
        re.compile(entry['pattern'], re.IGNORECASE if entry.get('ignore_case') else 0)
        for entry in data['residue_patterns']
    )
    return LanguageProfile(
        code=target_lang,
        version=data['version'],
        name=data['name'],
        source_language=data['source_language'],
        diagnostic_chars=frozenset(data['diagnostic_chars']),
        indicator_words=frozenset(w.lower() for w in data['indicator_words']),
        native_suffixes=tuple(data['native_suffixes']),
        residue_patterns=patterns,
    )


def has_diagnostic_chars(text: str, target_lang: str = 'tr') -> bool:
    """Check whether text carries at least one letter specific to the target language."""
    if not text or target_lang not in LANGUAGE_PROFILES:
        return False
    profile = get_language_profile(target_lang)
    return any(ch in profile.diagnostic_chars for ch in text)


def _looks_like_source_word(token: str, profile: LanguageProfile, terminology) -> bool:
    if not (token.isascii() and token.isalpha()) or len(token) <= 2:
        return False
    lowered = token.lower()
    if lowered in profile.indicator_words or terminology.is_preserved(token):
        return False
    return not lowered.endswith(profile.native_suffixes)


def source_word_ratio(sentence: str, profile: LanguageProfile, terminology) -> float:
    """Fraction of tokens in a sentence that look like plain source-language words."""
    tokens = WORD_PATTERN.findall(sentence)
    if not tokens:
        return 0.0
    flagged = sum(1 for token in tokens if _looks_like_source_word(token, profile, terminology))
    return flagged / len(tokens)


def has_source_residue(sentence: str, profile: LanguageProfile) -> bool:
    """Check a sentence against the profile's source-language residue patterns."""
    return any(pattern.search(sentence) for pattern in profile.residue_patterns)


def indicator_density(text: str, profile: LanguageProfile) -> float:
    """Share of tokens that carry a diagnostic letter or are indicator words."""
    tokens = WORD_PATTERN.findall(text)
    if not tokens:
        return 0.0
    hits = sum(
        1 for token in tokens
        if token.lower() in profile.indicator_words
        or any(ch in profile.diagnostic_chars for ch in token)
    )
    return hits / len(tokens)


def validate_translation(
    candidate: str,
    target_lang: str = 'tr',
    profile: Optional[LanguageProfile] = None,
    terminology=None,
    thresholds=None
) -> ValidationVerdict:
    """
    Decide whether a provider's output is an acceptable translation.

    Each sentence is kept only if it carries a diagnostic letter, matches no
    residue pattern and has few source-looking words. The kept sentences are
    then checked as a whole for diagnostic letters, indicator density and
    length.

    Args:
        candidate: Text returned by a provider
        target_lang: Target language code
        profile: Compiled profile (looked up from target_lang if not given)
        terminology: TerminologyManager whose terms are never counted as
            source words (built-in terms plus PRESERVED_TERMS if not given)
        thresholds: Object with the ValidationConfig threshold attributes
            (uses config if not specified)

    Returns:
        ValidationVerdict with the cleaned text when accepted
    """
    if profile is None:
        profile = get_language_profile(target_lang)
    if terminology is None:
        from news_translator.services.terminology import TerminologyManager
        terminology = TerminologyManager()
    if thresholds is None:
        thresholds = config.validation

    if not candidate or not candidate.strip():
        return ValidationVerdict(accepted=False, reason="empty candidate")

    sentences = split_sentences(candidate)

    kept = []
    for sentence in sentences:
        sentence = sentence.strip()
        if len(sentence) < thresholds.min_sentence_length:
            continue
        if not any(ch in profile.diagnostic_chars for ch in sentence):
            continue
        if has_source_residue(sentence, profile):
            continue
        if source_word_ratio(sentence, profile, terminology) >= thresholds.max_source_word_ratio:
            continue
        kept.append(sentence)

    text = ' '.join(kept)
    verdict = ValidationVerdict(
        accepted=False,
        text=text,
        kept_sentences=len(kept),
        total_sentences=len(sentences)
    )

    if not kept:
        verdict.reason = "no sentence passed the target-language checks"
    elif not any(ch in profile.diagnostic_chars for ch in text):
        verdict.reason = "no diagnostic characters"
    elif indicator_density(text, profile) < thresholds.min_indicator_ratio:
        verdict.reason = "indicator density too low"
    elif len(text) < thresholds.min_translation_length:
        verdict.reason = "translation too short"
    else:
        verdict.accepted = True

    return verdict


def is_likely_translated(original: str, translated: str, min_length: int = None) -> bool:
    """
    Check that a fallback provider actually changed the text.

    Args:
        original: Source text
        translated: Provider output
        min_length: Output must be longer than this (uses config if not specified)

    Returns:
        True if the output is non-empty, differs from the source and is long enough
    """
    if min_length is None:
        min_length = config.translation.min_fallback_length
    if not translated or not translated.strip():
        return False
    translated = translated.strip()
    if translated.lower() == (original or '').strip().lower():
        return False
    return len(translated) > min_length
