"""
News Translator Service
=======================
Provider fallback chains for translating crypto news into Turkish.
"""
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional

from news_translator.config import config
from news_translator.config.constants import FallbackStage
from news_translator.models.translation import TranslationRequest
from news_translator.services.base import TranslationExhaustedError, TranslationProvider
from news_translator.services.deepl_client import DeepLProvider
from news_translator.services.fallback import FallbackStep, accept_non_empty, first_acceptable
from news_translator.services.google_client import GoogleWebProvider
from news_translator.services.libre_client import LibreTranslateProvider
from news_translator.services.openai_client import OpenAIChatProvider
from news_translator.services.terminology import TerminologyManager
from news_translator.utils.language_detection import is_likely_translated, validate_translation
from news_translator.utils.logging import get_logger, debug_print
from news_translator.utils.text_processing import normalize_text, split_into_chunks


class NewsTranslator:
    """
    Translates news text through an ordered chain of providers.

    General path, per chunk: OpenAI (validated) -> Google -> LibreTranslate,
    keeping the source chunk when all of them fail.

    Endpoint path, whole text: DeepL -> OpenAI (validated) -> Google, raising
    TranslationExhaustedError when all of them fail.
    """

    def __init__(
        self,
        openai_provider: OpenAIChatProvider = None,
        deepl_provider: TranslationProvider = None,
        google_provider: TranslationProvider = None,
        libre_provider: TranslationProvider = None,
        terminology: TerminologyManager = None
    ):
        self.terminology = terminology or TerminologyManager()
        self.openai = openai_provider or OpenAIChatProvider(terminology=self.terminology)
        self.deepl = deepl_provider or DeepLProvider()
        self.google = google_provider or GoogleWebProvider()
        self.libre = libre_provider or LibreTranslateProvider()
        self.logger = get_logger().translation_logger

    def _accept_validated(self, source: str, candidate: str) -> Optional[str]:
        verdict = validate_translation(candidate, 'tr', terminology=self.terminology)
        if verdict.accepted:
            return verdict.text
        self.logger.info(
            f"Validator rejected output ({verdict.reason}, "
            f"{verdict.kept_sentences}/{verdict.total_sentences} sentences kept)"
        )
        return None

    def _accept_if_translated(self, source: str, candidate: str) -> Optional[str]:
        if is_likely_translated(source, candidate):
            return candidate.strip()
        return None

    def chunk_steps(self) -> List[FallbackStep]:
        return [
            FallbackStep(FallbackStage.PRIMARY, self.openai, self._accept_validated),
            FallbackStep(FallbackStage.SECONDARY, self.google, self._accept_if_translated),
            FallbackStep(FallbackStage.TERTIARY, self.libre, self._accept_if_translated),
        ]

    def endpoint_steps(self) -> List[FallbackStep]:
        return [
            FallbackStep(FallbackStage.PRIMARY, self.deepl, accept_non_empty),
            FallbackStep(FallbackStage.SECONDARY, self.openai, self._accept_validated, {'endpoint': True}),
            FallbackStep(FallbackStage.TERTIARY, self.google, accept_non_empty),
        ]

    def translate_text(self, text: str, target_lang: str = 'tr') -> str:
        """
        Translate text into the target language.

        English output only needs cleaning since the feeds are in English.

        Raises:
            ValueError: If the text is not a string or the target language
                is not supported
        """
        request = TranslationRequest(text, target_lang)
        errors = request.validate()
        if errors:
            raise ValueError('; '.join(errors))
        if request.target_lang == 'en':
            return normalize_text(request.text)
        return self.translate_to_turkish(request.text)

    def translate_to_turkish(self, text: str) -> str:
        """
        Translate English news text into Turkish. Never raises.

        Args:
            text: Raw text or HTML

        Returns:
            Turkish text; untranslatable chunks are kept in their cleaned
            source form
        """
        if not text or not text.strip():
            return text

        try:
            clean_text = normalize_text(text)
            if not clean_text:
                return text

            chunks = split_into_chunks(clean_text)
            debug_print(f"[TRANSLATE] {len(clean_text)} chars in {len(chunks)} chunks", 'INFO', 'TRANSLATOR')

            translated_chunks = []
            for index, chunk in enumerate(chunks):
                outcome = first_acceptable(chunk, self.chunk_steps(), 'tr')
                if outcome.exhausted:
                    self.logger.warning(f"Chunk {index + 1}/{len(chunks)} left untranslated")
                    translated_chunks.append(chunk)
                else:
                    debug_print(
                        f"[TRANSLATE] Chunk {index + 1}/{len(chunks)} via {outcome.provider} ({outcome.stage.value})",
                        'DEBUG', 'TRANSLATOR'
                    )
                    translated_chunks.append(outcome.text)

            joined = ' '.join(translated_chunks)
            return normalize_text(joined) or joined

        except Exception as e:
            self.logger.error(f"Translation failed, returning cleaned source: {e}")
            return normalize_text(text)

    def translate_for_endpoint(self, text: str) -> str:
        """
        Translate text for the /api/translate endpoint.

        Returns:
            The translation, or the input unchanged when it cleans to nothing

        Raises:
            TranslationExhaustedError: If every provider failed; carries the
                cleaned source as best effort
        """
        clean_text = normalize_text(text)
        if not clean_text:
            return text

        outcome = first_acceptable(clean_text, self.endpoint_steps(), 'tr')
        if outcome.exhausted:
            self.logger.error(f"Endpoint translation exhausted: {'; '.join(outcome.errors)}")
            raise TranslationExhaustedError(best_effort=clean_text)

        self.logger.info(f"Endpoint translation via {outcome.provider} ({outcome.stage.value})")
        return normalize_text(outcome.text) or outcome.text

    def translate_batch(self, texts: List[str], target_lang: str = 'tr') -> List[str]:
        """
        Translate several texts, in parallel when enabled.

        Results keep the input order. An item whose translation raises comes
        back as its own source text.
        """
        def translate_one(text: str) -> str:
            try:
                return self.translate_text(text, target_lang)
            except Exception as e:
                self.logger.error(f"Batch item failed, keeping source: {e}")
                return text

        if not texts:
            return []

        if not config.translation.enable_parallel or len(texts) == 1:
            return [translate_one(text) for text in texts]

        workers = min(config.translation.max_workers, len(texts))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            return list(executor.map(translate_one, texts))

    def provider_status(self) -> dict:
        """Which providers are configured, for the health endpoint."""
        return {
            provider.name: provider.is_configured()
            for provider in (self.openai, self.deepl, self.google, self.libre)
        }


# Global translator instance
_translator_instance: Optional[NewsTranslator] = None


def get_translator() -> NewsTranslator:
    """Get or create the global translator instance."""
    global _translator_instance
    if _translator_instance is None:
        _translator_instance = NewsTranslator()
    return _translator_instance
