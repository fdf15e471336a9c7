"""
News Summarizer Service
=======================
Short summaries with sentiment for news items, in Turkish or English.
"""
import json
import time
from typing import Any, Callable, Dict, Optional

from news_translator.config import config
from news_translator.config.constants import Sentiment
from news_translator.models.translation import SummaryResult
from news_translator.services.fallback import retry_with_backoff
from news_translator.services.openai_client import OpenAIChatProvider
from news_translator.services.translator import NewsTranslator, get_translator
from news_translator.utils.language_detection import has_diagnostic_chars
from news_translator.utils.logging import get_logger, debug_print
from news_translator.utils.text_processing import clean_summary_text, strip_code_fences, truncate

# Summaries this short are treated as missing
MIN_SUMMARY_LENGTH = 10
MIN_TITLE_TRANSLATION_LENGTH = 8


class NewsSummarizer:
    """Summarizes news items through the chat model, degrading to the title."""

    def __init__(
        self,
        translator: NewsTranslator = None,
        openai_provider: OpenAIChatProvider = None,
        sleep: Callable[[float], Any] = time.sleep
    ):
        self.translator = translator or get_translator()
        self.openai = openai_provider or self.translator.openai
        self.sleep = sleep
        self.logger = get_logger().translation_logger

    @staticmethod
    def build_content(title: str, text: Optional[str] = None) -> str:
        content = f"{title}\n\n{text}" if text else title
        return truncate(content, config.translation.summary_max_input)

    def _request_summary(self, content: str, language: str) -> str:
        return retry_with_backoff(
            lambda: self.openai.summarize(content, language),
            config.translation.summary_max_retries,
            config.translation.summary_retry_delay,
            sleep=self.sleep
        )

    @staticmethod
    def _parse(raw: str) -> Optional[Dict[str, Any]]:
        try:
            parsed = json.loads(strip_code_fences(raw))
        except ValueError:
            return None
        return parsed if isinstance(parsed, dict) else None

    def summarize_and_translate(self, title: str, text: str = None) -> SummaryResult:
        """
        Summarize a news item in Turkish and classify its sentiment.

        Falls back to a translated title, then to the title itself. Never raises.

        Args:
            title: News headline
            text: Optional body

        Returns:
            SummaryResult
        """
        if not title or not title.strip():
            return SummaryResult(title, Sentiment.NEUTRAL)

        debug_print(f"[SUMMARY] Summarizing: {title[:50]}...", 'INFO', 'SUMMARIZER')

        try:
            raw = self._request_summary(self.build_content(title, text), 'tr')
        except Exception as e:
            self.logger.error(f"Summarization failed: {e}")
            return self._title_fallback(title)

        parsed = self._parse(raw)
        if parsed is None:
            if len(raw.strip()) > MIN_SUMMARY_LENGTH:
                self.logger.warning("Summary was not JSON, using raw content")
                return SummaryResult(raw.strip(), Sentiment.NEUTRAL)
            return self._title_fallback(title)

        summary = clean_summary_text(str(parsed.get('summary') or ''))
        if len(summary) <= MIN_SUMMARY_LENGTH:
            summary = title
        return SummaryResult(summary, Sentiment.coerce(parsed.get('sentiment')))

    def _title_fallback(self, title: str) -> SummaryResult:
        try:
            translated = retry_with_backoff(
                lambda: self.translator.translate_to_turkish(title),
                config.translation.title_max_retries,
                config.translation.title_retry_delay,
                sleep=self.sleep
            )
        except Exception as e:
            self.logger.error(f"Title translation fallback failed: {e}")
            return SummaryResult(title, Sentiment.NEUTRAL)

        if translated and (
            translated.lower() != title.lower()
            or len(translated) > MIN_TITLE_TRANSLATION_LENGTH
            or has_diagnostic_chars(translated, 'tr')
        ):
            return SummaryResult(translated, Sentiment.NEUTRAL)

        self.logger.warning("Title translation could not be verified, using original")
        return SummaryResult(title, Sentiment.NEUTRAL)

    def summarize_in_english(self, title: str, text: str = None) -> SummaryResult:
        """Summarize a news item in English. Any failure yields the title. Never raises."""
        if not title or not title.strip():
            return SummaryResult(title, Sentiment.NEUTRAL)

        try:
            raw = self._request_summary(self.build_content(title, text), 'en')
        except Exception as e:
            self.logger.error(f"English summarization failed: {e}")
            return SummaryResult(title, Sentiment.NEUTRAL)

        parsed = self._parse(raw)
        if parsed is None:
            if len(raw.strip()) > MIN_SUMMARY_LENGTH:
                return SummaryResult(raw.strip(), Sentiment.NEUTRAL)
            return SummaryResult(title, Sentiment.NEUTRAL)

        summary = str(parsed.get('summary') or '').strip()
        if len(summary) <= MIN_SUMMARY_LENGTH:
            summary = title
        return SummaryResult(summary, Sentiment.coerce(parsed.get('sentiment')))

    def summarize(self, title: str, text: str = None, language: str = 'tr') -> SummaryResult:
        if language == 'en':
            return self.summarize_in_english(title, text)
        return self.summarize_and_translate(title, text)


# Global summarizer instance
_summarizer_instance: Optional[NewsSummarizer] = None


def get_summarizer() -> NewsSummarizer:
    """Get or create the global summarizer instance."""
    global _summarizer_instance
    if _summarizer_instance is None:
        _summarizer_instance = NewsSummarizer()
    return _summarizer_instance
