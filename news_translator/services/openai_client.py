"""
OpenAI Chat Client
==================
Chat-completion provider used for translation and summarization.
"""
from typing import Optional, List, Dict

from openai import OpenAI, OpenAIError

from news_translator.config import config
from news_translator.config.constants import ProviderName, SUPPORTED_LANGUAGES
from news_translator.config.settings import ProviderConfig
from news_translator.services.base import TranslationProvider, ProviderResult, ProviderError
from news_translator.services.terminology import TerminologyManager
from news_translator.utils.logging import debug_print
from news_translator.utils.text_processing import clean_translation_response

TRANSLATION_SYSTEM_PROMPT = """You are a professional translator of cryptocurrency news.
Translate the user's text into {language}.

Rules:
- Write every sentence in {language}. Never repeat the original text.
- Do not add introductions such as "Here is the translation", explanations or comments.
- {terminology}
- Use natural, fluent {language}.

Reply with the translation only."""

ENDPOINT_USER_PREFIX = "Şu metni Türkçeye çevir (sadece çeviriyi yaz, başka hiçbir şey yazma):\n\n"

TURKISH_SUMMARY_PROMPT = """Sen kripto haber analiz uzmanısın. Doğal ve okunabilir Türkçe özetler yazıyorsun.

GÖREV: Haberi özetle ve JSON döndür:
{
  "summary": "Kısa Türkçe özet (2-3 cümle, doğal ve akıcı)",
  "sentiment": "positive veya negative veya neutral"
}

KURALLAR:
- Sadece Türkçe yaz, orijinal İngilizce metni dahil etme.
- "Detaylar için gelişmeleri takip edin" gibi jenerik cümleler ekleme.
- Haberin tonunu koru.
- Bitcoin, Ethereum, NFT, DeFi, DAO, blockchain, airdrop gibi terimleri ve kişi/şirket isimlerini değiştirme.

SENTIMENT:
- positive: fiyat artışları, iyi haberler, büyüme
- negative: düşüşler, hack'ler, yasal sorunlar
- neutral: objektif bilgiler, analizler, nötr duyurular

SADECE JSON döndür."""

ENGLISH_SUMMARY_PROMPT = """You are a crypto news analysis expert. Analyze the given news and return this JSON:
{
  "summary": "Brief English summary of the news (2-3 sentences, keep important details)",
  "sentiment": "positive or negative or neutral"
}

Notes:
- The summary must be in English only.
- Do not include the original text in other languages.

Sentiment criteria:
- positive: price increases, good news, growth
- negative: price drops, hacks, scams, legal issues
- neutral: objective information, analysis, neutral announcements

Return only JSON."""


class OpenAIChatProvider(TranslationProvider):
    """Translation and summarization through the chat completions API."""

    name = ProviderName.OPENAI.value

    def __init__(
        self,
        settings: ProviderConfig = None,
        client: OpenAI = None,
        terminology: TerminologyManager = None
    ):
        super().__init__(settings)
        self.terminology = terminology or TerminologyManager()
        self._client = client

    @property
    def client(self) -> Optional[OpenAI]:
        if self._client is None and self.settings.openai_enabled:
            self._client = OpenAI(
                api_key=self.settings.openai_api_key,
                base_url=self.settings.openai_base_url,
                timeout=self.settings.read_timeout
            )
        return self._client

    def is_configured(self) -> bool:
        return self._client is not None or self.settings.openai_enabled

    def build_system_prompt(self, target_lang: str) -> str:
        language = SUPPORTED_LANGUAGES.get(target_lang, target_lang)
        return TRANSLATION_SYSTEM_PROMPT.format(
            language=language,
            terminology=self.terminology.get_context_for_prompt()
        )

    def _complete(self, messages: List[Dict[str, str]], temperature: float, max_tokens: int) -> str:
        """Run one chat completion and return the message content."""
        response = self.client.chat.completions.create(
            model=self.settings.openai_model,
            messages=messages,
            temperature=temperature,
            max_tokens=max_tokens
        )
        return response.choices[0].message.content or ''

    def translate(
        self,
        text: str,
        target_lang: str = 'tr',
        source_lang: str = None,
        endpoint: bool = False
    ) -> ProviderResult:
        """
        Translate text with the chat model.

        Args:
            text: Cleaned source text
            target_lang: Target language code
            source_lang: Unused, the model detects the source
            endpoint: Use the stricter settings of the /api/translate path

        Returns:
            ProviderResult with the cleaned model output
        """
        if not self.is_configured():
            return ProviderResult.failure(self.name, "OpenAI API key not configured")

        if endpoint:
            user_content = ENDPOINT_USER_PREFIX + text
            temperature = config.translation.endpoint_temperature
            max_tokens = config.translation.endpoint_max_tokens
        else:
            user_content = text
            temperature = config.translation.translate_temperature
            max_tokens = config.translation.translate_max_tokens

        messages = [
            {'role': 'system', 'content': self.build_system_prompt(target_lang)},
            {'role': 'user', 'content': user_content},
        ]

        try:
            content = self._complete(messages, temperature, max_tokens)
        except OpenAIError as e:
            return self._fail(f"OpenAI request failed: {e}")
        except (IndexError, AttributeError, TypeError) as e:
            return self._fail(f"Malformed OpenAI response: {e}")

        translation = clean_translation_response(content)
        if not translation:
            return self._fail("Empty response")

        debug_print(f"[OPENAI] {len(text)} chars -> {len(translation)} chars", 'DEBUG', 'PROVIDER')
        return ProviderResult(success=True, text=translation, provider=self.name)

    def summarize(self, content: str, language: str = 'tr') -> str:
        """
        Ask the model for a JSON summary with sentiment.

        Returns:
            Raw model content

        Raises:
            ProviderError: If the provider is not configured or the call fails
        """
        if not self.is_configured():
            raise ProviderError("OpenAI API key not configured", self.name)

        if language == 'en':
            system_prompt = ENGLISH_SUMMARY_PROMPT
            temperature = config.translation.english_summary_temperature
        else:
            system_prompt = TURKISH_SUMMARY_PROMPT
            temperature = config.translation.summary_temperature

        messages = [
            {'role': 'system', 'content': system_prompt},
            {'role': 'user', 'content': content},
        ]

        try:
            result = self._complete(messages, temperature, config.translation.summary_max_tokens)
        except OpenAIError as e:
            raise ProviderError(f"OpenAI request failed: {e}", self.name) from e
        except (IndexError, AttributeError, TypeError) as e:
            raise ProviderError(f"Malformed OpenAI response: {e}", self.name) from e

        if not result.strip():
            raise ProviderError("Empty summary response", self.name)
        return result
