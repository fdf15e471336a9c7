"""
LibreTranslate Client
=====================
Provider for LibreTranslate instances.
"""
from news_translator.config.constants import ProviderName
from news_translator.services.base import HTTPProvider, ProviderResult, resolve_source_language


class LibreTranslateProvider(HTTPProvider):
    """JSON POST to a LibreTranslate ``/translate`` endpoint."""

    name = ProviderName.LIBRETRANSLATE.value

    def is_configured(self) -> bool:
        return bool(self.settings.libretranslate_url)

    def translate(self, text: str, target_lang: str = 'tr', source_lang: str = None) -> ProviderResult:
        if not self.is_configured():
            return ProviderResult.failure(self.name, "LibreTranslate URL not configured")

        payload = {
            'q': text,
            'source': resolve_source_language(target_lang, source_lang),
            'target': target_lang,
            'format': 'text',
        }
        if self.settings.libretranslate_api_key:
            payload['api_key'] = self.settings.libretranslate_api_key

        result = self._request('POST', self.settings.libretranslate_url, json=payload)
        if 'error' in result:
            return self._fail(result['error'], result.get('status_code'))

        data = result['data']
        translated = data.get('translatedText') if isinstance(data, dict) else None
        if not isinstance(translated, str) or not translated.strip():
            return self._fail("Empty translation", result.get('status_code'))

        return ProviderResult(
            success=True,
            text=translated.strip(),
            provider=self.name,
            status_code=result.get('status_code')
        )
