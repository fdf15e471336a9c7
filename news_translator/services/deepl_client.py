"""
DeepL Client
============
Provider for the DeepL REST API.
"""
from news_translator.config.constants import ProviderName
from news_translator.services.base import HTTPProvider, ProviderResult, resolve_source_language


class DeepLProvider(HTTPProvider):
    """Form-encoded calls to the DeepL translate endpoint."""

    name = ProviderName.DEEPL.value

    def is_configured(self) -> bool:
        return self.settings.deepl_enabled

    def translate(self, text: str, target_lang: str = 'tr', source_lang: str = None) -> ProviderResult:
        if not self.is_configured():
            return ProviderResult.failure(self.name, "DeepL API key not configured")

        source_lang = resolve_source_language(target_lang, source_lang)
        result = self._request(
            'POST',
            self.settings.deepl_api_url,
            data={
                'text': text,
                'source_lang': source_lang.upper(),
                'target_lang': target_lang.upper(),
            },
            headers={'Authorization': f"DeepL-Auth-Key {self.settings.deepl_api_key}"}
        )
        if 'error' in result:
            return self._fail(result['error'], result.get('status_code'))

        data = result['data']
        try:
            translated = data['translations'][0]['text']
        except (KeyError, IndexError, TypeError):
            return self._fail("No result", result.get('status_code'))

        if not isinstance(translated, str) or not translated.strip():
            return self._fail("No result", result.get('status_code'))

        return ProviderResult(
            success=True,
            text=translated.strip(),
            provider=self.name,
            status_code=result.get('status_code')
        )
