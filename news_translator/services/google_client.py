"""
Google Web Client
=================
Provider for the keyless translate.googleapis.com endpoint.
"""
from news_translator.config.constants import ProviderName
from news_translator.services.base import HTTPProvider, ProviderResult, resolve_source_language


class GoogleWebProvider(HTTPProvider):
    """GET requests to the public ``translate_a/single`` endpoint."""

    name = ProviderName.GOOGLE.value

    def translate(self, text: str, target_lang: str = 'tr', source_lang: str = None) -> ProviderResult:
        source_lang = resolve_source_language(target_lang, source_lang)
        result = self._request(
            'GET',
            self.settings.google_translate_url,
            params={
                'client': 'gtx',
                'sl': source_lang,
                'tl': target_lang,
                'dt': 't',
                'q': text,
            }
        )
        if 'error' in result:
            return self._fail(result['error'], result.get('status_code'))

        # data[0] holds [translated, original, ...] per sentence
        data = result['data']
        try:
            fragments = [segment[0] for segment in data[0] if segment and segment[0]]
            translated = ''.join(fragments).strip()
        except (IndexError, TypeError, KeyError):
            return self._fail("Unexpected response format", result.get('status_code'))

        if not translated:
            return self._fail("Empty translation", result.get('status_code'))

        return ProviderResult(
            success=True,
            text=translated,
            provider=self.name,
            status_code=result.get('status_code')
        )
