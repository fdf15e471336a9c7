"""
Test doubles shared by the test modules.
"""
from news_translator.services.base import ProviderResult, TranslationProvider


class FakeProvider(TranslationProvider):
    """
    Provider returning canned output.

    ``output`` may be a string, a callable taking the input text, or None for
    a failed result. ``exc`` is raised instead when given.
    """

    def __init__(self, name, output=None, exc=None, configured=True):
        super().__init__()
        self.name = name
        self.output = output
        self.exc = exc
        self.configured = configured
        self.calls = []

    def is_configured(self):
        return self.configured

    def translate(self, text, target_lang='tr', source_lang=None, **options):
        self.calls.append({'text': text, 'target_lang': target_lang, 'options': options})
        if self.exc is not None:
            raise self.exc
        value = self.output(text) if callable(self.output) else self.output
        if value is None:
            return ProviderResult.failure(self.name, "fake failure")
        return ProviderResult(success=True, text=value, provider=self.name)


class SleepRecorder:
    """Stands in for time.sleep and records requested delays."""

    def __init__(self):
        self.delays = []

    def __call__(self, seconds):
        self.delays.append(seconds)
