"""
Integration Tests for Flask API
================================
Routes are exercised with injected translator and summarizer doubles.
"""
import pytest
import sys
import os
import json
from unittest.mock import MagicMock

# Setup test environment
os.environ.setdefault('VERBOSE_DEBUG', 'false')
os.environ.setdefault('LOG_TO_FILE', 'false')

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from news_translator.config import config
from news_translator.config.constants import APP_VERSION, Sentiment
from news_translator.api.middleware import RateLimiter
from news_translator.models.translation import SummaryResult
from news_translator.services.base import TranslationExhaustedError
from news_translator.services.terminology import TerminologyManager
from news_translator.services.translator import NewsTranslator
from tests.helpers import FakeProvider


@pytest.fixture
def translator():
    mock = MagicMock()
    mock.provider_status.return_value = {
        'openai': True, 'deepl': False, 'google': True, 'libretranslate': True
    }
    return mock


@pytest.fixture
def summarizer():
    return MagicMock()


@pytest.fixture
def client(translator, summarizer):
    """Create test client for Flask app."""
    from news_translator.app import create_app

    app = create_app(testing=True, translator=translator, summarizer=summarizer)

    with app.test_client() as client:
        yield client


class TestTranslateEndpoint:
    """Test POST /api/translate."""

    def test_translates(self, client, translator):
        translator.translate_for_endpoint.return_value = "Merhaba dünya"
        response = client.post('/api/translate', json={'text': 'Hello world'})
        assert response.status_code == 200
        assert response.get_json() == {'translation': 'Merhaba dünya'}
        translator.translate_for_endpoint.assert_called_once_with('Hello world')

    def test_missing_text(self, client, translator):
        response = client.post('/api/translate', json={})
        assert response.status_code == 400
        assert 'error' in response.get_json()
        translator.translate_for_endpoint.assert_not_called()

    def test_non_string_text(self, client):
        response = client.post('/api/translate', json={'text': 42})
        assert response.status_code == 400

    def test_invalid_json_body(self, client):
        response = client.post('/api/translate', data='not json', content_type='text/plain')
        assert response.status_code == 400

    def test_exhaustion_returns_best_effort(self, client, translator):
        translator.translate_for_endpoint.side_effect = TranslationExhaustedError(best_effort='Hello world')
        response = client.post('/api/translate', json={'text': '<p>Hello world</p>'})
        assert response.status_code == 500
        assert response.get_json() == {'error': 'Translation failed', 'translation': 'Hello world'}

    def test_rate_limit_headers(self, client, translator):
        translator.translate_for_endpoint.return_value = "Merhaba dünya"
        response = client.post('/api/translate', json={'text': 'Hello world'})
        assert 'X-RateLimit-Limit' in response.headers
        assert 'X-RateLimit-Remaining' in response.headers

    def test_get_not_allowed(self, client):
        response = client.get('/api/translate')
        assert response.status_code == 405
        assert response.get_json() == {'error': 'Method not allowed'}


class TestTranslateEndpointWithProviders:
    """Run the endpoint against a real translator with fake providers."""

    @pytest.fixture
    def real_client(self, summarizer):
        from news_translator.app import create_app

        translator = NewsTranslator(
            openai_provider=FakeProvider('openai'),
            deepl_provider=FakeProvider('deepl'),
            google_provider=FakeProvider('google'),
            libre_provider=FakeProvider('libretranslate'),
            terminology=TerminologyManager()
        )
        app = create_app(testing=True, translator=translator, summarizer=summarizer)
        with app.test_client() as client:
            yield client

    def test_text_cleaning_to_nothing_is_echoed(self, real_client):
        response = real_client.post('/api/translate', json={'text': 'Hi'})
        assert response.status_code == 200
        assert response.get_json() == {'translation': 'Hi'}

    def test_exhaustion(self, real_client):
        response = real_client.post('/api/translate', json={'text': '<b>Bitcoin hits a new high</b>'})
        assert response.status_code == 500
        assert response.get_json()['translation'] == 'Bitcoin hits a new high'


class TestBatchEndpoint:
    """Test POST /api/translate/batch."""

    def test_batch(self, client, translator):
        translator.translate_batch.return_value = ['bir', 'iki']
        response = client.post('/api/translate/batch', json={'texts': ['one', 'two']})
        assert response.status_code == 200
        assert response.get_json() == {'translations': ['bir', 'iki']}
        translator.translate_batch.assert_called_once_with(['one', 'two'], 'tr')

    def test_batch_requires_list(self, client):
        response = client.post('/api/translate/batch', json={'texts': 'one'})
        assert response.status_code == 400

    def test_batch_rejects_unknown_language(self, client):
        response = client.post('/api/translate/batch', json={'texts': ['one'], 'target_lang': 'xx'})
        assert response.status_code == 400

    def test_batch_size_limit(self, client):
        texts = ['text'] * (config.translation.max_batch_items + 1)
        response = client.post('/api/translate/batch', json={'texts': texts})
        assert response.status_code == 400


class TestSummarizeEndpoint:
    """Test POST /api/summarize."""

    def test_summarize(self, client, summarizer):
        summarizer.summarize.return_value = SummaryResult("Bitcoin rekor kırdı.", Sentiment.POSITIVE)
        response = client.post('/api/summarize', json={'title': 'Bitcoin record', 'text': 'Body'})
        assert response.status_code == 200
        assert response.get_json() == {'summary': 'Bitcoin rekor kırdı.', 'sentiment': 'positive'}
        summarizer.summarize.assert_called_once_with('Bitcoin record', 'Body', 'tr')

    def test_summarize_english(self, client, summarizer):
        summarizer.summarize.return_value = SummaryResult("Bitcoin hit a record.", Sentiment.NEUTRAL)
        client.post('/api/summarize', json={'title': 'Bitcoin record', 'language': 'en'})
        summarizer.summarize.assert_called_once_with('Bitcoin record', None, 'en')

    def test_missing_title(self, client, summarizer):
        response = client.post('/api/summarize', json={'text': 'Body'})
        assert response.status_code == 400
        summarizer.summarize.assert_not_called()


class TestApiKey:
    """Test optional API key protection."""

    def test_required_when_configured(self, client, translator, monkeypatch):
        monkeypatch.setattr(config.security, 'api_key', 'secret')
        translator.translate_for_endpoint.return_value = "Merhaba dünya"

        assert client.post('/api/translate', json={'text': 'Hello'}).status_code == 401
        assert client.post('/api/translate', json={'text': 'Hello'},
                           headers={'X-API-Key': 'wrong'}).status_code == 403
        assert client.post('/api/translate', json={'text': 'Hello'},
                           headers={'X-API-Key': 'secret'}).status_code == 200


class TestRateLimiter:
    """Test RateLimiter sliding window."""

    def test_limit_and_reset(self):
        limiter = RateLimiter(requests_per_minute=2)
        assert limiter.is_allowed('client', now=100.0)[0]
        assert limiter.is_allowed('client', now=101.0)[0]
        allowed, info = limiter.is_allowed('client', now=102.0)
        assert not allowed
        assert info['remaining'] == 0
        assert limiter.is_allowed('client', now=161.0)[0]

    def test_clients_are_separate(self):
        limiter = RateLimiter(requests_per_minute=1)
        assert limiter.is_allowed('a', now=100.0)[0]
        assert limiter.is_allowed('b', now=100.0)[0]


class TestInfoEndpoints:
    """Test health, languages and logs endpoints."""

    def test_health(self, client):
        response = client.get('/api/health')
        assert response.status_code == 200
        data = response.get_json()
        assert data['status'] == 'healthy'
        assert data['version'] == APP_VERSION
        assert data['providers']['deepl'] is False

    def test_languages(self, client):
        data = client.get('/api/languages').get_json()
        assert set(data['languages']) == {'tr', 'en'}

    def test_logs(self, client):
        response = client.get('/logs')
        assert response.status_code == 200
        assert 'logs' in json.loads(response.data)

    def test_logs_filtered_by_level(self, client):
        from news_translator.utils.logging import log_buffer
        log_buffer.clear()
        log_buffer.add('INFO', 'TEST', 'chunk translated')
        log_buffer.add('WARNING', 'TEST', 'provider failed')
        logs = client.get('/logs?level=warning').get_json()['logs']
        assert [entry['message'] for entry in logs] == ['provider failed']

    def test_logs_unknown_level(self, client):
        response = client.get('/logs?level=LOUD')
        assert response.status_code == 400

    def test_clear_logs(self, client):
        response = client.post('/logs/clear')
        assert response.get_json() == {'message': 'Logs cleared'}

    def test_unknown_route(self, client):
        response = client.get('/api/unknown')
        assert response.status_code == 404
        assert response.get_json() == {'error': 'Resource not found'}
