"""
Unit Tests for Logging
======================
Tests for credential redaction, the log buffer and subsystem loggers.
"""
import logging
import pytest
import sys
import os

# Setup test environment
os.environ.setdefault('VERBOSE_DEBUG', 'false')
os.environ.setdefault('LOG_TO_FILE', 'false')

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from news_translator.config import config
from news_translator.utils.logging import (
    AppLogger,
    LogBuffer,
    RedactingFormatter,
    debug_print,
    log_buffer,
    mask_secret,
    redact
)


class TestRedaction:
    """Test credential masking."""

    def test_mask_secret(self):
        assert mask_secret("short") == "*****"
        assert mask_secret("sk-abcdefghijklmnop") == "sk-a...mnop"

    def test_auth_headers_masked(self):
        assert redact("Authorization: DeepL-Auth-Key abc:fx", secrets=[]) == "Authorization: DeepL-Auth-Key ***"
        assert redact("Bearer sk-123", secrets=[]) == "Bearer ***"

    def test_configured_secret_masked(self):
        message = redact("openai failed for key sk-abcdefghijklmnop", secrets=["sk-abcdefghijklmnop"])
        assert "sk-abcdefghijklmnop" not in message
        assert "sk-a...mnop" in message

    def test_ansi_codes_removed(self):
        assert redact("\033[31mDeepL failed\033[0m", secrets=[]) == "DeepL failed"

    def test_provider_key_from_config(self, monkeypatch):
        monkeypatch.setattr(config.providers, 'deepl_api_key', 'deepl-secret-value-1234')
        assert 'deepl-secret-value-1234' not in redact("request with deepl-secret-value-1234")

    def test_formatter_redacts(self):
        record = logging.LogRecord('t', logging.INFO, __file__, 1, "Bearer token-value", None, None)
        assert RedactingFormatter('%(message)s').format(record) == "Bearer ***"


class TestLogBuffer:
    """Test the in-memory log buffer."""

    def test_ids_increase(self):
        buffer = LogBuffer(max_size=10)
        first = buffer.add('info', 'TRANSLATOR', 'one')
        second = buffer.add('INFO', 'TRANSLATOR', 'two')
        assert (first['id'], second['id']) == (1, 2)
        assert first['level'] == 'INFO'

    def test_get_since(self):
        buffer = LogBuffer(max_size=10)
        for message in ('one', 'two', 'three'):
            buffer.add('INFO', 'TEST', message)
        assert [e['message'] for e in buffer.get_since(1)] == ['two', 'three']

    def test_min_level(self):
        buffer = LogBuffer(max_size=10)
        buffer.add('DEBUG', 'TEST', 'chunk')
        buffer.add('ERROR', 'TEST', 'exhausted')
        assert [e['message'] for e in buffer.get_since(0, 'warning')] == ['exhausted']

    def test_unknown_level(self):
        with pytest.raises(ValueError):
            LogBuffer(max_size=10).get_since(0, 'LOUD')

    def test_bounded_size(self):
        buffer = LogBuffer(max_size=2)
        for message in ('one', 'two', 'three'):
            buffer.add('INFO', 'TEST', message)
        assert [e['message'] for e in buffer.get_all()] == ['two', 'three']

    def test_clear_resets_ids(self):
        buffer = LogBuffer(max_size=10)
        buffer.add('INFO', 'TEST', 'one')
        buffer.clear()
        assert buffer.get_all() == []
        assert buffer.add('INFO', 'TEST', 'two')['id'] == 1

    def test_debug_print_stores_redacted_message(self):
        log_buffer.clear()
        debug_print("DeepL-Auth-Key abc:fx rejected", 'WARNING', 'PROVIDER')
        entry = log_buffer.get_all()[-1]
        assert entry['message'] == "DeepL-Auth-Key *** rejected"
        assert entry['source'] == 'PROVIDER'


class TestAppLogger:
    """Test subsystem loggers."""

    def test_subsystem_loggers(self):
        logger = AppLogger(log_to_file=False)
        assert logger.translation_logger.name == 'news_translator.translation'
        assert logger.provider_logger.name == 'news_translator.providers'
        assert logger.api_logger.name == 'news_translator.api'
        assert logger.app_logger.name == 'news_translator.app'

    def test_handlers_not_duplicated(self):
        first = AppLogger(log_to_file=False)
        count = len(first.provider_logger.handlers)
        AppLogger(log_to_file=False)
        assert len(first.provider_logger.handlers) == count

    def test_file_logging(self, tmp_path):
        name = 'news_translator.app'
        logging.getLogger(name).handlers.clear()
        try:
            logger = AppLogger(log_dir=str(tmp_path), log_to_file=True)
            logger.app_logger.info("key sk-abcdefghijklmnop loaded")
            for handler in logger.app_logger.handlers:
                handler.flush()
            contents = (tmp_path / 'app.log').read_text(encoding='utf-8')
            assert "loaded" in contents
        finally:
            for handler in logging.getLogger(name).handlers:
                handler.close()
            logging.getLogger(name).handlers.clear()
