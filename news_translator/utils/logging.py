"""
Logging Utilities
=================
Subsystem loggers for the translation pipeline, plus the in-memory buffer
behind the /logs endpoints. Provider credentials never reach a log line.
"""
import os
import re
import logging
import threading
from collections import deque
from datetime import datetime
from logging.handlers import RotatingFileHandler
from typing import Dict, Iterable, List, Optional

from news_translator.config import config

ANSI_PATTERN = re.compile(r'\033\[[0-9;]*m')

# Credentials that show up in provider headers and request bodies
AUTH_PATTERN = re.compile(r'(Bearer|DeepL-Auth-Key)\s+\S+', re.IGNORECASE)

LEVEL_ORDER = {'DEBUG': 10, 'INFO': 20, 'WARNING': 30, 'ERROR': 40, 'CRITICAL': 50}

SUBSYSTEMS = {
    'app': 'app.log',
    'translation': 'translations.log',
    'providers': 'providers.log',
    'api': 'api.log',
}


def mask_secret(secret: str) -> str:
    """Keep the first and last four characters of long secrets."""
    if len(secret) <= 12:
        return '*' * len(secret)
    return f"{secret[:4]}...{secret[-4:]}"


def configured_secrets() -> List[str]:
    """API keys currently set for providers and the service itself."""
    candidates = (
        config.providers.openai_api_key,
        config.providers.deepl_api_key,
        config.providers.libretranslate_api_key,
        config.security.api_key,
    )
    return [secret for secret in candidates if secret]


def redact(message: str, secrets: Iterable[str] = None) -> str:
    """Strip ANSI codes and mask credentials in a log message."""
    if secrets is None:
        secrets = configured_secrets()
    message = ANSI_PATTERN.sub('', message)
    message = AUTH_PATTERN.sub(lambda m: f"{m.group(1)} ***", message)
    for secret in secrets:
        message = message.replace(secret, mask_secret(secret))
    return message


class RedactingFormatter(logging.Formatter):
    """Formatter applying redact() to every rendered record."""

    def format(self, record):
        return redact(super().format(record))


class LogBuffer:
    """Thread-safe ring of recent entries served by /logs and /logs/stream."""

    def __init__(self, max_size: int = None):
        self.buffer = deque(maxlen=max_size or config.logging.log_buffer_size)
        self.lock = threading.Lock()
        self.last_id = 0

    def add(self, level: str, source: str, message: str) -> Dict:
        with self.lock:
            self.last_id += 1
            entry = {
                'id': self.last_id,
                'timestamp': datetime.now().strftime('%H:%M:%S.%f')[:-3],
                'level': level.upper(),
                'source': source,
                'message': message
            }
            self.buffer.append(entry)
            return entry

    def get_since(self, since_id: int = 0, min_level: str = None) -> List[Dict]:
        """
        Entries newer than since_id, optionally at or above a level.

        Args:
            since_id: Last entry id the caller has seen (0 for everything)
            min_level: Lowest level to include, e.g. 'WARNING'

        Raises:
            ValueError: If min_level is not a known level name
        """
        threshold = 0
        if min_level:
            try:
                threshold = LEVEL_ORDER[min_level.upper()]
            except KeyError:
                raise ValueError(f"Unknown log level: {min_level}")
        with self.lock:
            return [
                e for e in self.buffer
                if e['id'] > since_id and LEVEL_ORDER.get(e['level'], 0) >= threshold
            ]

    def get_all(self) -> List[Dict]:
        return self.get_since(0)

    def clear(self):
        with self.lock:
            self.buffer.clear()
            self.last_id = 0


log_buffer = LogBuffer()


class AppLogger:
    """One named logger per pipeline subsystem, sharing handler settings."""

    def __init__(self, log_dir: str = None, log_to_file: bool = None):
        self.log_dir = log_dir or config.paths.log_folder
        self.log_to_file = config.logging.log_to_file if log_to_file is None else log_to_file
        self.level = logging.DEBUG if config.logging.verbose_debug else logging.INFO
        if self.log_to_file:
            os.makedirs(self.log_dir, exist_ok=True)

        self.loggers: Dict[str, logging.Logger] = {
            name: self._build(name, filename) for name, filename in SUBSYSTEMS.items()
        }

    @property
    def app_logger(self) -> logging.Logger:
        return self.loggers['app']

    @property
    def translation_logger(self) -> logging.Logger:
        return self.loggers['translation']

    @property
    def provider_logger(self) -> logging.Logger:
        return self.loggers['providers']

    @property
    def api_logger(self) -> logging.Logger:
        return self.loggers['api']

    def _build(self, name: str, filename: str) -> logging.Logger:
        logger = logging.getLogger(f'news_translator.{name}')
        logger.setLevel(self.level)

        # Already configured by an earlier AppLogger
        if logger.handlers:
            return logger

        handlers = [logging.StreamHandler()]
        handlers[0].setFormatter(RedactingFormatter(
            '%(asctime)s - %(levelname)s - [%(name)s] %(message)s',
            datefmt='%H:%M:%S'
        ))
        if self.log_to_file:
            file_handler = RotatingFileHandler(
                os.path.join(self.log_dir, filename),
                maxBytes=config.logging.log_file_max_bytes,
                backupCount=config.logging.log_file_backup_count,
                encoding='utf-8'
            )
            file_handler.setFormatter(RedactingFormatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            ))
            handlers.append(file_handler)

        for handler in handlers:
            handler.setLevel(self.level)
            logger.addHandler(handler)
        return logger


_logger_instance: Optional[AppLogger] = None


def get_logger() -> AppLogger:
    """Get or create the global logger instance."""
    global _logger_instance
    if _logger_instance is None:
        _logger_instance = AppLogger()
    return _logger_instance


def debug_print(message: str, level: str = 'INFO', source: str = 'DEBUG'):
    """
    Record a pipeline event in the /logs buffer, echoing it when VERBOSE_DEBUG is on.

    Args:
        message: Event text; credentials are masked before storing
        level: DEBUG, INFO, WARNING or ERROR
        source: Subsystem tag shown in the log view
    """
    entry = log_buffer.add(level, source, redact(message))
    if config.logging.verbose_debug:
        print(f"[{entry['timestamp']}] {entry['level']} {source}: {entry['message']}")
