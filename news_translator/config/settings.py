"""
Centralized Configuration for News Translator
==============================================
All configuration values in one place, configurable via environment variables.
"""
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional


def _get_bool_env(key: str, default: bool) -> bool:
    """Get boolean from environment variable."""
    val = os.environ.get(key, "").lower()
    if val in ("true", "1", "yes", "on"):
        return True
    elif val in ("false", "0", "no", "off"):
        return False
    return default


def _get_int_env(key: str, default: int) -> int:
    """Get integer from environment variable."""
    try:
        return int(os.environ.get(key, default))
    except (ValueError, TypeError):
        return default


def _get_float_env(key: str, default: float) -> float:
    """Get float from environment variable."""
    try:
        return float(os.environ.get(key, default))
    except (ValueError, TypeError):
        return default


def _get_list_env(key: str) -> List[str]:
    """Get a comma-separated list from environment variable."""
    raw = os.environ.get(key, "")
    return [item.strip() for item in raw.split(",") if item.strip()]


def _get_optional_env(*keys: str) -> Optional[str]:
    """Return the first non-empty value among several environment variables."""
    for key in keys:
        value = os.environ.get(key, "").strip()
        if value:
            return value
    return None


APP_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


@dataclass
class ServerConfig:
    """Flask server configuration."""
    host: str = field(default_factory=lambda: os.environ.get("NEWS_TRANSLATOR_HOST", "127.0.0.1"))
    port: int = field(default_factory=lambda: _get_int_env("NEWS_TRANSLATOR_PORT", 5050))
    debug: bool = field(default_factory=lambda: _get_bool_env("NEWS_TRANSLATOR_DEBUG", False))
    secret_key: str = field(default_factory=lambda: os.environ.get("SECRET_KEY", "dev-key-change-in-production"))

    # CORS settings
    cors_origins: List[str] = field(default_factory=lambda: _get_list_env("CORS_ORIGINS") or [
        "http://localhost:3000",
        "http://127.0.0.1:3000"
    ])


@dataclass
class ProviderConfig:
    """Credentials and endpoints of the translation providers."""
    openai_api_key: Optional[str] = field(default_factory=lambda: _get_optional_env("OPENAI_API_KEY"))
    openai_base_url: Optional[str] = field(default_factory=lambda: _get_optional_env("OPENAI_BASE_URL"))
    openai_model: str = field(default_factory=lambda: os.environ.get("OPENAI_MODEL", "gpt-4o-mini"))

    deepl_api_key: Optional[str] = field(default_factory=lambda: _get_optional_env("DEEPL_API_KEY"))
    deepl_api_url: str = field(default_factory=lambda: os.environ.get(
        "DEEPL_API_URL", "https://api-free.deepl.com/v2/translate"))

    google_translate_url: str = field(default_factory=lambda: os.environ.get(
        "GOOGLE_TRANSLATE_URL", "https://translate.googleapis.com/translate_a/single"))

    libretranslate_url: str = field(default_factory=lambda: os.environ.get(
        "LIBRETRANSLATE_URL", "https://translate.argosopentech.com/translate"))
    libretranslate_api_key: Optional[str] = field(default_factory=lambda: _get_optional_env("LIBRETRANSLATE_API_KEY"))

    user_agent: str = field(default_factory=lambda: os.environ.get("PROVIDER_USER_AGENT", "Mozilla/5.0"))

    # Timeouts
    connect_timeout: int = field(default_factory=lambda: _get_int_env("PROVIDER_CONNECT_TIMEOUT", 10))
    read_timeout: int = field(default_factory=lambda: _get_int_env("PROVIDER_READ_TIMEOUT", 60))

    @property
    def openai_enabled(self) -> bool:
        return bool(self.openai_api_key)

    @property
    def deepl_enabled(self) -> bool:
        return bool(self.deepl_api_key)


@dataclass
class TranslationConfig:
    """Translation processing configuration."""
    # Chunk settings
    chunk_size: int = field(default_factory=lambda: _get_int_env("CHUNK_SIZE", 500))
    min_content_length: int = field(default_factory=lambda: _get_int_env("MIN_CONTENT_LENGTH", 10))
    min_fallback_length: int = field(default_factory=lambda: _get_int_env("MIN_FALLBACK_LENGTH", 10))
    summary_max_input: int = field(default_factory=lambda: _get_int_env("SUMMARY_MAX_INPUT", 2000))

    # Chat completion parameters
    translate_temperature: float = field(default_factory=lambda: _get_float_env("TRANSLATE_TEMPERATURE", 0.3))
    translate_max_tokens: int = field(default_factory=lambda: _get_int_env("TRANSLATE_MAX_TOKENS", 500))
    endpoint_temperature: float = field(default_factory=lambda: _get_float_env("ENDPOINT_TEMPERATURE", 0.2))
    endpoint_max_tokens: int = field(default_factory=lambda: _get_int_env("ENDPOINT_MAX_TOKENS", 4000))
    summary_temperature: float = field(default_factory=lambda: _get_float_env("SUMMARY_TEMPERATURE", 0.5))
    english_summary_temperature: float = field(default_factory=lambda: _get_float_env("ENGLISH_SUMMARY_TEMPERATURE", 0.3))
    summary_max_tokens: int = field(default_factory=lambda: _get_int_env("SUMMARY_MAX_TOKENS", 500))

    # Retry settings
    summary_max_retries: int = field(default_factory=lambda: _get_int_env("SUMMARY_MAX_RETRIES", 2))
    summary_retry_delay: float = field(default_factory=lambda: _get_float_env("SUMMARY_RETRY_DELAY", 1.5))
    title_max_retries: int = field(default_factory=lambda: _get_int_env("TITLE_MAX_RETRIES", 2))
    title_retry_delay: float = field(default_factory=lambda: _get_float_env("TITLE_RETRY_DELAY", 1.0))

    # Parallel processing
    max_workers: int = field(default_factory=lambda: _get_int_env("MAX_WORKERS", 4))
    enable_parallel: bool = field(default_factory=lambda: _get_bool_env("ENABLE_PARALLEL", True))
    max_batch_items: int = field(default_factory=lambda: _get_int_env("MAX_BATCH_ITEMS", 50))


@dataclass
class ValidationConfig:
    """Thresholds of the output validator."""
    max_source_word_ratio: float = field(default_factory=lambda: _get_float_env("MAX_SOURCE_WORD_RATIO", 0.30))
    min_indicator_ratio: float = field(default_factory=lambda: _get_float_env("MIN_INDICATOR_RATIO", 0.20))
    min_translation_length: int = field(default_factory=lambda: _get_int_env("MIN_TRANSLATION_LENGTH", 20))
    min_sentence_length: int = field(default_factory=lambda: _get_int_env("MIN_SENTENCE_LENGTH", 5))
    extra_preserved_terms: List[str] = field(default_factory=lambda: _get_list_env("PRESERVED_TERMS"))


@dataclass
class LoggingConfig:
    """Logging configuration."""
    verbose_debug: bool = field(default_factory=lambda: _get_bool_env("VERBOSE_DEBUG", True))
    log_to_file: bool = field(default_factory=lambda: _get_bool_env("LOG_TO_FILE", True))
    log_buffer_size: int = field(default_factory=lambda: _get_int_env("LOG_BUFFER_SIZE", 500))
    log_file_max_bytes: int = field(default_factory=lambda: _get_int_env("LOG_FILE_MAX_BYTES", 10 * 1024 * 1024))
    log_file_backup_count: int = field(default_factory=lambda: _get_int_env("LOG_FILE_BACKUP_COUNT", 5))


@dataclass
class SecurityConfig:
    """Security configuration."""
    api_key: str = field(default_factory=lambda: os.environ.get("API_KEY", ""))
    rate_limit_per_minute: int = field(default_factory=lambda: _get_int_env("RATE_LIMIT_PER_MINUTE", 60))


@dataclass
class PathConfig:
    """Path configuration."""
    app_dir: str = field(default_factory=lambda: os.environ.get("NEWS_TRANSLATOR_APP_DIR", APP_DIR))

    @property
    def log_folder(self) -> Path:
        return Path(self.app_dir) / 'logs'


@dataclass
class Config:
    """Main application configuration container."""
    server: ServerConfig = field(default_factory=ServerConfig)
    providers: ProviderConfig = field(default_factory=ProviderConfig)
    translation: TranslationConfig = field(default_factory=TranslationConfig)
    validation: ValidationConfig = field(default_factory=ValidationConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    security: SecurityConfig = field(default_factory=SecurityConfig)
    paths: PathConfig = field(default_factory=PathConfig)

    def __post_init__(self):
        """Create necessary directories after initialization."""
        self._create_directories()
        self._validate()

    def _create_directories(self):
        """Create necessary directories."""
        if self.logging.log_to_file:
            os.makedirs(self.paths.log_folder, exist_ok=True)

    def _validate(self):
        """Validate configuration values."""
        if self.translation.chunk_size < 50:
            raise ValueError("chunk_size must be at least 50")
        if self.translation.max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        for name in ("max_source_word_ratio", "min_indicator_ratio"):
            value = getattr(self.validation, name)
            if value < 0 or value > 1:
                raise ValueError(f"{name} must be between 0 and 1")


# Global configuration instance
config = Config()
