"""
Constants and Enums for News Translator
"""
from enum import Enum
from typing import Dict, Any, Tuple

APP_VERSION = "1.0.0"

# Supported languages with their display names
SUPPORTED_LANGUAGES = {
    'tr': 'Turkish',
    'en': 'English',
}

# Source language assumed for each target
SOURCE_LANGUAGE_FOR = {
    'tr': 'en',
    'en': 'tr',
}


class Sentiment(str, Enum):
    """Sentiment of a news item."""
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"

    @classmethod
    def coerce(cls, value: Any) -> "Sentiment":
        """Map any provider value onto the enumerated set, defaulting to neutral."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        return cls.NEUTRAL


class ProviderName(str, Enum):
    """Names of the translation providers."""
    OPENAI = "openai"
    DEEPL = "deepl"
    GOOGLE = "google"
    LIBRETRANSLATE = "libretranslate"


class FallbackStage(str, Enum):
    """Stages of the per-chunk fallback chain."""
    PRIMARY = "primary"
    SECONDARY = "secondary"
    TERTIARY = "tertiary"
    EXHAUSTED = "exhausted"


# Domain terms and named entities kept verbatim by translators and skipped by
# the source-word ratio check. Extended at runtime through PRESERVED_TERMS.
PRESERVED_TERMS: Tuple[str, ...] = (
    'Bitcoin', 'BTC', 'Ethereum', 'ETH', 'NFT', 'DeFi', 'DAO', 'Web3',
    'Base', 'Solana', 'blockchain', 'airdrop', 'stablecoin', 'token',
    'Michael', 'Saylor', 'Strategy', 'Inc',
)


# Target-language profiles used by the output validator
LANGUAGE_PROFILES: Dict[str, Dict[str, Any]] = {
    'tr': {
        'version': 1,
        'name': 'Turkish',
        'source_language': 'en',
        'diagnostic_chars': 'üğışöçÜĞİŞÖÇ',
        'indicator_words': [
            'bir', 'için', 'ile', 've', 'bu', 'olan', 'olarak', 'göre', 'daha',
            'kadar', 'yaparak', 'sonra', 'sırasında', 'yeni', 'çok', 'gibi',
            'ama', 'veya', 'ise', 'her', 'şu', 'da', 'de', 'ki', 'en', 'değil',
            'oldu', 'olduğu', 'etti', 'yıl', 'gün', 'milyon', 'milyar', 'dolar',
            'ancak', 'tüm', 'yüzde', 'arasında', 'üzerinde', 'bile',
        ],
        # Inflectional endings that mark an ASCII-only word as Turkish
        'native_suffixes': [
            'du', 'dü', 'dı', 'di', 'tu', 'tü', 'tı', 'ti',
            'yor', 'mış', 'miş', 'muş', 'müş', 'acak', 'ecek',
            'lar', 'ler', 'dır', 'dir', 'dur', 'dür', 'nın', 'nin', 'nun', 'nün',
        ],
        # English residue: any match disqualifies a sentence
        'residue_patterns': [
            {'pattern': r'\b(is|are|was|were|has|have|had|been|being|will|would|could|should|can|may|might)\s+[a-z]',
             'ignore_case': True},
            {'pattern': r'\b(the|this|that|these|those|an|a)\s+[a-z]',
             'ignore_case': True},
            {'pattern': r'\b(doubled down|revealed|pioneered|according to|announced|said|stated|reported)\b',
             'ignore_case': True},
            {'pattern': r'\b(company|firm|corporation|disclosed)\b|\binc\.',
             'ignore_case': True},
            {'pattern': r'\b(for|from|with|about|during|since|until|before|after)\s+the\b',
             'ignore_case': True},
            {'pattern': r'\b[A-Z][a-z]+\s+(is|are|was|were|has|have|said|announced)\b',
             'ignore_case': False},
            {'pattern': r'^[A-Z][a-z]+\s+[a-z]+ed\b',
             'ignore_case': False},
        ],
        # English sentences a summarizer tends to append to a Turkish summary
        'summary_residue_patterns': [
            (r'\. [A-Z][a-z]+ (is|are|was|were|has|have|will|would|could|should|can|may|might|had|been|being)[^.]*\.', '.'),
            (r'\. (The|This|It|According to|In|On|At|For|With|From|By|As) [^.]*\.', '.'),
            (r'\. (However|Additionally|Furthermore|Meanwhile|Moreover)[^.]*\.', '.'),
            (r'(?i)\s+(is|are|was|were|has|have|had|been|being)\s+[a-z][^.]*$', ''),
            (r'(?i)\s+(the|this|that|these|those|it|he|she|they)\s+[a-z][^.]*$', ''),
            (r'\s+[A-Z][a-z]+\s*$', ''),
        ],
    },
}
