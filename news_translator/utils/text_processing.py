"""
Text Processing Utilities
=========================
Cleaning raw news markup, splitting text for providers and tidying
provider output.
"""
import re
import warnings
from typing import List, Optional, Sequence, Tuple

from bs4 import BeautifulSoup, MarkupResemblesLocatorWarning

from news_translator.config import config
from news_translator.config.constants import LANGUAGE_PROFILES
from news_translator.utils.logging import debug_print

warnings.filterwarnings('ignore', category=MarkupResemblesLocatorWarning)

SENTENCE_BOUNDARY = re.compile(r'(?<=[.!?])\s+')

BLOCK_TAGS = [
    'p', 'div', 'br', 'li', 'ul', 'ol', 'tr', 'td', 'th', 'table', 'blockquote',
    'section', 'article', 'header', 'footer', 'h1', 'h2', 'h3', 'h4', 'h5', 'h6',
]

# Links, tracking parameters and feed boilerplate removed before translation
NOISE_PATTERNS = [
    r'https?://\S+',
    r'www\.\S+',
    r't\.co/\S+',
    r'(?i)source=(twitter|web|facebook|instagram|reddit|telegram)\S*',
    r'(?i)utm_[a-z_]+=[^\s&]*',
    r'(?i)ref=[^\s&]*',
    r'(?i)\?[a-z_]+=\w+(&[a-z_]+=\w+)*',
    r'(?i)RSVP:',
    r'(?i)Read more:',
    r'(?i)Click here:',
    r'\[…\]',
    r'\[\.\.\.\]',
]


def _collapse_whitespace(text: str) -> str:
    text = re.sub(r'\n\s*\n', '\n', text)
    return re.sub(r'\s+', ' ', text).strip()


def _strip_noise(text: str) -> str:
    # Feed titles carry site names and metadata after a pipe
    text = text.split('|')[0] or text
    for pattern in NOISE_PATTERNS:
        text = re.sub(pattern, '', text)
    return text


def _extract_visible_text(raw: str) -> str:
    soup = BeautifulSoup(raw, 'html.parser')
    for element in soup(['script', 'style']):
        element.decompose()
    # Inline tags join their text; only block boundaries separate words
    for element in soup.find_all(BLOCK_TAGS):
        element.insert_after('\n')
    body = soup.body or soup
    return body.get_text()


def normalize_text(raw: str, min_length: int = None) -> str:
    """
    Reduce raw news markup to plain, single-spaced text.

    Removes script/style elements, tags, links, tracking parameters and
    boilerplate lead-ins. Never raises: when the markup cannot be parsed
    the tags are stripped with a regex instead.

    Args:
        raw: Raw text or HTML
        min_length: Results shorter than this are treated as empty
            (uses config if not specified)

    Returns:
        Cleaned text, or an empty string when nothing meaningful is left
    """
    if not raw:
        return ""
    if min_length is None:
        min_length = config.translation.min_content_length

    try:
        text = _extract_visible_text(raw)
    except Exception as e:
        debug_print(f"[NORMALIZE] Markup parse failed, stripping tags: {e}", 'WARNING', 'TEXT')
        text = re.sub(r'<[^>]*>', ' ', raw)

    text = _collapse_whitespace(_strip_noise(text))

    if len(text) < min_length:
        return ""
    return text


def split_sentences(text: str) -> List[str]:
    """Split text at terminal punctuation followed by whitespace."""
    return [s for s in SENTENCE_BOUNDARY.split(text.strip()) if s]


def split_into_chunks(text: str, max_length: int = None) -> List[str]:
    """
    Split text into sentence-aligned chunks for translation providers.

    Sentences are packed greedily; a sentence that alone exceeds the budget
    becomes its own chunk rather than being cut.

    Args:
        text: Normalized text to split
        max_length: Maximum chunk length (uses config if not specified)

    Returns:
        List of text chunks in original order
    """
    if max_length is None:
        max_length = config.translation.chunk_size

    if len(text) <= max_length:
        return [text]

    chunks = []
    current_chunk: List[str] = []
    current_length = 0

    for sentence in split_sentences(text):
        added_length = len(sentence) + (1 if current_chunk else 0)
        if current_chunk and current_length + added_length > max_length:
            chunks.append(' '.join(current_chunk))
            current_chunk = []
            current_length = 0
            added_length = len(sentence)
        current_chunk.append(sentence)
        current_length += added_length

    if current_chunk:
        chunks.append(' '.join(current_chunk))

    result = chunks if chunks else [text]

    debug_print(f"[CHUNKING] Split {len(text)} chars into {len(result)} chunks (max {max_length})", 'DEBUG', 'TEXT')
    for i, chunk in enumerate(result):
        debug_print(f"  Chunk {i+1}: {len(chunk)} chars - {chunk[:60]}...", 'DEBUG', 'TEXT')

    return result


def strip_code_fences(text: str) -> str:
    """Remove markdown code fences a model may wrap JSON in."""
    return re.sub(r'```(?:json)?\n?|```\n?', '', text or '').strip()


def clean_translation_response(translation: str) -> str:
    """
    Clean the LLM response to remove unwanted content.

    Removes reasoning tags, code fences, "here is the translation" lead-ins
    and wrapping quotes.

    Args:
        translation: Raw translation from the chat model

    Returns:
        Cleaned translation
    """
    if not translation:
        return ""

    translation = translation.strip()

    translation = re.sub(r'<(think|thinking|reasoning)>.*?</\1>', '', translation,
                         flags=re.DOTALL | re.IGNORECASE)
    translation = re.sub(r'<(think|thinking)>.*$', '', translation, flags=re.DOTALL | re.IGNORECASE)
    translation = strip_code_fences(translation)

    lead_ins = [
        r"^\s*Here(?: is|'s) the translation\s*:\s*",
        r'^\s*(?:Translation|İşte çeviri|Türkçe çeviri|Çeviri)\s*:\s*',
        r'^\s*\*\*(?:Translation|Çeviri)\s*:?\*\*\s*',
    ]
    for pattern in lead_ins:
        translation = re.sub(pattern, '', translation, flags=re.IGNORECASE)

    translation = translation.strip()
    if len(translation) > 2:
        for opening, closing in (('"', '"'), ("'", "'"), ('“', '”'), ('«', '»')):
            if translation.startswith(opening) and translation.endswith(closing):
                translation = translation[1:-1].strip()
                break

    return translation


def clean_summary_text(summary: str, residue_patterns: Optional[Sequence[Tuple[str, str]]] = None) -> str:
    """
    Remove English sentences a summarizer appended to a Turkish summary.

    Args:
        summary: Summary returned by the chat model
        residue_patterns: (pattern, replacement) pairs, defaults to the
            Turkish profile's summary residue patterns

    Returns:
        Cleaned summary
    """
    if not summary:
        return ""
    if residue_patterns is None:
        residue_patterns = LANGUAGE_PROFILES['tr']['summary_residue_patterns']

    for pattern, replacement in residue_patterns:
        summary = re.sub(pattern, replacement, summary)

    summary = summary.strip()
    summary = re.sub(r'\.+', '.', summary)
    return summary


def truncate(text: str, max_length: int, suffix: str = '...') -> str:
    """Cut text to max_length characters, marking the cut."""
    if len(text) <= max_length:
        return text
    return text[:max_length] + suffix
