"""
Terminology Manager
===================
Domain terms and names that translators must leave untouched.
"""
from typing import Iterable, List, Optional

from news_translator.config import config
from news_translator.config.constants import PRESERVED_TERMS


class TerminologyManager:
    """Holds the preserved crypto terms shared by prompts and the validator."""

    def __init__(self, terms: Optional[Iterable[str]] = None):
        if terms is None:
            terms = list(PRESERVED_TERMS) + list(config.validation.extra_preserved_terms)
        self._terms: List[str] = []
        self._lookup = set()
        for term in terms:
            self.add_term(term)

    @property
    def terms(self) -> List[str]:
        return list(self._terms)

    def add_term(self, term: str):
        """
        Add a term to the preserved list.

        Args:
            term: Word or name to keep verbatim; blank and duplicate
                entries are ignored
        """
        term = (term or '').strip()
        if not term or term.lower() in self._lookup:
            return
        self._terms.append(term)
        self._lookup.add(term.lower())

    def is_preserved(self, word: str) -> bool:
        """Case-insensitive exact match against the preserved terms."""
        return bool(word) and word.strip().lower() in self._lookup

    def clear(self):
        """Clear all stored terminology."""
        self._terms.clear()
        self._lookup.clear()

    def get_context_for_prompt(self, max_terms: int = 50) -> str:
        """
        Generate terminology context for inclusion in prompts.

        Args:
            max_terms: Maximum number of terms to include

        Returns:
            Formatted instruction listing the preserved terms
        """
        if not self._terms:
            return ""

        listed = ', '.join(self._terms[:max_terms])
        return (
            f"Keep these terms exactly as written: {listed}. "
            "Keep company names, person names, ticker symbols and currency figures "
            "(e.g. $1.2 billion, 500 BTC) unchanged."
        )
