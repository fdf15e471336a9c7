"""
News Translator - English to Turkish crypto news translation
=============================================================
Flask service that translates and summarizes cryptocurrency news through a
chain of providers (OpenAI, DeepL, Google, LibreTranslate), checking each
result with Turkish-language heuristics before accepting it.

Version: 1.0.0
"""
from news_translator.config.constants import APP_VERSION

__version__ = APP_VERSION

from news_translator.app import create_app, run_server

__all__ = ["create_app", "run_server", "__version__"]
