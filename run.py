#!/usr/bin/env python3
"""
News Translator - Server Launcher
=================================
Start the translation API.

Usage:
    python run.py
    news-translator
"""
from news_translator.app import run_server


if __name__ == '__main__':
    run_server()
