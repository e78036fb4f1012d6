"""
Gemini Translator - A small desktop translator backed by the Google Gemini API.

This package provides:
- A catalog of supported languages
- A controller owning the translator session state
- Pluggable storage for the user's API key
"""

__version__ = "0.1.0"

# Make key components available at package level
from gemini_translator.core import LANGUAGES, Language, SessionState
from gemini_translator.coordinators import TranslationController

__all__ = [
    "Language",
    "LANGUAGES",
    "SessionState",
    "TranslationController",
]
