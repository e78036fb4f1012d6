"""Core domain models."""

from .languages import (
    LANGUAGES,
    LANGUAGES_BY_CODE,
    Language,
    UnknownLanguageError,
    get_language,
    language_name,
)
from .session_state import SessionState

__all__ = [
    "Language",
    "LANGUAGES",
    "LANGUAGES_BY_CODE",
    "UnknownLanguageError",
    "get_language",
    "language_name",
    "SessionState",
]
