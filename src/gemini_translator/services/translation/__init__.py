"""Translation services - abstract interface and Gemini implementation."""

from gemini_translator.services.translation.translation_service import (
    TranslationResult,
    TranslationService,
    build_translation_prompt,
)
from gemini_translator.services.translation.gemini_translation_service import GeminiTranslationService

__all__ = [
    "TranslationService",
    "TranslationResult",
    "build_translation_prompt",
    "GeminiTranslationService",
]
