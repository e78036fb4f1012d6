"""Translation Service - abstract interface for text translation between catalog languages."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from gemini_translator.core import Language

TRANSLATION_PROMPT = "Translate the following text from {source} to {target}: {text}"


@dataclass
class TranslationResult:
    """Result of a translation request."""

    text: str
    model: str
    error: Optional[str] = None

    @property
    def is_error(self) -> bool:
        """True if translation failed."""
        return self.error is not None


def build_translation_prompt(text: str, source_language: Language, target_language: Language) -> str:
    """Build the instruction sent to the model, using display names rather than codes."""
    return TRANSLATION_PROMPT.format(
        source=source_language.name,
        target=target_language.name,
        text=text,
    )


class TranslationService(ABC):
    """
    Abstract service for translating text from one language to another.

    Implementations (e.g., GeminiTranslationService) handle API calls.
    Remote failures are reported through TranslationResult.error, not raised.
    """

    @abstractmethod
    def translate(
        self,
        text: str,
        source_language: Language,
        target_language: Language,
        api_key: str,
    ) -> TranslationResult:
        """
        Translate text.

        Args:
            text: Text to translate, sent as-is.
            source_language: Language the text is written in.
            target_language: Language to translate into.
            api_key: Model provider API key for authentication.

        Returns:
            TranslationResult with text or error message.
        """
        pass
