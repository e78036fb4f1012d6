"""Gemini Translation Service - Implements translation via Google Gemini API."""

import logging

import google.genai as genai
from google.genai import errors, types

from gemini_translator.core import Language
from gemini_translator.services.translation.translation_service import (
    TranslationResult,
    TranslationService,
    build_translation_prompt,
)

logger = logging.getLogger(__name__)

DEFAULT_MODEL_NAME = "gemini-2.0-flash"

GENERIC_API_ERROR = "Translation failed. Please check your API key and try again."
GENERIC_ERROR = "An error occurred during translation."
EMPTY_RESPONSE_ERROR = "Translation failed: empty response from API"


class GeminiTranslationService(TranslationService):
    """
    Translation service using Google Gemini API.

    Issues exactly one generate_content call per request: no retries, no timeout.
    """

    def __init__(self, model_name: str = DEFAULT_MODEL_NAME):
        self.model_name = model_name

    def translate(
        self,
        text: str,
        source_language: Language,
        target_language: Language,
        api_key: str,
    ) -> TranslationResult:
        """
        Translate text using the Gemini API.

        Args:
            text: Text to translate.
            source_language: Language the text is written in.
            target_language: Language to translate into.
            api_key: Gemini API key for authentication.

        Returns:
            TranslationResult with translated text or error message.
        """
        prompt = build_translation_prompt(text, source_language, target_language)
        logger.info(
            "Translating %d chars %s -> %s with %s",
            len(text),
            source_language.code,
            target_language.code,
            self.model_name,
        )

        try:
            client = genai.Client(api_key=api_key)

            response = client.models.generate_content(
                model=self.model_name,
                contents=prompt,
                config=types.GenerateContentConfig(
                    temperature=0.3,
                    top_p=0.95,
                    top_k=40,
                ),
            )

            text = (response.text or "").strip()
            if not text:
                logger.warning("Empty response from %s", self.model_name)
                return TranslationResult(
                    text="",
                    model=self.model_name,
                    error=EMPTY_RESPONSE_ERROR,
                )

            return TranslationResult(
                text=text,
                model=self.model_name,
            )

        except errors.APIError as e:
            logger.warning("Gemini API error %s: %s", e.code, e.message)
            if e.message:
                message = f"Translation failed ({e.code}): {e.message}"
            else:
                message = GENERIC_API_ERROR
            return TranslationResult(text="", model=self.model_name, error=message)

        except Exception as e:
            logger.warning("Translation request failed: %s", e)
            return TranslationResult(
                text="",
                model=self.model_name,
                error=str(e) or GENERIC_ERROR,
            )
