"""Services layer - configuration, persistence and external integrations."""

from gemini_translator.services.settings_manager import SettingsManager

# Translation services
from gemini_translator.services.translation import (
    GeminiTranslationService,
    TranslationResult,
    TranslationService,
    build_translation_prompt,
)

# Credential stores
from gemini_translator.services.credentials import (
    CredentialStore,
    EnvFileCredentialStore,
    InMemoryCredentialStore,
    QSettingsCredentialStore,
)

from gemini_translator.services.api_workers import TranslationWorker, WorkerSignals

__all__ = [
    "SettingsManager",
    "TranslationService",
    "TranslationResult",
    "GeminiTranslationService",
    "build_translation_prompt",
    "CredentialStore",
    "InMemoryCredentialStore",
    "QSettingsCredentialStore",
    "EnvFileCredentialStore",
    "TranslationWorker",
    "WorkerSignals",
]
