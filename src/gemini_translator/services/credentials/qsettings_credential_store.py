"""QSettings-backed credential store - the default desktop backend."""

import logging
from typing import Optional

from PySide6.QtCore import QSettings

from gemini_translator.services.credentials.credential_store import CredentialStore, clean_credential

logger = logging.getLogger(__name__)


class QSettingsCredentialStore(CredentialStore):
    """
    Stores the API key in the platform's native settings storage.

    On Linux this is an INI file under ~/.config, on macOS a plist,
    on Windows the registry. The value is stored as plain text.
    """

    KEY = "geminiApiKey"

    def __init__(
        self,
        organization: str = "GeminiTranslator",
        application: str = "Gemini Translator",
        settings: Optional[QSettings] = None,
    ):
        self._settings = settings if settings is not None else QSettings(organization, application)

    def get(self) -> Optional[str]:
        return clean_credential(self._settings.value(self.KEY, None))

    def set(self, value: str) -> None:
        self._settings.setValue(self.KEY, value)
        self._settings.sync()
        if self._settings.status() != QSettings.Status.NoError:
            raise OSError(f"Could not write API key to {self._settings.fileName()}")
        logger.debug("API key saved to %s", self._settings.fileName())
