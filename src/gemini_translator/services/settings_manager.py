"""Settings Manager - Handles application configuration from the .env file."""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from gemini_translator.services.translation.gemini_translation_service import DEFAULT_MODEL_NAME

logger = logging.getLogger(__name__)

CREDENTIAL_BACKENDS = ("qsettings", "env")


class SettingsManager:
    """
    Manages application settings.

    Reads values from a .env file in the project root, falling back to
    the process environment and then to built-in defaults.
    """

    def __init__(self, project_root: Optional[Path] = None):
        """
        Initialize settings manager.

        Args:
            project_root: Path to project root where .env is located.
                         If None, searches upward from current file.
        """
        if project_root is None:
            current = Path(__file__).resolve()
            project_root = current.parent.parent.parent.parent

        self._project_root = project_root
        load_dotenv(dotenv_path=self.env_path)

    @property
    def env_path(self) -> Path:
        """Location of the .env file."""
        return self._project_root / ".env"

    def get_model_name(self) -> str:
        """Gemini model used for translation."""
        return self._get("GEMINI_MODEL") or DEFAULT_MODEL_NAME

    def get_credential_backend(self) -> str:
        """Where the API key is persisted: 'qsettings' or 'env'."""
        backend = (self._get("CREDENTIAL_BACKEND") or "qsettings").lower()
        if backend not in CREDENTIAL_BACKENDS:
            logger.warning("Unknown CREDENTIAL_BACKEND %r, using qsettings", backend)
            return "qsettings"
        return backend

    def get_log_level(self) -> str:
        """Root log level name."""
        return (self._get("LOG_LEVEL") or "INFO").upper()

    def reload_env(self) -> None:
        """Reload environment variables from .env file."""
        load_dotenv(dotenv_path=self.env_path, override=True)

    def _get(self, name: str) -> Optional[str]:
        value = os.getenv(name)
        return value.strip() if value and value.strip() else None
