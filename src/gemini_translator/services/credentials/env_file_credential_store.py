"""Credential store backed by the GEMINI_API_KEY entry of a .env file."""

import logging
from pathlib import Path
from typing import Optional

from dotenv import dotenv_values, set_key

from gemini_translator.services.credentials.credential_store import CredentialStore, clean_credential

logger = logging.getLogger(__name__)


class EnvFileCredentialStore(CredentialStore):
    """
    Reads and writes the API key in a .env file.

    The file is created on first save. Other entries in the file are left alone.
    """

    KEY = "GEMINI_API_KEY"

    def __init__(self, env_path: Path):
        self._env_path = Path(env_path)

    @property
    def env_path(self) -> Path:
        return self._env_path

    def get(self) -> Optional[str]:
        if not self._env_path.exists():
            return None
        return clean_credential(dotenv_values(self._env_path).get(self.KEY))

    def set(self, value: str) -> None:
        self._env_path.parent.mkdir(parents=True, exist_ok=True)
        self._env_path.touch(exist_ok=True)
        set_key(str(self._env_path), self.KEY, value)
        logger.debug("API key saved to %s", self._env_path)
