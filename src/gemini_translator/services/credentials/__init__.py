"""Credential stores - abstract port and storage backends."""

from gemini_translator.services.credentials.credential_store import CredentialStore
from gemini_translator.services.credentials.in_memory_credential_store import InMemoryCredentialStore
from gemini_translator.services.credentials.qsettings_credential_store import QSettingsCredentialStore
from gemini_translator.services.credentials.env_file_credential_store import EnvFileCredentialStore

__all__ = [
    "CredentialStore",
    "InMemoryCredentialStore",
    "QSettingsCredentialStore",
    "EnvFileCredentialStore",
]
