"""In-memory credential store, mainly for tests."""

from typing import Optional

from gemini_translator.services.credentials.credential_store import CredentialStore, clean_credential


class InMemoryCredentialStore(CredentialStore):
    """Keeps the credential for the lifetime of the process only."""

    def __init__(self, initial: Optional[str] = None):
        self._value = initial

    def get(self) -> Optional[str]:
        return clean_credential(self._value)

    def set(self, value: str) -> None:
        self._value = value
