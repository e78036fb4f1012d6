"""Credential Store abstraction - persistence port for the user's API key."""

from abc import ABC, abstractmethod
from typing import Optional


class CredentialStore(ABC):
    """
    Abstract single-slot store for the Gemini API key.

    Implementations (QSettingsCredentialStore, EnvFileCredentialStore) handle storage details.
    The controller depends on this abstraction so the backend can be swapped without touching it.
    """

    @abstractmethod
    def get(self) -> Optional[str]:
        """
        Read the stored credential.

        Returns:
            The stored value, or None if nothing (or only whitespace) is stored.
        """
        pass

    @abstractmethod
    def set(self, value: str) -> None:
        """
        Overwrite the stored credential.

        Args:
            value: Credential to persist (already trimmed by the caller).
        """
        pass


def clean_credential(value: Optional[str]) -> Optional[str]:
    """Normalize a raw stored value: strip it, map blank to None."""
    if value is None:
        return None
    value = str(value).strip()
    return value or None
