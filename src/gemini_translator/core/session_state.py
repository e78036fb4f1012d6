"""Session State - the single mutable record owned by the translation controller."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class SessionState:
    """Everything the translator window shows, in one place."""

    source_text: str = ""
    translated_text: str = ""
    source_lang: str = "en"
    target_lang: str = "ja"
    credential: Optional[str] = None
    is_loading: bool = False
    error_message: Optional[str] = None
    credential_dialog_visible: bool = False

    @property
    def can_translate(self) -> bool:
        """True if a translate request may be issued right now."""
        return bool(self.source_text.strip()) and bool(self.credential) and not self.is_loading
