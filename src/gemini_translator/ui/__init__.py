"""UI layer - PySide6 presentation components."""

from .api_key_dialog import ApiKeyDialog
from .main_window import MainWindow

__all__ = ["MainWindow", "ApiKeyDialog"]
