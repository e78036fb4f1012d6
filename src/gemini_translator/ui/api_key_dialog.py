"""API Key Dialog - Prompt for entering the Gemini API key."""

from PySide6.QtCore import QUrl, Signal
from PySide6.QtGui import QDesktopServices
from PySide6.QtWidgets import QDialog, QLineEdit, QPushButton, QVBoxLayout

from gemini_translator.core import SessionState

API_KEY_URL = "https://makersuite.google.com/app/apikey"


class ApiKeyDialog(QDialog):
    """Modal prompt with a password field and a link to create a key."""

    api_key_submitted = Signal(str)

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Enter Gemini API Key")
        self.setModal(True)

        layout = QVBoxLayout(self)

        self.key_edit = QLineEdit()
        self.key_edit.setEchoMode(QLineEdit.EchoMode.Password)
        self.key_edit.setPlaceholderText("Enter your API key")
        layout.addWidget(self.key_edit)

        self.get_key_button = QPushButton("Get API Key")
        self.get_key_button.clicked.connect(self._open_key_page)
        layout.addWidget(self.get_key_button)

        self.save_button = QPushButton("Save API Key")
        self.save_button.setEnabled(False)
        self.save_button.clicked.connect(self._on_save)
        layout.addWidget(self.save_button)

        self.key_edit.textChanged.connect(
            lambda text: self.save_button.setEnabled(bool(text.strip()))
        )

    def set_controller(self, controller):
        """Wire the dialog to the controller's credential operations."""
        self.api_key_submitted.connect(controller.submit_credential)
        self.rejected.connect(controller.close_credential_dialog)
        controller.state_changed.connect(self.render)
        self.render(controller.state)

    def render(self, state: SessionState):
        """Show or hide the dialog to match the state."""
        if state.credential_dialog_visible and not self.isVisible():
            self.key_edit.setText(state.credential or "")
            self.show()
        elif not state.credential_dialog_visible and self.isVisible():
            self.hide()

    def _on_save(self):
        self.api_key_submitted.emit(self.key_edit.text())

    def _open_key_page(self):
        QDesktopServices.openUrl(QUrl(API_KEY_URL))
