"""Main Window - Translator form bound to the translation controller."""

from PySide6.QtCore import Signal
from PySide6.QtWidgets import (
    QComboBox,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPlainTextEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from gemini_translator.core import LANGUAGES, SessionState, language_name


class MainWindow(QMainWindow):
    """Shows the language selectors, the two text areas and the translate button."""

    # User input signals
    source_text_edited = Signal(str)
    source_language_selected = Signal(str)
    target_language_selected = Signal(str)
    swap_requested = Signal()
    translate_requested = Signal()
    change_api_key_requested = Signal()

    def __init__(self):
        super().__init__()
        self.setWindowTitle("Gemini Translator")
        self.setGeometry(100, 100, 700, 520)

        self._setup_ui()

    def _setup_ui(self):
        """Initialize the main UI layout."""
        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        layout = QVBoxLayout(central_widget)

        header = QHBoxLayout()
        header.addStretch()
        self.change_key_button = QPushButton("Change API Key")
        self.change_key_button.clicked.connect(self.change_api_key_requested)
        header.addWidget(self.change_key_button)
        layout.addLayout(header)

        self.error_label = QLabel()
        self.error_label.setWordWrap(True)
        self.error_label.setStyleSheet("color: #b91c1c;")
        self.error_label.hide()
        layout.addWidget(self.error_label)

        languages_row = QHBoxLayout()
        self.source_combo = self._create_language_combo()
        self.swap_button = QPushButton("⇄")
        self.target_combo = self._create_language_combo()
        languages_row.addWidget(self.source_combo)
        languages_row.addWidget(self.swap_button)
        languages_row.addWidget(self.target_combo)
        languages_row.addStretch()
        layout.addLayout(languages_row)

        self.source_edit = QPlainTextEdit()
        self.source_edit.setPlaceholderText("Enter text to translate")
        layout.addWidget(self.source_edit)

        self.translate_button = QPushButton("Translate")
        self.translate_button.setEnabled(False)
        layout.addWidget(self.translate_button)

        self.translated_edit = QPlainTextEdit()
        self.translated_edit.setPlaceholderText("Translation will appear here")
        self.translated_edit.setReadOnly(True)
        layout.addWidget(self.translated_edit)

        self.source_edit.textChanged.connect(
            lambda: self.source_text_edited.emit(self.source_edit.toPlainText())
        )
        self.source_combo.currentIndexChanged.connect(
            lambda: self.source_language_selected.emit(self.source_combo.currentData())
        )
        self.target_combo.currentIndexChanged.connect(
            lambda: self.target_language_selected.emit(self.target_combo.currentData())
        )
        self.swap_button.clicked.connect(self.swap_requested)
        self.translate_button.clicked.connect(self.translate_requested)

    def _create_language_combo(self) -> QComboBox:
        combo = QComboBox()
        for language in LANGUAGES:
            combo.addItem(language.name, language.code)
        return combo

    def set_controller(self, controller):
        """Inject the controller and wire UI signals to its slots.

        The controller is expected to expose methods:
        - set_source_text(str), set_source_language(str), set_target_language(str)
        - swap_languages(), translate(), open_credential_dialog()
        - a state_changed signal carrying a SessionState
        - translation_started, translation_completed and translation_failed signals
        """
        self._controller = controller
        self.source_text_edited.connect(controller.set_source_text)
        self.source_language_selected.connect(controller.set_source_language)
        self.target_language_selected.connect(controller.set_target_language)
        self.swap_requested.connect(controller.swap_languages)
        self.translate_requested.connect(controller.translate)
        self.change_api_key_requested.connect(controller.open_credential_dialog)
        controller.translation_started.connect(self._on_translation_started)
        controller.translation_completed.connect(self._on_translation_completed)
        controller.translation_failed.connect(self._on_translation_failed)
        controller.state_changed.connect(self.render)
        self.render(controller.state)

    def render(self, state: SessionState):
        """Bring every widget in line with the given state without re-emitting input signals."""
        widgets = (self.source_edit, self.source_combo, self.target_combo)
        for widget in widgets:
            widget.blockSignals(True)
        try:
            if self.source_edit.toPlainText() != state.source_text:
                self.source_edit.setPlainText(state.source_text)
            self.source_combo.setCurrentIndex(self.source_combo.findData(state.source_lang))
            self.target_combo.setCurrentIndex(self.target_combo.findData(state.target_lang))
        finally:
            for widget in widgets:
                widget.blockSignals(False)

        if self.translated_edit.toPlainText() != state.translated_text:
            self.translated_edit.setPlainText(state.translated_text)

        self.translate_button.setEnabled(state.can_translate)
        self.translate_button.setText("Translating..." if state.is_loading else "Translate")

        if state.error_message:
            self.error_label.setText(state.error_message)
            self.error_label.show()
        else:
            self.error_label.clear()
            self.error_label.hide()

    def _on_translation_started(self):
        state = self._controller.state
        self.statusBar().showMessage(
            f"Translating from {language_name(state.source_lang)} to {language_name(state.target_lang)}..."
        )

    def _on_translation_completed(self, text: str):
        self.statusBar().showMessage("Translation complete", 3000)

    def _on_translation_failed(self, message: str):
        self.statusBar().showMessage("Translation failed", 5000)
