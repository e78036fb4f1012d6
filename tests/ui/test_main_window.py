"""
Tests for MainWindow and ApiKeyDialog - rendering and input wiring.
"""

from unittest.mock import MagicMock

import pytest
from PySide6.QtWidgets import QApplication

from gemini_translator.coordinators import TranslationController
from gemini_translator.core import LANGUAGES, SessionState
from gemini_translator.services import InMemoryCredentialStore, TranslationResult
from gemini_translator.ui import ApiKeyDialog, MainWindow


def ensure_qt_app():
    if QApplication.instance() is None:
        QApplication([])


@pytest.fixture
def mock_translation_service():
    service = MagicMock()
    service.translate.return_value = TranslationResult(text="こんにちは", model="gemini-test")
    return service


@pytest.fixture
def controller(mock_translation_service, inline_pool):
    return TranslationController(
        translation_service=mock_translation_service,
        credential_store=InMemoryCredentialStore("test-key"),
        thread_pool=inline_pool,
    )


@pytest.fixture
def window(controller):
    ensure_qt_app()
    main_window = MainWindow()
    main_window.set_controller(controller)
    return main_window


def test_language_selectors_list_catalog():
    """Both selectors should offer every catalog language."""
    ensure_qt_app()

    main_window = MainWindow()

    assert main_window.source_combo.count() == len(LANGUAGES)
    assert main_window.target_combo.count() == len(LANGUAGES)


def test_initial_render_selects_default_pair(window):
    assert window.source_combo.currentData() == "en"
    assert window.target_combo.currentData() == "ja"
    assert not window.translate_button.isEnabled()
    assert window.error_label.isHidden()


def test_typing_enables_translate(window, controller):
    window.source_edit.setPlainText("Hello")

    assert controller.state.source_text == "Hello"
    assert window.translate_button.isEnabled()


def test_translate_click_shows_result(window, controller):
    window.source_edit.setPlainText("Hello")

    window.translate_button.click()

    assert window.translated_edit.toPlainText() == "こんにちは"
    assert window.translate_button.text() == "Translate"


def test_combo_selection_updates_controller(window, controller):
    window.target_combo.setCurrentIndex(window.target_combo.findData("fr"))

    assert controller.state.target_lang == "fr"


def test_swap_button_updates_selectors(window):
    window.swap_button.click()

    assert window.source_combo.currentData() == "ja"
    assert window.target_combo.currentData() == "en"


def test_render_loading_and_error():
    """Busy state disables translate; an error message shows the banner."""
    ensure_qt_app()
    main_window = MainWindow()

    main_window.render(SessionState(source_text="Hello", credential="k", is_loading=True))
    assert not main_window.translate_button.isEnabled()
    assert main_window.translate_button.text() == "Translating..."

    main_window.render(SessionState(source_text="Hello", credential="k", error_message="Translation failed"))
    assert main_window.translate_button.isEnabled()
    assert not main_window.error_label.isHidden()
    assert main_window.error_label.text() == "Translation failed"


def test_render_does_not_echo_input_signals():
    ensure_qt_app()
    main_window = MainWindow()
    spy = MagicMock()
    main_window.source_text_edited.connect(spy)
    main_window.source_language_selected.connect(spy)

    main_window.render(SessionState(source_text="Hola", source_lang="es"))

    spy.assert_not_called()
    assert main_window.source_edit.toPlainText() == "Hola"


def test_api_key_dialog_saves_key(mock_translation_service, inline_pool):
    ensure_qt_app()
    store = InMemoryCredentialStore()
    controller = TranslationController(mock_translation_service, store, thread_pool=inline_pool)
    dialog = ApiKeyDialog()
    dialog.set_controller(controller)
    assert dialog.isVisible()
    assert not dialog.save_button.isEnabled()

    dialog.key_edit.setText("  new-key ")
    assert dialog.save_button.isEnabled()
    dialog.save_button.click()

    assert store.get() == "new-key"
    assert not dialog.isVisible()


def test_api_key_dialog_dismiss_closes_prompt(controller):
    ensure_qt_app()
    dialog = ApiKeyDialog()
    dialog.set_controller(controller)
    controller.open_credential_dialog()
    assert dialog.isVisible()

    dialog.reject()

    assert not controller.state.credential_dialog_visible
    assert controller.state.credential == "test-key"


def test_status_bar_follows_translation(window, mock_translation_service):
    """The status bar names the language pair while translating, then reports the outcome."""
    messages = []
    window.statusBar().messageChanged.connect(messages.append)
    window.source_edit.setPlainText("Hello")

    window.translate_button.click()

    assert "Translating from English to Japanese..." in messages
    assert window.statusBar().currentMessage() == "Translation complete"

    mock_translation_service.translate.return_value = TranslationResult(
        text="", model="gemini-test", error="Translation failed (401): API key not valid."
    )
    window.translate_button.click()

    assert window.statusBar().currentMessage() == "Translation failed"
