"""Translation Controller - Owns translator session state and the translate workflow."""

import dataclasses
import logging
from typing import Optional

from PySide6.QtCore import QObject, QThreadPool, Signal, Slot

from gemini_translator.core import SessionState, get_language
from gemini_translator.services import CredentialStore, TranslationResult, TranslationService
from gemini_translator.services.api_workers import TranslationWorker, WorkerSignals

logger = logging.getLogger(__name__)

GENERIC_FAILURE = "An error occurred during translation."


class TranslationController(QObject):
    """
    Orchestrates the credential-gated translation workflow.

    Responsibilities:
    - Own the session state (texts, language pair, API key, loading flag, error, dialog visibility).
    - Persist the API key through the injected CredentialStore.
    - Run translation requests on a worker thread, one at a time.
    - Notify the presentation layer through state_changed after every mutation.
    """

    state_changed = Signal(object)  # SessionState snapshot

    translation_started = Signal()
    translation_completed = Signal(str)
    translation_failed = Signal(str)

    def __init__(
        self,
        translation_service: TranslationService,
        credential_store: CredentialStore,
        thread_pool: Optional[QThreadPool] = None,
    ):
        """
        Args:
            translation_service: Service performing the remote call.
            credential_store: Durable slot holding the API key.
            thread_pool: Anything with start(runnable). Defaults to the global QThreadPool.
        """
        super().__init__()

        self.translation_service = translation_service
        self.credential_store = credential_store
        self.thread_pool = thread_pool if thread_pool is not None else QThreadPool.globalInstance()

        self._state = SessionState()
        # Keeps the worker's signal holder alive until its finished signal arrives
        self._active_signals: Optional[WorkerSignals] = None

        saved = credential_store.get()
        if saved:
            self._state.credential = saved
            self._state.credential_dialog_visible = False
        else:
            self._state.credential_dialog_visible = True

    @property
    def state(self) -> SessionState:
        """Snapshot of the current session state."""
        return dataclasses.replace(self._state)

    def can_translate(self) -> bool:
        """Return True if translate() would issue a request."""
        return self._state.can_translate

    # Form input

    def set_source_text(self, text: str) -> None:
        """Replace the text to be translated."""
        if text == self._state.source_text:
            return
        self._state.source_text = text
        self._notify()

    def set_source_language(self, code: str) -> None:
        """Select the source language. Raises UnknownLanguageError for codes outside the catalog."""
        get_language(code)
        self._state.source_lang = code
        self._notify()

    def set_target_language(self, code: str) -> None:
        """Select the target language. Raises UnknownLanguageError for codes outside the catalog."""
        get_language(code)
        self._state.target_lang = code
        self._notify()

    # Credential

    def submit_credential(self, value: str) -> None:
        """
        Save a new API key.

        Blank input is ignored. Otherwise the trimmed key is persisted,
        becomes the active credential, the dialog closes and any error is cleared.
        If the store cannot be written, the previous key stays active, the dialog
        stays open and the failure is shown as the error message.
        """
        value = value.strip()
        if not value:
            return

        try:
            self.credential_store.set(value)
        except OSError as e:
            logger.warning("Could not save API key: %s", e)
            self._state.error_message = f"Could not save API key: {e}"
            self._notify()
            return

        self._state.credential = value
        self._state.credential_dialog_visible = False
        self._state.error_message = None
        logger.info("API key updated")
        self._notify()

    def open_credential_dialog(self) -> None:
        """Show the API key prompt."""
        self._state.credential_dialog_visible = True
        self._notify()

    def close_credential_dialog(self) -> None:
        """Hide the API key prompt without changing the key."""
        self._state.credential_dialog_visible = False
        self._notify()

    # Languages

    def swap_languages(self) -> None:
        """Swap source and target languages, moving any translation into the source box."""
        state = self._state
        state.source_lang, state.target_lang = state.target_lang, state.source_lang
        if state.translated_text:
            state.source_text = state.translated_text
            state.translated_text = ""
        self._notify()

    # Translation

    def translate(self) -> None:
        """
        Translate the source text in the background.

        Does nothing if there is no text, no API key, or a request is already running.
        Results arrive later through state_changed and the translation_* signals.
        """
        if not self.can_translate():
            return

        state = self._state
        source_language = get_language(state.source_lang)
        target_language = get_language(state.target_lang)

        state.is_loading = True
        state.error_message = None
        self._notify()
        self.translation_started.emit()

        worker = TranslationWorker(
            translation_service=self.translation_service,
            text=state.source_text,
            source_language=source_language,
            target_language=target_language,
            api_key=state.credential,
        )
        self._active_signals = worker.signals
        worker.signals.translation_result.connect(self._handle_translation_result)
        worker.signals.error.connect(self._handle_translation_error)
        worker.signals.finished.connect(self._handle_finished)

        try:
            self.thread_pool.start(worker)
        except Exception as e:
            logger.exception("Could not start translation worker")
            self._fail(str(e) or GENERIC_FAILURE)
            self._handle_finished()

    @Slot(object)
    def _handle_translation_result(self, result: TranslationResult) -> None:
        """Handle translation result from worker thread (runs in main thread)."""
        if result.is_error:
            self._fail(result.error or GENERIC_FAILURE)
            return

        self._state.translated_text = result.text
        self._notify()
        self.translation_completed.emit(result.text)

    @Slot(str)
    def _handle_translation_error(self, error: str) -> None:
        """Handle an unexpected exception raised inside the worker."""
        self._fail(error or GENERIC_FAILURE)

    @Slot()
    def _handle_finished(self) -> None:
        """Release the in-flight flag. Runs on every exit path of a request."""
        self._active_signals = None
        if not self._state.is_loading:
            return
        self._state.is_loading = False
        self._notify()

    def _fail(self, message: str) -> None:
        # translated_text is left as-is so a previous result stays visible
        logger.warning("Translation failed: %s", message)
        self._state.error_message = message
        self._notify()
        self.translation_failed.emit(message)

    def _notify(self) -> None:
        self.state_changed.emit(self.state)
