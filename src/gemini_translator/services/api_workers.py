"""Async workers for non-blocking API calls using Qt threading."""

import logging

from PySide6.QtCore import QObject, QRunnable, Signal, Slot

from gemini_translator.core import Language
from gemini_translator.services.translation import TranslationService

logger = logging.getLogger(__name__)


class WorkerSignals(QObject):
    """
    Signals for communicating results from worker threads.

    QRunnable doesn't inherit from QObject, so we need a separate
    QObject to hold the signals.
    """
    finished = Signal()
    error = Signal(str)
    translation_result = Signal(object)  # TranslationResult


class TranslationWorker(QRunnable):
    """
    Worker that runs translation API call in a background thread.

    Emits translation_result or error, then always finished.
    """

    def __init__(
        self,
        translation_service: TranslationService,
        text: str,
        source_language: Language,
        target_language: Language,
        api_key: str,
    ):
        super().__init__()
        self.translation_service = translation_service
        self.text = text
        self.source_language = source_language
        self.target_language = target_language
        self.api_key = api_key
        self.signals = WorkerSignals()
        self.setAutoDelete(True)

    @Slot()
    def run(self):
        """Execute the translation API call in background thread."""
        try:
            result = self.translation_service.translate(
                text=self.text,
                source_language=self.source_language,
                target_language=self.target_language,
                api_key=self.api_key,
            )
            self.signals.translation_result.emit(result)
        except Exception as e:
            # Catch any unexpected exceptions not handled by service
            logger.exception("Unexpected translation error")
            self.signals.error.emit(str(e) or "An error occurred during translation.")
        finally:
            self.signals.finished.emit()
