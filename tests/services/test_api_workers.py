"""Unit tests for TranslationWorker."""

from unittest.mock import MagicMock

import pytest

from gemini_translator.core import get_language
from gemini_translator.services import TranslationResult, TranslationWorker


@pytest.fixture
def mock_translation_service():
    service = MagicMock()
    service.translate = MagicMock()
    return service


@pytest.fixture
def worker(mock_translation_service):
    return TranslationWorker(
        translation_service=mock_translation_service,
        text="Hello",
        source_language=get_language("en"),
        target_language=get_language("ja"),
        api_key="test-key",
    )


def test_worker_emits_result_then_finished(worker, mock_translation_service):
    result = TranslationResult(text="こんにちは", model="gemini-test")
    mock_translation_service.translate.return_value = result
    calls = []
    worker.signals.translation_result.connect(lambda r: calls.append(("result", r)))
    worker.signals.finished.connect(lambda: calls.append(("finished", None)))

    worker.run()

    assert calls == [("result", result), ("finished", None)]
    mock_translation_service.translate.assert_called_once_with(
        text="Hello",
        source_language=get_language("en"),
        target_language=get_language("ja"),
        api_key="test-key",
    )


def test_worker_converts_exception_to_error_signal(worker, mock_translation_service):
    mock_translation_service.translate.side_effect = ValueError("boom")
    error_spy = MagicMock()
    finished_spy = MagicMock()
    worker.signals.error.connect(error_spy)
    worker.signals.finished.connect(finished_spy)

    worker.run()

    error_spy.assert_called_once_with("boom")
    finished_spy.assert_called_once()
