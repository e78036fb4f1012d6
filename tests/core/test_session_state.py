"""Unit tests for SessionState."""

from gemini_translator.core import SessionState


def test_defaults():
    state = SessionState()
    assert state.source_text == ""
    assert state.translated_text == ""
    assert state.source_lang == "en"
    assert state.target_lang == "ja"
    assert state.credential is None
    assert state.is_loading is False
    assert state.error_message is None


def test_can_translate_requires_text_credential_and_idle():
    assert SessionState(source_text="Hello", credential="key").can_translate
    assert not SessionState(source_text="   ", credential="key").can_translate
    assert not SessionState(source_text="Hello").can_translate
    assert not SessionState(source_text="Hello", credential="key", is_loading=True).can_translate
