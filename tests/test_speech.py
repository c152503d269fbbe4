"""Tests for the Azure speech synthesizer with the SDK mocked out."""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

pytest.importorskip("azure.cognitiveservices.speech")

from travel_translate.core.config import Settings
from travel_translate.services import speech


@pytest.fixture
def sdk(monkeypatch):
    """Replace the speech SDK module used by the synthesizer."""
    fake = MagicMock()
    fake.ResultReason.SynthesizingAudioCompleted = "completed"
    synthesizer = fake.SpeechSynthesizer.return_value
    synthesizer.speak_text_async.return_value.get.return_value = SimpleNamespace(reason="completed")
    monkeypatch.setattr(speech, "speechsdk", fake)
    return fake


def _settings(key="key", region="eastus2"):
    return Settings(_env_file=None, SPEECH_KEY=key, SPEECH_REGION=region)


class TestAzureSpeechSynthesizer:

    def test_supported_only_with_key_and_region(self):
        assert speech.AzureSpeechSynthesizer(_settings()).is_supported()
        assert not speech.AzureSpeechSynthesizer(_settings(key=None)).is_supported()
        assert not speech.AzureSpeechSynthesizer(_settings(region=None)).is_supported()

    def test_speak_uses_locale_for_language(self, sdk):
        speech.AzureSpeechSynthesizer(_settings()).speak("Olá", "pt")

        config = sdk.SpeechConfig.return_value
        sdk.SpeechConfig.assert_called_once_with(subscription="key", region="eastus2")
        assert config.speech_synthesis_language == "pt-BR"
        sdk.SpeechSynthesizer.return_value.speak_text_async.assert_called_once_with("Olá")

    def test_failed_synthesis_raises(self, sdk):
        result = SimpleNamespace(reason="canceled")
        sdk.SpeechSynthesizer.return_value.speak_text_async.return_value.get.return_value = result
        with pytest.raises(RuntimeError):
            speech.AzureSpeechSynthesizer(_settings()).speak("Olá", "pt")
