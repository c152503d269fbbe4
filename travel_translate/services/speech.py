# File: travel_translate/services/speech.py

import logging

import azure.cognitiveservices.speech as speechsdk

from travel_translate.core.config import Settings

logger = logging.getLogger(__name__)

# language code -> Azure synthesis locale
VOICE_LOCALES = {
    "pt": "pt-BR",
    "en": "en-US",
    "es": "es-ES",
    "fr": "fr-FR",
    "de": "de-DE",
    "it": "it-IT",
    "ja": "ja-JP",
    "ko": "ko-KR",
    "zh": "zh-CN",
    "ar": "ar-SA",
    "ru": "ru-RU",
    "hi": "hi-IN",
}


class AzureSpeechSynthesizer:
    """Reads text aloud on the default speaker using Azure Text-to-Speech."""

    def __init__(self, settings: Settings):
        self.key = settings.SPEECH_KEY
        self.region = settings.SPEECH_REGION

    def is_supported(self) -> bool:
        return bool(self.key and self.region)

    def speak(self, text: str, lang: str):
        speech_config = speechsdk.SpeechConfig(subscription=self.key, region=self.region)
        speech_config.speech_synthesis_language = VOICE_LOCALES.get(lang, lang)

        audio_output = speechsdk.audio.AudioOutputConfig(use_default_speaker=True)
        synthesizer = speechsdk.SpeechSynthesizer(speech_config=speech_config, audio_config=audio_output)

        result = synthesizer.speak_text_async(text).get()
        if result.reason != speechsdk.ResultReason.SynthesizingAudioCompleted:
            raise RuntimeError(f"Speech synthesis failed: {result.reason}")
        logger.info("Spoke %d chars in %s", len(text), lang)
