# File: travel_translate/client/session.py

import asyncio
import logging
import time
from datetime import datetime
from typing import Optional, Protocol

from travel_translate.client import state as st
from travel_translate.client.clipboard import ClipboardWriter
from travel_translate.client.notifications import Notifier
from travel_translate.client.proxy import (
    ProxyClient,
    TranslationFailed,
    TranslationOutcome,
    TranslationSucceeded,
    TransportFailed,
)
from travel_translate.core.config import Settings

logger = logging.getLogger(__name__)

COPIED_RESET_SECONDS = 2.0

EMPTY_TEXT_MESSAGE = "Enter some text to translate"
SUCCESS_MESSAGE = "Translation complete!"
COPIED_MESSAGE = "Text copied!"
CLIPBOARD_UNAVAILABLE_MESSAGE = "Could not copy the text"
LOADED_MESSAGE = "Translation loaded from history"
SPEECH_UNSUPPORTED_MESSAGE = "Speech synthesis is not supported"
SPEECH_FAILED_MESSAGE = "Could not play the text"


class SpeechSynthesizer(Protocol):
    def is_supported(self) -> bool: ...

    def speak(self, text: str, lang: str): ...


def apply_outcome(state: st.SessionState, outcome: TranslationOutcome, text: str,
                  source_lang: str, target_lang: str,
                  now: Optional[datetime] = None) -> st.SessionState:
    """Map one request outcome to the next session state."""
    if isinstance(outcome, TranslationSucceeded):
        record = st.new_record(source_lang, target_lang, text, outcome.translation, now)
        return st.translation_succeeded(state, record)
    if isinstance(outcome, (TranslationFailed, TransportFailed)):
        return st.translation_failed(state, outcome.message)
    raise TypeError(f"Unknown translation outcome: {outcome!r}")


class TranslationSession:
    """
    Owns the state of one client session and runs the actions on it.

    Concurrent translate() calls are independent requests; whichever
    response arrives last decides the displayed translation and clears
    the in-flight flag.
    """

    def __init__(self, proxy: ProxyClient, notifier: Optional[Notifier] = None,
                 clipboard=None, speech: Optional[SpeechSynthesizer] = None,
                 state: Optional[st.SessionState] = None, clock=time.monotonic):
        self.proxy = proxy
        self.notifier = notifier or Notifier()
        self.clipboard = clipboard or ClipboardWriter()
        self.speech = speech
        self.clock = clock
        self.copied_reset_seconds = COPIED_RESET_SECONDS
        self._copied_until: Optional[float] = None
        self._state = state or st.SessionState()

    @classmethod
    def from_settings(cls, settings: Settings) -> "TranslationSession":
        speech = None
        if settings.SPEECH_KEY and settings.SPEECH_REGION:
            from travel_translate.services.speech import AzureSpeechSynthesizer
            speech = AzureSpeechSynthesizer(settings)
        return cls(ProxyClient(settings.PROXY_URL), speech=speech)

    @property
    def state(self) -> st.SessionState:
        # The copied indicator expires by time; it is cleared on the next read.
        if self._copied_until is not None and self.clock() >= self._copied_until:
            self._copied_until = None
            self._state = st.set_copied(self._state, False)
        return self._state

    @state.setter
    def state(self, value: st.SessionState):
        self._state = value

    # -------------------------------
    # Setters
    # -------------------------------
    def set_source_text(self, text: str):
        self.state = st.set_source_text(self.state, text)

    def set_source_lang(self, code: str):
        self.state = st.set_source_lang(self.state, code)

    def set_target_lang(self, code: str):
        self.state = st.set_target_lang(self.state, code)

    def swap_languages(self):
        self.state = st.swap_languages(self.state)

    def toggle_history(self):
        self.state = st.toggle_history(self.state)

    # -------------------------------
    # Translate
    # -------------------------------
    async def translate(self) -> Optional[TranslationOutcome]:
        text = self.state.source_text
        if not text.strip():
            self.notifier.error(EMPTY_TEXT_MESSAGE)
            return None

        source_lang, target_lang = self.state.source_lang, self.state.target_lang
        self.state = st.begin_translation(self.state)
        outcome = None
        try:
            outcome = await self.proxy.translate(text, source_lang, target_lang)
        except Exception:
            logger.exception("Translation request failed")
            outcome = TransportFailed()
        finally:
            if outcome is None:
                # cancelled
                self.state = st.end_translation(self.state)
        self.state = apply_outcome(self.state, outcome, text, source_lang, target_lang)

        if isinstance(outcome, TranslationSucceeded):
            self.notifier.success(SUCCESS_MESSAGE)
        else:
            self.notifier.error(outcome.message)
        return outcome

    # -------------------------------
    # Clipboard
    # -------------------------------
    def copy_translation(self):
        if not self.clipboard.copy_text(self.state.translated_text):
            self.notifier.error(CLIPBOARD_UNAVAILABLE_MESSAGE)
            return
        self.state = st.set_copied(self.state, True)
        self._copied_until = self.clock() + self.copied_reset_seconds
        self.notifier.success(COPIED_MESSAGE)

    # -------------------------------
    # Speech
    # -------------------------------
    async def speak(self, text: str, lang: str) -> bool:
        if self.speech is None or not self.speech.is_supported():
            self.notifier.error(SPEECH_UNSUPPORTED_MESSAGE)
            return False
        # Synthesis blocks until playback ends; keep it off the event loop.
        loop = asyncio.get_running_loop()
        try:
            await loop.run_in_executor(None, self.speech.speak, text, lang)
        except Exception as e:
            logger.error("Speech synthesis error: %s", e)
            self.notifier.error(SPEECH_FAILED_MESSAGE)
            return False
        return True

    async def speak_source(self) -> bool:
        return await self.speak(self.state.source_text, self.state.source_lang)

    async def speak_translation(self) -> bool:
        return await self.speak(self.state.translated_text, self.state.target_lang)

    # -------------------------------
    # History
    # -------------------------------
    def load_from_history(self, record: st.TranslationRecord):
        self.state = st.load_from_history(self.state, record)
        self.notifier.success(LOADED_MESSAGE)
