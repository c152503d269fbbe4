"""Session UI state for the translation client.

The state is an immutable value. Every user action or request outcome is a
pure function taking the current state and returning the next one; the
hosting UI layer owns the current value for the lifetime of the session.
"""

import uuid
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Optional, Tuple

from travel_translate.core.languages import language_name

HISTORY_LIMIT = 10


@dataclass(frozen=True)
class TranslationRecord:
    """One completed translation, never mutated after creation."""

    id: str
    source_lang: str
    target_lang: str
    original: str
    translated: str
    created_at: datetime

    @property
    def source_name(self) -> Optional[str]:
        return language_name(self.source_lang)

    @property
    def target_name(self) -> Optional[str]:
        return language_name(self.target_lang)

    @property
    def time_label(self) -> str:
        return self.created_at.strftime("%H:%M:%S")


@dataclass(frozen=True)
class SessionState:
    source_lang: str = "pt"
    target_lang: str = "en"
    source_text: str = ""
    translated_text: str = ""
    is_translating: bool = False
    error: Optional[str] = None
    history: Tuple[TranslationRecord, ...] = field(default_factory=tuple)
    history_visible: bool = False
    copied: bool = False

    @property
    def can_translate(self) -> bool:
        return not self.is_translating and bool(self.source_text.strip())

    @property
    def char_count(self) -> int:
        return len(self.source_text)

    @property
    def is_configuration_error(self) -> bool:
        return self.error is not None and "OpenAI" in self.error


def new_record(source_lang: str, target_lang: str, original: str, translated: str,
               now: Optional[datetime] = None) -> TranslationRecord:
    now = now or datetime.now()
    # Millisecond stamp plus a random suffix: two records created within the
    # same millisecond still get distinct ids.
    record_id = f"{int(now.timestamp() * 1000)}-{uuid.uuid4().hex[:6]}"
    return TranslationRecord(
        id=record_id,
        source_lang=source_lang,
        target_lang=target_lang,
        original=original,
        translated=translated,
        created_at=now,
    )


def push_history(history: Tuple[TranslationRecord, ...],
                 record: TranslationRecord) -> Tuple[TranslationRecord, ...]:
    return (record,) + tuple(history[:HISTORY_LIMIT - 1])


def set_source_text(state: SessionState, text: str) -> SessionState:
    return replace(state, source_text=text)


def set_source_lang(state: SessionState, code: str) -> SessionState:
    return replace(state, source_lang=code)


def set_target_lang(state: SessionState, code: str) -> SessionState:
    return replace(state, target_lang=code)


def swap_languages(state: SessionState) -> SessionState:
    # The previous translation becomes the new source text.
    return replace(
        state,
        source_lang=state.target_lang,
        target_lang=state.source_lang,
        source_text=state.translated_text,
        translated_text=state.source_text,
    )


def begin_translation(state: SessionState) -> SessionState:
    return replace(state, is_translating=True, error=None)


def translation_succeeded(state: SessionState, record: TranslationRecord) -> SessionState:
    return replace(
        state,
        translated_text=record.translated,
        history=push_history(state.history, record),
        is_translating=False,
    )


def translation_failed(state: SessionState, message: str) -> SessionState:
    return replace(state, error=message, is_translating=False)


def load_from_history(state: SessionState, record: TranslationRecord) -> SessionState:
    return replace(
        state,
        source_lang=record.source_lang,
        target_lang=record.target_lang,
        source_text=record.original,
        translated_text=record.translated,
        history_visible=False,
    )


def toggle_history(state: SessionState) -> SessionState:
    return replace(state, history_visible=not state.history_visible)


def set_copied(state: SessionState, copied: bool) -> SessionState:
    return replace(state, copied=copied)


def end_translation(state: SessionState) -> SessionState:
    return replace(state, is_translating=False)
