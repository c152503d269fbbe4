# File: travel_translate/core/languages.py

from types import MappingProxyType
from typing import NamedTuple, Optional


class Language(NamedTuple):
    code: str
    name: str


LANGUAGES = (
    Language("pt", "Portuguese"),
    Language("en", "English"),
    Language("es", "Spanish"),
    Language("fr", "French"),
    Language("de", "German"),
    Language("it", "Italian"),
    Language("ja", "Japanese"),
    Language("ko", "Korean"),
    Language("zh", "Chinese"),
    Language("ar", "Arabic"),
    Language("ru", "Russian"),
    Language("hi", "Hindi"),
)

LANGUAGE_NAMES = MappingProxyType({lang.code: lang.name for lang in LANGUAGES})


def language_name(code: str) -> Optional[str]:
    return LANGUAGE_NAMES.get(code)


def is_supported(code: str) -> bool:
    return code in LANGUAGE_NAMES
