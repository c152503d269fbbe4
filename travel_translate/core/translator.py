# File: travel_translate/core/translator.py

import asyncio
import logging
from typing import Optional

import openai
from openai import AzureOpenAI, OpenAI

from travel_translate.core.config import Settings
from travel_translate.core.errors import (
    Misconfigured,
    RateLimited,
    TranslationError,
    Unauthorized,
    Upstream,
)
from travel_translate.core.languages import language_name

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a professional translator specialized in precise, natural "
    "translation between languages. Return only the requested translation, "
    "without explanations."
)

USER_PROMPT = """Translate the following text from {source} to {target}.
Return ONLY the translation, without explanations or additional text.

Text: {text}"""


def build_prompt(text: str, source_lang: str, target_lang: str) -> str:
    return USER_PROMPT.format(
        source=language_name(source_lang),
        target=language_name(target_lang),
        text=text,
    )


def map_provider_error(exc: Exception) -> TranslationError:
    """Reduce a provider exception to one of the proxy error kinds."""
    if isinstance(exc, TranslationError):
        return exc
    status = getattr(exc, "status_code", None)
    if isinstance(exc, openai.AuthenticationError) or status == 401 or "Incorrect API key" in str(exc):
        return Unauthorized()
    if isinstance(exc, openai.RateLimitError) or status == 429:
        return RateLimited()
    return Upstream()


class Translator:
    """Provider adapter: one chat completion per translation, no retries."""

    def __init__(self, settings: Settings, client=None):
        self.settings = settings
        self._client = client

    @property
    def model(self) -> str:
        if self.settings.AZURE_OPENAI_ENDPOINT and self.settings.AZURE_OPENAI_DEPLOYMENT:
            return self.settings.AZURE_OPENAI_DEPLOYMENT
        return self.settings.OPENAI_MODEL

    def _make_client(self):
        if self._client is not None:
            return self._client
        api_key = self.settings.OPENAI_API_KEY
        if not api_key:
            raise Misconfigured()
        if self.settings.AZURE_OPENAI_ENDPOINT:
            return AzureOpenAI(
                api_key=api_key,
                azure_endpoint=self.settings.AZURE_OPENAI_ENDPOINT,
                api_version=self.settings.AZURE_OPENAI_API_VERSION,
            )
        return OpenAI(api_key=api_key)

    async def translate_text(self, text: str, source_lang: str, target_lang: str) -> str:
        # The SDK call is blocking; keep it off the event loop.
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self._call_external, text, source_lang, target_lang)

    def _call_external(self, text: str, source_lang: str, target_lang: str) -> str:
        try:
            client = self._make_client()
            completion = client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": build_prompt(text, source_lang, target_lang)},
                ],
                temperature=self.settings.OPENAI_TEMPERATURE,
                max_tokens=self.settings.OPENAI_MAX_TOKENS,
            )
        except Misconfigured:
            raise
        except Exception as e:
            logger.exception("Translation provider call failed")
            raise map_provider_error(e) from e

        return _first_content(completion)


def _first_content(completion) -> str:
    choices = getattr(completion, "choices", None) or []
    if not choices:
        return ""
    message = getattr(choices[0], "message", None)
    content: Optional[str] = getattr(message, "content", None)
    return (content or "").strip()
