"""Tests for the provider adapter: prompt, request parameters and error mapping."""

import asyncio
from types import SimpleNamespace
from unittest.mock import MagicMock

import httpx
import openai
import pytest

from travel_translate.core.config import Settings
from travel_translate.core.errors import Misconfigured, RateLimited, Unauthorized, Upstream
from travel_translate.core.translator import (
    SYSTEM_PROMPT,
    Translator,
    build_prompt,
    map_provider_error,
)


def _status_error(cls, status):
    request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
    response = httpx.Response(status, request=request)
    return cls("provider said no", response=response, body=None)


def _completion(content):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


@pytest.fixture
def provider():
    """Provide a mocked OpenAI client."""
    client = MagicMock()
    client.chat.completions.create.return_value = _completion("  Olá  ")
    return client


class TestBuildPrompt:

    def test_prompt_names_both_languages(self):
        prompt = build_prompt("Hello", "en", "pt")
        assert "from English to Portuguese" in prompt
        assert prompt.endswith("Text: Hello")

    def test_prompt_asks_for_translation_only(self):
        assert "ONLY the translation" in build_prompt("Hi", "en", "fr")


class TestMapProviderError:

    def test_authentication_error_is_unauthorized(self):
        error = _status_error(openai.AuthenticationError, 401)
        assert isinstance(map_provider_error(error), Unauthorized)

    def test_incorrect_key_message_is_unauthorized(self):
        assert isinstance(map_provider_error(Exception("Incorrect API key provided")), Unauthorized)

    def test_rate_limit_error_is_rate_limited(self):
        error = _status_error(openai.RateLimitError, 429)
        assert isinstance(map_provider_error(error), RateLimited)

    def test_other_status_is_upstream(self):
        error = _status_error(openai.InternalServerError, 503)
        assert isinstance(map_provider_error(error), Upstream)

    def test_unexpected_exception_is_upstream_with_generic_message(self):
        mapped = map_provider_error(ValueError("stack details"))
        assert isinstance(mapped, Upstream)
        assert "stack details" not in mapped.message


class TestTranslator:

    def test_sends_system_and_user_prompt(self, provider):
        settings = Settings(_env_file=None, OPENAI_API_KEY="sk-test")
        translator = Translator(settings, client=provider)

        result = asyncio.run(translator.translate_text("Hello", "en", "pt"))

        assert result == "Olá"
        kwargs = provider.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "gpt-4o"
        assert kwargs["temperature"] == 0.3
        assert kwargs["max_tokens"] == 1000
        assert kwargs["messages"][0] == {"role": "system", "content": SYSTEM_PROMPT}
        assert kwargs["messages"][1]["role"] == "user"
        assert "Text: Hello" in kwargs["messages"][1]["content"]

    def test_empty_choices_yield_empty_translation(self, provider):
        provider.chat.completions.create.return_value = SimpleNamespace(choices=[])
        translator = Translator(Settings(_env_file=None, OPENAI_API_KEY="sk-test"), client=provider)
        assert asyncio.run(translator.translate_text("Hello", "en", "pt")) == ""

    def test_missing_content_yields_empty_translation(self, provider):
        provider.chat.completions.create.return_value = _completion(None)
        translator = Translator(Settings(_env_file=None, OPENAI_API_KEY="sk-test"), client=provider)
        assert asyncio.run(translator.translate_text("Hello", "en", "pt")) == ""

    def test_provider_failure_is_mapped(self, provider):
        provider.chat.completions.create.side_effect = _status_error(openai.RateLimitError, 429)
        translator = Translator(Settings(_env_file=None, OPENAI_API_KEY="sk-test"), client=provider)
        with pytest.raises(RateLimited):
            asyncio.run(translator.translate_text("Hello", "en", "pt"))

    def test_missing_key_is_misconfigured(self):
        translator = Translator(Settings(_env_file=None, OPENAI_API_KEY=None))
        with pytest.raises(Misconfigured):
            asyncio.run(translator.translate_text("Hello", "en", "pt"))

    def test_azure_deployment_is_used_as_model(self):
        settings = Settings(
            _env_file=None,
            OPENAI_API_KEY="sk-test",
            AZURE_OPENAI_ENDPOINT="https://example.openai.azure.com",
            AZURE_OPENAI_DEPLOYMENT="translator-gpt4o",
        )
        assert Translator(settings).model == "translator-gpt4o"
