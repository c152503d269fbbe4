"""Shared fixtures for the proxy and client tests."""

import pytest
from fastapi.testclient import TestClient

from travel_translate.api.routes.translate import get_translator
from travel_translate.core.config import Settings, get_settings
from travel_translate.main import app


class StubTranslator:
    """Stands in for the provider adapter and counts the calls it gets."""

    def __init__(self, translation="", error=None):
        self.translation = translation
        self.error = error
        self.calls = []

    async def translate_text(self, text, source_lang, target_lang):
        self.calls.append((text, source_lang, target_lang))
        if self.error is not None:
            raise self.error
        return self.translation


class FakeResponse:
    """The parts of requests.Response the proxy client reads."""

    def __init__(self, status_code, payload):
        self.status_code = status_code
        self._payload = payload

    def json(self):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


@pytest.fixture
def settings():
    return Settings(_env_file=None, OPENAI_API_KEY="sk-test")


@pytest.fixture
def stub_translator():
    return StubTranslator(translation="Olá")


@pytest.fixture
def client(settings, stub_translator):
    """TestClient with the settings and provider adapter overridden."""
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_translator] = lambda: stub_translator
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
