# File: travel_translate/client/proxy.py

import asyncio
import logging
from dataclasses import dataclass
from typing import Optional, Union

import requests

from travel_translate.core.errors import ClientTransport

logger = logging.getLogger(__name__)

GENERIC_FAILURE = "Error translating"


@dataclass(frozen=True)
class TranslationSucceeded:
    translation: str


@dataclass(frozen=True)
class TranslationFailed:
    """The proxy answered with a non-2xx status."""

    message: str


@dataclass(frozen=True)
class TransportFailed:
    """No usable response arrived from the proxy."""

    message: str = ClientTransport.default_message


TranslationOutcome = Union[TranslationSucceeded, TranslationFailed, TransportFailed]


class ProxyClient:
    """Posts one translation request to the proxy; no retries, no timeout."""

    def __init__(self, url: str, session: Optional[requests.Session] = None):
        self.url = url
        self.session = session

    async def translate(self, text: str, source_lang: str, target_lang: str) -> TranslationOutcome:
        loop = asyncio.get_running_loop()
        try:
            return await loop.run_in_executor(None, self._post, text, source_lang, target_lang)
        except ClientTransport as e:
            return TransportFailed(e.message)

    def _post(self, text: str, source_lang: str, target_lang: str) -> TranslationOutcome:
        body = {"text": text, "sourceLang": source_lang, "targetLang": target_lang}
        poster = self.session.post if self.session is not None else requests.post
        try:
            response = poster(self.url, json=body)
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.error("Could not reach translation proxy at %s: %s", self.url, e)
            raise ClientTransport() from e

        if not 200 <= response.status_code < 300:
            message = data.get("error") if isinstance(data, dict) else None
            logger.warning("Translation proxy answered %s", response.status_code)
            if not isinstance(message, str) or not message:
                message = GENERIC_FAILURE
            return TranslationFailed(message)

        if not isinstance(data, dict) or not isinstance(data.get("translation"), str):
            return TranslationFailed(GENERIC_FAILURE)
        return TranslationSucceeded(data["translation"])
