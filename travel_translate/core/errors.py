# File: travel_translate/core/errors.py

from typing import Optional


class TranslationError(Exception):
    """Base error; carries the user-facing message and the HTTP status."""

    status_code: Optional[int] = 500
    default_message = "Error processing translation. Try again."

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class BadRequest(TranslationError):
    status_code = 400
    default_message = "Invalid parameters"


class Misconfigured(TranslationError):
    status_code = 500
    default_message = (
        "OpenAI key not configured. Set OPENAI_API_KEY in the environment variables."
    )


class Unauthorized(TranslationError):
    status_code = 401
    default_message = "Invalid OpenAI key. Check your configuration."


class RateLimited(TranslationError):
    status_code = 429
    default_message = "API usage limit reached. Try again later."


class Upstream(TranslationError):
    status_code = 500
    default_message = "Error processing translation. Try again."


class ClientTransport(TranslationError):
    # Raised by the client when the proxy gives no usable response;
    # the proxy itself never answers with it.
    status_code = None
    default_message = "Error connecting to the server. Try again."
