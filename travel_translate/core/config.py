from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # OpenAI (the key may be missing; the proxy reports it per request)
    OPENAI_API_KEY: Optional[str] = None
    OPENAI_MODEL: str = "gpt-4o"
    OPENAI_TEMPERATURE: float = 0.3
    OPENAI_MAX_TOKENS: int = 1000

    # Azure OpenAI, used instead of api.openai.com when the endpoint is set
    AZURE_OPENAI_ENDPOINT: Optional[str] = None
    AZURE_OPENAI_API_VERSION: str = "2024-06-01"
    AZURE_OPENAI_DEPLOYMENT: Optional[str] = None

    # Speech
    SPEECH_KEY: Optional[str] = None
    SPEECH_REGION: Optional[str] = None

    CORS_ORIGINS: List[str] = ["*"]
    LOG_LEVEL: str = "INFO"

    # Client side
    PROXY_URL: str = "http://localhost:8000/api/translate"

    model_config = SettingsConfigDict(env_file=".env", extra="allow")


def get_settings() -> Settings:
    """Build the settings from the environment on every call.

    The translate route depends on this so a credential added or removed
    while the server runs is picked up by the next request.
    """
    return Settings()
