# File: travel_translate/schemas.py

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TranslateRequest(BaseModel):
    # Every field is optional here; emptiness is checked by the route so a
    # missing field answers 400 like an empty one.
    model_config = ConfigDict(populate_by_name=True)

    text: Optional[str] = None
    source_lang: Optional[str] = Field(default=None, alias="sourceLang")
    target_lang: Optional[str] = Field(default=None, alias="targetLang")


class TranslateResponse(BaseModel):
    translation: str


class ErrorResponse(BaseModel):
    error: str


class LanguageOut(BaseModel):
    code: str
    name: str
