# File: travel_translate/api/routes/translate.py

import logging

from fastapi import APIRouter, Depends

from travel_translate.core.config import Settings, get_settings
from travel_translate.core.errors import BadRequest, Misconfigured
from travel_translate.core.languages import is_supported
from travel_translate.core.translator import Translator
from travel_translate.schemas import ErrorResponse, TranslateRequest, TranslateResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["translate"])


def get_translator(settings: Settings = Depends(get_settings)) -> Translator:
    return Translator(settings)


@router.post(
    "/translate",
    response_model=TranslateResponse,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        429: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def translate(
    payload: TranslateRequest,
    settings: Settings = Depends(get_settings),
    translator: Translator = Depends(get_translator),
):
    """
    Translate `text` from `sourceLang` to `targetLang` through the provider.
    Errors are raised as TranslationError and rendered as {"error": ...}.
    """
    if not payload.text or not payload.source_lang or not payload.target_lang:
        raise BadRequest()

    if not settings.OPENAI_API_KEY:
        raise Misconfigured()

    for code in (payload.source_lang, payload.target_lang):
        if not is_supported(code):
            raise BadRequest(f"Unsupported language: {code}")

    translation = await translator.translate_text(
        payload.text, payload.source_lang, payload.target_lang
    )
    logger.info(
        "Translated %d chars %s -> %s", len(payload.text), payload.source_lang, payload.target_lang
    )
    return TranslateResponse(translation=translation)
