from fastapi import APIRouter

from travel_translate.core.languages import LANGUAGES
from travel_translate.schemas import LanguageOut

router = APIRouter(tags=["languages"])


@router.get("/languages", response_model=list[LanguageOut])
def list_languages():
    return [LanguageOut(code=lang.code, name=lang.name) for lang in LANGUAGES]
