# File: travel_translate/api/router.py

from fastapi import APIRouter

from travel_translate.api.routes import languages, translate

router = APIRouter()
router.include_router(translate.router)
router.include_router(languages.router)
