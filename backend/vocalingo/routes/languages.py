"""GET /api/languages — practice languages for the UI selector."""

from fastapi import APIRouter

from vocalingo.languages import LANGUAGES
from vocalingo.models import LanguageOut

router = APIRouter(tags=["languages"])


@router.get("/languages", response_model=list[LanguageOut])
async def list_languages():
    return [LanguageOut(code=lang.code, name=lang.name) for lang in LANGUAGES]
