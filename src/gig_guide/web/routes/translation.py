# ABOUTME: Translation routes for templating bulletin text into other languages.
# ABOUTME: Exposes the phrase templating engine and the supported language list.

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from gig_guide.languages import SUPPORTED_LANGUAGES
from gig_guide.web.dependencies import TemplatingEngine

router = APIRouter(prefix="/api/translate", tags=["translate"])


class TranslateRequest(BaseModel):
    text: str
    target_language: str


class TranslateResponse(BaseModel):
    translated_text: str
    target_language: str


class LanguageInfo(BaseModel):
    code: str
    name: str


@router.post("", response_model=TranslateResponse)
async def translate(request: TranslateRequest, engine: TemplatingEngine):
    """Translate bulletin text. Unparseable text comes back tagged, not rejected."""
    if not request.text:
        raise HTTPException(status_code=400, detail="Text is required")
    if request.target_language not in SUPPORTED_LANGUAGES:
        raise HTTPException(status_code=400, detail="Unsupported language")
    return TranslateResponse(
        translated_text=engine.translate(request.text, request.target_language),
        target_language=request.target_language,
    )


@router.get("/languages", response_model=list[LanguageInfo])
async def languages():
    """Languages bulletins can be delivered in."""
    return [LanguageInfo(code=code, name=name) for code, name in SUPPORTED_LANGUAGES.items()]
