from typing import Optional
from loguru import logger
from fastapi import APIRouter, HTTPException, Query, Request, Response, status
from src.config import LANGUAGE_COOKIE, SUPPORTED_LANGUAGES
from . import controller
from . import schemas

# Defining the router
router = APIRouter(
    prefix="/api/locale",
    tags=["Locale"],
    responses={404: {"description": "Not found"}},
)

# One year; the preference outlives the browser session
COOKIE_MAX_AGE = 60 * 60 * 24 * 365


def _save_language(response: Response, language: str) -> None:
    response.set_cookie(LANGUAGE_COOKIE, language, max_age=COOKIE_MAX_AGE, samesite="lax")


def _locale_payload(language: str) -> dict:
    return schemas.LocaleOut(language=language, strings=controller.get_strings(language)).model_dump()


@router.get("")
def get_locale(request: Request):
    """
    Active language (from the saved preference) and its full string table.
    """
    language = controller.language_from_request(request)
    return {
        "success": True,
        "status": status.HTTP_200_OK,
        "message": "Locale fetched.",
        "data": _locale_payload(language),
    }


@router.post("/toggle")
def toggle_locale(request: Request, response: Response):
    """
    Switch between English and Hindi and save the choice.
    """
    current = controller.language_from_request(request)
    language = controller.toggle_language(current)
    _save_language(response, language)
    logger.debug(f"Language toggled {current} -> {language}")
    return {
        "success": True,
        "status": status.HTTP_200_OK,
        "message": "Language switched.",
        "data": _locale_payload(language),
    }


@router.put("/{language}")
def set_locale(language: str, response: Response):
    """
    Set the language explicitly. Only supported language tags are accepted.
    """
    value = language.strip().lower()
    if value not in SUPPORTED_LANGUAGES:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unsupported language '{language}'. Use one of: {', '.join(SUPPORTED_LANGUAGES)}",
        )
    _save_language(response, value)
    return {
        "success": True,
        "status": status.HTTP_200_OK,
        "message": "Language saved.",
        "data": _locale_payload(value),
    }


@router.get("/strings/{key}")
def translate(request: Request, key: str, lang: Optional[str] = Query(None)):
    language = controller.language_from_request(request, lang)
    value = controller.get_translation(language, key)
    return {
        "success": True,
        "status": status.HTTP_200_OK,
        "message": "Translation fetched.",
        "data": schemas.TranslationOut(language=language, key=key, value=value).model_dump(),
    }
