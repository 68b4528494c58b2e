from typing import Dict, Optional
from fastapi import Request
from src.config import DEFAULT_LANGUAGE, SUPPORTED_LANGUAGES, LANGUAGE_COOKIE
from .translations import translations


def resolve_language(value: Optional[str]) -> str:
    if value:
        value = value.strip().lower()
        if value in SUPPORTED_LANGUAGES:
            return value
    return DEFAULT_LANGUAGE


def toggle_language(current: Optional[str]) -> str:
    return "en" if resolve_language(current) == "hi" else "hi"


def get_translation(language: Optional[str], key: str) -> str:
    """Look up `key` in the language table, then the default table, then echo the key."""
    table = translations.get(resolve_language(language), {})
    if table.get(key):
        return table[key]
    return translations[DEFAULT_LANGUAGE].get(key) or key


def get_strings(language: Optional[str]) -> Dict[str, str]:
    """Full string table for a language, gaps filled from the default language."""
    strings = dict(translations[DEFAULT_LANGUAGE])
    strings.update({k: v for k, v in translations.get(resolve_language(language), {}).items() if v})
    return strings


def language_from_request(request: Request, lang: Optional[str] = None) -> str:
    # explicit ?lang= wins over the saved preference
    if lang:
        return resolve_language(lang)
    return resolve_language(request.cookies.get(LANGUAGE_COOKIE))
