from typing import Dict
from pydantic import BaseModel


class LocaleOut(BaseModel):
    language: str
    strings: Dict[str, str]


class TranslationOut(BaseModel):
    language: str
    key: str
    value: str
