from .locale import LocaleOut, TranslationOut

__all__ = ["LocaleOut", "TranslationOut"]
