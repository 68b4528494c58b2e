from .config import (
    APPNAME,
    VERSION,
    DATA_SOURCE,
    DATA_SOURCE_TIMEOUT,
    COMPARE_LIMIT,
    MIN_COMPARE,
    COMPARE_SESSION_TTL,
    DEFAULT_LANGUAGE,
    SUPPORTED_LANGUAGES,
    LANGUAGE_COOKIE,
    LOG_LEVEL,
    HOST,
    PORT,
)

__all__ = [
    "APPNAME",
    "VERSION",
    "DATA_SOURCE",
    "DATA_SOURCE_TIMEOUT",
    "COMPARE_LIMIT",
    "MIN_COMPARE",
    "COMPARE_SESSION_TTL",
    "DEFAULT_LANGUAGE",
    "SUPPORTED_LANGUAGES",
    "LANGUAGE_COOKIE",
    "LOG_LEVEL",
    "HOST",
    "PORT",
]
