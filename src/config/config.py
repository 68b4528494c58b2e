# src/config.py
import os
from dotenv import load_dotenv
load_dotenv()

APPNAME = "Jan Saarthi API"
VERSION = "v1"

# Dataset: a local path or an http(s) URL, read once at startup
DATA_SOURCE = os.getenv("DATA_SOURCE", "data/candidates.json")
DATA_SOURCE_TIMEOUT = float(os.getenv("DATA_SOURCE_TIMEOUT", "10"))

# Comparison set bounds
COMPARE_LIMIT = 5
MIN_COMPARE = 2

# Locale
DEFAULT_LANGUAGE = "en"
SUPPORTED_LANGUAGES = ("en", "hi")
LANGUAGE_COOKIE = "jan-saarthi-language"

# Idle comparison sessions are discarded after this many seconds
COMPARE_SESSION_TTL = float(os.getenv("COMPARE_SESSION_TTL", "3600"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "5001"))
