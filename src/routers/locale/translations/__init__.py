from .en import en
from .hi import hi

translations = {
    "en": en,
    "hi": hi,
}

__all__ = ["translations", "en", "hi"]
