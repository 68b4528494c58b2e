from .config import config
from .database import dataset
from .utils import formatting

__all__ = [
    "config",
    "dataset",
    "formatting"
]
