# src/routers/__init__.py
from .candidates.main import router as candidates_router
from .comparison.main import router as comparison_router
from .locale.main import router as locale_router

__all__ = [
    "candidates_router",
    "comparison_router",
    "locale_router",
           ]
