"""Routers for the Reverse Words API."""

from .metrics import router as metrics_router
from .words import router as words_router

__all__ = ["metrics_router", "words_router"]
