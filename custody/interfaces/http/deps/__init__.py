"""Reusable FastAPI dependencies."""

from custody.core.security import get_current_caller

from .engine import get_custody_engine

__all__ = [
    "get_current_caller",
    "get_custody_engine",
]
