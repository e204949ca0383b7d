"""Reusable FastAPI dependencies."""

from .database import get_db_session
from .templates import get_list_query

__all__ = [
    "get_db_session",
    "get_list_query",
]
