"""Utility exports."""

from .config import EmptyTokenPolicy, SearchConfig
from .logging import get_logger
from .validation import ensure_predicate, ensure_sized

__all__ = [
    "EmptyTokenPolicy",
    "SearchConfig",
    "get_logger",
    "ensure_predicate",
    "ensure_sized",
]
