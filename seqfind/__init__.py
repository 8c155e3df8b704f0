"""seqfind public interface.

Search primitives live under ``seqfind.search``; the optional-value type under
``seqfind.core``.
"""

from __future__ import annotations

from .core import Maybe, just, nothing
from .search import (
    Searcher,
    find_all_idxs_by,
    find_all_idxs_of,
    find_all_instances_of,
    find_all_instances_of_non_overlapping,
    find_first_by,
    find_first_idx,
    find_first_idx_by,
    find_last_by,
    find_last_idx,
    find_last_idx_by,
)
from .utils import EmptyTokenPolicy, SearchConfig, get_logger

__all__ = [
    "EmptyTokenPolicy",
    "Maybe",
    "SearchConfig",
    "Searcher",
    "find_all_idxs_by",
    "find_all_idxs_of",
    "find_all_instances_of",
    "find_all_instances_of_non_overlapping",
    "find_first_by",
    "find_first_idx",
    "find_first_idx_by",
    "find_last_by",
    "find_last_idx",
    "find_last_idx_by",
    "get_logger",
    "just",
    "nothing",
]

__version__ = "0.1.0"
