"""Sequence search operations.

Element and index finders return a :class:`~seqfind.core.maybe.Maybe`; the
``find_all_*`` functions return a match-set of ascending indices.
"""

from __future__ import annotations

from seqfind.search.elements import (
    find_first_by,
    find_first_idx,
    find_first_idx_by,
    find_last_by,
    find_last_idx,
    find_last_idx_by,
)
from seqfind.search.indices import find_all_idxs_by, find_all_idxs_of
from seqfind.search.instances import (
    find_all_instances_of,
    find_all_instances_of_non_overlapping,
)
from seqfind.search.searcher import Searcher

__all__ = [
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
]
