"""Collect every index matching a predicate or a value."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, TypeVar

import numpy as np

from seqfind.core.composition import OutputFactory, bind_1st_of_2, collect, is_equal
from seqfind.search.elements import Predicate
from seqfind.utils.validation import ensure_predicate

T = TypeVar("T")

_LOGGER = logging.getLogger(__name__)


def find_all_idxs_by(pred: Predicate[T], xs: Iterable[T], *, out: OutputFactory = list) -> Any:
    """Return the ascending indices of all elements satisfying ``pred``.

    >>> find_all_idxs_by(lambda x: x % 2 == 0, [1, 3, 4, 6, 9])
    [2, 3]
    """
    ensure_predicate(pred)
    result: list[int] = []
    for idx, x in enumerate(xs):
        if pred(x):
            result.append(idx)
    return collect(result, out)


def _scan_value_numpy(x: object, xs: np.ndarray) -> list[int] | None:
    """Vectorized value scan; ``None`` when ``x`` is not a scalar numpy can compare."""
    try:
        if np.ndim(x) != 0:
            return None
        matches = np.asarray(xs == x)
    except (TypeError, ValueError):
        return None
    if matches.shape != xs.shape:
        return None
    _LOGGER.debug("Vectorized value scan over %d elements", xs.size)
    return np.flatnonzero(matches).tolist()


def find_all_idxs_of(x: T, xs: Iterable[T], *, out: OutputFactory = list) -> Any:
    """Return the ascending indices of all elements equal to ``x``.

    One-dimensional numpy arrays are compared in a single vectorized step.

    >>> find_all_idxs_of(4, [1, 3, 4, 4, 9])
    [2, 3]
    """
    if isinstance(xs, np.ndarray) and xs.ndim == 1:
        found = _scan_value_numpy(x, xs)
        if found is not None:
            return collect(found, out)
    return find_all_idxs_by(bind_1st_of_2(is_equal, x), xs, out=out)


__all__ = ["find_all_idxs_by", "find_all_idxs_of"]
