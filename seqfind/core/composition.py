"""Small combinators shared by the search functions."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Reversible, Sized
from functools import partial
from typing import Any, TypeVar

import numpy as np

T = TypeVar("T")

OutputFactory = Callable[[list[int]], Any]


def _array_equal(x: object, y: object) -> bool:
    try:
        return bool(np.array_equal(x, y))
    except ValueError:
        return False


def is_equal(x: object, y: object) -> bool:
    """Element equality reduced to a single ``bool``.

    Comparisons involving numpy arrays, or that numpy broadcasts into an array,
    count as equal only when both sides have the same shape and contents.
    """
    if isinstance(x, np.ndarray) or isinstance(y, np.ndarray):
        return _array_equal(x, y)
    result = x == y
    if isinstance(result, np.ndarray):
        return _array_equal(x, y)
    return bool(result)


def bind_1st_of_2(fn: Callable[[Any, Any], T], x: Any) -> Callable[[Any], T]:
    """Fix the first argument of a two-argument function."""
    return partial(fn, x)


def reverse(xs: Reversible[T]) -> Iterator[T]:
    """Reversed view of ``xs``; the sequence itself is not copied."""
    return reversed(xs)


def size_of_cont(xs: Sized) -> int:
    return len(xs)


def collect(indices: list[int], out: OutputFactory = list) -> Any:
    """Hand an index list to the caller's output factory.

    ``list`` returns ``indices`` as is; any other factory receives the list,
    e.g. ``tuple``, ``collections.deque`` or ``numpy.array``.
    """
    if out is list:
        return indices
    return out(indices)


__all__ = [
    "OutputFactory",
    "bind_1st_of_2",
    "collect",
    "is_equal",
    "reverse",
    "size_of_cont",
]
