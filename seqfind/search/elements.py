"""First/last element and index finders.

All six finders share one forward scan (:func:`_scan_first`). The "last"
variants run that scan over a reversed view and, for indices, map the result
back to positions in the unreversed input, so both directions apply the same
tie-breaking rule.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from operator import itemgetter
from typing import TypeVar

from seqfind.core.composition import bind_1st_of_2, is_equal, reverse
from seqfind.core.maybe import Maybe, just, nothing
from seqfind.utils.validation import ensure_predicate, ensure_sized

T = TypeVar("T")

Predicate = Callable[[T], object]


def _scan_first(pred: Predicate[T], xs: Iterable[T]) -> Maybe[tuple[int, T]]:
    for idx, x in enumerate(xs):
        if pred(x):
            return just((idx, x))
    return nothing()


def find_first_by(pred: Predicate[T], xs: Iterable[T]) -> Maybe[T]:
    """Return the first element satisfying ``pred``.

    >>> find_first_by(lambda x: x % 2 == 0, [1, 3, 4, 6, 9])
    Just(4)
    >>> find_first_by(lambda x: x % 2 == 0, [1, 3, 5, 7, 9])
    Nothing
    """
    ensure_predicate(pred)
    return _scan_first(pred, xs).map(itemgetter(1))


def find_last_by(pred: Predicate[T], xs: Sequence[T]) -> Maybe[T]:
    """Return the last element satisfying ``pred``.

    >>> find_last_by(lambda x: x % 2 == 0, [1, 3, 4, 6, 9])
    Just(6)
    """
    ensure_predicate(pred)
    ensure_sized(xs)
    return find_first_by(pred, reverse(xs))


def find_first_idx_by(pred: Predicate[T], xs: Iterable[T]) -> Maybe[int]:
    """Return the index of the first element satisfying ``pred``.

    >>> find_first_idx_by(lambda x: x % 2 == 0, [1, 3, 4, 6, 9])
    Just(2)
    """
    ensure_predicate(pred)
    return _scan_first(pred, xs).map(itemgetter(0))


def find_last_idx_by(pred: Predicate[T], xs: Sequence[T]) -> Maybe[int]:
    """Return the index of the last element satisfying ``pred``.

    >>> find_last_idx_by(lambda x: x % 2 == 0, [1, 3, 4, 6, 9])
    Just(3)
    """
    ensure_predicate(pred)
    size = ensure_sized(xs)

    def from_reversed(idx: int) -> int:
        return size - (idx + 1)

    return find_first_idx_by(pred, reverse(xs)).map(from_reversed)


def find_first_idx(x: T, xs: Iterable[T]) -> Maybe[int]:
    """Return the index of the first element equal to ``x``.

    >>> find_first_idx(4, [1, 3, 4, 4, 9])
    Just(2)
    """
    return find_first_idx_by(bind_1st_of_2(is_equal, x), xs)


def find_last_idx(x: T, xs: Sequence[T]) -> Maybe[int]:
    """Return the index of the last element equal to ``x``.

    >>> find_last_idx(4, [1, 3, 4, 4, 9])
    Just(3)
    """
    return find_last_idx_by(bind_1st_of_2(is_equal, x), xs)


__all__ = [
    "Predicate",
    "find_first_by",
    "find_first_idx",
    "find_first_idx_by",
    "find_last_by",
    "find_last_idx",
    "find_last_idx_by",
]
