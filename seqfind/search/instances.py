"""Exact subsequence (token) search.

:func:`find_all_instances_of` slides a window of ``len(token)`` over the
haystack and records every start index whose window equals the token element by
element, overlapping occurrences included. :func:`find_all_instances_of_non_overlapping`
filters that ascending result greedily from the left.

A zero-length token has no natural answer; :class:`~seqfind.utils.config.EmptyTokenPolicy`
selects one.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, TypeVar

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view

from seqfind.core.composition import OutputFactory, collect, is_equal, size_of_cont
from seqfind.utils.config import EmptyTokenPolicy
from seqfind.utils.validation import ensure_sized

T = TypeVar("T")

_LOGGER = logging.getLogger(__name__)


def _window_equals(xs: Sequence[T], start: int, token: Sequence[T], token_size: int) -> bool:
    for offset in range(token_size):
        if not is_equal(xs[start + offset], token[offset]):
            return False
    return True


def _scan_windows(token: Sequence[T], xs: Sequence[T], token_size: int, last_start: int) -> list[int]:
    return [
        idx
        for idx in range(last_start + 1)
        if _window_equals(xs, idx, token, token_size)
    ]


def _scan_windows_numpy(token: Sequence[T], xs: np.ndarray, token_size: int) -> list[int] | None:
    """Vectorized window scan; ``None`` when the token cannot be compared element-wise."""
    try:
        pattern = np.asarray(token)
    except ValueError:
        return None
    if pattern.ndim != 1:
        return None
    windows = sliding_window_view(xs, token_size)
    try:
        matches = np.asarray(windows == pattern)
    except (TypeError, ValueError):
        return None
    if matches.shape != windows.shape:
        return None
    _LOGGER.debug("Vectorized scan of %d windows", windows.shape[0])
    return np.flatnonzero(matches.all(axis=1)).tolist()


def _empty_token_matches(size: int, policy: EmptyTokenPolicy) -> list[int]:
    if policy is EmptyTokenPolicy.RAISE:
        msg = "Cannot search for an empty token"
        raise ValueError(msg)
    _LOGGER.debug("Empty token resolved with policy '%s'", policy.value)
    if policy is EmptyTokenPolicy.EVERY_INDEX:
        return list(range(size))
    return []


def _instances(
    token: Sequence[T],
    xs: Sequence[T],
    empty_token: EmptyTokenPolicy | str,
    use_numpy: bool,
) -> list[int]:
    token_size = ensure_sized(token, "token")
    size = ensure_sized(xs, "haystack")

    if token_size == 0:
        return _empty_token_matches(size, EmptyTokenPolicy.coerce(empty_token))
    if token_size > size:
        return []

    if use_numpy and isinstance(xs, np.ndarray) and xs.ndim == 1:
        found = _scan_windows_numpy(token, xs, token_size)
        if found is not None:
            return found

    last_start = size - token_size
    _LOGGER.debug("Scanning %d windows of size %d", last_start + 1, token_size)
    return _scan_windows(token, xs, token_size, last_start)


def find_all_instances_of(
    token: Sequence[T],
    xs: Sequence[T],
    *,
    out: OutputFactory = list,
    empty_token: EmptyTokenPolicy | str = EmptyTokenPolicy.RAISE,
    use_numpy: bool = True,
) -> Any:
    """Return the start index of every occurrence of ``token`` in ``xs``.

    Overlapping occurrences are all reported, in ascending order.

    >>> find_all_instances_of("haha", "oh, hahaha!")
    [4, 6]

    Raises:
        ValueError: ``token`` is empty and ``empty_token`` is ``RAISE``.
        TypeError: ``token`` or ``xs`` does not support ``len()``.
    """
    return collect(_instances(token, xs, empty_token, use_numpy), out)


def find_all_instances_of_non_overlapping(
    token: Sequence[T],
    xs: Sequence[T],
    *,
    out: OutputFactory = list,
    empty_token: EmptyTokenPolicy | str = EmptyTokenPolicy.RAISE,
    use_numpy: bool = True,
) -> Any:
    """Return start indices of occurrences of ``token`` that do not overlap.

    Occurrences are taken greedily from the left: each accepted one starts at
    or after the end of the previously accepted one.

    >>> find_all_instances_of_non_overlapping("haha", "oh, hahaha!")
    [4]
    """
    overlapping = _instances(token, xs, empty_token, use_numpy)
    token_size = size_of_cont(token)
    result: list[int] = []
    for idx in overlapping:
        if not result or result[-1] + token_size <= idx:
            result.append(idx)
    return collect(result, out)


__all__ = ["find_all_instances_of", "find_all_instances_of_non_overlapping"]
