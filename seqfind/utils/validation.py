"""Argument checks for the search functions."""

from __future__ import annotations

from collections.abc import Callable


def ensure_predicate(pred: object) -> Callable[[object], object]:
    """Reject predicates that cannot be called with one element."""
    if not callable(pred):
        msg = f"Predicate must be callable, got {type(pred).__name__}"
        raise TypeError(msg)
    return pred


def ensure_sized(xs: object, name: str = "sequence") -> int:
    """Return ``len(xs)``, raising ``TypeError`` for unsized iterables such as generators."""
    try:
        return len(xs)  # type: ignore[arg-type]
    except TypeError as exc:
        msg = f"{name} must be a finite sequence supporting len(), got {type(xs).__name__}"
        raise TypeError(msg) from exc
