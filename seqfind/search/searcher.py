"""Search functions bound to a :class:`SearchConfig`."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any, TypeVar

from seqfind.core.maybe import Maybe
from seqfind.search import elements, indices, instances
from seqfind.search.elements import Predicate
from seqfind.utils.config import SearchConfig
from seqfind.utils.logging import get_logger

T = TypeVar("T")


class Searcher:
    """Expose every search operation with defaults taken from one configuration.

    Example
    -------
    ```python
    from seqfind import Searcher, SearchConfig

    searcher = Searcher(SearchConfig(empty_token="empty", output=tuple))
    searcher.find_all_instances_of("ab", "abcab")  # (0, 3)
    searcher.find_all_instances_of("", "abcab")    # ()
    ```
    """

    def __init__(self, config: SearchConfig | None = None) -> None:
        self._config = config or SearchConfig()
        self._logger = get_logger("searcher")
        self._logger.debug("Searcher configured: %s", self._config.as_dict())

    @property
    def config(self) -> SearchConfig:
        return self._config

    def find_first_by(self, pred: Predicate[T], xs: Iterable[T]) -> Maybe[T]:
        return elements.find_first_by(pred, xs)

    def find_last_by(self, pred: Predicate[T], xs: Sequence[T]) -> Maybe[T]:
        return elements.find_last_by(pred, xs)

    def find_first_idx_by(self, pred: Predicate[T], xs: Iterable[T]) -> Maybe[int]:
        return elements.find_first_idx_by(pred, xs)

    def find_last_idx_by(self, pred: Predicate[T], xs: Sequence[T]) -> Maybe[int]:
        return elements.find_last_idx_by(pred, xs)

    def find_first_idx(self, x: T, xs: Iterable[T]) -> Maybe[int]:
        return elements.find_first_idx(x, xs)

    def find_last_idx(self, x: T, xs: Sequence[T]) -> Maybe[int]:
        return elements.find_last_idx(x, xs)

    def find_all_idxs_by(self, pred: Predicate[T], xs: Iterable[T]) -> Any:
        return indices.find_all_idxs_by(pred, xs, out=self._config.output)

    def find_all_idxs_of(self, x: T, xs: Iterable[T]) -> Any:
        return indices.find_all_idxs_of(x, xs, out=self._config.output)

    def find_all_instances_of(self, token: Sequence[T], xs: Sequence[T]) -> Any:
        return instances.find_all_instances_of(token, xs, **self._instance_options())

    def find_all_instances_of_non_overlapping(self, token: Sequence[T], xs: Sequence[T]) -> Any:
        return instances.find_all_instances_of_non_overlapping(token, xs, **self._instance_options())

    def _instance_options(self) -> dict[str, Any]:
        return {
            "out": self._config.output,
            "empty_token": self._config.empty_token,
            "use_numpy": self._config.use_numpy,
        }


__all__ = ["Searcher"]
