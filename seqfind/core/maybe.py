"""Optional value container."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True, slots=True, kw_only=True)
class Maybe(Generic[T]):
    """Either one value (``Just``) or no value (``Nothing``).

    ``Just(None)`` holds a value and is not equal to ``Nothing``. Use
    :meth:`map` to transform the contained value without unpacking it.
    """

    value: T | None = None
    is_just: bool = False

    def __post_init__(self) -> None:
        if not self.is_just and self.value is not None:
            msg = "Nothing cannot hold a value; use Maybe.just(value)"
            raise ValueError(msg)

    @classmethod
    def just(cls, value: T) -> Maybe[T]:
        return cls(value=value, is_just=True)

    @classmethod
    def nothing(cls) -> Maybe[T]:
        return cls()

    @property
    def is_nothing(self) -> bool:
        return not self.is_just

    def map(self, fn: Callable[[T], U]) -> Maybe[U]:
        """Apply ``fn`` to the contained value; ``Nothing`` passes through untouched."""
        if not self.is_just:
            return Maybe()
        return Maybe(value=fn(self.value), is_just=True)  # type: ignore[arg-type]

    def get_with_default(self, default: T) -> T:
        return self.value if self.is_just else default  # type: ignore[return-value]

    def unsafe_get_just(self) -> T:
        if not self.is_just:
            msg = "Cannot extract a value from Nothing"
            raise ValueError(msg)
        return self.value  # type: ignore[return-value]

    def __bool__(self) -> bool:
        return self.is_just

    def __repr__(self) -> str:
        return f"Just({self.value!r})" if self.is_just else "Nothing"


def just(value: T) -> Maybe[T]:
    return Maybe.just(value)


def nothing() -> Maybe[T]:
    return Maybe.nothing()


__all__ = ["Maybe", "just", "nothing"]
