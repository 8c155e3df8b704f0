"""Core value types and composition helpers."""

from .composition import bind_1st_of_2, collect, is_equal, reverse, size_of_cont
from .maybe import Maybe, just, nothing

__all__ = [
    "Maybe",
    "just",
    "nothing",
    "bind_1st_of_2",
    "collect",
    "is_equal",
    "reverse",
    "size_of_cont",
]
