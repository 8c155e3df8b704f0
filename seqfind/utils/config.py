"""Configuration utilities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any

from seqfind.core.composition import OutputFactory


class EmptyTokenPolicy(Enum):
    """What subsequence search does with a zero-length token.

    - ``RAISE``: reject the token with ``ValueError``
    - ``EMPTY``: report no occurrences
    - ``EVERY_INDEX``: report every index of the haystack
    """

    RAISE = "raise"
    EMPTY = "empty"
    EVERY_INDEX = "every_index"

    @classmethod
    def coerce(cls, value: EmptyTokenPolicy | str) -> EmptyTokenPolicy:
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            allowed = ", ".join(policy.value for policy in cls)
            msg = f"Unknown empty-token policy '{value}' (expected one of: {allowed})"
            raise ValueError(msg) from None


@dataclass(frozen=True, slots=True)
class SearchConfig:
    empty_token: EmptyTokenPolicy = EmptyTokenPolicy.RAISE
    output: OutputFactory = list
    use_numpy: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "empty_token", EmptyTokenPolicy.coerce(self.empty_token))
        if not callable(self.output):
            msg = "output must be a callable building a container from a list of indices"
            raise ValueError(msg)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> SearchConfig:
        known = {item.name for item in fields(cls)}
        unknown = set(data) - known
        if unknown:
            msg = f"Unknown search config keys: {sorted(unknown)}"
            raise ValueError(msg)
        return cls(**dict(data))

    def as_dict(self) -> dict[str, Any]:
        return {
            "empty_token": self.empty_token.value,
            "output": getattr(self.output, "__name__", repr(self.output)),
            "use_numpy": self.use_numpy,
        }
