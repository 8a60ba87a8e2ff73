"""Ordered query parameter set with reproducible encoding."""

from __future__ import annotations

from collections.abc import Iterator
from urllib.parse import quote_plus


class QueryParams:
    """Multi-value query mapping; ``encode`` sorts keys, keeps per-key value order."""

    __slots__ = ("_values",)

    def __init__(self) -> None:
        self._values: dict[str, list[str]] = {}

    def set(self, key: str, value: object) -> None:
        self._values[key] = [str(value)]

    def add(self, key: str, value: object) -> None:
        self._values.setdefault(key, []).append(str(value))

    def get(self, key: str) -> str | None:
        values = self._values.get(key)
        return values[0] if values else None

    def get_all(self, key: str) -> list[str]:
        return list(self._values.get(key, ()))

    def copy(self) -> "QueryParams":
        clone = QueryParams()
        for key, values in self._values.items():
            clone._values[key] = list(values)
        return clone

    def items(self) -> Iterator[tuple[str, str]]:
        for key in sorted(self._values):
            for value in self._values[key]:
                yield key, value

    def encode(self) -> str:
        return "&".join(f"{quote_plus(key)}={quote_plus(value)}" for key, value in self.items())

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QueryParams):
            return NotImplemented
        return self._values == other._values

    def __repr__(self) -> str:
        return f"QueryParams({self.encode()!r})"


__all__ = [
    "QueryParams",
]
