"""Field tables mapping wire JSON keys onto response dataclass attributes.

A table lists the fields whose wire shape is copied through literally. Types
with enriched fields (durations, timestamps) decode the table first and then
overlay the codec results, and encode the same way in reverse, so each custom
conversion is written once next to the type that needs it.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass


def _identity(value: object) -> object:
    return value


@dataclass(slots=True, frozen=True)
class WireField:
    attr: str
    key: str
    decode: Callable[[object], object] = _identity
    encode: Callable[[object], object] = _identity


def decode_fields(item: Mapping[str, object], table: tuple[WireField, ...]) -> dict[str, object]:
    return {field.attr: field.decode(item.get(field.key)) for field in table}


def encode_fields(source: object, table: tuple[WireField, ...]) -> dict[str, object]:
    out: dict[str, object] = {}
    for field in table:
        value = field.encode(getattr(source, field.attr))
        if value is not None:
            out[field.key] = value
    return out


def put(out: dict[str, object], key: str, value: object) -> None:
    """Set ``out[key]`` unless ``value`` is ``None``."""

    if value is not None:
        out[key] = value


__all__ = [
    "WireField",
    "decode_fields",
    "encode_fields",
    "put",
]
