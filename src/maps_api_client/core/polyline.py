"""Encoded polyline algorithm (1e5 precision)."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from .errors import MapsDecodeError
from .latlng import LatLng

_PRECISION = 1e5
_CHUNK_BITS = 5
_CHUNK_MASK = 0x1F
_CONTINUATION = 0x20
_OFFSET = 63

ENCODED_PREFIX = "enc:"


def _encode_value(value: int, out: list[str]) -> None:
    value = ~(value << 1) if value < 0 else value << 1
    while value >= _CONTINUATION:
        out.append(chr((_CONTINUATION | (value & _CHUNK_MASK)) + _OFFSET))
        value >>= _CHUNK_BITS
    out.append(chr(value + _OFFSET))


def _decode_values(points: str) -> Iterator[int]:
    index = 0
    length = len(points)
    while index < length:
        result = 0
        shift = 0
        while True:
            if index >= length:
                raise MapsDecodeError("encoded polyline is truncated")
            chunk = ord(points[index]) - _OFFSET
            index += 1
            if chunk < 0 or chunk > 0x3F:
                raise MapsDecodeError("encoded polyline contains an invalid character")
            result |= (chunk & _CHUNK_MASK) << shift
            shift += _CHUNK_BITS
            if chunk < _CONTINUATION:
                break
        yield ~(result >> 1) if result & 1 else result >> 1


def encode_polyline(path: Iterable[LatLng]) -> str:
    out: list[str] = []
    prev_lat = 0
    prev_lng = 0
    for point in path:
        lat = round(point.lat * _PRECISION)
        lng = round(point.lng * _PRECISION)
        _encode_value(lat - prev_lat, out)
        _encode_value(lng - prev_lng, out)
        prev_lat, prev_lng = lat, lng
    return "".join(out)


def decode_polyline(points: str) -> list[LatLng]:
    values = list(_decode_values(points))
    if len(values) % 2:
        raise MapsDecodeError("encoded polyline has an odd number of values")
    path: list[LatLng] = []
    lat = 0
    lng = 0
    for index in range(0, len(values), 2):
        lat += values[index]
        lng += values[index + 1]
        path.append(LatLng(lat=lat / _PRECISION, lng=lng / _PRECISION))
    return path


@dataclass(slots=True, frozen=True)
class Polyline:
    points: str = ""

    def decode(self) -> list[LatLng]:
        return decode_polyline(self.points)


__all__ = [
    "ENCODED_PREFIX",
    "Polyline",
    "encode_polyline",
    "decode_polyline",
]
