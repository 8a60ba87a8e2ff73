"""Latitude/longitude value types and their text codecs."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .errors import MapsValidationError

PAIR_SEPARATOR = ","
LIST_SEPARATOR = "|"


def format_coordinate(value: float) -> str:
    """Shortest round-tripping text for a coordinate, without a trailing ``.0``."""

    text = repr(float(value))
    if text.endswith(".0"):
        return text[:-2]
    return text


@dataclass(slots=True, frozen=True)
class LatLng:
    lat: float
    lng: float

    def __str__(self) -> str:
        return f"{format_coordinate(self.lat)}{PAIR_SEPARATOR}{format_coordinate(self.lng)}"

    def almost_equal(self, other: "LatLng", epsilon: float) -> bool:
        return abs(self.lat - other.lat) < epsilon and abs(self.lng - other.lng) < epsilon


@dataclass(slots=True, frozen=True)
class LatLngBounds:
    north_east: LatLng
    south_west: LatLng

    def __str__(self) -> str:
        return f"{self.south_west}{LIST_SEPARATOR}{self.north_east}"


def parse_latlng(location: str) -> LatLng:
    parts = location.split(PAIR_SEPARATOR)
    if len(parts) != 2:
        raise MapsValidationError(
            f"maps: invalid LatLng '{location}'",
            fields=("location",),
            value=location,
        )
    try:
        return LatLng(lat=float(parts[0]), lng=float(parts[1]))
    except ValueError as exc:
        raise MapsValidationError(
            f"maps: invalid LatLng '{location}'",
            fields=("location",),
            value=location,
        ) from exc


def parse_latlng_list(locations: str) -> list[LatLng]:
    return [parse_latlng(item) for item in locations.split(LIST_SEPARATOR)]


def join_latlngs(points: Iterable[LatLng]) -> str:
    return LIST_SEPARATOR.join(str(point) for point in points)


def latlng_from_wire(item: object) -> LatLng | None:
    if not isinstance(item, dict):
        return None
    lat = item.get("lat", item.get("latitude"))
    lng = item.get("lng", item.get("longitude"))
    if not isinstance(lat, (int, float)) or not isinstance(lng, (int, float)):
        return None
    return LatLng(lat=float(lat), lng=float(lng))


def latlng_to_wire(point: LatLng | None) -> dict[str, float] | None:
    if point is None:
        return None
    return {"lat": point.lat, "lng": point.lng}


def bounds_from_wire(item: object) -> LatLngBounds | None:
    if not isinstance(item, dict):
        return None
    north_east = latlng_from_wire(item.get("northeast"))
    south_west = latlng_from_wire(item.get("southwest"))
    if north_east is None or south_west is None:
        return None
    return LatLngBounds(north_east=north_east, south_west=south_west)


def bounds_to_wire(bounds: LatLngBounds | None) -> dict[str, object] | None:
    if bounds is None:
        return None
    return {
        "northeast": latlng_to_wire(bounds.north_east),
        "southwest": latlng_to_wire(bounds.south_west),
    }


__all__ = [
    "LatLng",
    "LatLngBounds",
    "format_coordinate",
    "parse_latlng",
    "parse_latlng_list",
    "join_latlngs",
    "latlng_from_wire",
    "latlng_to_wire",
    "bounds_from_wire",
    "bounds_to_wire",
]
