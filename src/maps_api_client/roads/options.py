"""Options specific to roads requests."""

from __future__ import annotations

from ..core.latlng import LatLng
from ..core.options import Option, choice_option, field_option
from .enums import SpeedLimitUnit


def with_interpolate(interpolate: bool = True) -> Option:
    return field_option("interpolate", bool(interpolate))


def with_points(*points: LatLng) -> Option:
    return field_option("points", tuple(points))


def with_place_ids(*place_ids: str) -> Option:
    return field_option("place_ids", tuple(str(item) for item in place_ids))


def with_speed_limit_units(units: SpeedLimitUnit | str) -> Option:
    return choice_option("speed_limit_units", units, SpeedLimitUnit, label="SpeedLimitUnit")


__all__ = [
    "with_interpolate",
    "with_points",
    "with_place_ids",
    "with_speed_limit_units",
]
