"""Request models for the snap to roads, nearest roads and speed limits endpoints."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from ..core.latlng import LatLng


@dataclass(slots=True)
class SnapToRoadRequest:
    OPERATION: ClassVar[str] = "snap_to_road"

    path: tuple[LatLng, ...] = ()
    interpolate: bool = False


@dataclass(slots=True)
class NearestRoadsRequest:
    OPERATION: ClassVar[str] = "nearest_roads"

    points: tuple[LatLng, ...] = ()


@dataclass(slots=True)
class SpeedLimitsRequest:
    """Speed limits along a path, for explicit place IDs, or both."""

    OPERATION: ClassVar[str] = "speed_limits"

    path: tuple[LatLng, ...] = ()
    place_ids: tuple[str, ...] = ()
    speed_limit_units: str = ""


__all__ = [
    "SnapToRoadRequest",
    "NearestRoadsRequest",
    "SpeedLimitsRequest",
]
