"""Roads response models."""

from __future__ import annotations

from dataclasses import dataclass

from ..core.latlng import LatLng


@dataclass(slots=True, frozen=True)
class SnappedPoint:
    """Path point moved onto a road.

    ``original_index`` is ``None`` for points added by interpolation.
    """

    location: LatLng | None = None
    original_index: int | None = None
    place_id: str = ""


@dataclass(slots=True, frozen=True)
class SnapToRoadResponse:
    snapped_points: tuple[SnappedPoint, ...] = ()
    warning_message: str = ""


@dataclass(slots=True, frozen=True)
class NearestRoadsResponse:
    snapped_points: tuple[SnappedPoint, ...] = ()


@dataclass(slots=True, frozen=True)
class SpeedLimit:
    place_id: str = ""
    speed_limit: float = 0.0
    units: str = ""


@dataclass(slots=True, frozen=True)
class SpeedLimitsResponse:
    speed_limits: tuple[SpeedLimit, ...] = ()
    snapped_points: tuple[SnappedPoint, ...] = ()


__all__ = [
    "SnappedPoint",
    "SnapToRoadResponse",
    "NearestRoadsResponse",
    "SpeedLimit",
    "SpeedLimitsResponse",
]
