"""Cross-field validation for roads requests."""

from __future__ import annotations

from ..core.validation import missing, missing_one_of
from .requests import NearestRoadsRequest, SnapToRoadRequest, SpeedLimitsRequest


def validate_snap_to_road_request(request: SnapToRoadRequest) -> None:
    if not request.path:
        raise missing(request.OPERATION, "path", "maps: Path empty")


def validate_nearest_roads_request(request: NearestRoadsRequest) -> None:
    if not request.points:
        raise missing(request.OPERATION, "points", "maps: Points empty")


def validate_speed_limits_request(request: SpeedLimitsRequest) -> None:
    if not request.path and not request.place_ids:
        raise missing_one_of(
            request.OPERATION,
            ("path", "place_ids"),
            "maps: Path and PlaceID both empty",
        )


__all__ = [
    "validate_snap_to_road_request",
    "validate_nearest_roads_request",
    "validate_speed_limits_request",
]
