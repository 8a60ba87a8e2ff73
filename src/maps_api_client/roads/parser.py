"""Parsers from roads payloads into typed responses."""

from __future__ import annotations

from ..core.latlng import latlng_from_wire
from ..core.response_parsing import (
    JsonObject,
    number,
    objects,
    optional_integer,
    text,
)
from .models import (
    NearestRoadsResponse,
    SnappedPoint,
    SnapToRoadResponse,
    SpeedLimit,
    SpeedLimitsResponse,
)


def parse_snapped_point(item: JsonObject) -> SnappedPoint:
    return SnappedPoint(
        location=latlng_from_wire(item.get("location")),
        original_index=optional_integer(item.get("originalIndex"), name="originalIndex"),
        place_id=text(item.get("placeId")),
    )


def _snapped_points(payload: JsonObject) -> tuple[SnappedPoint, ...]:
    return tuple(
        parse_snapped_point(item)
        for item in objects(payload.get("snappedPoints"), name="snappedPoints")
    )


def parse_speed_limit(item: JsonObject) -> SpeedLimit:
    return SpeedLimit(
        place_id=text(item.get("placeId")),
        speed_limit=number(item.get("speedLimit"), name="speedLimit"),
        units=text(item.get("units")),
    )


def parse_snap_to_road_response(payload: JsonObject) -> SnapToRoadResponse:
    return SnapToRoadResponse(
        snapped_points=_snapped_points(payload),
        warning_message=text(payload.get("warningMessage")),
    )


def parse_nearest_roads_response(payload: JsonObject) -> NearestRoadsResponse:
    return NearestRoadsResponse(snapped_points=_snapped_points(payload))


def parse_speed_limits_response(payload: JsonObject) -> SpeedLimitsResponse:
    return SpeedLimitsResponse(
        speed_limits=tuple(
            parse_speed_limit(item)
            for item in objects(payload.get("speedLimits"), name="speedLimits")
        ),
        snapped_points=_snapped_points(payload),
    )


__all__ = [
    "parse_snapped_point",
    "parse_speed_limit",
    "parse_snap_to_road_response",
    "parse_nearest_roads_response",
    "parse_speed_limits_response",
]
