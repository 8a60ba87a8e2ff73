"""Request parameter builders for the roads endpoints."""

from __future__ import annotations

from ..core.latlng import join_latlngs
from ..core.query import QueryParams
from .requests import NearestRoadsRequest, SnapToRoadRequest, SpeedLimitsRequest


def build_snap_to_road_params(request: SnapToRoadRequest) -> QueryParams:
    params = QueryParams()
    params.set("path", join_latlngs(request.path))
    if request.interpolate:
        params.set("interpolate", "true")
    return params


def build_nearest_roads_params(request: NearestRoadsRequest) -> QueryParams:
    params = QueryParams()
    params.set("points", join_latlngs(request.points))
    return params


def build_speed_limits_params(request: SpeedLimitsRequest) -> QueryParams:
    """``placeId`` repeats once per ID, in caller order."""

    params = QueryParams()
    if request.path:
        params.set("path", join_latlngs(request.path))
    for place_id in request.place_ids:
        params.add("placeId", place_id)
    if request.speed_limit_units:
        params.set("units", request.speed_limit_units)
    return params


__all__ = [
    "build_snap_to_road_params",
    "build_nearest_roads_params",
    "build_speed_limits_params",
]
