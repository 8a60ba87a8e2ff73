"""Request parameter builders for routing endpoints."""

from __future__ import annotations

from ..core.codecs import join_pipe
from ..core.query import QueryParams
from .requests import DirectionsRequest, DistanceMatrixRequest

_OPTIMIZE_PREFIX = "optimize:true"


def build_waypoints_param(request: DirectionsRequest) -> str:
    if request.optimize_waypoints:
        return join_pipe((_OPTIMIZE_PREFIX, *request.waypoints))
    return join_pipe(request.waypoints)


def build_directions_params(request: DirectionsRequest) -> QueryParams:
    params = QueryParams()
    params.set("origin", request.origin)
    params.set("destination", request.destination)
    if request.mode:
        params.set("mode", request.mode)
    if request.waypoints:
        params.set("waypoints", build_waypoints_param(request))
    if request.alternatives:
        params.set("alternatives", "true")
    if request.avoid:
        params.set("avoid", join_pipe(request.avoid))
    if request.language:
        params.set("language", request.language)
    if request.units:
        params.set("units", request.units)
    if request.region:
        params.set("region", request.region)
    if request.departure_time:
        params.set("departure_time", request.departure_time)
    if request.arrival_time:
        params.set("arrival_time", request.arrival_time)
    if request.traffic_model:
        params.set("traffic_model", request.traffic_model)
    if request.transit_mode:
        params.set("transit_mode", join_pipe(request.transit_mode))
    if request.transit_routing_preference:
        params.set("transit_routing_preference", request.transit_routing_preference)
    return params


def build_distance_matrix_params(request: DistanceMatrixRequest) -> QueryParams:
    params = QueryParams()
    params.set("origins", join_pipe(request.origins))
    params.set("destinations", join_pipe(request.destinations))
    if request.mode:
        params.set("mode", request.mode)
    if request.language:
        params.set("language", request.language)
    if request.avoid:
        params.set("avoid", join_pipe(request.avoid))
    if request.units:
        params.set("units", request.units)
    if request.region:
        params.set("region", request.region)
    if request.departure_time:
        params.set("departure_time", request.departure_time)
    if request.arrival_time:
        params.set("arrival_time", request.arrival_time)
    if request.traffic_model:
        params.set("traffic_model", request.traffic_model)
    if request.transit_mode:
        params.set("transit_mode", join_pipe(request.transit_mode))
    if request.transit_routing_preference:
        params.set("transit_routing_preference", request.transit_routing_preference)
    return params


__all__ = [
    "build_waypoints_param",
    "build_directions_params",
    "build_distance_matrix_params",
]
