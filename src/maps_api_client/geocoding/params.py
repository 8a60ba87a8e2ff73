"""Request parameter builders for geocoding, time zone and elevation."""

from __future__ import annotations

from collections.abc import Mapping

from ..core.codecs import epoch_seconds, join_pipe
from ..core.polyline import ENCODED_PREFIX, encode_polyline
from ..core.query import QueryParams
from .requests import ElevationRequest, GeocodingRequest, TimezoneRequest


def build_components_param(components: Mapping[str, tuple[str, ...]]) -> str:
    """``key:value`` filters joined by pipes, keys sorted, values in caller order."""

    return join_pipe(
        f"{key}:{value}" for key in sorted(components) for value in components[key]
    )


def build_geocoding_params(request: GeocodingRequest) -> QueryParams:
    params = QueryParams()
    if request.address:
        params.set("address", request.address)
    if request.components:
        params.set("components", build_components_param(request.components))
    if request.bounds is not None:
        params.set("bounds", request.bounds)
    if request.region:
        params.set("region", request.region)
    if request.latlng is not None:
        params.set("latlng", request.latlng)
    if request.place_id:
        params.set("place_id", request.place_id)
    if request.result_type:
        params.set("result_type", join_pipe(request.result_type))
    if request.location_type:
        params.set("location_type", join_pipe(request.location_type))
    if request.language:
        params.set("language", request.language)
    return params


def build_timezone_params(request: TimezoneRequest) -> QueryParams:
    """``timestamp`` is required by the service; an unset one is sent as epoch 0."""

    params = QueryParams()
    params.set("location", request.location)
    timestamp = 0 if request.timestamp is None else epoch_seconds(request.timestamp)
    params.set("timestamp", timestamp)
    if request.language:
        params.set("language", request.language)
    return params


def build_elevation_params(request: ElevationRequest) -> QueryParams:
    params = QueryParams()
    if request.path:
        params.set("path", ENCODED_PREFIX + encode_polyline(request.path))
        params.set("samples", request.samples)
    if request.locations:
        params.set("locations", ENCODED_PREFIX + encode_polyline(request.locations))
    return params


__all__ = [
    "build_components_param",
    "build_geocoding_params",
    "build_timezone_params",
    "build_elevation_params",
]
