"""Request parameter builder and response decoder for the static map endpoint."""

from __future__ import annotations

from ..core.errors import MapsHttpError
from ..core.latlng import join_latlngs
from ..core.models import BinaryResponse, RawResponse
from ..core.query import QueryParams
from .requests import StaticMapRequest
from .styles import encode_styles


def build_static_map_params(request: StaticMapRequest) -> QueryParams:
    params = QueryParams()
    if request.center:
        params.set("center", request.center)
    if request.zoom > 0:
        params.set("zoom", request.zoom)
    if request.size:
        params.set("size", request.size)
    if request.scale > 0:
        params.set("scale", request.scale)
    if request.format:
        params.set("format", request.format)
    if request.language:
        params.set("language", request.language)
    if request.region:
        params.set("region", request.region)
    if request.map_type:
        params.set("maptype", request.map_type)
    for marker in request.markers:
        params.add("markers", marker.to_param())
    for path in request.paths:
        params.add("path", path.to_param())
    if request.visible:
        params.set("visible", join_latlngs(request.visible))
    for style in encode_styles(request.styles):
        params.add("style", style)
    return params


def decode_static_map_response(response: RawResponse) -> BinaryResponse:
    status = response.status_code
    if status != 200:
        body = response.content.decode("utf-8", errors="replace")
        raise MapsHttpError(f"maps: Maps Static API: {status} - {body}", http_status=status)
    return BinaryResponse(content_type=response.content_type, data=response.content)


__all__ = [
    "build_static_map_params",
    "decode_static_map_response",
]
