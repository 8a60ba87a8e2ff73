"""Request parameter builders for places endpoints."""

from __future__ import annotations

from ..core.codecs import join_comma
from ..core.query import QueryParams
from ..geocoding.params import build_components_param
from .enums import LocationBias
from .requests import (
    FindPlaceFromTextRequest,
    NearbySearchRequest,
    PlaceAutocompleteRequest,
    PlaceDetailsRequest,
    PlacePhotoRequest,
    QueryAutocompleteRequest,
    TextSearchRequest,
)


def build_location_bias_param(request: FindPlaceFromTextRequest) -> str:
    bias = request.location_bias
    if bias == LocationBias.POINT.value:
        return f"point:{request.location_bias_point}"
    if bias == LocationBias.CIRCLE.value:
        return f"circle:{request.location_bias_radius}@{request.location_bias_center}"
    if bias == LocationBias.RECTANGLE.value:
        return f"rectangle:{request.location_bias_south_west}|{request.location_bias_north_east}"
    return bias


def _set_prices(params: QueryParams, min_price: str, max_price: str) -> None:
    if min_price:
        params.set("minprice", min_price)
    if max_price:
        params.set("maxprice", max_price)


def build_nearby_search_params(request: NearbySearchRequest) -> QueryParams:
    params = QueryParams()
    if request.location is not None:
        params.set("location", request.location)
    if request.radius:
        params.set("radius", request.radius)
    if request.keyword:
        params.set("keyword", request.keyword)
    if request.language:
        params.set("language", request.language)
    _set_prices(params, request.min_price, request.max_price)
    if request.name:
        params.set("name", request.name)
    if request.open_now:
        params.set("opennow", "true")
    if request.rank_by:
        params.set("rankby", request.rank_by)
    if request.place_type:
        params.set("type", request.place_type)
    if request.page_token:
        params.set("pagetoken", request.page_token)
    return params


def build_text_search_params(request: TextSearchRequest) -> QueryParams:
    params = QueryParams()
    params.set("query", request.query)
    if request.location is not None:
        params.set("location", request.location)
    if request.radius:
        params.set("radius", request.radius)
    if request.language:
        params.set("language", request.language)
    _set_prices(params, request.min_price, request.max_price)
    if request.open_now:
        params.set("opennow", "true")
    if request.place_type:
        params.set("type", request.place_type)
    if request.page_token:
        params.set("pagetoken", request.page_token)
    if request.region:
        params.set("region", request.region)
    return params


def build_place_details_params(request: PlaceDetailsRequest) -> QueryParams:
    params = QueryParams()
    params.set("placeid", request.place_id)
    if request.language:
        params.set("language", request.language)
    if request.fields:
        params.set("fields", join_comma(request.fields))
    if request.session_token is not None:
        params.set("sessiontoken", request.session_token)
    if request.region:
        params.set("region", request.region)
    return params


def build_query_autocomplete_params(request: QueryAutocompleteRequest) -> QueryParams:
    params = QueryParams()
    params.set("input", request.input)
    if request.offset > 0:
        params.set("offset", request.offset)
    if request.location is not None:
        params.set("location", request.location)
    if request.radius > 0:
        params.set("radius", request.radius)
    if request.language:
        params.set("language", request.language)
    return params


def build_place_autocomplete_params(request: PlaceAutocompleteRequest) -> QueryParams:
    params = QueryParams()
    params.set("input", request.input)
    if request.session_token is not None:
        params.set("sessiontoken", request.session_token)
    if request.offset > 0:
        params.set("offset", request.offset)
    if request.location is not None:
        params.set("location", request.location)
    if request.origin is not None:
        params.set("origin", request.origin)
    if request.radius > 0:
        params.set("radius", request.radius)
    if request.language:
        params.set("language", request.language)
    if request.types:
        params.set("types", request.types)
    if request.strict_bounds:
        params.set("strictbounds", "true")
    if request.components:
        params.set("components", build_components_param(request.components))
    return params


def build_find_place_from_text_params(request: FindPlaceFromTextRequest) -> QueryParams:
    params = QueryParams()
    params.set("input", request.input)
    params.set("inputtype", request.input_type)
    if request.fields:
        params.set("fields", join_comma(request.fields))
    if request.location_bias:
        params.set("locationbias", build_location_bias_param(request))
    return params


def build_place_photo_params(request: PlacePhotoRequest) -> QueryParams:
    params = QueryParams()
    params.set("photoreference", request.photo_reference)
    if request.max_height > 0:
        params.set("maxheight", request.max_height)
    if request.max_width > 0:
        params.set("maxwidth", request.max_width)
    return params


__all__ = [
    "build_location_bias_param",
    "build_nearby_search_params",
    "build_text_search_params",
    "build_place_details_params",
    "build_query_autocomplete_params",
    "build_place_autocomplete_params",
    "build_find_place_from_text_params",
    "build_place_photo_params",
]
