"""Operation table: endpoint, request type, validator, serializer and decoder per call."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from functools import partial
from typing import Generic, TypeVar

from .core.models import BinaryResponse, RawResponse
from .core.options import Option, apply_options
from .core.query import QueryParams
from .core.response_parsing import decode_error_object_response, decode_json_response
from .core.transport_shared import ROADS_API_HOST, ApiEndpoint
from .geocoding import params as geocoding_params
from .geocoding import parser as geocoding_parser
from .geocoding import validators as geocoding_validators
from .geocoding.models import ElevationResponse, GeocodingResponse, TimezoneResponse
from .geocoding.requests import ElevationRequest, GeocodingRequest, TimezoneRequest
from .places import params as places_params
from .places import parser as places_parser
from .places import validators as places_validators
from .places.models import (
    AutocompleteResponse,
    FindPlaceFromTextResponse,
    PlaceDetailsResponse,
    PlacesSearchResponse,
)
from .places.requests import (
    FindPlaceFromTextRequest,
    NearbySearchRequest,
    PlaceAutocompleteRequest,
    PlaceDetailsRequest,
    PlacePhotoRequest,
    QueryAutocompleteRequest,
    TextSearchRequest,
)
from .roads import params as roads_params
from .roads import parser as roads_parser
from .roads import validators as roads_validators
from .roads.models import NearestRoadsResponse, SnapToRoadResponse, SpeedLimitsResponse
from .roads.requests import NearestRoadsRequest, SnapToRoadRequest, SpeedLimitsRequest
from .routing.models import DirectionsResponse, DistanceMatrixResponse
from .routing.params import build_directions_params, build_distance_matrix_params
from .routing.parser import parse_directions_response, parse_distance_matrix_response
from .routing.requests import DirectionsRequest, DistanceMatrixRequest
from .routing.validators import validate_directions_request, validate_distance_matrix_request
from .staticmap.params import build_static_map_params, decode_static_map_response
from .staticmap.requests import StaticMapRequest
from .staticmap.validators import validate_static_map_request

R = TypeVar("R")
T = TypeVar("T")


@dataclass(slots=True, frozen=True)
class Operation(Generic[R, T]):
    """Everything needed to turn a list of options into one decoded response."""

    endpoint: ApiEndpoint
    request_type: Callable[[], R]
    validate: Callable[[R], None]
    build_params: Callable[[R], QueryParams]
    decode: Callable[[RawResponse], T]

    def build_request(self, options: Iterable[Option]) -> R:
        return apply_options(self.request_type(), options)

    def prepare(self, options: Iterable[Option]) -> QueryParams:
        """Apply options to a fresh request, validate it, then serialize it."""

        request = self.build_request(options)
        self.validate(request)
        return self.build_params(request)


def _json(parse: Callable[[dict[str, object]], T]) -> Callable[[RawResponse], T]:
    return partial(decode_json_response, parse=parse)


def _error_object_json(parse: Callable[[dict[str, object]], T]) -> Callable[[RawResponse], T]:
    return partial(decode_error_object_response, parse=parse)


DIRECTIONS: Operation[DirectionsRequest, DirectionsResponse] = Operation(
    endpoint=ApiEndpoint("directions", "/maps/api/directions/json"),
    request_type=DirectionsRequest,
    validate=validate_directions_request,
    build_params=build_directions_params,
    decode=_json(parse_directions_response),
)

DISTANCE_MATRIX: Operation[DistanceMatrixRequest, DistanceMatrixResponse] = Operation(
    endpoint=ApiEndpoint("distance_matrix", "/maps/api/distancematrix/json"),
    request_type=DistanceMatrixRequest,
    validate=validate_distance_matrix_request,
    build_params=build_distance_matrix_params,
    decode=_json(parse_distance_matrix_response),
)

NEARBY_SEARCH: Operation[NearbySearchRequest, PlacesSearchResponse] = Operation(
    endpoint=ApiEndpoint("nearby_search", "/maps/api/place/nearbysearch/json"),
    request_type=NearbySearchRequest,
    validate=places_validators.validate_nearby_search_request,
    build_params=places_params.build_nearby_search_params,
    decode=_json(places_parser.parse_places_search_response),
)

TEXT_SEARCH: Operation[TextSearchRequest, PlacesSearchResponse] = Operation(
    endpoint=ApiEndpoint("text_search", "/maps/api/place/textsearch/json"),
    request_type=TextSearchRequest,
    validate=places_validators.validate_text_search_request,
    build_params=places_params.build_text_search_params,
    decode=_json(places_parser.parse_places_search_response),
)

PLACE_DETAILS: Operation[PlaceDetailsRequest, PlaceDetailsResponse] = Operation(
    endpoint=ApiEndpoint("place_details", "/maps/api/place/details/json"),
    request_type=PlaceDetailsRequest,
    validate=places_validators.validate_place_details_request,
    build_params=places_params.build_place_details_params,
    decode=_json(places_parser.parse_place_details_response),
)

QUERY_AUTOCOMPLETE: Operation[QueryAutocompleteRequest, AutocompleteResponse] = Operation(
    endpoint=ApiEndpoint("query_autocomplete", "/maps/api/place/queryautocomplete/json"),
    request_type=QueryAutocompleteRequest,
    validate=places_validators.validate_autocomplete_request,
    build_params=places_params.build_query_autocomplete_params,
    decode=_json(places_parser.parse_autocomplete_response),
)

PLACE_AUTOCOMPLETE: Operation[PlaceAutocompleteRequest, AutocompleteResponse] = Operation(
    endpoint=ApiEndpoint("place_autocomplete", "/maps/api/place/autocomplete/json"),
    request_type=PlaceAutocompleteRequest,
    validate=places_validators.validate_autocomplete_request,
    build_params=places_params.build_place_autocomplete_params,
    decode=_json(places_parser.parse_autocomplete_response),
)

FIND_PLACE_FROM_TEXT: Operation[FindPlaceFromTextRequest, FindPlaceFromTextResponse] = Operation(
    endpoint=ApiEndpoint(
        "find_place_from_text",
        "/maps/api/place/findplacefromtext/json",
        accepts_client_id=False,
    ),
    request_type=FindPlaceFromTextRequest,
    validate=places_validators.validate_find_place_from_text_request,
    build_params=places_params.build_find_place_from_text_params,
    decode=_json(places_parser.parse_find_place_from_text_response),
)

PLACE_PHOTO: Operation[PlacePhotoRequest, BinaryResponse] = Operation(
    endpoint=ApiEndpoint("place_photo", "/maps/api/place/photo"),
    request_type=PlacePhotoRequest,
    validate=places_validators.validate_place_photo_request,
    build_params=places_params.build_place_photo_params,
    decode=places_parser.decode_photo_response,
)

STATIC_MAP: Operation[StaticMapRequest, BinaryResponse] = Operation(
    endpoint=ApiEndpoint("static_map", "/maps/api/staticmap", accepts_signature=True),
    request_type=StaticMapRequest,
    validate=validate_static_map_request,
    build_params=build_static_map_params,
    decode=decode_static_map_response,
)

GEOCODE: Operation[GeocodingRequest, GeocodingResponse] = Operation(
    endpoint=ApiEndpoint("geocode", "/maps/api/geocode/json"),
    request_type=GeocodingRequest,
    validate=geocoding_validators.validate_geocoding_request,
    build_params=geocoding_params.build_geocoding_params,
    decode=_json(geocoding_parser.parse_geocoding_response),
)

TIMEZONE: Operation[TimezoneRequest, TimezoneResponse] = Operation(
    endpoint=ApiEndpoint("timezone", "/maps/api/timezone/json"),
    request_type=TimezoneRequest,
    validate=geocoding_validators.validate_timezone_request,
    build_params=geocoding_params.build_timezone_params,
    decode=_json(geocoding_parser.parse_timezone_response),
)

ELEVATION: Operation[ElevationRequest, ElevationResponse] = Operation(
    endpoint=ApiEndpoint("elevation", "/maps/api/elevation/json"),
    request_type=ElevationRequest,
    validate=geocoding_validators.validate_elevation_request,
    build_params=geocoding_params.build_elevation_params,
    decode=_json(geocoding_parser.parse_elevation_response),
)

SNAP_TO_ROAD: Operation[SnapToRoadRequest, SnapToRoadResponse] = Operation(
    endpoint=ApiEndpoint(
        "snap_to_road",
        "/v1/snapToRoads",
        accepts_client_id=False,
        host=ROADS_API_HOST,
    ),
    request_type=SnapToRoadRequest,
    validate=roads_validators.validate_snap_to_road_request,
    build_params=roads_params.build_snap_to_road_params,
    decode=_error_object_json(roads_parser.parse_snap_to_road_response),
)

NEAREST_ROADS: Operation[NearestRoadsRequest, NearestRoadsResponse] = Operation(
    endpoint=ApiEndpoint(
        "nearest_roads",
        "/v1/nearestRoads",
        accepts_client_id=False,
        host=ROADS_API_HOST,
    ),
    request_type=NearestRoadsRequest,
    validate=roads_validators.validate_nearest_roads_request,
    build_params=roads_params.build_nearest_roads_params,
    decode=_error_object_json(roads_parser.parse_nearest_roads_response),
)

SPEED_LIMITS: Operation[SpeedLimitsRequest, SpeedLimitsResponse] = Operation(
    endpoint=ApiEndpoint(
        "speed_limits",
        "/v1/speedLimits",
        accepts_client_id=False,
        host=ROADS_API_HOST,
    ),
    request_type=SpeedLimitsRequest,
    validate=roads_validators.validate_speed_limits_request,
    build_params=roads_params.build_speed_limits_params,
    decode=_error_object_json(roads_parser.parse_speed_limits_response),
)

OPERATIONS: tuple[Operation, ...] = (
    DIRECTIONS,
    DISTANCE_MATRIX,
    NEARBY_SEARCH,
    TEXT_SEARCH,
    PLACE_DETAILS,
    QUERY_AUTOCOMPLETE,
    PLACE_AUTOCOMPLETE,
    FIND_PLACE_FROM_TEXT,
    PLACE_PHOTO,
    STATIC_MAP,
    GEOCODE,
    TIMEZONE,
    ELEVATION,
    SNAP_TO_ROAD,
    NEAREST_ROADS,
    SPEED_LIMITS,
)


__all__ = [
    "Operation",
    "DIRECTIONS",
    "DISTANCE_MATRIX",
    "NEARBY_SEARCH",
    "TEXT_SEARCH",
    "PLACE_DETAILS",
    "QUERY_AUTOCOMPLETE",
    "PLACE_AUTOCOMPLETE",
    "FIND_PLACE_FROM_TEXT",
    "PLACE_PHOTO",
    "STATIC_MAP",
    "GEOCODE",
    "TIMEZONE",
    "ELEVATION",
    "SNAP_TO_ROAD",
    "NEAREST_ROADS",
    "SPEED_LIMITS",
    "OPERATIONS",
]
