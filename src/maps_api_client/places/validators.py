"""Cross-field validation for places requests."""

from __future__ import annotations

from ..core.validation import conflict, missing, missing_one_of, requires
from .enums import LocationBias, RankBy
from .requests import (
    FindPlaceFromTextRequest,
    NearbySearchRequest,
    PlaceAutocompleteRequest,
    PlaceDetailsRequest,
    PlacePhotoRequest,
    QueryAutocompleteRequest,
    TextSearchRequest,
)

_RANK_BY_DISTANCE = RankBy.DISTANCE.value


def validate_nearby_search_request(request: NearbySearchRequest) -> None:
    """Rules only apply to first-page searches; a page token stands alone."""

    if request.page_token:
        return
    operation = request.OPERATION
    if request.location is None:
        raise missing_one_of(
            operation,
            ("location", "page_token"),
            "maps: Location and PageToken both missing",
        )
    by_distance = request.rank_by == _RANK_BY_DISTANCE
    if request.radius == 0 and not by_distance:
        raise missing_one_of(
            operation,
            ("radius", "page_token"),
            "maps: Radius and PageToken both missing",
        )
    if request.radius > 0 and by_distance:
        raise conflict(
            operation,
            ("radius", "rank_by"),
            "maps: Radius specified with RankByDistance",
        )
    if by_distance and not (request.keyword or request.name or request.place_type):
        raise requires(
            operation,
            ("rank_by", "keyword", "name", "place_type"),
            "maps: RankBy=distance and Keyword, Name and Type are missing",
            value=request.rank_by,
        )


def validate_text_search_request(request: TextSearchRequest) -> None:
    operation = request.OPERATION
    if not (request.query or request.page_token or request.place_type):
        raise missing_one_of(
            operation,
            ("query", "page_token", "place_type"),
            "maps: Query, PageToken and Type are all missing",
        )
    if request.location is not None and request.radius == 0:
        raise requires(
            operation,
            ("location", "radius"),
            "maps: Radius missing, required with Location",
        )


def validate_place_details_request(request: PlaceDetailsRequest) -> None:
    if not request.place_id:
        raise missing(request.OPERATION, "place_id", "maps: PlaceID missing")


def validate_autocomplete_request(
    request: QueryAutocompleteRequest | PlaceAutocompleteRequest,
) -> None:
    if not request.input:
        raise missing(request.OPERATION, "input", "maps: Input missing")


def validate_find_place_from_text_request(request: FindPlaceFromTextRequest) -> None:
    operation = request.OPERATION
    if not request.input:
        raise missing(operation, "input", "maps: Input required")
    if not request.input_type:
        raise missing(operation, "input_type", "maps: InputType required")

    bias = request.location_bias
    if bias == LocationBias.POINT.value and request.location_bias_point is None:
        raise requires(
            operation,
            ("location_bias", "location_bias_point"),
            "maps: LocationBiasPoint required when LocationBias set to point",
            value=bias,
        )
    if bias == LocationBias.CIRCLE.value and (
        request.location_bias_center is None or request.location_bias_radius == 0
    ):
        raise requires(
            operation,
            ("location_bias", "location_bias_center", "location_bias_radius"),
            "maps: LocationBiasCenter and LocationBiasRadius required when LocationBias set to circle",
            value=bias,
        )
    if bias == LocationBias.RECTANGLE.value and (
        request.location_bias_south_west is None or request.location_bias_north_east is None
    ):
        raise requires(
            operation,
            ("location_bias", "location_bias_south_west", "location_bias_north_east"),
            "maps: LocationBiasSouthWest and LocationBiasNorthEast required when LocationBias set to rectangle",
            value=bias,
        )


def validate_place_photo_request(request: PlacePhotoRequest) -> None:
    operation = request.OPERATION
    if not request.photo_reference:
        raise missing(operation, "photo_reference", "maps: PhotoReference missing")
    if request.max_height == 0 and request.max_width == 0:
        raise missing_one_of(
            operation,
            ("max_height", "max_width"),
            "maps: both MaxHeight & MaxWidth missing",
        )


__all__ = [
    "validate_nearby_search_request",
    "validate_text_search_request",
    "validate_place_details_request",
    "validate_autocomplete_request",
    "validate_find_place_from_text_request",
    "validate_place_photo_request",
]
