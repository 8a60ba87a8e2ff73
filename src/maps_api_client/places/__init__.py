"""Places search, details, autocomplete and photo package."""

from .enums import (
    AutocompletePlaceType,
    Component,
    InputType,
    LocationBias,
    PlaceDetailsFieldMask,
    PlaceSearchFieldMask,
    PlaceType,
    PriceLevel,
    RankBy,
)
from .models import (
    AutocompletePrediction,
    AutocompleteResponse,
    FindPlaceFromTextResponse,
    OpeningHours,
    Photo,
    PlaceDetailsResponse,
    PlaceDetailsResult,
    PlaceReview,
    PlacesSearchResponse,
    PlacesSearchResult,
)
from .requests import (
    FindPlaceFromTextRequest,
    NearbySearchRequest,
    PlaceAutocompleteRequest,
    PlaceDetailsRequest,
    PlacePhotoRequest,
    QueryAutocompleteRequest,
    TextSearchRequest,
    new_session_token,
)

__all__ = [
    "RankBy",
    "PriceLevel",
    "PlaceType",
    "AutocompletePlaceType",
    "Component",
    "PlaceDetailsFieldMask",
    "PlaceSearchFieldMask",
    "InputType",
    "LocationBias",
    "new_session_token",
    "NearbySearchRequest",
    "TextSearchRequest",
    "PlaceDetailsRequest",
    "QueryAutocompleteRequest",
    "PlaceAutocompleteRequest",
    "FindPlaceFromTextRequest",
    "PlacePhotoRequest",
    "PlacesSearchResponse",
    "PlacesSearchResult",
    "PlaceDetailsResponse",
    "PlaceDetailsResult",
    "PlaceReview",
    "OpeningHours",
    "Photo",
    "AutocompleteResponse",
    "AutocompletePrediction",
    "FindPlaceFromTextResponse",
]
