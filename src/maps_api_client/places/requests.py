"""Request models for the places endpoints."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar

from ..core.latlng import LatLng
from .enums import PlaceDetailsFieldMask, PlaceSearchFieldMask


def new_session_token() -> uuid.UUID:
    """Fresh token grouping one autocomplete session with its details lookup."""

    return uuid.uuid4()


@dataclass(slots=True)
class NearbySearchRequest:
    OPERATION: ClassVar[str] = "nearby_search"

    location: LatLng | None = None
    radius: int = 0
    keyword: str = ""
    language: str = ""
    min_price: str = ""
    max_price: str = ""
    name: str = ""
    open_now: bool = False
    rank_by: str = ""
    place_type: str = ""
    page_token: str = ""


@dataclass(slots=True)
class TextSearchRequest:
    OPERATION: ClassVar[str] = "text_search"

    query: str = ""
    location: LatLng | None = None
    radius: int = 0
    language: str = ""
    min_price: str = ""
    max_price: str = ""
    open_now: bool = False
    place_type: str = ""
    page_token: str = ""
    region: str = ""


@dataclass(slots=True)
class PlaceDetailsRequest:
    OPERATION: ClassVar[str] = "place_details"
    FIELD_MASKS: ClassVar[type[Enum]] = PlaceDetailsFieldMask

    place_id: str = ""
    language: str = ""
    fields: tuple[str, ...] = ()
    session_token: uuid.UUID | None = None
    region: str = ""


@dataclass(slots=True)
class QueryAutocompleteRequest:
    OPERATION: ClassVar[str] = "query_autocomplete"

    input: str = ""
    offset: int = 0
    location: LatLng | None = None
    radius: int = 0
    language: str = ""


@dataclass(slots=True)
class PlaceAutocompleteRequest:
    OPERATION: ClassVar[str] = "place_autocomplete"

    input: str = ""
    offset: int = 0
    location: LatLng | None = None
    origin: LatLng | None = None
    radius: int = 0
    language: str = ""
    types: str = ""
    components: dict[str, tuple[str, ...]] = field(default_factory=dict)
    strict_bounds: bool = False
    session_token: uuid.UUID | None = None


@dataclass(slots=True)
class FindPlaceFromTextRequest:
    OPERATION: ClassVar[str] = "find_place_from_text"
    FIELD_MASKS: ClassVar[type[Enum]] = PlaceSearchFieldMask

    input: str = ""
    input_type: str = ""
    fields: tuple[str, ...] = ()
    location_bias: str = ""
    location_bias_point: LatLng | None = None
    location_bias_center: LatLng | None = None
    location_bias_radius: int = 0
    location_bias_south_west: LatLng | None = None
    location_bias_north_east: LatLng | None = None


@dataclass(slots=True)
class PlacePhotoRequest:
    OPERATION: ClassVar[str] = "place_photo"

    photo_reference: str = ""
    max_height: int = 0
    max_width: int = 0


__all__ = [
    "new_session_token",
    "NearbySearchRequest",
    "TextSearchRequest",
    "PlaceDetailsRequest",
    "QueryAutocompleteRequest",
    "PlaceAutocompleteRequest",
    "FindPlaceFromTextRequest",
    "PlacePhotoRequest",
]
