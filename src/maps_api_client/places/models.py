"""Places response models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta

from ..core.models import ApiEnvelope
from ..geocoding.models import AddressComponent, AddressGeometry, PlusCode


@dataclass(slots=True, frozen=True)
class OpeningHoursOpenClose:
    day: int = 0
    time: str = ""


@dataclass(slots=True, frozen=True)
class OpeningHoursPeriod:
    open: OpeningHoursOpenClose = OpeningHoursOpenClose()
    close: OpeningHoursOpenClose | None = None


@dataclass(slots=True, frozen=True)
class OpeningHours:
    open_now: bool | None = None
    periods: tuple[OpeningHoursPeriod, ...] = ()
    weekday_text: tuple[str, ...] = ()
    permanently_closed: bool | None = None


@dataclass(slots=True, frozen=True)
class Photo:
    photo_reference: str = ""
    height: int = 0
    width: int = 0
    html_attributions: tuple[str, ...] = ()


@dataclass(slots=True, frozen=True)
class AltId:
    place_id: str = ""
    scope: str = ""


@dataclass(slots=True, frozen=True)
class PlacesSearchResult:
    formatted_address: str = ""
    geometry: AddressGeometry = AddressGeometry()
    name: str = ""
    icon: str = ""
    place_id: str = ""
    scope: str = ""
    rating: float = 0.0
    user_ratings_total: int = 0
    types: tuple[str, ...] = ()
    opening_hours: OpeningHours | None = None
    photos: tuple[Photo, ...] = ()
    alt_ids: tuple[AltId, ...] = ()
    price_level: int = 0
    vicinity: str = ""
    permanently_closed: bool = False
    business_status: str = ""
    plus_code: PlusCode | None = None


@dataclass(slots=True, frozen=True)
class PlacesSearchResponse:
    envelope: ApiEnvelope
    results: tuple[PlacesSearchResult, ...] = ()

    @property
    def next_page_token(self) -> str:
        return self.envelope.next_page_token


@dataclass(slots=True, frozen=True)
class PlaceReviewAspect:
    rating: int = 0
    type: str = ""


@dataclass(slots=True, frozen=True)
class PlaceReview:
    """A user review; ``time`` is decoded from epoch seconds, ``None`` when absent."""

    aspects: tuple[PlaceReviewAspect, ...] = ()
    author_name: str = ""
    author_url: str = ""
    author_profile_photo: str = ""
    language: str = ""
    rating: int = 0
    text: str = ""
    time: datetime | None = None


@dataclass(slots=True, frozen=True)
class PlaceDetailsResult:
    address_components: tuple[AddressComponent, ...] = ()
    formatted_address: str = ""
    adr_address: str = ""
    formatted_phone_number: str = ""
    international_phone_number: str = ""
    geometry: AddressGeometry = AddressGeometry()
    name: str = ""
    icon: str = ""
    place_id: str = ""
    scope: str = ""
    rating: float = 0.0
    user_ratings_total: int = 0
    types: tuple[str, ...] = ()
    opening_hours: OpeningHours | None = None
    photos: tuple[Photo, ...] = ()
    alt_ids: tuple[AltId, ...] = ()
    price_level: int = 0
    vicinity: str = ""
    permanently_closed: bool = False
    business_status: str = ""
    reviews: tuple[PlaceReview, ...] = ()
    utc_offset: timedelta | None = None
    website: str = ""
    url: str = ""
    plus_code: PlusCode | None = None


@dataclass(slots=True, frozen=True)
class PlaceDetailsResponse:
    envelope: ApiEnvelope
    result: PlaceDetailsResult = PlaceDetailsResult()


@dataclass(slots=True, frozen=True)
class AutocompleteMatchedSubstring:
    length: int = 0
    offset: int = 0


@dataclass(slots=True, frozen=True)
class AutocompleteTermOffset:
    value: str = ""
    offset: int = 0


@dataclass(slots=True, frozen=True)
class AutocompleteStructuredFormatting:
    main_text: str = ""
    main_text_matched_substrings: tuple[AutocompleteMatchedSubstring, ...] = ()
    secondary_text: str = ""


@dataclass(slots=True, frozen=True)
class AutocompletePrediction:
    description: str = ""
    distance_meters: int = 0
    place_id: str = ""
    types: tuple[str, ...] = ()
    matched_substrings: tuple[AutocompleteMatchedSubstring, ...] = ()
    terms: tuple[AutocompleteTermOffset, ...] = ()
    structured_formatting: AutocompleteStructuredFormatting = AutocompleteStructuredFormatting()


@dataclass(slots=True, frozen=True)
class AutocompleteResponse:
    envelope: ApiEnvelope
    predictions: tuple[AutocompletePrediction, ...] = ()


@dataclass(slots=True, frozen=True)
class FindPlaceFromTextResponse:
    envelope: ApiEnvelope
    candidates: tuple[PlacesSearchResult, ...] = ()


__all__ = [
    "OpeningHoursOpenClose",
    "OpeningHoursPeriod",
    "OpeningHours",
    "Photo",
    "AltId",
    "PlacesSearchResult",
    "PlacesSearchResponse",
    "PlaceReviewAspect",
    "PlaceReview",
    "PlaceDetailsResult",
    "PlaceDetailsResponse",
    "AutocompleteMatchedSubstring",
    "AutocompleteTermOffset",
    "AutocompleteStructuredFormatting",
    "AutocompletePrediction",
    "AutocompleteResponse",
    "FindPlaceFromTextResponse",
]
