"""Parsers from places JSON payloads into typed response objects."""

from __future__ import annotations

from datetime import timedelta

from ..core.codecs import decode_timestamp, encode_epoch
from ..core.errors import MapsHttpError
from ..core.models import BinaryResponse, RawResponse
from ..core.response_parsing import (
    JsonObject,
    as_object,
    flag,
    integer,
    number,
    objects,
    optional_flag,
    optional_integer,
    parse_envelope,
    strings,
    text,
)
from ..core.wire import WireField, decode_fields, encode_fields, put
from ..geocoding.parser import parse_address_components, parse_address_geometry, parse_plus_code
from .models import (
    AltId,
    AutocompleteMatchedSubstring,
    AutocompletePrediction,
    AutocompleteResponse,
    AutocompleteStructuredFormatting,
    AutocompleteTermOffset,
    FindPlaceFromTextResponse,
    OpeningHours,
    OpeningHoursOpenClose,
    OpeningHoursPeriod,
    Photo,
    PlaceDetailsResponse,
    PlaceDetailsResult,
    PlaceReview,
    PlaceReviewAspect,
    PlacesSearchResponse,
    PlacesSearchResult,
)


def _types(item: object) -> tuple[str, ...]:
    return strings(item, name="types")


def _open_close(item: object) -> OpeningHoursOpenClose:
    obj = as_object(item, name="opening_hours.period")
    return OpeningHoursOpenClose(
        day=integer(obj.get("day"), name="day"),
        time=text(obj.get("time")),
    )


def parse_opening_hours(item: object) -> OpeningHours | None:
    if item is None:
        return None
    obj = as_object(item, name="opening_hours")
    periods = []
    for period in objects(obj.get("periods"), name="periods"):
        close = period.get("close")
        periods.append(
            OpeningHoursPeriod(
                open=_open_close(period.get("open")),
                close=None if close is None else _open_close(close),
            )
        )
    return OpeningHours(
        open_now=optional_flag(obj.get("open_now"), name="open_now"),
        periods=tuple(periods),
        weekday_text=strings(obj.get("weekday_text"), name="weekday_text"),
        permanently_closed=optional_flag(obj.get("permanently_closed"), name="permanently_closed"),
    )


def parse_photo(item: JsonObject) -> Photo:
    return Photo(
        photo_reference=text(item.get("photo_reference")),
        height=integer(item.get("height"), name="height"),
        width=integer(item.get("width"), name="width"),
        html_attributions=strings(item.get("html_attributions"), name="html_attributions"),
    )


def _photos(item: object) -> tuple[Photo, ...]:
    return tuple(parse_photo(photo) for photo in objects(item, name="photos"))


def _alt_ids(item: object) -> tuple[AltId, ...]:
    return tuple(
        AltId(place_id=text(alt.get("place_id")), scope=text(alt.get("scope")))
        for alt in objects(item, name="alt_ids")
    )


def _rating(item: object) -> float:
    return number(item, name="rating")


def _count(item: object) -> int:
    return integer(item, name="count")


def _flag(item: object) -> bool:
    return flag(item, name="permanently_closed")


# Fields shared by search results and details results.
_PLACE_FIELDS: tuple[WireField, ...] = (
    WireField("formatted_address", "formatted_address", text),
    WireField("geometry", "geometry", parse_address_geometry),
    WireField("name", "name", text),
    WireField("icon", "icon", text),
    WireField("place_id", "place_id", text),
    WireField("scope", "scope", text),
    WireField("rating", "rating", _rating),
    WireField("user_ratings_total", "user_ratings_total", _count),
    WireField("types", "types", _types),
    WireField("opening_hours", "opening_hours", parse_opening_hours),
    WireField("photos", "photos", _photos),
    WireField("alt_ids", "alt_ids", _alt_ids),
    WireField("price_level", "price_level", _count),
    WireField("vicinity", "vicinity", text),
    WireField("permanently_closed", "permanently_closed", _flag),
    WireField("business_status", "business_status", text),
    WireField("plus_code", "plus_code", parse_plus_code),
)

_DETAILS_FIELDS: tuple[WireField, ...] = _PLACE_FIELDS + (
    WireField("address_components", "address_components", parse_address_components),
    WireField("adr_address", "adr_address", text),
    WireField("formatted_phone_number", "formatted_phone_number", text),
    WireField("international_phone_number", "international_phone_number", text),
    WireField("website", "website", text),
    WireField("url", "url", text),
)

_REVIEW_FIELDS: tuple[WireField, ...] = (
    WireField("author_name", "author_name", text),
    WireField("author_url", "author_url", text),
    WireField("author_profile_photo", "profile_photo_url", text),
    WireField("language", "language", text),
    WireField("rating", "rating", _count),
    WireField("text", "text", text),
)


def parse_places_search_result(item: JsonObject) -> PlacesSearchResult:
    return PlacesSearchResult(**decode_fields(item, _PLACE_FIELDS))


def parse_review(item: JsonObject) -> PlaceReview:
    return PlaceReview(
        **decode_fields(item, _REVIEW_FIELDS),
        aspects=tuple(
            PlaceReviewAspect(
                rating=integer(aspect.get("rating"), name="aspect.rating"),
                type=text(aspect.get("type")),
            )
            for aspect in objects(item.get("aspects"), name="aspects")
        ),
        time=decode_timestamp(item.get("time")),
    )


def review_to_wire(review: PlaceReview) -> JsonObject:
    out = encode_fields(review, _REVIEW_FIELDS)
    out["aspects"] = [{"rating": aspect.rating, "type": aspect.type} for aspect in review.aspects]
    put(out, "time", encode_epoch(review.time))
    return out


def _utc_offset(item: object) -> timedelta | None:
    minutes = optional_integer(item, name="utc_offset")
    if minutes is None:
        return None
    return timedelta(minutes=minutes)


def parse_place_details_result(item: JsonObject) -> PlaceDetailsResult:
    return PlaceDetailsResult(
        **decode_fields(item, _DETAILS_FIELDS),
        reviews=tuple(parse_review(review) for review in objects(item.get("reviews"), name="reviews")),
        utc_offset=_utc_offset(item.get("utc_offset")),
    )


def _search_results(payload: JsonObject, key: str) -> tuple[PlacesSearchResult, ...]:
    return tuple(parse_places_search_result(item) for item in objects(payload.get(key), name=key))


def parse_places_search_response(payload: JsonObject) -> PlacesSearchResponse:
    return PlacesSearchResponse(
        envelope=parse_envelope(payload),
        results=_search_results(payload, "results"),
    )


def parse_place_details_response(payload: JsonObject) -> PlaceDetailsResponse:
    return PlaceDetailsResponse(
        envelope=parse_envelope(payload),
        result=parse_place_details_result(as_object(payload.get("result"), name="result")),
    )


def parse_find_place_from_text_response(payload: JsonObject) -> FindPlaceFromTextResponse:
    return FindPlaceFromTextResponse(
        envelope=parse_envelope(payload),
        candidates=_search_results(payload, "candidates"),
    )


def _matched_substrings(item: object, *, name: str) -> tuple[AutocompleteMatchedSubstring, ...]:
    return tuple(
        AutocompleteMatchedSubstring(
            length=integer(match.get("length"), name="length"),
            offset=integer(match.get("offset"), name="offset"),
        )
        for match in objects(item, name=name)
    )


def parse_autocomplete_prediction(item: JsonObject) -> AutocompletePrediction:
    formatting = as_object(item.get("structured_formatting"), name="structured_formatting")
    return AutocompletePrediction(
        description=text(item.get("description")),
        distance_meters=integer(item.get("distance_meters"), name="distance_meters"),
        place_id=text(item.get("place_id")),
        types=_types(item.get("types")),
        matched_substrings=_matched_substrings(
            item.get("matched_substrings"),
            name="matched_substrings",
        ),
        terms=tuple(
            AutocompleteTermOffset(
                value=text(term.get("value")),
                offset=integer(term.get("offset"), name="offset"),
            )
            for term in objects(item.get("terms"), name="terms")
        ),
        structured_formatting=AutocompleteStructuredFormatting(
            main_text=text(formatting.get("main_text")),
            main_text_matched_substrings=_matched_substrings(
                formatting.get("main_text_matched_substrings"),
                name="main_text_matched_substrings",
            ),
            secondary_text=text(formatting.get("secondary_text")),
        ),
    )


def parse_autocomplete_response(payload: JsonObject) -> AutocompleteResponse:
    return AutocompleteResponse(
        envelope=parse_envelope(payload),
        predictions=tuple(
            parse_autocomplete_prediction(item)
            for item in objects(payload.get("predictions"), name="predictions")
        ),
    )


def decode_photo_response(response: RawResponse) -> BinaryResponse:
    """Return the image bytes; a 403 means the photo quota is exhausted."""

    status = response.status_code
    if status == 403:
        raise MapsHttpError("maps: request exceeds your available quota", http_status=status)
    if status >= 400:
        raise MapsHttpError(f"maps: HTTP {status}", http_status=status)
    return BinaryResponse(content_type=response.content_type, data=response.content)


__all__ = [
    "decode_photo_response",
    "parse_opening_hours",
    "parse_photo",
    "parse_places_search_result",
    "parse_review",
    "review_to_wire",
    "parse_place_details_result",
    "parse_places_search_response",
    "parse_place_details_response",
    "parse_find_place_from_text_response",
    "parse_autocomplete_prediction",
    "parse_autocomplete_response",
]
