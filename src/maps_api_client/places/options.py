"""Options specific to places requests."""

from __future__ import annotations

import uuid
from enum import Enum

from ..core.latlng import LatLng
from ..core.options import (
    Option,
    choice_option,
    coerce_choice,
    failed_option,
    field_option,
    invalid_value,
    operation_name,
    set_fields,
    supports_field,
)
from .enums import AutocompletePlaceType, InputType, LocationBias, PlaceType, PriceLevel, RankBy


def with_keyword(keyword: str) -> Option:
    return field_option("keyword", keyword)


def with_name(name: str) -> Option:
    return field_option("name", name)


def with_query(query: str) -> Option:
    return field_option("query", query)


def with_place_id(place_id: str) -> Option:
    return field_option("place_id", place_id)


def with_page_token(token: str) -> Option:
    return field_option("page_token", token)


def with_input(text: str) -> Option:
    return field_option("input", text)


def with_offset(offset: int) -> Option:
    if offset < 0:
        return failed_option(invalid_value("Offset", "offset", offset))
    return field_option("offset", offset)


def with_open_now(open_now: bool = True) -> Option:
    return field_option("open_now", bool(open_now))


def with_strict_bounds(strict: bool = True) -> Option:
    return field_option("strict_bounds", bool(strict))


def _price_option(field_name: str, label: str, level: PriceLevel | int | str) -> Option:
    if isinstance(level, int) and not isinstance(level, bool):
        level = str(level)
    return choice_option(field_name, level, PriceLevel, label=label)


def with_min_price(level: PriceLevel | int | str) -> Option:
    return _price_option("min_price", "MinPrice", level)


def with_max_price(level: PriceLevel | int | str) -> Option:
    return _price_option("max_price", "MaxPrice", level)


def with_rank_by(rank_by: RankBy | str) -> Option:
    return choice_option("rank_by", rank_by, RankBy, label="RankBy")


def with_place_type(place_type: PlaceType | str) -> Option:
    return choice_option("place_type", place_type, PlaceType, label="PlaceType")


def with_autocomplete_types(types: AutocompletePlaceType | str) -> Option:
    return choice_option("types", types, AutocompletePlaceType, label="AutocompletePlaceType")


def with_input_type(input_type: InputType | str) -> Option:
    return choice_option("input_type", input_type, InputType, label="InputType")


def with_fields(*masks: Enum | str) -> Option:
    """Restrict returned fields; the accepted masks depend on the request type."""

    def _apply(request: object) -> None:
        vocabulary: type[Enum] | None = getattr(type(request), "FIELD_MASKS", None)
        if vocabulary is None or not supports_field(request, "fields"):
            field_option("fields", ())(request)
            return
        coerced: list[str] = []
        for mask in masks:
            value = mask.value if isinstance(mask, Enum) else mask
            item = coerce_choice(vocabulary, value)
            if item is None:
                error = invalid_value("field mask", "fields", mask)
                error.operation = operation_name(request)
                raise error
            coerced.append(item)
        request.fields = tuple(coerced)  # type: ignore[attr-defined]

    return _apply


def with_session_token(token: uuid.UUID | str) -> Option:
    if isinstance(token, uuid.UUID):
        return field_option("session_token", token)
    try:
        return field_option("session_token", uuid.UUID(token))
    except ValueError:
        return failed_option(invalid_value("SessionToken", "session_token", token))


def with_location_bias_ip() -> Option:
    return field_option("location_bias", LocationBias.IP.value)


def with_location_bias_point(point: LatLng) -> Option:
    return set_fields(location_bias=LocationBias.POINT.value, location_bias_point=point)


def with_location_bias_circle(center: LatLng, radius: int) -> Option:
    return set_fields(
        location_bias=LocationBias.CIRCLE.value,
        location_bias_center=center,
        location_bias_radius=radius,
    )


def with_location_bias_rectangle(south_west: LatLng, north_east: LatLng) -> Option:
    return set_fields(
        location_bias=LocationBias.RECTANGLE.value,
        location_bias_south_west=south_west,
        location_bias_north_east=north_east,
    )


def with_location_bias(bias: LocationBias | str) -> Option:
    """Bias kind alone; companion fields come from the dedicated options."""

    if isinstance(bias, str) and not isinstance(bias, Enum):
        bias = bias.lower()
    return choice_option("location_bias", bias, LocationBias, label="LocationBias")


def with_photo_reference(reference: str) -> Option:
    return field_option("photo_reference", reference)


def _dimension(field_name: str, label: str, pixels: int) -> Option:
    if pixels <= 0:
        return failed_option(invalid_value(label, field_name, pixels))
    return field_option(field_name, pixels)


def with_max_height(pixels: int) -> Option:
    return _dimension("max_height", "MaxHeight", pixels)


def with_max_width(pixels: int) -> Option:
    return _dimension("max_width", "MaxWidth", pixels)


__all__ = [
    "with_keyword",
    "with_name",
    "with_query",
    "with_place_id",
    "with_page_token",
    "with_input",
    "with_offset",
    "with_open_now",
    "with_strict_bounds",
    "with_min_price",
    "with_max_price",
    "with_rank_by",
    "with_place_type",
    "with_autocomplete_types",
    "with_input_type",
    "with_fields",
    "with_session_token",
    "with_location_bias_ip",
    "with_location_bias_point",
    "with_location_bias_circle",
    "with_location_bias_rectangle",
    "with_location_bias",
    "with_photo_reference",
    "with_max_height",
    "with_max_width",
]
