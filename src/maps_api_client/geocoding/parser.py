"""Parsers from geocoding, time zone and elevation payloads into typed responses."""

from __future__ import annotations

from datetime import timedelta

from ..core.codecs import decode_duration, encode_seconds
from ..core.latlng import bounds_from_wire, bounds_to_wire, latlng_from_wire, latlng_to_wire
from ..core.response_parsing import (
    JsonObject,
    as_object,
    flag,
    number,
    objects,
    parse_envelope,
    strings,
    text,
)
from ..core.wire import WireField, decode_fields, encode_fields, put
from .models import (
    AddressComponent,
    AddressGeometry,
    ElevationResponse,
    ElevationResult,
    GeocodingResponse,
    GeocodingResult,
    PlusCode,
    TimezoneResponse,
    TimezoneResult,
)


def _types(item: object) -> tuple[str, ...]:
    return strings(item, name="types")


def parse_address_component(item: JsonObject) -> AddressComponent:
    return AddressComponent(
        long_name=text(item.get("long_name")),
        short_name=text(item.get("short_name")),
        types=_types(item.get("types")),
    )


def parse_address_components(item: object) -> tuple[AddressComponent, ...]:
    return tuple(
        parse_address_component(component)
        for component in objects(item, name="address_components")
    )


_GEOMETRY_FIELDS: tuple[WireField, ...] = (
    WireField("location", "location", latlng_from_wire, latlng_to_wire),
    WireField("location_type", "location_type", text),
    WireField("viewport", "viewport", bounds_from_wire, bounds_to_wire),
    WireField("types", "types", _types, list),
)


def parse_address_geometry(item: object) -> AddressGeometry:
    return AddressGeometry(**decode_fields(as_object(item, name="geometry"), _GEOMETRY_FIELDS))


def address_geometry_to_wire(geometry: AddressGeometry) -> JsonObject:
    return encode_fields(geometry, _GEOMETRY_FIELDS)


def parse_plus_code(item: object) -> PlusCode | None:
    if item is None:
        return None
    obj = as_object(item, name="plus_code")
    return PlusCode(
        global_code=text(obj.get("global_code")),
        compound_code=text(obj.get("compound_code")),
    )


def parse_geocoding_result(item: JsonObject) -> GeocodingResult:
    return GeocodingResult(
        address_components=parse_address_components(item.get("address_components")),
        formatted_address=text(item.get("formatted_address")),
        geometry=parse_address_geometry(item.get("geometry")),
        types=_types(item.get("types")),
        place_id=text(item.get("place_id")),
        partial_match=flag(item.get("partial_match"), name="partial_match"),
        plus_code=parse_plus_code(item.get("plus_code")),
    )


def parse_geocoding_response(payload: JsonObject) -> GeocodingResponse:
    return GeocodingResponse(
        envelope=parse_envelope(payload),
        results=tuple(
            parse_geocoding_result(item) for item in objects(payload.get("results"), name="results")
        ),
    )


_TIMEZONE_FIELDS: tuple[WireField, ...] = (
    WireField("time_zone_id", "timeZoneId", text),
    WireField("time_zone_name", "timeZoneName", text),
)


def _offset(item: object) -> timedelta:
    return decode_duration(item) or timedelta(0)


def parse_timezone_result(payload: JsonObject) -> TimezoneResult:
    return TimezoneResult(
        **decode_fields(payload, _TIMEZONE_FIELDS),
        dst_offset=_offset(payload.get("dstOffset")),
        raw_offset=_offset(payload.get("rawOffset")),
    )


def timezone_result_to_wire(result: TimezoneResult) -> JsonObject:
    out = encode_fields(result, _TIMEZONE_FIELDS)
    put(out, "dstOffset", encode_seconds(result.dst_offset))
    put(out, "rawOffset", encode_seconds(result.raw_offset))
    return out


def parse_timezone_response(payload: JsonObject) -> TimezoneResponse:
    return TimezoneResponse(
        envelope=parse_envelope(payload),
        result=parse_timezone_result(payload),
    )


def parse_elevation_result(item: JsonObject) -> ElevationResult:
    return ElevationResult(
        location=latlng_from_wire(item.get("location")),
        elevation=number(item.get("elevation"), name="elevation"),
        resolution=number(item.get("resolution"), name="resolution"),
    )


def parse_elevation_response(payload: JsonObject) -> ElevationResponse:
    return ElevationResponse(
        envelope=parse_envelope(payload),
        results=tuple(
            parse_elevation_result(item) for item in objects(payload.get("results"), name="results")
        ),
    )


__all__ = [
    "parse_address_component",
    "parse_address_components",
    "parse_address_geometry",
    "address_geometry_to_wire",
    "parse_plus_code",
    "parse_geocoding_result",
    "parse_geocoding_response",
    "parse_timezone_result",
    "timezone_result_to_wire",
    "parse_timezone_response",
    "parse_elevation_result",
    "parse_elevation_response",
]
