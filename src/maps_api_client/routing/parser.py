"""Parsers from routing JSON payloads into typed response objects, and back."""

from __future__ import annotations

from ..core.codecs import (
    decode_duration,
    decode_timestamp,
    encode_duration,
    encode_seconds,
    encode_timestamp,
)
from ..core.latlng import bounds_from_wire, latlng_from_wire, latlng_to_wire
from ..core.models import Distance
from ..core.polyline import Polyline
from ..core.response_parsing import (
    JsonObject,
    as_list,
    as_object,
    flag,
    integer,
    number,
    objects,
    parse_envelope,
    strings,
    text,
)
from ..core.wire import WireField, decode_fields, encode_fields, put
from .models import (
    DirectionsResponse,
    DistanceMatrixElement,
    DistanceMatrixElementsRow,
    DistanceMatrixResponse,
    Fare,
    GeocodedWaypoint,
    Leg,
    Route,
    Step,
    TransitAgency,
    TransitDetails,
    TransitLine,
    TransitLineVehicle,
    TransitStop,
)


def parse_distance(item: object) -> Distance:
    obj = as_object(item, name="distance")
    return Distance(
        human_readable=text(obj.get("text")),
        meters=integer(obj.get("value"), name="distance.value"),
    )


def distance_to_wire(distance: Distance) -> JsonObject:
    return {"text": distance.human_readable, "value": distance.meters}


def parse_polyline(item: object) -> Polyline:
    return Polyline(points=text(as_object(item, name="polyline").get("points")))


def polyline_to_wire(polyline: Polyline) -> JsonObject:
    return {"points": polyline.points}


def parse_transit_agency(item: JsonObject) -> TransitAgency:
    return TransitAgency(
        name=text(item.get("name")),
        url=text(item.get("url")),
        phone=text(item.get("phone")),
    )


def parse_transit_vehicle(item: object) -> TransitLineVehicle:
    obj = as_object(item, name="vehicle")
    return TransitLineVehicle(
        name=text(obj.get("name")),
        type=text(obj.get("type")),
        icon=text(obj.get("icon")),
        local_icon=text(obj.get("local_icon")),
    )


def parse_transit_line(item: object) -> TransitLine:
    obj = as_object(item, name="line")
    return TransitLine(
        name=text(obj.get("name")),
        short_name=text(obj.get("short_name")),
        color=text(obj.get("color")),
        agencies=tuple(parse_transit_agency(agency) for agency in objects(obj.get("agencies"), name="agencies")),
        url=text(obj.get("url")),
        icon=text(obj.get("icon")),
        text_color=text(obj.get("text_color")),
        vehicle=parse_transit_vehicle(obj.get("vehicle")),
    )


def transit_line_to_wire(line: TransitLine) -> JsonObject:
    return {
        "name": line.name,
        "short_name": line.short_name,
        "color": line.color,
        "agencies": [
            {"name": agency.name, "url": agency.url, "phone": agency.phone}
            for agency in line.agencies
        ],
        "url": line.url,
        "icon": line.icon,
        "text_color": line.text_color,
        "vehicle": {
            "name": line.vehicle.name,
            "type": line.vehicle.type,
            "icon": line.vehicle.icon,
            "local_icon": line.vehicle.local_icon,
        },
    }


def parse_transit_stop(item: object) -> TransitStop:
    obj = as_object(item, name="stop")
    return TransitStop(location=latlng_from_wire(obj.get("location")), name=text(obj.get("name")))


def transit_stop_to_wire(stop: TransitStop) -> JsonObject:
    out: JsonObject = {"name": stop.name}
    put(out, "location", latlng_to_wire(stop.location))
    return out


def _optional_transit_details(item: object) -> TransitDetails | None:
    if item is None:
        return None
    return parse_transit_details(as_object(item, name="transit_details"))


def _optional_transit_details_to_wire(details: object) -> JsonObject | None:
    if details is None:
        return None
    return transit_details_to_wire(details)  # type: ignore[arg-type]


def _sub_steps(item: object) -> tuple[Step, ...]:
    return tuple(parse_step(step) for step in objects(item, name="steps"))


def _sub_steps_to_wire(steps: object) -> list[JsonObject]:
    return [step_to_wire(step) for step in steps]  # type: ignore[attr-defined]


def _count(item: object) -> int:
    return integer(item, name="num_stops")


# Fields copied through with their literal wire shape. Durations and
# timestamps are overlaid separately by the parse/encode functions below.
_TRANSIT_DETAILS_FIELDS: tuple[WireField, ...] = (
    WireField("arrival_stop", "arrival_stop", parse_transit_stop, transit_stop_to_wire),
    WireField("departure_stop", "departure_stop", parse_transit_stop, transit_stop_to_wire),
    WireField("headsign", "headsign", text),
    WireField("num_stops", "num_stops", _count),
    WireField("line", "line", parse_transit_line, transit_line_to_wire),
    WireField("trip_short_name", "trip_short_name", text),
)

_STEP_FIELDS: tuple[WireField, ...] = (
    WireField("html_instructions", "html_instructions", text),
    WireField("distance", "distance", parse_distance, distance_to_wire),
    WireField("start_location", "start_location", latlng_from_wire, latlng_to_wire),
    WireField("end_location", "end_location", latlng_from_wire, latlng_to_wire),
    WireField("polyline", "polyline", parse_polyline, polyline_to_wire),
    WireField("steps", "steps", _sub_steps, _sub_steps_to_wire),
    WireField(
        "transit_details",
        "transit_details",
        _optional_transit_details,
        _optional_transit_details_to_wire,
    ),
    WireField("travel_mode", "travel_mode", text),
    WireField("maneuver", "maneuver", text),
)

_LEG_FIELDS: tuple[WireField, ...] = (
    WireField("steps", "steps", _sub_steps, _sub_steps_to_wire),
    WireField("distance", "distance", parse_distance, distance_to_wire),
    WireField("start_location", "start_location", latlng_from_wire, latlng_to_wire),
    WireField("end_location", "end_location", latlng_from_wire, latlng_to_wire),
    WireField("start_address", "start_address", text),
    WireField("end_address", "end_address", text),
)

_ELEMENT_FIELDS: tuple[WireField, ...] = (
    WireField("status", "status", text),
    WireField("distance", "distance", parse_distance, distance_to_wire),
)


def parse_transit_details(item: JsonObject) -> TransitDetails:
    return TransitDetails(
        **decode_fields(item, _TRANSIT_DETAILS_FIELDS),
        arrival_time=decode_timestamp(item.get("arrival_time")),
        departure_time=decode_timestamp(item.get("departure_time")),
        headway=decode_duration(item.get("headway")),
    )


def transit_details_to_wire(details: TransitDetails) -> JsonObject:
    out = encode_fields(details, _TRANSIT_DETAILS_FIELDS)
    put(out, "arrival_time", encode_timestamp(details.arrival_time))
    put(out, "departure_time", encode_timestamp(details.departure_time))
    put(out, "headway", encode_seconds(details.headway))
    return out


def parse_step(item: JsonObject) -> Step:
    return Step(
        **decode_fields(item, _STEP_FIELDS),
        duration=decode_duration(item.get("duration")),
    )


def step_to_wire(step: Step) -> JsonObject:
    out = encode_fields(step, _STEP_FIELDS)
    put(out, "duration", encode_duration(step.duration))
    return out


def parse_leg(item: JsonObject) -> Leg:
    return Leg(
        **decode_fields(item, _LEG_FIELDS),
        duration=decode_duration(item.get("duration")),
        duration_in_traffic=decode_duration(item.get("duration_in_traffic")),
        arrival_time=decode_timestamp(item.get("arrival_time")),
        departure_time=decode_timestamp(item.get("departure_time")),
    )


def leg_to_wire(leg: Leg) -> JsonObject:
    out = encode_fields(leg, _LEG_FIELDS)
    put(out, "duration", encode_duration(leg.duration))
    put(out, "duration_in_traffic", encode_duration(leg.duration_in_traffic))
    put(out, "arrival_time", encode_timestamp(leg.arrival_time))
    put(out, "departure_time", encode_timestamp(leg.departure_time))
    return out


def parse_distance_matrix_element(item: JsonObject) -> DistanceMatrixElement:
    return DistanceMatrixElement(
        **decode_fields(item, _ELEMENT_FIELDS),
        duration=decode_duration(item.get("duration")),
        duration_in_traffic=decode_duration(item.get("duration_in_traffic")),
    )


def distance_matrix_element_to_wire(element: DistanceMatrixElement) -> JsonObject:
    out = encode_fields(element, _ELEMENT_FIELDS)
    put(out, "duration", encode_duration(element.duration))
    put(out, "duration_in_traffic", encode_duration(element.duration_in_traffic))
    return out


def _parse_fare(item: object) -> Fare | None:
    if item is None:
        return None
    obj = as_object(item, name="fare")
    return Fare(
        currency=text(obj.get("currency")),
        value=number(obj.get("value"), name="fare.value"),
        text=text(obj.get("text")),
    )


def parse_route(item: JsonObject) -> Route:
    return Route(
        summary=text(item.get("summary")),
        legs=tuple(parse_leg(leg) for leg in objects(item.get("legs"), name="legs")),
        waypoint_order=tuple(
            integer(index, name="waypoint_order")
            for index in as_list(item.get("waypoint_order"), name="waypoint_order")
        ),
        overview_polyline=parse_polyline(item.get("overview_polyline")),
        bounds=bounds_from_wire(item.get("bounds")),
        copyrights=text(item.get("copyrights")),
        warnings=strings(item.get("warnings"), name="warnings"),
        fare=_parse_fare(item.get("fare")),
    )


def _parse_geocoded_waypoint(item: JsonObject) -> GeocodedWaypoint:
    return GeocodedWaypoint(
        geocoder_status=text(item.get("geocoder_status")),
        partial_match=flag(item.get("partial_match"), name="partial_match"),
        place_id=text(item.get("place_id")),
        types=strings(item.get("types"), name="types"),
    )


def parse_directions_response(payload: JsonObject) -> DirectionsResponse:
    return DirectionsResponse(
        envelope=parse_envelope(payload),
        routes=tuple(parse_route(route) for route in objects(payload.get("routes"), name="routes")),
        geocoded_waypoints=tuple(
            _parse_geocoded_waypoint(item)
            for item in objects(payload.get("geocoded_waypoints"), name="geocoded_waypoints")
        ),
    )


def parse_distance_matrix_response(payload: JsonObject) -> DistanceMatrixResponse:
    rows: list[DistanceMatrixElementsRow] = []
    for row in objects(payload.get("rows"), name="rows"):
        elements = objects(row.get("elements"), name="elements")
        rows.append(
            DistanceMatrixElementsRow(
                elements=tuple(parse_distance_matrix_element(element) for element in elements)
            )
        )
    return DistanceMatrixResponse(
        envelope=parse_envelope(payload),
        origin_addresses=strings(payload.get("origin_addresses"), name="origin_addresses"),
        destination_addresses=strings(
            payload.get("destination_addresses"),
            name="destination_addresses",
        ),
        rows=tuple(rows),
    )


__all__ = [
    "parse_distance",
    "distance_to_wire",
    "parse_polyline",
    "polyline_to_wire",
    "parse_transit_details",
    "transit_details_to_wire",
    "parse_step",
    "step_to_wire",
    "parse_leg",
    "leg_to_wire",
    "parse_distance_matrix_element",
    "distance_matrix_element_to_wire",
    "parse_route",
    "parse_directions_response",
    "parse_distance_matrix_response",
]
