"""Options specific to directions and distance matrix requests."""

from __future__ import annotations

from datetime import datetime

from ..core.codecs import epoch_seconds
from ..core.latlng import LatLng
from ..core.options import (
    Option,
    choice_option,
    choices_option,
    failed_option,
    field_option,
    invalid_value,
)
from .enums import Avoid, TrafficModel, TransitMode, TransitRoutingPreference, TravelMode, Units

NOW = "now"


def _time_value(value: datetime | int | str) -> str | None:
    if isinstance(value, datetime):
        return str(epoch_seconds(value))
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return str(value) if value >= 0 else None
    if value == NOW or (isinstance(value, str) and value.isdigit()):
        return value
    return None


def _time_option(field_name: str, label: str, value: datetime | int | str) -> Option:
    wire = _time_value(value)
    if wire is None:
        return failed_option(invalid_value(label, field_name, value))
    return field_option(field_name, wire)


def _place(value: str | LatLng) -> str:
    return str(value)


def with_destination(destination: str | LatLng) -> Option:
    return field_option("destination", destination)


def with_waypoints(*waypoints: str | LatLng) -> Option:
    return field_option("waypoints", tuple(_place(point) for point in waypoints))


def with_optimize_waypoints(optimize: bool = True) -> Option:
    return field_option("optimize_waypoints", bool(optimize))


def with_alternatives(alternatives: bool = True) -> Option:
    return field_option("alternatives", bool(alternatives))


def with_origins(*origins: str | LatLng) -> Option:
    return field_option("origins", tuple(_place(origin) for origin in origins))


def with_destinations(*destinations: str | LatLng) -> Option:
    return field_option("destinations", tuple(_place(item) for item in destinations))


def with_mode(mode: TravelMode | str) -> Option:
    return choice_option("mode", mode, TravelMode, label="Mode")


def with_avoid(*avoid: Avoid | str) -> Option:
    return choices_option("avoid", avoid, Avoid, label="Avoid restriction")


def with_units(units: Units | str) -> Option:
    return choice_option("units", units, Units, label="Units")


def with_transit_mode(*modes: TransitMode | str) -> Option:
    return choices_option("transit_mode", modes, TransitMode, label="TransitMode")


def with_transit_routing_preference(preference: TransitRoutingPreference | str) -> Option:
    return choice_option(
        "transit_routing_preference",
        preference,
        TransitRoutingPreference,
        label="TransitRoutingPreference",
    )


def with_traffic_model(model: TrafficModel | str) -> Option:
    return choice_option("traffic_model", model, TrafficModel, label="TrafficModel")


def with_departure_time(value: datetime | int | str) -> Option:
    """Departure as a datetime, epoch seconds, or ``"now"``."""

    return _time_option("departure_time", "DepartureTime", value)


def with_arrival_time(value: datetime | int | str) -> Option:
    return _time_option("arrival_time", "ArrivalTime", value)


__all__ = [
    "NOW",
    "with_destination",
    "with_waypoints",
    "with_optimize_waypoints",
    "with_alternatives",
    "with_origins",
    "with_destinations",
    "with_mode",
    "with_avoid",
    "with_units",
    "with_transit_mode",
    "with_transit_routing_preference",
    "with_traffic_model",
    "with_departure_time",
    "with_arrival_time",
]
