"""Cross-field validation for routing requests, run once before serialization."""

from __future__ import annotations

from ..core.validation import conflict, missing, requires
from .enums import TravelMode
from .requests import DirectionsRequest, DistanceMatrixRequest

_TRANSIT = TravelMode.TRANSIT.value


def validate_directions_request(request: DirectionsRequest) -> None:
    operation = request.OPERATION
    if not request.origin:
        raise missing(operation, "origin", "directions: Origin required")
    if not request.destination:
        raise missing(operation, "destination", "directions: Destination required")
    if request.departure_time and request.arrival_time:
        raise conflict(
            operation,
            ("departure_time", "arrival_time"),
            "directions: must not specify both DepartureTime and ArrivalTime",
        )
    if request.transit_mode and request.mode != _TRANSIT:
        raise requires(
            operation,
            ("transit_mode", "mode"),
            "directions: must specify mode of transit when specifying transitMode",
            value=request.mode,
        )
    if request.transit_routing_preference and request.mode != _TRANSIT:
        raise requires(
            operation,
            ("transit_routing_preference", "mode"),
            "directions: must specify mode of transit when specifying transitRoutingPreference",
            value=request.mode,
        )
    if request.traffic_model and request.mode == _TRANSIT:
        raise conflict(
            operation,
            ("traffic_model", "mode"),
            "directions: cannot specify transit mode and traffic model together",
        )


def validate_distance_matrix_request(request: DistanceMatrixRequest) -> None:
    operation = request.OPERATION
    if not request.origins:
        raise missing(operation, "origins", "maps: origins empty")
    if not request.destinations:
        raise missing(operation, "destinations", "maps: destinations empty")
    if request.departure_time and request.arrival_time:
        raise conflict(
            operation,
            ("departure_time", "arrival_time"),
            "maps: DepartureTime and ArrivalTime both specified",
        )
    if request.transit_mode and request.mode != _TRANSIT:
        raise requires(
            operation,
            ("transit_mode", "mode"),
            "maps: TransitMode specified while Mode != TravelModeTransit",
            value=request.mode,
        )
    if request.transit_routing_preference and request.mode != _TRANSIT:
        raise requires(
            operation,
            ("transit_routing_preference", "mode"),
            f"maps: mode of transit '{request.mode}' invalid for TransitRoutingPreference",
            value=request.mode,
        )
    if request.traffic_model and request.mode == _TRANSIT:
        raise conflict(
            operation,
            ("traffic_model", "mode"),
            "maps: cannot specify transit mode and traffic model together",
        )


__all__ = [
    "validate_directions_request",
    "validate_distance_matrix_request",
]
