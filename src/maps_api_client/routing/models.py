"""Directions and distance matrix response models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta

from ..core.latlng import LatLng, LatLngBounds
from ..core.models import ApiEnvelope, Distance
from ..core.polyline import Polyline


@dataclass(slots=True, frozen=True)
class TransitAgency:
    name: str = ""
    url: str = ""
    phone: str = ""


@dataclass(slots=True, frozen=True)
class TransitLineVehicle:
    name: str = ""
    type: str = ""
    icon: str = ""
    local_icon: str = ""


@dataclass(slots=True, frozen=True)
class TransitLine:
    name: str = ""
    short_name: str = ""
    color: str = ""
    agencies: tuple[TransitAgency, ...] = ()
    url: str = ""
    icon: str = ""
    text_color: str = ""
    vehicle: TransitLineVehicle = TransitLineVehicle()


@dataclass(slots=True, frozen=True)
class TransitStop:
    location: LatLng | None = None
    name: str = ""


@dataclass(slots=True, frozen=True)
class TransitDetails:
    """Transit leg of a step; times are ``None`` when the service omits them."""

    arrival_stop: TransitStop = TransitStop()
    departure_stop: TransitStop = TransitStop()
    arrival_time: datetime | None = None
    departure_time: datetime | None = None
    headsign: str = ""
    headway: timedelta | None = None
    num_stops: int = 0
    line: TransitLine = TransitLine()
    trip_short_name: str = ""


@dataclass(slots=True, frozen=True)
class Step:
    html_instructions: str = ""
    distance: Distance = Distance()
    duration: timedelta | None = None
    start_location: LatLng | None = None
    end_location: LatLng | None = None
    polyline: Polyline = Polyline()
    steps: tuple["Step", ...] = ()
    transit_details: TransitDetails | None = None
    travel_mode: str = ""
    maneuver: str = ""


@dataclass(slots=True, frozen=True)
class Leg:
    steps: tuple[Step, ...] = ()
    distance: Distance = Distance()
    duration: timedelta | None = None
    duration_in_traffic: timedelta | None = None
    arrival_time: datetime | None = None
    departure_time: datetime | None = None
    start_location: LatLng | None = None
    end_location: LatLng | None = None
    start_address: str = ""
    end_address: str = ""


@dataclass(slots=True, frozen=True)
class Fare:
    currency: str = ""
    value: float = 0.0
    text: str = ""


@dataclass(slots=True, frozen=True)
class Route:
    summary: str = ""
    legs: tuple[Leg, ...] = ()
    waypoint_order: tuple[int, ...] = ()
    overview_polyline: Polyline = Polyline()
    bounds: LatLngBounds | None = None
    copyrights: str = ""
    warnings: tuple[str, ...] = ()
    fare: Fare | None = None


@dataclass(slots=True, frozen=True)
class GeocodedWaypoint:
    geocoder_status: str = ""
    partial_match: bool = False
    place_id: str = ""
    types: tuple[str, ...] = ()


@dataclass(slots=True, frozen=True)
class DirectionsResponse:
    envelope: ApiEnvelope
    routes: tuple[Route, ...] = ()
    geocoded_waypoints: tuple[GeocodedWaypoint, ...] = ()


@dataclass(slots=True, frozen=True)
class DistanceMatrixElement:
    status: str = ""
    duration: timedelta | None = None
    duration_in_traffic: timedelta | None = None
    distance: Distance = Distance()


@dataclass(slots=True, frozen=True)
class DistanceMatrixElementsRow:
    elements: tuple[DistanceMatrixElement, ...] = ()


@dataclass(slots=True, frozen=True)
class DistanceMatrixResponse:
    envelope: ApiEnvelope
    origin_addresses: tuple[str, ...] = ()
    destination_addresses: tuple[str, ...] = ()
    rows: tuple[DistanceMatrixElementsRow, ...] = ()


__all__ = [
    "TransitAgency",
    "TransitLineVehicle",
    "TransitLine",
    "TransitStop",
    "TransitDetails",
    "Step",
    "Leg",
    "Fare",
    "Route",
    "GeocodedWaypoint",
    "DirectionsResponse",
    "DistanceMatrixElement",
    "DistanceMatrixElementsRow",
    "DistanceMatrixResponse",
]
