"""Request models for directions and distance matrix."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from ..core.latlng import LatLng


@dataclass(slots=True)
class DirectionsRequest:
    OPERATION: ClassVar[str] = "directions"

    origin: str | LatLng = ""
    destination: str | LatLng = ""
    mode: str = ""
    departure_time: str = ""
    arrival_time: str = ""
    waypoints: tuple[str, ...] = ()
    optimize_waypoints: bool = False
    alternatives: bool = False
    avoid: tuple[str, ...] = ()
    language: str = ""
    units: str = ""
    region: str = ""
    transit_mode: tuple[str, ...] = ()
    transit_routing_preference: str = ""
    traffic_model: str = ""


@dataclass(slots=True)
class DistanceMatrixRequest:
    OPERATION: ClassVar[str] = "distance_matrix"

    origins: tuple[str, ...] = ()
    destinations: tuple[str, ...] = ()
    mode: str = ""
    language: str = ""
    avoid: tuple[str, ...] = ()
    units: str = ""
    region: str = ""
    departure_time: str = ""
    arrival_time: str = ""
    traffic_model: str = ""
    transit_mode: tuple[str, ...] = ()
    transit_routing_preference: str = ""


__all__ = [
    "DirectionsRequest",
    "DistanceMatrixRequest",
]
