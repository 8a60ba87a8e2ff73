"""Directions and distance matrix package."""

from .enums import Avoid, TrafficModel, TransitMode, TransitRoutingPreference, TravelMode, Units
from .models import (
    DirectionsResponse,
    DistanceMatrixElement,
    DistanceMatrixElementsRow,
    DistanceMatrixResponse,
    Leg,
    Route,
    Step,
    TransitDetails,
)
from .requests import DirectionsRequest, DistanceMatrixRequest

__all__ = [
    "TravelMode",
    "Avoid",
    "Units",
    "TransitMode",
    "TransitRoutingPreference",
    "TrafficModel",
    "DirectionsRequest",
    "DistanceMatrixRequest",
    "DirectionsResponse",
    "DistanceMatrixResponse",
    "DistanceMatrixElementsRow",
    "DistanceMatrixElement",
    "Route",
    "Leg",
    "Step",
    "TransitDetails",
]
