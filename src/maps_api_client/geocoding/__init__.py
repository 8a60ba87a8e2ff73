"""Geocoding, time zone and elevation package."""

from .enums import Component, LocationType
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
from .requests import ElevationRequest, GeocodingRequest, TimezoneRequest

__all__ = [
    "Component",
    "LocationType",
    "GeocodingRequest",
    "TimezoneRequest",
    "ElevationRequest",
    "AddressComponent",
    "AddressGeometry",
    "PlusCode",
    "GeocodingResult",
    "GeocodingResponse",
    "TimezoneResult",
    "TimezoneResponse",
    "ElevationResult",
    "ElevationResponse",
]
