"""Request models for the geocoding, time zone and elevation endpoints."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import ClassVar

from ..core.latlng import LatLng, LatLngBounds


@dataclass(slots=True)
class GeocodingRequest:
    """Forward (address/components), reverse (latlng) or place-id geocoding."""

    OPERATION: ClassVar[str] = "geocode"

    address: str = ""
    components: dict[str, tuple[str, ...]] = field(default_factory=dict)
    bounds: LatLngBounds | None = None
    region: str = ""
    latlng: LatLng | None = None
    place_id: str = ""
    result_type: tuple[str, ...] = ()
    location_type: tuple[str, ...] = ()
    language: str = ""


@dataclass(slots=True)
class TimezoneRequest:
    OPERATION: ClassVar[str] = "timezone"

    location: LatLng | None = None
    timestamp: datetime | None = None
    language: str = ""


@dataclass(slots=True)
class ElevationRequest:
    OPERATION: ClassVar[str] = "elevation"

    locations: tuple[LatLng, ...] = ()
    path: tuple[LatLng, ...] = ()
    samples: int = 0


__all__ = [
    "GeocodingRequest",
    "TimezoneRequest",
    "ElevationRequest",
]
