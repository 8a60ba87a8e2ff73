"""Geocoding, time zone and elevation response models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

from ..core.latlng import LatLng, LatLngBounds
from ..core.models import ApiEnvelope


@dataclass(slots=True, frozen=True)
class AddressComponent:
    long_name: str = ""
    short_name: str = ""
    types: tuple[str, ...] = ()


@dataclass(slots=True, frozen=True)
class AddressGeometry:
    location: LatLng | None = None
    location_type: str = ""
    viewport: LatLngBounds | None = None
    types: tuple[str, ...] = ()


@dataclass(slots=True, frozen=True)
class PlusCode:
    global_code: str = ""
    compound_code: str = ""


@dataclass(slots=True, frozen=True)
class GeocodingResult:
    address_components: tuple[AddressComponent, ...] = ()
    formatted_address: str = ""
    geometry: AddressGeometry = AddressGeometry()
    types: tuple[str, ...] = ()
    place_id: str = ""
    partial_match: bool = False
    plus_code: PlusCode | None = None


@dataclass(slots=True, frozen=True)
class GeocodingResponse:
    envelope: ApiEnvelope
    results: tuple[GeocodingResult, ...] = ()


@dataclass(slots=True, frozen=True)
class TimezoneResult:
    """Offsets arrive as integer seconds and are held as ``timedelta``."""

    dst_offset: timedelta = timedelta(0)
    raw_offset: timedelta = timedelta(0)
    time_zone_id: str = ""
    time_zone_name: str = ""

    @property
    def utc_offset(self) -> timedelta:
        return self.raw_offset + self.dst_offset


@dataclass(slots=True, frozen=True)
class TimezoneResponse:
    envelope: ApiEnvelope
    result: TimezoneResult = TimezoneResult()


@dataclass(slots=True, frozen=True)
class ElevationResult:
    location: LatLng | None = None
    elevation: float = 0.0
    resolution: float = 0.0


@dataclass(slots=True, frozen=True)
class ElevationResponse:
    envelope: ApiEnvelope
    results: tuple[ElevationResult, ...] = ()


__all__ = [
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
