"""Cross-field validation for geocoding, time zone and elevation requests."""

from __future__ import annotations

from ..core.validation import missing, missing_one_of, requires
from .requests import ElevationRequest, GeocodingRequest, TimezoneRequest


def validate_geocoding_request(request: GeocodingRequest) -> None:
    if not (request.address or request.components or request.latlng is not None or request.place_id):
        raise missing_one_of(
            request.OPERATION,
            ("address", "components", "latlng", "place_id"),
            "geocoding: You must specify at least one of Address or Components for a geocoding "
            "request, or LatLng for a reverse geocoding request",
        )


def validate_timezone_request(request: TimezoneRequest) -> None:
    if request.location is None:
        raise missing(request.OPERATION, "location", "timezone: You must specify Location")


def validate_elevation_request(request: ElevationRequest) -> None:
    operation = request.OPERATION
    if not request.path and not request.locations:
        raise missing_one_of(
            operation,
            ("path", "locations"),
            "elevation: Provide either Path or Locations",
        )
    if request.path and request.samples == 0:
        raise requires(
            operation,
            ("path", "samples"),
            "elevation: Sampled Path Request requires Samples to be specifed",
        )


__all__ = [
    "validate_geocoding_request",
    "validate_timezone_request",
    "validate_elevation_request",
]
