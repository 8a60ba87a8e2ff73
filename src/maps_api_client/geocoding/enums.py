"""Restricted vocabularies for geocoding requests."""

from __future__ import annotations

from enum import Enum


class Component(str, Enum):
    """Component filter keys shared by geocoding and place autocomplete."""

    ROUTE = "route"
    LOCALITY = "locality"
    ADMINISTRATIVE_AREA = "administrative_area"
    POSTAL_CODE = "postal_code"
    COUNTRY = "country"


class LocationType(str, Enum):
    ROOFTOP = "ROOFTOP"
    RANGE_INTERPOLATED = "RANGE_INTERPOLATED"
    GEOMETRIC_CENTER = "GEOMETRIC_CENTER"
    APPROXIMATE = "APPROXIMATE"


__all__ = [
    "Component",
    "LocationType",
]
