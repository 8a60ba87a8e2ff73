"""Options specific to geocoding, time zone and elevation requests."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import datetime

from ..core.latlng import LatLng, LatLngBounds
from ..core.options import (
    Option,
    choices_option,
    copy_mapping_of_lists,
    failed_option,
    field_option,
    invalid_value,
)
from .enums import Component, LocationType


def with_address(address: str) -> Option:
    return field_option("address", address)


def with_components(components: Mapping[Component | str, str | Iterable[str]]) -> Option:
    """Component filters; keys may be ``Component`` members or plain strings.

    The mapping is copied, so later changes by the caller do not leak into the
    request.
    """

    for key in components:
        try:
            Component(key)
        except ValueError:
            return failed_option(invalid_value("Component", "components", key))
    return field_option("components", copy_mapping_of_lists(components))


def with_bounds(bounds: LatLngBounds) -> Option:
    return field_option("bounds", bounds)


def with_latlng(latlng: LatLng) -> Option:
    return field_option("latlng", latlng)


def with_result_types(*result_types: str) -> Option:
    return field_option("result_type", tuple(str(item) for item in result_types))


def with_location_types(*location_types: LocationType | str) -> Option:
    return choices_option("location_type", location_types, LocationType, label="LocationType")


def with_timestamp(timestamp: datetime) -> Option:
    return field_option("timestamp", timestamp)


def with_locations(*locations: LatLng) -> Option:
    return field_option("locations", tuple(locations))


def with_path(*path: LatLng) -> Option:
    return field_option("path", tuple(path))


def with_samples(samples: int) -> Option:
    if samples <= 0:
        return failed_option(invalid_value("Samples", "samples", samples))
    return field_option("samples", samples)


__all__ = [
    "with_address",
    "with_components",
    "with_bounds",
    "with_latlng",
    "with_result_types",
    "with_location_types",
    "with_timestamp",
    "with_locations",
    "with_path",
    "with_samples",
]
