"""Public option constructors.

Options shared by several request types live here; the per-domain options are
re-exported so callers import everything from one place. An option applied
to a request type without the matching field fails with a ``not_supported``
validation error.
"""

from __future__ import annotations

from .core.errors import MapsValidationError
from .core.latlng import LatLng, parse_latlng
from .core.options import Option, failed_option, field_option, invalid_value
from .geocoding.options import (
    with_address,
    with_bounds,
    with_components,
    with_latlng,
    with_location_types,
    with_locations,
    with_path,
    with_result_types,
    with_samples,
    with_timestamp,
)
from .places.requests import PlaceAutocompleteRequest
from .places.options import (
    with_autocomplete_types,
    with_fields,
    with_input,
    with_input_type,
    with_keyword,
    with_location_bias,
    with_location_bias_circle,
    with_location_bias_ip,
    with_location_bias_point,
    with_location_bias_rectangle,
    with_max_height,
    with_max_price,
    with_max_width,
    with_min_price,
    with_name,
    with_offset,
    with_open_now,
    with_page_token,
    with_photo_reference,
    with_place_id,
    with_place_type,
    with_query,
    with_rank_by,
    with_session_token,
    with_strict_bounds,
)
from .roads.options import (
    with_interpolate,
    with_place_ids,
    with_points,
    with_speed_limit_units,
)
from .routing.options import (
    NOW,
    with_alternatives,
    with_arrival_time,
    with_avoid,
    with_departure_time,
    with_destination,
    with_destinations,
    with_mode,
    with_optimize_waypoints,
    with_origins,
    with_traffic_model,
    with_transit_mode,
    with_transit_routing_preference,
    with_units,
    with_waypoints,
)
from .staticmap.options import (
    with_center,
    with_format,
    with_map_type,
    with_markers,
    with_paths,
    with_scale,
    with_size,
    with_style_rule,
    with_styles,
    with_visible,
    with_zoom,
)


def with_language(language: str) -> Option:
    return field_option("language", language)


def with_region(region: str) -> Option:
    return field_option("region", region)


def with_location(location: LatLng | str) -> Option:
    """Point as ``LatLng`` or ``"lat,lng"`` text; bad text fails when applied."""

    if isinstance(location, LatLng):
        return field_option("location", location)
    try:
        return field_option("location", parse_latlng(location))
    except MapsValidationError as exc:
        return failed_option(exc)


def with_radius(meters: int) -> Option:
    if meters < 0:
        return failed_option(invalid_value("Radius", "radius", meters))
    return field_option("radius", meters)


def with_origin(origin: str | LatLng) -> Option:
    """Route origin (address or point), or the autocomplete distance origin.

    Place autocomplete measures distance from a point, so text given there must
    be ``"lat,lng"``; bad text fails when applied.
    """

    route_origin = field_option("origin", origin)
    if isinstance(origin, LatLng):
        return route_origin

    def _apply(request: object) -> None:
        if not isinstance(request, PlaceAutocompleteRequest):
            route_origin(request)
            return
        try:
            point = parse_latlng(origin)
        except MapsValidationError as exc:
            exc.fields = ("origin",)
            failed_option(exc)(request)
        else:
            field_option("origin", point)(request)

    return _apply


__all__ = [
    "Option",
    "NOW",
    "with_language",
    "with_region",
    "with_location",
    "with_radius",
    "with_origin",
    "with_destination",
    "with_waypoints",
    "with_optimize_waypoints",
    "with_alternatives",
    "with_origins",
    "with_destinations",
    "with_mode",
    "with_avoid",
    "with_units",
    "with_transit_mode",
    "with_transit_routing_preference",
    "with_traffic_model",
    "with_departure_time",
    "with_arrival_time",
    "with_keyword",
    "with_name",
    "with_query",
    "with_place_id",
    "with_page_token",
    "with_input",
    "with_offset",
    "with_open_now",
    "with_strict_bounds",
    "with_min_price",
    "with_max_price",
    "with_rank_by",
    "with_place_type",
    "with_autocomplete_types",
    "with_input_type",
    "with_fields",
    "with_session_token",
    "with_location_bias_ip",
    "with_location_bias_point",
    "with_location_bias_circle",
    "with_location_bias_rectangle",
    "with_location_bias",
    "with_photo_reference",
    "with_max_height",
    "with_max_width",
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
    "with_center",
    "with_zoom",
    "with_size",
    "with_scale",
    "with_format",
    "with_map_type",
    "with_markers",
    "with_paths",
    "with_visible",
    "with_styles",
    "with_style_rule",
    "with_interpolate",
    "with_points",
    "with_place_ids",
    "with_speed_limit_units",
]
