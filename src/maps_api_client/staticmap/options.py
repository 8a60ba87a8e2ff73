"""Options specific to static map requests."""

from __future__ import annotations

from collections.abc import Mapping

from ..core.latlng import LatLng
from ..core.options import (
    Option,
    choice_option,
    failed_option,
    field_option,
    invalid_value,
)
from .enums import SCALES, ImageFormat, MapType
from .models import Marker, Path
from .styles import copy_styles


def with_center(center: str | LatLng) -> Option:
    return field_option("center", str(center))


def with_zoom(zoom: int) -> Option:
    if zoom < 0:
        return failed_option(invalid_value("Zoom", "zoom", zoom))
    return field_option("zoom", zoom)


def with_size(width: int, height: int) -> Option:
    if width <= 0 or height <= 0:
        return failed_option(invalid_value("Size", "size", f"{width}x{height}"))
    return field_option("size", f"{width}x{height}")


def with_scale(scale: int) -> Option:
    if scale not in SCALES:
        return failed_option(invalid_value("Scale", "scale", scale))
    return field_option("scale", scale)


def with_format(image_format: ImageFormat | str) -> Option:
    return choice_option("format", image_format, ImageFormat, label="Format")


def with_map_type(map_type: MapType | str) -> Option:
    return choice_option("map_type", map_type, MapType, label="MapType")


def _append(field_name: str, items: tuple[object, ...]) -> Option:
    def _apply(request: object) -> None:
        current = getattr(request, field_name, None)
        if current is None:
            field_option(field_name, ())(request)
            return
        setattr(request, field_name, tuple(current) + items)

    return _apply


def with_markers(*markers: Marker) -> Option:
    """Add marker groups; repeated use appends rather than replaces."""

    return _append("markers", markers)


def with_paths(*paths: Path) -> Option:
    return _append("paths", paths)


def with_visible(*points: LatLng) -> Option:
    return field_option("visible", tuple(points))


def with_styles(styles: Mapping[str, Mapping[str, Mapping[str, object]]]) -> Option:
    """Style rules as ``{feature: {element: {rule: value}}}``, merged into existing rules."""

    copied = copy_styles(styles)

    def _apply(request: object) -> None:
        current = getattr(request, "styles", None)
        if current is None:
            field_option("styles", {})(request)
            return
        for feature, elements in copied.items():
            target = current.setdefault(feature, {})
            for element, rules in elements.items():
                target.setdefault(element, {}).update(rules)

    return _apply


def with_style_rule(feature: str, element: str, rule: str, value: object) -> Option:
    if not feature or not element or not rule:
        error = invalid_value("style rule", "styles", f"{feature}:{element}:{rule}")
        return failed_option(error)
    return with_styles({feature: {element: {rule: value}}})


__all__ = [
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
]
