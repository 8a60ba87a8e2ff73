"""Cross-field validation for static map requests."""

from __future__ import annotations

from ..core.validation import missing, missing_one_of
from .requests import StaticMapRequest


def validate_static_map_request(request: StaticMapRequest) -> None:
    operation = request.OPERATION
    if not request.markers and not request.center and request.zoom == 0:
        raise missing_one_of(
            operation,
            ("markers", "center", "zoom"),
            "maps: Center & Zoom required if Markers empty",
        )
    if not request.size:
        raise missing(operation, "size", "maps: Size empty")


__all__ = [
    "validate_static_map_request",
]
