"""Request model for the static map endpoint."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from ..core.latlng import LatLng
from .models import Marker, Path
from .styles import MapStyles


@dataclass(slots=True)
class StaticMapRequest:
    OPERATION: ClassVar[str] = "static_map"

    center: str = ""
    zoom: int = 0
    size: str = ""
    scale: int = 0
    format: str = ""
    language: str = ""
    region: str = ""
    map_type: str = ""
    markers: tuple[Marker, ...] = ()
    paths: tuple[Path, ...] = ()
    visible: tuple[LatLng, ...] = ()
    styles: MapStyles = field(default_factory=dict)


__all__ = [
    "StaticMapRequest",
]
