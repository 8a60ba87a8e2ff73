"""Markers, custom icons and paths drawn on a static map."""

from __future__ import annotations

from dataclasses import dataclass

from ..core.codecs import join_pipe
from ..core.latlng import LatLng, join_latlngs
from ..core.polyline import ENCODED_PREFIX, encode_polyline


@dataclass(slots=True, frozen=True)
class CustomIcon:
    icon_url: str = ""
    anchor: str = ""
    scale: int = 0

    def is_empty(self) -> bool:
        return not (self.icon_url or self.anchor or self.scale)

    def to_param(self) -> str:
        parts: list[str] = []
        if self.icon_url:
            parts.append(f"icon:{self.icon_url}")
        if self.anchor:
            parts.append(f"anchor:{self.anchor}")
        if self.scale:
            parts.append(f"scale:{self.scale}")
        return join_pipe(parts)


@dataclass(slots=True, frozen=True)
class Marker:
    """One ``markers`` group; a custom icon replaces color, label and size."""

    color: str = ""
    label: str = ""
    size: str = ""
    custom_icon: CustomIcon = CustomIcon()
    locations: tuple[LatLng, ...] = ()
    location_address: str = ""

    def to_param(self) -> str:
        parts: list[str] = []
        if not self.custom_icon.is_empty():
            parts.append(self.custom_icon.to_param())
        else:
            if self.color:
                parts.append(f"color:{self.color}")
            if self.label:
                parts.append(f"label:{self.label}")
            if self.size:
                parts.append(f"size:{self.size}")
        parts.extend(str(location) for location in self.locations)
        if self.location_address:
            parts.append(self.location_address)
        return join_pipe(parts)


@dataclass(slots=True, frozen=True)
class Path:
    weight: int = 0
    color: str = ""
    fill_color: str = ""
    geodesic: bool = False
    locations: tuple[LatLng, ...] = ()

    def to_param(self) -> str:
        """Style prefixes, then points as an encoded polyline when that is shorter."""

        parts: list[str] = []
        if self.color:
            parts.append(f"color:{self.color}")
        if self.fill_color:
            parts.append(f"fillcolor:{self.fill_color}")
        if self.weight:
            parts.append(f"weight:{self.weight}")
        if self.geodesic:
            parts.append("geodesic:true")
        if self.locations:
            encoded = ENCODED_PREFIX + encode_polyline(self.locations)
            plain = join_latlngs(self.locations)
            parts.append(encoded if len(plain) > len(encoded) else plain)
        return join_pipe(parts)


__all__ = [
    "CustomIcon",
    "Marker",
    "Path",
]
