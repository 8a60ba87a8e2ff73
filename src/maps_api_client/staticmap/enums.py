"""Restricted vocabularies for static map requests."""

from __future__ import annotations

from enum import Enum


class MapType(str, Enum):
    ROADMAP = "roadmap"
    SATELLITE = "satellite"
    TERRAIN = "terrain"
    HYBRID = "hybrid"


class ImageFormat(str, Enum):
    PNG = "png"
    PNG8 = "png8"
    PNG32 = "png32"
    GIF = "gif"
    JPG = "jpg"
    JPG_BASELINE = "jpg-baseline"


class MarkerSize(str, Enum):
    TINY = "tiny"
    MID = "mid"
    SMALL = "small"


class Anchor(str, Enum):
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"
    TOP_LEFT = "topleft"
    TOP_RIGHT = "topright"
    BOTTOM_LEFT = "bottomleft"
    BOTTOM_RIGHT = "bottomright"


SCALES = (1, 2, 4)

__all__ = [
    "MapType",
    "ImageFormat",
    "MarkerSize",
    "Anchor",
    "SCALES",
]
