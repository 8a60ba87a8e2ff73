"""Static map package."""

from .enums import SCALES, Anchor, ImageFormat, MapType, MarkerSize
from .models import CustomIcon, Marker, Path
from .requests import StaticMapRequest
from .styles import MapStyles, encode_styles

__all__ = [
    "MapType",
    "ImageFormat",
    "MarkerSize",
    "Anchor",
    "SCALES",
    "CustomIcon",
    "Marker",
    "Path",
    "MapStyles",
    "encode_styles",
    "StaticMapRequest",
]
