"""Snap to roads, nearest roads and speed limits package."""

from .enums import SpeedLimitUnit
from .models import (
    NearestRoadsResponse,
    SnappedPoint,
    SnapToRoadResponse,
    SpeedLimit,
    SpeedLimitsResponse,
)
from .requests import NearestRoadsRequest, SnapToRoadRequest, SpeedLimitsRequest

__all__ = [
    "SpeedLimitUnit",
    "SnapToRoadRequest",
    "NearestRoadsRequest",
    "SpeedLimitsRequest",
    "SnappedPoint",
    "SnapToRoadResponse",
    "NearestRoadsResponse",
    "SpeedLimit",
    "SpeedLimitsResponse",
]
