"""Restricted vocabularies for roads requests."""

from __future__ import annotations

from enum import Enum


class SpeedLimitUnit(str, Enum):
    KPH = "KPH"
    MPH = "MPH"


__all__ = [
    "SpeedLimitUnit",
]
