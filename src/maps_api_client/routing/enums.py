"""Restricted vocabularies for directions and distance matrix requests."""

from __future__ import annotations

from enum import Enum


class TravelMode(str, Enum):
    DRIVING = "driving"
    WALKING = "walking"
    BICYCLING = "bicycling"
    TRANSIT = "transit"


class Avoid(str, Enum):
    TOLLS = "tolls"
    HIGHWAYS = "highways"
    FERRIES = "ferries"
    INDOOR = "indoor"


class Units(str, Enum):
    METRIC = "metric"
    IMPERIAL = "imperial"


class TransitMode(str, Enum):
    BUS = "bus"
    SUBWAY = "subway"
    TRAIN = "train"
    TRAM = "tram"
    RAIL = "rail"


class TransitRoutingPreference(str, Enum):
    LESS_WALKING = "less_walking"
    FEWER_TRANSFERS = "fewer_transfers"


class TrafficModel(str, Enum):
    BEST_GUESS = "best_guess"
    OPTIMISTIC = "optimistic"
    PESSIMISTIC = "pessimistic"


__all__ = [
    "TravelMode",
    "Avoid",
    "Units",
    "TransitMode",
    "TransitRoutingPreference",
    "TrafficModel",
]
