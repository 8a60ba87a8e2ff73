"""Public package exports for the maps web services client."""

from .async_client import AsyncMapsClient
from .client import MapsClient
from .config import MapsClientConfig, TransportConfig
from .core.errors import (
    MapsApiError,
    MapsCancelledError,
    MapsClientClosedError,
    MapsDecodeError,
    MapsHttpError,
    MapsStatusError,
    MapsTransportError,
    MapsValidationError,
)
from .core.latlng import LatLng, LatLngBounds
from .core.metrics import NoOpReporter, Reporter, RequestMetric

__all__ = [
    "MapsClient",
    "AsyncMapsClient",
    "MapsClientConfig",
    "TransportConfig",
    "MapsApiError",
    "MapsValidationError",
    "MapsTransportError",
    "MapsCancelledError",
    "MapsClientClosedError",
    "MapsDecodeError",
    "MapsHttpError",
    "MapsStatusError",
    "LatLng",
    "LatLngBounds",
    "Reporter",
    "RequestMetric",
    "NoOpReporter",
]
