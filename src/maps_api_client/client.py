"""Public client entrypoint."""

from __future__ import annotations

from types import TracebackType
from typing import TypeVar

from . import operations as ops
from .client_shared import ensure_reporter_without_transport, validate_client_config
from .config import MapsClientConfig
from .core.errors import MapsClientClosedError
from .core.metrics import Reporter
from .core.models import BinaryResponse
from .core.options import Option
from .core.transport import SyncTransport
from .geocoding.models import ElevationResponse, GeocodingResponse, TimezoneResponse
from .operations import Operation
from .places.models import (
    AutocompleteResponse,
    FindPlaceFromTextResponse,
    PlaceDetailsResponse,
    PlacesSearchResponse,
)
from .roads.models import NearestRoadsResponse, SnapToRoadResponse, SpeedLimitsResponse
from .routing.models import DirectionsResponse, DistanceMatrixResponse

T = TypeVar("T")


class MapsClient:
    """Public maps web services client.

    Every call takes option callables, e.g.
    ``client.directions(with_origin("Sydney"), with_destination("Perth"))``,
    plus an optional ``timeout`` in seconds for the whole call.
    """

    def __init__(
        self,
        *,
        config: MapsClientConfig | None = None,
        transport: SyncTransport | None = None,
        reporter: Reporter | None = None,
    ) -> None:
        self._config = config or MapsClientConfig()
        validate_client_config(self._config)
        ensure_reporter_without_transport(transport, reporter)

        self._transport = transport or SyncTransport(self._config, reporter=reporter)
        self._closed = False

    def _ensure_open(self) -> None:
        if self._closed:
            raise MapsClientClosedError("MapsClient is already closed")

    def _call(
        self,
        operation: Operation[object, T],
        options: tuple[Option, ...],
        timeout: float | None,
    ) -> T:
        self._ensure_open()
        params = operation.prepare(options)
        return self._transport.execute(
            operation.endpoint,
            params,
            operation.decode,
            timeout=timeout,
        )

    def directions(self, *options: Option, timeout: float | None = None) -> DirectionsResponse:
        return self._call(ops.DIRECTIONS, options, timeout)

    def distance_matrix(
        self,
        *options: Option,
        timeout: float | None = None,
    ) -> DistanceMatrixResponse:
        return self._call(ops.DISTANCE_MATRIX, options, timeout)

    def nearby_search(self, *options: Option, timeout: float | None = None) -> PlacesSearchResponse:
        return self._call(ops.NEARBY_SEARCH, options, timeout)

    def text_search(self, *options: Option, timeout: float | None = None) -> PlacesSearchResponse:
        return self._call(ops.TEXT_SEARCH, options, timeout)

    def place_details(self, *options: Option, timeout: float | None = None) -> PlaceDetailsResponse:
        return self._call(ops.PLACE_DETAILS, options, timeout)

    def query_autocomplete(
        self,
        *options: Option,
        timeout: float | None = None,
    ) -> AutocompleteResponse:
        return self._call(ops.QUERY_AUTOCOMPLETE, options, timeout)

    def place_autocomplete(
        self,
        *options: Option,
        timeout: float | None = None,
    ) -> AutocompleteResponse:
        return self._call(ops.PLACE_AUTOCOMPLETE, options, timeout)

    def find_place_from_text(
        self,
        *options: Option,
        timeout: float | None = None,
    ) -> FindPlaceFromTextResponse:
        return self._call(ops.FIND_PLACE_FROM_TEXT, options, timeout)

    def place_photo(self, *options: Option, timeout: float | None = None) -> BinaryResponse:
        return self._call(ops.PLACE_PHOTO, options, timeout)

    def static_map(self, *options: Option, timeout: float | None = None) -> BinaryResponse:
        return self._call(ops.STATIC_MAP, options, timeout)

    def geocode(self, *options: Option, timeout: float | None = None) -> GeocodingResponse:
        return self._call(ops.GEOCODE, options, timeout)

    def timezone(self, *options: Option, timeout: float | None = None) -> TimezoneResponse:
        return self._call(ops.TIMEZONE, options, timeout)

    def elevation(self, *options: Option, timeout: float | None = None) -> ElevationResponse:
        return self._call(ops.ELEVATION, options, timeout)

    def snap_to_road(self, *options: Option, timeout: float | None = None) -> SnapToRoadResponse:
        return self._call(ops.SNAP_TO_ROAD, options, timeout)

    def nearest_roads(self, *options: Option, timeout: float | None = None) -> NearestRoadsResponse:
        return self._call(ops.NEAREST_ROADS, options, timeout)

    def speed_limits(self, *options: Option, timeout: float | None = None) -> SpeedLimitsResponse:
        return self._call(ops.SPEED_LIMITS, options, timeout)

    def close(self) -> None:
        if self._closed:
            return
        self._transport.close()
        self._closed = True

    def __enter__(self) -> "MapsClient":
        self._ensure_open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        self.close()
        return False


__all__ = [
    "MapsClient",
]
