"""Public async client entrypoint."""

from __future__ import annotations

import asyncio
from types import TracebackType
from typing import TypeVar

from . import operations as ops
from .client_shared import ensure_reporter_without_transport, validate_client_config
from .config import MapsClientConfig
from .core.async_transport import AsyncTransport
from .core.errors import MapsClientClosedError
from .core.metrics import Reporter
from .core.models import BinaryResponse
from .core.options import Option
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


class AsyncMapsClient:
    """Public async maps web services client.

    Calls accept ``cancel`` (an ``asyncio.Event``) and ``timeout`` in seconds;
    either one abandons the in-flight request with ``MapsCancelledError``.
    """

    def __init__(
        self,
        *,
        config: MapsClientConfig | None = None,
        transport: AsyncTransport | None = None,
        reporter: Reporter | None = None,
    ) -> None:
        self._config = config or MapsClientConfig()
        validate_client_config(self._config)
        ensure_reporter_without_transport(transport, reporter)

        self._transport = transport or AsyncTransport(self._config, reporter=reporter)
        self._closed = False

    def _ensure_open(self) -> None:
        if self._closed:
            raise MapsClientClosedError("AsyncMapsClient is already closed")

    async def _call(
        self,
        operation: Operation[object, T],
        options: tuple[Option, ...],
        cancel: asyncio.Event | None,
        timeout: float | None,
    ) -> T:
        self._ensure_open()
        params = operation.prepare(options)
        return await self._transport.execute(
            operation.endpoint,
            params,
            operation.decode,
            cancel=cancel,
            timeout=timeout,
        )

    async def directions(
        self,
        *options: Option,
        cancel: asyncio.Event | None = None,
        timeout: float | None = None,
    ) -> DirectionsResponse:
        return await self._call(ops.DIRECTIONS, options, cancel, timeout)

    async def distance_matrix(
        self,
        *options: Option,
        cancel: asyncio.Event | None = None,
        timeout: float | None = None,
    ) -> DistanceMatrixResponse:
        return await self._call(ops.DISTANCE_MATRIX, options, cancel, timeout)

    async def nearby_search(
        self,
        *options: Option,
        cancel: asyncio.Event | None = None,
        timeout: float | None = None,
    ) -> PlacesSearchResponse:
        return await self._call(ops.NEARBY_SEARCH, options, cancel, timeout)

    async def text_search(
        self,
        *options: Option,
        cancel: asyncio.Event | None = None,
        timeout: float | None = None,
    ) -> PlacesSearchResponse:
        return await self._call(ops.TEXT_SEARCH, options, cancel, timeout)

    async def place_details(
        self,
        *options: Option,
        cancel: asyncio.Event | None = None,
        timeout: float | None = None,
    ) -> PlaceDetailsResponse:
        return await self._call(ops.PLACE_DETAILS, options, cancel, timeout)

    async def query_autocomplete(
        self,
        *options: Option,
        cancel: asyncio.Event | None = None,
        timeout: float | None = None,
    ) -> AutocompleteResponse:
        return await self._call(ops.QUERY_AUTOCOMPLETE, options, cancel, timeout)

    async def place_autocomplete(
        self,
        *options: Option,
        cancel: asyncio.Event | None = None,
        timeout: float | None = None,
    ) -> AutocompleteResponse:
        return await self._call(ops.PLACE_AUTOCOMPLETE, options, cancel, timeout)

    async def find_place_from_text(
        self,
        *options: Option,
        cancel: asyncio.Event | None = None,
        timeout: float | None = None,
    ) -> FindPlaceFromTextResponse:
        return await self._call(ops.FIND_PLACE_FROM_TEXT, options, cancel, timeout)

    async def place_photo(
        self,
        *options: Option,
        cancel: asyncio.Event | None = None,
        timeout: float | None = None,
    ) -> BinaryResponse:
        return await self._call(ops.PLACE_PHOTO, options, cancel, timeout)

    async def static_map(
        self,
        *options: Option,
        cancel: asyncio.Event | None = None,
        timeout: float | None = None,
    ) -> BinaryResponse:
        return await self._call(ops.STATIC_MAP, options, cancel, timeout)

    async def geocode(
        self,
        *options: Option,
        cancel: asyncio.Event | None = None,
        timeout: float | None = None,
    ) -> GeocodingResponse:
        return await self._call(ops.GEOCODE, options, cancel, timeout)

    async def timezone(
        self,
        *options: Option,
        cancel: asyncio.Event | None = None,
        timeout: float | None = None,
    ) -> TimezoneResponse:
        return await self._call(ops.TIMEZONE, options, cancel, timeout)

    async def elevation(
        self,
        *options: Option,
        cancel: asyncio.Event | None = None,
        timeout: float | None = None,
    ) -> ElevationResponse:
        return await self._call(ops.ELEVATION, options, cancel, timeout)

    async def snap_to_road(
        self,
        *options: Option,
        cancel: asyncio.Event | None = None,
        timeout: float | None = None,
    ) -> SnapToRoadResponse:
        return await self._call(ops.SNAP_TO_ROAD, options, cancel, timeout)

    async def nearest_roads(
        self,
        *options: Option,
        cancel: asyncio.Event | None = None,
        timeout: float | None = None,
    ) -> NearestRoadsResponse:
        return await self._call(ops.NEAREST_ROADS, options, cancel, timeout)

    async def speed_limits(
        self,
        *options: Option,
        cancel: asyncio.Event | None = None,
        timeout: float | None = None,
    ) -> SpeedLimitsResponse:
        return await self._call(ops.SPEED_LIMITS, options, cancel, timeout)

    async def close(self) -> None:
        if self._closed:
            return
        await self._transport.close()
        self._closed = True

    async def __aenter__(self) -> "AsyncMapsClient":
        self._ensure_open()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        await self.close()
        return False


__all__ = [
    "AsyncMapsClient",
]
