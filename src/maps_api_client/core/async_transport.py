"""Async HTTP transport with cancellation, deadlines, metrics, and response decoding."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Mapping
from typing import Protocol, TypeVar

import httpx

from ..config import MapsClientConfig
from .errors import MapsApiError, MapsCancelledError, MapsTransportError
from .metrics import NoOpReporter, Reporter, track_request
from .models import RawResponse
from .query import QueryParams
from .transport_shared import (
    ApiEndpoint,
    HttpResponse,
    build_default_headers,
    build_default_timeout,
    build_request_url,
    to_raw_response,
)

logger = logging.getLogger("maps_api_client")

T = TypeVar("T")


class AsyncTransportClient(Protocol):
    async def get(self, url: str, *, headers: Mapping[str, str]) -> HttpResponse: ...
    async def aclose(self) -> None: ...


async def _cancel_and_wait(task: asyncio.Task[object]) -> None:
    """Cancel ``task`` and block until it has fully unwound."""

    task.cancel()
    await asyncio.wait({task})
    if not task.cancelled():
        # Consume the outcome so a late failure is not reported as unretrieved.
        task.exception()


class AsyncTransport:
    """Asynchronous transport for the maps web services."""

    def __init__(
        self,
        config: MapsClientConfig,
        *,
        client: AsyncTransportClient | None = None,
        reporter: Reporter | None = None,
    ) -> None:
        self._config = config
        self._reporter = reporter or NoOpReporter()
        self._headers = build_default_headers(config)
        self._closed = False
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            headers=self._headers,
            timeout=build_default_timeout(config),
        )

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._owns_client and hasattr(self._client, "aclose"):
            await self._client.aclose()

    async def execute(
        self,
        endpoint: ApiEndpoint,
        params: QueryParams,
        decode: Callable[[RawResponse], T],
        *,
        cancel: asyncio.Event | None = None,
        timeout: float | None = None,
    ) -> T:
        """Send one GET request and decode the complete response.

        The network call races ``cancel`` and ``timeout``. When either wins,
        the in-flight call is cancelled and awaited before
        ``MapsCancelledError`` is raised. A ``cancel`` event that is already
        set fails the call without dispatching it.
        """

        if self._closed:
            raise MapsTransportError("transport is already closed")

        with track_request(self._reporter, endpoint.name) as outcome:
            url = build_request_url(self._config, endpoint, params)
            if cancel is not None and cancel.is_set():
                logger.debug("request cancelled before dispatch operation=%s", endpoint.name)
                raise MapsCancelledError("maps: request cancelled", cause="cancelled")

            logger.debug("request start operation=%s path=%s", endpoint.name, endpoint.path)
            response = await self._fetch_within(endpoint, url, cancel=cancel, timeout=timeout)
            outcome.http_status = response.status_code
            outcome.metro_area = response.metro_area
            logger.debug(
                "response received operation=%s http_status=%s",
                endpoint.name,
                response.status_code,
            )
            try:
                result = decode(response)
            except MapsApiError as exc:
                logger.error(
                    "request failed operation=%s http_status=%s error=%s",
                    endpoint.name,
                    response.status_code,
                    exc.__class__.__name__,
                )
                raise
            logger.info("request success operation=%s", endpoint.name)
            return result

    async def _fetch_within(
        self,
        endpoint: ApiEndpoint,
        url: str,
        *,
        cancel: asyncio.Event | None,
        timeout: float | None,
    ) -> RawResponse:
        fetch = asyncio.create_task(self._fetch(endpoint, url))
        if cancel is None and timeout is None:
            try:
                return await asyncio.shield(fetch)
            except asyncio.CancelledError:
                await _cancel_and_wait(fetch)
                raise

        waiters: set[asyncio.Task[object]] = {fetch}
        signal: asyncio.Task[object] | None = None
        if cancel is not None:
            signal = asyncio.create_task(cancel.wait())
            waiters.add(signal)
        try:
            done, _ = await asyncio.wait(
                waiters,
                timeout=timeout,
                return_when=asyncio.FIRST_COMPLETED,
            )
        except asyncio.CancelledError:
            await _cancel_and_wait(fetch)
            raise
        finally:
            if signal is not None:
                await _cancel_and_wait(signal)

        if fetch in done:
            return fetch.result()

        await _cancel_and_wait(fetch)
        if signal is not None and signal in done:
            logger.warning("request cancelled in flight operation=%s", endpoint.name)
            raise MapsCancelledError("maps: request cancelled", cause="cancelled")
        logger.warning("request deadline exceeded operation=%s", endpoint.name)
        raise MapsCancelledError("maps: request deadline exceeded", cause="deadline")

    async def _fetch(self, endpoint: ApiEndpoint, url: str) -> RawResponse:
        try:
            response = await self._client.get(url, headers=self._headers)
        except httpx.TimeoutException as exc:
            logger.error("request deadline exceeded operation=%s", endpoint.name)
            raise MapsCancelledError(
                "maps: request deadline exceeded",
                cause="deadline",
            ) from exc
        except Exception as exc:
            logger.error(
                "request network error operation=%s error=%s",
                endpoint.name,
                exc.__class__.__name__,
            )
            raise MapsTransportError(
                "network/transport error",
                cause="network",
            ) from exc
        return to_raw_response(response)


__all__ = [
    "AsyncTransport",
    "AsyncTransportClient",
]
