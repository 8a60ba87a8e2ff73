"""Sync HTTP transport with deadline handling, metrics, and response decoding."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterator, Mapping
from contextlib import AbstractContextManager
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


class StreamedResponse(Protocol):
    status_code: int
    headers: Mapping[str, str]

    def iter_bytes(self) -> Iterator[bytes]: ...


class TransportClient(Protocol):
    def get(self, url: str, *, headers: Mapping[str, str]) -> HttpResponse: ...
    def stream(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str],
        timeout: float,
    ) -> AbstractContextManager[StreamedResponse]: ...
    def close(self) -> None: ...


class SyncTransport:
    """Synchronous transport for the maps web services."""

    def __init__(
        self,
        config: MapsClientConfig,
        *,
        client: TransportClient | None = None,
        reporter: Reporter | None = None,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self._config = config
        self._reporter = reporter or NoOpReporter()
        self._clock = clock or time.monotonic
        self._headers = build_default_headers(config)
        self._closed = False
        self._owns_client = client is None
        self._client = client or httpx.Client(
            headers=self._headers,
            timeout=build_default_timeout(config),
        )

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._owns_client and hasattr(self._client, "close"):
            self._client.close()

    def execute(
        self,
        endpoint: ApiEndpoint,
        params: QueryParams,
        decode: Callable[[RawResponse], T],
        *,
        timeout: float | None = None,
    ) -> T:
        """Send one GET request and decode the complete response.

        ``timeout`` is a budget in seconds for the whole call. It caps every
        network phase, and the elapsed time is checked again as each body
        chunk arrives, so a response that trickles in past the budget fails
        with ``MapsCancelledError`` (``cause="deadline"``) instead of running
        on. Without ``timeout`` the configured transport timeouts apply.
        """

        if self._closed:
            raise MapsTransportError("transport is already closed")

        with track_request(self._reporter, endpoint.name) as outcome:
            url = build_request_url(self._config, endpoint, params)
            logger.debug("request start operation=%s path=%s", endpoint.name, endpoint.path)
            response = self._fetch(endpoint, url, timeout)
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

    def _fetch(self, endpoint: ApiEndpoint, url: str, timeout: float | None) -> RawResponse:
        try:
            if timeout is None:
                return to_raw_response(self._client.get(url, headers=self._headers))
            return self._read_before_deadline(endpoint, url, timeout)
        except MapsCancelledError:
            raise
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

    def _read_before_deadline(self, endpoint: ApiEndpoint, url: str, timeout: float) -> RawResponse:
        deadline = self._clock() + timeout
        body = bytearray()
        with self._client.stream("GET", url, headers=self._headers, timeout=timeout) as response:
            for chunk in response.iter_bytes():
                body.extend(chunk)
                self._check_deadline(endpoint, deadline)
            self._check_deadline(endpoint, deadline)
            return RawResponse(
                status_code=response.status_code,
                content=bytes(body),
                headers=dict(response.headers.items()),
            )

    def _check_deadline(self, endpoint: ApiEndpoint, deadline: float) -> None:
        if self._clock() > deadline:
            logger.error("request deadline exceeded operation=%s", endpoint.name)
            raise MapsCancelledError("maps: request deadline exceeded", cause="deadline")


__all__ = [
    "StreamedResponse",
    "SyncTransport",
    "TransportClient",
]
