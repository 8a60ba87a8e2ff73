"""Shared helpers for sync/async transport implementations."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Protocol, TypeVar

import httpx

from ..config import MapsClientConfig
from .errors import KIND_MISSING, MapsValidationError
from .models import RawResponse
from .query import QueryParams
from .signer import decode_signing_secret, sign_query

T = TypeVar("T")
Decoder = Callable[[RawResponse], T]

MAPS_API_HOST = "https://maps.googleapis.com"
ROADS_API_HOST = "https://roads.googleapis.com"


class HttpResponse(Protocol):
    status_code: int
    content: bytes
    headers: Mapping[str, str]


@dataclass(slots=True, frozen=True)
class ApiEndpoint:
    """Host, fixed path and credential capabilities of one web service operation."""

    name: str
    path: str
    accepts_client_id: bool = True
    accepts_signature: bool = False
    host: str = MAPS_API_HOST


def build_default_headers(config: MapsClientConfig) -> Mapping[str, str]:
    return {
        "Accept-Encoding": "gzip",
        "User-Agent": config.user_agent,
    }


def build_default_timeout(config: MapsClientConfig) -> httpx.Timeout:
    return httpx.Timeout(
        connect=config.transport.timeout_connect_seconds,
        read=config.transport.timeout_read_seconds,
        write=config.transport.timeout_write_seconds,
        pool=config.transport.timeout_pool_seconds,
    )


def build_auth_query(
    config: MapsClientConfig,
    endpoint: ApiEndpoint,
    params: QueryParams,
) -> str:
    """Encode ``params`` with credentials: API key first, then client-ID signing."""

    if config.api_key:
        keyed = params.copy()
        keyed.set("key", config.api_key)
        if endpoint.accepts_signature and config.signing_secret:
            return sign_query(
                endpoint.path,
                "",
                decode_signing_secret(config.signing_secret),
                keyed,
            )
        return keyed.encode()
    if endpoint.accepts_client_id and config.has_work_credentials:
        return sign_query(
            endpoint.path,
            config.client_id,
            decode_signing_secret(config.signing_secret),
            params,
        )
    raise MapsValidationError(
        "maps: API Key missing",
        kind=KIND_MISSING,
        operation=endpoint.name,
        fields=("api_key",),
    )


def build_request_url(
    config: MapsClientConfig,
    endpoint: ApiEndpoint,
    params: QueryParams,
) -> str:
    base_url = (config.base_url or endpoint.host).rstrip("/")
    return f"{base_url}{endpoint.path}?{build_auth_query(config, endpoint, params)}"


def to_raw_response(response: HttpResponse) -> RawResponse:
    return RawResponse(
        status_code=response.status_code,
        content=response.content,
        headers=dict(response.headers.items()),
    )


__all__ = [
    "MAPS_API_HOST",
    "ROADS_API_HOST",
    "ApiEndpoint",
    "Decoder",
    "HttpResponse",
    "build_default_headers",
    "build_default_timeout",
    "build_auth_query",
    "build_request_url",
    "to_raw_response",
]
