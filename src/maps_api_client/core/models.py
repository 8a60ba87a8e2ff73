"""Core response models."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

METRO_AREA_HEADER = "x-goog-maps-metro-area"


@dataclass(slots=True, frozen=True)
class RawResponse:
    """Complete HTTP response as handed from the transport to the decoder."""

    status_code: int
    content: bytes
    headers: Mapping[str, str] = field(default_factory=dict)

    @property
    def content_type(self) -> str:
        return _header(self.headers, "content-type")

    @property
    def metro_area(self) -> str:
        return _header(self.headers, METRO_AREA_HEADER)


def _header(headers: Mapping[str, str], name: str) -> str:
    value = headers.get(name)
    if value is not None:
        return value
    for key, item in headers.items():
        if key.lower() == name:
            return item
    return ""


@dataclass(slots=True, frozen=True)
class ApiEnvelope:
    status: str
    error_message: str = ""
    next_page_token: str = ""
    html_attributions: tuple[str, ...] = ()


@dataclass(slots=True, frozen=True)
class Distance:
    human_readable: str = ""
    meters: int = 0


@dataclass(slots=True, frozen=True)
class BinaryResponse:
    """Raw image payload returned by the photo and static map endpoints."""

    content_type: str
    data: bytes


__all__ = [
    "METRO_AREA_HEADER",
    "RawResponse",
    "ApiEnvelope",
    "Distance",
    "BinaryResponse",
]
