"""Shared response parsing helpers for sync/async transports and parsers."""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping
from typing import TypeVar

from .errors import (
    MapsApiError,
    MapsDecodeError,
    MapsHttpError,
    classify_error_object,
    classify_status,
)
from .models import ApiEnvelope, RawResponse

JsonObject = dict[str, object]
T = TypeVar("T")


def parse_json_payload(response: RawResponse) -> JsonObject:
    """Parse the response body and map parse failures to domain errors."""

    http_status = response.status_code
    try:
        payload = json.loads(response.content)
    except (ValueError, UnicodeDecodeError) as exc:
        raise _json_parse_error(http_status=http_status) from exc

    if not isinstance(payload, dict):
        raise MapsDecodeError(
            "response JSON root must be an object",
            http_status=http_status,
        )
    return payload


def decode_json_response(
    response: RawResponse,
    parse: Callable[[JsonObject], T],
) -> T:
    """Parse the body, raise on failure statuses, then build the domain object."""

    payload = parse_json_payload(response)
    mapped_error = classify_status(payload, http_status=response.status_code)
    if mapped_error is not None:
        raise mapped_error
    return parse(payload)


def decode_error_object_response(
    response: RawResponse,
    parse: Callable[[JsonObject], T],
) -> T:
    """Like ``decode_json_response`` for bodies that carry an ``error`` object."""

    payload = parse_json_payload(response)
    mapped_error = classify_error_object(payload, http_status=response.status_code)
    if mapped_error is not None:
        raise mapped_error
    return parse(payload)


def _json_parse_error(*, http_status: int | None) -> MapsApiError:
    if http_status is not None and http_status >= 400:
        return MapsHttpError(f"maps: HTTP {http_status}", http_status=http_status)
    return MapsDecodeError("response body is not valid JSON", http_status=http_status)


def parse_envelope(payload: Mapping[str, object]) -> ApiEnvelope:
    return ApiEnvelope(
        status=text(payload.get("status")),
        error_message=text(payload.get("error_message")),
        next_page_token=text(payload.get("next_page_token")),
        html_attributions=strings(payload.get("html_attributions"), name="html_attributions"),
    )


def text(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return str(value)


def optional_text(value: object) -> str | None:
    if value is None:
        return None
    return text(value)


def as_object(value: object, *, name: str) -> JsonObject:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise MapsDecodeError(f"{name} must be an object")
    return value


def as_list(value: object, *, name: str) -> list[object]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise MapsDecodeError(f"{name} must be a list")
    return value


def objects(value: object, *, name: str) -> list[JsonObject]:
    items = as_list(value, name=name)
    for item in items:
        if not isinstance(item, dict):
            raise MapsDecodeError(f"{name} element must be an object")
    return items  # type: ignore[return-value]


def strings(value: object, *, name: str) -> tuple[str, ...]:
    return tuple(text(item) for item in as_list(value, name=name))


def integer(value: object, *, name: str, default: int = 0) -> int:
    if value is None:
        return default
    if isinstance(value, bool):
        raise MapsDecodeError(f"{name} must be a number")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise MapsDecodeError(f"{name} must be a number")


def optional_integer(value: object, *, name: str) -> int | None:
    if value is None:
        return None
    return integer(value, name=name)


def number(value: object, *, name: str, default: float = 0.0) -> float:
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MapsDecodeError(f"{name} must be a number")
    return float(value)


def flag(value: object, *, name: str) -> bool:
    if value is None:
        return False
    if not isinstance(value, bool):
        raise MapsDecodeError(f"{name} must be a boolean")
    return value


def optional_flag(value: object, *, name: str) -> bool | None:
    if value is None:
        return None
    return flag(value, name=name)


__all__ = [
    "JsonObject",
    "parse_json_payload",
    "decode_json_response",
    "decode_error_object_response",
    "parse_envelope",
    "text",
    "optional_text",
    "as_object",
    "as_list",
    "objects",
    "strings",
    "integer",
    "optional_integer",
    "number",
    "flag",
    "optional_flag",
]
