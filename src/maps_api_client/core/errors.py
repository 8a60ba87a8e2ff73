"""Error types and status mapping."""

from __future__ import annotations

from collections.abc import Mapping

SUCCESS_STATUSES = frozenset({"OK", "ZERO_RESULTS"})

KIND_MISSING = "missing"
KIND_MISSING_ONE_OF = "missing_one_of"
KIND_CONFLICT = "conflict"
KIND_REQUIRES = "requires"
KIND_INVALID_VALUE = "invalid_value"
KIND_NOT_SUPPORTED = "not_supported"


def extract_status(payload: Mapping[str, object] | None) -> str | None:
    if not isinstance(payload, Mapping):
        return None
    value = payload.get("status")
    return str(value) if value is not None else None


def extract_error_message(payload: Mapping[str, object] | None) -> str:
    if not isinstance(payload, Mapping):
        return ""
    value = payload.get("error_message")
    return str(value) if value is not None else ""


class MapsApiError(Exception):
    """Base exception for this package."""

    def __init__(
        self,
        message: str,
        *,
        http_status: int | None = None,
        cause: str | None = None,
    ) -> None:
        super().__init__(message)
        self.http_status = http_status
        self.cause = cause


class MapsValidationError(MapsApiError):
    """Invalid request or configuration; raised before any network call."""

    def __init__(
        self,
        message: str,
        *,
        kind: str = KIND_INVALID_VALUE,
        operation: str | None = None,
        fields: tuple[str, ...] = (),
        value: object = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.operation = operation
        self.fields = fields
        self.value = value


class MapsTransportError(MapsApiError):
    """Network/transport-level failure."""


class MapsCancelledError(MapsTransportError):
    """Call abandoned because its cancel signal fired or its deadline passed."""


class MapsClientClosedError(MapsApiError):
    """Raised when client is used after close."""


class MapsDecodeError(MapsApiError):
    """Response body does not match the expected shape."""


class MapsHttpError(MapsApiError):
    """Non-success HTTP response without a decodable service status."""


class MapsStatusError(MapsApiError):
    """Service reported a failure status."""

    def __init__(
        self,
        status: str,
        error_message: str = "",
        *,
        http_status: int | None = None,
    ) -> None:
        super().__init__(
            f"maps: {status} - {error_message}",
            http_status=http_status,
            cause="service_status",
        )
        self.status = status
        self.error_message = error_message


def classify_status(
    payload: Mapping[str, object],
    *,
    http_status: int | None,
) -> MapsApiError | None:
    """Map the body status field to a domain exception."""

    status = extract_status(payload)
    if status is None:
        if http_status is not None and http_status >= 400:
            return MapsHttpError(f"maps: HTTP {http_status}", http_status=http_status)
        return MapsDecodeError("response is missing the status field", http_status=http_status)
    if status in SUCCESS_STATUSES:
        return None
    return MapsStatusError(status, extract_error_message(payload), http_status=http_status)


def classify_error_object(
    payload: Mapping[str, object],
    *,
    http_status: int | None,
) -> MapsApiError | None:
    """Map an ``{"error": {"code", "message", "status"}}`` body to a domain exception.

    Used by the endpoints that report failures through an error object instead
    of a top-level status field.
    """

    error = payload.get("error")
    if isinstance(error, Mapping):
        status = error.get("status") or error.get("code") or "UNKNOWN_ERROR"
        message = error.get("message")
        return MapsStatusError(
            str(status),
            str(message) if message is not None else "",
            http_status=http_status,
        )
    if http_status is not None and http_status >= 400:
        return MapsHttpError(f"maps: HTTP {http_status}", http_status=http_status)
    return None


__all__ = [
    "KIND_MISSING",
    "KIND_MISSING_ONE_OF",
    "KIND_CONFLICT",
    "KIND_REQUIRES",
    "KIND_INVALID_VALUE",
    "KIND_NOT_SUPPORTED",
    "SUCCESS_STATUSES",
    "MapsApiError",
    "MapsValidationError",
    "MapsTransportError",
    "MapsCancelledError",
    "MapsClientClosedError",
    "MapsDecodeError",
    "MapsHttpError",
    "MapsStatusError",
    "extract_status",
    "extract_error_message",
    "classify_status",
    "classify_error_object",
]
