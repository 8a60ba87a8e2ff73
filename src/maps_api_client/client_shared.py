"""Shared helpers for sync/async client bootstrap."""

from __future__ import annotations

from .config import MapsClientConfig
from .core.errors import MapsValidationError
from .core.metrics import Reporter


def validate_client_config(config: MapsClientConfig) -> None:
    try:
        config.validate()
    except ValueError as exc:
        raise MapsValidationError(str(exc), operation="config") from exc


def ensure_reporter_without_transport(transport: object | None, reporter: Reporter | None) -> None:
    """Reject ``reporter`` next to an explicit ``transport``, which already carries its own."""

    if transport is not None and reporter is not None:
        raise MapsValidationError(
            "reporter cannot be combined with a custom transport; pass it to the transport instead",
            operation="config",
            fields=("reporter", "transport"),
        )


__all__ = [
    "validate_client_config",
    "ensure_reporter_without_transport",
]
