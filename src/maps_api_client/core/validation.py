"""Builders for the structured validation errors raised by request validators."""

from __future__ import annotations

from .errors import (
    KIND_CONFLICT,
    KIND_MISSING,
    KIND_MISSING_ONE_OF,
    KIND_REQUIRES,
    MapsValidationError,
)


def missing(operation: str, field_name: str, message: str) -> MapsValidationError:
    return MapsValidationError(
        message,
        kind=KIND_MISSING,
        operation=operation,
        fields=(field_name,),
    )


def missing_one_of(operation: str, field_names: tuple[str, ...], message: str) -> MapsValidationError:
    return MapsValidationError(
        message,
        kind=KIND_MISSING_ONE_OF,
        operation=operation,
        fields=field_names,
    )


def conflict(operation: str, field_names: tuple[str, ...], message: str) -> MapsValidationError:
    return MapsValidationError(
        message,
        kind=KIND_CONFLICT,
        operation=operation,
        fields=field_names,
    )


def requires(
    operation: str,
    field_names: tuple[str, ...],
    message: str,
    *,
    value: object = None,
) -> MapsValidationError:
    """Field ``field_names[0]`` is set but its companion ``field_names[1:]`` is not as required."""

    return MapsValidationError(
        message,
        kind=KIND_REQUIRES,
        operation=operation,
        fields=field_names,
        value=value,
    )


__all__ = [
    "missing",
    "missing_one_of",
    "conflict",
    "requires",
]
