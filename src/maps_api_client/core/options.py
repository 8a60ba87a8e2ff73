"""Functional-option machinery shared by every request type.

An option is a callable that mutates a request in place or raises
``MapsValidationError`` without touching it. Invalid option values are
detected when the option is constructed but reported only when it is applied,
so ``with_mode("teleport")`` is a valid object that fails inside
``apply_options``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import fields
from enum import Enum
from typing import Any, TypeVar

from .errors import KIND_INVALID_VALUE, KIND_NOT_SUPPORTED, MapsValidationError

R = TypeVar("R")
Option = Callable[[Any], None]


def operation_name(request: object) -> str:
    return getattr(type(request), "OPERATION", type(request).__name__)


def supports_field(request: object, field_name: str) -> bool:
    return any(item.name == field_name for item in fields(request))  # type: ignore[arg-type]


def _ensure_supported(request: object, field_name: str) -> None:
    if not supports_field(request, field_name):
        operation = operation_name(request)
        raise MapsValidationError(
            f"maps: option {field_name} is not supported by {operation} requests",
            kind=KIND_NOT_SUPPORTED,
            operation=operation,
            fields=(field_name,),
        )


def apply_options(request: R, options: Iterable[Option]) -> R:
    """Apply options in order; the first failure aborts the build."""

    for option in options:
        option(request)
    return request


def failed_option(error: MapsValidationError) -> Option:
    def _apply(request: object) -> None:
        if error.operation is None:
            error.operation = operation_name(request)
        raise error

    return _apply


def set_fields(**values: object) -> Option:
    """Option that assigns several fields at once, all or nothing."""

    def _apply(request: object) -> None:
        for field_name in values:
            _ensure_supported(request, field_name)
        for field_name, value in values.items():
            setattr(request, field_name, value)

    return _apply


def field_option(field_name: str, value: object) -> Option:
    return set_fields(**{field_name: value})


def invalid_value(label: str, field_name: str, value: object) -> MapsValidationError:
    return MapsValidationError(
        f"maps: Unknown {label} '{value}'",
        kind=KIND_INVALID_VALUE,
        fields=(field_name,),
        value=value,
    )


def coerce_choice(vocabulary: type[Enum], value: object) -> str | None:
    try:
        return str(vocabulary(value).value)
    except ValueError:
        return None


def choice_option(
    field_name: str,
    value: object,
    vocabulary: type[Enum],
    *,
    label: str,
) -> Option:
    coerced = coerce_choice(vocabulary, value)
    if coerced is None:
        return failed_option(invalid_value(label, field_name, value))
    return field_option(field_name, coerced)


def choices_option(
    field_name: str,
    values: Iterable[object],
    vocabulary: type[Enum],
    *,
    label: str,
) -> Option:
    coerced: list[str] = []
    for value in values:
        item = coerce_choice(vocabulary, value)
        if item is None:
            return failed_option(invalid_value(label, field_name, value))
        coerced.append(item)
    return field_option(field_name, tuple(coerced))


def copy_mapping_of_lists(mapping: Mapping[Any, Any]) -> dict[str, tuple[str, ...]]:
    """Private copy of ``{key: value | [values]}`` with string keys and tuple values."""

    copied: dict[str, tuple[str, ...]] = {}
    for key, value in mapping.items():
        name = str(key.value) if isinstance(key, Enum) else str(key)
        if isinstance(value, str):
            copied[name] = (value,)
        else:
            copied[name] = tuple(str(item) for item in value)
    return copied


__all__ = [
    "Option",
    "apply_options",
    "failed_option",
    "set_fields",
    "field_option",
    "choice_option",
    "choices_option",
    "coerce_choice",
    "invalid_value",
    "copy_mapping_of_lists",
    "operation_name",
    "supports_field",
]
