"""Wire <-> domain codecs for durations, timestamps and delimited lists.

Durations travel as ``{"value": <seconds>, "text": "..."}`` objects (or a bare
integer of seconds for a few fields); timestamps as
``{"text": ..., "time_zone": ..., "value": <epoch seconds>}`` objects (or a
bare epoch integer). ``None`` is the domain marker for "not provided" in both
directions, so an unknown duration is never confused with a zero one and an
absent timestamp never decodes to the epoch origin.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import datetime, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .errors import MapsDecodeError

logger = logging.getLogger("maps_api_client")

PIPE = "|"
COMMA = ","

_TIMESTAMP_TEXT_FORMAT = "%a, %d %b %Y %H:%M:%S %Z"


def _as_int(value: object, *, name: str) -> int:
    if isinstance(value, bool):
        raise MapsDecodeError(f"{name} must be a number")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise MapsDecodeError(f"{name} must be a number")


def format_duration_text(value: timedelta) -> str:
    total = int(value.total_seconds())
    if total == 0:
        return "0s"
    sign = "-" if total < 0 else ""
    hours, rest = divmod(abs(total), 3600)
    minutes, seconds = divmod(rest, 60)
    if hours:
        return f"{sign}{hours}h{minutes}m{seconds}s"
    if minutes:
        return f"{sign}{minutes}m{seconds}s"
    return f"{sign}{seconds}s"


def _to_timedelta(seconds: int, *, name: str) -> timedelta:
    try:
        return timedelta(seconds=seconds)
    except OverflowError as exc:
        raise MapsDecodeError(f"{name} is out of range") from exc


def decode_duration(item: object) -> timedelta | None:
    if item is None:
        return None
    if isinstance(item, dict):
        raw = item.get("value")
        if raw is None:
            return None
        return _to_timedelta(_as_int(raw, name="duration.value"), name="duration.value")
    return _to_timedelta(_as_int(item, name="duration"), name="duration")


def encode_duration(value: timedelta | None) -> dict[str, object] | None:
    if value is None:
        return None
    return {"value": int(value.total_seconds()), "text": format_duration_text(value)}


def encode_seconds(value: timedelta | None) -> int | None:
    if value is None:
        return None
    return int(value.total_seconds())


def _resolve_zone(name: object) -> tzinfo:
    if not isinstance(name, str) or name == "":
        return timezone.utc
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.debug("unknown time zone %r; falling back to UTC", name)
        return timezone.utc


def _to_datetime(seconds: int, zone: tzinfo, *, name: str) -> datetime:
    try:
        return datetime.fromtimestamp(seconds, tz=zone)
    except (OverflowError, ValueError, OSError) as exc:
        raise MapsDecodeError(f"{name} is out of range") from exc


def decode_timestamp(item: object) -> datetime | None:
    if item is None:
        return None
    if isinstance(item, dict):
        raw = item.get("value")
        if raw is None:
            return None
        seconds = _as_int(raw, name="time.value")
        return _to_datetime(seconds, _resolve_zone(item.get("time_zone")), name="time.value")
    return _to_datetime(_as_int(item, name="time"), timezone.utc, name="time")


def _zone_key(value: datetime) -> str:
    zone = value.tzinfo
    if isinstance(zone, ZoneInfo):
        return zone.key
    return "UTC"


def epoch_seconds(value: datetime) -> int:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return int(value.timestamp())


def encode_timestamp(value: datetime | None) -> dict[str, object] | None:
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return {
        "text": value.strftime(_TIMESTAMP_TEXT_FORMAT),
        "time_zone": _zone_key(value),
        "value": epoch_seconds(value),
    }


def encode_epoch(value: datetime | None) -> int | None:
    if value is None:
        return None
    return epoch_seconds(value)


def join_pipe(values: Iterable[object]) -> str:
    return PIPE.join(str(value) for value in values)


def join_comma(values: Iterable[object]) -> str:
    return COMMA.join(str(value) for value in values)


def split_pipe(text: str) -> list[str]:
    if text == "":
        return []
    return text.split(PIPE)


__all__ = [
    "PIPE",
    "COMMA",
    "format_duration_text",
    "decode_duration",
    "encode_duration",
    "encode_seconds",
    "decode_timestamp",
    "encode_timestamp",
    "encode_epoch",
    "epoch_seconds",
    "join_pipe",
    "join_comma",
    "split_pipe",
]
