"""Request metrics reporter interface and its no-op default."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Protocol

logger = logging.getLogger("maps_api_client")


class RequestMetric(Protocol):
    def end_request(
        self,
        error: BaseException | None,
        http_status: int | None,
        metro_area: str,
    ) -> None: ...


class Reporter(Protocol):
    def new_request(self, name: str) -> RequestMetric: ...


class _NoOpRequestMetric:
    def end_request(
        self,
        error: BaseException | None,
        http_status: int | None,
        metro_area: str,
    ) -> None:
        return None


class NoOpReporter:
    """Reporter that records nothing."""

    def new_request(self, name: str) -> RequestMetric:
        return _NoOpRequestMetric()


@dataclass(slots=True)
class RequestOutcome:
    """Response facts collected while a tracked call runs."""

    http_status: int | None = None
    metro_area: str = ""


def _end_quietly(
    metric: RequestMetric,
    name: str,
    error: BaseException | None,
    outcome: RequestOutcome,
) -> None:
    try:
        metric.end_request(error, outcome.http_status, outcome.metro_area)
    except Exception as exc:
        logger.warning(
            "metrics reporter failed operation=%s error=%s",
            name,
            exc.__class__.__name__,
        )


@contextmanager
def track_request(reporter: Reporter, name: str) -> Iterator[RequestOutcome]:
    """Open a metric before dispatch and close it once the outcome is known."""

    try:
        metric = reporter.new_request(name)
    except Exception as exc:
        logger.warning(
            "metrics reporter failed operation=%s error=%s",
            name,
            exc.__class__.__name__,
        )
        metric = _NoOpRequestMetric()
    outcome = RequestOutcome()
    try:
        yield outcome
    except BaseException as exc:
        if outcome.http_status is None:
            outcome.http_status = getattr(exc, "http_status", None)
        _end_quietly(metric, name, exc, outcome)
        raise
    _end_quietly(metric, name, None, outcome)


__all__ = [
    "Reporter",
    "RequestMetric",
    "NoOpReporter",
    "RequestOutcome",
    "track_request",
]
