from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class RecordedMetric:
    name: str
    ended: bool = False
    error: BaseException | None = None
    http_status: int | None = None
    metro_area: str = ""

    def end_request(self, error, http_status, metro_area):
        self.ended = True
        self.error = error
        self.http_status = http_status
        self.metro_area = metro_area


@dataclass
class RecordingReporter:
    metrics: list[RecordedMetric] = field(default_factory=list)

    def new_request(self, name: str) -> RecordedMetric:
        metric = RecordedMetric(name=name)
        self.metrics.append(metric)
        return metric


class ExplodingMetric:
    def end_request(self, error, http_status, metro_area):
        raise RuntimeError("metrics backend down")


class ExplodingReporter:
    def __init__(self, *, on_start: bool = False):
        self.on_start = on_start

    def new_request(self, name: str):
        if self.on_start:
            raise RuntimeError("metrics backend down")
        return ExplodingMetric()
