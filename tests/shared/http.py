from __future__ import annotations

import asyncio
import json
from collections.abc import Iterator, Mapping, Sequence
from contextlib import contextmanager
from urllib.parse import parse_qs, urlsplit

API_KEY = "AIzaNotReallyAnAPIKey"


class Response:
    def __init__(
        self,
        status_code: int,
        content: bytes | str | Mapping[str, object] = b"",
        headers: Mapping[str, str] | None = None,
        *,
        chunks: Sequence[bytes] | None = None,
    ):
        if isinstance(content, Mapping):
            content = json.dumps(content)
        if isinstance(content, str):
            content = content.encode("utf-8")
        if chunks is None:
            chunks = [content] if content else []
        else:
            content = b"".join(chunks)
        self.status_code = status_code
        self.content = content
        self.chunks = list(chunks)
        self.headers = dict(headers or {"Content-Type": "application/json"})

    def iter_bytes(self) -> Iterator[bytes]:
        yield from self.chunks


def json_response(payload: Mapping[str, object], *, status_code: int = 200, **headers: str) -> Response:
    return Response(status_code, payload, {"Content-Type": "application/json", **headers})


Step = Response | Exception


def query_of(url: str) -> str:
    return urlsplit(url).query


def params_of(url: str) -> dict[str, list[str]]:
    return parse_qs(query_of(url))


class SyncRecordingClient:
    """Stands in for ``httpx.Client``; replays steps and records requested URLs."""

    def __init__(self, steps: Sequence[Step]):
        self.steps = list(steps)
        self.urls: list[str] = []
        self.kwargs: list[dict[str, object]] = []
        self.methods: list[str] = []
        self.closed = False

    @property
    def calls(self) -> int:
        return len(self.urls)

    def _next(self, url: str, kwargs: dict[str, object]) -> Response:
        self.urls.append(url)
        self.kwargs.append(kwargs)
        step = self.steps.pop(0)
        if isinstance(step, Exception):
            raise step
        return step

    def get(self, url: str, *, headers: Mapping[str, str], **kwargs: object):
        self.methods.append("get")
        return self._next(url, kwargs)

    @contextmanager
    def stream(self, method: str, url: str, *, headers: Mapping[str, str], **kwargs: object):
        self.methods.append(f"stream:{method}")
        yield self._next(url, kwargs)

    def close(self):
        self.closed = True


class AsyncRecordingClient:
    def __init__(self, steps: Sequence[Step]):
        self.steps = list(steps)
        self.urls: list[str] = []
        self.closed = False

    @property
    def calls(self) -> int:
        return len(self.urls)

    async def get(self, url: str, *, headers: Mapping[str, str]):
        self.urls.append(url)
        step = self.steps.pop(0)
        if isinstance(step, Exception):
            raise step
        return step

    async def aclose(self):
        self.closed = True


class BlockingAsyncClient:
    """Async client whose requests never finish until cancelled."""

    def __init__(self):
        self.started = asyncio.Event()
        self.cancelled = False
        self.calls = 0

    async def get(self, url: str, *, headers: Mapping[str, str]):
        self.calls += 1
        self.started.set()
        try:
            await asyncio.Event().wait()
        except asyncio.CancelledError:
            self.cancelled = True
            raise

    async def aclose(self):
        return None


class SteppingClock:
    """Monotonic clock that advances by ``step`` seconds on every reading."""

    def __init__(self, step: float):
        self.step = step
        self.now = 0.0

    def __call__(self) -> float:
        current = self.now
        self.now += self.step
        return current
