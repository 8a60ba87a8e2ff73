from __future__ import annotations

import pytest

from maps_api_client.async_client import AsyncMapsClient
from maps_api_client.config import MapsClientConfig
from maps_api_client.core.errors import MapsClientClosedError, MapsValidationError
from maps_api_client.options import with_address, with_input
from tests.shared.reporters import RecordingReporter


class DummyAsyncTransport:
    def __init__(self):
        self.closed = False
        self.calls = 0

    async def close(self):
        self.closed = True

    async def execute(self, endpoint, params, decode, *, cancel=None, timeout=None):
        self.calls += 1
        raise AssertionError("transport must not be reached")


@pytest.mark.asyncio
async def test_async_client_context_manager_closes_transport(config):
    transport = DummyAsyncTransport()
    async with AsyncMapsClient(config=config, transport=transport) as client:
        assert client is not None
    assert transport.closed is True


@pytest.mark.asyncio
async def test_async_client_raises_when_used_after_close(config):
    client = AsyncMapsClient(config=config, transport=DummyAsyncTransport())
    await client.close()
    await client.close()
    with pytest.raises(MapsClientClosedError, match="AsyncMapsClient is already closed"):
        await client.geocode(with_address("Sydney"))


@pytest.mark.asyncio
async def test_async_validation_failure_never_reaches_transport(config):
    transport = DummyAsyncTransport()
    client = AsyncMapsClient(config=config, transport=transport)
    with pytest.raises(MapsValidationError, match="maps: InputType required"):
        await client.find_place_from_text(with_input("cafe"))
    assert transport.calls == 0


def test_async_client_rejects_missing_credentials():
    with pytest.raises(MapsValidationError):
        AsyncMapsClient(config=MapsClientConfig(), transport=DummyAsyncTransport())


def test_async_client_rejects_reporter_next_to_custom_transport(config):
    with pytest.raises(MapsValidationError, match="reporter cannot be combined") as excinfo:
        AsyncMapsClient(config=config, transport=DummyAsyncTransport(), reporter=RecordingReporter())
    assert excinfo.value.operation == "config"
