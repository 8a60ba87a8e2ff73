from __future__ import annotations

import base64

import pytest

from maps_api_client.client import MapsClient
from maps_api_client.config import MapsClientConfig
from maps_api_client.core.errors import MapsHttpError, MapsStatusError, MapsValidationError
from maps_api_client.core.latlng import LatLng
from maps_api_client.core.transport import SyncTransport
from maps_api_client.options import (
    with_interpolate,
    with_path,
    with_place_id,
    with_place_ids,
    with_points,
    with_speed_limit_units,
)
from maps_api_client.roads.enums import SpeedLimitUnit
from tests.shared.http import API_KEY, Response, SyncRecordingClient, json_response, query_of

SECRET = base64.urlsafe_b64encode(b"signing-key").decode("ascii")
CANBERRA = (LatLng(-35.27801, 149.12958), LatLng(-35.28032, 149.12907))

SNAPPED_PAYLOAD = {
    "snappedPoints": [
        {
            "location": {"latitude": -35.2784167, "longitude": 149.1294692},
            "originalIndex": 0,
            "placeId": "ChIJoR7CemhNFmsRQB9QbW7qABM",
        },
        {
            "location": {"latitude": -35.2803415, "longitude": 149.1290788},
            "placeId": "ChIJiy6YT2hNFmsRkHZAbW7qABM",
        },
    ],
    "warningMessage": "Input path is too sparse.",
}


def _client(config: MapsClientConfig, *responses: Response) -> tuple[MapsClient, SyncRecordingClient]:
    http = SyncRecordingClient(list(responses) or [json_response({})])
    return MapsClient(config=config, transport=SyncTransport(config, client=http)), http


def test_snap_to_road_goes_to_the_roads_host(config):
    client, http = _client(config, json_response(SNAPPED_PAYLOAD))
    response = client.snap_to_road(with_path(*CANBERRA), with_interpolate())

    assert http.urls[0].startswith("https://roads.googleapis.com/v1/snapToRoads?")
    assert query_of(http.urls[0]) == (
        f"interpolate=true&key={API_KEY}&path=-35.27801%2C149.12958%7C-35.28032%2C149.12907"
    )
    first, interpolated = response.snapped_points
    assert first.location == LatLng(-35.2784167, 149.1294692)
    assert first.original_index == 0
    assert interpolated.original_index is None
    assert interpolated.place_id == "ChIJiy6YT2hNFmsRkHZAbW7qABM"
    assert response.warning_message == "Input path is too sparse."


def test_nearest_roads_query(config):
    client, http = _client(config)
    response = client.nearest_roads(with_points(LatLng(60.17088, 24.94296)))

    assert http.urls[0].startswith("https://roads.googleapis.com/v1/nearestRoads?")
    assert query_of(http.urls[0]) == f"key={API_KEY}&points=60.17088%2C24.94296"
    assert response.snapped_points == ()


def test_speed_limits_repeat_place_id_in_caller_order(config):
    payload = {
        "speedLimits": [
            {"placeId": "ChIJ2", "speedLimit": 60, "units": "MPH"},
            {"placeId": "ChIJ1", "speedLimit": 37.5, "units": "MPH"},
        ]
    }
    client, http = _client(config, json_response(payload))
    response = client.speed_limits(
        with_place_ids("ChIJ2", "ChIJ1"),
        with_speed_limit_units(SpeedLimitUnit.MPH),
    )

    assert query_of(http.urls[0]) == f"key={API_KEY}&placeId=ChIJ2&placeId=ChIJ1&units=MPH"
    assert [limit.speed_limit for limit in response.speed_limits] == [60.0, 37.5]
    assert response.speed_limits[0].units == "MPH"


def test_speed_limits_by_path(config):
    client, http = _client(config)
    client.speed_limits(with_path(*CANBERRA))
    assert query_of(http.urls[0]) == f"key={API_KEY}&path=-35.27801%2C149.12958%7C-35.28032%2C149.12907"


def test_roads_do_not_accept_client_id_credentials():
    config = MapsClientConfig(client_id="gme-test", signing_secret=SECRET)
    client, http = _client(config)
    with pytest.raises(MapsValidationError, match="maps: API Key missing"):
        client.snap_to_road(with_path(*CANBERRA))
    assert http.calls == 0


def test_base_url_overrides_the_roads_host_too():
    config = MapsClientConfig(api_key=API_KEY, base_url="http://localhost:8080")
    client, http = _client(config)
    client.nearest_roads(with_points(LatLng(1, 2)))
    assert http.urls[0].startswith("http://localhost:8080/v1/nearestRoads?")


def test_roads_error_object_becomes_status_error(config):
    body = {"error": {"code": 400, "message": "Invalid value for path.", "status": "INVALID_ARGUMENT"}}
    client, _ = _client(config, json_response(body, status_code=400))
    with pytest.raises(MapsStatusError) as excinfo:
        client.snap_to_road(with_path(*CANBERRA))
    assert str(excinfo.value) == "maps: INVALID_ARGUMENT - Invalid value for path."
    assert excinfo.value.http_status == 400


def test_roads_http_failure_without_error_object(config):
    client, _ = _client(config, Response(503, "<html>unavailable</html>", {"Content-Type": "text/html"}))
    with pytest.raises(MapsHttpError, match="maps: HTTP 503"):
        client.nearest_roads(with_points(LatLng(1, 2)))


@pytest.mark.parametrize(
    ("call", "options", "message"),
    [
        ("snap_to_road", (with_interpolate(),), "maps: Path empty"),
        ("nearest_roads", (), "maps: Points empty"),
        ("speed_limits", (with_speed_limit_units("KPH"),), "maps: Path and PlaceID both empty"),
    ],
    ids=["snap-to-road", "nearest-roads", "speed-limits"],
)
def test_incomplete_roads_requests_fail_before_dispatch(config, call, options, message):
    client, http = _client(config)
    with pytest.raises(MapsValidationError) as excinfo:
        getattr(client, call)(*options)
    assert str(excinfo.value) == message
    assert http.calls == 0


def test_single_place_id_option_is_not_a_speed_limits_field(config):
    client, http = _client(config)
    with pytest.raises(MapsValidationError) as excinfo:
        client.speed_limits(with_place_id("ChIJ1"))
    assert excinfo.value.kind == "not_supported"
    assert http.calls == 0
