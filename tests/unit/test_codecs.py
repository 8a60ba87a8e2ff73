from __future__ import annotations

import base64
from datetime import datetime, timedelta, timezone

import pytest

from maps_api_client.core.codecs import (
    decode_duration,
    decode_timestamp,
    encode_duration,
    encode_epoch,
    encode_seconds,
    encode_timestamp,
    format_duration_text,
    join_pipe,
    split_pipe,
)
from maps_api_client.core.errors import MapsDecodeError, MapsValidationError
from maps_api_client.core.latlng import (
    LatLng,
    LatLngBounds,
    bounds_from_wire,
    join_latlngs,
    latlng_from_wire,
    parse_latlng,
    parse_latlng_list,
)
from maps_api_client.core.polyline import Polyline, decode_polyline, encode_polyline
from maps_api_client.core.query import QueryParams
from maps_api_client.core.signer import decode_signing_secret, generate_signature, sign_query

REFERENCE_POLYLINE = "_p~iF~ps|U_ulLnnqC_mqNvxq`@"
REFERENCE_PATH = [
    LatLng(38.5, -120.2),
    LatLng(40.7, -120.95),
    LatLng(43.252, -126.453),
]


@pytest.mark.parametrize(
    ("seconds", "expected"),
    [(0, "0s"), (45, "45s"), (133, "2m13s"), (3600, "1h0m0s"), (3723, "1h2m3s"), (-90, "-1m30s")],
)
def test_format_duration_text(seconds: int, expected: str):
    assert format_duration_text(timedelta(seconds=seconds)) == expected


def test_duration_codec_distinguishes_absent_from_zero():
    assert decode_duration(None) is None
    assert decode_duration({"text": "unknown"}) is None
    assert decode_duration({"value": 0, "text": "0 mins"}) == timedelta(0)
    assert decode_duration(600) == timedelta(minutes=10)
    assert encode_duration(None) is None
    assert encode_seconds(None) is None


def test_duration_round_trip_keeps_seconds():
    wire = encode_duration(timedelta(seconds=133))
    assert wire == {"value": 133, "text": "2m13s"}
    assert decode_duration(wire) == timedelta(seconds=133)


def test_duration_rejects_non_numeric_value():
    with pytest.raises(MapsDecodeError):
        decode_duration({"value": "ten"})


@pytest.mark.parametrize("item", [{"value": 10**15}, 10**15, {"value": -(10**15)}])
def test_duration_out_of_range_is_decode_error(item: object):
    with pytest.raises(MapsDecodeError, match="out of range") as excinfo:
        decode_duration(item)
    assert isinstance(excinfo.value.__cause__, OverflowError)


def test_timestamp_codec_distinguishes_absent_from_epoch_origin():
    assert decode_timestamp(None) is None
    assert decode_timestamp({"text": "no value"}) is None
    assert decode_timestamp({"value": 0}) == datetime(1970, 1, 1, tzinfo=timezone.utc)
    assert encode_timestamp(None) is None
    assert encode_epoch(None) is None


@pytest.mark.parametrize(
    "item",
    [
        {"value": 10**12, "time_zone": "UTC"},
        {"value": 10**12, "time_zone": "Australia/Sydney"},
        {"value": -(10**12)},
        10**20,
    ],
)
def test_timestamp_out_of_range_is_decode_error(item: object):
    with pytest.raises(MapsDecodeError, match="out of range"):
        decode_timestamp(item)


def test_timestamp_round_trip_keeps_instant():
    decoded = decode_timestamp({"value": 1700000000, "time_zone": "UTC", "text": ""})
    assert decoded is not None
    assert decoded == datetime.fromtimestamp(1700000000, tz=timezone.utc)
    wire = encode_timestamp(decoded)
    assert wire is not None
    assert wire["value"] == 1700000000
    assert wire["time_zone"] == "UTC"


def test_timestamp_unknown_zone_falls_back_to_utc():
    decoded = decode_timestamp({"value": 60, "time_zone": "Mars/Olympus_Mons"})
    assert decoded is not None
    assert decoded.utcoffset() == timedelta(0)


def test_bare_integer_timestamp_is_epoch_seconds():
    assert decode_timestamp(86400) == datetime(1970, 1, 2, tzinfo=timezone.utc)
    assert encode_epoch(datetime(1970, 1, 2)) == 86400


def test_pipe_helpers():
    assert join_pipe(["a", 1, "b"]) == "a|1|b"
    assert split_pipe("") == []
    assert split_pipe("tolls|ferries") == ["tolls", "ferries"]


def test_latlng_text_forms():
    assert str(LatLng(1, 2)) == "1,2"
    assert str(LatLng(47.6918452, -122.2226413)) == "47.6918452,-122.2226413"
    bounds = LatLngBounds(north_east=LatLng(3, 4), south_west=LatLng(1, 2))
    assert str(bounds) == "1,2|3,4"
    assert join_latlngs([LatLng(1, 2), LatLng(3.5, 4)]) == "1,2|3.5,4"


def test_parse_latlng():
    assert parse_latlng("-33.8688,151.2093") == LatLng(-33.8688, 151.2093)
    assert parse_latlng_list("1,2|3,4") == [LatLng(1, 2), LatLng(3, 4)]


@pytest.mark.parametrize("text", ["", "1", "1,2,3", "north,south"])
def test_parse_latlng_rejects_malformed_text(text: str):
    with pytest.raises(MapsValidationError):
        parse_latlng(text)


def test_latlng_wire_forms():
    assert latlng_from_wire({"lat": 1, "lng": 2.5}) == LatLng(1.0, 2.5)
    assert latlng_from_wire({"latitude": 1, "longitude": 2}) == LatLng(1.0, 2.0)
    assert latlng_from_wire({"lat": "1"}) is None
    assert bounds_from_wire({"northeast": {"lat": 1, "lng": 2}}) is None


def test_latlng_almost_equal():
    assert LatLng(1.0, 2.0).almost_equal(LatLng(1.0000001, 1.9999999), 1e-6)
    assert not LatLng(1.0, 2.0).almost_equal(LatLng(1.1, 2.0), 1e-6)


def test_polyline_decode_reference_path():
    assert decode_polyline(REFERENCE_POLYLINE) == REFERENCE_PATH
    assert Polyline(points=REFERENCE_POLYLINE).decode() == REFERENCE_PATH


def test_polyline_encode_reference_path():
    assert encode_polyline(REFERENCE_PATH) == REFERENCE_POLYLINE
    assert encode_polyline(decode_polyline(REFERENCE_POLYLINE)) == REFERENCE_POLYLINE


def test_polyline_handles_zero_change_in_one_direction():
    path = [LatLng(1, 2), LatLng(1, 3), LatLng(2, 3)]
    assert decode_polyline(encode_polyline(path)) == path


def test_polyline_empty():
    assert encode_polyline([]) == ""
    assert decode_polyline("") == []


@pytest.mark.parametrize("points", ["_p~iF~ps|", "_p~iF", "_p~iF\x01"])
def test_polyline_rejects_malformed_input(points: str):
    with pytest.raises(MapsDecodeError):
        decode_polyline(points)


def test_query_params_sorts_keys_and_keeps_value_order():
    params = QueryParams()
    params.set("origin", "Sydney")
    params.add("markers", "b")
    params.add("markers", "a")
    params.set("destination", "Perth & Co")
    assert params.encode() == "destination=Perth+%26+Co&markers=b&markers=a&origin=Sydney"
    assert params.get("markers") == "b"
    assert params.get_all("markers") == ["b", "a"]
    assert params.get("missing") is None


def test_query_params_copy_is_independent():
    params = QueryParams()
    params.set("a", 1)
    clone = params.copy()
    clone.add("a", 2)
    clone.set("b", 3)
    assert params.get_all("a") == ["1"]
    assert "b" not in params
    assert clone != params


def test_signature_matches_hmac_sha1_reference_vector():
    expected = base64.urlsafe_b64encode(
        bytes.fromhex("de7c9b85b8b78aa6bc8a7a36f70a90701c9db4d9")
    ).decode("ascii")
    assert generate_signature(b"key", "The quick brown fox jumps over the lazy dog") == expected


def test_sign_query_adds_client_and_appends_signature():
    params = QueryParams()
    params.set("address", "Sydney")
    key = b"secret"
    signed = sign_query("/maps/api/geocode/json", "gme-test", key, params)
    encoded = "address=Sydney&client=gme-test"
    expected = generate_signature(key, f"/maps/api/geocode/json?{encoded}")
    assert signed == f"{encoded}&signature={expected}"
    assert "client" not in params


def test_sign_query_without_client_id_signs_query_as_is():
    params = QueryParams()
    params.set("key", "abc")
    signed = sign_query("/maps/api/staticmap", "", b"secret", params)
    assert signed.startswith("key=abc&signature=")


def test_decode_signing_secret_rejects_bad_base64():
    assert decode_signing_secret(base64.urlsafe_b64encode(b"raw").decode()) == b"raw"
    with pytest.raises(MapsValidationError):
        decode_signing_secret("not base64!")
