from __future__ import annotations

import uuid
from datetime import datetime, timezone

import pytest

from maps_api_client.core.errors import (
    KIND_INVALID_VALUE,
    KIND_NOT_SUPPORTED,
    MapsValidationError,
)
from maps_api_client.core.latlng import LatLng
from maps_api_client.core.options import apply_options, set_fields
from maps_api_client.geocoding.requests import GeocodingRequest
from maps_api_client.options import (
    NOW,
    with_avoid,
    with_components,
    with_departure_time,
    with_fields,
    with_keyword,
    with_location,
    with_location_bias,
    with_location_bias_circle,
    with_markers,
    with_max_width,
    with_min_price,
    with_mode,
    with_origin,
    with_radius,
    with_scale,
    with_session_token,
    with_style_rule,
    with_styles,
    with_units,
    with_waypoints,
)
from maps_api_client.places.enums import PlaceDetailsFieldMask
from maps_api_client.places.requests import (
    FindPlaceFromTextRequest,
    NearbySearchRequest,
    PlaceAutocompleteRequest,
    PlaceDetailsRequest,
    PlacePhotoRequest,
)
from maps_api_client.routing.enums import Avoid, TravelMode
from maps_api_client.routing.requests import DirectionsRequest
from maps_api_client.staticmap.models import Marker
from maps_api_client.staticmap.requests import StaticMapRequest


def test_options_apply_in_order_and_store_wire_values():
    request = apply_options(
        DirectionsRequest(),
        [with_mode(TravelMode.WALKING), with_avoid(Avoid.TOLLS, "ferries"), with_mode("bicycling")],
    )
    assert request.mode == "bicycling"
    assert request.avoid == ("tolls", "ferries")


def test_invalid_choice_is_deferred_until_applied():
    option = with_mode("teleport")
    assert callable(option)

    with pytest.raises(MapsValidationError) as excinfo:
        apply_options(DirectionsRequest(), [option])

    err = excinfo.value
    assert str(err) == "maps: Unknown Mode 'teleport'"
    assert err.kind == KIND_INVALID_VALUE
    assert err.operation == "directions"
    assert err.fields == ("mode",)
    assert err.value == "teleport"


def test_first_failing_option_aborts_the_build():
    request = DirectionsRequest()
    with pytest.raises(MapsValidationError):
        apply_options(request, [with_mode("walking"), with_units("furlongs"), with_units("metric")])
    assert request.mode == "walking"
    assert request.units == ""


def test_option_for_missing_field_is_not_supported():
    with pytest.raises(MapsValidationError) as excinfo:
        apply_options(DirectionsRequest(), [with_keyword("pizza")])
    assert excinfo.value.kind == KIND_NOT_SUPPORTED
    assert excinfo.value.operation == "directions"
    assert excinfo.value.fields == ("keyword",)


def test_multi_field_option_is_all_or_nothing():
    request = NearbySearchRequest()
    option = set_fields(location=LatLng(1, 2), location_bias="point")
    with pytest.raises(MapsValidationError):
        option(request)
    assert request.location is None


def test_location_bias_circle_sets_every_companion_field():
    request = apply_options(
        FindPlaceFromTextRequest(),
        [with_location_bias_circle(LatLng(47.6918452, -122.2226413), 2000)],
    )
    assert request.location_bias == "circle"
    assert request.location_bias_center == LatLng(47.6918452, -122.2226413)
    assert request.location_bias_radius == 2000


def test_location_bias_kind_is_case_insensitive():
    request = apply_options(FindPlaceFromTextRequest(), [with_location_bias("IPBIAS")])
    assert request.location_bias == "ipbias"


def test_location_option_accepts_text_and_defers_parse_errors():
    request = apply_options(NearbySearchRequest(), [with_location("1,2")])
    assert request.location == LatLng(1, 2)
    with pytest.raises(MapsValidationError) as excinfo:
        apply_options(NearbySearchRequest(), [with_location("one,two")])
    assert excinfo.value.operation == "nearby_search"


def test_autocomplete_origin_text_is_parsed_to_a_point():
    request = apply_options(PlaceAutocompleteRequest(), [with_origin("-33.86,151.2")])
    assert request.origin == LatLng(-33.86, 151.2)

    with pytest.raises(MapsValidationError) as excinfo:
        apply_options(PlaceAutocompleteRequest(), [with_origin("Sydney")])
    assert excinfo.value.fields == ("origin",)
    assert excinfo.value.operation == "place_autocomplete"


def test_route_origin_text_stays_an_address():
    request = apply_options(DirectionsRequest(), [with_origin("Sydney Town Hall")])
    assert request.origin == "Sydney Town Hall"


@pytest.mark.parametrize(
    "option",
    [with_radius(-1), with_max_width(0), with_scale(3), with_min_price(9), with_session_token("nope")],
    ids=["radius", "max-width", "scale", "min-price", "session-token"],
)
def test_out_of_range_values_fail_when_applied(option):
    with pytest.raises(MapsValidationError) as excinfo:
        option(PlacePhotoRequest())
    assert excinfo.value.kind == KIND_INVALID_VALUE
    assert excinfo.value.operation == "place_photo"


def test_min_price_accepts_integer_level():
    request = apply_options(NearbySearchRequest(), [with_min_price(2)])
    assert request.min_price == "2"


def test_fields_are_checked_against_request_vocabulary():
    request = apply_options(
        PlaceDetailsRequest(),
        [with_fields(PlaceDetailsFieldMask.NAME, "rating")],
    )
    assert request.fields == ("name", "rating")

    with pytest.raises(MapsValidationError) as excinfo:
        apply_options(PlaceDetailsRequest(), [with_fields("opening_hours/open_now", "bogus")])
    assert str(excinfo.value) == "maps: Unknown field mask 'opening_hours/open_now'"
    assert excinfo.value.operation == "place_details"


def test_fields_on_request_without_masks_is_not_supported():
    with pytest.raises(MapsValidationError) as excinfo:
        apply_options(NearbySearchRequest(), [with_fields("name")])
    assert excinfo.value.kind == KIND_NOT_SUPPORTED


def test_session_token_accepts_uuid_text():
    token = uuid.uuid4()
    request = apply_options(PlaceDetailsRequest(), [with_session_token(str(token))])
    assert request.session_token == token


def test_components_mapping_is_copied():
    components = {"country": "ES", "locality": ["Madrid", "Toledo"]}
    request = apply_options(GeocodingRequest(), [with_components(components)])
    components["country"] = "FR"
    components["postal_code"] = "28001"
    assert request.components == {"country": ("ES",), "locality": ("Madrid", "Toledo")}


def test_components_rejects_unknown_key():
    with pytest.raises(MapsValidationError) as excinfo:
        apply_options(GeocodingRequest(), [with_components({"planet": "Earth"})])
    assert str(excinfo.value) == "maps: Unknown Component 'planet'"


def test_waypoints_are_stored_as_text():
    request = apply_options(DirectionsRequest(), [with_waypoints("Canberra", LatLng(-35.3, 149.1))])
    assert request.waypoints == ("Canberra", "-35.3,149.1")


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (NOW, "now"),
        (1700000000, "1700000000"),
        ("1700000000", "1700000000"),
        (datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc), "1700000000"),
    ],
)
def test_departure_time_forms(value, expected):
    request = apply_options(DirectionsRequest(), [with_departure_time(value)])
    assert request.departure_time == expected


@pytest.mark.parametrize("value", ["tomorrow", -5, True])
def test_departure_time_rejects_other_values(value):
    with pytest.raises(MapsValidationError):
        apply_options(DirectionsRequest(), [with_departure_time(value)])


def test_markers_append_across_options():
    first = Marker(label="A", locations=(LatLng(1, 2),))
    second = Marker(label="B", locations=(LatLng(3, 4),))
    request = apply_options(StaticMapRequest(), [with_markers(first), with_markers(second)])
    assert request.markers == (first, second)


def test_style_options_merge_and_copy_values():
    styles = {"road": {"geometry": {"color": "0xff0000"}}}
    request = apply_options(
        StaticMapRequest(),
        [with_styles(styles), with_style_rule("road", "geometry", "visibility", False)],
    )
    styles["road"]["geometry"]["color"] = "0x000000"
    assert request.styles == {"road": {"geometry": {"color": "0xff0000", "visibility": "false"}}}


def test_style_rule_requires_all_parts():
    with pytest.raises(MapsValidationError):
        apply_options(StaticMapRequest(), [with_style_rule("road", "", "color", "red")])
