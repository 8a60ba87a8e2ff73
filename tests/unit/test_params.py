from __future__ import annotations

import uuid
from datetime import datetime, timezone

from maps_api_client.core.latlng import LatLng, LatLngBounds
from maps_api_client.geocoding.params import (
    build_components_param,
    build_elevation_params,
    build_geocoding_params,
    build_timezone_params,
)
from maps_api_client.geocoding.requests import ElevationRequest, GeocodingRequest, TimezoneRequest
from maps_api_client.places.params import (
    build_find_place_from_text_params,
    build_location_bias_param,
    build_nearby_search_params,
    build_place_autocomplete_params,
    build_place_details_params,
    build_place_photo_params,
    build_query_autocomplete_params,
    build_text_search_params,
)
from maps_api_client.places.requests import (
    FindPlaceFromTextRequest,
    NearbySearchRequest,
    PlaceAutocompleteRequest,
    PlaceDetailsRequest,
    PlacePhotoRequest,
    QueryAutocompleteRequest,
    TextSearchRequest,
)
from maps_api_client.routing.params import (
    build_directions_params,
    build_distance_matrix_params,
    build_waypoints_param,
)
from maps_api_client.routing.requests import DirectionsRequest, DistanceMatrixRequest
from maps_api_client.staticmap.models import CustomIcon, Marker, Path
from maps_api_client.staticmap.params import build_static_map_params
from maps_api_client.staticmap.requests import StaticMapRequest
from maps_api_client.staticmap.styles import encode_style, encode_styles


def test_directions_params_omit_unset_fields():
    params = build_directions_params(DirectionsRequest(origin="Sydney", destination="Perth"))
    assert params.encode() == "destination=Perth&origin=Sydney"


def test_directions_params_full():
    request = DirectionsRequest(
        origin=LatLng(-33.8688, 151.2093),
        destination="Perth",
        mode="transit",
        waypoints=("Canberra", "Adelaide"),
        alternatives=True,
        avoid=("tolls", "ferries"),
        language="en-AU",
        units="metric",
        region="au",
        departure_time="now",
        transit_mode=("bus", "rail"),
        transit_routing_preference="fewer_transfers",
    )
    params = build_directions_params(request)
    assert params.get("origin") == "-33.8688,151.2093"
    assert params.get("waypoints") == "Canberra|Adelaide"
    assert params.get("alternatives") == "true"
    assert params.get("avoid") == "tolls|ferries"
    assert params.get("transit_mode") == "bus|rail"
    assert params.get("transit_routing_preference") == "fewer_transfers"
    assert params.get("departure_time") == "now"
    assert "arrival_time" not in params
    assert "traffic_model" not in params


def test_optimized_waypoints_are_prefixed():
    request = DirectionsRequest(waypoints=("A", "B"), optimize_waypoints=True)
    assert build_waypoints_param(request) == "optimize:true|A|B"


def test_distance_matrix_params_join_places_with_pipes():
    request = DistanceMatrixRequest(
        origins=("Sydney", "-33.8,151.2"),
        destinations=("Perth",),
        traffic_model="pessimistic",
        departure_time="1700000000",
    )
    assert build_distance_matrix_params(request).encode() == (
        "departure_time=1700000000&destinations=Perth"
        "&origins=Sydney%7C-33.8%2C151.2&traffic_model=pessimistic"
    )


def test_nearby_search_params():
    request = NearbySearchRequest(
        location=LatLng(1, 2),
        radius=10000,
        keyword="pizza",
        min_price="1",
        max_price="3",
        open_now=True,
        place_type="restaurant",
    )
    assert build_nearby_search_params(request).encode() == (
        "keyword=pizza&location=1%2C2&maxprice=3&minprice=1&opennow=true&radius=10000&type=restaurant"
    )


def test_nearby_search_params_with_page_token_only():
    params = build_nearby_search_params(NearbySearchRequest(page_token="next"))
    assert params.encode() == "pagetoken=next"


def test_text_search_params_always_send_query():
    assert build_text_search_params(TextSearchRequest(page_token="next")).encode() == "pagetoken=next&query="
    params = build_text_search_params(TextSearchRequest(query="Pizza in New York", region="us"))
    assert params.encode() == "query=Pizza+in+New+York&region=us"


def test_place_details_params():
    token = uuid.UUID("3d6f9c4a-9d8b-4c4e-8f2b-1a2b3c4d5e6f")
    request = PlaceDetailsRequest(
        place_id="ChIJ-place",
        fields=("name", "rating"),
        session_token=token,
        language="ja",
    )
    params = build_place_details_params(request)
    assert params.get("placeid") == "ChIJ-place"
    assert params.get("fields") == "name,rating"
    assert params.get("sessiontoken") == str(token)
    assert params.get("language") == "ja"


def test_autocomplete_params():
    query = build_query_autocomplete_params(QueryAutocompleteRequest(input="pizza near", offset=3))
    assert query.encode() == "input=pizza+near&offset=3"

    request = PlaceAutocompleteRequest(
        input="Sydney",
        origin=LatLng(-33.8, 151.2),
        types="(cities)",
        strict_bounds=True,
        components={"country": ("au", "nz")},
    )
    params = build_place_autocomplete_params(request)
    assert params.get("components") == "country:au|country:nz"
    assert params.get("types") == "(cities)"
    assert params.get("strictbounds") == "true"
    assert params.get("origin") == "-33.8,151.2"
    assert "offset" not in params


def test_location_bias_param_forms():
    point = LatLng(1, 2)
    other = LatLng(3, 4)
    assert build_location_bias_param(FindPlaceFromTextRequest(location_bias="ipbias")) == "ipbias"
    assert (
        build_location_bias_param(FindPlaceFromTextRequest(location_bias="point", location_bias_point=point))
        == "point:1,2"
    )
    assert (
        build_location_bias_param(
            FindPlaceFromTextRequest(
                location_bias="circle",
                location_bias_center=point,
                location_bias_radius=2000,
            )
        )
        == "circle:2000@1,2"
    )
    assert (
        build_location_bias_param(
            FindPlaceFromTextRequest(
                location_bias="rectangle",
                location_bias_south_west=point,
                location_bias_north_east=other,
            )
        )
        == "rectangle:1,2|3,4"
    )


def test_find_place_params_always_send_input_type():
    params = build_find_place_from_text_params(FindPlaceFromTextRequest(input="cafe", input_type="textquery"))
    assert params.encode() == "input=cafe&inputtype=textquery"


def test_place_photo_params():
    params = build_place_photo_params(PlacePhotoRequest(photo_reference="ref", max_width=400))
    assert params.encode() == "maxwidth=400&photoreference=ref"


def test_components_param_sorts_keys_and_keeps_value_order():
    components = {"locality": ("Toledo", "Madrid"), "country": ("ES",)}
    assert build_components_param(components) == "country:ES|locality:Toledo|locality:Madrid"


def test_geocoding_params():
    request = GeocodingRequest(
        address="Santa Cruz",
        components={"country": ("ES",)},
        bounds=LatLngBounds(
            north_east=LatLng(34.172684, -118.604794),
            south_west=LatLng(34.236144, -118.500938),
        ),
        region="es",
        language="es",
        result_type=("country",),
        location_type=("APPROXIMATE",),
    )
    params = build_geocoding_params(request)
    assert params.get("bounds") == "34.236144,-118.500938|34.172684,-118.604794"
    assert params.get("components") == "country:ES"
    assert params.get("location_type") == "APPROXIMATE"


def test_reverse_geocoding_params():
    request = GeocodingRequest(latlng=LatLng(40.714224, -73.961452), result_type=("street_address", "route"))
    assert build_geocoding_params(request).encode() == (
        "latlng=40.714224%2C-73.961452&result_type=street_address%7Croute"
    )


def test_timezone_params_default_timestamp_to_zero():
    params = build_timezone_params(TimezoneRequest(location=LatLng(1, 2)))
    assert params.encode() == "location=1%2C2&timestamp=0"

    stamped = TimezoneRequest(
        location=LatLng(1, 2),
        timestamp=datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc),
        language="es",
    )
    assert build_timezone_params(stamped).encode() == "language=es&location=1%2C2&timestamp=1700000000"


def test_elevation_params_use_encoded_polylines():
    request = ElevationRequest(
        locations=(LatLng(1, 2), LatLng(3, 4)),
        path=(LatLng(5, 6), LatLng(7, 8)),
        samples=10,
    )
    params = build_elevation_params(request)
    assert params.get("locations") == "enc:_ibE_seK_seK_seK"
    assert params.get("path") == "enc:_qo]_{rc@_seK_seK"
    assert params.get("samples") == "10"


def test_marker_param_with_style_and_locations():
    marker = Marker(color="blue", label="S", size="mid", locations=(LatLng(1, 2),), location_address="Sydney")
    assert marker.to_param() == "color:blue|label:S|size:mid|1,2|Sydney"


def test_marker_custom_icon_replaces_style_fields():
    marker = Marker(
        color="blue",
        label="S",
        custom_icon=CustomIcon(icon_url="https://goo.gl/5y3S82", anchor="topleft", scale=2),
        locations=(LatLng(1, 2),),
    )
    assert marker.to_param() == "icon:https://goo.gl/5y3S82|anchor:topleft|scale:2|1,2"


def test_path_param_prefers_shorter_point_form():
    short = Path(color="0xff0000ff", weight=5, locations=(LatLng(1, 2), LatLng(3, 4)))
    assert short.to_param() == "color:0xff0000ff|weight:5|1,2|3,4"

    precise = (
        LatLng(40.737102, -73.990318),
        LatLng(40.749825, -73.987963),
        LatLng(40.752946, -73.987384),
        LatLng(40.755823, -73.986397),
    )
    geodesic = Path(fill_color="0xFFFF0033", geodesic=True, locations=precise)
    param = geodesic.to_param()
    assert param.startswith("fillcolor:0xFFFF0033|geodesic:true|enc:")


def test_style_encoding_sorts_features_and_elements_but_keeps_rule_order():
    styles = {
        "road": {"labels": {"visibility": "off"}, "geometry": {"lightness": "100", "color": "0x00ff00"}},
        "administrative": {"all": {"visibility": "simplified"}},
    }
    assert encode_styles(styles) == [
        "feature:administrative|element:all|visibility:simplified",
        "feature:road|element:geometry|lightness:100|color:0x00ff00",
        "feature:road|element:labels|visibility:off",
    ]
    assert encode_style("water", "geometry", {}) == "feature:water|element:geometry"


def test_static_map_params_repeat_markers_paths_and_styles():
    request = StaticMapRequest(
        center="Brooklyn Bridge,New York,NY",
        zoom=13,
        size="600x300",
        scale=2,
        map_type="roadmap",
        markers=(
            Marker(color="blue", label="S", locations=(LatLng(40.702147, -74.015794),)),
            Marker(color="green", label="G", locations=(LatLng(40.711614, -74.012318),)),
        ),
        paths=(Path(weight=3, locations=(LatLng(1, 2), LatLng(3, 4))),),
        visible=(LatLng(1, 2), LatLng(3, 4)),
        styles={"road": {"geometry": {"color": "0xff0000"}}, "water": {"all": {"hue": "0x0000ff"}}},
    )
    params = build_static_map_params(request)
    assert params.get("maptype") == "roadmap"
    assert params.get_all("markers") == [
        "color:blue|label:S|40.702147,-74.015794",
        "color:green|label:G|40.711614,-74.012318",
    ]
    assert params.get_all("path") == ["weight:3|1,2|3,4"]
    assert params.get("visible") == "1,2|3,4"
    assert len(params.get_all("style")) == 2
