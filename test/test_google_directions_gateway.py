import asyncio
import json
from datetime import date

import httpx
import polyline
import pytest

from routes_c.models.directions import TravelMode
from routes_c.models.route import Coordinate
from routes_c.services.map.api_counter import ApiCallCounter
from routes_c.services.map.errors import DirectionsError, NoPathError, RateLimitError
from routes_c.services.map.google_directions_gateway import GoogleDirectionsGateway

START = Coordinate(latitude=1.2834, longitude=103.8607)
END = Coordinate(latitude=1.2901, longitude=103.8539)


def _route_json(distance_meters, points):
    return {
        "distanceMeters": distance_meters,
        "polyline": {"encodedPolyline": polyline.encode(points)},
    }


def _call(handler, counter=None):
    async def scenario():
        transport = httpx.MockTransport(handler)
        async with httpx.AsyncClient(transport=transport) as client:
            gateway = GoogleDirectionsGateway(
                api_key="test-key",
                client=client,
                counter=counter or ApiCallCounter(max_calls_per_day=100),
            )
            return await gateway.route(START, END, mode=TravelMode.WALKING, want_alternates=True)

    return asyncio.run(scenario())


def test_request_asks_for_walking_alternatives():
    captured = []

    def handler(request):
        captured.append(request)
        return httpx.Response(
            200, json={"routes": [_route_json(900, [(1.2834, 103.8607), (1.2901, 103.8539)])]}
        )

    _call(handler)

    request = captured[0]
    body = json.loads(request.content)
    assert request.headers["X-Goog-Api-Key"] == "test-key"
    assert "routes.distanceMeters" in request.headers["X-Goog-FieldMask"]
    assert body["travelMode"] == "WALK"
    assert body["computeAlternativeRoutes"] is True
    assert body["origin"]["location"]["latLng"] == {"latitude": 1.2834, "longitude": 103.8607}
    assert body["destination"]["location"]["latLng"]["latitude"] == 1.2901


def test_alternatives_are_decoded():
    def handler(request):
        return httpx.Response(
            200,
            json={
                "routes": [
                    _route_json(900, [(1.2834, 103.8607), (1.2870, 103.8570), (1.2901, 103.8539)]),
                    _route_json(1250, [(1.2834, 103.8607), (1.2901, 103.8539)]),
                ]
            },
        )

    alternatives = _call(handler)

    assert [alt.distance_meters for alt in alternatives] == [900, 1250]
    assert len(alternatives[0].geometry) == 3
    assert alternatives[0].geometry[1].latitude == pytest.approx(1.2870)
    assert alternatives[0].geometry[1].longitude == pytest.approx(103.8570)


def test_empty_response_is_no_path():
    with pytest.raises(NoPathError):
        _call(lambda request: httpx.Response(200, json={}))


def test_too_many_requests_is_rate_limit():
    def handler(request):
        return httpx.Response(
            429, json={"error": {"status": "RESOURCE_EXHAUSTED", "message": "Quota exceeded"}}
        )

    with pytest.raises(RateLimitError):
        _call(handler)


def test_server_error_is_generic_directions_error():
    with pytest.raises(DirectionsError) as excinfo:
        _call(lambda request: httpx.Response(500, text="upstream failure"))

    assert not isinstance(excinfo.value, (NoPathError, RateLimitError))
    assert "500" in str(excinfo.value)


def test_non_json_success_body_is_directions_error():
    with pytest.raises(DirectionsError) as excinfo:
        _call(lambda request: httpx.Response(200, text="<html>oops</html>"))

    assert not isinstance(excinfo.value, (NoPathError, RateLimitError))


def test_out_of_range_geometry_is_directions_error():
    body = {"routes": [_route_json(900, [(95.0, 103.8607), (1.2901, 103.8539)])]}

    with pytest.raises(DirectionsError):
        _call(lambda request: httpx.Response(200, json=body))


def test_too_many_requests_with_list_body_is_rate_limit():
    with pytest.raises(RateLimitError):
        _call(lambda request: httpx.Response(429, json=["bad"]))


def test_error_body_with_string_error_is_directions_error():
    with pytest.raises(DirectionsError) as excinfo:
        _call(lambda request: httpx.Response(500, json={"error": "bad"}))

    assert "500" in str(excinfo.value)


def test_exhausted_daily_quota_is_rate_limit_without_request():
    captured = []

    def handler(request):
        captured.append(request)
        return httpx.Response(200, json={})

    with pytest.raises(RateLimitError):
        _call(handler, counter=ApiCallCounter(max_calls_per_day=0))

    assert captured == []


def test_every_request_counts_against_quota():
    counter = ApiCallCounter(max_calls_per_day=5)

    with pytest.raises(RateLimitError):
        _call(lambda request: httpx.Response(429, json={}), counter=counter)
    _call(
        lambda request: httpx.Response(200, json={"routes": [_route_json(10, [(1.0, 1.0), (1.0, 1.001)])]}),
        counter=counter,
    )

    assert counter.get_remaining_calls() == 3


def test_counter_resets_on_new_day():
    days = iter([date(2025, 5, 1), date(2025, 5, 1), date(2025, 5, 2)])
    counter = ApiCallCounter(max_calls_per_day=1, today=lambda: next(days))

    counter.record_call()
    assert counter.can_make_call() is True


def test_api_key_is_required():
    with pytest.raises(ValueError):
        GoogleDirectionsGateway(api_key="")
