import pytest
import requests

from routing import geoapify_client
from routing.geoapify_client import GeoapifyClient, RoutingError, parse_route_feature


class FakeResponse:
    def __init__(self, payload=None, status_code=200, body_is_json=True):
        self.payload = payload
        self.status_code = status_code
        self.body_is_json = body_is_json

    def json(self):
        if not self.body_is_json:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self.payload


@pytest.fixture
def captured(monkeypatch):
    """Patch requests.get and remember what was asked."""
    calls = []
    state = {"response": FakeResponse({"features": []})}

    def fake_get(url, params=None, timeout=None):
        calls.append({"url": url, "params": params, "timeout": timeout})
        return state["response"]

    monkeypatch.setattr(geoapify_client.requests, "get", fake_get)
    return calls, state


def feature_collection(time_s, distance_m=1000.0):
    return {"type": "FeatureCollection", "features": [{"properties": {"time": time_s, "distance": distance_m}}]}


def test_request_shape(captured):
    calls, state = captured
    state["response"] = FakeResponse(feature_collection(300.0))
    client = GeoapifyClient(api_key="secret", base_url="https://routing.test/", timeout=2)

    client.compute_route((37.78, -122.41), (37.77, -122.42))

    [call] = calls
    assert call["url"] == "https://routing.test/v1/routing"
    assert call["params"] == {"waypoints": "37.78,-122.41|37.77,-122.42", "mode": "drive", "apiKey": "secret"}
    assert call["timeout"] == 2


def test_route_is_normalized(captured):
    _, state = captured
    state["response"] = FakeResponse(feature_collection(300.0, 2500.0))

    route = GeoapifyClient(api_key="k").compute_route((0, 0), (1, 1))

    assert route == {"time": 300.0, "distance": 2500.0}


def test_empty_feature_list_is_no_result(captured):
    _, state = captured
    state["response"] = FakeResponse({"type": "FeatureCollection", "features": []})

    assert GeoapifyClient(api_key="k").compute_route((0, 0), (1, 1)) is None


def test_http_error_body_is_no_result(captured):
    _, state = captured
    state["response"] = FakeResponse({"statusCode": 401, "error": "Unauthorized"}, status_code=401)

    assert GeoapifyClient(api_key="bad").compute_route((0, 0), (1, 1)) is None


@pytest.mark.parametrize("payload", [[], [{"features": []}], None, "ok", 42])
def test_non_object_json_is_no_result(captured, payload):
    _, state = captured
    state["response"] = FakeResponse(payload)

    assert GeoapifyClient(api_key="k").compute_route((0, 0), (1, 1)) is None


def test_non_json_body_raises(captured):
    _, state = captured
    state["response"] = FakeResponse(status_code=502, body_is_json=False)

    with pytest.raises(RoutingError):
        GeoapifyClient(api_key="k").compute_route((0, 0), (1, 1))


def test_transport_errors_propagate(monkeypatch):
    def fake_get(url, params=None, timeout=None):
        raise requests.Timeout("read timed out")

    monkeypatch.setattr(geoapify_client.requests, "get", fake_get)

    with pytest.raises(requests.Timeout):
        GeoapifyClient(api_key="k").compute_route((0, 0), (1, 1))


@pytest.mark.parametrize("payload", [
    {},
    {"features": None},
    {"features": "nope"},
    {"features": [{}]},
    {"features": [{"properties": {}}]},
    {"features": [{"properties": {"time": -5}}]},
    {"features": [{"properties": {"time": "300"}}]},
    {"features": [{"properties": {"time": float("nan")}}]},
    {"features": [{"properties": {"time": True}}]},
])
def test_unusable_features_are_no_result(payload):
    assert parse_route_feature(payload) is None


def test_zero_time_is_kept():
    assert parse_route_feature(feature_collection(0)) == {"time": 0.0, "distance": 1000.0}


def test_missing_distance_defaults_to_zero():
    assert parse_route_feature({"features": [{"properties": {"time": 12}}]}) == {"time": 12.0, "distance": 0.0}


def test_defaults_come_from_environment(monkeypatch):
    monkeypatch.setattr(geoapify_client, "API_KEY", "from-env")
    monkeypatch.setattr(geoapify_client, "BASE_URL", "https://env.test")
    monkeypatch.setattr(geoapify_client, "TIMEOUT_SECONDS", 9.0)

    client = GeoapifyClient()

    assert client.api_key == "from-env"
    assert client.base_url == "https://env.test"
    assert client.timeout == 9.0
    assert client.mode == "drive"
