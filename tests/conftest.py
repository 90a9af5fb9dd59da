import pytest

from drivers.markers import JitterGenerator, generate_markers
from drivers.models import Driver


class MockRouting:
    """
    Scripted routing client.

    `to_rider` answers driver -> rider legs, `to_destination` answers
    rider -> destination legs. Each is either a time in seconds, None
    (provider has no route), or an exception instance to raise.
    Per-driver overrides are keyed by the driver's (lat, lon).
    """
    def __init__(self, to_rider=300.0, to_destination=600.0, rider=None, overrides=None, api_key="test-key"):
        self.api_key = api_key
        self.to_rider = to_rider
        self.to_destination = to_destination
        self.rider = rider
        self.overrides = overrides or {}
        self.calls = []

    def compute_route(self, origin, destination):
        self.calls.append((origin, destination))
        is_destination_leg = self.rider is not None and origin == self.rider

        if is_destination_leg:
            answer = self.to_destination
        else:
            answer = self.overrides.get(origin, self.to_rider)

        if isinstance(answer, Exception):
            raise answer
        if answer is None:
            return None
        return {"time": float(answer), "distance": 0.0}


class EmptyRouting:
    """Provider that is reachable but never has a route."""
    api_key = "test-key"

    def compute_route(self, origin, destination):
        return None


class BrokenRouting:
    """Provider whose transport always fails."""
    api_key = "test-key"

    def __init__(self, error=None):
        self.error = error or ConnectionError("connection reset by peer")

    def compute_route(self, origin, destination):
        raise self.error


@pytest.fixture
def rider():
    # San Francisco
    return (37.7749, -122.4194)


@pytest.fixture
def destination():
    # San Jose
    return (37.3382, -121.8863)


@pytest.fixture
def catalog():
    return [
        Driver(1, "James", "Wilson", car_seats=4, rating=4.8),
        Driver(2, "David", "Brown", car_seats=5, rating=4.6),
        Driver(3, "Michael", "Johnson", car_seats=4, rating=4.7),
        Driver(4, "Sarah", "Moyo", car_seats=6, rating=4.9),
    ]


@pytest.fixture
def markers(catalog, rider):
    return generate_markers(catalog, rider, JitterGenerator(seed=7))
