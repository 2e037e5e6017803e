"""Tests for endpoints.py: route resolution and invalid targets."""
import pytest

from trip_journal.endpoints import Endpoints, Route
from trip_journal.utils.errors import InvalidTarget


@pytest.fixture
def endpoints():
    return Endpoints("http://localhost:8000/")


# ── resolve ──────────────────────────────────────────────────────────

@pytest.mark.parametrize("route, item_id, expected", [
    (Route.REGISTER, None, "http://localhost:8000/register"),
    (Route.LOGIN, None, "http://localhost:8000/token"),
    (Route.TRIPS, None, "http://localhost:8000/trips"),
    (Route.TRIP, 7, "http://localhost:8000/trips/7"),
    (Route.EVENTS, None, "http://localhost:8000/events"),
    (Route.EVENT, 12, "http://localhost:8000/events/12"),
    (Route.MEDIA, None, "http://localhost:8000/media"),
    (Route.MEDIA_ITEM, 3, "http://localhost:8000/media/3"),
])
def test_resolve(endpoints, route, item_id, expected):
    assert endpoints.resolve(route, item_id) == expected


def test_base_without_trailing_slash():
    endpoints = Endpoints("https://journal.example.com/api")
    assert endpoints.base_url == "https://journal.example.com/api/"
    assert endpoints.resolve(Route.TRIP, 1) == "https://journal.example.com/api/trips/1"


def test_needs_id():
    assert Route.TRIP.needs_id is True
    assert Route.TRIPS.needs_id is False


# ── InvalidTarget ────────────────────────────────────────────────────

def test_missing_id_raises(endpoints):
    with pytest.raises(InvalidTarget, match="needs an integer id"):
        endpoints.resolve(Route.TRIP)


@pytest.mark.parametrize("route", [Route.TRIPS, Route.EVENTS, Route.MEDIA, Route.LOGIN])
def test_id_on_collection_route_raises(endpoints, route):
    with pytest.raises(InvalidTarget, match="takes no id"):
        endpoints.resolve(route, 7)


def test_string_id_raises(endpoints):
    with pytest.raises(InvalidTarget):
        endpoints.resolve(Route.EVENT, "1; DROP TABLE")


def test_bool_id_raises(endpoints):
    with pytest.raises(InvalidTarget):
        endpoints.resolve(Route.MEDIA_ITEM, True)


def test_relative_base_raises():
    with pytest.raises(InvalidTarget, match="absolute"):
        Endpoints("localhost-without-scheme").resolve(Route.TRIPS)


def test_non_http_scheme_raises():
    with pytest.raises(InvalidTarget):
        Endpoints("ftp://files.example.com/").resolve(Route.TRIPS)
