"""Tests for the city-keyed route index."""

from rail_planner.application.services import RouteIndex
from rail_planner.domain.models import Route


def _route(route_id: str, from_city: str, to_city: str) -> Route:
    return Route(
        route_id=route_id,
        departure_city=from_city,
        arrival_city=to_city,
        departure_time="08:00",
        arrival_time="10:00",
    )


def _index() -> RouteIndex:
    return RouteIndex.build(
        [
            _route("R1", "Paris", "Lyon"),
            _route("R2", "Parma", "Bologna"),
            _route("R3", "Zürich", "Milan"),
            _route("R4", "paris", "Brussels"),
        ]
    )


def test_exact_match_ignores_case_and_diacritics() -> None:
    """Given differently cased and accented queries, when looking up, then the exact bucket is used."""
    index = _index()

    assert [r.route_id for r in index.departures_from("PARIS")] == ["R1", "R4"]
    assert [r.route_id for r in index.departures_from("zurich")] == ["R3"]


def test_substring_fallback_only_when_no_exact_match() -> None:
    """Given a partial name, when looking up, then every departure city containing it matches."""
    index = _index()

    assert [r.route_id for r in index.departures_from("par")] == ["R1", "R2", "R4"]


def test_blank_query_matches_nothing() -> None:
    """Given a blank city, when looking up, then no routes are returned."""
    index = _index()

    assert index.departures_from("  ") == ()
    assert index.lookup("") == ()


def test_unknown_city_matches_nothing() -> None:
    """Given a city not in the network, when looking up, then no routes are returned."""
    assert _index().departures_from("Vienna") == ()


def test_cities_are_distinct_and_sorted() -> None:
    """Given routes sharing cities, when listing cities, then each appears once, sorted."""
    assert _index().cities() == ["Bologna", "Brussels", "Lyon", "Milan", "Paris", "Parma", "Zürich"]


def test_length_counts_all_routes() -> None:
    """Given four routes, when measuring the index, then its length is four."""
    assert len(_index()) == 4
