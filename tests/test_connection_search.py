"""Tests for bounded-depth connection search and transfer rules."""

import pytest

from rail_planner.application.services import ConnectionSearch, LayoverPolicy, RouteIndex
from rail_planner.application.services.time_arithmetic import transfer_gap
from rail_planner.domain.models import Price, Route, Weekday

EVERY_DAY = frozenset(Weekday.all_days())


def _route(
    route_id: str,
    from_city: str,
    to_city: str,
    depart: str,
    arrive: str,
    days: frozenset[Weekday] = EVERY_DAY,
    price: Price | None = None,
) -> Route:
    return Route(
        route_id=route_id,
        departure_city=from_city,
        arrival_city=to_city,
        departure_time=depart,
        arrival_time=arrive,
        days=days,
        price=price or Price.zero(),
    )


def _search(*routes: Route, policy: LayoverPolicy | None = None) -> ConnectionSearch:
    return ConnectionSearch(RouteIndex.build(routes), policy)


class TestLayoverPolicy:
    """Tests for transfer feasibility."""

    @pytest.mark.parametrize(
        ("arrive", "depart", "allowed"),
        [
            ("10:00", "10:09", False),  # below minimum
            ("10:00", "10:10", True),  # exactly the minimum
            ("10:00", "12:00", True),  # exactly the daytime maximum
            ("10:00", "12:01", False),  # above the daytime maximum
            ("23:00", "23:30", True),  # exactly the night maximum
            ("23:00", "23:31", False),  # above the night maximum
            ("05:50", "07:00", False),  # 05:xx is still night
            ("21:59", "23:30", True),  # 21:xx counts as daytime
            ("23:50", "00:10", True),  # wraps past midnight
        ],
    )
    def test_gap_limits(self, arrive: str, depart: str, allowed: bool) -> None:
        """Given an arrival and onward departure, when checking the transfer, then limits apply."""
        policy = LayoverPolicy()
        arriving = _route("A", "X", "Y", "08:00", arrive)
        leaving = _route("B", "Y", "Z", depart, "23:59")

        assert policy.allows(arriving, leaving) is allowed

    def test_custom_policy_changes_limits(self) -> None:
        """Given a stricter minimum transfer, when checking a short gap, then it is rejected."""
        policy = LayoverPolicy(min_transfer_minutes=20)
        arriving = _route("A", "X", "Y", "08:00", "10:00")
        leaving = _route("B", "Y", "Z", "10:15", "11:00")

        assert not policy.allows(arriving, leaving)


class TestDirect:
    """Tests for single-leg search."""

    def test_finds_direct_routes_in_feed_order(self) -> None:
        """Given two direct trains, when searching, then both are returned in feed order."""
        search = _search(
            _route("R1", "Paris", "Lyon", "08:00", "10:00"),
            _route("R2", "Paris", "Brussels", "09:00", "10:20"),
            _route("R3", "Paris", "Lyon", "12:00", "14:00"),
        )

        chains = search.direct("Paris", "Lyon")

        assert [chain[0].route_id for chain in chains] == ["R1", "R3"]

    def test_destination_matches_by_substring(self) -> None:
        """Given a partial destination, when searching, then arrival cities containing it match."""
        search = _search(_route("R1", "Paris", "Lyon Part-Dieu", "08:00", "10:00"))

        assert len(search.direct("paris", "lyon")) == 1

    def test_day_filter_excludes_routes_not_running(self) -> None:
        """Given a weekday-only route, when searching for Sunday, then nothing is found."""
        weekdays = frozenset({Weekday.MON, Weekday.TUE, Weekday.WED, Weekday.THU, Weekday.FRI})
        search = _search(_route("R1", "Paris", "Lyon", "08:00", "10:00", days=weekdays))

        assert search.direct("Paris", "Lyon", Weekday.SUN) == []
        assert len(search.direct("Paris", "Lyon", Weekday.MON)) == 1

    def test_blank_destination_finds_nothing(self) -> None:
        """Given an empty destination, when searching, then nothing is returned."""
        search = _search(_route("R1", "Paris", "Lyon", "08:00", "10:00"))

        assert search.direct("Paris", " ") == []


class TestOneStop:
    """Tests for two-leg search."""

    def test_paris_to_milan_via_lyon(self) -> None:
        """Given Paris-Lyon and Lyon-Milan with a 30 minute gap, when searching, then one chain is found."""
        search = _search(
            _route("R1", "Paris", "Lyon", "08:00", "10:00"),
            _route("R2", "Lyon", "Milan", "10:30", "14:00"),
        )

        chains = search.one_stop("Paris", "Milan")

        assert [[r.route_id for r in chain] for chain in chains] == [["R1", "R2"]]

    def test_infeasible_transfers_are_discarded(self) -> None:
        """Given onward trains too soon and too late, when searching, then none are used."""
        search = _search(
            _route("R1", "Paris", "Lyon", "08:00", "10:00"),
            _route("R2", "Lyon", "Milan", "10:05", "14:00"),
            _route("R3", "Lyon", "Milan", "13:00", "17:00"),
        )

        assert search.one_stop("Paris", "Milan") == []

    def test_every_leg_must_run_on_the_requested_day(self) -> None:
        """Given a second leg not running on Saturday, when searching Saturday, then nothing is found."""
        search = _search(
            _route("R1", "Paris", "Lyon", "08:00", "10:00"),
            _route("R2", "Lyon", "Milan", "10:30", "14:00", days=frozenset({Weekday.MON})),
        )

        assert search.one_stop("Paris", "Milan", Weekday.SAT) == []
        assert len(search.one_stop("Paris", "Milan", Weekday.MON)) == 1

    def test_night_transfer_past_midnight(self) -> None:
        """Given a night train arriving 02:20 and a 02:45 connection, when searching, then it connects."""
        search = _search(
            _route("N1", "Munich", "Zürich", "22:10", "02:20"),
            _route("E1", "Zürich", "Milan", "02:45", "06:05"),
        )

        assert len(search.one_stop("Munich", "Milan")) == 1


class TestTwoStop:
    """Tests for three-leg search."""

    def test_finds_chain_with_two_feasible_transfers(self) -> None:
        """Given three connecting legs, when searching, then the three-leg chain is found."""
        search = _search(
            _route("R1", "Paris", "Brussels", "07:15", "08:40"),
            _route("R2", "Brussels", "Amsterdam", "09:05", "11:00"),
            _route("R3", "Amsterdam", "Berlin", "11:45", "18:00"),
        )

        chains = search.two_stop("Paris", "Berlin")

        assert [[r.route_id for r in chain] for chain in chains] == [["R1", "R2", "R3"]]

    def test_all_returned_chains_are_feasible(self) -> None:
        """Given a mixed network, when searching, then every chain links cities and respects the policy."""
        policy = LayoverPolicy()
        search = _search(
            _route("R1", "Paris", "Brussels", "07:15", "08:40"),
            _route("R2", "Brussels", "Amsterdam", "09:05", "11:00"),
            _route("R3", "Brussels", "Amsterdam", "08:45", "10:40"),
            _route("R4", "Amsterdam", "Berlin", "11:45", "18:00"),
            _route("R5", "Amsterdam", "Berlin", "16:00", "22:00"),
            _route("R6", "Brussels", "Cologne", "09:30", "11:20"),
            _route("R7", "Cologne", "Berlin", "12:00", "16:30"),
        )

        chains = search.two_stop("Paris", "Berlin")

        assert chains
        for chain in chains:
            assert len(chain) == 3
            for previous, following in zip(chain, chain[1:]):
                assert previous.arrival_city == following.departure_city
                assert policy.min_transfer_minutes <= transfer_gap(previous, following)
                assert policy.allows(previous, following)
