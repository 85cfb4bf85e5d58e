"""Tests for the SQLAlchemy repositories on in-memory SQLite."""

from collections.abc import Iterator

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError

from rail_planner.adapters.persistence import (
    Database,
    SqlAlchemyBookingRepository,
    SqlAlchemyRouteRepository,
)
from rail_planner.adapters.persistence.mappers import row_to_route
from rail_planner.adapters.persistence.orm_models import RouteRow, TicketRow, TripSegmentRow
from rail_planner.application.services import to_itinerary
from rail_planner.domain.models import Price, Route, Traveller, Weekday


def _route(route_id: str, from_city: str, to_city: str, depart: str, arrive: str) -> Route:
    return Route(
        route_id=route_id,
        departure_city=from_city,
        arrival_city=to_city,
        departure_time=depart,
        arrival_time=arrive,
        train_type="TGV",
        days=frozenset({Weekday.FRI, Weekday.MON}),
        price=Price(40.0, 25.0),
    )


PARIS_LYON = _route("R1", "Paris", "Lyon", "08:00", "10:00")
LYON_MILAN = _route("R2", "Lyon", "Milan", "10:30", "14:00")


def _stored_routes(database: Database) -> list[Route]:
    with database.session() as session:
        rows = session.scalars(select(RouteRow).order_by(RouteRow.route_id))
        return [row_to_route(row) for row in rows]


@pytest.fixture
def database() -> Iterator[Database]:
    """Create an in-memory database with the schema."""
    database = Database("sqlite://")
    database.create_schema()
    yield database
    database.dispose()


@pytest.fixture
def route_repository(database: Database) -> SqlAlchemyRouteRepository:
    """Create a route repository holding Paris-Lyon and Lyon-Milan."""
    repository = SqlAlchemyRouteRepository(database)
    repository.replace_all([PARIS_LYON, LYON_MILAN])
    return repository


class TestRouteRepository:
    """Tests for storing the route network."""

    def test_routes_round_trip_with_days_and_prices(
        self, database: Database, route_repository: SqlAlchemyRouteRepository
    ) -> None:
        """Given stored routes, when reading them back, then all fields survive."""
        assert _stored_routes(database) == [PARIS_LYON, LYON_MILAN]
        assert route_repository.count() == 2

    def test_replace_all_drops_unreferenced_routes(
        self, route_repository: SqlAlchemyRouteRepository
    ) -> None:
        """Given a new network without R2, when replacing, then R2 is removed."""
        route_repository.replace_all([PARIS_LYON])

        assert route_repository.count() == 1

    def test_replace_all_keeps_routes_referenced_by_trips(
        self, database: Database, route_repository: SqlAlchemyRouteRepository
    ) -> None:
        """Given a booked route, when replacing the network without it, then it is kept for trip history."""
        SqlAlchemyBookingRepository(database).save_booking(
            to_itinerary((PARIS_LYON,)), [Traveller("Marie", "Dupont", 34, "AB1")]
        )
        updated = Route(
            route_id="R1",
            departure_city="Paris",
            arrival_city="Lyon",
            departure_time="08:05",
            arrival_time="10:05",
        )

        route_repository.replace_all([updated])
        route_repository.replace_all([LYON_MILAN])

        stored = {r.route_id: r for r in _stored_routes(database)}
        assert set(stored) == {"R1", "R2"}
        assert stored["R1"].departure_time == "08:05"


class TestBookingRepository:
    """Tests for persisting bookings."""

    def test_save_booking_issues_one_ticket_per_traveller(
        self, database: Database, route_repository: SqlAlchemyRouteRepository
    ) -> None:
        """Given two travellers, when saving, then two reservations with tickets are stored."""
        repository = SqlAlchemyBookingRepository(database)
        travellers = [
            Traveller("Marie", "Dupont", 34, "AB1"),
            Traveller("Luc", "Dupont", 8, "AB2"),
        ]

        trip_id, reservations = repository.save_booking(
            to_itinerary((PARIS_LYON, LYON_MILAN)), travellers
        )

        assert trip_id > 0
        assert [r.first_name for r in reservations] == ["Marie", "Luc"]
        assert all(r.ticket_id is not None for r in reservations)
        with database.session() as session:
            assert session.scalar(select(func.count()).select_from(TicketRow)) == 2

    def test_segments_keep_order_and_layovers(
        self, database: Database, route_repository: SqlAlchemyRouteRepository
    ) -> None:
        """Given a two-leg trip, when reading segments, then order and layover are kept."""
        repository = SqlAlchemyBookingRepository(database)
        trip_id, _ = repository.save_booking(
            to_itinerary((PARIS_LYON, LYON_MILAN)), [Traveller("Marie", "Dupont", 34, "AB1")]
        )

        segments = repository.trip_segments(trip_id)

        assert [(s.segment_order, s.route.route_id) for s in segments] == [(0, "R1"), (1, "R2")]
        assert [s.layover_after_minutes for s in segments] == [30, 0]

    def test_find_trips_is_case_insensitive_and_newest_first(
        self, database: Database, route_repository: SqlAlchemyRouteRepository
    ) -> None:
        """Given two trips for a passenger, when searching in other case, then both are found newest first."""
        repository = SqlAlchemyBookingRepository(database)
        first_id, _ = repository.save_booking(
            to_itinerary((PARIS_LYON,)), [Traveller("Marie", "Dupont", 34, "ab1")]
        )
        second_id, _ = repository.save_booking(
            to_itinerary((LYON_MILAN,)), [Traveller("Marie", "Dupont", 34, "AB1")]
        )

        trips = repository.find_trips("DUPONT", "Ab1")

        assert [t.trip_id for t in trips] == [second_id, first_id]
        assert trips[0].connection_summary == "Lyon → Milan"
        assert trips[0].second_class_total == 25.0

    def test_find_trips_ignores_other_passengers(
        self, database: Database, route_repository: SqlAlchemyRouteRepository
    ) -> None:
        """Given a trip for another passenger, when searching, then nothing is returned."""
        repository = SqlAlchemyBookingRepository(database)
        repository.save_booking(to_itinerary((PARIS_LYON,)), [Traveller("Marie", "Dupont", 34, "AB1")])

        assert repository.find_trips("Dupont", "ZZ9") == []

    def test_segments_require_stored_routes(self, database: Database) -> None:
        """Given no stored routes, when saving a booking, then the foreign key is enforced."""
        repository = SqlAlchemyBookingRepository(database)

        with pytest.raises(IntegrityError):
            repository.save_booking(
                to_itinerary((PARIS_LYON,)), [Traveller("Marie", "Dupont", 34, "AB1")]
            )

        with database.session() as session:
            assert session.scalar(select(func.count()).select_from(TripSegmentRow)) == 0

    def test_find_trips_matches_non_ascii_names_as_stored(
        self, database: Database, route_repository: SqlAlchemyRouteRepository
    ) -> None:
        """Given a passenger name with an accented capital, when searching with the stored spelling, then the trip is found."""
        repository = SqlAlchemyBookingRepository(database)
        trip_id, _ = repository.save_booking(
            to_itinerary((PARIS_LYON,)), [Traveller("Ana", "DUPRÉ", 30, "X1")]
        )

        assert [t.trip_id for t in repository.find_trips("DUPRÉ", "X1")] == [trip_id]
        assert [t.trip_id for t in repository.find_trips("dupRÉ", "x1")] == [trip_id]
