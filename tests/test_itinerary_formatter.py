"""Tests for itinerary formatting."""

from datetime import datetime

import pytest

from rail_planner.adapters.formatters import ItineraryFormatter
from rail_planner.application.services import to_itinerary
from rail_planner.domain.models import (
    BookingConfirmation,
    Price,
    ReservationRecord,
    Route,
    SearchResult,
    TripDetails,
    TripRecord,
    TripSegmentRecord,
    Weekday,
)

PARIS_LYON = Route(
    route_id="R1",
    departure_city="Paris",
    arrival_city="Lyon",
    departure_time="08:00",
    arrival_time="10:00",
    train_type="TGV",
    days=frozenset({Weekday.SUN, Weekday.MON}),
    price=Price(80.0, 50.0),
)
LYON_MILAN = Route(
    route_id="R2",
    departure_city="Lyon",
    arrival_city="Milan",
    departure_time="10:30",
    arrival_time="14:00",
    price=Price(30.0, 20.0),
)


@pytest.fixture
def formatter() -> ItineraryFormatter:
    """Create an itinerary formatter."""
    return ItineraryFormatter()


@pytest.mark.parametrize(
    ("minutes", "expected"),
    [(360, "6h"), (160, "2h40m"), (45, "45m"), (0, "0m"), (-5, "0m")],
)
def test_format_duration(formatter: ItineraryFormatter, minutes: int, expected: str) -> None:
    """Given a number of minutes, when formatting, then compact hours and minutes are returned."""
    assert formatter.format_duration(minutes) == expected


def test_route_to_dict_uses_front_end_keys(formatter: ItineraryFormatter) -> None:
    """Given a route, when formatting, then camelCase keys and ordered days are used."""
    data = formatter.route_to_dict(PARIS_LYON)

    assert data["routeId"] == "R1"
    assert data["from"] == "Paris"
    assert data["arriveCity"] == "Lyon"
    assert data["departTime"] == "08:00"
    assert data["days"] == ["MON", "SUN"]
    assert data["price"] == {"first": 80.0, "second": 50.0}


def test_search_result_to_dict(formatter: ItineraryFormatter) -> None:
    """Given a one-transfer result, when formatting, then itineraries and transfer count are included."""
    result = SearchResult(itineraries=(to_itinerary((PARIS_LYON, LYON_MILAN)),), transfers=1)

    data = formatter.search_result_to_dict(result)

    assert data["transfers"] == 1
    itinerary = data["itineraries"][0]
    assert itinerary["id"] == "R1-R2"
    assert itinerary["totalDuration"] == "6h"
    assert itinerary["transferTimes"] == [30]


def test_trip_details_to_dict(formatter: ItineraryFormatter) -> None:
    """Given stored trip details, when formatting, then segments carry order and layover."""
    details = TripDetails(
        trip=TripRecord(
            trip_id=7,
            connection_summary="Paris → Lyon → Milan",
            total_duration_minutes=360,
            first_class_total=110.0,
            second_class_total=70.0,
            created_at=datetime(2026, 5, 1, 9, 30),
        ),
        segments=(
            TripSegmentRecord(segment_order=0, layover_after_minutes=30, route=PARIS_LYON),
            TripSegmentRecord(segment_order=1, layover_after_minutes=0, route=LYON_MILAN),
        ),
        reservations=(ReservationRecord(1, "Marie", "Dupont", 34, "AB1", ticket_id=3),),
    )

    data = formatter.trip_details_to_dict(details)

    assert data["tripId"] == 7
    assert data["createdAt"] == "2026-05-01T09:30:00"
    assert data["totalPrice"] == {"first": 110.0, "second": 70.0}
    assert [(s["segmentOrder"], s["layoverAfter"]) for s in data["segments"]] == [(0, 30), (1, 0)]
    assert data["reservations"][0]["ticketId"] == 3


def test_confirmation_to_dict(formatter: ItineraryFormatter) -> None:
    """Given a confirmation, when formatting, then trip id and reservations are included."""
    confirmation = BookingConfirmation(
        trip_id=3, reservations=(ReservationRecord(5, "Luc", "Dupont", 8, "AB2", ticket_id=9),)
    )

    data = formatter.confirmation_to_dict(confirmation)

    assert data == {
        "tripId": 3,
        "reservations": [
            {
                "reservationId": 5,
                "firstName": "Luc",
                "lastName": "Dupont",
                "age": 8,
                "idNumber": "AB2",
                "ticketId": 9,
            }
        ],
    }


def test_format_itinerary_lines(formatter: ItineraryFormatter) -> None:
    """Given a two-leg itinerary, when rendering for the terminal, then legs and transfer are listed."""
    lines = formatter.format_itinerary_lines(to_itinerary((PARIS_LYON, LYON_MILAN)))

    assert lines[0] == "Paris → Lyon → Milan  [6h, 1st 110.00 EUR / 2nd 70.00 EUR]"
    assert lines[1] == "    08:00 Paris -> 10:00 Lyon  R1 (TGV)"
    assert lines[2] == "      transfer 30 min"
    assert lines[3] == "    10:30 Lyon -> 14:00 Milan  R2"
