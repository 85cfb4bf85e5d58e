"""Booking repository port."""

from typing import Protocol

from rail_planner.domain.models.booking import (
    ReservationRecord,
    TripRecord,
    TripSegmentRecord,
)
from rail_planner.domain.models.itinerary import Itinerary
from rail_planner.domain.models.traveller import Traveller


class BookingRepository(Protocol):
    """Port for persisting trips, reservations and tickets."""

    def save_booking(
        self, itinerary: Itinerary, travellers: list[Traveller]
    ) -> tuple[int, list[ReservationRecord]]:
        """Persist a trip with its segments, one reservation and ticket per traveller.

        Args:
            itinerary: The itinerary being booked.
            travellers: Passengers to reserve, at least one.

        Returns:
            The new trip id and the created reservations in traveller order.
        """
        ...

    def find_trips(self, last_name: str, id_number: str) -> list[TripRecord]:
        """Return trips with a reservation matching the passenger, newest first.

        Matching on both fields is case-insensitive.
        """
        ...

    def trip_segments(self, trip_id: int) -> list[TripSegmentRecord]:
        """Return the segments of a trip in travel order."""
        ...

    def trip_reservations(self, trip_id: int) -> list[ReservationRecord]:
        """Return the reservations of a trip with their ticket ids."""
        ...
