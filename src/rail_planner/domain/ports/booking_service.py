"""Booking service port."""

from typing import Protocol

from rail_planner.domain.models.booking import BookingConfirmation, TripDetails
from rail_planner.domain.models.traveller import Traveller


class BookingService(Protocol):
    """Port for booking itineraries and looking up a passenger's trips."""

    def book(self, route_ids: list[str], travellers: list[Traveller]) -> BookingConfirmation:
        """Book the itinerary formed by ``route_ids`` for ``travellers``.

        Raises:
            BookingValidationError: If the connection or traveller list is invalid.
        """
        ...

    def trips_for_passenger(self, last_name: str, id_number: str) -> list[TripDetails]:
        """Return the passenger's trips with segments and reservations.

        Raises:
            BookingValidationError: If either argument is blank.
        """
        ...
