"""Booking use cases."""

import logging

from rail_planner.application.services.itinerary_aggregator import to_itinerary
from rail_planner.application.services.route_catalog import RouteCatalog
from rail_planner.domain.errors import BookingValidationError
from rail_planner.domain.models.booking import BookingConfirmation, TripDetails
from rail_planner.domain.models.route import Route
from rail_planner.domain.models.traveller import Traveller
from rail_planner.domain.ports.booking_repository import BookingRepository

logger = logging.getLogger(__name__)

MAX_SEGMENTS = 3


class BookingService:
    """Books itineraries from the current snapshot and looks up passenger trips."""

    def __init__(self, catalog: RouteCatalog, booking_repository: BookingRepository) -> None:
        self._catalog = catalog
        self._booking_repository = booking_repository

    def book(self, route_ids: list[str], travellers: list[Traveller]) -> BookingConfirmation:
        """Book the itinerary formed by ``route_ids`` for ``travellers``.

        Totals are recomputed from the stored schedule rather than taken from
        the client.

        Raises:
            BookingValidationError: If the connection or traveller list is invalid.
        """
        segments = self._resolve_segments(route_ids)
        if not travellers:
            raise BookingValidationError("At least one traveller is required")
        for position, traveller in enumerate(travellers, start=1):
            self._validate_traveller(position, traveller)

        itinerary = to_itinerary(tuple(segments))
        trip_id, reservations = self._booking_repository.save_booking(itinerary, list(travellers))
        logger.info(
            f"Booked trip {trip_id} ({itinerary.connection_summary}) "
            f"for {len(reservations)} traveller(s)"
        )
        return BookingConfirmation(trip_id=trip_id, reservations=tuple(reservations))

    def trips_for_passenger(self, last_name: str, id_number: str) -> list[TripDetails]:
        """Return the passenger's trips, newest first, with segments and reservations.

        Raises:
            BookingValidationError: If either argument is blank.
        """
        if not (last_name or "").strip() or not (id_number or "").strip():
            raise BookingValidationError("Both last name and ID number are required")

        trips = self._booking_repository.find_trips(last_name.strip(), id_number.strip())
        return [
            TripDetails(
                trip=trip,
                segments=tuple(self._booking_repository.trip_segments(trip.trip_id)),
                reservations=tuple(self._booking_repository.trip_reservations(trip.trip_id)),
            )
            for trip in trips
        ]

    def _resolve_segments(self, route_ids: list[str]) -> list[Route]:
        if not route_ids:
            raise BookingValidationError("Connection has no segments")
        if len(route_ids) > MAX_SEGMENTS:
            raise BookingValidationError(
                f"Connection has {len(route_ids)} segments, at most {MAX_SEGMENTS} are supported"
            )

        snapshot = self._catalog.snapshot()
        segments: list[Route] = []
        unknown: list[str] = []
        for route_id in route_ids:
            route = snapshot.route_by_id(route_id)
            if route is None:
                unknown.append(route_id)
            else:
                segments.append(route)
        if unknown:
            raise BookingValidationError(f"Unknown route id(s): {', '.join(unknown)}")
        return segments

    @staticmethod
    def _validate_traveller(position: int, traveller: Traveller) -> None:
        missing = [
            label
            for label, value in (
                ("first name", traveller.first_name),
                ("last name", traveller.last_name),
                ("ID number", traveller.id_number),
            )
            if not (value or "").strip()
        ]
        if missing:
            raise BookingValidationError(f"Traveller {position} is missing {', '.join(missing)}")
        if traveller.age < 0:
            raise BookingValidationError(f"Traveller {position} has a negative age")
