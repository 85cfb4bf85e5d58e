"""Formatter for itineraries, routes and bookings.

Dictionaries use the camelCase keys the web front end expects.
"""

from typing import Any

from rail_planner.domain.models.booking import (
    BookingConfirmation,
    ReservationRecord,
    TripDetails,
    TripSegmentRecord,
)
from rail_planner.domain.models.itinerary import Itinerary, SearchResult
from rail_planner.domain.models.price import Price
from rail_planner.domain.models.route import Route
from rail_planner.domain.models.weekday import calendar_order


class ItineraryFormatter:
    """Formats search results and bookings for JSON responses and terminal output."""

    def format_duration(self, minutes: int) -> str:
        """Format minutes as compact hours and minutes (e.g., '6h', '2h40m', '45m')."""
        if minutes <= 0:
            return "0m"
        hours, rest = divmod(minutes, 60)
        if hours == 0:
            return f"{rest}m"
        if rest == 0:
            return f"{hours}h"
        return f"{hours}h{rest}m"

    def price_to_dict(self, price: Price) -> dict[str, float]:
        return {"first": price.first, "second": price.second}

    def route_to_dict(self, route: Route) -> dict[str, Any]:
        return {
            "routeId": route.route_id,
            "from": route.departure_city,
            "arriveCity": route.arrival_city,
            "departTime": route.departure_time,
            "arriveTime": route.arrival_time,
            "trainType": route.train_type,
            "days": [day.value for day in calendar_order(route.days)],
            "price": self.price_to_dict(route.price),
        }

    def itinerary_to_dict(self, itinerary: Itinerary) -> dict[str, Any]:
        return {
            "id": itinerary.id,
            "segments": [self.route_to_dict(route) for route in itinerary.segments],
            "connectionSummary": itinerary.connection_summary,
            "totalDurationMinutes": itinerary.total_duration_minutes,
            "totalDuration": self.format_duration(itinerary.total_duration_minutes),
            "totalPrice": self.price_to_dict(itinerary.total_price),
            "transferTimes": list(itinerary.transfer_times),
        }

    def search_result_to_dict(self, result: SearchResult) -> dict[str, Any]:
        return {
            "itineraries": [self.itinerary_to_dict(itinerary) for itinerary in result.itineraries],
            "transfers": result.transfers,
        }

    def reservation_to_dict(self, reservation: ReservationRecord) -> dict[str, Any]:
        return {
            "reservationId": reservation.reservation_id,
            "firstName": reservation.first_name,
            "lastName": reservation.last_name,
            "age": reservation.age,
            "idNumber": reservation.id_number,
            "ticketId": reservation.ticket_id,
        }

    def segment_to_dict(self, segment: TripSegmentRecord) -> dict[str, Any]:
        data = self.route_to_dict(segment.route)
        data["segmentOrder"] = segment.segment_order
        data["layoverAfter"] = segment.layover_after_minutes
        return data

    def confirmation_to_dict(self, confirmation: BookingConfirmation) -> dict[str, Any]:
        return {
            "tripId": confirmation.trip_id,
            "reservations": [self.reservation_to_dict(r) for r in confirmation.reservations],
        }

    def trip_details_to_dict(self, details: TripDetails) -> dict[str, Any]:
        trip = details.trip
        return {
            "tripId": trip.trip_id,
            "connectionSummary": trip.connection_summary,
            "totalDurationMinutes": trip.total_duration_minutes,
            "totalPrice": {"first": trip.first_class_total, "second": trip.second_class_total},
            "createdAt": trip.created_at.isoformat() if trip.created_at else None,
            "segments": [self.segment_to_dict(segment) for segment in details.segments],
            "reservations": [self.reservation_to_dict(r) for r in details.reservations],
        }

    def format_itinerary_lines(self, itinerary: Itinerary) -> list[str]:
        """Render an itinerary as indented lines for terminal output."""
        price = itinerary.total_price
        lines = [
            f"{itinerary.connection_summary}  "
            f"[{self.format_duration(itinerary.total_duration_minutes)}, "
            f"1st {price.first:.2f} EUR / 2nd {price.second:.2f} EUR]"
        ]
        for position, route in enumerate(itinerary.segments):
            train = f" ({route.train_type})" if route.train_type else ""
            lines.append(
                f"    {route.departure_time} {route.departure_city} -> "
                f"{route.arrival_time} {route.arrival_city}  {route.route_id}{train}"
            )
            if position < len(itinerary.transfer_times):
                lines.append(f"      transfer {itinerary.transfer_times[position]} min")
        return lines
