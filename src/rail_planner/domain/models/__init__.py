"""Domain models for rail itinerary planning."""

from rail_planner.domain.models.booking import (
    BookingConfirmation,
    ReservationRecord,
    TripDetails,
    TripRecord,
    TripSegmentRecord,
)
from rail_planner.domain.models.itinerary import (
    ITINERARY_ID_SEPARATOR,
    Itinerary,
    SearchQuery,
    SearchResult,
    SegmentChain,
    SortKey,
)
from rail_planner.domain.models.price import Price
from rail_planner.domain.models.route import Route
from rail_planner.domain.models.traveller import Traveller
from rail_planner.domain.models.weekday import Weekday, calendar_order

__all__ = [
    "ITINERARY_ID_SEPARATOR",
    "BookingConfirmation",
    "Itinerary",
    "Price",
    "ReservationRecord",
    "Route",
    "SearchQuery",
    "SearchResult",
    "SegmentChain",
    "SortKey",
    "Traveller",
    "TripDetails",
    "TripRecord",
    "TripSegmentRecord",
    "Weekday",
    "calendar_order",
]
