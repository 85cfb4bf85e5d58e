"""Domain layer - core business logic and models."""

from rail_planner.domain.models import (
    Itinerary,
    Price,
    Route,
    SearchQuery,
    SearchResult,
    SortKey,
    Traveller,
    Weekday,
)
from rail_planner.domain.ports import (
    BookingRepository,
    BookingService,
    DisplayAdapter,
    ItinerarySearchService,
    RouteRepository,
    RouteSource,
)

__all__ = [
    "BookingRepository",
    "BookingService",
    "DisplayAdapter",
    "Itinerary",
    "ItinerarySearchService",
    "Price",
    "Route",
    "RouteRepository",
    "RouteSource",
    "SearchQuery",
    "SearchResult",
    "SortKey",
    "Traveller",
    "Weekday",
]
