"""Application services (use cases) for itinerary search and booking."""

from rail_planner.application.services.booking_service import BookingService
from rail_planner.application.services.connection_search import ConnectionSearch, LayoverPolicy
from rail_planner.application.services.itinerary_aggregator import sort_itineraries, to_itinerary
from rail_planner.application.services.itinerary_search_service import ItinerarySearchService
from rail_planner.application.services.route_catalog import RouteCatalog, RouteSnapshot
from rail_planner.application.services.route_index import RouteIndex
from rail_planner.application.services.route_loading_service import RouteLoadingService

__all__ = [
    "BookingService",
    "ConnectionSearch",
    "ItinerarySearchService",
    "LayoverPolicy",
    "RouteCatalog",
    "RouteIndex",
    "RouteLoadingService",
    "RouteSnapshot",
    "sort_itineraries",
    "to_itinerary",
]
