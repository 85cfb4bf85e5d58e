"""Ports (interfaces) for the ports-and-adapters architecture."""

from rail_planner.domain.ports.booking_repository import BookingRepository
from rail_planner.domain.ports.booking_service import BookingService
from rail_planner.domain.ports.display_adapter import DisplayAdapter
from rail_planner.domain.ports.itinerary_search_service import ItinerarySearchService
from rail_planner.domain.ports.route_loading_service import RouteLoadingService
from rail_planner.domain.ports.route_repository import RouteRepository
from rail_planner.domain.ports.route_source import RouteSource

__all__ = [
    "BookingRepository",
    "BookingService",
    "DisplayAdapter",
    "ItinerarySearchService",
    "RouteLoadingService",
    "RouteRepository",
    "RouteSource",
]
