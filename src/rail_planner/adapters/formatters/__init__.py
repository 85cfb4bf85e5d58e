"""Formatters turning domain objects into presentation data."""

from rail_planner.adapters.formatters.itinerary_formatter import ItineraryFormatter

__all__ = ["ItineraryFormatter"]
