"""Web adapter serving the itinerary API."""

from rail_planner.adapters.web.starlette_app import StarletteWebAdapter

__all__ = ["StarletteWebAdapter"]
