"""Itinerary search service port."""

from typing import Protocol

from rail_planner.domain.models.itinerary import SearchQuery, SearchResult


class ItinerarySearchService(Protocol):
    """Port for finding and ranking itineraries between two cities."""

    def search(self, query: SearchQuery) -> SearchResult:
        """Find itineraries for ``query``, preferring the fewest transfers.

        Direct connections are tried first, then one-stop, then two-stop; the
        first depth that yields anything wins.
        """
        ...

    def available_cities(self) -> list[str]:
        """Return the display names of all cities in the current network."""
        ...
