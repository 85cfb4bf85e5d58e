"""Itinerary search use case."""

import logging
from collections.abc import Callable

from rail_planner.application.services.connection_search import ConnectionSearch, LayoverPolicy
from rail_planner.application.services.itinerary_aggregator import sort_itineraries, to_itinerary
from rail_planner.application.services.route_catalog import RouteCatalog
from rail_planner.domain.models.itinerary import SearchQuery, SearchResult, SegmentChain
from rail_planner.domain.models.weekday import Weekday

logger = logging.getLogger(__name__)

SearchDepth = Callable[[ConnectionSearch, str, str, Weekday | None], list[SegmentChain]]

# Fewest transfers first; a deeper search runs only when the shallower one found nothing.
_DEPTHS: tuple[tuple[int, SearchDepth], ...] = (
    (0, ConnectionSearch.direct),
    (1, ConnectionSearch.one_stop),
    (2, ConnectionSearch.two_stop),
)


class ItinerarySearchService:
    """Searches the current route snapshot and ranks the resulting itineraries."""

    def __init__(
        self,
        catalog: RouteCatalog,
        policy: LayoverPolicy | None = None,
        default_sort: str = "duration",
    ) -> None:
        """Initialize with the route catalog and the transfer rules to apply."""
        self._catalog = catalog
        self._policy = policy or LayoverPolicy()
        self._default_sort = default_sort

    def search(self, query: SearchQuery) -> SearchResult:
        """Find itineraries for ``query``, preferring the fewest transfers."""
        day: Weekday | None = None
        if query.day and query.day.strip():
            day = Weekday.parse(query.day)
            if day is None:
                logger.warning(f"Unrecognized day filter '{query.day}', no route can match it")
                return SearchResult()

        snapshot = self._catalog.snapshot()
        search = ConnectionSearch(snapshot.index, self._policy)

        for transfers, depth in _DEPTHS:
            chains = depth(search, query.from_city, query.to_city, day)
            logger.debug(
                f"Search '{query.from_city}' -> '{query.to_city}' with {transfers} transfer(s): "
                f"{len(chains)} chain(s)"
            )
            if chains:
                itineraries = [to_itinerary(chain) for chain in chains]
                ranked = sort_itineraries(itineraries, query.sort or self._default_sort)
                return SearchResult(itineraries=tuple(ranked), transfers=transfers)

        logger.info(f"No itineraries found from '{query.from_city}' to '{query.to_city}'")
        return SearchResult()

    def available_cities(self) -> list[str]:
        """Return the display names of all cities in the current network."""
        return self._catalog.snapshot().index.cities()
