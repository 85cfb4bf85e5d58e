"""Loading the route network into the search catalog."""

import logging

from rail_planner.application.services.route_catalog import RouteCatalog
from rail_planner.domain.ports.route_repository import RouteRepository
from rail_planner.domain.ports.route_source import RouteSource

logger = logging.getLogger(__name__)


class RouteLoadingService:
    """Reads routes from a source, optionally stores them, then publishes them."""

    def __init__(
        self,
        source: RouteSource,
        catalog: RouteCatalog,
        route_repository: RouteRepository | None = None,
    ) -> None:
        self._source = source
        self._catalog = catalog
        self._route_repository = route_repository

    def reload(self) -> int:
        """Read the network again and publish it atomically.

        The repository is updated before publishing so that bookings made
        against the new snapshot reference stored routes.
        """
        routes = self._source.load_routes()
        logger.info(f"Loaded {len(routes)} route(s) from source")
        if self._route_repository is not None:
            self._route_repository.replace_all(routes)
            logger.info(f"Stored {self._route_repository.count()} route(s) in the database")
        snapshot = self._catalog.publish(routes)
        return len(snapshot.index)
