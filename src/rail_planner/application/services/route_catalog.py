"""Process-wide holder of the current route network snapshot."""

import logging
import threading
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import UTC, datetime

from rail_planner.application.services.route_index import RouteIndex
from rail_planner.domain.models.route import Route

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RouteSnapshot:
    """Immutable route collection and its index, published as one unit."""

    index: RouteIndex
    loaded_at: datetime | None = None

    @property
    def routes(self) -> tuple[Route, ...]:
        return self.index.routes

    def route_by_id(self, route_id: str) -> Route | None:
        """Return the first route with ``route_id``, or None."""
        for route in self.index.routes:
            if route.route_id == route_id:
                return route
        return None


class RouteCatalog:
    """Publishes route snapshots atomically.

    Readers call :meth:`snapshot` once per request and work on that object;
    a concurrent :meth:`publish` never alters a snapshot already handed out.
    Only publishers take the lock.
    """

    def __init__(self) -> None:
        self._snapshot = RouteSnapshot(index=RouteIndex.build(()))
        self._publish_lock = threading.Lock()

    def snapshot(self) -> RouteSnapshot:
        """Return the currently published snapshot."""
        return self._snapshot

    def publish(self, routes: Iterable[Route]) -> RouteSnapshot:
        """Build a complete snapshot from ``routes`` and swap it in."""
        with self._publish_lock:
            snapshot = RouteSnapshot(index=RouteIndex.build(routes), loaded_at=datetime.now(UTC))
            self._snapshot = snapshot
        logger.info(f"Published route snapshot with {len(snapshot.index)} route(s)")
        return snapshot
