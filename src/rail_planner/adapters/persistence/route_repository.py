"""SQLAlchemy-backed route repository."""

import logging

from sqlalchemy import delete, func, select

from rail_planner.adapters.persistence.database import Database
from rail_planner.adapters.persistence.mappers import route_to_row
from rail_planner.adapters.persistence.orm_models import RouteRow, TripSegmentRow
from rail_planner.domain.models.route import Route

logger = logging.getLogger(__name__)


class SqlAlchemyRouteRepository:
    """Stores the route network in the ``routes`` table."""

    def __init__(self, database: Database) -> None:
        self._database = database

    def replace_all(self, routes: list[Route]) -> None:
        """Replace the stored network with ``routes`` in one transaction.

        Routes that booked trips still reference are kept so trip history
        stays readable; their columns are refreshed if the route is in
        ``routes``.
        """
        with self._database.session() as session, session.begin():
            referenced = select(TripSegmentRow.route_id)
            result = session.execute(delete(RouteRow).where(RouteRow.route_id.not_in(referenced)))
            kept_ids = set(session.scalars(select(RouteRow.route_id)))
            for route in routes:
                row = route_to_row(route)
                if route.route_id in kept_ids:
                    session.merge(row)
                else:
                    session.add(row)
            logger.debug(
                f"Replaced routes: removed {result.rowcount}, kept {len(kept_ids)} referenced, "
                f"wrote {len(routes)}"
            )

    def count(self) -> int:
        """Return the number of stored routes."""
        with self._database.session() as session:
            return session.scalar(select(func.count()).select_from(RouteRow)) or 0
