"""Route source port."""

from typing import Protocol

from rail_planner.domain.models.route import Route


class RouteSource(Protocol):
    """Port for reading the scheduled route network from an external feed."""

    def load_routes(self) -> list[Route]:
        """Load every valid route, in feed order.

        Rows that cannot form a valid route are skipped by the source; the
        returned routes satisfy the non-empty city and time invariants.
        """
        ...
