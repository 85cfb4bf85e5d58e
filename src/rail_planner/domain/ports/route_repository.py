"""Route repository port."""

from typing import Protocol

from rail_planner.domain.models.route import Route


class RouteRepository(Protocol):
    """Port for persisting the route network."""

    def replace_all(self, routes: list[Route]) -> None:
        """Replace every stored route with ``routes`` in a single transaction."""
        ...

    def count(self) -> int:
        """Return the number of stored routes."""
        ...
