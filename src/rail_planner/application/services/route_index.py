"""City-keyed index over the route network."""

from collections.abc import Iterable

from rail_planner.domain.models.route import Route
from rail_planner.domain.text import normalize_key


class RouteIndex:
    """Routes grouped by normalized departure city, plus the flat collection.

    Instances are immutable once built; a reload builds a new index.
    """

    def __init__(self, buckets: dict[str, tuple[Route, ...]], routes: tuple[Route, ...]) -> None:
        self._buckets = buckets
        self._routes = routes

    @classmethod
    def build(cls, routes: Iterable[Route]) -> "RouteIndex":
        """Group ``routes`` by departure city, keeping feed order within each city."""
        all_routes = tuple(routes)
        grouped: dict[str, list[Route]] = {}
        for route in all_routes:
            grouped.setdefault(normalize_key(route.departure_city), []).append(route)
        buckets = {key: tuple(bucket) for key, bucket in grouped.items()}
        return cls(buckets, all_routes)

    @property
    def routes(self) -> tuple[Route, ...]:
        return self._routes

    def __len__(self) -> int:
        return len(self._routes)

    def lookup(self, city_key: str) -> tuple[Route, ...]:
        """Return the routes departing the exact normalized city key, if any."""
        if not city_key:
            return ()
        return self._buckets.get(city_key, ())

    def departures_from(self, city: str) -> tuple[Route, ...]:
        """Return routes departing ``city`` using exact-then-substring matching.

        1. The exact bucket for the normalized city name.
        2. Only if that is empty: every route whose normalized departure city
           contains the normalized query, in feed order.

        The substring step is deliberately permissive: ``par`` matches both
        Paris and Parma, and ambiguous matches are not reported.
        """
        key = normalize_key(city)
        if not key:
            return ()
        exact = self.lookup(key)
        if exact:
            return exact
        return tuple(
            route for route in self._routes if key in normalize_key(route.departure_city)
        )

    def cities(self) -> list[str]:
        """Distinct departure and arrival city names, sorted case-insensitively."""
        names: dict[str, str] = {}
        for route in self._routes:
            for name in (route.departure_city, route.arrival_city):
                names.setdefault(normalize_key(name), name.strip())
        return sorted(names.values(), key=normalize_key)
