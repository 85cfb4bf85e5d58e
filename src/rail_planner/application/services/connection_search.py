"""Bounded-depth connection search over the route index."""

import logging
from dataclasses import dataclass

from rail_planner.application.services.route_index import RouteIndex
from rail_planner.application.services.time_arithmetic import time_to_minutes, transfer_gap
from rail_planner.domain.models.itinerary import SegmentChain
from rail_planner.domain.models.route import Route
from rail_planner.domain.models.weekday import Weekday
from rail_planner.domain.text import normalize_key

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LayoverPolicy:
    """Rules a transfer between two legs must satisfy.

    The gap must reach ``min_transfer_minutes``. Arriving between
    ``day_window_start_hour``:00 and ``day_window_end_hour``:59 allows a wait of
    up to ``max_day_layover_minutes``; arriving at night allows only
    ``max_night_layover_minutes``.
    """

    min_transfer_minutes: int = 10
    day_window_start_hour: int = 6
    day_window_end_hour: int = 21
    max_day_layover_minutes: int = 120
    max_night_layover_minutes: int = 30

    def is_day_arrival(self, arrival_time: str) -> bool:
        hour = time_to_minutes(arrival_time) // 60
        return self.day_window_start_hour <= hour <= self.day_window_end_hour

    def max_layover_after(self, arrival_time: str) -> int:
        if self.is_day_arrival(arrival_time):
            return self.max_day_layover_minutes
        return self.max_night_layover_minutes

    def allows(self, previous: Route, following: Route) -> bool:
        """Return True if ``following`` can be caught after arriving on ``previous``."""
        gap = transfer_gap(previous, following)
        if gap < self.min_transfer_minutes:
            return False
        return gap <= self.max_layover_after(previous.arrival_time)


class ConnectionSearch:
    """Finds segment chains of one, two or three legs between two cities.

    Each depth is its own method; choosing which depths to try is left to the
    caller. City matching uses :meth:`RouteIndex.departures_from` for departure
    cities and normalized substring containment for the destination.
    """

    def __init__(self, index: RouteIndex, policy: LayoverPolicy | None = None) -> None:
        self._index = index
        self._policy = policy or LayoverPolicy()

    @property
    def policy(self) -> LayoverPolicy:
        return self._policy

    def direct(self, from_city: str, to_city: str, day: Weekday | None = None) -> list[SegmentChain]:
        """Single routes from ``from_city`` reaching ``to_city``."""
        target = normalize_key(to_city)
        if not target:
            return []
        return [
            (route,)
            for route in self._index.departures_from(from_city)
            if self._reaches(route, target) and route.runs_on(day)
        ]

    def one_stop(
        self, from_city: str, to_city: str, day: Weekday | None = None
    ) -> list[SegmentChain]:
        """Two-leg chains with one feasible transfer."""
        target = normalize_key(to_city)
        if not target:
            return []
        chains: list[SegmentChain] = []
        for first in self._first_legs(from_city, day):
            for second in self._onward_legs(first, day):
                if self._reaches(second, target):
                    chains.append((first, second))
        return chains

    def two_stop(
        self, from_city: str, to_city: str, day: Weekday | None = None
    ) -> list[SegmentChain]:
        """Three-leg chains where both transfers are feasible."""
        target = normalize_key(to_city)
        if not target:
            return []
        chains: list[SegmentChain] = []
        for first in self._first_legs(from_city, day):
            for second in self._onward_legs(first, day):
                for third in self._onward_legs(second, day):
                    if self._reaches(third, target):
                        chains.append((first, second, third))
        return chains

    def _first_legs(self, from_city: str, day: Weekday | None) -> list[Route]:
        return [route for route in self._index.departures_from(from_city) if route.runs_on(day)]

    def _onward_legs(self, previous: Route, day: Weekday | None) -> list[Route]:
        return [
            route
            for route in self._index.departures_from(previous.arrival_city)
            if route.runs_on(day) and self._policy.allows(previous, route)
        ]

    @staticmethod
    def _reaches(route: Route, target_key: str) -> bool:
        return target_key in normalize_key(route.arrival_city)
