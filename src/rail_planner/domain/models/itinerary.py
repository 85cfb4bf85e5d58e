"""Itinerary domain model."""

from dataclasses import dataclass
from enum import Enum

from .price import Price
from .route import Route

# One to three routes; each leg departs from the city the previous one reached.
SegmentChain = tuple[Route, ...]

ITINERARY_ID_SEPARATOR = "-"


@dataclass(frozen=True)
class Itinerary:
    """Read-only view of a segment chain with its aggregated totals."""

    id: str
    total_duration_minutes: int
    total_price: Price
    transfer_times: tuple[int, ...]
    segments: SegmentChain

    @property
    def departure_city(self) -> str:
        return self.segments[0].departure_city

    @property
    def arrival_city(self) -> str:
        return self.segments[-1].arrival_city

    @property
    def departure_time(self) -> str:
        return self.segments[0].departure_time

    @property
    def arrival_time(self) -> str:
        return self.segments[-1].arrival_time

    @property
    def transfer_count(self) -> int:
        return len(self.segments) - 1

    @property
    def connection_summary(self) -> str:
        """Cities visited in order, e.g. ``Paris → Lyon → Milan``."""
        cities = [self.segments[0].departure_city]
        cities.extend(segment.arrival_city for segment in self.segments)
        return " → ".join(cities)


class SortKey(str, Enum):
    """Ranking keys for itinerary lists."""

    DURATION = "duration"
    PRICE = "price"
    DEPART = "depart"

    @classmethod
    def parse(cls, text: str | None) -> "SortKey | None":
        """Return the matching key, or None for anything unrecognized."""
        if text is None:
            return None
        try:
            return cls(text.strip().lower())
        except ValueError:
            return None


@dataclass(frozen=True)
class SearchQuery:
    """An itinerary search request."""

    from_city: str
    to_city: str
    day: str | None = None  # Free-text weekday name, resolved case-insensitively
    sort: str = SortKey.DURATION.value


@dataclass(frozen=True)
class SearchResult:
    """Ranked itineraries and the number of transfers that produced them."""

    itineraries: tuple[Itinerary, ...] = ()
    transfers: int | None = None
