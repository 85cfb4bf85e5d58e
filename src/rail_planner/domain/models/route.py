"""Route domain model."""

from dataclasses import dataclass, field

from .price import Price
from .weekday import Weekday


@dataclass(frozen=True)
class Route:
    """One scheduled service leg between two cities.

    Times are wall-clock ``HH:MM`` strings without a date. A route whose
    arrival time is earlier than its departure time runs past midnight.
    """

    route_id: str
    departure_city: str
    arrival_city: str
    departure_time: str
    arrival_time: str
    train_type: str = ""
    days: frozenset[Weekday] = field(default_factory=frozenset)
    price: Price = field(default_factory=Price.zero)

    def runs_on(self, day: Weekday | None) -> bool:
        """Return True if the route operates on ``day``; no day means no filter."""
        return day is None or day in self.days
