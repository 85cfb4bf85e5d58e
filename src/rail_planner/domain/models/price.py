"""Price domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Price:
    """Ticket price per class, in euro."""

    first: float = 0.0
    second: float = 0.0

    @classmethod
    def zero(cls) -> "Price":
        """Return a price of zero in both classes."""
        return cls(0.0, 0.0)

    def __add__(self, other: "Price") -> "Price":
        return Price(self.first + other.first, self.second + other.second)
