"""Traveller domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Traveller:
    """A passenger to be booked on a trip."""

    first_name: str
    last_name: str
    age: int
    id_number: str
