"""Booking domain models."""

from dataclasses import dataclass
from datetime import datetime

from .route import Route


@dataclass(frozen=True)
class TripRecord:
    """A persisted trip."""

    trip_id: int
    connection_summary: str
    total_duration_minutes: int
    first_class_total: float
    second_class_total: float
    created_at: datetime | None = None


@dataclass(frozen=True)
class TripSegmentRecord:
    """A persisted leg of a trip with the layover that follows it."""

    segment_order: int
    layover_after_minutes: int
    route: Route


@dataclass(frozen=True)
class ReservationRecord:
    """A persisted reservation and the ticket issued for it."""

    reservation_id: int
    first_name: str
    last_name: str
    age: int
    id_number: str
    ticket_id: int | None = None


@dataclass(frozen=True)
class TripDetails:
    """A trip together with its segments and reservations."""

    trip: TripRecord
    segments: tuple[TripSegmentRecord, ...]
    reservations: tuple[ReservationRecord, ...]


@dataclass(frozen=True)
class BookingConfirmation:
    """Outcome of a successful booking."""

    trip_id: int
    reservations: tuple[ReservationRecord, ...]
