"""SQLAlchemy-backed booking repository."""

from sqlalchemy import func, select
from sqlalchemy.orm import selectinload

from rail_planner.adapters.persistence.database import Database
from rail_planner.adapters.persistence.mappers import (
    row_to_reservation,
    row_to_route,
    row_to_trip,
)
from rail_planner.adapters.persistence.orm_models import (
    ReservationRow,
    TicketRow,
    TripRow,
    TripSegmentRow,
)
from rail_planner.domain.models.booking import (
    ReservationRecord,
    TripRecord,
    TripSegmentRecord,
)
from rail_planner.domain.models.itinerary import Itinerary
from rail_planner.domain.models.traveller import Traveller


class SqlAlchemyBookingRepository:
    """Persists trips, their segments, reservations and tickets."""

    def __init__(self, database: Database) -> None:
        self._database = database

    def save_booking(
        self, itinerary: Itinerary, travellers: list[Traveller]
    ) -> tuple[int, list[ReservationRecord]]:
        """Persist the trip, its segments and one reservation plus ticket per traveller."""
        with self._database.session() as session, session.begin():
            trip = TripRow(
                connection_summary=itinerary.connection_summary,
                total_duration_minutes=itinerary.total_duration_minutes,
                first_class_total=itinerary.total_price.first,
                second_class_total=itinerary.total_price.second,
            )
            for order, route in enumerate(itinerary.segments):
                layover = (
                    itinerary.transfer_times[order] if order < len(itinerary.transfer_times) else 0
                )
                trip.segments.append(
                    TripSegmentRow(
                        segment_order=order,
                        route_id=route.route_id,
                        layover_after_minutes=layover,
                    )
                )
            for traveller in travellers:
                reservation = ReservationRow(
                    first_name=traveller.first_name.strip(),
                    last_name=traveller.last_name.strip(),
                    age=traveller.age,
                    id_number=traveller.id_number.strip(),
                )
                reservation.ticket = TicketRow()
                trip.reservations.append(reservation)

            session.add(trip)
            session.flush()
            return trip.trip_id, [row_to_reservation(row) for row in trip.reservations]

    def find_trips(self, last_name: str, id_number: str) -> list[TripRecord]:
        """Return trips with a matching reservation, newest first.

        Both sides are folded by the database, so the match is case-insensitive
        as far as the database folds case and exact input always matches.
        """
        with self._database.session() as session:
            rows = session.scalars(
                select(TripRow)
                .join(ReservationRow, ReservationRow.trip_id == TripRow.trip_id)
                .where(
                    func.lower(ReservationRow.last_name) == func.lower(last_name),
                    func.lower(ReservationRow.id_number) == func.lower(id_number),
                )
                .distinct()
                .order_by(TripRow.created_at.desc(), TripRow.trip_id.desc())
            )
            return [row_to_trip(row) for row in rows]

    def trip_segments(self, trip_id: int) -> list[TripSegmentRecord]:
        """Return the segments of a trip in travel order."""
        with self._database.session() as session:
            rows = session.scalars(
                select(TripSegmentRow)
                .options(selectinload(TripSegmentRow.route))
                .where(TripSegmentRow.trip_id == trip_id)
                .order_by(TripSegmentRow.segment_order)
            )
            return [
                TripSegmentRecord(
                    segment_order=row.segment_order,
                    layover_after_minutes=row.layover_after_minutes or 0,
                    route=row_to_route(row.route),
                )
                for row in rows
            ]

    def trip_reservations(self, trip_id: int) -> list[ReservationRecord]:
        """Return the reservations of a trip with their ticket ids."""
        with self._database.session() as session:
            rows = session.scalars(
                select(ReservationRow)
                .options(selectinload(ReservationRow.ticket))
                .where(ReservationRow.trip_id == trip_id)
                .order_by(ReservationRow.reservation_id)
            )
            return [row_to_reservation(row) for row in rows]
