"""SQLAlchemy ORM models for routes, trips and bookings.

Times are stored as the ``HH:MM`` strings the schedule uses and days of
operation as a comma-joined list of weekday codes in calendar order.
"""

from datetime import datetime

from sqlalchemy import DateTime, Float, ForeignKey, Index, Integer, String, Text, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    pass


class RouteRow(Base):
    __tablename__ = "routes"

    route_id: Mapped[str] = mapped_column(Text, primary_key=True)
    departure_city: Mapped[str] = mapped_column(Text, nullable=False)
    arrival_city: Mapped[str] = mapped_column(Text, nullable=False)
    departure_time: Mapped[str] = mapped_column(Text, nullable=False)
    arrival_time: Mapped[str] = mapped_column(Text, nullable=False)
    train_type: Mapped[str | None] = mapped_column(Text)
    days_of_operation: Mapped[str | None] = mapped_column(Text)
    first_class_price: Mapped[float] = mapped_column(Float, default=0.0)
    second_class_price: Mapped[float] = mapped_column(Float, default=0.0)
    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.current_timestamp())

    __table_args__ = (
        Index("idx_routes_departure_city", "departure_city"),
        Index("idx_routes_arrival_city", "arrival_city"),
    )


class TripRow(Base):
    __tablename__ = "trips"

    trip_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    connection_summary: Mapped[str | None] = mapped_column(Text)
    total_duration_minutes: Mapped[int | None] = mapped_column(Integer)
    first_class_total: Mapped[float] = mapped_column(Float, default=0.0)
    second_class_total: Mapped[float] = mapped_column(Float, default=0.0)
    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.current_timestamp())

    segments: Mapped[list["TripSegmentRow"]] = relationship(
        back_populates="trip",
        cascade="all, delete-orphan",
        order_by="TripSegmentRow.segment_order",
    )
    reservations: Mapped[list["ReservationRow"]] = relationship(
        back_populates="trip",
        cascade="all, delete-orphan",
        order_by="ReservationRow.reservation_id",
    )


class TripSegmentRow(Base):
    __tablename__ = "trip_segments"

    trip_id: Mapped[int] = mapped_column(
        ForeignKey("trips.trip_id", ondelete="CASCADE"), primary_key=True
    )
    segment_order: Mapped[int] = mapped_column(Integer, primary_key=True)
    route_id: Mapped[str] = mapped_column(ForeignKey("routes.route_id"), nullable=False)
    layover_after_minutes: Mapped[int] = mapped_column(Integer, default=0)

    trip: Mapped[TripRow] = relationship(back_populates="segments")
    route: Mapped[RouteRow] = relationship()


class ReservationRow(Base):
    __tablename__ = "reservations"

    reservation_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    trip_id: Mapped[int] = mapped_column(
        ForeignKey("trips.trip_id", ondelete="CASCADE"), nullable=False
    )
    first_name: Mapped[str] = mapped_column(String, nullable=False)
    last_name: Mapped[str] = mapped_column(String, nullable=False)
    age: Mapped[int] = mapped_column(Integer, default=0)
    id_number: Mapped[str] = mapped_column(String, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.current_timestamp())

    trip: Mapped[TripRow] = relationship(back_populates="reservations")
    ticket: Mapped["TicketRow | None"] = relationship(
        back_populates="reservation", cascade="all, delete-orphan", uselist=False
    )

    __table_args__ = (Index("idx_reservations_passenger", "last_name", "id_number"),)


class TicketRow(Base):
    __tablename__ = "tickets"

    ticket_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    reservation_id: Mapped[int] = mapped_column(
        ForeignKey("reservations.reservation_id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )
    issued_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.current_timestamp())

    reservation: Mapped[ReservationRow] = relationship(back_populates="ticket")
