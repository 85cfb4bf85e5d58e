"""Conversion between domain models and ORM rows."""

from rail_planner.adapters.persistence.orm_models import ReservationRow, RouteRow, TripRow
from rail_planner.domain.calendar import expand_days
from rail_planner.domain.models.booking import ReservationRecord, TripRecord
from rail_planner.domain.models.price import Price
from rail_planner.domain.models.route import Route
from rail_planner.domain.models.weekday import calendar_order


def route_to_row(route: Route) -> RouteRow:
    return RouteRow(
        route_id=route.route_id,
        departure_city=route.departure_city,
        arrival_city=route.arrival_city,
        departure_time=route.departure_time,
        arrival_time=route.arrival_time,
        train_type=route.train_type or "",
        days_of_operation=",".join(day.value for day in calendar_order(route.days)),
        first_class_price=route.price.first,
        second_class_price=route.price.second,
    )


def row_to_route(row: RouteRow) -> Route:
    return Route(
        route_id=row.route_id,
        departure_city=row.departure_city,
        arrival_city=row.arrival_city,
        departure_time=row.departure_time,
        arrival_time=row.arrival_time,
        train_type=row.train_type or "",
        days=expand_days(row.days_of_operation),
        price=Price(first=row.first_class_price or 0.0, second=row.second_class_price or 0.0),
    )


def row_to_trip(row: TripRow) -> TripRecord:
    return TripRecord(
        trip_id=row.trip_id,
        connection_summary=row.connection_summary or "",
        total_duration_minutes=row.total_duration_minutes or 0,
        first_class_total=row.first_class_total or 0.0,
        second_class_total=row.second_class_total or 0.0,
        created_at=row.created_at,
    )


def row_to_reservation(row: ReservationRow) -> ReservationRecord:
    return ReservationRecord(
        reservation_id=row.reservation_id,
        first_name=row.first_name,
        last_name=row.last_name,
        age=row.age or 0,
        id_number=row.id_number,
        ticket_id=row.ticket.ticket_id if row.ticket is not None else None,
    )
