"""Relational persistence adapters (SQLAlchemy)."""

from rail_planner.adapters.persistence.booking_repository import SqlAlchemyBookingRepository
from rail_planner.adapters.persistence.database import Database
from rail_planner.adapters.persistence.route_repository import SqlAlchemyRouteRepository

__all__ = ["Database", "SqlAlchemyBookingRepository", "SqlAlchemyRouteRepository"]
