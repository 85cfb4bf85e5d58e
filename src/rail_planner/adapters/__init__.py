"""Adapters layer - external system integrations."""

from rail_planner.adapters.config import AppConfig
from rail_planner.adapters.csv_source import CsvRouteSource
from rail_planner.adapters.persistence import (
    Database,
    SqlAlchemyBookingRepository,
    SqlAlchemyRouteRepository,
)

__all__ = [
    "AppConfig",
    "CsvRouteSource",
    "Database",
    "SqlAlchemyBookingRepository",
    "SqlAlchemyRouteRepository",
]
