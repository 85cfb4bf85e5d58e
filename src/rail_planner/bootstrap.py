"""Wiring of configuration, adapters and services shared by the server and the CLI."""

import logging
import sys
from dataclasses import dataclass

from rail_planner.adapters.config import AppConfig
from rail_planner.adapters.csv_source import CsvRouteSource
from rail_planner.adapters.persistence import (
    Database,
    SqlAlchemyBookingRepository,
    SqlAlchemyRouteRepository,
)
from rail_planner.application.services import (
    BookingService,
    ItinerarySearchService,
    LayoverPolicy,
    RouteCatalog,
    RouteLoadingService,
)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging to stderr."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stderr,
        force=True,
    )


def layover_policy_from_config(config: AppConfig) -> LayoverPolicy:
    """Build the transfer rules from configuration."""
    return LayoverPolicy(
        min_transfer_minutes=config.min_transfer_minutes,
        day_window_start_hour=config.day_window_start_hour,
        day_window_end_hour=config.day_window_end_hour,
        max_day_layover_minutes=config.max_day_layover_minutes,
        max_night_layover_minutes=config.max_night_layover_minutes,
    )


@dataclass
class Application:
    """Fully wired services over one database and route catalog."""

    config: AppConfig
    database: Database
    catalog: RouteCatalog
    search_service: ItinerarySearchService
    booking_service: BookingService
    route_loader: RouteLoadingService

    def close(self) -> None:
        self.database.dispose()


def build_application(config: AppConfig, store_routes: bool = True) -> Application:
    """Create the database schema and wire services; routes are not loaded yet.

    With ``store_routes`` off, reloading only publishes routes to searches and
    never writes the ``routes`` table.
    """
    database = Database(config.database_url)
    database.create_schema()

    catalog = RouteCatalog()
    route_loader = RouteLoadingService(
        source=CsvRouteSource(config.routes_csv),
        catalog=catalog,
        route_repository=SqlAlchemyRouteRepository(database) if store_routes else None,
    )
    return Application(
        config=config,
        database=database,
        catalog=catalog,
        search_service=ItinerarySearchService(
            catalog,
            policy=layover_policy_from_config(config),
            default_sort=config.default_sort,
        ),
        booking_service=BookingService(catalog, SqlAlchemyBookingRepository(database)),
        route_loader=route_loader,
    )
