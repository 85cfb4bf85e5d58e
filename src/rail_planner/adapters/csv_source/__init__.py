"""CSV route feed adapter."""

from rail_planner.adapters.csv_source.csv_route_source import CsvRouteSource

__all__ = ["CsvRouteSource"]
