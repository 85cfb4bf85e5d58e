#!/usr/bin/env python3
"""Check a route CSV export: what loads, which cities are reachable, what is unreachable."""

import argparse
import logging
import sys
from pathlib import Path

# Add src to path
script_dir = Path(__file__).parent
project_dir = script_dir.parent
sys.path.insert(0, str(project_dir / "src"))

from rail_planner.adapters.csv_source import CsvRouteSource
from rail_planner.application.services import RouteIndex
from rail_planner.domain.models import Weekday
from rail_planner.domain.text import normalize_key


def check_network(csv_file: str, verbose: bool = False) -> int:
    """Load the CSV and print a summary of the network; returns the exit code."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s - %(message)s",
    )

    try:
        routes = CsvRouteSource(csv_file).load_routes()
    except FileNotFoundError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    if not routes:
        print("ERROR: No routes could be read from the CSV", file=sys.stderr)
        return 1

    index = RouteIndex.build(routes)
    cities = index.cities()
    print(f"Routes: {len(routes)}")
    print(f"Cities: {len(cities)}\n")

    # Cities that trains arrive at but never leave from
    dead_ends = [city for city in cities if not index.lookup(normalize_key(city))]
    never_running = [route.route_id for route in routes if not route.days]

    print("Departures per weekday:")
    for day in Weekday.all_days():
        count = sum(1 for route in routes if route.runs_on(day))
        print(f"  {day.value}: {count}")

    if dead_ends:
        print(f"\nCities without departures ({len(dead_ends)}):")
        for city in dead_ends:
            print(f"  - {city}")

    if never_running:
        print(f"\nRoutes without operating days ({len(never_running)}):")
        for route_id in never_running:
            print(f"  - {route_id}")

    if not dead_ends and not never_running:
        print("\nEvery city has departures and every route runs at least once a week ✓")
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Check a rail network CSV export")
    parser.add_argument("csv_file", help="Path to the route CSV")
    parser.add_argument("--verbose", "-v", action="store_true", help="Show loader warnings")

    args = parser.parse_args()

    sys.exit(check_network(args.csv_file, verbose=args.verbose))
