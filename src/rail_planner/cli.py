"""Command-line interface for searching itineraries and looking up trips."""

import argparse
import json
import logging
import sys

from pydantic import ValidationError

from rail_planner.adapters.config import AppConfig
from rail_planner.adapters.formatters import ItineraryFormatter
from rail_planner.bootstrap import Application, build_application, configure_logging
from rail_planner.domain.errors import BookingValidationError
from rail_planner.domain.models.itinerary import SearchQuery

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="rail-planner",
        description="Rail itinerary search over the scheduled route network",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Find itineraries from Paris to Milan on Mondays, cheapest first
  rail-planner search Paris Milan --day mon --sort price

  # List all cities in the network
  rail-planner cities

  # Show booked trips for a passenger
  rail-planner trips Dupont AB123456
        """,
    )
    parser.add_argument(
        "--csv", dest="routes_csv", help="Route CSV to load (overrides ROUTES_CSV)"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    search_parser = subparsers.add_parser("search", help="Search itineraries between two cities")
    search_parser.add_argument("from_city", help="Departure city (partial names match)")
    search_parser.add_argument("to_city", help="Arrival city (partial names match)")
    search_parser.add_argument("--day", help="Day of travel, e.g. 'mon' or 'Friday'")
    search_parser.add_argument(
        "--sort",
        choices=["duration", "price", "depart"],
        help="Ranking of results (default from configuration)",
    )
    search_parser.add_argument("--json", action="store_true", help="Output as JSON")

    subparsers.add_parser("cities", help="List cities in the route network")

    trips_parser = subparsers.add_parser("trips", help="Show booked trips for a passenger")
    trips_parser.add_argument("last_name", help="Passenger last name")
    trips_parser.add_argument("id_number", help="Passenger government ID number")
    trips_parser.add_argument("--json", action="store_true", help="Output as JSON")

    return parser


def run_search(app: Application, args: argparse.Namespace, formatter: ItineraryFormatter) -> int:
    """Run a search and print the results; returns the exit code."""
    query = SearchQuery(
        from_city=args.from_city,
        to_city=args.to_city,
        day=args.day,
        sort=args.sort or app.config.default_sort,
    )
    result = app.search_service.search(query)

    if args.json:
        print(json.dumps(formatter.search_result_to_dict(result), indent=2, ensure_ascii=False))
        return 0 if result.itineraries else 1

    if not result.itineraries:
        day = f" on {args.day}" if args.day else ""
        print(f"No itineraries found from '{args.from_city}' to '{args.to_city}'{day}", file=sys.stderr)
        return 1

    transfers = "direct" if result.transfers == 0 else f"{result.transfers} transfer(s)"
    print(f"\nFound {len(result.itineraries)} itinerary(ies), {transfers}:\n")
    for itinerary in result.itineraries:
        for line in formatter.format_itinerary_lines(itinerary):
            print(f"  {line}")
        print()
    return 0


def run_trips(app: Application, args: argparse.Namespace, formatter: ItineraryFormatter) -> int:
    """Print the trips booked by a passenger; returns the exit code."""
    trips = app.booking_service.trips_for_passenger(args.last_name, args.id_number)

    if args.json:
        print(json.dumps([formatter.trip_details_to_dict(t) for t in trips], indent=2, ensure_ascii=False))
        return 0

    if not trips:
        print(f"No trips found for {args.last_name} ({args.id_number})", file=sys.stderr)
        return 1

    for details in trips:
        trip = details.trip
        print(
            f"\nTrip {trip.trip_id}: {trip.connection_summary} "
            f"[{formatter.format_duration(trip.total_duration_minutes)}]"
        )
        for segment in details.segments:
            route = segment.route
            print(
                f"    {route.departure_time} {route.departure_city} -> "
                f"{route.arrival_time} {route.arrival_city}  {route.route_id}"
            )
        for reservation in details.reservations:
            print(
                f"    Passenger {reservation.first_name} {reservation.last_name}, "
                f"ticket {reservation.ticket_id}"
            )
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point; returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    configure_logging("DEBUG" if args.verbose else "WARNING")
    try:
        config = AppConfig()
        config.load_toml_overrides()
        if args.routes_csv:
            config.routes_csv = args.routes_csv
    except (ValidationError, ValueError, FileNotFoundError) as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return 1

    formatter = ItineraryFormatter()
    # Read-only commands: routes are searched in memory, the database is not rewritten
    app = build_application(config, store_routes=False)
    try:
        if args.command in ("search", "cities"):
            app.route_loader.reload()

        if args.command == "search":
            return run_search(app, args, formatter)
        if args.command == "cities":
            for city in app.search_service.available_cities():
                print(city)
            return 0
        if args.command == "trips":
            return run_trips(app, args, formatter)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return 1
    except (BookingValidationError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    finally:
        app.close()

    parser.print_help()
    return 1


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    sys.exit(main())


if __name__ == "__main__":
    cli_main()
