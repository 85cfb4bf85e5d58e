"""Route source reading the rail network CSV export."""

import csv
import logging
import re
from pathlib import Path
from typing import Any

from rail_planner.domain.calendar import expand_days
from rail_planner.domain.models.price import Price
from rail_planner.domain.models.route import Route
from rail_planner.domain.text import normalize_key

logger = logging.getLogger(__name__)

# Route field -> accepted header names (compared after normalize_key)
COLUMN_ALIASES: dict[str, tuple[str, ...]] = {
    "route_id": ("route id", "route_id", "id"),
    "departure_city": ("departure city", "from", "departure"),
    "arrival_city": ("arrival city", "to", "arrival"),
    "departure_time": ("departure time", "depart", "departure_time"),
    "arrival_time": ("arrival time", "arrive", "arrival_time"),
    "train_type": ("train type", "train", "type"),
    "days": ("days of operation", "days", "operation days"),
    "first_class_price": ("first class ticket rate (in euro)", "first class", "first"),
    "second_class_price": ("second class ticket rate (in euro)", "second class", "second"),
}

REQUIRED_FIELDS = ("route_id", "departure_city", "arrival_city", "departure_time", "arrival_time")

# Leading clock time; trailing day markers such as "(+1d)" are dropped
_CLOCK_PREFIX = re.compile(r"^\s*(\d{1,2}):(\d{2})")


def clean_time(value: str) -> str:
    """Return the leading clock time of ``value`` as zero-padded ``HH:MM``.

    Values without a recognizable clock time are returned unchanged.
    """
    match = _CLOCK_PREFIX.match(value)
    if not match:
        return value
    return f"{int(match.group(1)):02d}:{match.group(2)}"


def parse_price(value: Any) -> float:
    """Parse a euro amount leniently: comma decimals allowed, invalid or negative -> 0.0."""
    text = str(value or "").strip().replace("€", "").replace(",", ".").strip()
    if not text:
        return 0.0
    try:
        amount = float(text)
    except ValueError:
        return 0.0
    return max(amount, 0.0)


class CsvRouteSource:
    """Reads routes from a CSV file with one scheduled service per row."""

    def __init__(self, csv_path: str | Path, encoding: str = "utf-8-sig") -> None:
        """Initialize with the CSV location.

        Args:
            csv_path: Path of the CSV export.
            encoding: File encoding; the default tolerates a UTF-8 byte order mark.
        """
        self.csv_path = Path(csv_path)
        self.encoding = encoding

    def load_routes(self) -> list[Route]:
        """Load every valid row as a Route, in file order.

        Rows missing an id, a city or a time are skipped, as are rows whose
        route id was already seen.

        Raises:
            FileNotFoundError: If the CSV file does not exist.
        """
        if not self.csv_path.exists():
            raise FileNotFoundError(f"Route CSV not found: {self.csv_path}")

        routes: list[Route] = []
        seen_ids: set[str] = set()
        with open(self.csv_path, newline="", encoding=self.encoding) as f:
            reader = csv.DictReader(f)
            columns = self._resolve_columns(reader.fieldnames or [])
            missing_columns = [name for name in REQUIRED_FIELDS if name not in columns]
            if missing_columns:
                logger.warning(
                    f"Route CSV {self.csv_path} lacks column(s) for {', '.join(missing_columns)}"
                )

            # Header is line 1
            for line_number, row in enumerate(reader, start=2):
                route = self._row_to_route(row, columns, line_number)
                if route is None:
                    continue
                if route.route_id in seen_ids:
                    logger.warning(
                        f"Skipping line {line_number}: duplicate route id '{route.route_id}'"
                    )
                    continue
                seen_ids.add(route.route_id)
                routes.append(route)

        logger.info(f"Read {len(routes)} route(s) from {self.csv_path}")
        return routes

    @staticmethod
    def _resolve_columns(fieldnames: list[str]) -> dict[str, str]:
        """Map route fields to the actual header names present in the file."""
        by_key = {normalize_key(name): name for name in fieldnames if name}
        columns: dict[str, str] = {}
        for field_name, aliases in COLUMN_ALIASES.items():
            for alias in aliases:
                if alias in by_key:
                    columns[field_name] = by_key[alias]
                    break
        return columns

    @staticmethod
    def _row_to_route(row: dict[str, Any], columns: dict[str, str], line_number: int) -> Route | None:
        def value(field_name: str) -> str:
            column = columns.get(field_name)
            raw = row.get(column) if column else None
            return str(raw).strip() if raw is not None else ""

        missing = [name for name in REQUIRED_FIELDS if not value(name)]
        if missing:
            logger.warning(f"Skipping line {line_number}: missing {', '.join(missing)}")
            return None

        return Route(
            route_id=value("route_id"),
            departure_city=value("departure_city"),
            arrival_city=value("arrival_city"),
            departure_time=clean_time(value("departure_time")),
            arrival_time=clean_time(value("arrival_time")),
            train_type=value("train_type"),
            days=expand_days(value("days")),
            price=Price(
                first=parse_price(value("first_class_price")),
                second=parse_price(value("second_class_price")),
            ),
        )
