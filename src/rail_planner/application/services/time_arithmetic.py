"""Clock-time arithmetic for route legs and transfers.

All times are wall-clock ``HH:MM`` strings without a date. Whenever a later
event appears to happen before an earlier one, it is taken to fall on the
following day; the service calendar is never consulted for this.
"""

import re

from rail_planner.domain.models.route import Route

MINUTES_PER_DAY = 24 * 60

_CLOCK_PATTERN = re.compile(r"^\s*(\d{1,2}):(\d{2})(?::\d{2})?\s*$")


def time_to_minutes(hhmm: str | None) -> int:
    """Convert ``HH:MM`` (or ``HH:MM:SS``) to minutes since midnight.

    Malformed or out-of-range input yields 0 rather than an error.
    """
    if not hhmm:
        return 0
    match = _CLOCK_PATTERN.match(str(hhmm))
    if not match:
        return 0
    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        return 0
    return hours * 60 + minutes


def gap_minutes(earlier_hhmm: str, later_hhmm: str) -> int:
    """Minutes from one clock time to the next occurrence of another."""
    gap = time_to_minutes(later_hhmm) - time_to_minutes(earlier_hhmm)
    if gap < 0:
        gap += MINUTES_PER_DAY
    return gap


def segment_duration(route: Route) -> int:
    """Travel time of a single leg, crossing midnight when arrival < departure."""
    return gap_minutes(route.departure_time, route.arrival_time)


def transfer_gap(previous: Route, following: Route) -> int:
    """Layover between arriving on ``previous`` and departing on ``following``."""
    return gap_minutes(previous.arrival_time, following.departure_time)
