"""Expansion of free-text "days of operation" fields into weekday sets."""

from rail_planner.domain.models.weekday import Weekday
from rail_planner.domain.text import normalize_key

_EVERY_DAY_WORDS = frozenset({"daily", "all"})


def expand_days_ordered(text: str | None) -> tuple[Weekday, ...]:
    """Expand a days-of-operation string, keeping first-seen order.

    Accepts comma separated day names or abbreviations and hyphenated ranges
    such as ``Mon-Fri``. A range whose start comes after its end wraps across
    the week boundary, so ``Fri-Mon`` yields Friday through Monday.
    Unrecognized tokens, and ranges with an unrecognized end, are dropped.
    """
    normalized = normalize_key(text)
    if not normalized:
        return ()
    if normalized in _EVERY_DAY_WORDS:
        return Weekday.all_days()

    days: list[Weekday] = []
    for token in normalized.split(","):
        token = token.strip()
        if not token:
            continue
        if "-" in token:
            for day in _expand_range(token):
                if day not in days:
                    days.append(day)
            continue
        day = Weekday.parse(token)
        if day is not None and day not in days:
            days.append(day)
    return tuple(days)


def expand_days(text: str | None) -> frozenset[Weekday]:
    """Expand a days-of-operation string into a set of weekdays."""
    return frozenset(expand_days_ordered(text))


def _expand_range(token: str) -> list[Weekday]:
    start_text, _, end_text = token.partition("-")
    start = Weekday.parse(start_text)
    end = Weekday.parse(end_text)
    if start is None or end is None:
        return []

    if start.ordinal <= end.ordinal:
        return [Weekday.from_ordinal(i) for i in range(start.ordinal, end.ordinal + 1)]

    days = []
    ordinal = start.ordinal
    while True:
        day = Weekday.from_ordinal(ordinal)
        if day not in days:
            days.append(day)
        if day is end:
            break
        ordinal += 1
    return days
