"""Weekday domain model."""

from enum import Enum

from rail_planner.domain.text import normalize_key


class Weekday(str, Enum):
    """Day of service, valued by its canonical three-letter code."""

    MON = "MON"
    TUE = "TUE"
    WED = "WED"
    THU = "THU"
    FRI = "FRI"
    SAT = "SAT"
    SUN = "SUN"

    @property
    def ordinal(self) -> int:
        """Position in the week, Monday=0 ... Sunday=6."""
        return _ORDER.index(self)

    @classmethod
    def from_ordinal(cls, ordinal: int) -> "Weekday":
        """Return the weekday at ``ordinal`` modulo 7."""
        return _ORDER[ordinal % 7]

    @classmethod
    def parse(cls, text: str | None) -> "Weekday | None":
        """Resolve a day name or abbreviation, or return None if unrecognized."""
        return _ALIASES.get(normalize_key(text))

    @classmethod
    def all_days(cls) -> tuple["Weekday", ...]:
        """All seven days in calendar order."""
        return _ORDER


_ORDER: tuple[Weekday, ...] = tuple(Weekday)

_ALIASES: dict[str, Weekday] = {
    "mon": Weekday.MON,
    "monday": Weekday.MON,
    "tue": Weekday.TUE,
    "tues": Weekday.TUE,
    "tuesday": Weekday.TUE,
    "wed": Weekday.WED,
    "weds": Weekday.WED,
    "wednesday": Weekday.WED,
    "thu": Weekday.THU,
    "thur": Weekday.THU,
    "thurs": Weekday.THU,
    "thursday": Weekday.THU,
    "fri": Weekday.FRI,
    "friday": Weekday.FRI,
    "sat": Weekday.SAT,
    "saturday": Weekday.SAT,
    "sun": Weekday.SUN,
    "sunday": Weekday.SUN,
}


def calendar_order(days: "frozenset[Weekday] | set[Weekday]") -> list[Weekday]:
    """Return ``days`` sorted Monday first."""
    return sorted(days, key=lambda day: day.ordinal)
