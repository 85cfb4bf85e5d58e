"""Tests for clock-time arithmetic."""

import pytest

from rail_planner.application.services.time_arithmetic import (
    gap_minutes,
    segment_duration,
    time_to_minutes,
    transfer_gap,
)
from rail_planner.domain.models import Route


def _route(depart: str, arrive: str) -> Route:
    return Route(
        route_id="R",
        departure_city="A",
        arrival_city="B",
        departure_time=depart,
        arrival_time=arrive,
    )


@pytest.mark.parametrize(
    ("text", "expected"),
    [("00:00", 0), ("08:05", 485), ("23:59", 1439), ("7:30", 450), ("12:15:30", 735)],
)
def test_time_to_minutes_parses_clock_times(text: str, expected: int) -> None:
    """Given a clock time, when converting, then minutes since midnight are returned."""
    assert time_to_minutes(text) == expected


@pytest.mark.parametrize("text", [None, "", "noon", "25:00", "10:75", "10h30"])
def test_time_to_minutes_treats_malformed_input_as_midnight(text: str | None) -> None:
    """Given malformed or out-of-range input, when converting, then 0 is returned."""
    assert time_to_minutes(text) == 0


def test_segment_duration_within_a_day() -> None:
    """Given a daytime leg, when measuring, then the plain difference is returned."""
    assert segment_duration(_route("08:00", "10:30")) == 150


def test_segment_duration_crosses_midnight() -> None:
    """Given an arrival earlier than departure, when measuring, then it is taken as next day."""
    assert segment_duration(_route("22:10", "02:20")) == 250


def test_gap_is_zero_for_identical_times() -> None:
    """Given equal times, when measuring the gap, then it is zero rather than a full day."""
    assert gap_minutes("10:00", "10:00") == 0


def test_transfer_gap_wraps_past_midnight() -> None:
    """Given a next leg departing after midnight, when measuring the layover, then it wraps."""
    arriving = _route("21:00", "23:50")
    leaving = _route("00:15", "03:00")

    assert transfer_gap(arriving, leaving) == 25
