"""Turning segment chains into itineraries and ranking them."""

from collections.abc import Callable, Sequence

from rail_planner.application.services.time_arithmetic import segment_duration, transfer_gap
from rail_planner.domain.models.itinerary import (
    ITINERARY_ID_SEPARATOR,
    Itinerary,
    SegmentChain,
    SortKey,
)
from rail_planner.domain.models.price import Price


def to_itinerary(chain: SegmentChain) -> Itinerary:
    """Aggregate durations, layovers and prices of ``chain``."""
    segments = tuple(chain)
    transfers = tuple(
        transfer_gap(previous, following) for previous, following in zip(segments, segments[1:])
    )
    total_duration = sum(segment_duration(route) for route in segments) + sum(transfers)
    total_price = Price.zero()
    for route in segments:
        total_price = total_price + route.price
    return Itinerary(
        id=ITINERARY_ID_SEPARATOR.join(route.route_id for route in segments),
        total_duration_minutes=total_duration,
        total_price=total_price,
        transfer_times=transfers,
        segments=segments,
    )


_SORT_KEYS: dict[SortKey, Callable[[Itinerary], object]] = {
    SortKey.DURATION: lambda itinerary: itinerary.total_duration_minutes,
    SortKey.PRICE: lambda itinerary: itinerary.total_price.second,
    # Lexicographic order is chronological because times are zero-padded HH:MM.
    SortKey.DEPART: lambda itinerary: itinerary.departure_time,
}


def sort_itineraries(itineraries: Sequence[Itinerary], key: str | SortKey | None) -> list[Itinerary]:
    """Return a stably sorted copy; an unrecognized key keeps the input order."""
    sort_key = key if isinstance(key, SortKey) else SortKey.parse(key)
    if sort_key is None:
        return list(itineraries)
    return sorted(itineraries, key=_SORT_KEYS[sort_key])  # type: ignore[arg-type]
