"""POI selection helpers for itinerary planning."""

from __future__ import annotations

from tripgen.domain.constants import MAIN_ACTIVITIES_PER_DAY_CAP
from tripgen.domain.models import Destination, PointOfInterest


def matches_interest(poi: PointOfInterest, interest_text: str) -> bool:
    needle = interest_text.lower()
    return any(needle in tag.lower() for tag in poi.category)


def filter_by_interest(pois: list[PointOfInterest], interest_text: str) -> list[PointOfInterest]:
    return [poi for poi in pois if matches_interest(poi, interest_text)]


def attraction_fallback(destination: Destination) -> list[PointOfInterest]:
    return destination.attractions()


def rank_by_rating(pois: list[PointOfInterest]) -> list[PointOfInterest]:
    # sorted() is stable, equal ratings keep catalog order
    return sorted(pois, key=lambda poi: poi.rating, reverse=True)


def selection_cap(total_days: int) -> int:
    return max(0, total_days) * MAIN_ACTIVITIES_PER_DAY_CAP


def select_candidates(
    destination: Destination,
    interest_text: str,
    total_days: int,
) -> tuple[list[PointOfInterest], bool]:
    """Filter, rank and cap the destination's POIs.

    Returns the selected POIs and whether the attraction fallback was used.
    """
    pool = filter_by_interest(destination.locations, interest_text)
    used_fallback = False
    if not pool:
        pool = attraction_fallback(destination)
        used_fallback = True
    ranked = rank_by_rating(pool)
    return ranked[: selection_cap(total_days)], used_fallback
