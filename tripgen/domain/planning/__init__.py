"""Itinerary planning: selection, scheduling and the generation facade."""

from tripgen.domain.planning.generator import ItineraryGenerator, parse_duration
from tripgen.domain.planning.scheduling import activities_per_day, add_meals, distribute_across_days
from tripgen.domain.planning.selection import filter_by_interest, rank_by_rating, select_candidates

__all__ = [
    "ItineraryGenerator",
    "activities_per_day",
    "add_meals",
    "distribute_across_days",
    "filter_by_interest",
    "parse_duration",
    "rank_by_rating",
    "select_candidates",
]
