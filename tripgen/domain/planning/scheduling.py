"""Day bucketing, time slots and meal injection."""

from __future__ import annotations

import math
from datetime import date, timedelta
from typing import Protocol

from tripgen.domain.constants import (
    MAX_ACTIVITIES_PER_DAY,
    MEAL_SLOT_LABEL,
    MIN_ACTIVITIES_PER_DAY,
    MONTH_NAMES,
    TIME_SLOT_LABELS,
    WEEKDAY_NAMES,
)
from tripgen.domain.models import Destination, ItineraryActivity, ItineraryDay, PointOfInterest


class RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


def activities_per_day(selected_count: int, total_days: int) -> int:
    target = math.ceil(selected_count / total_days) if total_days > 0 else 0
    return max(MIN_ACTIVITIES_PER_DAY, min(MAX_ACTIVITIES_PER_DAY, target))


def time_slot_for(index: int) -> str:
    return TIME_SLOT_LABELS[index % len(TIME_SLOT_LABELS)]


def format_day_date(start_date: date, day_number: int) -> str:
    """Long-form English label such as ``Monday, October 19, 2026``, independent of locale."""
    current = start_date + timedelta(days=day_number - 1)
    weekday = WEEKDAY_NAMES[current.weekday()]
    month = MONTH_NAMES[current.month - 1]
    return f"{weekday}, {month} {current.day}, {current.year}"


def meal_activity_id(poi_id: str, day_number: int) -> str:
    return f"{poi_id}-day-{day_number}"


def distribute_across_days(
    pois: list[PointOfInterest],
    total_days: int,
    *,
    start_date: date,
) -> list[ItineraryDay]:
    per_day = activities_per_day(len(pois), total_days)
    days: list[ItineraryDay] = []
    for day_number in range(1, total_days + 1):
        start = (day_number - 1) * per_day
        day_pois = pois[start : start + per_day]
        activities = [
            ItineraryActivity.from_poi(poi, time_slot=time_slot_for(idx))
            for idx, poi in enumerate(day_pois)
        ]
        days.append(
            ItineraryDay(
                day=day_number,
                date=format_day_date(start_date, day_number),
                activities=activities,
            )
        )
    return days


def add_meals(
    days: list[ItineraryDay],
    destination: Destination,
    rng: RandomSource,
) -> list[ItineraryDay]:
    restaurants = destination.restaurants()
    if not restaurants:
        return list(days)

    result: list[ItineraryDay] = []
    for day in days:
        if len(day.activities) >= MAX_ACTIVITIES_PER_DAY:
            result.append(day)
            continue
        pick = restaurants[rng.randrange(len(restaurants))]
        meal = ItineraryActivity.from_poi(
            pick,
            time_slot=MEAL_SLOT_LABEL,
            activity_id=meal_activity_id(pick.id, day.day),
        )
        result.append(day.with_activity(meal))
    return result
