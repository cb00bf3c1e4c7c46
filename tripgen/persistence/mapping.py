"""Conversion from generated itineraries to saved records."""

from __future__ import annotations

import datetime as dt
from typing import Optional

from tripgen.domain.models import GeneratedItinerary
from tripgen.persistence.models import (
    SavedActivityRecord,
    SavedDayRecord,
    SavedItineraryRecord,
    SavedPreferences,
)


def to_saved_record(
    itinerary: GeneratedItinerary,
    user_id: str,
    *,
    today: Optional[dt.date] = None,
    is_public: bool = False,
) -> SavedItineraryRecord:
    start_date = today or dt.date.today()
    end_date = start_date + dt.timedelta(days=itinerary.total_days - 1)
    interests = itinerary.preferences.interests
    days = [
        SavedDayRecord(
            day=day.day,
            date=day.date,
            activities=[
                SavedActivityRecord(
                    id=activity.id,
                    name=activity.name,
                    type=activity.type,
                    category=list(activity.category),
                    description=activity.description,
                    latitude=activity.latitude,
                    longitude=activity.longitude,
                    duration=activity.duration,
                    rating=activity.rating,
                    time_slot=activity.time_slot,
                )
                for activity in day.activities
            ],
            total_duration=day.total_duration,
        )
        for day in itinerary.days
    ]
    return SavedItineraryRecord(
        user_id=user_id,
        title=f"{itinerary.destination.name} Trip",
        destination=itinerary.destination.name,
        start_date=start_date,
        end_date=end_date,
        total_days=itinerary.total_days,
        preferences=SavedPreferences(
            interests=interests,
            duration=f"{itinerary.total_days} days",
        ),
        days=days,
        is_public=is_public,
        likes=0,
        tags=[interests.lower()] if interests.strip() else [],
    )


__all__ = ["to_saved_record"]
