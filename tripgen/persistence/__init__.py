"""Persistence package exports."""

from tripgen.persistence.mapping import to_saved_record
from tripgen.persistence.models import (
    SavedActivityRecord,
    SavedDayRecord,
    SavedItineraryRecord,
    SavedItineraryUpdate,
    SavedPreferences,
)
from tripgen.persistence.repository import (
    ItineraryRepository,
    NoopItineraryRepository,
    get_itinerary_repository,
)
from tripgen.persistence.sqlite_repository import SQLiteItineraryRepository

__all__ = [
    "ItineraryRepository",
    "NoopItineraryRepository",
    "SQLiteItineraryRepository",
    "SavedActivityRecord",
    "SavedDayRecord",
    "SavedItineraryRecord",
    "SavedItineraryUpdate",
    "SavedPreferences",
    "get_itinerary_repository",
    "to_saved_record",
]
