"""Domain package exports."""

from tripgen.domain.catalog import Catalog
from tripgen.domain.constants import (
    DURATION_OPTIONS,
    INTEREST_CATEGORIES,
    MAX_TRIP_DAYS,
    MEAL_SLOT_LABEL,
    TIME_SLOT_LABELS,
)
from tripgen.domain.enums import PoiType
from tripgen.domain.exceptions import DomainError, ItineraryNotFound
from tripgen.domain.models import (
    Destination,
    GeneratedItinerary,
    ItineraryActivity,
    ItineraryDay,
    PointOfInterest,
    TravelPreferences,
)

__all__ = [
    "Catalog",
    "Destination",
    "DomainError",
    "GeneratedItinerary",
    "ItineraryActivity",
    "ItineraryDay",
    "ItineraryNotFound",
    "PointOfInterest",
    "PoiType",
    "TravelPreferences",
    "DURATION_OPTIONS",
    "INTEREST_CATEGORIES",
    "MAX_TRIP_DAYS",
    "MEAL_SLOT_LABEL",
    "TIME_SLOT_LABELS",
]
