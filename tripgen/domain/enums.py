"""Domain enums."""

from enum import Enum


class PoiType(str, Enum):
    ATTRACTION = "attraction"
    RESTAURANT = "restaurant"
    HOTEL = "hotel"
    ACTIVITY = "activity"
