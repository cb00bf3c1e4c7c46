"""Pydantic domain models."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from tripgen.domain.enums import PoiType


class PointOfInterest(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    latitude: float = 0.0
    longitude: float = 0.0
    type: PoiType
    category: list[str] = Field(default_factory=list)
    description: str = ""
    rating: float = 0.0
    duration: float = Field(default=1.0, gt=0)
    image_url: Optional[str] = None


class Destination(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    country: str = ""
    latitude: float = 0.0
    longitude: float = 0.0
    locations: list[PointOfInterest] = Field(default_factory=list)

    @field_validator("locations")
    @classmethod
    def _unique_poi_ids(cls, locations: list[PointOfInterest]) -> list[PointOfInterest]:
        seen: set[str] = set()
        for poi in locations:
            if poi.id in seen:
                raise ValueError(f"duplicate point of interest id: {poi.id}")
            seen.add(poi.id)
        return locations

    def of_type(self, poi_type: PoiType) -> list[PointOfInterest]:
        return [poi for poi in self.locations if poi.type == poi_type]

    def attractions(self) -> list[PointOfInterest]:
        return self.of_type(PoiType.ATTRACTION)

    def restaurants(self) -> list[PointOfInterest]:
        return self.of_type(PoiType.RESTAURANT)


class TravelPreferences(BaseModel):
    model_config = ConfigDict(frozen=True)

    destination_id: str = ""
    interests: str = ""
    duration: str = ""


class ItineraryActivity(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    type: PoiType
    category: list[str] = Field(default_factory=list)
    description: str = ""
    latitude: float = 0.0
    longitude: float = 0.0
    duration: float = 0.0
    rating: float = 0.0
    time_slot: str = ""
    image_url: Optional[str] = None

    @classmethod
    def from_poi(
        cls,
        poi: PointOfInterest,
        *,
        time_slot: str,
        activity_id: Optional[str] = None,
    ) -> "ItineraryActivity":
        return cls(
            id=activity_id or poi.id,
            name=poi.name,
            type=poi.type,
            category=list(poi.category),
            description=poi.description,
            latitude=poi.latitude,
            longitude=poi.longitude,
            duration=poi.duration,
            rating=poi.rating,
            time_slot=time_slot,
            image_url=poi.image_url,
        )


class ItineraryDay(BaseModel):
    model_config = ConfigDict(frozen=True)

    day: int = Field(default=1, ge=1)
    date: str = ""
    activities: list[ItineraryActivity] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_duration(self) -> float:
        return sum(activity.duration for activity in self.activities)

    def with_activity(self, activity: ItineraryActivity) -> "ItineraryDay":
        """Return a copy of this day with ``activity`` appended."""
        return self.model_copy(update={"activities": [*self.activities, activity]})


class GeneratedItinerary(BaseModel):
    model_config = ConfigDict(frozen=True)

    destination: Destination
    days: list[ItineraryDay] = Field(default_factory=list)
    total_days: int = Field(ge=1)
    preferences: TravelPreferences

    def activity_ids(self) -> list[str]:
        return [activity.id for day in self.days for activity in day.activities]
