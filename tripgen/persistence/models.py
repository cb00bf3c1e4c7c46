"""Persistence-layer record schemas."""

from __future__ import annotations

import datetime as dt
from typing import Optional

from pydantic import BaseModel, Field

from tripgen.domain.enums import PoiType


class SavedActivityRecord(BaseModel):
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
    estimated_cost: Optional[float] = None
    booking_required: Optional[bool] = None
    website: Optional[str] = None
    phone_number: Optional[str] = None
    address: Optional[str] = None


class SavedDayRecord(BaseModel):
    day: int
    date: str = ""
    activities: list[SavedActivityRecord] = Field(default_factory=list)
    total_duration: float = 0.0
    estimated_cost: Optional[float] = None


class SavedPreferences(BaseModel):
    interests: str = ""
    duration: str = ""
    budget: Optional[str] = None


class SavedItineraryRecord(BaseModel):
    id: str = ""
    user_id: str
    title: str
    destination: str
    start_date: dt.date
    end_date: dt.date
    total_days: int
    preferences: SavedPreferences = Field(default_factory=SavedPreferences)
    days: list[SavedDayRecord] = Field(default_factory=list)
    created_at: str = ""
    updated_at: str = ""
    is_public: bool = False
    likes: int = 0
    tags: list[str] = Field(default_factory=list)


class SavedItineraryUpdate(BaseModel):
    title: Optional[str] = None
    is_public: Optional[bool] = None
    tags: Optional[list[str]] = None
    preferences: Optional[SavedPreferences] = None
    start_date: Optional[dt.date] = None
    end_date: Optional[dt.date] = None


__all__ = [
    "SavedActivityRecord",
    "SavedDayRecord",
    "SavedItineraryRecord",
    "SavedItineraryUpdate",
    "SavedPreferences",
]
