"""API request/response models."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field

from tripgen.domain.models import GeneratedItinerary
from tripgen.persistence.models import SavedItineraryRecord

_USER_ID_PATTERN = r"^[A-Za-z0-9_.:@-]+$"


class GenerateRequest(BaseModel):
    destination_id: str = Field(min_length=1, max_length=64, description="Catalog destination id")
    interests: str = Field(default="", max_length=200, description="Interest tag, matched against POI categories")
    duration: str = Field(min_length=1, max_length=16, description="Trip length in days")
    session_id: Optional[str] = Field(
        default=None,
        max_length=64,
        pattern=_USER_ID_PATTERN,
        description="Client session whose preload set receives the itinerary's activities",
    )


class SaveRequest(GenerateRequest):
    user_id: str = Field(min_length=1, max_length=128, pattern=_USER_ID_PATTERN)
    is_public: bool = False


class SaveResponse(BaseModel):
    id: str
    itinerary: GeneratedItinerary


class UpdateRequest(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    is_public: Optional[bool] = None
    tags: Optional[list[str]] = None


class HealthResponse(BaseModel):
    status: str = "ok"
    preload: dict[str, Any] = Field(default_factory=dict)


class OptionItem(BaseModel):
    label: str
    value: str


class OptionsResponse(BaseModel):
    destinations: list[OptionItem] = Field(default_factory=list)
    interests: list[OptionItem] = Field(default_factory=list)
    durations: list[OptionItem] = Field(default_factory=list)


class SavedItineraryListResponse(BaseModel):
    items: list[SavedItineraryRecord] = Field(default_factory=list)


class PreloadResponse(BaseModel):
    session_id: str
    activity_ids: list[str] = Field(default_factory=list)


class PreloadStatusResponse(BaseModel):
    session_id: str
    activity_id: str
    preloaded: bool
