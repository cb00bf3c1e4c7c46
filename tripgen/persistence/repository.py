"""Persistence repository interface and factory."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from tripgen.config.settings import Settings
from tripgen.domain.exceptions import ItineraryNotFound
from tripgen.persistence.models import SavedItineraryRecord, SavedItineraryUpdate
from tripgen.persistence.sqlite_repository import SQLiteItineraryRepository


class ItineraryRepository(Protocol):
    backend: str

    def save(self, record: SavedItineraryRecord) -> str: ...

    def get(self, itinerary_id: str) -> SavedItineraryRecord | None: ...

    def list_for_user(self, user_id: str) -> list[SavedItineraryRecord]: ...

    def update(self, itinerary_id: str, changes: SavedItineraryUpdate) -> SavedItineraryRecord: ...

    def delete(self, itinerary_id: str) -> bool: ...

    def list_public(self, limit: int = 10) -> list[SavedItineraryRecord]: ...

    def toggle_like(self, itinerary_id: str, increment: bool) -> None: ...


class NoopItineraryRepository:
    backend = "noop"

    def save(self, record: SavedItineraryRecord) -> str:
        return record.id

    def get(self, itinerary_id: str) -> SavedItineraryRecord | None:
        _ = itinerary_id
        return None

    def list_for_user(self, user_id: str) -> list[SavedItineraryRecord]:
        _ = user_id
        return []

    def update(self, itinerary_id: str, changes: SavedItineraryUpdate) -> SavedItineraryRecord:
        _ = changes
        raise ItineraryNotFound(itinerary_id)

    def delete(self, itinerary_id: str) -> bool:
        _ = itinerary_id
        return False

    def list_public(self, limit: int = 10) -> list[SavedItineraryRecord]:
        _ = limit
        return []

    def toggle_like(self, itinerary_id: str, increment: bool) -> None:
        _ = (itinerary_id, increment)


def get_itinerary_repository(settings: Settings) -> ItineraryRepository:
    if not settings.persistence_enabled:
        return NoopItineraryRepository()
    return SQLiteItineraryRepository(Path(settings.db_path))


__all__ = [
    "ItineraryRepository",
    "NoopItineraryRepository",
    "get_itinerary_repository",
]
