"""SQLite implementation for saved itineraries."""

from __future__ import annotations

import datetime as dt
import json
import sqlite3
import threading
import uuid
from pathlib import Path
from typing import Any

from tripgen.domain.exceptions import ItineraryNotFound
from tripgen.persistence.models import SavedItineraryRecord, SavedItineraryUpdate
from tripgen.shared.exceptions import PersistenceError

_COLUMNS = (
    "itinerary_id, user_id, title, destination, start_date, end_date, total_days,"
    " preferences_json, days_json, created_at, updated_at, is_public, likes, tags_json"
)


def _to_json(payload: Any) -> str:
    return json.dumps(payload, ensure_ascii=False, separators=(",", ":"), default=str)


def _from_json(raw: str | None, default: Any) -> Any:
    if not raw:
        return default
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return default


def _now() -> str:
    return dt.datetime.now(dt.timezone.utc).isoformat()


def _row_to_record(row: tuple) -> SavedItineraryRecord:
    return SavedItineraryRecord(
        id=row[0],
        user_id=row[1],
        title=row[2],
        destination=row[3],
        start_date=row[4],
        end_date=row[5],
        total_days=int(row[6]),
        preferences=_from_json(row[7], {}),
        days=_from_json(row[8], []),
        created_at=row[9],
        updated_at=row[10],
        is_public=bool(row[11]),
        likes=int(row[12] or 0),
        tags=_from_json(row[13], []),
    )


class SQLiteItineraryRepository:
    backend = "sqlite"

    def __init__(self, db_path: str | Path) -> None:
        self._db_path = Path(db_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._lock = threading.Lock()
        self._init_schema()

    def _connect(self) -> sqlite3.Connection:
        try:
            conn = sqlite3.connect(self._db_path, timeout=5.0)
        except sqlite3.Error as exc:
            raise PersistenceError(f"Cannot open itinerary store {self._db_path}: {exc}") from exc
        conn.execute("PRAGMA journal_mode=WAL;")
        return conn

    def _init_schema(self) -> None:
        with self._lock, self._connect() as conn:
            conn.executescript(
                """
                CREATE TABLE IF NOT EXISTS itineraries (
                    itinerary_id TEXT PRIMARY KEY,
                    user_id TEXT NOT NULL,
                    title TEXT NOT NULL,
                    destination TEXT NOT NULL,
                    start_date TEXT NOT NULL,
                    end_date TEXT NOT NULL,
                    total_days INTEGER NOT NULL,
                    preferences_json TEXT NOT NULL,
                    days_json TEXT NOT NULL,
                    created_at TEXT NOT NULL,
                    updated_at TEXT NOT NULL,
                    is_public INTEGER NOT NULL DEFAULT 0,
                    likes INTEGER NOT NULL DEFAULT 0,
                    tags_json TEXT NOT NULL
                );

                CREATE INDEX IF NOT EXISTS idx_itineraries_user_id ON itineraries(user_id);
                CREATE INDEX IF NOT EXISTS idx_itineraries_public ON itineraries(is_public, likes);
                """
            )

    def save(self, record: SavedItineraryRecord) -> str:
        itinerary_id = record.id or uuid.uuid4().hex
        now = _now()
        created_at = record.created_at or now
        with self._lock, self._connect() as conn:
            conn.execute(
                f"""
                INSERT OR REPLACE INTO itineraries ({_COLUMNS})
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    itinerary_id,
                    record.user_id,
                    record.title,
                    record.destination,
                    record.start_date.isoformat(),
                    record.end_date.isoformat(),
                    record.total_days,
                    _to_json(record.preferences.model_dump(mode="json")),
                    _to_json([day.model_dump(mode="json") for day in record.days]),
                    created_at,
                    now,
                    int(record.is_public),
                    max(0, record.likes),
                    _to_json(record.tags),
                ),
            )
        return itinerary_id

    def get(self, itinerary_id: str) -> SavedItineraryRecord | None:
        with self._lock, self._connect() as conn:
            row = conn.execute(
                f"SELECT {_COLUMNS} FROM itineraries WHERE itinerary_id = ?",
                (itinerary_id,),
            ).fetchone()
        return _row_to_record(row) if row else None

    def list_for_user(self, user_id: str) -> list[SavedItineraryRecord]:
        with self._lock, self._connect() as conn:
            rows = conn.execute(
                f"SELECT {_COLUMNS} FROM itineraries WHERE user_id = ? ORDER BY created_at DESC",
                (user_id,),
            ).fetchall()
        return [_row_to_record(row) for row in rows]

    def update(self, itinerary_id: str, changes: SavedItineraryUpdate) -> SavedItineraryRecord:
        assignments: list[str] = []
        params: list[Any] = []
        if changes.title is not None:
            assignments.append("title = ?")
            params.append(changes.title)
        if changes.is_public is not None:
            assignments.append("is_public = ?")
            params.append(int(changes.is_public))
        if changes.tags is not None:
            assignments.append("tags_json = ?")
            params.append(_to_json(changes.tags))
        if changes.preferences is not None:
            assignments.append("preferences_json = ?")
            params.append(_to_json(changes.preferences.model_dump(mode="json")))
        if changes.start_date is not None:
            assignments.append("start_date = ?")
            params.append(changes.start_date.isoformat())
        if changes.end_date is not None:
            assignments.append("end_date = ?")
            params.append(changes.end_date.isoformat())
        assignments.append("updated_at = ?")
        params.append(_now())

        # Column-level write; the likes column belongs to toggle_like.
        with self._lock, self._connect() as conn:
            cursor = conn.execute(
                f"UPDATE itineraries SET {', '.join(assignments)} WHERE itinerary_id = ?",
                (*params, itinerary_id),
            )
            if cursor.rowcount == 0:
                raise ItineraryNotFound(itinerary_id)
            row = conn.execute(
                f"SELECT {_COLUMNS} FROM itineraries WHERE itinerary_id = ?",
                (itinerary_id,),
            ).fetchone()
        return _row_to_record(row)

    def delete(self, itinerary_id: str) -> bool:
        with self._lock, self._connect() as conn:
            cursor = conn.execute("DELETE FROM itineraries WHERE itinerary_id = ?", (itinerary_id,))
            return cursor.rowcount > 0

    def list_public(self, limit: int = 10) -> list[SavedItineraryRecord]:
        safe_limit = max(1, min(limit, 100))
        with self._lock, self._connect() as conn:
            rows = conn.execute(
                f"""
                SELECT {_COLUMNS} FROM itineraries
                WHERE is_public = 1
                ORDER BY likes DESC, created_at DESC
                LIMIT ?
                """,
                (safe_limit,),
            ).fetchall()
        return [_row_to_record(row) for row in rows]

    def toggle_like(self, itinerary_id: str, increment: bool) -> None:
        delta = 1 if increment else -1
        with self._lock, self._connect() as conn:
            conn.execute(
                """
                UPDATE itineraries
                SET likes = MAX(0, likes + ?), updated_at = ?
                WHERE itinerary_id = ?
                """,
                (delta, _now(), itinerary_id),
            )


__all__ = ["SQLiteItineraryRepository"]
