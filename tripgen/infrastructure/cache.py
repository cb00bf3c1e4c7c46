"""Thread-safe, session-scoped preload cache of activity ids with TTL and simple eviction."""

from __future__ import annotations

import threading
import time
from typing import Any

from tripgen.domain.models import GeneratedItinerary


class ActivityPreloadCache:
    """Tracks, per client session, which activities should render ahead of navigation.

    Each session holds the activity ids of its most recent itinerary. Sessions
    expire ``default_ttl`` seconds after their last preload.
    """

    def __init__(self, default_ttl: float = 1800.0, max_sessions: int = 500):
        self._sessions: dict[str, tuple[float, frozenset[str]]] = {}
        self._default_ttl = default_ttl
        self._max_sessions = max_sessions
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    def _evict_locked(self) -> None:
        if len(self._sessions) < self._max_sessions:
            return
        items = sorted(self._sessions.items(), key=lambda x: x[1][0])
        for key, _ in items[: self._max_sessions // 10 + 1]:
            del self._sessions[key]

    def _live_ids_locked(self, session_id: str) -> frozenset[str]:
        entry = self._sessions.get(session_id)
        if entry is None:
            return frozenset()
        expire_at, activity_ids = entry
        if time.time() > expire_at:
            del self._sessions[session_id]
            return frozenset()
        return activity_ids

    def preload_itinerary(self, session_id: str, itinerary: GeneratedItinerary) -> list[str]:
        """Replace the session's preloaded set with every activity of ``itinerary``."""
        activity_ids = itinerary.activity_ids()
        with self._lock:
            if session_id not in self._sessions:
                self._evict_locked()
            self._sessions[session_id] = (time.time() + self._default_ttl, frozenset(activity_ids))
        return activity_ids

    def is_preloaded(self, session_id: str, activity_id: str) -> bool:
        with self._lock:
            if activity_id in self._live_ids_locked(session_id):
                self._hits += 1
                return True
            self._misses += 1
            return False

    def preloaded_ids(self, session_id: str) -> set[str]:
        with self._lock:
            return set(self._live_ids_locked(session_id))

    def clear(self, session_id: str | None = None) -> None:
        with self._lock:
            if session_id is not None:
                self._sessions.pop(session_id, None)
                return
            self._sessions.clear()
            self._hits = 0
            self._misses = 0

    @property
    def stats(self) -> dict[str, Any]:
        with self._lock:
            total = self._hits + self._misses
            return {
                "sessions": len(self._sessions),
                "hits": self._hits,
                "misses": self._misses,
                "hit_rate": round(self._hits / total, 3) if total > 0 else 0.0,
            }
