"""Application service for itinerary use-cases."""

from __future__ import annotations

import datetime as dt
from typing import Optional

from tripgen.application.context import AppContext
from tripgen.domain.models import GeneratedItinerary
from tripgen.persistence.mapping import to_saved_record


def generate(
    ctx: AppContext,
    destination_id: str,
    interests: str,
    duration: str,
    *,
    session_id: Optional[str] = None,
) -> Optional[GeneratedItinerary]:
    """Run the generator and preload the result's activities for ``session_id``.

    ``None`` means the request could not be satisfied (unknown destination
    or invalid duration); callers surface their own message. Without a
    session nothing is preloaded.
    """
    delay_ms = ctx.settings.generation_delay_ms
    if delay_ms > 0:
        ctx.sleep(delay_ms / 1000.0)

    itinerary = ctx.generator.generate_itinerary(destination_id, interests, duration)
    if itinerary is None:
        ctx.logger.summary(outcome="rejected", destination_id=destination_id, duration=duration)
        return None

    if session_id is not None:
        ctx.preload_cache.preload_itinerary(session_id, itinerary)
    ctx.logger.summary(
        outcome="generated",
        destination_id=destination_id,
        total_days=itinerary.total_days,
        activities=len(itinerary.activity_ids()),
    )
    return itinerary


def save_generated(
    ctx: AppContext,
    itinerary: GeneratedItinerary,
    user_id: str,
    *,
    is_public: bool = False,
    today: Optional[dt.date] = None,
) -> str:
    record = to_saved_record(itinerary, user_id, today=today, is_public=is_public)
    itinerary_id = ctx.repository.save(record)
    ctx.logger.event(
        "itinerary_saved",
        itinerary_id=itinerary_id,
        user_id=user_id,
        backend=ctx.repository.backend,
    )
    return itinerary_id


__all__ = ["generate", "save_generated"]
