"""Itinerary generation facade: selection, bucketing and meals."""

from __future__ import annotations

import random
import re
from datetime import date
from typing import Any, Callable, Optional, Protocol

from tripgen.domain.catalog import Catalog
from tripgen.domain.constants import MAX_TRIP_DAYS
from tripgen.domain.models import GeneratedItinerary, TravelPreferences
from tripgen.domain.planning.scheduling import RandomSource, add_meals, distribute_across_days
from tripgen.domain.planning.selection import select_candidates

Clock = Callable[[], date]

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


class GenerationLog(Protocol):
    def start(self, step: str, **extra: Any) -> None: ...

    def end(self, step: str, **extra: Any) -> None: ...

    def warning(self, step: str, message: str, **extra: Any) -> None: ...


class _SilentLog:
    def start(self, step: str, **extra: Any) -> None:
        _ = (step, extra)

    def end(self, step: str, **extra: Any) -> None:
        _ = (step, extra)

    def warning(self, step: str, message: str, **extra: Any) -> None:
        _ = (step, message, extra)


def parse_duration(text: str) -> Optional[int]:
    """Parse the leading base-10 integer of ``text`` as a day count.

    Trailing text is ignored (``"2 days"`` is 2). ``None`` unless the count is
    between 1 and ``MAX_TRIP_DAYS``.
    """
    match = _LEADING_INT.match(str(text or ""))
    if match is None:
        return None
    days = int(match.group(1))
    return days if 0 < days <= MAX_TRIP_DAYS else None


class ItineraryGenerator:
    """Builds multi-day itineraries from a destination catalog.

    ``rng`` supplies the meal pick and ``clock`` the first day's date; both
    default to real sources and can be pinned for reproducible output.
    """

    def __init__(
        self,
        catalog: Catalog,
        *,
        rng: Optional[RandomSource] = None,
        clock: Optional[Clock] = None,
        logger: Optional[GenerationLog] = None,
    ):
        self._catalog = catalog
        self._rng = rng if rng is not None else random.Random()
        self._clock = clock or date.today
        self._logger = logger or _SilentLog()

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    @property
    def logger(self) -> GenerationLog:
        return self._logger

    def generate_itinerary(
        self,
        destination_id: str,
        interest_text: str,
        duration_text: str,
    ) -> Optional[GeneratedItinerary]:
        log = self.logger
        log.start("generation", destination_id=destination_id, interests=interest_text, duration=duration_text)

        destination = self._catalog.resolve(destination_id)
        if destination is None:
            log.warning("generation", "unknown destination", destination_id=destination_id)
            return None

        total_days = parse_duration(duration_text)
        if total_days is None:
            log.warning("generation", "invalid duration", duration=duration_text)
            return None

        selected, used_fallback = select_candidates(destination, interest_text, total_days)
        if used_fallback:
            log.warning(
                "generation",
                "no interest match, using attractions",
                destination_id=destination_id,
                interests=interest_text,
            )

        days = distribute_across_days(selected, total_days, start_date=self._clock())
        days = add_meals(days, destination, self._rng)

        itinerary = GeneratedItinerary(
            destination=destination,
            days=days,
            total_days=total_days,
            preferences=TravelPreferences(
                destination_id=destination_id,
                interests=interest_text,
                duration=duration_text,
            ),
        )
        log.end(
            "generation",
            destination_id=destination_id,
            total_days=total_days,
            selected=len(selected),
            activities=len(itinerary.activity_ids()),
        )
        return itinerary


__all__ = ["Clock", "GenerationLog", "ItineraryGenerator", "parse_duration"]
