"""Application context for dependency injection."""

from __future__ import annotations

import random
import time
from dataclasses import dataclass
from typing import Callable, Optional

from tripgen.adapters.catalog.mock import load_catalog
from tripgen.config.settings import Settings, resolve_settings
from tripgen.domain.catalog import Catalog
from tripgen.domain.planning.generator import ItineraryGenerator
from tripgen.infrastructure.cache import ActivityPreloadCache
from tripgen.infrastructure.logging import StructuredLogger, get_logger
from tripgen.persistence.repository import ItineraryRepository, get_itinerary_repository


@dataclass
class AppContext:
    catalog: Catalog
    generator: ItineraryGenerator
    repository: ItineraryRepository
    preload_cache: ActivityPreloadCache
    logger: StructuredLogger
    settings: Settings
    sleep: Callable[[float], None] = time.sleep


def build_app_context(settings: Optional[Settings] = None) -> AppContext:
    resolved = settings or resolve_settings()
    logger = get_logger()
    catalog = load_catalog(resolved.catalog_file)
    rng = random.Random(resolved.random_seed) if resolved.random_seed is not None else None
    return AppContext(
        catalog=catalog,
        generator=ItineraryGenerator(catalog, rng=rng, logger=logger),
        repository=get_itinerary_repository(resolved),
        preload_cache=ActivityPreloadCache(default_ttl=resolved.preload_ttl_seconds),
        logger=logger,
        settings=resolved,
    )


__all__ = ["AppContext", "build_app_context"]
