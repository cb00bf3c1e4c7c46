"""pytest shared fixtures: pinned clock, pinned meal pick, isolated env."""

from __future__ import annotations

import datetime as dt
import io

import pytest

from tripgen.adapters.catalog.mock import load_catalog
from tripgen.application.context import AppContext
from tripgen.config.settings import Settings
from tripgen.domain.catalog import Catalog
from tripgen.domain.planning.generator import ItineraryGenerator
from tripgen.infrastructure.cache import ActivityPreloadCache
from tripgen.infrastructure.logging import StructuredLogger
from tripgen.persistence.sqlite_repository import SQLiteItineraryRepository

FIXED_DAY = dt.date(2026, 10, 19)


class FixedIndexRng:
    """Always returns the same index (wrapped into range)."""

    def __init__(self, index: int = 0) -> None:
        self.index = index
        self.calls: list[int] = []

    def randrange(self, stop: int) -> int:
        self.calls.append(stop)
        return self.index % stop


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    for name in (
        "TRIPGEN_CATALOG_FILE",
        "TRIPGEN_PERSISTENCE_ENABLED",
        "TRIPGEN_DB_PATH",
        "TRIPGEN_GENERATION_DELAY_MS",
        "TRIPGEN_RANDOM_SEED",
        "TRIPGEN_PRELOAD_TTL_SECONDS",
        "CORS_ORIGINS",
        "ENABLE_DOCS",
    ):
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture
def catalog() -> Catalog:
    return load_catalog()


@pytest.fixture
def fixed_rng() -> FixedIndexRng:
    return FixedIndexRng(0)


@pytest.fixture
def log_stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def logger(log_stream) -> StructuredLogger:
    return StructuredLogger(trace_id="test", output=log_stream)


@pytest.fixture
def generator(catalog, fixed_rng, logger) -> ItineraryGenerator:
    return ItineraryGenerator(catalog, rng=fixed_rng, clock=lambda: FIXED_DAY, logger=logger)


@pytest.fixture
def app_ctx(tmp_path, catalog, generator, logger) -> AppContext:
    settings = Settings(db_path=str(tmp_path / "tripgen.sqlite3"))
    return AppContext(
        catalog=catalog,
        generator=generator,
        repository=SQLiteItineraryRepository(settings.db_path),
        preload_cache=ActivityPreloadCache(default_ttl=settings.preload_ttl_seconds),
        logger=logger,
        settings=settings,
        sleep=lambda _seconds: None,
    )
