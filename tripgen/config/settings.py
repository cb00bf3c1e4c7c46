"""Runtime settings resolved from the environment."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

_TRUTHY = {"1", "true", "yes", "on"}
_DEFAULT_DB_PATH = Path("data") / "tripgen.sqlite3"


def _is_enabled(value: str | None, default: bool = False) -> bool:
    if value is None or not value.strip():
        return default
    return value.strip().lower() in _TRUTHY


def _int_env(name: str, default: int) -> int:
    raw = str(os.getenv(name) or "").strip()
    try:
        return int(raw) if raw else default
    except ValueError:
        return default


def _optional_int_env(name: str) -> Optional[int]:
    raw = str(os.getenv(name) or "").strip()
    try:
        return int(raw) if raw else None
    except ValueError:
        return None


class Settings(BaseModel):
    catalog_file: Optional[str] = Field(default=None)
    persistence_enabled: bool = Field(default=True)
    db_path: str = Field(default=str(_DEFAULT_DB_PATH))
    generation_delay_ms: int = Field(default=0, ge=0)
    random_seed: Optional[int] = Field(default=None)
    preload_ttl_seconds: float = Field(default=1800.0, gt=0)
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])
    enable_docs: bool = Field(default=False)


def resolve_settings() -> Settings:
    catalog_file = str(os.getenv("TRIPGEN_CATALOG_FILE") or "").strip() or None
    db_path = str(os.getenv("TRIPGEN_DB_PATH") or "").strip() or str(_DEFAULT_DB_PATH)
    origins = [item.strip() for item in os.getenv("CORS_ORIGINS", "*").split(",") if item.strip()]
    return Settings(
        catalog_file=catalog_file,
        persistence_enabled=_is_enabled(os.getenv("TRIPGEN_PERSISTENCE_ENABLED"), default=True),
        db_path=db_path,
        generation_delay_ms=max(0, _int_env("TRIPGEN_GENERATION_DELAY_MS", 0)),
        random_seed=_optional_int_env("TRIPGEN_RANDOM_SEED"),
        preload_ttl_seconds=max(1, _int_env("TRIPGEN_PRELOAD_TTL_SECONDS", 1800)),
        cors_origins=origins or ["*"],
        enable_docs=_is_enabled(os.getenv("ENABLE_DOCS")),
    )


__all__ = ["Settings", "resolve_settings"]
