"""Catalog adapter loading local JSON data."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from tripgen.domain.catalog import Catalog
from tripgen.domain.models import Destination
from tripgen.shared.exceptions import CatalogError

DATA_FILE = Path(__file__).resolve().parents[2] / "data" / "catalog_v1.json"


def _load_data(path: Path) -> list[dict]:
    if not path.exists():
        raise CatalogError("catalog", f"Data file not found: {path}")
    try:
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
    except json.JSONDecodeError as exc:
        raise CatalogError("catalog", f"Malformed catalog file {path}: {exc}") from exc
    if not isinstance(raw, list):
        raise CatalogError("catalog", f"Expected a list of destinations in {path}")
    return raw


def load_catalog(path: Optional[str | Path] = None) -> Catalog:
    data_path = Path(path) if path else DATA_FILE
    try:
        destinations = [Destination.model_validate(item) for item in _load_data(data_path)]
    except ValidationError as exc:
        raise CatalogError("catalog", f"Invalid catalog entry in {data_path}: {exc}") from exc
    try:
        return Catalog(destinations)
    except ValueError as exc:
        raise CatalogError("catalog", f"Invalid catalog {data_path}: {exc}") from exc
