"""Catalog loading and lookup."""

from __future__ import annotations

import json

import pytest

from tripgen.adapters.catalog.mock import load_catalog
from tripgen.shared.exceptions import CatalogError


def test_bundled_catalog_destinations(catalog):
    assert [d.id for d in catalog.destinations] == ["accra", "cape-coast", "kumasi"]
    accra = catalog.resolve("accra")
    assert accra is not None
    assert len(accra.locations) == 12
    assert [r.id for r in accra.restaurants()] == ["buka-restaurant", "republic-bar"]
    assert catalog.resolve("cape-coast").restaurants() == []


def test_resolve_is_exact_and_returns_none_for_unknown(catalog):
    assert catalog.resolve("ACCRA") is None
    assert catalog.resolve("atlantis") is None
    assert "kumasi" in catalog


def test_destination_options(catalog):
    assert catalog.destination_options()[0] == {"label": "Accra, Ghana", "value": "accra"}


def test_load_catalog_from_custom_file(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(
        json.dumps(
            [
                {
                    "id": "lome",
                    "name": "Lome",
                    "country": "Togo",
                    "locations": [
                        {"id": "market", "name": "Grand Marche", "type": "attraction", "category": ["Shopping"]}
                    ],
                }
            ]
        ),
        encoding="utf-8",
    )

    catalog = load_catalog(path)

    assert catalog.resolve("lome").locations[0].name == "Grand Marche"


def test_load_catalog_rejects_unknown_poi_type(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(
        json.dumps([{"id": "x", "name": "X", "locations": [{"id": "p", "name": "P", "type": "museum"}]}]),
        encoding="utf-8",
    )

    with pytest.raises(CatalogError):
        load_catalog(path)


def test_load_catalog_missing_or_malformed_file(tmp_path):
    with pytest.raises(CatalogError):
        load_catalog(tmp_path / "missing.json")

    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    with pytest.raises(CatalogError):
        load_catalog(broken)


def _poi_entry(pid: str) -> dict:
    return {"id": pid, "name": pid.title(), "type": "attraction", "category": ["History"]}


def test_load_catalog_rejects_duplicate_poi_ids(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(
        json.dumps([{"id": "x", "name": "X", "locations": [_poi_entry("dup"), _poi_entry("dup")]}]),
        encoding="utf-8",
    )

    with pytest.raises(CatalogError, match="duplicate point of interest id: dup"):
        load_catalog(path)


def test_load_catalog_rejects_duplicate_destination_ids(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(
        json.dumps(
            [
                {"id": "x", "name": "First", "locations": [_poi_entry("a")]},
                {"id": "x", "name": "Second", "locations": [_poi_entry("b")]},
            ]
        ),
        encoding="utf-8",
    )

    with pytest.raises(CatalogError, match="duplicate destination id: x"):
        load_catalog(path)


def test_same_poi_id_allowed_in_different_destinations(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(
        json.dumps(
            [
                {"id": "x", "name": "X", "locations": [_poi_entry("market")]},
                {"id": "y", "name": "Y", "locations": [_poi_entry("market")]},
            ]
        ),
        encoding="utf-8",
    )

    assert len(load_catalog(path)) == 2
