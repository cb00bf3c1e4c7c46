"""Catalog adapters."""

from tripgen.adapters.catalog.mock import DATA_FILE, load_catalog

__all__ = ["DATA_FILE", "load_catalog"]
