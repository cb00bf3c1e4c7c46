"""Shared cross-layer types and exceptions."""

from tripgen.shared.exceptions import CatalogError, PersistenceError

__all__ = ["CatalogError", "PersistenceError"]
