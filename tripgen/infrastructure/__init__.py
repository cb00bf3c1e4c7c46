"""Infrastructure services and cross-cutting utilities."""

from tripgen.infrastructure.cache import ActivityPreloadCache
from tripgen.infrastructure.logging import StructuredLogger, get_logger

__all__ = ["ActivityPreloadCache", "StructuredLogger", "get_logger"]
