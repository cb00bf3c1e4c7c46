"""Runtime configuration helpers."""

from tripgen.config.settings import Settings, resolve_settings

__all__ = ["Settings", "resolve_settings"]
