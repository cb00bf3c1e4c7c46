"""Application wiring layer."""

from tripgen.application.context import AppContext, build_app_context

__all__ = ["AppContext", "build_app_context"]
