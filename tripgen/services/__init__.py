"""Service layer public exports."""

from tripgen.services.export_formatter import render_itinerary_markdown
from tripgen.services.itinerary_service import generate, save_generated

__all__ = ["generate", "render_itinerary_markdown", "save_generated"]
