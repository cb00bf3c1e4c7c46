"""tripgen: catalog-driven itinerary generation."""

__version__ = "1.0.0"
