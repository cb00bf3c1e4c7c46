"""Domain semantic exceptions."""


class DomainError(Exception):
    """Base domain exception."""


class ItineraryNotFound(DomainError):
    """Raised when a saved itinerary id does not resolve."""

    def __init__(self, itinerary_id: str):
        self.itinerary_id = itinerary_id
        super().__init__(f"Itinerary not found: {itinerary_id}")
