"""Read-only destination catalog."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional

from tripgen.domain.models import Destination


class Catalog:
    """Lookup table of destinations keyed by their exact id."""

    def __init__(self, destinations: Iterable[Destination]):
        self._destinations = tuple(destinations)
        self._by_id: dict[str, Destination] = {}
        for dest in self._destinations:
            if dest.id in self._by_id:
                raise ValueError(f"duplicate destination id: {dest.id}")
            self._by_id[dest.id] = dest

    @property
    def destinations(self) -> tuple[Destination, ...]:
        return self._destinations

    def resolve(self, destination_id: str) -> Optional[Destination]:
        return self._by_id.get(destination_id)

    def destination_options(self) -> list[dict[str, str]]:
        return [
            {"label": f"{dest.name}, {dest.country}" if dest.country else dest.name, "value": dest.id}
            for dest in self._destinations
        ]

    def __len__(self) -> int:
        return len(self._destinations)

    def __contains__(self, destination_id: object) -> bool:
        return destination_id in self._by_id
