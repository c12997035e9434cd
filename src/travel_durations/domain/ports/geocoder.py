"""Geocoder port."""

from typing import Protocol

from travel_durations.domain.models.coordinate import Coordinate


class Geocoder(Protocol):
    """Port for resolving free-text place names to coordinates."""

    async def geocode(self, place: str) -> Coordinate:
        """Resolve a place name to its coordinate."""
        ...
