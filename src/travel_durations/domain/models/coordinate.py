"""Coordinate domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Coordinate:
    """A geographic position in (longitude, latitude) order."""

    longitude: float
    latitude: float

    def as_lon_lat(self) -> list[float]:
        """Return the position as a ``[lon, lat]`` pair for routing requests."""
        return [self.longitude, self.latitude]
