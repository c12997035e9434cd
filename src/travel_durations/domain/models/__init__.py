"""Domain models for travel durations."""

from travel_durations.domain.models.connection import Connection, Journey, Section
from travel_durations.domain.models.coordinate import Coordinate

__all__ = [
    "Connection",
    "Coordinate",
    "Journey",
    "Section",
]
