"""Driving route repository port."""

from typing import Protocol

from travel_durations.domain.models.coordinate import Coordinate


class DrivingRouteRepository(Protocol):
    """Port for retrieving driving durations between two coordinates."""

    async def get_driving_duration_seconds(
        self, origin: Coordinate, destination: Coordinate
    ) -> float:
        """Get the total driving duration in seconds."""
        ...
