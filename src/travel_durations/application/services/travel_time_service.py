"""Use cases for the rail and driving travel-time chains."""

import logging
import math
from typing import TYPE_CHECKING

from travel_durations.application.services.connection_selection_service import (
    ConnectionSelector,
)
from travel_durations.application.services.itinerary_formatter import ItineraryFormatter

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from travel_durations.domain.ports import (
        ConnectionRepository,
        DrivingRouteRepository,
        Geocoder,
    )

DEFAULT_CONNECTION_LIMIT = 5


def round_minutes(seconds: float) -> int:
    """Convert seconds to whole minutes, rounding halves away from zero."""
    minutes = seconds / 60
    return int(math.copysign(math.floor(abs(minutes) + 0.5), minutes))


class TravelTimeService:
    """Service computing the train itinerary and the driving time between two places.

    The two chains share no state; each can be awaited on its own and fails
    with its own error type.
    """

    def __init__(
        self,
        connection_repository: "ConnectionRepository",
        geocoder: "Geocoder",
        route_repository: "DrivingRouteRepository",
        selector: ConnectionSelector | None = None,
        formatter: ItineraryFormatter | None = None,
        connection_limit: int = DEFAULT_CONNECTION_LIMIT,
    ) -> None:
        """Initialize with the repositories backing each chain."""
        self._connection_repository = connection_repository
        self._geocoder = geocoder
        self._route_repository = route_repository
        self._selector = selector or ConnectionSelector()
        self._formatter = formatter or ItineraryFormatter()
        self._connection_limit = connection_limit

    async def get_rail_itinerary(self, origin: str, destination: str) -> list[str]:
        """Fetch candidate connections, pick the best and render it.

        Raises:
            TransitError: If connections cannot be fetched or none is usable.
        """
        connections = await self._connection_repository.get_connections(
            origin, destination, limit=self._connection_limit
        )
        logger.info(f"Received {len(connections)} connection(s) from {origin} to {destination}")

        best = self._selector.select_best(connections)
        return self._formatter.format(best)

    async def get_driving_minutes(self, origin: str, destination: str) -> int:
        """Geocode both places and return the driving duration in minutes.

        Raises:
            GeocodeError: If either place cannot be resolved.
            RouteError: If no driving duration is available.
        """
        origin_coord = await self._geocoder.geocode(origin)
        destination_coord = await self._geocoder.geocode(destination)
        logger.debug(f"Geocoded {origin} -> {origin_coord}, {destination} -> {destination_coord}")

        seconds = await self._route_repository.get_driving_duration_seconds(
            origin_coord, destination_coord
        )
        return round_minutes(seconds)
