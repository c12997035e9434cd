"""openrouteservice driving directions adapter."""

import logging

from pydantic import ValidationError

from travel_durations.adapters.ors_api.constants import ORS_DIRECTIONS_DRIVING_PATH
from travel_durations.adapters.ors_api.http_client import OrsHttpClient
from travel_durations.adapters.ors_api.schemas import DirectionsResponse
from travel_durations.domain.errors import RouteError
from travel_durations.domain.models import Coordinate
from travel_durations.domain.ports.driving_route_repository import DrivingRouteRepository

logger = logging.getLogger(__name__)


class OrsDrivingRouteRepository(DrivingRouteRepository):
    """Requests car routes from the openrouteservice directions endpoint."""

    def __init__(self, http_client: OrsHttpClient) -> None:
        self._http_client = http_client

    async def get_driving_duration_seconds(
        self, origin: Coordinate, destination: Coordinate
    ) -> float:
        """Get the driving duration of the first route in seconds.

        Raises:
            RouteError: If the request fails or the response has no numeric
                ``routes[0].summary.duration``.
        """
        payload = {"coordinates": [origin.as_lon_lat(), destination.as_lon_lat()]}
        data = await self._http_client.post_path(ORS_DIRECTIONS_DRIVING_PATH, payload, RouteError)

        try:
            response = DirectionsResponse.model_validate(data)
        except ValidationError as e:
            raise RouteError("Missing or invalid duration") from e

        if not response.routes:
            raise RouteError("Missing or invalid duration")

        summary = response.routes[0].summary
        if summary is None or summary.duration is None:
            raise RouteError("Missing or invalid duration")

        return summary.duration
