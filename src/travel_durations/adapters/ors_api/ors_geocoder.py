"""openrouteservice geocoder adapter."""

import logging

from pydantic import ValidationError

from travel_durations.adapters.ors_api.constants import ORS_GEOCODE_SEARCH_PATH
from travel_durations.adapters.ors_api.http_client import OrsHttpClient
from travel_durations.adapters.ors_api.schemas import GeocodeResponse
from travel_durations.domain.errors import GeocodeError
from travel_durations.domain.models import Coordinate
from travel_durations.domain.ports.geocoder import Geocoder

logger = logging.getLogger(__name__)


class OrsGeocoder(Geocoder):
    """Resolves place names with the openrouteservice search endpoint."""

    def __init__(self, http_client: OrsHttpClient) -> None:
        self._http_client = http_client

    async def geocode(self, place: str) -> Coordinate:
        """Resolve a place name to the coordinate of the first search result.

        Raises:
            GeocodeError: If the request fails or has no usable first result.
        """
        params = {"api_key": self._http_client.api_key, "text": place}
        data = await self._http_client.get_path(ORS_GEOCODE_SEARCH_PATH, params, GeocodeError)

        try:
            response = GeocodeResponse.model_validate(data)
        except ValidationError as e:
            raise GeocodeError(f"Invalid geocoding response for '{place}'") from e

        if not response.features:
            raise GeocodeError(f"No geocoding result for '{place}'")

        longitude, latitude = response.features[0].geometry.coordinates[:2]
        logger.debug(f"Geocoded '{place}' to ({longitude}, {latitude})")
        return Coordinate(longitude=longitude, latitude=latitude)
