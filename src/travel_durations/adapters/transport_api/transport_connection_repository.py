"""transport.opendata.ch connection repository adapter."""

import logging
from typing import TYPE_CHECKING

from travel_durations.adapters.json_http_client import JsonHttpClient
from travel_durations.adapters.transport_api.connection_parser import ConnectionParser
from travel_durations.adapters.transport_api.constants import (
    TRANSPORT_CONNECTIONS_PATH,
    TRANSPORT_DEFAULT_BASE_URL,
)
from travel_durations.domain.errors import TransitError
from travel_durations.domain.models import Connection
from travel_durations.domain.ports.connection_repository import ConnectionRepository

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession


class TransportConnectionRepository(ConnectionRepository):
    """Adapter for the transport.opendata.ch connections endpoint."""

    def __init__(
        self,
        session: "ClientSession",
        base_url: str = TRANSPORT_DEFAULT_BASE_URL,
    ) -> None:
        """Initialize with an aiohttp session."""
        self._http_client = JsonHttpClient(session, service_name="Transport API")
        self._base_url = base_url.rstrip("/")

    async def get_connections(
        self, origin: str, destination: str, limit: int = 5
    ) -> list[Connection]:
        """Get up to ``limit`` candidate connections between two places.

        Args:
            origin: Departure place or station name.
            destination: Arrival place or station name.
            limit: Maximum number of connections to request.

        Returns:
            Connections in the order the API returned them.

        Raises:
            TransitError: If the request fails or the response has no
                parseable connections array.
        """
        url = f"{self._base_url}{TRANSPORT_CONNECTIONS_PATH}"
        params = {"from": origin, "to": destination, "limit": str(limit)}
        data = await self._http_client.get_json(url, params, TransitError)

        connections = ConnectionParser.parse_response(data)
        logger.debug(f"Parsed {len(connections)} connection(s) from {url}")
        return connections
