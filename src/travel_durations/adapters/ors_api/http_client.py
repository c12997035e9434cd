"""HTTP client for openrouteservice requests."""

from typing import TYPE_CHECKING, Any

from travel_durations.adapters.json_http_client import JsonHttpClient
from travel_durations.adapters.ors_api.constants import ORS_DEFAULT_BASE_URL
from travel_durations.domain.errors import TravelDurationError

if TYPE_CHECKING:
    from aiohttp import ClientSession


class OrsHttpClient(JsonHttpClient):
    """JSON client bound to the openrouteservice base URL and API key."""

    def __init__(
        self,
        session: "ClientSession",
        api_key: str,
        base_url: str = ORS_DEFAULT_BASE_URL,
    ) -> None:
        """Initialize with an aiohttp session and the API key."""
        super().__init__(session, service_name="openrouteservice")
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")

    @property
    def api_key(self) -> str:
        return self._api_key

    def url(self, path: str) -> str:
        return f"{self._base_url}{path}"

    async def get_path(
        self,
        path: str,
        params: dict[str, str],
        error_cls: type[TravelDurationError],
    ) -> Any:
        """GET a path below the base URL."""
        return await self.get_json(self.url(path), params, error_cls)

    async def post_path(
        self,
        path: str,
        payload: dict[str, Any],
        error_cls: type[TravelDurationError],
    ) -> Any:
        """POST to a path below the base URL with the API key header."""
        return await self.post_json(
            self.url(path), payload, error_cls, headers={"Authorization": self._api_key}
        )
