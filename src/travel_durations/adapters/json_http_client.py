"""JSON HTTP client shared by the upstream API adapters."""

import logging
from typing import TYPE_CHECKING, Any

import aiohttp

from travel_durations.adapters.api_request_logger import log_api_request
from travel_durations.domain.errors import TravelDurationError

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession

DEFAULT_HEADERS = {
    "Accept": "application/json",
}


class JsonHttpClient:
    """Thin JSON client over an aiohttp session.

    Every failure (transport error, non-200 status, non-JSON body) is raised
    as the error type the caller passes in, so each request chain reports its
    own error.
    """

    def __init__(self, session: "ClientSession", service_name: str) -> None:
        """Initialize with an aiohttp session and a name used in messages."""
        self._session = session
        self._service_name = service_name

    async def _log_error_response(self, response: "ClientResponse", url: str) -> str:
        """Log error response details and return a short reason."""
        error_text = await response.text()
        error_body = error_text[:500] if error_text else "(empty response body)"
        content_type = response.headers.get("Content-Type", "unknown")
        logger.error(
            f"{self._service_name} returned status {response.status} for {url}: "
            f"{error_body} (Content-Type: {content_type})"
        )
        return f"{self._service_name} returned status {response.status}"

    async def _read_json(
        self,
        response: "ClientResponse",
        url: str,
        error_cls: type[TravelDurationError],
    ) -> Any:
        if response.status != 200:
            raise error_cls(await self._log_error_response(response, url))
        try:
            return await response.json(content_type=None)
        except ValueError as e:
            raise error_cls(f"Invalid JSON from {url}: {e}") from e

    async def get_json(
        self,
        url: str,
        params: dict[str, str],
        error_cls: type[TravelDurationError],
    ) -> Any:
        """GET a JSON document, raising ``error_cls`` on any failure."""
        log_api_request("GET", url, params=params, headers=DEFAULT_HEADERS)
        try:
            async with self._session.get(url, params=params, headers=DEFAULT_HEADERS) as response:
                return await self._read_json(response, url, error_cls)
        except (aiohttp.ClientError, TimeoutError) as e:
            raise error_cls(f"Request to {url} failed: {e}") from e

    async def post_json(
        self,
        url: str,
        payload: dict[str, Any],
        error_cls: type[TravelDurationError],
        headers: dict[str, str] | None = None,
    ) -> Any:
        """POST a JSON payload, raising ``error_cls`` on any failure."""
        request_headers = {**DEFAULT_HEADERS, **(headers or {})}
        log_api_request("POST", url, headers=request_headers, payload=payload)
        try:
            async with self._session.post(
                url, json=payload, headers=request_headers
            ) as response:
                return await self._read_json(response, url, error_cls)
        except (aiohttp.ClientError, TimeoutError) as e:
            raise error_cls(f"Request to {url} failed: {e}") from e
