"""Tests for the shared JSON HTTP client."""

import aiohttp
import pytest

from travel_durations.adapters.json_http_client import JsonHttpClient
from travel_durations.domain.errors import GeocodeError, RouteError, TransitError

URL = "https://example.test/v1/resource"


@pytest.mark.asyncio
async def test_get_json_returns_body_and_sends_accept_header(make_response, make_session) -> None:
    """Given a 200 JSON response, when getting, then the body is returned as parsed."""
    session = make_session(make_response(json_data={"ok": True}))
    client = JsonHttpClient(session, service_name="Example API")

    assert await client.get_json(URL, {"q": "Bern"}, TransitError) == {"ok": True}
    _, kwargs = session.get.call_args
    assert kwargs["params"] == {"q": "Bern"}
    assert kwargs["headers"] == {"Accept": "application/json"}


@pytest.mark.asyncio
async def test_post_json_merges_extra_headers(make_response, make_session) -> None:
    """Given extra headers, when posting, then they are sent alongside Accept."""
    session = make_session(make_response(json_data={"routes": []}))
    client = JsonHttpClient(session, service_name="Example API")

    await client.post_json(URL, {"a": 1}, RouteError, headers={"Authorization": "key"})

    _, kwargs = session.post.call_args
    assert kwargs["json"] == {"a": 1}
    assert kwargs["headers"] == {"Accept": "application/json", "Authorization": "key"}


@pytest.mark.asyncio
@pytest.mark.parametrize("error_cls", [GeocodeError, RouteError, TransitError])
async def test_non_200_raises_given_error_type(make_response, make_session, error_cls) -> None:
    """Given a 502 response, when requesting, then the caller's error type names the service."""
    session = make_session(make_response(status=502, text="Bad Gateway"))
    client = JsonHttpClient(session, service_name="Example API")

    with pytest.raises(error_cls, match="Example API returned status 502"):
        await client.get_json(URL, {}, error_cls)


@pytest.mark.asyncio
async def test_invalid_json_raises_given_error_type(make_response, make_session) -> None:
    """Given a body that is not JSON, when posting, then the caller's error type is raised."""
    response = make_response()
    response.json.side_effect = ValueError("Expecting value")
    client = JsonHttpClient(make_session(response), service_name="Example API")

    with pytest.raises(RouteError, match="Invalid JSON from https://example.test"):
        await client.post_json(URL, {}, RouteError)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "error", [aiohttp.ClientConnectionError("Connection refused"), TimeoutError("timed out")]
)
async def test_transport_failures_are_wrapped(make_session, error: Exception) -> None:
    """Given a network failure or timeout, when requesting, then it is wrapped and chained."""
    client = JsonHttpClient(make_session(error=error), service_name="Example API")

    with pytest.raises(GeocodeError, match=f"Request to {URL} failed") as exc_info:
        await client.get_json(URL, {}, GeocodeError)

    assert exc_info.value.__cause__ is error
