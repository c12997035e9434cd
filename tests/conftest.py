"""Shared fixtures for mocking aiohttp sessions."""

from collections.abc import Callable
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

ResponseFactory = Callable[..., MagicMock]
SessionFactory = Callable[..., MagicMock]


@pytest.fixture
def make_response() -> ResponseFactory:
    """Build a fake aiohttp response with the given status and JSON body."""

    def _make(status: int = 200, json_data: Any = None, text: str = "") -> MagicMock:
        response = MagicMock()
        response.status = status
        response.headers = {"Content-Type": "application/json"}
        response.json = AsyncMock(return_value=json_data)
        response.text = AsyncMock(return_value=text)
        return response

    return _make


@pytest.fixture
def make_session() -> SessionFactory:
    """Build a fake aiohttp session whose get/post yield the given response."""

    def _make(response: MagicMock | None = None, error: Exception | None = None) -> MagicMock:
        session = MagicMock()
        for method in (session.get, session.post):
            if error is not None:
                method.side_effect = error
                continue
            context = MagicMock()
            context.__aenter__ = AsyncMock(return_value=response)
            context.__aexit__ = AsyncMock(return_value=False)
            method.return_value = context
        return session

    return _make
