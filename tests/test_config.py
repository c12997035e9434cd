"""Tests for configuration adapter."""

from pathlib import Path

import pytest

from travel_durations.adapters.config import AppConfig, load_config
from travel_durations.domain.errors import ConfigError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove configuration variables that could leak in from the host environment."""
    for name in (
        "ORS_API_KEY",
        "ORS_BASE_URL",
        "TRANSPORT_BASE_URL",
        "CONNECTION_LIMIT",
        "REQUEST_TIMEOUT_SECONDS",
        "SKIP_UNPARSEABLE_CONNECTIONS",
        "DURATION_INCLUDE_DAYS",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


def test_config_loads_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given only the API key, when loading config, then defaults are used."""
    monkeypatch.setenv("ORS_API_KEY", "abc123")

    config = AppConfig(_env_file=None)

    assert config.ors_api_key == "abc123"
    assert config.ors_base_url == "https://api.openrouteservice.org"
    assert config.transport_base_url == "https://transport.opendata.ch/v1"
    assert config.connection_limit == 5
    assert config.skip_unparseable_connections is True
    assert config.duration_include_days is True
    assert config.log_level == "WARNING"


def test_config_loads_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given environment variables, when loading config, then they are used."""
    monkeypatch.setenv("ORS_API_KEY", "abc123")
    monkeypatch.setenv("CONNECTION_LIMIT", "3")
    monkeypatch.setenv("SKIP_UNPARSEABLE_CONNECTIONS", "false")
    monkeypatch.setenv("DURATION_INCLUDE_DAYS", "false")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    config = AppConfig(_env_file=None)

    assert config.connection_limit == 3
    assert config.skip_unparseable_connections is False
    assert config.duration_include_days is False
    assert config.log_level == "DEBUG"


def test_config_reads_api_key_from_env_file(tmp_path: Path) -> None:
    """Given a .env file with the API key, when loading config, then the key is read."""
    env_file = tmp_path / ".env"
    env_file.write_text("ORS_API_KEY=from-dotenv\n", encoding="utf-8")

    config = AppConfig(_env_file=str(env_file))

    assert config.ors_api_key == "from-dotenv"


def test_load_config_raises_config_error_when_api_key_missing() -> None:
    """Given no API key, when loading config, then ConfigError names the variable."""
    with pytest.raises(ConfigError, match="ORS_API_KEY"):
        load_config(_env_file=None)


def test_load_config_raises_config_error_when_api_key_blank(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Given a blank API key, when loading config, then ConfigError is raised."""
    monkeypatch.setenv("ORS_API_KEY", "   ")

    with pytest.raises(ConfigError, match="Invalid configuration"):
        load_config(_env_file=None)


def test_config_validates_connection_limit(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given a connection limit of zero, when loading config, then ConfigError is raised."""
    monkeypatch.setenv("ORS_API_KEY", "abc123")
    monkeypatch.setenv("CONNECTION_LIMIT", "0")

    with pytest.raises(ConfigError):
        load_config(_env_file=None)


def test_config_validates_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given an unknown log level, when loading config, then validation error is raised."""
    monkeypatch.setenv("ORS_API_KEY", "abc123")

    with pytest.raises(ValueError, match="log_level must be"):
        AppConfig(_env_file=None, log_level="chatty")
