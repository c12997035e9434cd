"""12-factor configuration adapter using environment variables and a .env file."""

import logging

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from travel_durations.domain.errors import ConfigError


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # openrouteservice (geocoding + driving directions)
    ors_api_key: str = Field(description="openrouteservice API key")
    ors_base_url: str = Field(
        default="https://api.openrouteservice.org",
        description="Base URL of the openrouteservice API",
    )

    # Swiss public transport API (rail connections)
    transport_base_url: str = Field(
        default="https://transport.opendata.ch/v1",
        description="Base URL of the transport.opendata.ch API",
    )
    connection_limit: int = Field(
        default=5, ge=1, le=16, description="Maximum number of candidate connections to fetch"
    )

    request_timeout_seconds: float = Field(
        default=30, gt=0, description="Total timeout for each HTTP request in seconds"
    )

    # Selection and rendering
    skip_unparseable_connections: bool = Field(
        default=True,
        description="Skip candidates with unparseable times instead of failing the rail lookup",
    )
    duration_include_days: bool = Field(
        default=True,
        description="Count the day component of connection durations (e.g. '1d02:00:00')",
    )

    log_level: str = Field(default="WARNING", description="Logging level")

    @field_validator("ors_api_key")
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        """Validate the API key is not blank."""
        if not v.strip():
            raise ValueError("ors_api_key must not be empty")
        return v.strip()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a known logging level name."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"log_level must be a logging level name, got '{v}'")
        return level


def load_config(**overrides: object) -> AppConfig:
    """Load configuration, converting validation failures to ConfigError."""
    try:
        return AppConfig(**overrides)  # type: ignore[arg-type]
    except ValidationError as e:
        missing = [
            str(err["loc"][0]).upper() for err in e.errors() if err["type"] == "missing"
        ]
        if missing:
            raise ConfigError(f"Missing required configuration: {', '.join(missing)}") from e
        raise ConfigError(f"Invalid configuration: {e}") from e
