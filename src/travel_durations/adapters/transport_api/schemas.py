"""Response schema for ``GET /connections``.

Only fields needed for selection and rendering are modelled. Optional fields
stay optional so that a single incomplete candidate does not invalidate the
whole response.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _stringify(value: Any) -> Any:
    """Accept numeric platform/line values by turning them into strings."""
    if isinstance(value, int | float) and not isinstance(value, bool):
        return str(value)
    return value


class StationModel(BaseModel):
    name: str | None = None


class CheckpointModel(BaseModel):
    """A stop on a connection or section, with departure and/or arrival."""

    departure: str | None = None
    arrival: str | None = None
    station: StationModel | None = None
    platform: str | None = None

    @field_validator("platform", mode="before")
    @classmethod
    def coerce_platform(cls, v: Any) -> Any:
        return _stringify(v)

    @property
    def station_name(self) -> str | None:
        return self.station.name if self.station else None


class JourneyModel(BaseModel):
    category: str | None = None
    number: str | None = None

    @field_validator("category", "number", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> Any:
        return _stringify(v)


class SectionModel(BaseModel):
    departure: CheckpointModel | None = None
    arrival: CheckpointModel | None = None
    journey: JourneyModel | None = None


class ConnectionModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    from_: CheckpointModel | None = Field(default=None, alias="from")
    to: CheckpointModel | None = None
    duration: str | None = None
    transfers: int | None = None
    sections: list[SectionModel] | None = None

    @field_validator("transfers", mode="before")
    @classmethod
    def drop_invalid_transfers(cls, v: Any) -> Any:
        """Map non-integer or negative transfer counts to None."""
        if isinstance(v, bool) or not isinstance(v, int) or v < 0:
            return None
        return v


class ConnectionsResponse(BaseModel):
    """Outer envelope; each candidate is validated on its own by the parser."""

    connections: list[Any]
