"""Rail connection domain models."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class Journey:
    """The vehicle a section is ridden on (e.g. category "IC", number "5")."""

    category: str = ""
    number: str = ""

    @property
    def label(self) -> str:
        """Category and number joined, trimmed when either is empty."""
        return f"{self.category} {self.number}".strip()


@dataclass(frozen=True)
class Section:
    """One leg of a connection, either a ride or a walking transfer."""

    departure_time: datetime | None
    departure_station: str
    arrival_time: datetime | None
    arrival_station: str
    platform: str | None = None
    journey: Journey | None = None  # None marks a walking transfer


@dataclass(frozen=True)
class Connection:
    """A candidate end-to-end rail itinerary as reported by the transit API.

    ``departure`` and ``arrival`` are None when the upstream value was missing
    or could not be parsed. ``duration`` keeps the upstream text
    (``[Dd]HH:MM:SS``).
    """

    departure: datetime | None
    arrival: datetime | None
    duration: str | None = None
    transfers: int = 0
    sections: list[Section] = field(default_factory=list)
