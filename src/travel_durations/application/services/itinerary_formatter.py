"""Rendering of a selected connection as a human-readable itinerary."""

from datetime import datetime

from travel_durations.application.services.duration_parser import parse_duration_minutes
from travel_durations.domain.models import Connection, Section

UNKNOWN_STATION = "?"
UNKNOWN_PLATFORM = "-"


class ItineraryFormatter:
    """Formats connections into itinerary lines."""

    def __init__(self, include_days: bool = True) -> None:
        """Initialize with the day handling used for the total duration."""
        self._include_days = include_days

    @staticmethod
    def format_time(value: datetime) -> str:
        """Format a timestamp as HH:MM in the offset the upstream reported."""
        return value.strftime("%H:%M")

    def format_header(self, connection: Connection) -> str:
        """Format the summary line with total minutes and transfer count."""
        total_minutes = parse_duration_minutes(connection.duration, self._include_days) or 0
        return f"{total_minutes} min | Transfers: {connection.transfers}"

    def format_section(self, section: Section) -> str | None:
        """Format one section, or return None if it lacks departure or arrival time."""
        if section.departure_time is None or section.arrival_time is None:
            return None

        departs = self.format_time(section.departure_time)
        arrives = self.format_time(section.arrival_time)
        span = f"{departs}-{arrives}"
        to_station = section.arrival_station or UNKNOWN_STATION

        if section.journey is None:
            return f"{span} | walk → {to_station}"

        from_station = section.departure_station or UNKNOWN_STATION
        platform = section.platform or UNKNOWN_PLATFORM
        return (
            f"{span} | Line: {section.journey.label} | "
            f"via [{from_station}] → [{to_station}] | Platform: {platform}"
        )

    def format(self, connection: Connection) -> list[str]:
        """Format a connection as a header line followed by one line per section."""
        lines = [self.format_header(connection)]
        for section in connection.sections:
            line = self.format_section(section)
            if line is not None:
                lines.append(line)
        return lines
