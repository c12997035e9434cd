"""Application services."""

from travel_durations.application.services.connection_selection_service import (
    ConnectionSelector,
    minutes_between,
)
from travel_durations.application.services.duration_parser import parse_duration_minutes
from travel_durations.application.services.itinerary_formatter import ItineraryFormatter
from travel_durations.application.services.travel_time_service import (
    TravelTimeService,
    round_minutes,
)

__all__ = [
    "ConnectionSelector",
    "ItineraryFormatter",
    "TravelTimeService",
    "minutes_between",
    "parse_duration_minutes",
    "round_minutes",
]
