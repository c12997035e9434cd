"""Domain layer - core models, errors and ports."""

from travel_durations.domain.errors import (
    ConfigError,
    GeocodeError,
    InvalidConnectionError,
    NoConnectionsError,
    RouteError,
    TransitError,
    TravelDurationError,
)
from travel_durations.domain.models import Connection, Coordinate, Journey, Section
from travel_durations.domain.ports import (
    ConnectionRepository,
    DrivingRouteRepository,
    Geocoder,
)

__all__ = [
    "ConfigError",
    "Connection",
    "ConnectionRepository",
    "Coordinate",
    "DrivingRouteRepository",
    "GeocodeError",
    "Geocoder",
    "InvalidConnectionError",
    "Journey",
    "NoConnectionsError",
    "RouteError",
    "Section",
    "TransitError",
    "TravelDurationError",
]
