"""Ports (interfaces) for the ports-and-adapters architecture."""

from travel_durations.domain.ports.connection_repository import ConnectionRepository
from travel_durations.domain.ports.driving_route_repository import DrivingRouteRepository
from travel_durations.domain.ports.geocoder import Geocoder

__all__ = [
    "ConnectionRepository",
    "DrivingRouteRepository",
    "Geocoder",
]
