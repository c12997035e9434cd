"""openrouteservice adapters for geocoding and driving directions."""

from travel_durations.adapters.ors_api.http_client import OrsHttpClient
from travel_durations.adapters.ors_api.ors_driving_route_repository import (
    OrsDrivingRouteRepository,
)
from travel_durations.adapters.ors_api.ors_geocoder import OrsGeocoder

__all__ = ["OrsDrivingRouteRepository", "OrsGeocoder", "OrsHttpClient"]
