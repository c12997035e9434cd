"""Constants for the openrouteservice adapter.

API Documentation: https://openrouteservice.org/dev/#/api-docs
Authentication: API key as ``api_key`` query parameter (geocoding) or
``Authorization`` header (directions).
"""

ORS_DEFAULT_BASE_URL = "https://api.openrouteservice.org"
ORS_GEOCODE_SEARCH_PATH = "/geocode/search"  # GET ?api_key=...&text=...
ORS_DIRECTIONS_DRIVING_PATH = "/v2/directions/driving-car"  # POST {"coordinates": [...]}
