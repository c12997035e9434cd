"""Response schemas for the openrouteservice endpoints used here."""

from pydantic import BaseModel, Field, StrictFloat


class Geometry(BaseModel):
    """GeoJSON point geometry, coordinates in [lon, lat] order."""

    coordinates: list[StrictFloat] = Field(min_length=2)


class GeocodeFeature(BaseModel):
    geometry: Geometry


class GeocodeResponse(BaseModel):
    """Response of ``GET /geocode/search``."""

    features: list[GeocodeFeature] = Field(default_factory=list)


class RouteSummary(BaseModel):
    duration: StrictFloat | None = None  # seconds
    distance: StrictFloat | None = None  # meters


class Route(BaseModel):
    summary: RouteSummary | None = None


class DirectionsResponse(BaseModel):
    """Response of ``POST /v2/directions/{profile}``."""

    routes: list[Route] = Field(default_factory=list)
