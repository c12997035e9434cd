"""Swiss public transport (transport.opendata.ch) adapters."""

from travel_durations.adapters.transport_api.connection_parser import ConnectionParser
from travel_durations.adapters.transport_api.transport_connection_repository import (
    TransportConnectionRepository,
)

__all__ = ["ConnectionParser", "TransportConnectionRepository"]
