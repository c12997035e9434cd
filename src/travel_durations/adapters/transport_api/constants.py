"""Constants for the Swiss public transport adapter.

Uses the transport.opendata.ch public API.
API Documentation: https://transport.opendata.ch/docs.html

No authentication required.
"""

TRANSPORT_DEFAULT_BASE_URL = "https://transport.opendata.ch/v1"
TRANSPORT_CONNECTIONS_PATH = "/connections"  # GET ?from=...&to=...&limit=...

# Timestamps look like 2024-01-15T14:30:00+0100
TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S%z"
