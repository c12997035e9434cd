"""Parser for transport.opendata.ch connection responses."""

import logging
from datetime import datetime
from typing import Any

from pydantic import ValidationError

from travel_durations.adapters.transport_api.constants import TIMESTAMP_FORMAT
from travel_durations.adapters.transport_api.schemas import (
    ConnectionModel,
    ConnectionsResponse,
    SectionModel,
)
from travel_durations.domain.errors import TransitError
from travel_durations.domain.models import Connection, Journey, Section

logger = logging.getLogger(__name__)


class ConnectionParser:
    """Parses connection responses into Connection objects."""

    @staticmethod
    def parse_response(data: Any) -> list[Connection]:
        """Parse the connections of a response body.

        Raises:
            TransitError: If the body has no parseable ``connections`` array.
        """
        try:
            response = ConnectionsResponse.model_validate(data)
        except ValidationError as e:
            raise TransitError("Invalid API response") from e

        connections = []
        for index, raw in enumerate(response.connections):
            try:
                model = ConnectionModel.model_validate(raw)
            except ValidationError as e:
                logger.warning(
                    f"Skipping malformed connection #{index}: {e.error_count()} error(s)"
                )
                continue
            connections.append(ConnectionParser._parse_connection(model))
        return connections

    @staticmethod
    def parse_time(time_str: str | None) -> datetime | None:
        """Parse an upstream timestamp, returning None if missing, malformed or offset-less."""
        if not time_str:
            return None

        try:
            return datetime.strptime(time_str, TIMESTAMP_FORMAT)
        except ValueError:
            pass

        try:
            parsed = datetime.fromisoformat(time_str.replace("Z", "+00:00"))
        except ValueError:
            logger.warning(f"Unparseable timestamp: {time_str!r}")
            return None

        if parsed.tzinfo is None:
            logger.warning(f"Timestamp without UTC offset: {time_str!r}")
            return None
        return parsed

    @staticmethod
    def _parse_section(section: SectionModel) -> Section:
        departure = section.departure
        arrival = section.arrival
        journey = None
        if section.journey is not None:
            journey = Journey(
                category=section.journey.category or "",
                number=section.journey.number or "",
            )

        return Section(
            departure_time=ConnectionParser.parse_time(departure.departure if departure else None),
            departure_station=(departure.station_name if departure else None) or "",
            arrival_time=ConnectionParser.parse_time(arrival.arrival if arrival else None),
            arrival_station=(arrival.station_name if arrival else None) or "",
            platform=(departure.platform if departure else None) or None,
            journey=journey,
        )

    @staticmethod
    def _parse_connection(connection: ConnectionModel) -> Connection:
        return Connection(
            departure=ConnectionParser.parse_time(
                connection.from_.departure if connection.from_ else None
            ),
            arrival=ConnectionParser.parse_time(connection.to.arrival if connection.to else None),
            duration=connection.duration,
            transfers=connection.transfers or 0,
            sections=[ConnectionParser._parse_section(s) for s in connection.sections or []],
        )
