"""Connection repository port."""

from typing import Protocol

from travel_durations.domain.models.connection import Connection


class ConnectionRepository(Protocol):
    """Port for retrieving candidate rail connections."""

    async def get_connections(
        self, origin: str, destination: str, limit: int = 5
    ) -> list[Connection]:
        """Get up to ``limit`` connections between two place names."""
        ...
