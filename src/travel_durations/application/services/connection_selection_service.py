"""Selection of the best rail connection among the candidates."""

import logging
from collections.abc import Callable, Sequence
from datetime import UTC, datetime

from travel_durations.domain.errors import InvalidConnectionError, NoConnectionsError
from travel_durations.domain.models import Connection

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(UTC)


def minutes_between(start: datetime, end: datetime) -> int:
    """Return whole minutes from ``start`` to ``end``, truncated toward zero."""
    return int((end - start).total_seconds() / 60)


class ConnectionSelector:
    """Picks the connection with the lowest wait-plus-travel cost.

    The cost of a connection is the time until it departs (never negative,
    a connection that already left costs no wait) plus its own travel span,
    both in minutes. This favours connections that are both soon and fast
    over the literally first or the globally shortest one.
    """

    def __init__(
        self,
        clock: Callable[[], datetime] = _utc_now,
        skip_unparseable: bool = True,
    ) -> None:
        """Initialize with a time source and the policy for broken candidates.

        Args:
            clock: Returns the current time as an aware datetime.
            skip_unparseable: If True, candidates without a parseable departure
                or arrival are disqualified. If False, selection aborts with
                InvalidConnectionError.
        """
        self._clock = clock
        self._skip_unparseable = skip_unparseable

    @staticmethod
    def compute_cost(connection: Connection, now: datetime) -> int:
        """Compute the cost of a connection in minutes.

        Raises:
            InvalidConnectionError: If departure or arrival is missing.
        """
        if connection.departure is None or connection.arrival is None:
            raise InvalidConnectionError("Connection has no parseable departure or arrival time")

        wait = max(0, minutes_between(now, connection.departure))
        travel = minutes_between(connection.departure, connection.arrival)
        return wait + travel

    def _cost_or_none(self, index: int, connection: Connection, now: datetime) -> int | None:
        try:
            return self.compute_cost(connection, now)
        except InvalidConnectionError:
            if not self._skip_unparseable:
                raise
            logger.warning(f"Skipping connection #{index}: unparseable departure or arrival")
            return None

    def select_best(self, connections: Sequence[Connection]) -> Connection:
        """Return the lowest-cost connection, the first one on ties.

        Raises:
            NoConnectionsError: If there are no candidates left to choose from.
            InvalidConnectionError: If a candidate is unparseable and skipping is off.
        """
        if not connections:
            raise NoConnectionsError("No connections found")

        now = self._clock()
        best: Connection | None = None
        best_cost: int | None = None

        for index, connection in enumerate(connections):
            cost = self._cost_or_none(index, connection, now)
            if cost is None:
                continue
            logger.debug(f"Connection #{index} costs {cost} min")
            if best_cost is None or cost < best_cost:
                best, best_cost = connection, cost

        if best is None:
            raise NoConnectionsError("No connection with valid departure and arrival times")

        return best
