"""Main entry point: print train and car travel times between two places."""

import argparse
import asyncio
import logging
import sys
from collections.abc import Awaitable, Sequence
from typing import TypeVar

import aiohttp

from travel_durations.adapters.config import AppConfig, load_config
from travel_durations.adapters.ors_api import OrsDrivingRouteRepository, OrsGeocoder, OrsHttpClient
from travel_durations.adapters.transport_api import TransportConnectionRepository
from travel_durations.application.services import (
    ConnectionSelector,
    ItineraryFormatter,
    TravelTimeService,
)
from travel_durations.domain.errors import ConfigError, TravelDurationError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _configure_logging(level: str = "WARNING") -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="tds",
        description="Compare travel time by train and by car between two places.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  tds Zürich Bern
  tds "Basel SBB" "Lugano"

The ORS_API_KEY environment variable (or .env entry) must hold an
openrouteservice API key.
        """,
    )
    parser.add_argument("origin", metavar="from", help="Departure place name")
    parser.add_argument("destination", metavar="to", help="Arrival place name")
    return parser.parse_args(argv)


def build_service(session: aiohttp.ClientSession, config: AppConfig) -> TravelTimeService:
    """Wire the adapters and application services together."""
    ors_client = OrsHttpClient(session, api_key=config.ors_api_key, base_url=config.ors_base_url)
    return TravelTimeService(
        connection_repository=TransportConnectionRepository(
            session, base_url=config.transport_base_url
        ),
        geocoder=OrsGeocoder(ors_client),
        route_repository=OrsDrivingRouteRepository(ors_client),
        selector=ConnectionSelector(skip_unparseable=config.skip_unparseable_connections),
        formatter=ItineraryFormatter(include_days=config.duration_include_days),
        connection_limit=config.connection_limit,
    )


async def _capture(chain: Awaitable[T]) -> T | Exception:
    """Await one request chain, returning its exception instead of raising it."""
    try:
        return await chain
    except TravelDurationError as e:
        return e
    except Exception as e:
        logger.exception("Unexpected error in request chain")
        return e


def report(rail: list[str] | Exception, driving: int | Exception) -> None:
    """Print both chain outcomes, results to stdout and errors to stderr."""
    if isinstance(rail, Exception):
        print(f"Train travel error: {rail}\n", file=sys.stderr)
    else:
        itinerary = "\n".join(rail)
        print(f"Optimal travel time by train: {itinerary}\n")

    if isinstance(driving, Exception):
        print(f"Car travel error: {driving}", file=sys.stderr)
    else:
        print(f"Estimated travel time by vehicle: {driving} min")


async def run(origin: str, destination: str, config: AppConfig) -> None:
    """Run the rail and driving chains concurrently and report both."""
    timeout = aiohttp.ClientTimeout(total=config.request_timeout_seconds)
    async with aiohttp.ClientSession(timeout=timeout) as session:
        service = build_service(session, config)
        rail, driving = await asyncio.gather(
            _capture(service.get_rail_itinerary(origin, destination)),
            _capture(service.get_driving_minutes(origin, destination)),
        )

    report(rail, driving)


def main(argv: Sequence[str] | None = None) -> int:
    """Main application entry point."""
    args = _parse_args(argv)

    try:
        config = load_config()
    except ConfigError as e:
        _configure_logging()
        logger.error(str(e))
        logger.error("Set ORS_API_KEY in the environment or in a .env file.")
        return 1

    _configure_logging(config.log_level)
    asyncio.run(run(args.origin, args.destination, config))
    return 0


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    sys.exit(main())


if __name__ == "__main__":
    cli_main()
