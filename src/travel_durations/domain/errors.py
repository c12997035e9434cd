"""Error taxonomy for the rail and driving request chains."""


class TravelDurationError(Exception):
    """Base class for all errors raised by travel_durations."""


class ConfigError(TravelDurationError):
    """Required arguments or configuration are missing or invalid."""


class GeocodeError(TravelDurationError):
    """A place name could not be resolved to a coordinate."""


class RouteError(TravelDurationError):
    """The routing service did not return a usable driving duration."""


class TransitError(TravelDurationError):
    """The transit service did not return a usable list of connections."""


class InvalidConnectionError(TransitError):
    """A candidate connection lacks a parseable departure or arrival time."""


class NoConnectionsError(TransitError):
    """No candidate connection is available to select from."""
