"""Failures raised by the weather clients."""


class WeatherError(Exception):
    """Base class for anything that prevents a weather payload from being built."""


class NetworkFailure(WeatherError):
    """Transport-level failure: DNS, timeout, connection reset."""


class BadResponse(WeatherError):
    def __init__(self, status: int, source: str = "weather API"):
        super().__init__(f"Bad response from {source}: HTTP {status}")
        self.status = status
        self.source = source


class MissingCredential(WeatherError):
    """The key-gated client was asked to run without an API key."""


class ParseFailure(WeatherError):
    """Malformed date or response body."""
