from __future__ import annotations


class WeatherError(Exception):
    """Base class for every failure raised by the weather client."""


class NotFound(WeatherError):
    """The provider could not resolve the requested location."""


class TransportError(WeatherError):
    """Network level failure: timeout, DNS, refused connection."""


class ParseError(WeatherError):
    """The provider answered with data we could not understand."""


class ProviderError(WeatherError):
    """The provider rejected the request (bad API key, throttling, 5xx)."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class ConfigError(WeatherError):
    """Required settings are missing or cannot be read."""
