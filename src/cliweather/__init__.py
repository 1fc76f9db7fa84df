"""Command line weather lookup built on the ``weatherclient`` package."""

__version__ = '0.1.0'

from weatherclient import (  # noqa: F401,E402
    NotFound, ParseError, TransportError, Units, WeatherLookupClient, WeatherResult,
)

__all__ = ['WeatherLookupClient', 'WeatherResult', 'Units', 'NotFound', 'TransportError', 'ParseError']
