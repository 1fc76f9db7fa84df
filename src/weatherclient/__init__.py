"""
OpenWeatherMap client for current weather conditions.
Provides the provider client, lookup facade and configuration helpers.
"""

__all__ = [
    'OpenWeatherMapClient', 'WeatherLookupClient', 'WeatherSettings', 'ConfigStore', 'StoredConfig',
    'WeatherResult', 'Units', 'WeatherError', 'NotFound', 'TransportError', 'ParseError',
    'ProviderError', 'ConfigError',
]

from .client import OpenWeatherMapClient
from .config import WeatherSettings
from .errors import ConfigError, NotFound, ParseError, ProviderError, TransportError, WeatherError
from .lookup import WeatherLookupClient
from .models import Units, WeatherResult
from .state import ConfigStore, StoredConfig
