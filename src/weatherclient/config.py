from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from .errors import ConfigError
from .models import Units
from .state import ConfigStore

DEFAULT_BASE_URL = 'https://api.openweathermap.org'
DEFAULT_TIMEOUT = 30.0


@dataclass
class WeatherSettings:
    """Configuration for the weather lookup."""
    api_key: str
    default_city: Optional[str] = None
    units: Units = Units.METRIC
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT

    @staticmethod
    def from_env(store: ConfigStore | None = None) -> 'WeatherSettings':
        """Create settings from environment variables, falling back to the config file.

        Environment always wins over the stored file:
          OPENWEATHER_API_KEY, CLIWEATHER_CITY, CLIWEATHER_UNITS,
          OPENWEATHER_BASE_URL, CLIWEATHER_TIMEOUT
        """
        if store is None:
            store = ConfigStore()
        stored = store.load()

        api_key = os.environ.get('OPENWEATHER_API_KEY') or (stored.api_key if stored else None)
        if not api_key:
            raise ConfigError(
                f"No OpenWeatherMap API key: set OPENWEATHER_API_KEY or run 'cliweather --configure' "
                f"(config file: {store.path})"
            )
        city = os.environ.get('CLIWEATHER_CITY') or (stored.city if stored else None)
        units = Units.parse(os.environ.get('CLIWEATHER_UNITS') or (stored.units if stored else None))
        base_url = os.environ.get('OPENWEATHER_BASE_URL', DEFAULT_BASE_URL).rstrip('/')
        raw_timeout = os.environ.get('CLIWEATHER_TIMEOUT', str(DEFAULT_TIMEOUT))
        try:
            timeout = float(raw_timeout)
        except ValueError:
            raise ConfigError(f"Malformed CLIWEATHER_TIMEOUT: {raw_timeout!r}") from None

        return WeatherSettings(
            api_key=api_key,
            default_city=city,
            units=units,
            base_url=base_url,
            timeout=timeout,
        )
