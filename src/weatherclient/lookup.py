from __future__ import annotations

import logging
from typing import Protocol

from .errors import NotFound
from .models import Units, WeatherResult


class WeatherProvider(Protocol):
    def current_weather(self, city: str, units: Units | str = Units.METRIC) -> WeatherResult:
        ...


class WeatherLookupClient:
    """Resolve a city name to current conditions in the preferred units.

    The provider is always asked for metric data and the result converted
    locally, so the same city yields the same physical reading whatever the
    preference.
    """

    def __init__(self, provider: WeatherProvider, default_units: Units | str | None = None):
        self.provider = provider
        self.default_units = Units.parse(default_units)
        self._log = logging.getLogger(__name__)

    def fetch(self, location: str, preference: Units | str | None = None) -> WeatherResult:
        city = (location or '').strip()
        if not city:
            raise NotFound("Location query is empty")
        units = Units.parse(preference, default=self.default_units)
        self._log.info("Looking up current weather for %r (%s)", city, units.value)
        result = self.provider.current_weather(city, Units.METRIC)
        return result.to_units(units)
