from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from .errors import ConfigError

MPS_PER_MPH = 0.44704


class Units(str, Enum):
    """Region preference: the unit system results are presented in."""
    METRIC = 'metric'
    IMPERIAL = 'imperial'

    @property
    def temperature_symbol(self) -> str:
        return '°C' if self is Units.METRIC else '°F'

    @property
    def speed_symbol(self) -> str:
        return 'm/s' if self is Units.METRIC else 'mph'

    @classmethod
    def parse(cls, value: 'Units | str | None', default: 'Units | None' = None) -> 'Units':
        """Parse a user supplied unit name.

        Accepts the enum itself, ``metric``/``imperial`` in any case and the
        aliases ``c``/``celsius`` and ``f``/``fahrenheit``. ``None`` or an
        empty string returns ``default`` (metric when no default is given).
        """
        if isinstance(value, Units):
            return value
        if value is None or not str(value).strip():
            return default or cls.METRIC
        key = str(value).strip().lower()
        aliases = {
            'metric': cls.METRIC, 'c': cls.METRIC, 'celsius': cls.METRIC,
            'imperial': cls.IMPERIAL, 'f': cls.IMPERIAL, 'fahrenheit': cls.IMPERIAL,
        }
        try:
            return aliases[key]
        except KeyError:
            raise ConfigError(f"Unknown units '{value}'; expected 'metric' or 'imperial'") from None


def celsius_to_fahrenheit(value: float) -> float:
    return value * 9.0 / 5.0 + 32.0


def fahrenheit_to_celsius(value: float) -> float:
    return (value - 32.0) * 5.0 / 9.0


@dataclass(frozen=True)
class WeatherResult:
    """Snapshot of current conditions for one resolved location."""
    location: str
    temperature: float
    units: Units
    condition: str
    description: str = ''
    pressure: Optional[int] = None  # hPa, same in every unit system
    humidity: Optional[int] = None  # percent
    wind_speed: Optional[float] = None  # m/s (metric) or mph (imperial)
    country: Optional[str] = None

    @property
    def temperature_unit(self) -> str:
        return self.units.temperature_symbol

    @property
    def display_name(self) -> str:
        return f"{self.location}, {self.country}" if self.country else self.location

    def to_units(self, units: Units | str) -> 'WeatherResult':
        """Return a copy expressed in ``units``; self when already there."""
        target = Units.parse(units)
        if target is self.units:
            return self
        if target is Units.IMPERIAL:
            temperature = celsius_to_fahrenheit(self.temperature)
            wind = None if self.wind_speed is None else self.wind_speed / MPS_PER_MPH
        else:
            temperature = fahrenheit_to_celsius(self.temperature)
            wind = None if self.wind_speed is None else self.wind_speed * MPS_PER_MPH
        return dataclasses.replace(self, temperature=temperature, wind_speed=wind, units=target)

    def as_dict(self) -> Dict[str, Any]:
        data = dataclasses.asdict(self)
        data['units'] = self.units.value
        data['temperature_unit'] = self.temperature_unit
        return data
