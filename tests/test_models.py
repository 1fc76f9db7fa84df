import dataclasses

import pytest

from weatherclient.errors import ConfigError
from weatherclient.models import Units, WeatherResult


def test_units_parse_aliases():
    assert Units.parse('METRIC') is Units.METRIC
    assert Units.parse('f') is Units.IMPERIAL
    assert Units.parse('Fahrenheit') is Units.IMPERIAL
    assert Units.parse('celsius') is Units.METRIC
    assert Units.parse(None) is Units.METRIC
    assert Units.parse('', default=Units.IMPERIAL) is Units.IMPERIAL


def test_units_parse_rejects_unknown():
    with pytest.raises(ConfigError):
        Units.parse('kelvin')


def test_result_is_immutable():
    r = WeatherResult(location='Oslo', temperature=-3.0, units=Units.METRIC, condition='Snow')
    with pytest.raises(dataclasses.FrozenInstanceError):
        r.temperature = 0.0


def test_unit_conversion_keeps_physical_values():
    r = WeatherResult(location='Oslo', temperature=-40.0, units=Units.METRIC, condition='Snow',
                      pressure=1030, humidity=60, wind_speed=10.0)
    f = r.to_units('imperial')
    assert f.temperature == pytest.approx(-40.0)
    assert f.wind_speed == pytest.approx(22.369, abs=1e-3)
    assert f.pressure == 1030 and f.humidity == 60
    back = f.to_units(Units.METRIC)
    assert back.wind_speed == pytest.approx(10.0)
    assert r.to_units(Units.METRIC) is r


def test_as_dict():
    r = WeatherResult(location='Oslo', temperature=1.5, units=Units.IMPERIAL, condition='Snow', country='NO')
    d = r.as_dict()
    assert d['units'] == 'imperial'
    assert d['temperature_unit'] == '°F'
    assert d['country'] == 'NO'
    assert r.display_name == 'Oslo, NO'
