import pytest

from weatherclient.errors import NotFound, ParseError, TransportError
from weatherclient.lookup import WeatherLookupClient
from weatherclient.models import Units, WeatherResult


class FakeProvider:
    """Substitute provider serving canned metric readings keyed by lower-case city."""
    def __init__(self, readings=None, error=None):
        self.readings = readings or {}
        self.error = error
        self.calls = []
    def current_weather(self, city, units=Units.METRIC):
        self.calls.append((city, units))
        if self.error:
            raise self.error
        try:
            name, temp, condition = self.readings[city.lower()]
        except KeyError:
            raise NotFound(f"Location not found: {city}")
        return WeatherResult(location=name, temperature=temp, units=Units.METRIC, condition=condition,
                             pressure=1012, humidity=80, wind_speed=5.0)


@pytest.fixture
def provider():
    return FakeProvider({'london': ('London', 15.0, 'rain'), 'paris': ('Paris', 20.0, 'clear')})


def test_location_matches_query_case_insensitive(provider):
    result = WeatherLookupClient(provider).fetch('lOnDoN')
    assert result.location.lower() == 'london'
    assert result.temperature == 15.0
    assert result.condition == 'rain'


def test_query_is_trimmed(provider):
    WeatherLookupClient(provider).fetch('  Paris ')
    assert provider.calls == [('Paris', Units.METRIC)]


@pytest.mark.parametrize("query", ['', '   ', None])
def test_empty_query_is_not_found_without_request(provider, query):
    with pytest.raises(NotFound):
        WeatherLookupClient(provider).fetch(query)
    assert provider.calls == []


def test_unknown_city_is_not_found(provider):
    with pytest.raises(NotFound):
        WeatherLookupClient(provider).fetch('Atlantis')


@pytest.mark.parametrize("error", [TransportError("unreachable"), ParseError("garbage")])
def test_provider_errors_propagate(error):
    with pytest.raises(type(error)):
        WeatherLookupClient(FakeProvider(error=error)).fetch('London')


def test_preferences_only_change_units(provider):
    client = WeatherLookupClient(provider)
    metric = client.fetch('Paris', Units.METRIC)
    imperial = client.fetch('Paris', 'imperial')
    assert metric.temperature == 20.0 and metric.temperature_unit == '°C'
    assert imperial.temperature == pytest.approx(68.0) and imperial.temperature_unit == '°F'
    assert imperial.to_units(Units.METRIC).temperature == pytest.approx(metric.temperature)
    assert (metric.location, metric.condition, metric.pressure, metric.humidity) == \
        (imperial.location, imperial.condition, imperial.pressure, imperial.humidity)
    # provider is always queried in metric
    assert {u for _, u in provider.calls} == {Units.METRIC}


def test_default_preference_used_when_absent(provider):
    result = WeatherLookupClient(provider, default_units='imperial').fetch('London')
    assert result.units is Units.IMPERIAL
    assert result.temperature == pytest.approx(59.0)
