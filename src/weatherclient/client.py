from __future__ import annotations

import logging
from typing import Any, Dict

import httpx

from .config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from .errors import ConfigError, NotFound, ParseError, ProviderError, TransportError
from .models import Units, WeatherResult

CURRENT_WEATHER_PATH = '/data/2.5/weather'


class OpenWeatherMapClient:
    """Thin client for the OpenWeatherMap current weather endpoint.

    One call, one request: no retries and no caching. Pass ``http_client`` to
    reuse or substitute the underlying ``httpx.Client``.
    """

    def __init__(self, api_key: str, base_url: str = DEFAULT_BASE_URL,
                 timeout: float = DEFAULT_TIMEOUT, http_client: httpx.Client | None = None):
        if not api_key:
            raise ConfigError("OpenWeatherMap API key is empty")
        self.api_key = api_key
        self.base_url = base_url.rstrip('/')
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(timeout=timeout, follow_redirects=True)
        self._log = logging.getLogger(__name__)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> 'OpenWeatherMapClient':
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    # ---------------- Internal Helpers -----------------
    def _get(self, path: str, params: Dict[str, Any]) -> Dict[str, Any]:
        url = f"{self.base_url}{path}"
        try:
            resp = self._client.get(url, params={**params, 'appid': self.api_key})
        except httpx.DecodingError as e:
            raise ParseError(f"Undecodable response body from {self.base_url}: {e}") from e
        except httpx.RequestError as e:
            # timeouts, DNS, refused connections, redirect loops
            raise TransportError(f"Request to {self.base_url} failed: {e}") from e
        self._log.debug("GET %s -> %s", url, resp.status_code)
        if resp.status_code == 404:
            raise NotFound(f"Location not found: {params.get('q')}")
        if resp.status_code >= 400:
            raise ProviderError(f"Error {resp.status_code}: {self._error_message(resp)}",
                                status_code=resp.status_code)
        if not getattr(resp, 'text', ''):
            raise ParseError(f"Empty response body for {url}")
        try:
            data = resp.json()
        except ValueError as e:  # JSON decode error
            raise ParseError(f"Non-JSON response for {url}: {resp.text[:200]}") from e
        if not isinstance(data, dict):
            raise ParseError(f"Unexpected response type for {url}: {type(data).__name__}")
        # the API sometimes reports failures in-band with a 200 status
        if str(data.get('cod', '200')) == '404':
            raise NotFound(f"Location not found: {params.get('q')}")
        return data

    @staticmethod
    def _error_message(resp) -> str:
        try:
            body = resp.json()
        except ValueError:
            return resp.text[:200]
        if isinstance(body, dict) and body.get('message'):
            return str(body['message'])
        return str(body)[:200]

    # ---------------- Public API -----------------
    def current_weather(self, city: str, units: Units | str = Units.METRIC) -> WeatherResult:
        """Fetch current conditions for ``city`` in the requested unit system."""
        units = Units.parse(units)
        payload = self._get(CURRENT_WEATHER_PATH, {'q': city, 'units': units.value})
        return self.parse_current(payload, units)

    @staticmethod
    def parse_current(payload: Dict[str, Any], units: Units) -> WeatherResult:
        """Map an OpenWeatherMap ``/weather`` payload onto a WeatherResult.

        Raises ParseError when a required field is absent or has the wrong
        type; ``wind`` and ``sys.country`` are optional.
        """
        try:
            main = payload['main']
            name = payload['name']
            temperature = float(main['temp'])
            pressure = int(main['pressure'])
            humidity = int(main['humidity'])
            weather = payload.get('weather') or [{}]
            condition = weather[0].get('main') or ''
            description = weather[0].get('description') or ''
            wind = payload.get('wind') or {}
            wind_speed = float(wind['speed']) if wind.get('speed') is not None else None
            country = (payload.get('sys') or {}).get('country')
        except (KeyError, IndexError, TypeError, ValueError, AttributeError) as e:
            raise ParseError(f"Malformed weather payload: {e!r}") from e
        if not isinstance(name, str) or not name:
            raise ParseError("Malformed weather payload: missing location name")
        if not isinstance(condition, str) or not isinstance(description, str):
            raise ParseError("Malformed weather payload: weather condition is not text")
        if not condition and not description:
            raise ParseError("Malformed weather payload: missing weather condition")
        if country is not None and not isinstance(country, str):
            raise ParseError("Malformed weather payload: country is not text")
        return WeatherResult(
            location=name,
            temperature=temperature,
            units=units,
            condition=condition or description,
            description=description or condition.lower(),
            pressure=pressure,
            humidity=humidity,
            wind_speed=wind_speed,
            country=country,
        )
