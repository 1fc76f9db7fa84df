"""
Command line entry point: ``cliweather <city>``.
Usage: cliweather [CITY ...] [--units metric|imperial] [--json]
"""
from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Callable, List, Optional

from dotenv import find_dotenv, load_dotenv

from weatherclient.client import OpenWeatherMapClient
from weatherclient.config import WeatherSettings
from weatherclient.errors import (
    ConfigError, NotFound, ParseError, ProviderError, TransportError, WeatherError,
)
from weatherclient.lookup import WeatherLookupClient
from weatherclient.models import Units
from weatherclient.state import ConfigStore, StoredConfig

from . import __version__
from .format import format_json, format_text

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_USAGE = 2
EXIT_NOT_FOUND = 3
EXIT_TRANSPORT = 4
EXIT_PARSE = 5

EXIT_CODES = {
    NotFound: EXIT_NOT_FOUND,
    TransportError: EXIT_TRANSPORT,
    ParseError: EXIT_PARSE,
    ProviderError: EXIT_ERROR,
    ConfigError: EXIT_ERROR,
}

ProviderFactory = Callable[[WeatherSettings], OpenWeatherMapClient]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='cliweather',
        description='Show the current weather for a city (OpenWeatherMap).',
    )
    parser.add_argument('city', nargs='*',
                        help='City, district or state, e.g. "London" or "New York". '
                             'Defaults to the configured city.')
    parser.add_argument('-u', '--units', help='metric or imperial (overrides configuration)')
    parser.add_argument('--json', action='store_true', help='Print the result as JSON')
    parser.add_argument('--configure', action='store_true',
                        help='Prompt for API key and preferred city, then save them')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    parser.add_argument('--version', action='version', version=f"%(prog)s {__version__}")
    return parser


def prompt_for_config(store: ConfigStore, input_fn: Callable[[str], str] = input) -> StoredConfig:
    """Ask for the API key and preferred city, persist them and return them."""
    current = store.load() or StoredConfig()
    try:
        api_key = input_fn('Please enter your OpenWeatherMap API key: ').strip() or current.api_key
        city = input_fn('Please enter your preferred city, district, or state: ').strip() or current.city
    except (EOFError, KeyboardInterrupt) as e:
        raise ConfigError("Setup aborted before the API key and city were entered") from e
    config = StoredConfig(api_key=api_key, city=city, units=current.units)
    store.save(config)
    return config


def default_provider(settings: WeatherSettings) -> OpenWeatherMapClient:
    return OpenWeatherMapClient(settings.api_key, base_url=settings.base_url, timeout=settings.timeout)


def main(argv: Optional[List[str]] = None, provider_factory: ProviderFactory = default_provider,
         store: ConfigStore | None = None, input_fn: Callable[[str], str] = input) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )
    log = logging.getLogger('cliweather')
    load_dotenv(find_dotenv(usecwd=True))
    if store is None:
        store = ConfigStore()

    try:
        if args.configure or (not store.exists() and _interactive() and not _env_api_key()):
            prompt_for_config(store, input_fn)
        settings = WeatherSettings.from_env(store)
        units = Units.parse(args.units, default=settings.units)
    except ConfigError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_ERROR

    city = ' '.join(args.city).strip() or (settings.default_city or '')
    if not city:
        parser.print_usage(sys.stderr)
        print("error: no city given and no preferred city configured", file=sys.stderr)
        return EXIT_USAGE

    provider = provider_factory(settings)
    try:
        result = WeatherLookupClient(provider, settings.units).fetch(city, units)
    except WeatherError as e:
        log.debug("Lookup for %r failed", city, exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return EXIT_CODES.get(type(e), EXIT_ERROR)
    finally:
        provider.close()

    print(format_json(result) if args.json else format_text(result))
    return EXIT_OK


def _interactive() -> bool:
    return sys.stdin is not None and sys.stdin.isatty()


def _env_api_key() -> bool:
    return bool(os.environ.get('OPENWEATHER_API_KEY'))


def run() -> None:
    sys.exit(main())


if __name__ == '__main__':
    run()
