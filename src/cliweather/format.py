from __future__ import annotations

import json
from typing import List, Tuple

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from weatherclient.models import WeatherResult


def _number(value: float) -> str:
    return f"{value:.1f}".rstrip('0').rstrip('.')


def result_rows(result: WeatherResult) -> List[Tuple[str, str]]:
    rows = [
        ('city', result.display_name),
        (f"temperature ({result.temperature_unit})", _number(result.temperature)),
        ('condition', result.description or result.condition),
    ]
    if result.pressure is not None:
        rows.append(('pressure (hPa)', str(result.pressure)))
    if result.humidity is not None:
        rows.append(('humidity (%)', str(result.humidity)))
    if result.wind_speed is not None:
        rows.append((f"wind ({result.units.speed_symbol})", _number(result.wind_speed)))
    return rows


def build_table(result: WeatherResult) -> Table:
    table = Table(box=box.ASCII, show_header=False)
    table.add_column('field')
    table.add_column('value')
    for key, value in result_rows(result):
        # Text() keeps provider strings from being read as console markup
        table.add_row(Text(key), Text(value))
    return table


def format_text(result: WeatherResult) -> str:
    """Render the result as a two column table, without colour codes."""
    console = Console(width=100, color_system=None, highlight=False)
    with console.capture() as capture:
        console.print(build_table(result))
    return capture.get().rstrip('\n')


def format_json(result: WeatherResult) -> str:
    return json.dumps(result.as_dict(), indent=2, ensure_ascii=False)
