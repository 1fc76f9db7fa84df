from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .errors import ConfigError

DEFAULT_CONFIG_PATH = Path('~/.config/cliweather/config.txt')

_log = logging.getLogger(__name__)


@dataclass
class StoredConfig:
    """Preferences persisted between invocations."""
    api_key: Optional[str] = None
    city: Optional[str] = None
    units: Optional[str] = None


class ConfigStore:
    """Plain-text preference file.

    Layout is one value per line: API key, preferred city/district/state and
    optionally the unit system. Blank lines are read back as ``None``.
    """

    def __init__(self, path: str | os.PathLike | None = None):
        if path is None:
            path = os.environ.get('CLIWEATHER_CONFIG') or DEFAULT_CONFIG_PATH
        self.path = Path(path).expanduser()

    def exists(self) -> bool:
        return self.path.is_file()

    def load(self) -> StoredConfig | None:
        """Return the stored preferences, or None when nothing was saved yet."""
        if not self.exists():
            return None
        try:
            text = self.path.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError(f"Unable to read config file {self.path}: {e}") from e
        lines = [line.strip() or None for line in text.splitlines()]
        lines += [None] * (3 - len(lines))
        _log.debug("Loaded config from %s", self.path)
        return StoredConfig(api_key=lines[0], city=lines[1], units=lines[2])

    def save(self, config: StoredConfig) -> Path:
        values = [config.api_key or '', config.city or '']
        if config.units:
            values.append(config.units)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text('\n'.join(v.strip() for v in values) + '\n', encoding='utf-8')
        except OSError as e:
            raise ConfigError(f"Unable to write config file {self.path}: {e}") from e
        _log.info("Saved preferences to %s", self.path)
        return self.path
