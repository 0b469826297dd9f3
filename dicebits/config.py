"""
dicebits persistent configuration.

Reads settings from ~/.dicebits/config.json, or from the file named
by the DICEBITS_CONFIG environment variable.
"""

import copy
import json
import os
from pathlib import Path
from typing import Any, Optional

from dicebits.core.log import get_logger

logger = get_logger('config')


DEFAULTS = {
    "generator": {
        # Upper bound accepted for the token count argument
        "max_count": 1024,
    },
    "logging": {
        "level": "WARNING",
        "file": None,
    },
}

CONFIG_DIR = Path.home() / ".dicebits"
CONFIG_FILE = CONFIG_DIR / "config.json"
CONFIG_ENV = "DICEBITS_CONFIG"


def _deep_merge(base: dict, override: dict) -> dict:
    """Deep merge override into base, returning a new dict."""
    result = copy.deepcopy(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def default_config_file() -> Path:
    """Config path from the environment, else the per-user default."""
    env_path = os.environ.get(CONFIG_ENV)
    if env_path:
        return Path(env_path)
    return CONFIG_FILE


class Config:
    """Read-only configuration, deep-merged over DEFAULTS."""

    def __init__(self, config_file: Optional[Path] = None):
        self._file = Path(config_file) if config_file else default_config_file()
        self._data = self._load()

    @property
    def path(self) -> Path:
        return self._file

    def _load(self) -> dict:
        """Load config from file, deep-merged with defaults."""
        if self._file.exists():
            try:
                with open(self._file, 'r') as f:
                    user_data = json.load(f)
                if isinstance(user_data, dict):
                    return _deep_merge(DEFAULTS, user_data)
                logger.warning("Ignoring %s: top level is not an object", self._file)
            except (json.JSONDecodeError, OSError) as e:
                logger.warning("Ignoring unreadable config %s: %s", self._file, e)
        return copy.deepcopy(DEFAULTS)

    def get(self, section: str, key: str) -> Any:
        """Get a config value; a section that is not an object yields the default."""
        values = self._data.get(section, {})
        if not isinstance(values, dict):
            logger.warning("Ignoring config section %r: not an object", section)
            values = DEFAULTS.get(section, {})
        return values.get(key)
