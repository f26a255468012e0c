"""Browser configuration loaded from ``config.json``.

The config only names files to hide from the tree. Unlike preference files,
it is required: a missing or malformed config aborts startup.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "mdbrowse"
CONFIG_FILENAME = "config.json"
LOCAL_CONFIG_PATH = Path(CONFIG_FILENAME)
USER_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


class ConfigError(Exception):
    """Raised when the config file cannot be read or decoded."""


@dataclass(frozen=True)
class BrowserConfig:
    """Decoded ``config.json`` contents."""

    ignore_files: frozenset[str] = field(default_factory=frozenset)
    source: Path | None = None


def resolve_config_path(explicit: Path | None = None) -> Path:
    """Return the config path to load.

    An explicit path always wins. Otherwise ``./config.json`` is preferred,
    then the per-user config directory; when neither exists the local path is
    returned so the load error names it.
    """
    if explicit is not None:
        return Path(explicit)
    if LOCAL_CONFIG_PATH.exists():
        return LOCAL_CONFIG_PATH
    if USER_CONFIG_PATH.exists():
        return USER_CONFIG_PATH
    return LOCAL_CONFIG_PATH


def parse_config(data: object, source: Path | None = None) -> BrowserConfig:
    """Validate decoded JSON ``data`` into a ``BrowserConfig``."""
    if not isinstance(data, dict):
        raise ConfigError("Error decoding config data: top-level value must be an object")
    raw_ignore = data.get("ignoreFiles", [])
    if raw_ignore is None:
        raw_ignore = []
    if not isinstance(raw_ignore, list):
        raise ConfigError("Error decoding config data: ignoreFiles must be a list of strings")
    for item in raw_ignore:
        if not isinstance(item, str):
            raise ConfigError(f"Error decoding config data: ignoreFiles entry {item!r} is not a string")
    return BrowserConfig(ignore_files=frozenset(raw_ignore), source=source)


def load_config(path: Path) -> BrowserConfig:
    """Read and decode the config at ``path``, raising ``ConfigError`` on failure."""
    path = Path(path)
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise ConfigError(f"Error reading config file: {exc}") from exc
    try:
        data = json.loads(raw)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ConfigError(f"Error decoding config data: {exc}") from exc
    return parse_config(data, source=path)
