"""User configuration (YAML) for viewer defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

import yaml

from hexi.core.viewport import DEFAULT_BYTES_PER_ROW
from hexi.ui.palette import PALETTES


class ConfigError(Exception):
    """Raised when the config file is malformed or holds invalid values."""


@dataclass(frozen=True)
class ViewerConfig:
    bytes_per_row: int = DEFAULT_BYTES_PER_ROW
    palette: str = "default"
    log_level: str | None = None


def get_config_path() -> Path:
    """Get platform-appropriate user config file path."""
    if os.name == "nt":  # Windows
        base = os.environ.get("APPDATA", os.path.expanduser("~"))
        return Path(base) / "hexi" / "config.yaml"
    else:  # macOS, Linux
        return Path.home() / ".config" / "hexi" / "config.yaml"


def parse_config(text: str) -> ViewerConfig:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML: {e}") from e
    if data is None:
        return ViewerConfig()
    if not isinstance(data, dict):
        raise ConfigError("Config root must be a mapping")

    unknown = set(data) - {"bytes_per_row", "palette", "log_level"}
    if unknown:
        raise ConfigError(f"Unknown config keys: {', '.join(sorted(unknown))}")

    bpr = data.get("bytes_per_row", DEFAULT_BYTES_PER_ROW)
    # bool is an int subclass; reject `bytes_per_row: yes`
    if not isinstance(bpr, int) or isinstance(bpr, bool) or bpr <= 0:
        raise ConfigError(f"bytes_per_row must be a positive integer, got {bpr!r}")

    palette = data.get("palette", "default")
    if palette not in PALETTES:
        raise ConfigError(f"Unknown palette {palette!r}. Expected one of: {', '.join(PALETTES)}")

    log_level = data.get("log_level")
    if log_level is not None and not isinstance(log_level, str):
        raise ConfigError("log_level must be a string")

    return ViewerConfig(bytes_per_row=bpr, palette=palette, log_level=log_level)


def load_config(path: str | Path | None = None) -> ViewerConfig:
    """Load config from `path` (or the user config path). Missing file -> defaults.

    An explicitly given path must exist.
    """
    if path is None:
        p = get_config_path()
        if not p.exists():
            return ViewerConfig()
    else:
        p = Path(path)
        if not p.exists():
            raise ConfigError(f"Config file not found: {path}")
    return parse_config(p.read_text(encoding="utf-8"))
