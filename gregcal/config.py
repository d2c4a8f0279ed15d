"""Configuration file management for gregcal."""

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path

from gregcal.domain.models import MONTHS_PER_YEAR
from gregcal.domain.year import DEFAULT_MONTHS_PER_ROW


@dataclass(frozen=True)
class CalendarSettings:
    """Immutable display settings."""

    months_per_row: int = DEFAULT_MONTHS_PER_ROW


def get_xdg_config_home() -> Path:
    """Get XDG config directory, with fallback to ~/.config."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config)
    return Path.home() / ".config"


def get_config_path() -> Path:
    """Get the config file path (XDG compliant).

    Returns:
        Path to the config file.
    """
    return get_xdg_config_home() / "gregcal" / "config.toml"


def load_settings(config_path: Path | None = None) -> CalendarSettings:
    """Load display settings from TOML file.

    A missing file is not an error: defaults are used instead.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        CalendarSettings from the file, or defaults.

    Raises:
        tomllib.TOMLDecodeError: If the file is not valid TOML.
        ValueError: If months_per_row is not an integer between 1 and 12.
    """
    if config_path is None:
        config_path = get_config_path()

    if not config_path.exists():
        return CalendarSettings()

    with open(config_path, "rb") as f:
        config = tomllib.load(f)

    months_per_row = config.get("months_per_row", DEFAULT_MONTHS_PER_ROW)
    # bool is a subclass of int
    if not isinstance(months_per_row, int) or isinstance(months_per_row, bool):
        raise ValueError(f"months_per_row must be an integer, got {months_per_row!r}")
    if not 1 <= months_per_row <= MONTHS_PER_YEAR:
        raise ValueError(f"months_per_row must be between 1 and 12, got {months_per_row}")

    return CalendarSettings(months_per_row=months_per_row)
