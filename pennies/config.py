"""Configuration file management for pennies.

The config file holds a single `unit` label printed after amounts, e.g.

    unit = "pence"
"""

import os
import tomllib
from pathlib import Path
from typing import Any

import tomli_w

DEFAULT_UNIT = "pence"
CONFIG_DIR_NAME = "pennies"
CONFIG_FILE_NAME = "config.toml"


def get_xdg_config_home() -> Path:
    """Get XDG config directory, falling back to ~/.config when unset or empty."""
    return Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config")


def get_config_path() -> Path:
    return get_xdg_config_home() / CONFIG_DIR_NAME / CONFIG_FILE_NAME


def resolve_config_path(config_path: Path | None) -> Path:
    """Return config_path, or the XDG location when it is None."""
    return get_config_path() if config_path is None else config_path


def default_config() -> dict[str, Any]:
    return {"unit": DEFAULT_UNIT}


def create_default_config(config_path: Path | None = None) -> Path:
    """Create the default config file, making parent directories as needed.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Path the config was written to.
    """
    path = resolve_config_path(config_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    save_config(default_config(), path)
    return path


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        tomllib.TOMLDecodeError: If config file isn't valid TOML.
    """
    return tomllib.loads(resolve_config_path(config_path).read_text())


def save_config(config: dict[str, Any], config_path: Path | None = None) -> None:
    """Write configuration as TOML, readable by the owner only."""
    path = resolve_config_path(config_path)
    path.write_text(tomli_w.dumps(config))
    path.chmod(0o600)


def get_unit(config_path: Path | None = None) -> str:
    """Get the unit label shown after amounts.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configured unit, or "pence" if the file, the key or its value is missing.
    """
    try:
        unit = load_config(config_path).get("unit")
    except FileNotFoundError:
        return DEFAULT_UNIT

    if isinstance(unit, str) and unit:
        return unit
    return DEFAULT_UNIT
