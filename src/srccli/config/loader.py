"""Config loader for srccli settings.

Search order: explicit --config -> ./srccli.toml -> platform config.toml
Uses stdlib tomllib (Python 3.11+).
"""

from __future__ import annotations

import logging
import os
import platform
import tomllib
from pathlib import Path
from typing import Any

from srccli.config.settings import Settings
from srccli.errors import ConfigError

logger = logging.getLogger(__name__)


def get_platform_config_path() -> Path:
    """Return the platform-specific config.toml path."""
    system = platform.system().lower()
    if system == "darwin":
        return Path.home() / "Library" / "Application Support" / "srccli" / "config.toml"
    if system == "windows":
        appdata = os.environ.get("APPDATA")
        if appdata:
            return Path(appdata) / "srccli" / "config.toml"
        return Path.home() / "AppData" / "Roaming" / "srccli" / "config.toml"

    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config) / "srccli" / "config.toml"
    return Path.home() / ".config" / "srccli" / "config.toml"


def get_config_search_paths() -> list[Path]:
    """Return config search paths in priority order."""
    return [Path("./srccli.toml"), get_platform_config_path()]


def _find_config_file() -> Path | None:
    for path in get_config_search_paths():
        if path.exists():
            return path
    return None


def _parse_toml(path: Path) -> dict[str, Any]:
    with path.open("rb") as f:
        return tomllib.load(f)


def resolve_config_path(config_path: Path | None = None) -> Path:
    """Resolve the config path used for display."""
    if config_path:
        return config_path
    return _find_config_file() or get_platform_config_path()


def load_settings(config_path: Path | None = None) -> Settings:
    """Load settings from a TOML file, then apply SRC_* environment overrides.

    Args:
        config_path: Explicit path to config file. If None, searches default locations.

    Returns:
        Settings with loaded or default values.

    Raises:
        FileNotFoundError: If an explicit config_path is provided but does not exist.
        ConfigError: If the file cannot be parsed or holds invalid values.
    """
    if config_path:
        if not config_path.exists():
            raise FileNotFoundError(
                f"Configuration file not found at explicitly provided path: {config_path}. "
                "Ensure the file exists or omit --config to use default search paths."
            )
        path: Path = config_path
    else:
        found_path = _find_config_file()
        if found_path is None:
            logger.debug("No config file found, using defaults")
            return Settings()
        path = found_path

    logger.debug("Loading config from %s", path)
    try:
        data = _parse_toml(path)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"Failed to parse configuration file at {path}: {e}") from e

    if "snapshot_dir" in data:
        snapshot_dir = Path(data["snapshot_dir"])
        # Resolve relative paths against the config file location
        if not snapshot_dir.is_absolute():
            snapshot_dir = path.parent / snapshot_dir
        data["snapshot_dir"] = snapshot_dir

    try:
        return Settings(**data)
    except ValueError as e:
        raise ConfigError(f"Invalid configuration file at {path}: {e}") from e
