from srccli.config.loader import (
    get_config_search_paths,
    get_platform_config_path,
    load_settings,
    resolve_config_path,
)
from srccli.config.settings import DEFAULT_ENDPOINT, DEFAULT_SNAPSHOT_DIR, Settings

__all__ = [
    "DEFAULT_ENDPOINT",
    "DEFAULT_SNAPSHOT_DIR",
    "Settings",
    "get_config_search_paths",
    "get_platform_config_path",
    "load_settings",
    "resolve_config_path",
]
