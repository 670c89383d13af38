# es_units/core/config.py - Configuration management
import os
from typing import Any

import yaml

from .exceptions import ConfigurationError

CONFIG_ENV_VAR = "ES_UNITS_CONFIG"


def get_config_path() -> str | None:
    """Config file path from ES_UNITS_CONFIG, or None when unset"""
    return os.getenv(CONFIG_ENV_VAR) or None


def get_default_config() -> dict[str, Any]:
    """Return default configuration"""
    return {
        "encoding": {
            "sort_keys": False,
            "ensure_ascii": False,
            "indent": None,
        },
    }


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(path: str | None = None) -> dict[str, Any]:
    """
    Load configuration from a YAML file merged over the defaults.

    Args:
        path: Config file path. Defaults to env ES_UNITS_CONFIG; without
            either, only the defaults are used

    Returns:
        Configuration dictionary

    Raises:
        ConfigurationError: If the file is not valid YAML or not a mapping
    """
    path = path or get_config_path()
    if path is None or not os.path.exists(path):
        return get_default_config()

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}", {"path": path, "reason": str(e)}) from e

    if data is None:
        return get_default_config()
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Config root must be a mapping, got {type(data).__name__}", {"path": path}
        )

    return _merge(get_default_config(), data)


# Global config instance
_config: dict[str, Any] | None = None


def get_config() -> dict[str, Any]:
    """Get global config instance (cached)"""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reload_config() -> dict[str, Any]:
    """Drop the cached config and load it again"""
    global _config
    _config = None
    return get_config()


def get_config_value(path: str, default: Any = None) -> Any:
    """Get configuration value by dot-separated path (e.g., 'encoding.sort_keys')"""
    value: Any = get_config()

    try:
        for key in path.split("."):
            value = value[key]
        return value
    except (KeyError, TypeError):
        return default
