"""Configuration management module.

Handles loading, saving, and accessing the imfparse configuration.
Config is stored at ~/.config/imfparse/config.toml

Usage:
    from imfparse.config import load_config, get_setting

    config = load_config()
    limit = get_setting(config, "limits", "max_input_length")
"""

import tomllib

import tomli_w

from .paths import CONFIG_FILE, ensure_config_dir
from .schema import ImfparseConfig
from .template import CONFIG_TEMPLATE

__all__ = [
    "load_config",
    "save_config",
    "init_config",
    "get_setting",
    "set_config_value",
    "DEFAULTS",
    "CONFIG_FILE",
]

# Values used for any key the config file leaves out
DEFAULTS: ImfparseConfig = {
    "limits": {"max_input_length": 16384},
    "output": {"format": "text"},
    "logging": {"level": "WARNING"},
}

# Fields that should be integers
INT_FIELDS = {"max_input_length"}

# Fields restricted to a fixed set of values
CHOICE_FIELDS = {
    "format": ("text", "json"),
    "level": ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"),
}

# Module-level cache for loaded config.
# Avoids repeated disk reads during a single CLI invocation.
_cached_config: ImfparseConfig | None = None


def load_config(*, force_reload: bool = False) -> ImfparseConfig:
    """Load configuration from disk.

    Returns empty dict if config file doesn't exist.
    Uses module-level caching to avoid repeated disk reads.

    Args:
        force_reload: Bypass cache and read from disk (useful after saving).

    Returns:
        The configuration dictionary.
    """
    global _cached_config

    if _cached_config is not None and not force_reload:
        return _cached_config

    if not CONFIG_FILE.exists():
        _cached_config = {}
        return _cached_config

    with open(CONFIG_FILE, "rb") as f:
        _cached_config = tomllib.load(f)

    return _cached_config


def save_config(config: ImfparseConfig) -> None:
    """Save configuration to disk.

    Creates config directory if needed. Updates the module cache.
    """
    global _cached_config

    ensure_config_dir()

    with open(CONFIG_FILE, "wb") as f:
        tomli_w.dump(config, f)

    _cached_config = config


def init_config(*, overwrite: bool = False) -> bool:
    """Initialize config directory and create template config file.

    Args:
        overwrite: If True, overwrite existing config file.

    Returns:
        True if config was created, False if it already existed.
    """
    ensure_config_dir()

    if CONFIG_FILE.exists() and not overwrite:
        return False

    CONFIG_FILE.write_text(CONFIG_TEMPLATE)
    return True


def get_setting(config: ImfparseConfig, section: str, key: str):
    """Look up ``section.key``, falling back to ``DEFAULTS``.

    Raises:
        KeyError: If the key has no default either.
    """
    value = config.get(section, {}).get(key)
    if value is None:
        return DEFAULTS[section][key]
    return value


def set_config_value(key: str, value: str) -> None:
    """Set a configuration value using dot notation.

    Examples:
        set_config_value("limits.max_input_length", "4096")
        set_config_value("output.format", "json")

    Args:
        key: Dot-separated key path (e.g., "output.format").
        value: Value to set (will be type-converted for known fields).

    Raises:
        ValueError: If value cannot be converted to expected type.
    """
    config = load_config(force_reload=True)

    parts = key.split(".")

    # Navigate to parent dict, creating intermediate dicts as needed
    current: dict = config
    for part in parts[:-1]:
        if part not in current:
            current[part] = {}
        current = current[part]

    final_key = parts[-1]
    current[final_key] = _convert_value(final_key, value)

    save_config(config)


def _convert_value(key: str, value: str) -> str | int:
    """Convert string value to appropriate type based on field name.

    Known integer fields are converted to int, choice fields are checked
    against their allowed values, everything else stays str.

    Raises:
        ValueError: If value cannot be converted to expected type.
    """
    if key in INT_FIELDS:
        return int(value)

    if key in CHOICE_FIELDS:
        normalized = value.upper() if key == "level" else value.lower()
        if normalized not in CHOICE_FIELDS[key]:
            allowed = ", ".join(CHOICE_FIELDS[key])
            raise ValueError(f"{key} must be one of: {allowed}")
        return normalized

    return value
