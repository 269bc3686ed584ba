"""Path constants and directory utilities for imfparse config.

Follows the XDG Base Directory layout: ~/.config/imfparse/config.toml
"""

from pathlib import Path


CONFIG_DIR = Path.home() / ".config" / "imfparse"
CONFIG_FILE = CONFIG_DIR / "config.toml"


def ensure_config_dir() -> Path:
    """Create config directory if it doesn't exist.

    Returns the config directory path.
    """
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    return CONFIG_DIR
