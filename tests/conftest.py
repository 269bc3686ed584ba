"""Shared fixtures."""

from pathlib import Path
from unittest.mock import patch

import pytest


@pytest.fixture
def config_file(tmp_path: Path):
    """Point the config layer at a fresh file under tmp_path."""
    path = tmp_path / "config.toml"
    with (
        patch("imfparse.config.CONFIG_FILE", path),
        patch("imfparse.config.paths.CONFIG_DIR", tmp_path),
        patch("imfparse.config._cached_config", None),
    ):
        yield path
