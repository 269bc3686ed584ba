"""Configuration schema definitions.

TypedDicts matching the structure of config.toml. Every key is optional;
missing ones fall back to ``imfparse.config.DEFAULTS``.
"""

from typing import TypedDict


class LimitsConfig(TypedDict, total=False):
    """Resource limits for whole-input parsing.

    Attributes:
        max_input_length: Longest input accepted, in characters (0 disables).
    """

    max_input_length: int


class OutputConfig(TypedDict, total=False):
    """CLI output settings.

    Attributes:
        format: "text" or "json".
    """

    format: str


class LoggingConfig(TypedDict, total=False):
    level: str


class ImfparseConfig(TypedDict, total=False):
    """Root configuration structure."""

    limits: LimitsConfig
    output: OutputConfig
    logging: LoggingConfig
