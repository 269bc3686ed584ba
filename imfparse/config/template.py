"""Default configuration template.

Written to ~/.config/imfparse/config.toml by `imfparse config init`.
"""

CONFIG_TEMPLATE = """\
# imfparse configuration

[limits]
# Longest input the whole-input parsers accept, in characters.
# Deeply nested comments can exhaust the stack long before this; 0 disables.
max_input_length = 16384

[output]
# Default CLI output: "text" or "json"
format = "text"

[logging]
# DEBUG, INFO, WARNING or ERROR
level = "WARNING"
"""
