"""Config command implementation.

Manages the imfparse configuration file.
"""

import typer
from typing_extensions import Annotated

from imfparse.config import CONFIG_FILE, init_config, load_config, set_config_value
from imfparse.config.paths import CONFIG_DIR

app = typer.Typer(help="Manage configuration")


@app.command()
def init(
    force: Annotated[
        bool, typer.Option("--force", "-f", help="Overwrite existing config")
    ] = False,
):
    """Initialize configuration directory and template config file."""
    created = init_config(overwrite=force)

    if created:
        typer.echo(f"Created config directory: {CONFIG_DIR}")
        typer.echo(f"Created config file: {CONFIG_FILE}")
    else:
        typer.echo(f"Config already exists at {CONFIG_FILE}")
        typer.echo("Use --force to overwrite.")


@app.command()
def show():
    """Display current configuration."""
    config = load_config()

    if not config:
        typer.echo("No configuration found.")
        typer.echo(f"Run 'imfparse config init' to create {CONFIG_FILE}")
        return

    for section, values in config.items():
        # top-level keys outside any table
        if not isinstance(values, dict):
            typer.echo(f"{section} = {values}")
            continue
        typer.echo(f"[{section}]")
        for key, value in values.items():
            typer.echo(f"  {key} = {value}")
        typer.echo()


@app.command("set")
def set_value(
    key: Annotated[
        str,
        typer.Argument(help="Configuration key (dot notation, e.g., 'output.format')"),
    ],
    value: Annotated[str, typer.Argument(help="Configuration value")],
):
    """Set a configuration value using dot notation.

    Examples:
        imfparse config set limits.max_input_length 4096
        imfparse config set output.format json
    """
    try:
        set_config_value(key, value)
        typer.echo(f"Set {key} = {value}")
    except ValueError as e:
        typer.echo(f"Invalid value: {e}", err=True)
        raise typer.Exit(1)
