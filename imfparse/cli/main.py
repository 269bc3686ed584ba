"""Main CLI entry point for imfparse."""

import logging

import typer
from typing_extensions import Annotated

from imfparse import __version__
from imfparse.cli import commands
from imfparse.config import DEFAULTS, get_setting, load_config

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="imfparse",
    help="Parse RFC 5322 addresses and date-times, obsolete syntax included",
    no_args_is_help=True,
)

# Register parse commands
app.command(name="mailbox")(commands.mailbox.mailbox)
app.command(name="address")(commands.address.address)
app.command(name="addresses")(commands.addresses.addresses)
app.command(name="date")(commands.date.date)

# Register command groups
app.add_typer(commands.config.app, name="config")


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level, format="%(levelname)s - %(message)s", force=True
    )


@app.callback()
def setup(
    ctx: typer.Context,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log parsing details to stderr")
    ] = False,
):
    """Parse RFC 5322 addresses and date-times, obsolete syntax included."""
    try:
        level = "DEBUG" if verbose else get_setting(load_config(), "logging", "level")
        _configure_logging(level)
    except (TypeError, ValueError) as e:
        typer.echo(f"Invalid logging.level in config: {e}", err=True)
        # config commands must still run so the file can be fixed
        if ctx.invoked_subcommand != "config":
            raise typer.Exit(1)
        level = DEFAULTS["logging"]["level"]
        _configure_logging(level)
    logger.debug("Logging configured at %s", level)


@app.command()
def version():
    """Show version information."""
    typer.echo(f"imfparse version {__version__}")


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
