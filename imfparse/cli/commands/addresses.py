"""Addresses command implementation."""

import typer
from typing_extensions import Annotated

from imfparse.api import address_list_from_string
from imfparse.cli.output import OutputFormat, run_parser


def addresses(
    text: Annotated[
        str | None,
        typer.Argument(help="Address list to parse (reads stdin if omitted)"),
    ] = None,
    format: Annotated[
        OutputFormat | None,
        typer.Option("--format", help="Output format: text, json"),
    ] = None,
):
    """Parse a comma-separated address list, as found in To: or Cc: fields."""
    run_parser(address_list_from_string, text, format)
