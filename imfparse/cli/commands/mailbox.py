"""Mailbox command implementation."""

import typer
from typing_extensions import Annotated

from imfparse.api import mailbox_from_string
from imfparse.cli.output import OutputFormat, run_parser


def mailbox(
    text: Annotated[
        str | None, typer.Argument(help="Mailbox to parse (reads stdin if omitted)")
    ] = None,
    format: Annotated[
        OutputFormat | None,
        typer.Option("--format", help="Output format: text, json"),
    ] = None,
):
    """Parse a single mailbox, e.g. 'John Doe <jdoe@machine.example>'."""
    run_parser(mailbox_from_string, text, format)
