"""Address command implementation."""

import typer
from typing_extensions import Annotated

from imfparse.api import address_from_string
from imfparse.cli.output import OutputFormat, run_parser


def address(
    text: Annotated[
        str | None, typer.Argument(help="Address to parse (reads stdin if omitted)")
    ] = None,
    format: Annotated[
        OutputFormat | None,
        typer.Option("--format", help="Output format: text, json"),
    ] = None,
):
    """Parse a single address: a mailbox or a group.

    Examples:
        imfparse address 'jdoe@example.org'
        imfparse address 'A Group:Ed Jones <c@a.test>,joe@where.test;'
    """
    run_parser(address_from_string, text, format)
