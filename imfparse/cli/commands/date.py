"""Date command implementation."""

import typer
from typing_extensions import Annotated

from imfparse.api import date_time_from_string
from imfparse.cli.output import OutputFormat, run_parser


def date(
    text: Annotated[
        str | None, typer.Argument(help="Date-time to parse (reads stdin if omitted)")
    ] = None,
    format: Annotated[
        OutputFormat | None,
        typer.Option("--format", help="Output format: text, json"),
    ] = None,
):
    """Parse a date-time, e.g. 'Fri, 21 Nov 1997 09:55:06 -0600'.

    Obsolete zone names (EST, GMT, military letters) are reported by name;
    only UT and GMT are treated as a known offset.
    """
    run_parser(date_time_from_string, text, format)
