"""Shared helpers for the parse commands: input, output and error reporting."""

import json
import logging
import sys
from collections.abc import Callable
from enum import Enum

import typer

from imfparse.api import GrammarSyntaxError
from imfparse.config import get_setting, load_config
from imfparse.models import DateTime, Group, Mailbox

logger = logging.getLogger(__name__)


class OutputFormat(str, Enum):
    """Output formats for parse results."""

    text = "text"
    json = "json"


def read_input(text: str | None) -> str:
    """Return the argument, or stdin without its final line break."""
    if text is not None:
        return text
    logger.debug("Reading input from stdin")
    return sys.stdin.read().removesuffix("\n").removesuffix("\r")


def resolve_format(output_format: OutputFormat | None) -> OutputFormat:
    if output_format is not None:
        return output_format
    return OutputFormat(get_setting(load_config(), "output", "format"))


def _mailbox_lines(mailbox: Mailbox, indent: str = "") -> list[str]:
    lines = []
    if mailbox.display_name:
        lines.append(f"{indent}display_name = {' '.join(mailbox.display_name)}")
    if mailbox.route:
        lines.append(f"{indent}route = {', '.join(mailbox.route)}")
    lines.append(f"{indent}local_part = {mailbox.local_part}")
    lines.append(f"{indent}domain = {mailbox.domain}")
    lines.append(f"{indent}addr_spec = {mailbox.addr_spec}")
    return lines


def _group_lines(group: Group) -> list[str]:
    lines = [f"display_name = {' '.join(group.display_name)}"]
    if not group.mailboxes:
        lines.append("(no members)")
    for mailbox in group.mailboxes:
        lines.append("[member]")
        lines.extend(_mailbox_lines(mailbox, indent="  "))
    return lines


def _date_time_lines(value: DateTime) -> list[str]:
    lines = [f"{key} = {item}" for key, item in value.to_dict().items() if item is not None]
    try:
        lines.append(f"iso = {value.to_datetime().isoformat()}")
    except ValueError as e:
        lines.append(f"iso = (not a calendar date: {e})")
    return lines


def text_lines(value) -> list[str]:
    """Render a parse result as ``key = value`` lines."""
    if isinstance(value, Mailbox):
        return ["[mailbox]", *_mailbox_lines(value)]
    if isinstance(value, Group):
        return ["[group]", *_group_lines(value)]
    if isinstance(value, DateTime):
        return ["[date-time]", *_date_time_lines(value)]
    lines: list[str] = []
    for item in value:
        if lines:
            lines.append("")
        lines.extend(text_lines(item))
    return lines


def to_json(value) -> str:
    if isinstance(value, tuple):
        return json.dumps([item.to_dict() for item in value], indent=2)
    return json.dumps(value.to_dict(), indent=2)


def run_parser(
    parser: Callable, text: str | None, output_format: OutputFormat | None
) -> None:
    """Parse the input with ``parser`` and print the result.

    Parse failures and a bad ``output.format`` setting are reported on
    stderr and exit with status 1.
    """
    try:
        output_format = resolve_format(output_format)
    except ValueError as e:
        typer.echo(f"Invalid output.format in config: {e}", err=True)
        raise typer.Exit(1)

    data = read_input(text)
    try:
        value = parser(data)
    except GrammarSyntaxError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(1)

    if output_format is OutputFormat.json:
        typer.echo(to_json(value))
    else:
        for line in text_lines(value):
            typer.echo(line)
