"""Public entry points for parsing RFC 5322 addresses and date-times.

Two families of functions:

- ``parse_*(data, pos=0)`` run one production from ``pos`` and return
  ``(value, end)`` or ``None``. They never raise for bad input and leave
  whatever follows ``end`` to the caller.
- ``*_from_string(data)`` require the production to cover the whole input
  and raise ``GrammarSyntaxError`` otherwise.

Input may be ``str`` or ``bytes``. Bytes are read one byte per code point,
so octets above 127 stay in the text and simply never match ASCII classes.

Usage:
    from imfparse.api import date_time_from_string

    parsed = date_time_from_string("Fri, 21 Nov 1997 09:55:06 -0600")
    parsed.offset  # -600
"""

import logging

from imfparse.config import get_setting, load_config
from imfparse.grammar import address as address_grammar
from imfparse.grammar import date_time as date_time_grammar
from imfparse.grammar.base import Production, Result
from imfparse.models import Address, DateTime, Mailbox

logger = logging.getLogger(__name__)

LANGUAGE = "RFC 5322"


class GrammarSyntaxError(ValueError):
    """Input that does not match the requested production.

    Attributes:
        language: Name of the grammar, always "RFC 5322".
        production: Name of the production that was attempted.
        source: The text that failed to parse.
    """

    def __init__(
        self,
        production: str,
        source: str,
        *,
        language: str = LANGUAGE,
        message: str | None = None,
    ):
        self.language = language
        self.production = production
        self.source = source
        if message is None:
            message = (
                f"Could not parse the following as a {production} expression "
                f"in the {language} grammar: “{source}”"
            )
        super().__init__(message)


class InputTooLongError(GrammarSyntaxError):
    """Input longer than the configured ``limits.max_input_length``."""

    def __init__(self, production: str, source: str, limit: int):
        self.limit = limit
        super().__init__(
            production,
            source,
            message=(
                f"Refusing to parse {len(source)} characters as a {production} "
                f"expression: the limit is {limit}"
            ),
        )


def _as_text(data: str | bytes) -> str:
    if isinstance(data, bytes):
        return data.decode("latin-1")
    return data


def _run(production: Production, name: str, text: str, pos: int) -> Result:
    try:
        return production(text, pos)
    except RecursionError:
        # Only reachable through comments nested deeper than the stack allows
        logger.warning("Nesting too deep while parsing %s expression", name)
        return None


def parse_mailbox(data: str | bytes, pos: int = 0) -> Result[Mailbox]:
    """Parse a mailbox (name-addr or addr-spec) starting at ``pos``."""
    return _run(address_grammar.mailbox, "mailbox", _as_text(data), pos)


def parse_address(data: str | bytes, pos: int = 0) -> Result[Address]:
    """Parse a mailbox or group starting at ``pos``."""
    return _run(address_grammar.address, "address", _as_text(data), pos)


def parse_address_list(data: str | bytes, pos: int = 0) -> Result[tuple[Address, ...]]:
    """Parse a comma-separated address list starting at ``pos``."""
    return _run(address_grammar.address_list, "address-list", _as_text(data), pos)


def parse_addr_spec(data: str | bytes, pos: int = 0) -> Result[tuple[str, str]]:
    """Parse a bare ``local-part@domain`` starting at ``pos``.

    Yields ``(local_part, domain)``, both decoded.
    """
    return _run(address_grammar.addr_spec, "addr-spec", _as_text(data), pos)


def parse_date_time(data: str | bytes, pos: int = 0) -> Result[DateTime]:
    """Parse a date-time starting at ``pos``."""
    return _run(date_time_grammar.date_time, "date-time", _as_text(data), pos)


def _input_limit() -> int:
    return get_setting(load_config(), "limits", "max_input_length")


def _parse_whole(
    production: Production, name: str, data: str | bytes, max_length: int | None
):
    """Run ``production`` over all of ``data`` or raise GrammarSyntaxError.

    A ``max_length`` of None reads the limit from the config file; zero or
    a negative value disables it.
    """
    text = _as_text(data)
    limit = _input_limit() if max_length is None else max_length
    if 0 < limit < len(text):
        logger.warning("Rejected %s input of %d characters", name, len(text))
        raise InputTooLongError(name, text, limit)

    logger.debug("Parsing %d characters as %s", len(text), name)
    try:
        result = production(text, 0)
    except RecursionError as exc:
        logger.warning("Nesting too deep while parsing %s expression", name)
        raise GrammarSyntaxError(name, text) from exc

    if result is None or result[1] != len(text):
        consumed = 0 if result is None else result[1]
        logger.info(
            "Rejected %s input, stopped after %d of %d characters",
            name,
            consumed,
            len(text),
        )
        raise GrammarSyntaxError(name, text)

    return result[0]


def mailbox_from_string(data: str | bytes, *, max_length: int | None = None) -> Mailbox:
    """Parse the whole input as one mailbox.

    Raises:
        GrammarSyntaxError: If the input is not exactly one mailbox.
        InputTooLongError: If the input exceeds the length limit.
    """
    return _parse_whole(address_grammar.mailbox, "mailbox", data, max_length)


def address_from_string(data: str | bytes, *, max_length: int | None = None) -> Address:
    """Parse the whole input as one mailbox or group."""
    return _parse_whole(address_grammar.address, "address", data, max_length)


def address_list_from_string(
    data: str | bytes, *, max_length: int | None = None
) -> tuple[Address, ...]:
    """Parse the whole input as an address list, obsolete empty entries included."""
    return _parse_whole(address_grammar.address_list, "address-list", data, max_length)


def date_time_from_string(data: str | bytes, *, max_length: int | None = None) -> DateTime:
    """Parse the whole input as a date-time.

    The grammar only checks syntax; call ``to_datetime()`` on the result to
    get a calendar-checked ``datetime``.

    Raises:
        GrammarSyntaxError: If the input is not exactly one date-time.
        InputTooLongError: If the input exceeds the length limit.
    """
    return _parse_whole(date_time_grammar.date_time, "date-time", data, max_length)
