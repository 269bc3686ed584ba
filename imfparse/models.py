"""Data models for parsed addresses and date-times.

All results are frozen: a parse produces values, never objects that are
later mutated. ``to_dict()`` gives the JSON-friendly form used by the CLI.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from imfparse.grammar.abnf import is_wsp
from imfparse.grammar.lexical import dot_atom_text, is_obs_no_ws_ctl, is_qtext

# Descriptive tags the obsolete zone names map to (RFC 5322 section 4.3)
UNIVERSAL_ZONES = ("Universal Time", "North American UT")


def _is_dot_atom_text(value: str) -> bool:
    result = dot_atom_text(value, 0)
    return result is not None and result[1] == len(value)


def quote_local_part(local_part: str) -> str:
    """Render a decoded local part so it parses back to the same value.

    Dot-atom text is returned as is; anything else is quoted, with a
    backslash before every character qtext cannot carry.
    """
    if _is_dot_atom_text(local_part):
        return local_part
    quoted = []
    for char in local_part:
        code = ord(char)
        if is_qtext(code) or is_wsp(code):
            quoted.append(char)
        else:
            quoted.append("\\" + char)
    return '"' + "".join(quoted) + '"'


def bracket_domain(domain: str) -> str:
    """Render a decoded domain, as a domain literal unless it is dot-atom text."""
    if _is_dot_atom_text(domain):
        return domain
    escaped = []
    for char in domain:
        code = ord(char)
        if 33 <= code <= 90 or 94 <= code <= 126 or is_obs_no_ws_ctl(code):
            escaped.append(char)
        else:
            escaped.append("\\" + char)
    return "[" + "".join(escaped) + "]"


@dataclass(frozen=True)
class Mailbox:
    """A single mailbox: addr-spec plus optional display name and route.

    ``display_name`` holds the decoded words of the phrase and ``route`` the
    domains of an obsolete source route; both may be empty.
    """

    local_part: str
    domain: str
    display_name: tuple[str, ...] = ()
    route: tuple[str, ...] = ()

    @property
    def addr_spec(self) -> str:
        """The ``local-part@domain`` form, re-escaped where needed."""
        return f"{quote_local_part(self.local_part)}@{bracket_domain(self.domain)}"

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "display_name": list(self.display_name),
            "route": list(self.route),
            "local_part": self.local_part,
            "domain": self.domain,
            "addr_spec": self.addr_spec,
        }


@dataclass(frozen=True)
class Group:
    """A named list of mailboxes (RFC 5322 group)."""

    display_name: tuple[str, ...]
    mailboxes: tuple[Mailbox, ...] = ()

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "display_name": list(self.display_name),
            "mailboxes": [mailbox.to_dict() for mailbox in self.mailboxes],
        }


Address = Mailbox | Group


@dataclass(frozen=True)
class DateTime:
    """A date-time exactly as the grammar read it.

    Field ranges are syntactic: day, hour, minute and second are any one or
    two digit number. ``offset`` is either the signed four-digit zone value
    (``-0600`` becomes ``-600``) or the descriptive tag of an obsolete zone
    name such as ``"Eastern"`` or ``"Military"``.
    """

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    offset: int | str
    day_of_week: int | None = None

    @property
    def full_year(self) -> int:
        """The year with obsolete two- and three-digit forms resolved.

        RFC 5322 section 4.3: below 50 add 2000, otherwise below 1000 add 1900.
        """
        if self.year < 50:
            return self.year + 2000
        if self.year < 1000:
            return self.year + 1900
        return self.year

    def tzinfo(self) -> timezone | None:
        """The zone as a fixed offset, or None when the offset is unknown.

        Obsolete zone tags other than the universal ones carry no reliable
        offset, so they give None rather than a guessed value.
        """
        if isinstance(self.offset, str):
            return timezone.utc if self.offset in UNIVERSAL_ZONES else None
        sign = -1 if self.offset < 0 else 1
        hours, minutes = divmod(abs(self.offset), 100)
        return timezone(sign * timedelta(hours=hours, minutes=minutes))

    def to_datetime(self) -> datetime:
        """Convert to a ``datetime``; naive when the offset is unknown.

        Raises:
            ValueError: If the fields do not form a valid calendar date-time.
        """
        return datetime(
            self.full_year,
            self.month,
            self.day,
            self.hour,
            self.minute,
            self.second,
            tzinfo=self.tzinfo(),
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "year": self.year,
            "month": self.month,
            "day": self.day,
            "day_of_week": self.day_of_week,
            "hour": self.hour,
            "minute": self.minute,
            "second": self.second,
            "offset": self.offset,
        }
