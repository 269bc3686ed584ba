"""Address specification (RFC 5322 section 3.4) and its obsolete forms.

Each production takes ``(text, pos)`` and returns ``(value, end)`` or
``None``. The entry point most callers want is ``mailbox``, which yields a
``Mailbox``; ``address`` and ``address_list`` also yield ``Group`` values.

Example:
    result = mailbox('"Joe Q. Public" <john.q.public@example.com>', 0)
    if result is not None:
        parsed, end = result  # parsed.display_name == ("Joe Q. Public",)
"""

from imfparse.models import Group, Mailbox

from .base import Result, first_of, prefer_modern, value_of
from .lexical import (
    atom,
    cfws,
    dot_atom,
    fws,
    is_obs_no_ws_ctl,
    phrase,
    quoted_atom,
    quoted_pair,
    word,
)


def _skip_cfws(text: str, pos: int) -> int:
    result = cfws(text, pos)
    if result is None:
        return pos
    return result[1]


def _skip_fws(text: str, pos: int) -> int:
    result = fws(text, pos)
    if result is None:
        return pos
    return result[1]


def _dotted(production):
    """``production *("." production)``, yielding the values joined by dots."""

    def wrapper(text: str, pos: int) -> Result[str]:
        result = production(text, pos)
        if result is None:
            return None
        values = [result[0]]
        end = result[1]
        while text.startswith(".", end):
            result = production(text, end + 1)
            if result is None:
                break
            values.append(result[0])
            end = result[1]
        return ".".join(values), end

    return wrapper


# --- Local part ---

obs_local_part = _dotted(word)
obs_local_part.__doc__ = """obs-local-part = word *("." word)

Yields the decoded words joined by periods.
"""

local_part = prefer_modern(first_of(dot_atom, quoted_atom), obs_local_part)
local_part.__doc__ = """local-part = dot-atom / quoted-string / obs-local-part"""


# --- Domain ---


def is_dtext(code: int) -> bool:
    """dtext = %d33-90 / %d94-126 / obs-dtext (its obs-NO-WS-CTL half)"""
    return 33 <= code <= 90 or 94 <= code <= 126 or is_obs_no_ws_ctl(code)


def dtext(text: str, pos: int) -> Result[str]:
    """dtext, including the quoted-pair half of obs-dtext."""
    if pos < len(text) and is_dtext(ord(text[pos])):
        return text[pos], pos + 1
    return quoted_pair(text, pos)


def domain_literal(text: str, pos: int) -> Result[str]:
    """domain-literal = [CFWS] "[" *([FWS] dtext) [FWS] "]" [CFWS]

    Yields the decoded dtext characters; brackets and folding white space
    are not part of the value.
    """
    end = _skip_cfws(text, pos)
    if not text.startswith("[", end):
        return None
    chars = []
    end += 1
    while True:
        result = dtext(text, _skip_fws(text, end))
        if result is None:
            break
        chars.append(result[0])
        end = result[1]
    end = _skip_fws(text, end)
    if not text.startswith("]", end):
        return None
    return "".join(chars), _skip_cfws(text, end + 1)


obs_domain = _dotted(atom)
obs_domain.__doc__ = """obs-domain = atom *("." atom)"""

domain = prefer_modern(first_of(dot_atom, domain_literal), obs_domain)
domain.__doc__ = """domain = dot-atom / domain-literal / obs-domain"""


def addr_spec(text: str, pos: int) -> Result[tuple[str, str]]:
    """addr-spec = local-part "@" domain

    Yields ``(local_part, domain)``.
    """
    result = local_part(text, pos)
    if result is None:
        return None
    local, end = result
    if not text.startswith("@", end):
        return None
    result = domain(text, end + 1)
    if result is None:
        return None
    return (local, result[0]), result[1]


# --- Routes and angle addresses ---


def _at_domain(text: str, pos: int) -> Result[str]:
    if not text.startswith("@", pos):
        return None
    return domain(text, pos + 1)


def obs_domain_list(text: str, pos: int) -> Result[list[str]]:
    """obs-domain-list = *(CFWS / ",") "@" domain *("," [CFWS] ["@" domain])"""
    end = pos
    while True:
        if text.startswith(",", end):
            end += 1
            continue
        result = cfws(text, end)
        if result is None:
            break
        end = result[1]
    result = _at_domain(text, end)
    if result is None:
        return None
    domains = [result[0]]
    end = result[1]
    while text.startswith(",", end):
        end = _skip_cfws(text, end + 1)
        result = _at_domain(text, end)
        if result is not None:
            domains.append(result[0])
            end = result[1]
    return domains, end


def obs_route(text: str, pos: int) -> Result[list[str]]:
    """obs-route = obs-domain-list ":" """
    result = obs_domain_list(text, pos)
    if result is None or not text.startswith(":", result[1]):
        return None
    return result[0], result[1] + 1


def _angle_addr(text: str, pos: int, *, routed: bool) -> Result[tuple]:
    end = _skip_cfws(text, pos)
    if not text.startswith("<", end):
        return None
    end += 1
    route: list[str] = []
    if routed:
        result = obs_route(text, end)
        if result is None:
            return None
        route, end = result
    result = addr_spec(text, end)
    if result is None:
        return None
    (local, domain_), end = result
    if not text.startswith(">", end):
        return None
    return (tuple(route), local, domain_), _skip_cfws(text, end + 1)


def obs_angle_addr(text: str, pos: int) -> Result[tuple]:
    """obs-angle-addr = [CFWS] "<" obs-route addr-spec ">" [CFWS]

    Yields ``(route, local_part, domain)``.
    """
    return _angle_addr(text, pos, routed=True)


def _modern_angle_addr(text: str, pos: int) -> Result[tuple]:
    return _angle_addr(text, pos, routed=False)


angle_addr = prefer_modern(_modern_angle_addr, obs_angle_addr)
angle_addr.__doc__ = """angle-addr = [CFWS] "<" addr-spec ">" [CFWS] / obs-angle-addr

Yields ``(route, local_part, domain)``; the route is empty for the modern form.
"""


# --- Mailboxes ---

display_name = phrase


def name_addr(text: str, pos: int) -> Result[Mailbox]:
    """name-addr = [display-name] angle-addr"""
    name: list[str] = []
    end = pos
    result = display_name(text, pos)
    if result is not None:
        name, end = result
    result = angle_addr(text, end)
    if result is None and end != pos:
        name, end = [], pos
        result = angle_addr(text, pos)
    if result is None:
        return None
    (route, local, domain_), end = result
    return (
        Mailbox(local_part=local, domain=domain_, display_name=tuple(name), route=route),
        end,
    )


def _mailbox_from_parts(parts: tuple[str, str]) -> Mailbox:
    local, domain_ = parts
    return Mailbox(local_part=local, domain=domain_)


_bare_mailbox = value_of(addr_spec, _mailbox_from_parts)

mailbox = first_of(name_addr, _bare_mailbox)
mailbox.__doc__ = """mailbox = name-addr / addr-spec

Yields a ``Mailbox``.
"""


def _separated(item):
    """``item *("," item)``, yielding a tuple of values."""

    def production(text: str, pos: int) -> Result[tuple]:
        result = item(text, pos)
        if result is None:
            return None
        values = [result[0]]
        end = result[1]
        while text.startswith(",", end):
            result = item(text, end + 1)
            if result is None:
                break
            values.append(result[0])
            end = result[1]
        return tuple(values), end

    return production


def _skip_stray_commas(text: str, pos: int) -> int:
    # *([CFWS] ",")
    end = pos
    while True:
        after = _skip_cfws(text, end)
        if not text.startswith(",", after):
            return end
        end = after + 1


def _obs_list(item):
    """``*([CFWS] ",") item *("," [item / CFWS])``

    Empty entries and stray commas are skipped without contributing values.
    """

    def production(text: str, pos: int) -> Result[tuple]:
        result = item(text, _skip_stray_commas(text, pos))
        if result is None:
            return None
        values = [result[0]]
        end = result[1]
        while text.startswith(",", end):
            end += 1
            result = item(text, end)
            if result is not None:
                values.append(result[0])
                end = result[1]
            else:
                end = _skip_cfws(text, end)
        return tuple(values), end

    return production


obs_mbox_list = _obs_list(mailbox)
obs_mbox_list.__doc__ = """obs-mbox-list = *([CFWS] ",") mailbox *("," [mailbox / CFWS])"""

mailbox_list = prefer_modern(_separated(mailbox), obs_mbox_list)
mailbox_list.__doc__ = """mailbox-list = (mailbox *("," mailbox)) / obs-mbox-list

Yields a tuple of ``Mailbox``.
"""


# --- Groups and addresses ---


def obs_group_list(text: str, pos: int) -> Result[tuple]:
    """obs-group-list = 1*([CFWS] ",") [CFWS]

    Yields an empty tuple: a list of nothing but commas has no members.
    """
    end = _skip_stray_commas(text, pos)
    if end == pos:
        return None
    return (), _skip_cfws(text, end)


_empty_group_list = value_of(cfws, lambda _: ())

group_list = prefer_modern(first_of(mailbox_list, _empty_group_list), obs_group_list)
group_list.__doc__ = """group-list = mailbox-list / CFWS / obs-group-list

Yields a tuple of ``Mailbox``, empty when the group has no members.
"""


def group(text: str, pos: int) -> Result[Group]:
    """group = display-name ":" [group-list] ";" [CFWS]"""
    result = display_name(text, pos)
    if result is None:
        return None
    name, end = result
    if not text.startswith(":", end):
        return None
    end += 1
    members: tuple = ()
    result = group_list(text, end)
    if result is not None:
        members, end = result
    if not text.startswith(";", end):
        return None
    return Group(display_name=tuple(name), mailboxes=members), _skip_cfws(text, end + 1)


address = first_of(mailbox, group)
address.__doc__ = """address = mailbox / group

Yields a ``Mailbox`` or a ``Group``.
"""

obs_addr_list = _obs_list(address)
obs_addr_list.__doc__ = """obs-addr-list = *([CFWS] ",") address *("," [address / CFWS])"""

address_list = prefer_modern(_separated(address), obs_addr_list)
address_list.__doc__ = """address-list = (address *("," address)) / obs-addr-list

Yields a tuple of ``Mailbox`` and ``Group`` values.
"""
