"""Lexical productions of RFC 5322 section 3.2, with their obsolete forms.

Covers quoted characters, folding white space and comments, atoms and
quoted strings, words and phrases, and unstructured text. Whitespace that
RFC 5322 treats as insignificant (CFWS around atoms) is consumed but never
part of a value; whitespace inside quoted strings is kept, unfolded.
"""

from .abnf import cr, crlf, is_alpha, is_digit, is_vchar, is_wsp, lf, vchar, wsp
from .base import (
    Result,
    char_class,
    first_of,
    joined,
    optional,
    prefer_modern,
    repeat,
)

ATEXT_SPECIALS = "!#$%&'*+-/=?^_`{|}~"
SPECIALS = '()<>[]:;@\\,."'


def is_obs_no_ws_ctl(code: int) -> bool:
    """obs-NO-WS-CTL = %d1-8 / %d11 / %d12 / %d14-31 / %d127

    US-ASCII controls other than NUL, CR, LF and white space.
    """
    return 1 <= code <= 8 or code in (11, 12) or 14 <= code <= 31 or code == 127


def is_atext(code: int) -> bool:
    """atext: letters, digits and the non-special printable punctuation."""
    return is_alpha(code) or is_digit(code) or chr(code) in ATEXT_SPECIALS


def is_specials(code: int) -> bool:
    """specials: printable characters that do not appear in atext."""
    return chr(code) in SPECIALS


def is_ctext(code: int) -> bool:
    """ctext = %d33-39 / %d42-91 / %d93-126 / obs-ctext"""
    return (
        33 <= code <= 39
        or 42 <= code <= 91
        or 93 <= code <= 126
        or is_obs_no_ws_ctl(code)
    )


def is_qtext(code: int) -> bool:
    """qtext = %d33 / %d35-91 / %d93-126 / obs-qtext"""
    return (
        code == 33
        or 35 <= code <= 91
        or 93 <= code <= 126
        or is_obs_no_ws_ctl(code)
    )


def is_text(code: int) -> bool:
    """text = %d1-9 / %d11 / %d12 / %d14-127   ; excluding CR and LF"""
    return 1 <= code <= 9 or code in (11, 12) or 14 <= code <= 127


def is_obs_utext(code: int) -> bool:
    """obs-utext = %d0 / obs-NO-WS-CTL / VCHAR"""
    return code == 0 or is_obs_no_ws_ctl(code) or is_vchar(code)


atext = char_class(is_atext)
specials = char_class(is_specials)
ctext = char_class(is_ctext)
qtext = char_class(is_qtext)
text = char_class(is_text)
obs_utext = char_class(is_obs_utext)


# --- Quoted characters ---


def _escaped(predicate):
    def production(source: str, pos: int) -> Result[str]:
        if not source.startswith("\\", pos):
            return None
        end = pos + 1
        if end < len(source) and predicate(ord(source[end])):
            return source[end], end + 1
        return None

    return production


def _is_vchar_or_wsp(code: int) -> bool:
    return is_vchar(code) or is_wsp(code)


def _is_obs_qp_char(code: int) -> bool:
    return code in (0, 10, 13) or is_obs_no_ws_ctl(code)


obs_qp = _escaped(_is_obs_qp_char)
obs_qp.__doc__ = """obs-qp = "\\" (%d0 / obs-NO-WS-CTL / LF / CR)"""

quoted_pair = prefer_modern(_escaped(_is_vchar_or_wsp), obs_qp)
quoted_pair.__doc__ = """quoted-pair = ("\\" (VCHAR / WSP)) / obs-qp

Yields the escaped character.
"""


# --- Folding white space and comments ---

_wsp_run = joined(repeat(wsp, 1))
_wsp_star = joined(repeat(wsp))


def _fold(source: str, pos: int) -> Result[str]:
    # *WSP CRLF, yielding the white space with the line break removed
    leading, end = _wsp_star(source, pos)
    folded = crlf(source, end)
    if folded is None:
        return None
    return leading, folded[1]


_optional_fold = optional(_fold, "")


def _modern_fws(source: str, pos: int) -> Result[str]:
    leading, end = _optional_fold(source, pos)
    result = _wsp_run(source, end)
    if result is None:
        return None
    trailing, end = result
    return leading + trailing, end


def _crlf_wsp(source: str, pos: int) -> Result[str]:
    folded = crlf(source, pos)
    if folded is None:
        return None
    return _wsp_run(source, folded[1])


_continuations = joined(repeat(_crlf_wsp))


def obs_fws(source: str, pos: int) -> Result[str]:
    """obs-FWS = 1*WSP *(CRLF 1*WSP)

    Yields the white space with every line break removed.
    """
    result = _wsp_run(source, pos)
    if result is None:
        return None
    leading, end = result
    continuation, end = _continuations(source, end)
    return leading + continuation, end


fws = prefer_modern(_modern_fws, obs_fws)
fws.__doc__ = """FWS = ([*WSP CRLF] 1*WSP) / obs-FWS   ; Folding white space

Yields the unfolded white space.
"""


_optional_fws = optional(fws, "")


def _skip_fws(source: str, pos: int) -> int:
    result = fws(source, pos)
    if result is None:
        return pos
    return result[1]


def ccontent(source: str, pos: int) -> Result[str]:
    """ccontent = ctext / quoted-pair / comment"""
    return ctext(source, pos) or quoted_pair(source, pos) or comment(source, pos)


def _fws_then(production):
    def wrapper(source: str, pos: int) -> Result[str]:
        end = _skip_fws(source, pos)
        return production(source, end)

    return wrapper


_comment_body = repeat(_fws_then(ccontent))


def comment(source: str, pos: int) -> Result[str]:
    """comment = "(" *([FWS] ccontent) [FWS] ")"

    Comments nest through ccontent. Yields the comment text, parentheses
    included. An unbalanced comment does not match at all.
    """
    if not source.startswith("(", pos):
        return None
    _, end = _comment_body(source, pos + 1)
    end = _skip_fws(source, end)
    if not source.startswith(")", end):
        return None
    return source[pos : end + 1], end + 1


_spaced_comments = repeat(_fws_then(comment), 1)


def _comments_then_fws(source: str, pos: int) -> Result[str]:
    result = _spaced_comments(source, pos)
    if result is None:
        return None
    end = _skip_fws(source, result[1])
    return source[pos:end], end


def _fws_text(source: str, pos: int) -> Result[str]:
    result = fws(source, pos)
    if result is None:
        return None
    return source[pos : result[1]], result[1]


cfws = first_of(_comments_then_fws, _fws_text)
cfws.__doc__ = """CFWS = (1*([FWS] comment) [FWS]) / FWS

Yields the matched source text verbatim.
"""

_optional_cfws = optional(cfws)


def _skip_cfws(source: str, pos: int) -> int:
    return _optional_cfws(source, pos)[1]


# --- Atoms ---

_atext_run = joined(repeat(atext, 1))


def atom(source: str, pos: int) -> Result[str]:
    """atom = [CFWS] 1*atext [CFWS]"""
    result = _atext_run(source, _skip_cfws(source, pos))
    if result is None:
        return None
    value, end = result
    return value, _skip_cfws(source, end)


def _dot_atext(source: str, pos: int) -> Result[str]:
    if not source.startswith(".", pos):
        return None
    result = _atext_run(source, pos + 1)
    if result is None:
        return None
    return "." + result[0], result[1]


_dot_atext_tail = joined(repeat(_dot_atext))


def dot_atom_text(source: str, pos: int) -> Result[str]:
    """dot-atom-text = 1*atext *("." 1*atext)"""
    result = _atext_run(source, pos)
    if result is None:
        return None
    head, end = result
    tail, end = _dot_atext_tail(source, end)
    return head + tail, end


def dot_atom(source: str, pos: int) -> Result[str]:
    """dot-atom = [CFWS] dot-atom-text [CFWS]"""
    result = dot_atom_text(source, _skip_cfws(source, pos))
    if result is None:
        return None
    value, end = result
    return value, _skip_cfws(source, end)


# --- Quoted strings ---

qcontent = first_of(qtext, quoted_pair)
qcontent.__doc__ = """qcontent = qtext / quoted-pair"""


def _spaced_qcontent(source: str, pos: int) -> Result[str]:
    space, end = _optional_fws(source, pos)
    result = qcontent(source, end)
    if result is None:
        return None
    return space + result[0], result[1]


_qcontent_run = joined(repeat(_spaced_qcontent))


def quoted_atom(source: str, pos: int) -> Result[str]:
    """quoted-string = [CFWS] DQUOTE *([FWS] qcontent) [FWS] DQUOTE [CFWS]

    Yields the decoded content: quoted pairs are unescaped and folding
    white space is kept without its line breaks.
    """
    end = _skip_cfws(source, pos)
    if not source.startswith('"', end):
        return None
    content, end = _qcontent_run(source, end + 1)
    space, end = _optional_fws(source, end)
    if not source.startswith('"', end):
        return None
    return content + space, _skip_cfws(source, end + 1)


word = first_of(atom, quoted_atom)
word.__doc__ = """word = atom / quoted-string"""


# --- Phrases ---


def _obs_phrase_item(source: str, pos: int) -> Result[str | None]:
    result = word(source, pos)
    if result is not None:
        return result
    if source.startswith(".", pos):
        return None, pos + 1
    result = cfws(source, pos)
    if result is not None:
        return None, result[1]
    return None


_obs_phrase_tail = repeat(_obs_phrase_item)


def obs_phrase(source: str, pos: int) -> Result[list[str]]:
    """obs-phrase = word *(word / "." / CFWS)

    Yields the words only; periods and comments separate them.
    """
    result = word(source, pos)
    if result is None:
        return None
    first, end = result
    items, end = _obs_phrase_tail(source, end)
    return [first] + [item for item in items if item is not None], end


phrase = prefer_modern(repeat(word, 1), obs_phrase)
phrase.__doc__ = """phrase = 1*word / obs-phrase

Yields the list of words.
"""


# --- Unstructured text ---


def _spaced_vchar(source: str, pos: int) -> Result[str]:
    space, end = _optional_fws(source, pos)
    result = vchar(source, end)
    if result is None:
        return None
    return space + result[0], result[1]


_vchar_run = joined(repeat(_spaced_vchar))


def _modern_unstructured(source: str, pos: int) -> Result[str]:
    value, end = _vchar_run(source, pos)
    _, end = _wsp_star(source, end)
    return value, end


_lf_star = repeat(lf)
_cr_star = repeat(cr)


def _bare_line_breaks(source: str, pos: int) -> int:
    _, end = _lf_star(source, pos)
    _, end = _cr_star(source, end)
    return end


def _obs_unstruct_chunk(source: str, pos: int) -> Result[str]:
    result = fws(source, pos)
    if result is not None:
        return result
    # *LF *CR *(obs-utext *LF *CR)
    end = _bare_line_breaks(source, pos)
    chars = []
    while True:
        result = obs_utext(source, end)
        if result is None:
            break
        chars.append(result[0])
        end = _bare_line_breaks(source, result[1])
    return "".join(chars), end


_obs_unstruct_run = joined(repeat(_obs_unstruct_chunk))


def obs_unstruct(source: str, pos: int) -> Result[str]:
    """obs-unstruct = *((*LF *CR *(obs-utext *LF *CR)) / FWS)

    Bare CR and LF characters are dropped from the value.
    """
    return _obs_unstruct_run(source, pos)


unstructured = prefer_modern(_modern_unstructured, obs_unstruct)
unstructured.__doc__ = """unstructured = (*([FWS] VCHAR) *WSP) / obs-unstruct"""
