"""Core ABNF rules (RFC 5234, appendix B.1).

Every rule exists twice: as a predicate over a single code point
(``is_vchar(0x41)``) and as a production over text (``vchar(text, pos)``).
Only ASCII code points ever match. Unicode letter and digit classes are
deliberately not consulted, since RFC 5322 is defined over US-ASCII.

Rules that carry a numeric weight (``bit``, ``digit``, ``hexdig``) yield the
weight rather than the character.
"""

from .base import Result, char_class, repeat


def is_alpha(code: int) -> bool:
    """ALPHA = %x41-5A / %x61-7A   ; A-Z / a-z"""
    return 0x41 <= code <= 0x5A or 0x61 <= code <= 0x7A


def is_bit(code: int) -> bool:
    """BIT = "0" / "1" """
    return code in (0x30, 0x31)


def is_char(code: int) -> bool:
    """CHAR = %x01-7F   ; any 7-bit US-ASCII character, excluding NUL"""
    return 0x01 <= code <= 0x7F


def is_cr(code: int) -> bool:
    """CR = %x0D   ; carriage return"""
    return code == 0x0D


def is_ctl(code: int) -> bool:
    """CTL = %x00-1F / %x7F   ; controls"""
    return 0x00 <= code <= 0x1F or code == 0x7F


def is_digit(code: int) -> bool:
    """DIGIT = %x30-39   ; 0-9"""
    return 0x30 <= code <= 0x39


def is_dquote(code: int) -> bool:
    """DQUOTE = %x22   ; " (Double Quote)"""
    return code == 0x22


def is_hexdig(code: int) -> bool:
    """HEXDIG = DIGIT / "A" / "B" / "C" / "D" / "E" / "F"

    Uppercase only, as written in RFC 5234.
    """
    return is_digit(code) or 0x41 <= code <= 0x46


def is_htab(code: int) -> bool:
    """HTAB = %x09   ; horizontal tab"""
    return code == 0x09


def is_lf(code: int) -> bool:
    """LF = %x0A   ; linefeed"""
    return code == 0x0A


def is_octet(code: int) -> bool:
    """OCTET = %x00-FF   ; 8 bits of data"""
    return 0x00 <= code <= 0xFF


def is_sp(code: int) -> bool:
    """SP = %x20"""
    return code == 0x20


def is_vchar(code: int) -> bool:
    """VCHAR = %x21-7E   ; visible (printing) characters"""
    return 0x21 <= code <= 0x7E


def is_wsp(code: int) -> bool:
    """WSP = SP / HTAB   ; white space"""
    return is_sp(code) or is_htab(code)


alpha = char_class(is_alpha)
char = char_class(is_char)
cr = char_class(is_cr)
ctl = char_class(is_ctl)
dquote = char_class(is_dquote)
htab = char_class(is_htab)
lf = char_class(is_lf)
octet = char_class(is_octet)
sp = char_class(is_sp)
vchar = char_class(is_vchar)
wsp = char_class(is_wsp)


def bit(text: str, pos: int) -> Result[int]:
    """BIT, yielding its weight (0 or 1)."""
    if pos < len(text) and is_bit(ord(text[pos])):
        return int(text[pos]), pos + 1
    return None


def digit(text: str, pos: int) -> Result[int]:
    """DIGIT, yielding its weight (0-9)."""
    if pos < len(text) and is_digit(ord(text[pos])):
        return ord(text[pos]) - 0x30, pos + 1
    return None


def hexdig(text: str, pos: int) -> Result[int]:
    """HEXDIG, yielding its weight (0-15)."""
    if pos < len(text) and is_hexdig(ord(text[pos])):
        return int(text[pos], 16), pos + 1
    return None


def crlf(text: str, pos: int) -> Result[str]:
    """CRLF = CR LF   ; Internet standard newline"""
    if text.startswith("\r\n", pos):
        return "\r\n", pos + 2
    return None


def _wsp_after_crlf(text: str, pos: int) -> Result[str]:
    result = crlf(text, pos)
    if result is None:
        return None
    return wsp(text, result[1])


def lwsp(text: str, pos: int) -> Result[str]:
    """LWSP = *(WSP / CRLF WSP)   ; linear white space (past newline)

    Yields the matched text verbatim.
    """
    start = pos
    while True:
        result = wsp(text, pos) or _wsp_after_crlf(text, pos)
        if result is None:
            return text[start:pos], pos
        pos = result[1]


def number(digits: list[int]) -> int:
    """Combine decimal digit weights into an integer."""
    value = 0
    for weight in digits:
        value = value * 10 + weight
    return value


def digits(minimum: int, maximum: int | None = None):
    """``m*nDIGIT`` yielding the combined integer value."""
    run = repeat(digit, minimum, maximum)

    def production(text: str, pos: int) -> Result[int]:
        result = run(text, pos)
        if result is None:
            return None
        weights, end = result
        return number(weights), end

    return production
