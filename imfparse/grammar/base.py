"""Parser plumbing shared by every grammar production.

A production is a plain function ``production(text, pos)`` that returns
``(value, end)`` when it matches ``text`` starting at ``pos`` and ``None``
when it does not. Positions are integers threaded through return values,
so a production that fails leaves nothing behind: the caller simply tries
its next alternative from the position it already holds.

The helpers below build productions out of other productions. They never
keep state between calls, so every production is safe to call from several
threads at once on the same input.
"""

from collections.abc import Callable
from typing import Any, Optional, TypeVar

T = TypeVar("T")

# (value, end position) on success, None on failure
Result = Optional[tuple[T, int]]

Production = Callable[[str, int], Result[Any]]


def char_class(predicate: Callable[[int], bool]) -> Production:
    """Build a production matching one code point accepted by ``predicate``.

    The value is the matched character.
    """

    def production(text: str, pos: int) -> Result[str]:
        if pos < len(text) and predicate(ord(text[pos])):
            return text[pos], pos + 1
        return None

    production.__name__ = predicate.__name__.removeprefix("is_")
    production.__doc__ = predicate.__doc__
    return production


def literal(token: str, *, ignore_case: bool = False) -> Production:
    """Build a production matching ``token`` exactly.

    ABNF quoted strings are case-insensitive; pass ``ignore_case=True`` for
    those. Case folding is ASCII only. The value is the input text that
    matched.
    """
    lowered = token.lower()

    def production(text: str, pos: int) -> Result[str]:
        end = pos + len(token)
        candidate = text[pos:end]
        if candidate == token or (
            ignore_case and candidate.isascii() and candidate.lower() == lowered
        ):
            return candidate, end
        return None

    production.__name__ = f"literal({token!r})"
    return production


def optional(production: Production, default: Any = None) -> Production:
    """``[production]``: always succeeds, yielding ``default`` on no match."""

    def wrapper(text: str, pos: int) -> Result[Any]:
        result = production(text, pos)
        if result is None:
            return default, pos
        return result

    return wrapper


def repeat(production: Production, minimum: int = 0, maximum: int | None = None) -> Production:
    """``m*n production``: greedy repetition yielding a list of values.

    Stops early if an iteration matches without consuming input, so a
    repeated production that can match the empty string cannot loop.
    """

    def wrapper(text: str, pos: int) -> Result[list]:
        values = []
        while maximum is None or len(values) < maximum:
            result = production(text, pos)
            if result is None:
                break
            value, end = result
            if end == pos:
                break
            values.append(value)
            pos = end
        if len(values) < minimum:
            return None
        return values, pos

    return wrapper


def joined(production: Production) -> Production:
    """Concatenate the string values of a repetition."""

    def wrapper(text: str, pos: int) -> Result[str]:
        result = production(text, pos)
        if result is None:
            return None
        values, end = result
        return "".join(values), end

    return wrapper


def first_of(*alternatives: Production) -> Production:
    """Ordered choice: the first alternative that matches wins."""

    def production(text: str, pos: int) -> Result[Any]:
        for alternative in alternatives:
            result = alternative(text, pos)
            if result is not None:
                return result
        return None

    return production


def prefer_modern(modern: Production, obsolete: Production) -> Production:
    """Choice between a current RFC form and its ``obs-`` counterpart.

    Both forms are attempted. The modern reading is kept unless the obsolete
    one matches strictly more input, so input both forms accept is always
    given the modern interpretation.
    """

    def production(text: str, pos: int) -> Result[Any]:
        current = modern(text, pos)
        legacy = obsolete(text, pos)
        if legacy is not None and (current is None or legacy[1] > current[1]):
            return legacy
        return current

    return production


def value_of(production: Production, transform: Callable[[Any], Any]) -> Production:
    """Map the value of a successful match through ``transform``."""

    def wrapper(text: str, pos: int) -> Result[Any]:
        result = production(text, pos)
        if result is None:
            return None
        value, end = result
        return transform(value), end

    return wrapper
