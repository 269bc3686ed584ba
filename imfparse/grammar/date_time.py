"""Date and time specification (RFC 5322 section 3.3) and its obsolete forms.

The grammar checks syntax only: a day of 99 or a second of 75 parses, and
turning the fields into a real point in time is left to
``DateTime.to_datetime()``.

Two-digit fields (hour, minute, second) take exactly two digits in their
modern form. A third digit is left in the input for whatever comes next,
which in a well-formed date-time means the whole parse fails.
"""

from imfparse.models import DateTime

from .abnf import digits, is_alpha
from .base import Result, literal, prefer_modern
from .lexical import cfws, fws

DAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

MONTH_NAMES = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

# obs-zone names and the descriptive tag each one yields
OBSOLETE_ZONES = (
    ("UT", "Universal Time"),
    ("GMT", "North American UT"),
    ("EST", "Eastern"),
    ("EDT", "Eastern"),
    ("CST", "Central"),
    ("CDT", "Central"),
    ("MST", "Mountain"),
    ("MDT", "Mountain"),
    ("PST", "Pacific"),
    ("PDT", "Pacific"),
)

MILITARY_ZONE = "Military"

_day_names = [literal(name, ignore_case=True) for name in DAY_NAMES]
_month_names = [literal(name, ignore_case=True) for name in MONTH_NAMES]
_zone_names = [(literal(name, ignore_case=True), tag) for name, tag in OBSOLETE_ZONES]

_one_or_two_digits = digits(1, 2)
_two_digits = digits(2, 2)
_four_digits = digits(4, 4)
_year_digits = digits(4)
_obs_year_digits = digits(1)


def _around(wrapping, text: str, pos: int) -> int | None:
    # wrapping is None or a (production, required) pair
    if wrapping is None:
        return pos
    production, required = wrapping
    result = production(text, pos)
    if result is None:
        return None if required else pos
    return result[1]


def _wrapped(production, before, after):
    """``before production after``, keeping only the value of ``production``."""

    def wrapper(text: str, pos: int) -> Result[int]:
        end = _around(before, text, pos)
        if end is None:
            return None
        result = production(text, end)
        if result is None:
            return None
        value, end = result
        end = _around(after, text, end)
        if end is None:
            return None
        return value, end

    return wrapper


def _keyword(alternatives, values):
    def production(text: str, pos: int) -> Result[int]:
        for alternative, value in zip(alternatives, values):
            result = alternative(text, pos)
            if result is not None:
                return value, result[1]
        return None

    return production


_OPTIONAL_FWS = (fws, False)
_OPTIONAL_CFWS = (cfws, False)
_REQUIRED_FWS = (fws, True)


# --- Day of week ---

day_name = _keyword(_day_names, range(1, 8))
day_name.__doc__ = """day-name = "Mon" / "Tue" / "Wed" / "Thu" / "Fri" / "Sat" / "Sun"

Yields 1 (Monday) through 7 (Sunday).
"""

obs_day_of_week = _wrapped(day_name, _OPTIONAL_CFWS, _OPTIONAL_CFWS)
obs_day_of_week.__doc__ = """obs-day-of-week = [CFWS] day-name [CFWS]"""

day_of_week = prefer_modern(_wrapped(day_name, _OPTIONAL_FWS, None), obs_day_of_week)
day_of_week.__doc__ = """day-of-week = ([FWS] day-name) / obs-day-of-week"""


# --- Date ---

obs_day = _wrapped(_one_or_two_digits, _OPTIONAL_CFWS, _OPTIONAL_CFWS)
obs_day.__doc__ = """obs-day = [CFWS] 1*2DIGIT [CFWS]"""

day = prefer_modern(_wrapped(_one_or_two_digits, _OPTIONAL_FWS, _REQUIRED_FWS), obs_day)
day.__doc__ = """day = ([FWS] 1*2DIGIT FWS) / obs-day"""

month = _keyword(_month_names, range(1, 13))
month.__doc__ = """month = "Jan" / "Feb" / ... / "Dec"

Yields 1 through 12.
"""

obs_year = _wrapped(_obs_year_digits, _OPTIONAL_CFWS, _OPTIONAL_CFWS)
obs_year.__doc__ = """obs-year = [CFWS] 2*DIGIT [CFWS]

One-digit years are accepted as well; the value is the number as written.
"""

year = prefer_modern(_wrapped(_year_digits, _REQUIRED_FWS, _REQUIRED_FWS), obs_year)
year.__doc__ = """year = (FWS 4*DIGIT FWS) / obs-year"""


def date(text: str, pos: int) -> Result[tuple[int, int, int]]:
    """date = day month year

    Yields ``(year, month, day)``.
    """
    result = day(text, pos)
    if result is None:
        return None
    day_value, end = result
    result = month(text, end)
    if result is None:
        return None
    month_value, end = result
    result = year(text, end)
    if result is None:
        return None
    return (result[0], month_value, day_value), result[1]


# --- Time ---


def _obs_two_digit_field(name: str):
    production = _wrapped(_one_or_two_digits, _OPTIONAL_CFWS, _OPTIONAL_CFWS)
    production.__doc__ = f"obs-{name} = [CFWS] 2DIGIT [CFWS], accepting a single digit"
    return production


obs_hour = _obs_two_digit_field("hour")
obs_minute = _obs_two_digit_field("minute")
obs_second = _obs_two_digit_field("second")

hour = prefer_modern(_two_digits, obs_hour)
hour.__doc__ = """hour = 2DIGIT / obs-hour"""

minute = prefer_modern(_two_digits, obs_minute)
minute.__doc__ = """minute = 2DIGIT / obs-minute"""

second = prefer_modern(_two_digits, obs_second)
second.__doc__ = """second = 2DIGIT / obs-second"""


def time_of_day(text: str, pos: int) -> Result[tuple[int, int, int]]:
    """time-of-day = hour ":" minute [ ":" second ]

    Yields ``(hour, minute, second)``, the second being 0 when omitted.
    """
    result = hour(text, pos)
    if result is None or not text.startswith(":", result[1]):
        return None
    hour_value, end = result
    result = minute(text, end + 1)
    if result is None:
        return None
    minute_value, end = result
    if not text.startswith(":", end):
        return (hour_value, minute_value, 0), end
    result = second(text, end + 1)
    if result is None:
        return None
    return (hour_value, minute_value, result[0]), result[1]


def _military_zone(text: str, pos: int) -> Result[str]:
    # %d65-73 / %d75-90 / %d97-105 / %d107-122: any letter but J
    if pos < len(text) and is_alpha(ord(text[pos])) and text[pos] not in "Jj":
        return MILITARY_ZONE, pos + 1
    return None


def obs_zone(text: str, pos: int) -> Result[str]:
    """obs-zone = "UT" / "GMT" / "EST" / "EDT" / "CST" / "CDT" / "MST" / "MDT"
    / "PST" / "PDT" / military zone letter

    Yields a descriptive tag, never an offset: the RFC itself notes that the
    military letters were used inconsistently.
    """
    for name, tag in _zone_names:
        result = name(text, pos)
        if result is not None:
            return tag, result[1]
    return _military_zone(text, pos)


def _numeric_zone(text: str, pos: int) -> Result[int]:
    result = fws(text, pos)
    if result is None:
        return None
    end = result[1]
    if text.startswith("+", end):
        sign = 1
    elif text.startswith("-", end):
        sign = -1
    else:
        return None
    result = _four_digits(text, end + 1)
    if result is None:
        return None
    return sign * result[0], result[1]


def zone(text: str, pos: int) -> Result[int | str]:
    """zone = (FWS ( "+" / "-" ) 4DIGIT) / obs-zone

    Yields the signed four-digit value as an integer (``-0600`` is -600) or
    the tag of an obsolete zone.
    """
    return _numeric_zone(text, pos) or obs_zone(text, pos)


def _trailing_space_start(text: str, pos: int, end: int) -> int:
    start = end
    while start > pos and text[start - 1] in " \t\r\n":
        start -= 1
    return start


def time(text: str, pos: int) -> Result[tuple[int, int, int, int | str]]:
    """time = time-of-day zone

    An obsolete final field may end in white space that a numeric zone
    needs as its leading FWS; the zone then starts where that white space
    does.
    """
    result = time_of_day(text, pos)
    if result is None:
        return None
    (hour_value, minute_value, second_value), end = result
    result = zone(text, end)
    if result is None:
        result = _numeric_zone(text, _trailing_space_start(text, pos, end))
    if result is None:
        return None
    return (hour_value, minute_value, second_value, result[0]), result[1]


def _day_of_week_comma(text: str, pos: int) -> Result[int]:
    result = day_of_week(text, pos)
    if result is None or not text.startswith(",", result[1]):
        return None
    return result[0], result[1] + 1


def date_time(text: str, pos: int) -> Result[DateTime]:
    """date-time = [ day-of-week "," ] date time [CFWS]

    Yields a ``DateTime``.
    """
    weekday = None
    end = pos
    result = _day_of_week_comma(text, pos)
    if result is not None:
        weekday, end = result
    result = date(text, end)
    if result is None:
        return None
    (year_value, month_value, day_value), end = result
    result = time(text, end)
    if result is None:
        return None
    (hour_value, minute_value, second_value, offset), end = result
    value = DateTime(
        year=year_value,
        month=month_value,
        day=day_value,
        hour=hour_value,
        minute=minute_value,
        second=second_value,
        offset=offset,
        day_of_week=weekday,
    )
    return value, _around(_OPTIONAL_CFWS, text, end)
