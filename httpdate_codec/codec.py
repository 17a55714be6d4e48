"""
Parsing and formatting of HTTP dates.

HTTP has three date formats for historical reasons (RFC2616 section 3.3.1):

    Sun, 06 Nov 1994 08:49:37 GMT  ; RFC 822, updated by RFC 1123
    Sunday, 06-Nov-94 08:49:37 GMT ; RFC 850, obsoleted by RFC 1036
    Sun Nov  6 08:49:37 1994       ; ANSI C's asctime() format

Dates are read and written with fixed English day and month names, whatever
the locale of the process is. Timestamps are naive datetimes in UTC.
"""

# pylint: disable=redefined-builtin

import calendar
from datetime import datetime, timedelta, timezone
from enum import Enum
import logging
import math
import re
from typing import Any, Callable, Dict, Optional, Tuple

from httpdate_codec.syntax import rfc2616
from httpdate_codec.syntax.rfc5234 import DIGIT, SP

log = logging.getLogger(__name__)

### configuration
TWO_DIGIT_YEAR_MAX = 2049

# indexed by datetime.weekday()
WKDAYS = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
WEEKDAYS = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]
MONTHS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]

EPOCH = datetime(1970, 1, 1)


class DateFormat(Enum):
    "HTTP date formats, in the order they're tried when parsing."
    RFC1123 = "rfc1123"
    RFC850 = "rfc850"
    ASCTIME = "asctime"


RFC1123_FORMAT = "%(wkday)s, %(day)02d %(month)s %(year)04d %(time)s GMT"
RFC850_FORMAT = "%(weekday)s, %(day)02d-%(month)s-%(year2)02d %(time)s GMT"
ASCTIME_FORMAT = "%(wkday)s %(month)s %(day)2d %(time)s %(year)04d"

RFC1123_RE = re.compile(
    rf"""
    (?P<day_name> {rfc2616.wkday} ) , {SP}
    (?P<day> {DIGIT}{{2}} ) {SP} (?P<month> {rfc2616.month} ) {SP} (?P<year> {DIGIT}{{4}} )
    {SP} (?P<time> {rfc2616.time} ) {SP} GMT
    """,
    re.VERBOSE,
)

RFC850_RE = re.compile(
    rf"""
    (?P<day_name> {rfc2616.weekday} ) , {SP}
    (?P<day> {DIGIT}{{2}} ) \- (?P<month> {rfc2616.month} ) \- (?P<year> {DIGIT}{{2}} )
    {SP} (?P<time> {rfc2616.time} ) {SP} GMT
    """,
    re.VERBOSE,
)

# Matched after double spaces are collapsed, so the day can be one or two digits.
ASCTIME_RE = re.compile(
    rf"""
    (?P<day_name> {rfc2616.wkday} ) {SP}
    (?P<month> {rfc2616.month} ) {SP} (?P<day> {DIGIT}{{1,2}} )
    {SP} (?P<time> {rfc2616.time} ) {SP} (?P<year> {DIGIT}{{4}} )
    """,
    re.VERBOSE,
)


def try_parse(value: str, two_digit_year_max: int = TWO_DIGIT_YEAR_MAX) -> Optional[datetime]:
    """
    Parse a HTTP date in any of the three formats.

    Returns a naive UTC datetime, or None if value isn't a HTTP date.
    Raises TypeError if value isn't a string at all.
    """
    result = parse_with_format(value, two_digit_year_max)
    if result is None:
        return None
    return result[1]


def detect_format(
    value: str, two_digit_year_max: int = TWO_DIGIT_YEAR_MAX
) -> Optional[DateFormat]:
    "Return the format that value parses as, or None."
    result = parse_with_format(value, two_digit_year_max)
    if result is None:
        return None
    return result[0]


def parse_with_format(
    value: str, two_digit_year_max: int = TWO_DIGIT_YEAR_MAX
) -> Optional[Tuple[DateFormat, datetime]]:
    "Parse a HTTP date, returning the format it was in along with the datetime, or None."
    if not isinstance(value, str):
        raise TypeError(f"HTTP date must be a str, not {type(value).__name__}")
    parsed = _from_match(RFC1123_RE.fullmatch(value), two_digit_year_max)
    if parsed is not None:
        return DateFormat.RFC1123, parsed
    parsed = _from_match(RFC850_RE.fullmatch(value), two_digit_year_max)
    if parsed is not None:
        return DateFormat.RFC850, parsed
    collapsed = value.replace("  ", " ")
    parsed = _from_match(ASCTIME_RE.fullmatch(collapsed), two_digit_year_max)
    if parsed is not None:
        return DateFormat.ASCTIME, parsed
    log.debug("Not a HTTP date: %r", value)
    return None


def _from_match(match: Optional["re.Match[str]"], two_digit_year_max: int) -> Optional[datetime]:
    """
    Build a datetime from a pattern match. Dates that don't exist on the
    calendar, and day names that don't agree with the date, give None.
    """
    if match is None:
        return None
    year = match.group("year")
    if len(year) == 2:
        year_num = expand_year(int(year), two_digit_year_max)
    else:
        year_num = int(year)
    hour, minute, second = [int(part) for part in match.group("time").split(":")]
    try:
        parsed = datetime(
            year_num,
            MONTHS.index(match.group("month")) + 1,
            int(match.group("day")),
            hour,
            minute,
            second,
        )
    except ValueError:
        return None
    day_name = match.group("day_name")
    names = WKDAYS if len(day_name) == 3 else WEEKDAYS
    if names[parsed.weekday()] != day_name:
        return None
    return parsed


def expand_year(year: int, two_digit_year_max: int = TWO_DIGIT_YEAR_MAX) -> int:
    """
    Expand a two-digit year to the latest year with those digits that isn't
    after two_digit_year_max. With the default, 00-49 are 2000-2049 and
    50-99 are 1950-1999.
    """
    if not 0 <= year <= 99:
        raise ValueError(f"{year} isn't a two-digit year")
    expanded = two_digit_year_max - two_digit_year_max % 100 + year
    if expanded > two_digit_year_max:
        expanded -= 100
    return expanded


def _fields(timestamp: datetime) -> Dict[str, Any]:
    if not isinstance(timestamp, datetime):
        raise TypeError(f"Can't format {type(timestamp).__name__} as a HTTP date")
    if timestamp.utcoffset() is not None:
        try:
            timestamp = timestamp.astimezone(timezone.utc)
        except OverflowError as why:
            raise ValueError(f"{timestamp.isoformat()} is out of range in UTC") from why
    return {
        "wkday": WKDAYS[timestamp.weekday()],
        "weekday": WEEKDAYS[timestamp.weekday()],
        "day": timestamp.day,
        "month": MONTHS[timestamp.month - 1],
        "year": timestamp.year,
        "year2": timestamp.year % 100,
        "time": f"{timestamp.hour:02d}:{timestamp.minute:02d}:{timestamp.second:02d}",
    }


def format(timestamp: datetime) -> str:
    """
    Format a timestamp as a HTTP date, using the preferred (RFC1123) format.

    Aware timestamps are converted to UTC first; raises ValueError if that
    takes them outside of years 1-9999.
    """
    return format_rfc1123(timestamp)


def format_rfc1123(timestamp: datetime) -> str:
    "Sun, 06 Nov 1994 08:49:37 GMT"
    return RFC1123_FORMAT % _fields(timestamp)


def format_rfc850(timestamp: datetime) -> str:
    "Sunday, 06-Nov-94 08:49:37 GMT"
    return RFC850_FORMAT % _fields(timestamp)


def format_asctime(timestamp: datetime) -> str:
    "Sun Nov  6 08:49:37 1994"
    return ASCTIME_FORMAT % _fields(timestamp)


FORMATTERS: Dict[DateFormat, Callable[[datetime], str]] = {
    DateFormat.RFC1123: format_rfc1123,
    DateFormat.RFC850: format_rfc850,
    DateFormat.ASCTIME: format_asctime,
}


def to_timestamp(value: datetime) -> int:
    "Seconds since the epoch. Naive datetimes are taken to be UTC."
    return calendar.timegm(value.utctimetuple())


def from_timestamp(seconds: float) -> datetime:
    "A naive UTC datetime for seconds since the epoch, rounded down to the second."
    return EPOCH + timedelta(seconds=math.floor(seconds))
