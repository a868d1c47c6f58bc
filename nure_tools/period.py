"""
Calendar periods used for schedule queries.

A Period is a closed [start, end] interval of timezone-aware datetimes,
always expressed in one fixed zone (config.DEFAULT_TIMEZONE unless a
caller passes another tzinfo). It can be built from:

- two date/time strings          Period.from_strings("2024-01-02", "2024-01-03")
- two unix timestamps            Period.from_timestamps(1704146400, 1704232800)
- the current moment             Period.now(), Period.today(), Period.next_day()
- a calendar anchor              Period.day_from("2023-01-02"), Period.week_from(...)
- an anchor plus a length        Period.days_from("2023-01-02", 3), Period.weeks_from(...)

Day boundaries are 00:00:00.000 and 23:59:59.999 local time.
Weeks run Monday to Sunday.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Optional

from dateutil import parser as date_parser
from dateutil import tz as date_tz

from nure_tools.config import DEFAULT_TIMEZONE
from nure_tools.errors import InvalidStringProvided, InvalidTimestampProvided


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_INTEGER_RE = re.compile(r"^-?\d+$")

# digit count -> units per second
_EPOCH_UNITS = (
    (10, 1),
    (13, 1_000),
    (16, 1_000_000),
    (19, 1_000_000_000),
)

# two-digit years below this are 20xx, the rest 19xx
_CENTURY_PIVOT = 70

_UTC_NAMES = frozenset({"UTC", "GMT", "UT", "Z"})

# Abbreviations dateutil does not resolve by itself.
_TZINFOS = {
    "PST": date_tz.tzoffset("PST", -8 * 3600),
    "PDT": date_tz.tzoffset("PDT", -7 * 3600),
    "MST": date_tz.tzoffset("MST", -7 * 3600),
    "MDT": date_tz.tzoffset("MDT", -6 * 3600),
    "CST": date_tz.tzoffset("CST", -6 * 3600),
    "CDT": date_tz.tzoffset("CDT", -5 * 3600),
    "EST": date_tz.tzoffset("EST", -5 * 3600),
    "EDT": date_tz.tzoffset("EDT", -4 * 3600),
    "EET": date_tz.tzoffset("EET", 2 * 3600),
    "EEST": date_tz.tzoffset("EEST", 3 * 3600),
}

# Shapes dateutil misreads or rejects.
_YYMMDD_TIME_RE = re.compile(r"^(\d{2})(\d{2})(\d{2})\s+(\d{1,2}):(\d{2})(?::(\d{2}))?$")
_YEAR_MONTH_RE = re.compile(r"^(\d{4})\.(\d{1,2})$")
_DATE_ZONE_RE = re.compile(r"^(\d{4})-(\d{1,2})-(\d{1,2})\s*([A-Za-z]{1,5}|[+-]\d{2}(?::?\d{2})?)$")
_CHINESE_RE = re.compile(r"^(\d{4})年(\d{1,2})月(\d{1,2})日(?:(\d{1,2})时(\d{1,2})分(\d{1,2})秒)?$")


def _full_year(year: int) -> int:
    if year < 100:
        return year + (2000 if year < _CENTURY_PIVOT else 1900)
    return year


class _ParserInfo(date_parser.parserinfo):
    """
    dateutil's defaults with a fixed century pivot: "70" is 1970, "14" is 2014.
    """

    def convertyear(self, year: int, century_specified: bool = False) -> int:
        if century_specified:
            return year
        return _full_year(year)


_PARSER_INFO = _ParserInfo()


def _from_epoch_digits(text: str) -> datetime:
    value = int(text)
    digits = len(text.lstrip("-"))
    for max_len, per_second in _EPOCH_UNITS:
        if digits <= max_len:
            return _EPOCH + timedelta(microseconds=value * 1_000_000 // per_second)
    raise ValueError(f"timestamp out of range: {text!r}")


def _zone_from_name(name: str) -> tzinfo:
    if name[0] in "+-":
        sign = -1 if name[0] == "-" else 1
        digits = name[1:].replace(":", "")
        hours, minutes = int(digits[:2]), int(digits[2:] or 0)
        return timezone(sign * timedelta(hours=hours, minutes=minutes))
    upper = name.upper()
    if upper in _UTC_NAMES:
        return timezone.utc
    if upper in _TZINFOS:
        return _TZINFOS[upper]
    raise ValueError(f"unknown time zone: {name!r}")


def _parse_shape(raw: str) -> Optional[datetime]:
    """
    Formats handled without dateutil. None if `raw` has none of these shapes.
    """
    m = _YYMMDD_TIME_RE.match(raw)
    if m:
        yy, mm, dd, hh, mi, ss = m.groups()
        return datetime(_full_year(int(yy)), int(mm), int(dd), int(hh), int(mi), int(ss or 0))

    m = _YEAR_MONTH_RE.match(raw)
    if m:
        return datetime(int(m.group(1)), int(m.group(2)), 1)

    m = _DATE_ZONE_RE.match(raw)
    if m:
        year, month, day, zone_name = m.groups()
        return datetime(int(year), int(month), int(day), tzinfo=_zone_from_name(zone_name))

    m = _CHINESE_RE.match(raw)
    if m:
        parts = [int(x) for x in m.groups() if x is not None]
        return datetime(*parts)

    return None


def parse_datetime(text: str, tz: Optional[tzinfo] = None) -> datetime:
    """
    Parse almost any date/time representation into an aware datetime in `tz`.

    Integer strings are unix timestamps (seconds, milliseconds,
    microseconds or nanoseconds depending on the digit count, at most 19
    digits, negative values before 1970). A few shapes are read directly:
    "171113 14:14:20" (yymmdd), "2014.03" (first of the month),
    "2021-02-21 PST" / "2020-07-20+08:00" (midnight in that zone) and
    "2014年04月08日11时25分18秒". Everything else is handed to dateutil:
    ISO-8601, RFC-2822, Postgres style timestamps, "May 8, 2009 5:57:51 PM",
    "4/8/2014 22:05", "4:00pm PST", ...

    Two-digit years 00-69 are 20xx, 70-99 are 19xx. Strings without a zone
    are read as local time in `tz`; strings without a date fall on the
    current day in `tz`.

    Raises ValueError (or a subclass) when the string is not a date.
    """
    zone = tz if tz is not None else DEFAULT_TIMEZONE
    raw = text.strip()

    if _INTEGER_RE.match(raw):
        return _from_epoch_digits(raw).astimezone(zone)

    try:
        parsed = _parse_shape(raw)
        if parsed is None:
            today = datetime.now(zone).replace(hour=0, minute=0, second=0, microsecond=0, tzinfo=None)
            parsed = date_parser.parse(raw, parserinfo=_PARSER_INFO, default=today, tzinfos=_TZINFOS)
    except OverflowError as exc:
        raise ValueError(f"date out of range: {text!r}") from exc

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=zone)
    return parsed.astimezone(zone)


def datetime_from_timestamp(value: int, tz: Optional[tzinfo] = None) -> datetime:
    """
    Unix seconds -> aware datetime in `tz`.

    Raises InvalidTimestampProvided for non-integers and values out of range.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidTimestampProvided(value)
    try:
        return parse_datetime(str(value), tz)
    except (ValueError, OverflowError) as exc:
        raise InvalidTimestampProvided(value) from exc


# ---------------------------------------------------------------------------
# Calendar helpers
# ---------------------------------------------------------------------------


def start_of_day(moment: datetime) -> datetime:
    return moment.replace(hour=0, minute=0, second=0, microsecond=0)


def end_of_day(moment: datetime) -> datetime:
    return moment.replace(hour=23, minute=59, second=59, microsecond=999000)


def start_of_week(moment: datetime) -> datetime:
    return start_of_day(moment - timedelta(days=moment.weekday()))


def end_of_week(moment: datetime) -> datetime:
    return end_of_day(start_of_week(moment) + timedelta(days=6))


def _zone(tz: Optional[tzinfo]) -> tzinfo:
    return tz if tz is not None else DEFAULT_TIMEZONE


def _current(tz: Optional[tzinfo], now: Optional[datetime]) -> datetime:
    zone = _zone(tz)
    if now is None:
        return datetime.now(zone)
    if now.tzinfo is None:
        return now.replace(tzinfo=zone)
    return now.astimezone(zone)


def _parse_string(value: str, tz: Optional[tzinfo]) -> datetime:
    try:
        return parse_datetime(value, tz)
    except (ValueError, TypeError, AttributeError) as exc:
        raise InvalidStringProvided(value) from exc


# ---------------------------------------------------------------------------
# Period
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Period:
    """
    Closed interval [start, end]. start <= end is expected but not checked.
    """

    start: datetime
    end: datetime

    def timestamps(self) -> tuple[int, int]:
        """
        (start, end) as unix seconds, the form the schedule endpoint wants.
        """
        return int(self.start.timestamp()), int(self.end.timestamp())

    # -- explicit -----------------------------------------------------------

    @classmethod
    def from_strings(cls, start: str, end: str, *, tz: Optional[tzinfo] = None) -> Period:
        return cls(_parse_string(start, tz), _parse_string(end, tz))

    @classmethod
    def from_timestamps(cls, start: int, end: int, *, tz: Optional[tzinfo] = None) -> Period:
        return cls(datetime_from_timestamp(start, tz), datetime_from_timestamp(end, tz))

    # -- relative to now ----------------------------------------------------

    @classmethod
    def now(cls, *, tz: Optional[tzinfo] = None, now: Optional[datetime] = None) -> Period:
        """From this moment to the end of the current day."""
        current = _current(tz, now)
        return cls(current, end_of_day(current))

    @classmethod
    def today(cls, *, tz: Optional[tzinfo] = None, now: Optional[datetime] = None) -> Period:
        current = _current(tz, now)
        return cls(start_of_day(current), end_of_day(current))

    this_day = today

    @classmethod
    def next_day(cls, *, tz: Optional[tzinfo] = None, now: Optional[datetime] = None) -> Period:
        """The calendar day that contains the moment 24 hours from now."""
        current = _current(tz, now)
        later = (current.astimezone(timezone.utc) + timedelta(hours=24)).astimezone(_zone(tz))
        return cls(start_of_day(later), end_of_day(later))

    @classmethod
    def this_week(cls, *, tz: Optional[tzinfo] = None, now: Optional[datetime] = None) -> Period:
        current = _current(tz, now)
        return cls(start_of_week(current), end_of_week(current))

    @classmethod
    def next_week(cls, *, tz: Optional[tzinfo] = None, now: Optional[datetime] = None) -> Period:
        following = start_of_week(_current(tz, now)) + timedelta(days=7)
        return cls(following, end_of_week(following))

    # -- anchored on a date -------------------------------------------------

    @classmethod
    def day_from(cls, date: str, *, tz: Optional[tzinfo] = None) -> Period:
        anchor = _parse_string(date, tz)
        return cls(start_of_day(anchor), end_of_day(anchor))

    @classmethod
    def days_from(cls, date: str, days: int, *, tz: Optional[tzinfo] = None) -> Period:
        """`days` whole calendar days, the first one being the day of `date`."""
        if days < 1:
            raise ValueError(f"days must be >= 1, got {days}")
        anchor = _parse_string(date, tz)
        return cls(start_of_day(anchor), end_of_day(anchor + timedelta(days=days - 1)))

    @classmethod
    def week_from(cls, date: str, *, tz: Optional[tzinfo] = None) -> Period:
        anchor = _parse_string(date, tz)
        return cls(start_of_week(anchor), end_of_week(anchor))

    @classmethod
    def weeks_from(cls, date: str, weeks: int, *, tz: Optional[tzinfo] = None) -> Period:
        """`weeks` whole calendar weeks, the first one containing `date`."""
        if weeks < 1:
            raise ValueError(f"weeks must be >= 1, got {weeks}")
        anchor = _parse_string(date, tz)
        return cls(start_of_week(anchor), end_of_week(anchor + timedelta(weeks=weeks - 1)))
