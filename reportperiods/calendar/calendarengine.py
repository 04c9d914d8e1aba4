"""Calendar Engine
---------------

Date arithmetic used by units and periods. Instants are timezone-aware
datetimes in UTC; every function returns a new value and never mutates its
input.

Supports:
  - Coercion from epoch milliseconds, date triples, dates/datetimes and ISO strings
  - Field accessors (quarter, half year, day of year, ISO weekday and week)
  - Value-style setters that clamp or roll over like a wall calendar
  - add/subtract in days, weeks, months, quarters, years
  - Token formatting (YYYY, YY, MMMM, MMM, MM, M, DD, D, WW, W, GGGG, GG, Q)
  - Range iteration and whole-step range difference

Month, quarter and year arithmetic uses dateutil's relativedelta, which
clamps to the last day of shorter months. ISO weeks come from isoweek.
"""

from __future__ import annotations
from datetime import date, datetime, timedelta, timezone
from typing import Iterator, Optional
import re

try:
    from dateutil import parser as dateutil_parser
    from dateutil.relativedelta import relativedelta
except ImportError as e:
    raise ImportError("python-dateutil not installed. pip install python-dateutil") from e

try:
    from isoweek import Week
except ImportError as e:
    raise ImportError("isoweek not installed. pip install isoweek") from e

from reportperiods.calendar.calendarlocale import CalendarLocale, get_calendar_locale


EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# Unit names accepted by add/subtract/iterate_range/range_diff
_UNIT_ALIASES = {
    "d": "days",
    "day": "days",
    "days": "days",
    "w": "weeks",
    "week": "weeks",
    "weeks": "weeks",
    "M": "months",
    "month": "months",
    "months": "months",
    "Q": "quarters",
    "quarter": "quarters",
    "quarters": "quarters",
    "y": "years",
    "year": "years",
    "years": "years",
}

_FORMAT_TOKENS = re.compile(
    r"\[[^\]]*\]|YYYY|YY|MMMM|MMM|MM|M|DD|D|WW|W|GGGG|GG|Q|.",
    re.DOTALL,
)


# ---- Construction ----

def from_epoch_ms(ms: float) -> datetime:
    """Return the UTC instant for epoch milliseconds."""
    return EPOCH + timedelta(milliseconds=ms)


def from_date_parts(year: int, month0: int, day: int) -> datetime:
    """
    Return midnight UTC for a (year, 0-based month, day) triple.

    Months beyond 11 and days beyond the month length roll over into the
    following months, so (2015, 12, 31) is 2016-01-31.

    Examples:
        >>> from_date_parts(2015, 1, 1)
        datetime.datetime(2015, 2, 1, 0, 0, tzinfo=datetime.timezone.utc)
    """
    first = datetime(year, 1, 1, tzinfo=timezone.utc) + relativedelta(months=month0)
    return first + timedelta(days=day - 1)


def to_instant(value) -> datetime:
    """
    Coerce a date-ish value to a UTC instant.

    Args:
        value: datetime (naive values are read as UTC), date, epoch
            milliseconds (int/float) or ISO-8601 string

    Returns:
        Timezone-aware datetime in UTC

    Raises:
        TypeError: for unsupported input types
        ValueError: for strings that are not ISO-8601
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    if isinstance(value, bool):
        raise TypeError(f"Cannot convert {value!r} to an instant")
    if isinstance(value, (int, float)):
        return from_epoch_ms(value)
    if isinstance(value, str):
        return to_instant(dateutil_parser.isoparse(value.strip()))
    raise TypeError(f"Cannot convert {type(value).__name__} to an instant")


def epoch_seconds(instant: datetime) -> int:
    """Whole seconds since the epoch, floored."""
    return (instant - EPOCH) // timedelta(seconds=1)


def epoch_ms(instant: datetime) -> int:
    return (instant - EPOCH) // timedelta(milliseconds=1)


# ---- Accessors ----

def days_in_month(year: int, month0: int) -> int:
    """
    Number of days in a month given by a 0-based month index.

    Examples:
        >>> days_in_month(2015, 1)
        28
        >>> days_in_month(2016, 1)
        29
    """
    first = date(year, 1, 1) + relativedelta(months=month0)
    return (first + relativedelta(months=1) - relativedelta(days=1)).day


def quarter_of(instant: datetime) -> int:
    return (instant.month - 1) // 3 + 1


def halfyear_of(instant: datetime) -> int:
    return (instant.month - 1) // 6 + 1


def day_of_year(instant: datetime) -> int:
    return instant.timetuple().tm_yday


def iso_week_of(instant: datetime) -> Week:
    """Return the isoweek Week (ISO week-year and number) containing the instant."""
    return Week.withdate(instant.date())


def weekday(instant: datetime) -> int:
    """ISO weekday index, 0 = Monday ... 6 = Sunday."""
    return instant.weekday()


# ---- Setters (return new instants) ----

def with_day(instant: datetime, day: int) -> datetime:
    """Set the day of month; values past the month end roll into the next month."""
    return instant.replace(day=1) + timedelta(days=day - 1)


def with_month(instant: datetime, month0: int) -> datetime:
    """Set the 0-based month, clamping the day to the target month's length."""
    year = instant.year + month0 // 12
    month0 = month0 % 12
    day = min(instant.day, days_in_month(year, month0))
    return instant.replace(year=year, month=month0 + 1, day=day)


def with_quarter(instant: datetime, quarter: int) -> datetime:
    """Move to the same position inside the given quarter of the year."""
    return with_month(instant, (quarter - 1) * 3 + (instant.month - 1) % 3)


def with_year(instant: datetime, year: int) -> datetime:
    day = min(instant.day, days_in_month(year, instant.month - 1))
    return instant.replace(year=year, day=day)


def with_weekday(instant: datetime, value: int) -> datetime:
    """Move within the ISO week to weekday index `value` (0 = Monday)."""
    return instant + timedelta(days=value - weekday(instant))


def with_week(instant: datetime, week: int) -> datetime:
    """Move to the same weekday of the given ISO week of the same week-year."""
    return instant + timedelta(weeks=week - iso_week_of(instant).week)


# ---- Arithmetic ----

def _normalize_unit(unit: str) -> str:
    try:
        return _UNIT_ALIASES[unit]
    except KeyError:
        raise ValueError(f"Unknown calendar unit: {unit}") from None


def _delta(unit: str, amount: int) -> relativedelta:
    unit = _normalize_unit(unit)
    if unit == "quarters":
        return relativedelta(months=3 * amount)
    return relativedelta(**{unit: amount})


def add(instant: datetime, amount: int, unit: str) -> datetime:
    """
    Add whole units to an instant.

    Examples:
        >>> add(datetime(2015, 1, 31, tzinfo=timezone.utc), 1, "months")
        datetime.datetime(2015, 2, 28, 0, 0, tzinfo=datetime.timezone.utc)
    """
    return instant + _delta(unit, amount)


def subtract(instant: datetime, amount: int, unit: str) -> datetime:
    return instant - _delta(unit, amount)


def iterate_range(start: datetime, end: datetime, unit: str) -> Iterator[datetime]:
    """
    Yield start, start + 1 unit, start + 2 units, ... while not after end.

    Each step is computed from start rather than from the previous step, so
    month-end clamping never accumulates.
    """
    step = 0
    while True:
        current = start + _delta(unit, step)
        if current > end:
            return
        yield current
        step += 1


def range_diff(start: datetime, end: datetime, unit: str) -> int:
    """
    Number of whole units between two instants, truncated toward zero.

    Examples:
        >>> range_diff(datetime(2015, 1, 1), datetime(2016, 1, 1), "quarters")
        4
    """
    unit = _normalize_unit(unit)
    if unit == "days":
        return int((end - start) / timedelta(days=1))
    if unit == "weeks":
        return int((end - start) / timedelta(weeks=1))

    delta = relativedelta(end, start)
    months = delta.years * 12 + delta.months
    if unit == "months":
        return months
    if unit == "quarters":
        return int(months / 3)
    return int(months / 12)


# ---- Formatting ----

def _render_token(token: str, instant: datetime, locale: CalendarLocale) -> str:
    if token.startswith("[") and token.endswith("]") and len(token) > 1:
        return token[1:-1]
    if token == "YYYY":
        return f"{instant.year:04d}"
    if token == "YY":
        return f"{instant.year % 100:02d}"
    if token == "MMMM":
        return locale.month_names[instant.month - 1]
    if token == "MMM":
        return locale.month_names_short[instant.month - 1]
    if token == "MM":
        return f"{instant.month:02d}"
    if token == "M":
        return str(instant.month)
    if token == "DD":
        return f"{instant.day:02d}"
    if token == "D":
        return str(instant.day)
    if token == "WW":
        return f"{iso_week_of(instant).week:02d}"
    if token == "W":
        return str(iso_week_of(instant).week)
    if token == "GGGG":
        return f"{iso_week_of(instant).year:04d}"
    if token == "GG":
        return f"{iso_week_of(instant).year % 100:02d}"
    if token == "Q":
        return str(quarter_of(instant))
    return token


def format_instant(instant: datetime, template: str, locale: Optional[CalendarLocale] = None) -> str:
    """
    Render an instant with a token template.

    Bracketed text is copied literally; characters that are not tokens pass
    through unchanged.

    Examples:
        >>> format_instant(datetime(2015, 4, 19, tzinfo=timezone.utc), "[Q.]Q YYYY")
        'Q.2 2015'
        >>> format_instant(datetime(2015, 4, 19, tzinfo=timezone.utc), "[KW] W 'GG")
        "KW 16 '15"
    """
    locale = locale or get_calendar_locale()
    instant = to_instant(instant)
    return "".join(
        _render_token(match.group(0), instant, locale)
        for match in _FORMAT_TOKENS.finditer(template)
    )


__all__ = [
    "EPOCH",
    "from_epoch_ms",
    "from_date_parts",
    "to_instant",
    "epoch_seconds",
    "epoch_ms",
    "days_in_month",
    "quarter_of",
    "halfyear_of",
    "day_of_year",
    "iso_week_of",
    "weekday",
    "with_day",
    "with_month",
    "with_quarter",
    "with_year",
    "with_weekday",
    "with_week",
    "add",
    "subtract",
    "iterate_range",
    "range_diff",
    "format_instant",
]
