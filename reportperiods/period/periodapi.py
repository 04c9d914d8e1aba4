"""Period API.

Public entry points for creating periods and reading calendar numbers from
UTC timestamps.
"""

from typing import Optional

from reportperiods.calendar import (
    CalendarLocale,
    halfyear_of,
    iso_week_of,
    quarter_of,
    to_instant,
)
from reportperiods.period.periodidentity import Period


def create_period(
    period_mode,
    start,
    end,
    *,
    locale: Optional[CalendarLocale] = None,
) -> Period:
    """
    Create a Period expanded to complete periods of `period_mode`.

    Args:
        period_mode: PeriodMode or its code
        start: date on which the period starts (datetime, date, epoch ms or ISO string)
        end: date on which the period ends
        locale: optional explicit calendar locale

    Returns:
        Period instance

    Examples:
        >>> period = create_period("m", "2015-02-17", "2015-02-17")
        >>> period.get_long_period_label()
        'Februar 2015 - Februar 2015'
        >>> len(period.get_value_as_objects())
        1
    """
    return Period(period_mode, start, end, locale=locale)


def get_iso_week_no_from_time(time) -> int:
    """
    ISO week number of a UTC timestamp.

    Examples:
        >>> get_iso_week_no_from_time(1419847800000)  # 2014-12-29
        1
    """
    return iso_week_of(to_instant(time)).week


def get_iso_week_year_from_time(time, short: bool = False) -> int:
    """
    ISO week-year of a UTC timestamp, the last two digits only if `short`.

    Examples:
        >>> get_iso_week_year_from_time(1419847800000)  # 2014-12-29
        2015
        >>> get_iso_week_year_from_time(1419847800000, short=True)
        15
    """
    year = iso_week_of(to_instant(time)).year
    return year % 100 if short else year


def get_quarter_no_from_time(time) -> int:
    """Quarter (1-4) of a UTC timestamp."""
    return quarter_of(to_instant(time))


def get_halfyear_no_from_time(time) -> int:
    """Half year (1-2) of a UTC timestamp."""
    return halfyear_of(to_instant(time))


__all__ = [
    "create_period",
    "get_iso_week_no_from_time",
    "get_iso_week_year_from_time",
    "get_quarter_no_from_time",
    "get_halfyear_no_from_time",
]
