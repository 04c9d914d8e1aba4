"""Calendar engine for period computation.

All instants are timezone-aware UTC datetimes. Weeks follow ISO-8601
(Monday start, week 1 contains January 4th). Month names come from a
CalendarLocale that is bound once from settings.

Examples:
    >>> from reportperiods.calendar import from_date_parts, format_instant
    >>> format_instant(from_date_parts(2015, 3, 19), "[Q%Q%] YYYY")
    'Q%Q% 2015'
"""

from reportperiods.calendar.calendarlocale import (
    CalendarLocale,
    get_calendar_locale,
)
from reportperiods.calendar.calendarengine import (
    from_epoch_ms,
    from_date_parts,
    to_instant,
    epoch_seconds,
    epoch_ms,
    days_in_month,
    quarter_of,
    halfyear_of,
    day_of_year,
    iso_week_of,
    weekday,
    with_day,
    with_month,
    with_quarter,
    with_year,
    with_weekday,
    with_week,
    add,
    subtract,
    iterate_range,
    range_diff,
    format_instant,
)

__all__ = [
    "CalendarLocale",
    "get_calendar_locale",
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
