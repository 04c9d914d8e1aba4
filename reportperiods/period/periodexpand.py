"""Period Boundaries and Sequences
-------------------------------

Snapping instants to the boundaries of their containing period and
enumerating the steps of a period.

Boundary rules (minimum / maximum):
  - Weeks: Monday / Sunday of the ISO week
  - Months: day 1 / last day of the month (leap-year aware)
  - Quarters: day 1 of month 1, 4, 7, 10 / last day of month 3, 6, 9, 12
  - Years: January 1st / December 31st
  - Days, Halfyears, Total, Ytd: unchanged

Every function returns new instants and never mutates its input.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional, Tuple

from reportperiods.calendar import (
    CalendarLocale,
    add,
    day_of_year,
    days_in_month,
    format_instant,
    iterate_range,
    quarter_of,
    subtract,
    with_day,
    with_month,
    with_quarter,
    with_week,
    with_weekday,
    with_year,
)
from reportperiods.errors import UnsupportedPeriodModeError
from reportperiods.modes import PeriodMode
from reportperiods.units.unitformat import (
    get_short_period_format,
    replace_custom_placeholders,
)


RANGE_STEP_UNITS = {
    PeriodMode.DAYS: "days",
    PeriodMode.WEEKS: "weeks",
    PeriodMode.MONTHS: "months",
    PeriodMode.QUARTERS: "quarters",
    PeriodMode.YEARS: "years",
}


@dataclass(frozen=True)
class DateEntry:
    """One step of a period: its short label, its instant and the group flag."""

    key: str
    value: datetime
    is_new_group: bool


def get_range_step_unit(period_mode) -> str:
    """
    Calendar unit a period of this mode is stepped by.

    Raises:
        UnsupportedPeriodModeError: for Halfyears, Total and Ytd
    """
    mode = PeriodMode.coerce(period_mode)
    try:
        return RANGE_STEP_UNITS[mode]
    except KeyError:
        raise UnsupportedPeriodModeError(mode, "range step") from None


# ---- Boundary expansion ----

def set_period_to_minimum(instant: datetime, period_mode) -> datetime:
    """
    Return the first day of the period containing the instant.

    Examples:
        >>> set_period_to_minimum(datetime(2015, 5, 17), "q")
        datetime.datetime(2015, 4, 1, 0, 0)
    """
    mode = PeriodMode.coerce(period_mode)

    if mode is PeriodMode.WEEKS:
        return with_weekday(instant, 0)
    if mode is PeriodMode.MONTHS:
        return with_day(instant, 1)
    if mode is PeriodMode.QUARTERS:
        return with_month(with_day(instant, 1), (quarter_of(instant) - 1) * 3)
    if mode is PeriodMode.YEARS:
        return with_month(with_day(instant, 1), 0)
    return instant


def set_period_to_maximum(instant: datetime, period_mode) -> datetime:
    """
    Return the last day of the period containing the instant.

    For quarters and years the month is set before the day, otherwise a day
    that does not exist in the current month would roll into the next one.

    Examples:
        >>> set_period_to_maximum(datetime(2015, 2, 17), "m")
        datetime.datetime(2015, 2, 28, 0, 0)
    """
    mode = PeriodMode.coerce(period_mode)

    if mode is PeriodMode.WEEKS:
        return with_weekday(instant, 6)
    if mode is PeriodMode.MONTHS:
        return subtract(add(with_day(instant, 1), 1, "months"), 1, "days")
    if mode is PeriodMode.QUARTERS:
        last_month = quarter_of(instant) * 3 - 1
        moved = with_month(instant, last_month)
        return with_day(moved, days_in_month(moved.year, last_month))
    if mode is PeriodMode.YEARS:
        return with_day(with_month(instant, 11), 31)
    return instant


def expand_range_to_complete_periods(
    start: datetime,
    end: datetime,
    period_mode,
) -> Tuple[datetime, datetime]:
    """
    Stretch (start, end) outward to complete periods of the given mode.

    Expanding an already expanded pair returns it unchanged.
    """
    return (
        set_period_to_minimum(start, period_mode),
        set_period_to_maximum(end, period_mode),
    )


# ---- Steps and groups ----

def is_new_period_group(period_mode, instant: datetime) -> bool:
    """
    Whether the step at this instant opens a new drill-down group.

    Days and weeks group into months, months and quarters into years, and
    every year is its own group.
    """
    mode = PeriodMode.coerce(period_mode)

    if mode in (PeriodMode.DAYS, PeriodMode.WEEKS):
        return instant.day == 1
    if mode in (PeriodMode.MONTHS, PeriodMode.QUARTERS):
        return day_of_year(instant) == 1
    if mode is PeriodMode.YEARS:
        return True
    raise UnsupportedPeriodModeError(mode, "newGroup")


def set_period_on_instant(period_mode, instant: datetime, value: int) -> datetime:
    """
    Set the field of the instant that corresponds to the mode.

    Days set the day of month, weeks the ISO week, months the 0-based
    month, quarters the quarter and years the year.
    """
    mode = PeriodMode.coerce(period_mode)

    if mode is PeriodMode.DAYS:
        return with_day(instant, value)
    if mode is PeriodMode.WEEKS:
        return with_week(instant, value)
    if mode is PeriodMode.MONTHS:
        return with_month(instant, value)
    if mode is PeriodMode.QUARTERS:
        return with_quarter(instant, value)
    if mode is PeriodMode.YEARS:
        return with_year(instant, value)
    raise UnsupportedPeriodModeError(mode, "setter")


def _short_label(mode: PeriodMode, instant: datetime, locale: Optional[CalendarLocale]) -> str:
    label = format_instant(instant, get_short_period_format(mode), locale)
    return replace_custom_placeholders(instant, label)


def create_date_entry(
    period_mode,
    instant: datetime,
    new_value: Optional[int] = None,
    locale: Optional[CalendarLocale] = None,
) -> DateEntry:
    """
    Build a DateEntry for an instant, optionally after setting its period field.

    The given instant is left untouched.
    """
    mode = PeriodMode.coerce(period_mode)
    if new_value is not None:
        instant = set_period_on_instant(mode, instant, new_value)
    return DateEntry(
        key=_short_label(mode, instant, locale),
        value=instant,
        is_new_group=is_new_period_group(mode, instant),
    )


def generate_sequence(
    start: datetime,
    end: datetime,
    period_mode,
    locale: Optional[CalendarLocale] = None,
) -> List[DateEntry]:
    """
    Enumerate every step from start to end (both inclusive).

    Args:
        start: first step, normally already expanded to a period minimum
        end: last instant a step may fall on
        period_mode: one of d, w, m, q, y

    Returns:
        Ascending list of DateEntry records

    Raises:
        UnsupportedPeriodModeError: for Halfyears, Total and Ytd
    """
    mode = PeriodMode.coerce(period_mode)
    step_unit = get_range_step_unit(mode)

    return [
        DateEntry(
            key=_short_label(mode, instant, locale),
            value=instant,
            is_new_group=is_new_period_group(mode, instant),
        )
        for instant in iterate_range(start, end, step_unit)
    ]


__all__ = [
    "DateEntry",
    "RANGE_STEP_UNITS",
    "get_range_step_unit",
    "set_period_to_minimum",
    "set_period_to_maximum",
    "expand_range_to_complete_periods",
    "is_new_period_group",
    "set_period_on_instant",
    "create_date_entry",
    "generate_sequence",
]
