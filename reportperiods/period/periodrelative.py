"""Relative Periods and Period Differences
---------------------------------------

Date arithmetic on top of the period modes:

  - get_relative_period: step a date forward or backward by whole periods
  - get_period_difference: count whole periods between two dates

Example:
    >>> get_relative_period("q", -1, "2015-05-17")
    '2015-02-17'
    >>> get_period_difference("2015-01-05", "2016-01-25", "m")
    12
"""

from datetime import datetime, timezone
from typing import Optional
import logging

from reportperiods.calendar import (
    CalendarLocale,
    add,
    range_diff,
    subtract,
    to_instant,
)
from reportperiods.errors import UnsupportedPeriodModeError
from reportperiods.modes import PeriodMode
from reportperiods.period.periodexpand import get_range_step_unit, set_period_to_minimum
from reportperiods.units.unitformat import get_string_for_utc_time_and_format

logger = logging.getLogger(__name__)


# Mode -> (calendar unit, units per step)
RELATIVE_STEPS = {
    PeriodMode.DAYS: ("days", 1),
    PeriodMode.WEEKS: ("weeks", 1),
    PeriodMode.MONTHS: ("months", 1),
    PeriodMode.QUARTERS: ("quarters", 1),
    PeriodMode.HALFYEARS: ("quarters", 2),
    PeriodMode.YEARS: ("years", 1),
}


def get_current_date(asof_ts: Optional[datetime] = None) -> str:
    """
    Return today's UTC date as YYYY-MM-DD.

    Args:
        asof_ts: reference timestamp (default: now UTC)
    """
    if asof_ts is None:
        asof_ts = datetime.now(timezone.utc)
    return to_instant(asof_ts).strftime("%Y-%m-%d")


def get_relative_period(
    unit,
    offset: int,
    from_date=None,
    out_format: str = "YYYY-MM-DD",
    locale: Optional[CalendarLocale] = None,
):
    """
    Return the date `offset` periods of `unit` away from `from_date`.

    Args:
        unit: base mode code, "d", "w", "m", "q", "h" or "y". A half year is
            stepped as two quarters.
        offset: number of periods, negative to go back
        from_date: start date (default: today in UTC as YYYY-MM-DD)
        out_format: token template for the result

    Returns:
        The formatted date. With offset 0, from_date is returned as given.

    Raises:
        UnsupportedPeriodModeError: for "t" and "ytd"

    Examples:
        >>> get_relative_period("h", 1, "2015-01-31")
        '2015-07-31'
        >>> get_relative_period("m", 0, "not a date")
        'not a date'
    """
    if from_date is None:
        from_date = get_current_date()

    if offset == 0:
        return from_date

    mode = PeriodMode.coerce(unit)
    try:
        step_unit, multiplier = RELATIVE_STEPS[mode]
    except KeyError:
        raise UnsupportedPeriodModeError(mode, "relative step") from None

    position = to_instant(from_date)
    amount = abs(offset) * multiplier
    if offset > 0:
        position = add(position, amount, step_unit)
    else:
        position = subtract(position, amount, step_unit)

    logger.debug(f"Stepped {from_date} by {offset} {mode.name.lower()} to {position.date()}")
    return get_string_for_utc_time_and_format(position, out_format, locale)


def get_period_difference(start_date, end_date, period_mode) -> int:
    """
    Count whole periods between two dates.

    Both dates are first moved to the start of their period, so any two days
    in adjacent months are one month apart.

    Raises:
        UnsupportedPeriodModeError: for Halfyears, Total and Ytd

    Examples:
        >>> get_period_difference("2015-01-05", "2016-01-25", "d")
        385
        >>> get_period_difference("2015-01-05", "2016-01-25", "y")
        1
    """
    mode = PeriodMode.coerce(period_mode)
    step_unit = get_range_step_unit(mode)

    start = set_period_to_minimum(to_instant(start_date), mode)
    end = set_period_to_minimum(to_instant(end_date), mode)
    return range_diff(start, end, step_unit)


__all__ = [
    "get_current_date",
    "get_relative_period",
    "get_period_difference",
]
