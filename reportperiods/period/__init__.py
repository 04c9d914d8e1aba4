"""Period module for calendar period computation.

This module expands date ranges to complete periods of a granularity,
enumerates their steps and renders labels for them.

Public API:
    create_period(period_mode, start, end) -> Period
        Expand start/end to complete periods

    Period.get_value_as_objects() -> list[DateEntry]
        Every step of the period, cached until start/end are reassigned

    get_period_difference(start, end, period_mode) -> int
        Whole periods between two dates

    get_relative_period(unit, offset, from_date=None, out_format="YYYY-MM-DD") -> str
        Step a date by whole periods

Examples:
    >>> from reportperiods.period import create_period, get_period_difference
    >>>
    >>> # One day expands to its whole quarter
    >>> period = create_period("q", "2015-05-17", "2015-05-17")
    >>> period.start.date(), period.end.date()
    (datetime.date(2015, 4, 1), datetime.date(2015, 6, 30))
    >>>
    >>> # Days over a year
    >>> period = create_period("d", "2015-01-01", "2015-12-31")
    >>> len(period.get_value_as_objects())
    365
    >>>
    >>> get_period_difference("2015-01-05", "2016-01-25", "q")
    4
"""

from reportperiods.period.periodapi import (
    create_period,
    get_iso_week_no_from_time,
    get_iso_week_year_from_time,
    get_quarter_no_from_time,
    get_halfyear_no_from_time,
)
from reportperiods.period.periodidentity import Period
from reportperiods.period.periodexpand import (
    DateEntry,
    get_range_step_unit,
    set_period_to_minimum,
    set_period_to_maximum,
    expand_range_to_complete_periods,
    is_new_period_group,
    set_period_on_instant,
    create_date_entry,
    generate_sequence,
)
from reportperiods.period.periodrelative import (
    get_current_date,
    get_relative_period,
    get_period_difference,
)

__all__ = [
    "create_period",
    "Period",
    "DateEntry",
    "get_iso_week_no_from_time",
    "get_iso_week_year_from_time",
    "get_quarter_no_from_time",
    "get_halfyear_no_from_time",
    "get_current_date",
    "get_relative_period",
    "get_period_difference",
    "get_range_step_unit",
    "set_period_to_minimum",
    "set_period_to_maximum",
    "expand_range_to_complete_periods",
    "is_new_period_group",
    "set_period_on_instant",
    "create_date_entry",
    "generate_sequence",
]
