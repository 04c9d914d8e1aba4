"""Period
------

A Period describes a time range of a given granularity and provides every
step in it, labelled for display.

Key behaviors:
  1. Start and end are expanded to complete periods on construction
  2. The step sequence is built on first read and cached
  3. The cache is keyed by a checksum of mode, start and end. Reassigning
     `start` or `end` afterwards makes the period dirty, and the next read
     rebuilds the sequence. Nothing is recomputed eagerly.

A Period is meant to have a single owner; concurrent mutation of start/end
from several places is not supported.
"""

from __future__ import annotations
from datetime import datetime
from typing import List, Optional
import logging

from reportperiods.calendar import CalendarLocale, epoch_seconds, to_instant
from reportperiods.modes import PeriodMode
from reportperiods.period.periodexpand import (
    DateEntry,
    expand_range_to_complete_periods,
    generate_sequence,
)
from reportperiods.units.unitformat import (
    get_long_period_format,
    get_period_group_format,
    get_short_period_format,
    get_string_for_utc_time_and_format,
)

logger = logging.getLogger(__name__)


class Period:
    """
    Time range from start to end expressed in one period mode.

    Args:
        period_mode: PeriodMode or its code ("d", "w", "m", "q", "h", "y", "t", "ytd")
        start: first day, any value reportperiods.calendar.to_instant accepts
        end: last day, same as start
        locale: optional explicit calendar locale

    Raises:
        InvalidUnitError: if period_mode is not an exact mode code
        ValueError: if start is after end once expanded

    Examples:
        >>> period = Period("q", "2015-05-17", "2015-05-17")
        >>> period.start.date(), period.end.date()
        (datetime.date(2015, 4, 1), datetime.date(2015, 6, 30))
        >>> [entry.key for entry in period.get_value_as_objects()]
        ["Q.2 '15"]
    """

    def __init__(self, period_mode, start, end, locale: Optional[CalendarLocale] = None):
        self.period_mode = PeriodMode.coerce(period_mode)
        self._locale = locale

        start, end = expand_range_to_complete_periods(
            to_instant(start), to_instant(end), self.period_mode
        )
        if start > end:
            raise ValueError(f"Period start {start.date()} is after end {end.date()}")
        self._start = start
        self._end = end

        self._values: Optional[List[DateEntry]] = None
        self.checksum = self.get_checksum()

    def __repr__(self) -> str:
        return f"Period({self.period_mode.value!r}, {self._start.isoformat()}, {self._end.isoformat()})"

    # Reassigning start/end is allowed and is picked up by the checksum.
    @property
    def start(self) -> datetime:
        return self._start

    @start.setter
    def start(self, value) -> None:
        self._start = to_instant(value)

    @property
    def end(self) -> datetime:
        return self._end

    @end.setter
    def end(self, value) -> None:
        self._end = to_instant(value)

    def get_checksum(self) -> str:
        return f"{self.period_mode.value}/{epoch_seconds(self._start)}/{epoch_seconds(self._end)}"

    def is_dirty(self) -> bool:
        return self.checksum != self.get_checksum()

    def is_equal(self, other: "Period") -> bool:
        return (
            self._start == other.start
            and self._end == other.end
            and self.period_mode == other.period_mode
        )

    def get_value_as_objects(self) -> List[DateEntry]:
        """
        Return every step of the period as DateEntry records.

        The cached list is returned while start and end are unchanged; after
        a reassignment the steps are generated again.

        Raises:
            UnsupportedPeriodModeError: for Halfyears, Total and Ytd periods
        """
        if self._values is not None and not self.is_dirty():
            return self._values

        self._values = generate_sequence(self._start, self._end, self.period_mode, self._locale)
        self.checksum = self.get_checksum()
        logger.debug(f"Built {len(self._values)} steps for period {self.checksum}")
        return self._values

    # ---- Labels ----

    def get_long_string_for_start(self) -> str:
        return get_string_for_utc_time_and_format(
            self._start, get_long_period_format(self.period_mode), self._locale
        )

    def get_long_string_for_end(self) -> str:
        return get_string_for_utc_time_and_format(
            self._end, get_long_period_format(self.period_mode), self._locale
        )

    def get_long_period_label(self) -> str:
        """Long label of the whole range, e.g. 'Q1 2015 - Q4 2015'."""
        return f"{self.get_long_string_for_start()} - {self.get_long_string_for_end()}"

    def get_long_string_format(self) -> str:
        return get_long_period_format(self.period_mode)

    def get_short_string_format(self) -> str:
        return get_short_period_format(self.period_mode)

    def get_group_string_format(self) -> str:
        return get_period_group_format(self.period_mode)


__all__ = [
    "Period",
]
