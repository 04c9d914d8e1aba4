"""Public API for period units.

A unit is a validated token such as "m", "q3", "tw" or "ytd" describing the
granularity a value is reported in. The Unit class exposes its
classification and the label templates for its family.
"""

from functools import cached_property
from typing import Optional

from reportperiods.calendar import CalendarLocale
from reportperiods.modes import PeriodMode
from reportperiods.units.unitformat import (
    get_long_period_display_format,
    get_long_period_format,
    get_short_period_format,
    get_string_for_utc_time_and_format,
)
from reportperiods.units.unitgrammar import (
    UnitIdentifier,
    is_valid_unit,
    parse_unit_token,
)


class Unit:
    """
    Helper for one period unit id.

    Args:
        id: unit token, e.g. "d", "m12", "tq", "ytd"

    Raises:
        InvalidUnitError: if the token is not a valid unit

    Examples:
        >>> unit = Unit("q")
        >>> unit.get_long_format()
        '[Q%Q%] YYYY'
        >>> unit.get_long_string_for_time(1429457412000)
        'Q2 2015'
    """

    def __init__(self, id: str):
        self._identifier = parse_unit_token(id)
        self._id = id

    @property
    def id(self) -> str:
        return self._id

    def __repr__(self) -> str:
        return f"Unit({self._id!r})"

    def __eq__(self, other) -> bool:
        return isinstance(other, Unit) and other._id == self._id

    def __hash__(self) -> int:
        return hash(self._id)

    @property
    def identifier(self) -> UnitIdentifier:
        return self._identifier

    @cached_property
    def _short_format(self) -> str:
        return get_short_period_format(self._id)

    @cached_property
    def _long_format(self) -> str:
        return get_long_period_format(self._id)

    @cached_property
    def _long_display_format(self) -> str:
        return get_long_period_display_format(self._id)

    def is_total(self) -> bool:
        return self._identifier.base_mode is PeriodMode.TOTAL

    def is_ytd(self) -> bool:
        return self._identifier.base_mode is PeriodMode.YTD

    def is_yearly(self) -> bool:
        """
        Whether values of this unit are reported per year.

        ytd is yearly, any total is not, and otherwise every counted token
        such as "m3" is.
        """
        if self.is_ytd():
            return True
        if self.is_total():
            return False
        return self._identifier.count is not None

    def get_short_format(self) -> str:
        return self._short_format

    def get_long_format(self) -> str:
        return self._long_format

    def get_long_string_display_format(self) -> str:
        return self._long_display_format

    def get_long_string_for_time(self, time, locale: Optional[CalendarLocale] = None) -> str:
        return get_string_for_utc_time_and_format(time, self.get_long_format(), locale)

    def get_short_string_for_time(self, time, locale: Optional[CalendarLocale] = None) -> str:
        return get_string_for_utc_time_and_format(time, self.get_short_format(), locale)


def get_unit(id: str) -> Unit:
    """
    Return a Unit for the token.

    Raises:
        InvalidUnitError: if is_valid_unit(id) is False
    """
    return Unit(id)


__all__ = [
    "Unit",
    "get_unit",
    "is_valid_unit",
]
