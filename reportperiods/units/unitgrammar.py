"""Unit Token Grammar
------------------

Validation and parsing of period unit tokens.

Valid forms:
  - bare base code: "d", "w", "m", "q", "h", "y", "t"
  - year to date: "ytd" (exact)
  - counted base code: "d1".."d366", "w1".."w53", "m1".."m12", "q1".."q4", "h1".."h2"
  - total of a base code: "td", "tw", "tm", "tq", "th", "ty"

Years, totals and ytd never take a count.

Examples:
    >>> is_valid_unit("m12")
    True
    >>> is_valid_unit("m13")
    False
    >>> parse_unit_token("tq")
    UnitIdentifier(base_mode=<PeriodMode.TOTAL: 't'>, count=None, total_of=<PeriodMode.QUARTERS: 'q'>)
"""

from dataclasses import dataclass
from typing import Optional
import re

from reportperiods.errors import InvalidUnitError
from reportperiods.modes import PeriodMode


_D, _W, _M, _Q, _H, _Y, _T, _YTD = (
    PeriodMode.DAYS.value,
    PeriodMode.WEEKS.value,
    PeriodMode.MONTHS.value,
    PeriodMode.QUARTERS.value,
    PeriodMode.HALFYEARS.value,
    PeriodMode.YEARS.value,
    PeriodMode.TOTAL.value,
    PeriodMode.YTD.value,
)

# Shape only; the numeric bounds are checked against MAX_UNIT_COUNTS
REGEX_IS_UNIT_AND_NUMBER = re.compile(
    rf"(?:{_D}[1-3]?[0-9]?[0-9]|{_W}[1-5]?[0-9]|{_M}1?[0-9]|{_Q}[1-4]|{_H}[1-2])"
)

REGEX_IS_UNIT = re.compile(
    rf"(?:{_D}|{_W}|{_M}|{_Q}|{_H}|{_Y}|{_T}[{_D}{_W}{_M}{_Q}{_H}{_Y}]?|{_YTD})"
)

MAX_UNIT_COUNTS = {
    PeriodMode.DAYS: 366,
    PeriodMode.WEEKS: 53,
    PeriodMode.MONTHS: 12,
    PeriodMode.QUARTERS: 4,
    PeriodMode.HALFYEARS: 2,
}


@dataclass(frozen=True)
class UnitIdentifier:
    """Parsed unit token: exactly one of bare, counted, total-of or ytd."""

    base_mode: PeriodMode
    count: Optional[int] = None
    total_of: Optional[PeriodMode] = None


def get_max_number_for_unit(unit) -> Optional[int]:
    """Return the maximum count for a base code, or None if it takes no count."""
    try:
        mode = PeriodMode(unit)
    except ValueError:
        return None
    return MAX_UNIT_COUNTS.get(mode)


def is_valid_unit(token) -> bool:
    """
    Return whether the token is a valid unit id. Never raises.

    Examples:
        >>> is_valid_unit("d366")
        True
        >>> is_valid_unit("d0")
        False
        >>> is_valid_unit("y1")
        False
    """
    if not isinstance(token, str):
        return False

    if REGEX_IS_UNIT_AND_NUMBER.fullmatch(token):
        number = int(token[1:])
        maximum = get_max_number_for_unit(token[0])
        return number != 0 and maximum is not None and number <= maximum

    return REGEX_IS_UNIT.fullmatch(token) is not None


def parse_unit_token(token: str) -> UnitIdentifier:
    """
    Parse a token into its components.

    Raises:
        InvalidUnitError: if the token is not valid
    """
    if not is_valid_unit(token):
        raise InvalidUnitError(token)

    if token == _YTD:
        return UnitIdentifier(base_mode=PeriodMode.YTD)

    base_mode = PeriodMode(token[0])
    suffix = token[1:]
    if not suffix:
        return UnitIdentifier(base_mode=base_mode)
    if base_mode is PeriodMode.TOTAL:
        return UnitIdentifier(base_mode=base_mode, total_of=PeriodMode(suffix))
    return UnitIdentifier(base_mode=base_mode, count=int(suffix))


__all__ = [
    "UnitIdentifier",
    "MAX_UNIT_COUNTS",
    "get_max_number_for_unit",
    "is_valid_unit",
    "parse_unit_token",
]
