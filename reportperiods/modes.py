"""Period Modes
------------

Closed set of calendar granularities a period can be expressed in.

The string value of every member is the short code used in unit tokens
("d", "w", "m", ...), so members compare equal to their codes:

    >>> PeriodMode.DAYS == "d"
    True
    >>> PeriodMode.from_token("tq")
    <PeriodMode.TOTAL: 't'>
"""

from enum import Enum
from typing import Dict, Iterable

from reportperiods.errors import InvalidUnitError


class PeriodMode(str, Enum):
    DAYS = "d"
    WEEKS = "w"
    MONTHS = "m"
    QUARTERS = "q"
    HALFYEARS = "h"
    YEARS = "y"
    TOTAL = "t"
    YTD = "ytd"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def coerce(cls, value) -> "PeriodMode":
        """Return the mode for an exact code or member, else raise InvalidUnitError."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvalidUnitError(value) from None

    @classmethod
    def from_token(cls, token: str) -> "PeriodMode":
        """
        Return the family mode of a unit token.

        "ytd" is matched exactly, every other token by its first character,
        so count and total suffixes never change the family.
        """
        if token == cls.YTD.value:
            return cls.YTD
        if not token:
            raise InvalidUnitError(token)
        return cls.coerce(token[0])


def get_modes(keys: Iterable[str]) -> Dict[str, str]:
    """
    Filter the mode enum down to the requested member names.

    Unknown names are skipped silently.

    Examples:
        >>> get_modes(["DAYS", "MONTHS", "FOO"])
        {'DAYS': 'd', 'MONTHS': 'm'}
    """
    modes = {}
    for key in keys:
        if key in PeriodMode.__members__:
            modes[key] = PeriodMode[key].value
    return modes


__all__ = [
    "PeriodMode",
    "get_modes",
]
