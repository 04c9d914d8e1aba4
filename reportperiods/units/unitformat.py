"""Period Label Formats
--------------------

Template lookup for the four label families (short, long, group,
long-display) and the %Q%/%H% placeholder substitution.

A template is chosen by the token's family mode: "ytd" exactly, otherwise
the first character of the token. Count and total suffixes are ignored, so
"q", "q3" and "q4" share the quarter templates while "tq" uses the total ones.

Half years have no group or long-display templates. Asking for them raises
FormatNotFoundError rather than falling back to another family.
"""

from datetime import datetime
from typing import Dict, Optional

from reportperiods.calendar import (
    CalendarLocale,
    format_instant,
    halfyear_of,
    quarter_of,
    to_instant,
)
from reportperiods.errors import FormatNotFoundError, InvalidUnitError
from reportperiods.modes import PeriodMode


QUARTER_PLACEHOLDER = "%Q%"
HALFYEAR_PLACEHOLDER = "%H%"

SHORT_FORMATS: Dict[PeriodMode, str] = {
    PeriodMode.DAYS: "YYYY-MM-DD",
    PeriodMode.WEEKS: "[KW] W 'GG",
    PeriodMode.MONTHS: "MMM 'YY",
    PeriodMode.QUARTERS: "[Q.%Q%] 'YY",
    PeriodMode.HALFYEARS: "[H%H%] 'YY",
    PeriodMode.YEARS: "YYYY",
    PeriodMode.TOTAL: "",
    PeriodMode.YTD: "[YTD] YY",
}

LONG_FORMATS: Dict[PeriodMode, str] = {
    PeriodMode.DAYS: "YYYY-MM-DD",
    PeriodMode.WEEKS: "[KW] W GGGG",
    PeriodMode.MONTHS: "MMMM YYYY",
    PeriodMode.QUARTERS: "[Q%Q%] YYYY",
    PeriodMode.HALFYEARS: "[H%H%] YYYY",
    PeriodMode.YEARS: "YYYY",
    PeriodMode.TOTAL: "",
    PeriodMode.YTD: "[YTD] YYYY",
}

GROUP_FORMATS: Dict[PeriodMode, str] = {
    PeriodMode.DAYS: "DD. MMMM",
    PeriodMode.WEEKS: "[KW] W GGGG",
    PeriodMode.MONTHS: "MMMM YYYY",
    PeriodMode.QUARTERS: "[Quartal] Q YYYY",
    PeriodMode.YEARS: "YYYY",
    PeriodMode.TOTAL: "",
    PeriodMode.YTD: "[YTD] YYYY",
}

LONG_DISPLAY_FORMATS: Dict[PeriodMode, str] = {
    PeriodMode.DAYS: "DD.MM.YYYY",
    PeriodMode.WEEKS: "[KW] W GGGG",
    PeriodMode.MONTHS: "MMMM YYYY",
    PeriodMode.QUARTERS: "[Q.]Q YYYY",
    PeriodMode.YEARS: "YYYY",
    PeriodMode.TOTAL: "",
    PeriodMode.YTD: "[YTD] YYYY",
}

FORMAT_FAMILIES = {
    "short": SHORT_FORMATS,
    "long": LONG_FORMATS,
    "group": GROUP_FORMATS,
    "long display": LONG_DISPLAY_FORMATS,
}


def _resolve_format(period_mode, family: str) -> str:
    table = FORMAT_FAMILIES[family]
    token = str(period_mode)

    try:
        mode = PeriodMode.from_token(token)
    except InvalidUnitError:
        raise FormatNotFoundError(token, family) from None

    if mode not in table:
        raise FormatNotFoundError(token, family)
    return table[mode]


def get_short_period_format(period_mode) -> str:
    """
    Short label template for a mode or unit token.

    Examples:
        >>> get_short_period_format("m")
        "MMM 'YY"
        >>> get_short_period_format("q3")
        "[Q.%Q%] 'YY"
    """
    return _resolve_format(period_mode, "short")


def get_long_period_format(period_mode) -> str:
    return _resolve_format(period_mode, "long")


def get_period_group_format(period_mode) -> str:
    return _resolve_format(period_mode, "group")


def get_long_period_display_format(period_mode) -> str:
    return _resolve_format(period_mode, "long display")


def replace_custom_placeholders(instant: datetime, result: str) -> str:
    """
    Replace the first %Q% with the quarter and the first %H% with the half year.

    Only one occurrence of each placeholder is replaced.

    Examples:
        >>> replace_custom_placeholders(datetime(2015, 4, 19), "Q%Q% / H%H%")
        'Q2 / H1'
    """
    if QUARTER_PLACEHOLDER in result:
        result = result.replace(QUARTER_PLACEHOLDER, str(quarter_of(instant)), 1)
    if HALFYEAR_PLACEHOLDER in result:
        result = result.replace(HALFYEAR_PLACEHOLDER, str(halfyear_of(instant)), 1)
    return result


def get_string_for_utc_time_and_format(
    time,
    template: str,
    locale: Optional[CalendarLocale] = None,
) -> str:
    """
    Render a UTC time with a template and resolve the custom placeholders.

    Args:
        time: epoch milliseconds (int, float or digit string), date or datetime.
            The value 0 is a sentinel for "no time" and renders as "".
            Strings that are not decimal digits raise ValueError.
        template: token template, see reportperiods.calendar.format_instant
        locale: optional explicit locale, defaults to the process locale

    Examples:
        >>> get_string_for_utc_time_and_format(1429457412000, "[%Q%]")
        '2'
        >>> get_string_for_utc_time_and_format(0, "YYYY")
        ''
    """
    if isinstance(time, str):
        try:
            time = int(time, 10)
        except ValueError:
            raise ValueError(f"Expected epoch milliseconds as a digit string, got {time!r}") from None
    if isinstance(time, (int, float)) and time == 0:
        return ""

    instant = to_instant(time)
    return replace_custom_placeholders(instant, format_instant(instant, template, locale))


__all__ = [
    "QUARTER_PLACEHOLDER",
    "HALFYEAR_PLACEHOLDER",
    "get_short_period_format",
    "get_long_period_format",
    "get_period_group_format",
    "get_long_period_display_format",
    "replace_custom_placeholders",
    "get_string_for_utc_time_and_format",
]
