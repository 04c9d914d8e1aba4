"""Units module for period unit tokens and label formats.

Public API:
    is_valid_unit(token) -> bool
        Check a unit token against the grammar, never raises

    get_unit(token) -> Unit
        Wrap a valid token, raises InvalidUnitError otherwise

    get_short_period_format / get_long_period_format /
    get_period_group_format / get_long_period_display_format
        Label templates for a mode or unit token

Examples:
    >>> from reportperiods.units import get_unit, is_valid_unit
    >>> is_valid_unit("w53")
    True
    >>> get_unit("tm").is_total()
    True
    >>> get_unit("m").get_short_string_for_time(0)
    ''
"""

from .unitapi import (
    Unit,
    get_unit,
    is_valid_unit,
)
from .unitgrammar import (
    UnitIdentifier,
    get_max_number_for_unit,
    parse_unit_token,
)
from .unitformat import (
    get_short_period_format,
    get_long_period_format,
    get_period_group_format,
    get_long_period_display_format,
    get_string_for_utc_time_and_format,
    replace_custom_placeholders,
)

__all__ = [
    "Unit",
    "get_unit",
    "is_valid_unit",
    "UnitIdentifier",
    "get_max_number_for_unit",
    "parse_unit_token",
    "get_short_period_format",
    "get_long_period_format",
    "get_period_group_format",
    "get_long_period_display_format",
    "get_string_for_utc_time_and_format",
    "replace_custom_placeholders",
]
