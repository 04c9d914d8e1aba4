"""Report Periods - Calendar periods for reporting front ends

Public API for period expansion, step enumeration, unit tokens and labels.

Usage:
    from reportperiods import create_period, get_unit, is_valid_unit
    from reportperiods import get_period_difference, get_relative_period

    # Expand a range to complete months and list every month in it
    period = create_period("m", "2015-02-17", "2015-05-03")
    [entry.key for entry in period.get_value_as_objects()]
    # Returns: ["Feb. '15", "März '15", "Apr. '15", "Mai '15"]

    # Validate and inspect unit tokens
    is_valid_unit("q4")          # True
    get_unit("tq").is_total()    # True

    # Date arithmetic by periods
    get_period_difference("2015-01-05", "2016-01-25", "m")   # 12
    get_relative_period("q", -1, "2015-05-17")               # '2015-02-17'

The label language is read once from the environment, see
reportperiods.config. Weeks are always ISO-8601.
"""

__version__ = "0.1.0"

# ============================================================================
# Modes and Errors
# ============================================================================

from .modes import (
    PeriodMode,   # Closed enum of period modes (d, w, m, q, h, y, t, ytd)
    get_modes,    # Filter the mode enum by member name
)

from .errors import (
    PeriodError,
    InvalidUnitError,
    FormatNotFoundError,
    UnsupportedPeriodModeError,
)

# ============================================================================
# Period API
# ============================================================================

from .period.periodapi import (
    create_period,                # Primary API - expanded Period for a range
    get_iso_week_no_from_time,    # ISO week number of a UTC timestamp
    get_iso_week_year_from_time,  # ISO week-year of a UTC timestamp
    get_quarter_no_from_time,     # Quarter of a UTC timestamp
    get_halfyear_no_from_time,    # Half year of a UTC timestamp
)

from .period.periodidentity import Period

from .period.periodexpand import DateEntry

from .period.periodrelative import (
    get_current_date,       # Today (UTC) as YYYY-MM-DD
    get_period_difference,  # Whole periods between two dates
    get_relative_period,    # Step a date by whole periods
)

# ============================================================================
# Units API
# ============================================================================

from .units.unitapi import (
    Unit,
    get_unit,        # Wrap a valid unit token
    is_valid_unit,   # Validate a unit token
)

__all__ = [
    # Version
    "__version__",

    # ========================================================================
    # PRIMARY APIS - Start here!
    # ========================================================================
    "create_period",    # Expanded Period for a range
    "is_valid_unit",    # Validate a unit token
    "get_unit",         # Wrap a valid unit token

    # ========================================================================
    # Modes and Errors
    # ========================================================================
    "PeriodMode",
    "get_modes",
    "PeriodError",
    "InvalidUnitError",
    "FormatNotFoundError",
    "UnsupportedPeriodModeError",

    # ========================================================================
    # Periods
    # ========================================================================
    "Period",
    "DateEntry",
    "get_iso_week_no_from_time",
    "get_iso_week_year_from_time",
    "get_quarter_no_from_time",
    "get_halfyear_no_from_time",
    "get_current_date",
    "get_period_difference",
    "get_relative_period",

    # ========================================================================
    # Units
    # ========================================================================
    "Unit",
]
