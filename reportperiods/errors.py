"""Errors raised by period and unit operations.

All of them are input or programming errors. Nothing in the package catches
them; they surface to the caller unchanged.
"""


class PeriodError(ValueError):
    """Base class for every error raised by reportperiods."""


class InvalidUnitError(PeriodError):
    """The unit token does not match the unit grammar."""

    def __init__(self, token):
        self.token = token
        super().__init__(f'Invalid unit id "{token}" given!')


class FormatNotFoundError(PeriodError):
    """No label template exists for a (mode, family) combination."""

    def __init__(self, mode, family: str):
        self.mode = mode
        self.family = family
        super().__init__(f'No {family} period format found for "{mode}"')


class UnsupportedPeriodModeError(PeriodError):
    """The mode has no native stepping unit for the requested operation."""

    def __init__(self, mode, operation: str):
        self.mode = mode
        self.operation = operation
        super().__init__(f'No {operation} rule found for period "{mode}"')


__all__ = [
    "PeriodError",
    "InvalidUnitError",
    "FormatNotFoundError",
    "UnsupportedPeriodModeError",
]
