"""Calendar Locale
---------------

Month names used by the calendar engine. Weeks are always ISO-8601 and
are not part of the locale.

The locale is resolved once from settings and then reused for every calendar
operation in the process. Callers that need another language pass an
explicit CalendarLocale instead of reconfiguring the shared one.
"""

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Tuple

from reportperiods.config import get_settings

logger = logging.getLogger(__name__)


MONTH_NAMES = {
    "de": (
        "Januar", "Februar", "März", "April", "Mai", "Juni",
        "Juli", "August", "September", "Oktober", "November", "Dezember",
    ),
    "en": (
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ),
}

MONTH_NAMES_SHORT = {
    "de": (
        "Jan.", "Feb.", "März", "Apr.", "Mai", "Juni",
        "Juli", "Aug.", "Sep.", "Okt.", "Nov.", "Dez.",
    ),
    "en": (
        "Jan", "Feb", "Mar", "Apr", "May", "Jun",
        "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
    ),
}


@dataclass(frozen=True)
class CalendarLocale:
    """
    Label language.

    Attributes:
        language: "de" or "en", selects month names
    """

    language: str = "de"

    @property
    def month_names(self) -> Tuple[str, ...]:
        return MONTH_NAMES[self.language]

    @property
    def month_names_short(self) -> Tuple[str, ...]:
        return MONTH_NAMES_SHORT[self.language]


@lru_cache(maxsize=1)
def get_calendar_locale() -> CalendarLocale:
    """Return the process-wide locale, built from settings on first call."""
    settings = get_settings()
    locale = CalendarLocale(language=settings.language)
    logger.debug(f"Bound calendar locale: {locale}")
    return locale


__all__ = [
    "CalendarLocale",
    "get_calendar_locale",
    "MONTH_NAMES",
    "MONTH_NAMES_SHORT",
]
