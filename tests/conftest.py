"""Shared test fixtures and utilities for reportperiods tests."""

from datetime import datetime, timezone

import pytest

from reportperiods.calendar.calendarlocale import CalendarLocale, get_calendar_locale
from reportperiods.config import get_settings


ENV_VARS = (
    "REPORTPERIODS_LANGUAGE",
)


def _clear_caches():
    get_settings.cache_clear()
    get_calendar_locale.cache_clear()


@pytest.fixture(autouse=True)
def default_settings(monkeypatch):
    """Run every test against the default settings (German labels, ISO weeks).

    Settings and the bound locale are cached per process, so the caches are
    cleared before and after each test.
    """
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    _clear_caches()
    yield
    _clear_caches()


@pytest.fixture
def english_locale():
    """Explicit English locale."""
    return CalendarLocale(language="en")


@pytest.fixture
def utc():
    """Build a UTC datetime: utc(2015, 4, 19)."""
    def _utc(*args):
        return datetime(*args, tzinfo=timezone.utc)
    return _utc


@pytest.fixture
def sample_times():
    """Epoch milliseconds used throughout the tests."""
    return {
        "march21_2015": 1426951620000,
        "june1_2015": 1433153410000,
        "july23_2015": 1437646200000,
        "december29_2014": 1419847800000,
        "april19_2015": 1429457412000,
    }
