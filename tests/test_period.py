"""Comprehensive tests for the period module.

These tests verify boundary expansion, step enumeration and Period caching:
- Minimum/maximum snapping per mode, including leap years and quarter ends
- Sequence length, grouping flags and labels
- Equality, checksum and dirty tracking

Run with: pytest tests/test_period.py -v
"""

from datetime import datetime, timezone

import pytest

from reportperiods import (
    DateEntry,
    InvalidUnitError,
    Period,
    PeriodMode,
    UnsupportedPeriodModeError,
    create_period,
    get_halfyear_no_from_time,
    get_iso_week_no_from_time,
    get_iso_week_year_from_time,
    get_quarter_no_from_time,
)
from reportperiods.calendar import CalendarLocale, from_date_parts
from reportperiods.period import (
    create_date_entry,
    expand_range_to_complete_periods,
    generate_sequence,
    get_range_step_unit,
    is_new_period_group,
    set_period_on_instant,
    set_period_to_maximum,
    set_period_to_minimum,
)


def utc(*args):
    return datetime(*args, tzinfo=timezone.utc)


def count_days(entries, day):
    return sum(1 for entry in entries if entry.value.day == day)


def count_months(entries, month):
    return sum(1 for entry in entries if entry.value.month == month)


# ============================================================================
# Boundary Expansion
# ============================================================================

class TestSetPeriodMinimum:
    """Test snapping to the first day of a period"""

    def test_weeks_preceding_monday(self):
        """A Sunday snaps back to the Monday of its ISO week"""
        result = set_period_to_minimum(utc(2015, 2, 15), "w")  # Sunday
        assert result == utc(2015, 2, 9)
        assert result.weekday() == 0

    def test_months_first_day(self):
        """Months start on day 1"""
        assert set_period_to_minimum(utc(2015, 2, 17), "m") == utc(2015, 2, 1)

    def test_quarters_first_quarter(self):
        """February belongs to the quarter starting 1 Jan"""
        assert set_period_to_minimum(utc(2015, 2, 17), "q") == utc(2015, 1, 1)

    def test_quarters_second_quarter(self):
        """May belongs to the quarter starting 1 Apr"""
        assert set_period_to_minimum(utc(2015, 5, 17), "q") == utc(2015, 4, 1)

    def test_years_january_first(self):
        """Years start on 1 Jan"""
        assert set_period_to_minimum(utc(2015, 5, 17), "y") == utc(2015, 1, 1)

    @pytest.mark.parametrize("mode", ["d", "h", "t", "ytd"])
    def test_no_op_modes(self, mode):
        """Other modes leave the instant unchanged"""
        assert set_period_to_minimum(utc(2015, 5, 17), mode) == utc(2015, 5, 17)

    def test_input_not_mutated(self):
        """The given instant is left untouched"""
        instant = utc(2015, 5, 17)
        set_period_to_minimum(instant, "y")
        assert instant == utc(2015, 5, 17)


class TestSetPeriodMaximum:
    """Test snapping to the last day of a period"""

    def test_weeks_following_sunday(self):
        """A weekday snaps forward to the Sunday of its ISO week"""
        result = set_period_to_maximum(utc(2015, 2, 17), "w")
        assert result == utc(2015, 2, 22)
        assert result.weekday() == 6

    @pytest.mark.parametrize("start,end", [
        (utc(2015, 1, 17), utc(2015, 1, 31)),
        (utc(2015, 2, 17), utc(2015, 2, 28)),
        (utc(2016, 2, 17), utc(2016, 2, 29)),
        (utc(2015, 4, 17), utc(2015, 4, 30)),
    ])
    def test_months_last_day(self, start, end):
        """Months end on their last day, leap years included"""
        assert set_period_to_maximum(start, "m") == end

    @pytest.mark.parametrize("start,end", [
        (utc(2015, 2, 17), utc(2015, 3, 31)),
        (utc(2015, 5, 17), utc(2015, 6, 30)),
        (utc(2015, 8, 17), utc(2015, 9, 30)),
        (utc(2015, 11, 17), utc(2015, 12, 31)),
    ])
    def test_quarters_last_day(self, start, end):
        """Quarters end on the last day of their third month"""
        assert set_period_to_maximum(start, "q") == end

    def test_quarter_end_from_day_31(self):
        """Day 31 in a quarter whose last month has 30 days does not roll over"""
        assert set_period_to_maximum(utc(2015, 5, 31), "q") == utc(2015, 6, 30)
        assert set_period_to_maximum(utc(2015, 7, 31), "q") == utc(2015, 9, 30)

    def test_years_december_31st(self):
        """Years end on 31 Dec"""
        assert set_period_to_maximum(utc(2015, 5, 17), "y") == utc(2015, 12, 31)

    @pytest.mark.parametrize("mode", ["d", "h", "t", "ytd"])
    def test_no_op_modes(self, mode):
        """Other modes leave the instant unchanged"""
        assert set_period_to_maximum(utc(2015, 5, 17), mode) == utc(2015, 5, 17)


class TestExpandRange:
    """Test expansion of a start/end pair"""

    def test_one_day_to_week(self):
        """A single day expands to its whole week"""
        start, end = expand_range_to_complete_periods(utc(2015, 5, 18), utc(2015, 5, 18), "w")
        assert start == utc(2015, 5, 18)
        assert end == utc(2015, 5, 24)

    def test_one_day_to_month(self):
        """A single day expands to its whole month"""
        start, end = expand_range_to_complete_periods(utc(2015, 5, 18), utc(2015, 5, 18), "m")
        assert start == utc(2015, 5, 1)
        assert end == utc(2015, 5, 31)

    def test_one_day_to_quarter(self):
        """A single day expands to its whole quarter"""
        start, end = expand_range_to_complete_periods(utc(2015, 5, 18), utc(2015, 5, 18), "q")
        assert start == utc(2015, 4, 1)
        assert end == utc(2015, 6, 30)

    @pytest.mark.parametrize("mode", ["d", "w", "m", "q", "h", "y", "t", "ytd"])
    def test_idempotent(self, mode):
        """Expanding twice gives the same pair"""
        once = expand_range_to_complete_periods(utc(2015, 2, 17), utc(2015, 11, 5), mode)
        twice = expand_range_to_complete_periods(*once, mode)
        assert once == twice


# ============================================================================
# Steps and Groups
# ============================================================================

class TestIsNewPeriodGroup:
    """Test drill-down group boundaries"""

    def test_days(self):
        """Days group by month"""
        assert is_new_period_group("d", utc(2015, 1, 1)) is True
        assert is_new_period_group("d", utc(2015, 1, 2)) is False

    def test_weeks(self):
        """Weeks group by the month their step falls in"""
        assert is_new_period_group("w", utc(2015, 6, 1)) is True
        assert is_new_period_group("w", utc(2015, 5, 31)) is False

    def test_months_and_quarters(self):
        """Months and quarters group by year"""
        assert is_new_period_group("m", utc(2015, 1, 1)) is True
        assert is_new_period_group("m", utc(2015, 12, 31)) is False
        assert is_new_period_group("q", utc(2015, 1, 1)) is True
        assert is_new_period_group("q", utc(2015, 4, 1)) is False

    def test_years(self):
        """Every year opens a group"""
        assert is_new_period_group("y", utc(2015, 7, 1)) is True

    @pytest.mark.parametrize("mode", ["h", "t", "ytd"])
    def test_unsupported(self, mode):
        """Halfyears, Total and Ytd have no grouping rule"""
        with pytest.raises(UnsupportedPeriodModeError):
            is_new_period_group(mode, utc(2015, 1, 1))


class TestRangeStepUnit:
    """Test the stepping unit lookup"""

    def test_supported(self):
        """Each steppable mode maps to its calendar unit"""
        assert get_range_step_unit("d") == "days"
        assert get_range_step_unit("w") == "weeks"
        assert get_range_step_unit("m") == "months"
        assert get_range_step_unit("q") == "quarters"
        assert get_range_step_unit(PeriodMode.YEARS) == "years"

    @pytest.mark.parametrize("mode", ["h", "t", "ytd"])
    def test_unsupported(self, mode):
        """The error carries the rejected mode"""
        with pytest.raises(UnsupportedPeriodModeError) as excinfo:
            get_range_step_unit(mode)
        assert excinfo.value.mode == mode


class TestSetPeriodOnInstant:
    """Test setting one period field"""

    def test_days(self):
        """Days set the day of month"""
        assert set_period_on_instant("d", utc(2015, 1, 1), 5) == utc(2015, 1, 5)

    def test_months_zero_based(self):
        """Months are 0-based"""
        assert set_period_on_instant("m", utc(2015, 1, 1), 11) == utc(2015, 12, 1)

    def test_years(self):
        """Years set the year"""
        assert set_period_on_instant("y", utc(2015, 1, 1), 11).year == 11

    def test_quarters(self):
        """Quarters keep the position inside the quarter"""
        result = set_period_on_instant("q", utc(2015, 1, 1), 3)
        assert result == utc(2015, 7, 1)

    def test_weeks(self):
        """Weeks set the ISO week"""
        assert set_period_on_instant("w", utc(2015, 1, 1), 2) == utc(2015, 1, 8)

    def test_unsupported(self):
        """Total has no settable field"""
        with pytest.raises(UnsupportedPeriodModeError):
            set_period_on_instant("t", utc(2015, 1, 1), 1)


class TestCreateDateEntry:
    """Test building a single DateEntry"""

    def test_entry_for_instant(self):
        """Entry is labelled with the short format"""
        entry = create_date_entry("m", utc(2015, 1, 1))
        assert entry == DateEntry(key="Jan. '15", value=utc(2015, 1, 1), is_new_group=True)

    def test_entry_with_new_value(self):
        """Field is set first and the input is left untouched"""
        instant = utc(2015, 1, 1)
        entry = create_date_entry("q", instant, 3)
        assert entry.value == utc(2015, 7, 1)
        assert entry.key == "Q.3 '15"
        assert instant == utc(2015, 1, 1)


class TestGenerateSequence:
    """Test step enumeration between two instants"""

    def test_quarters(self):
        """Only the first quarter of a year opens a group"""
        entries = generate_sequence(utc(2015, 1, 1), utc(2015, 12, 31), "q")
        assert [entry.key for entry in entries] == ["Q.1 '15", "Q.2 '15", "Q.3 '15", "Q.4 '15"]
        assert [entry.is_new_group for entry in entries] == [True, False, False, False]

    def test_weeks_labels(self):
        """Week steps carry the ISO week-year"""
        entries = generate_sequence(utc(2014, 12, 29), utc(2015, 1, 11), "w")
        assert [entry.key for entry in entries] == ["KW 1 '15", "KW 2 '15"]

    def test_years_always_new_group(self):
        """Every year step opens a group"""
        entries = generate_sequence(utc(2014, 1, 1), utc(2016, 12, 31), "y")
        assert [entry.key for entry in entries] == ["2014", "2015", "2016"]
        assert all(entry.is_new_group for entry in entries)

    def test_entries_are_ascending(self):
        """Steps run from start to end inclusive"""
        entries = generate_sequence(utc(2015, 1, 1), utc(2015, 3, 31), "d")
        values = [entry.value for entry in entries]
        assert values == sorted(values)
        assert values[0] == utc(2015, 1, 1)
        assert values[-1] == utc(2015, 3, 31)

    @pytest.mark.parametrize("mode", ["h", "t", "ytd"])
    def test_unsupported(self, mode):
        """Halfyears, Total and Ytd cannot be stepped"""
        with pytest.raises(UnsupportedPeriodModeError):
            generate_sequence(utc(2015, 1, 1), utc(2015, 12, 31), mode)


# ============================================================================
# Period
# ============================================================================

@pytest.fixture
def year_bounds():
    """Feb 1st 2015 and, via month overflow, Jan 31st 2016"""
    return from_date_parts(2015, 1, 1), from_date_parts(2015, 12, 31)


class TestPeriod:
    """Test Period construction, steps and caching"""

    def test_create_period(self, year_bounds):
        """create_period returns a Period with expanded anchors"""
        period = create_period(PeriodMode.DAYS, *year_bounds)
        assert isinstance(period, Period)
        assert period.start.day == 1
        assert period.end.day == 31

    def test_days_count(self, year_bounds):
        """A year of days has 365 steps"""
        days = create_period("d", *year_bounds).get_value_as_objects()
        assert len(days) == 365

    def test_days_content(self, year_bounds):
        """Day steps are consecutive days"""
        days = create_period("d", *year_bounds).get_value_as_objects()
        assert count_days(days, 1) == 12
        assert count_days(days, 31) == 7
        assert sum(1 for entry in days if entry.is_new_group) == 12

    def test_months_count(self, year_bounds):
        """A year of months has 12 steps"""
        months = create_period("m", *year_bounds).get_value_as_objects()
        assert len(months) == 12

    def test_months_content(self, year_bounds):
        """Month steps start on day 1"""
        months = create_period("m", *year_bounds).get_value_as_objects()
        for month in range(1, 13):
            assert count_months(months, month) == 1

    def test_constructor_expands(self):
        """Construction snaps start and end"""
        period = create_period("q", "2015-05-17", "2015-05-17")
        assert period.start == utc(2015, 4, 1)
        assert period.end == utc(2015, 6, 30)

    def test_months_expand_non_leap(self):
        """February end is the 28th in a common year"""
        period = create_period("m", "2015-02-17", "2015-02-17")
        assert period.start == utc(2015, 2, 1)
        assert period.end == utc(2015, 2, 28)

    def test_accepts_epoch_ms(self, sample_times):
        """Epoch milliseconds are accepted"""
        period = create_period("y", sample_times["april19_2015"], sample_times["april19_2015"])
        assert period.start == utc(2015, 1, 1, 15, 30, 12)

    def test_invalid_mode(self):
        """Counted tokens are not period modes"""
        with pytest.raises(InvalidUnitError):
            create_period("d3", "2015-01-01", "2015-01-31")

    def test_start_after_end(self):
        """Reversed anchors are rejected"""
        with pytest.raises(ValueError):
            create_period("d", "2015-02-01", "2015-01-01")

    def test_halfyear_period_has_no_steps(self):
        """Half-year periods cannot be stepped"""
        period = create_period("h", "2015-01-01", "2015-06-30")
        assert period.start == utc(2015, 1, 1)
        with pytest.raises(UnsupportedPeriodModeError):
            period.get_value_as_objects()

    def test_values_are_cached(self, year_bounds):
        """Repeated reads return the cached list"""
        period = create_period("d", *year_bounds)
        assert period.get_value_as_objects() is period.get_value_as_objects()


class TestPeriodEquality:
    """Test is_equal"""

    def test_same_inputs(self, year_bounds):
        """Periods built from the same inputs are equal"""
        assert create_period("d", *year_bounds).is_equal(create_period("d", *year_bounds))

    def test_different_start(self, year_bounds):
        """A different start breaks equality"""
        _, end = year_bounds
        other = create_period("d", from_date_parts(2000, 1, 1), end)
        assert not create_period("d", *year_bounds).is_equal(other)

    def test_different_end(self, year_bounds):
        """A different end breaks equality"""
        start, _ = year_bounds
        other = create_period("d", start, from_date_parts(2016, 1, 1))
        assert not create_period("d", *year_bounds).is_equal(other)

    def test_different_mode(self, year_bounds):
        """A different mode breaks equality"""
        assert not create_period("d", *year_bounds).is_equal(create_period("m", *year_bounds))


class TestPeriodDirtyTracking:
    """Test checksum based cache invalidation"""

    def test_checksum_format(self):
        """Checksum is mode and epoch seconds"""
        period = create_period("d", "2015-01-01", "2015-01-02")
        assert period.checksum == "d/1420070400/1420156800"
        assert period.get_checksum() == period.checksum

    def test_fresh_period_is_clean(self, year_bounds):
        """A new period is not dirty"""
        assert create_period("d", *year_bounds).is_dirty() is False

    def test_reassigning_start_makes_dirty(self, year_bounds):
        """Reassigning start makes the period dirty"""
        _, end = year_bounds
        period = create_period("d", *year_bounds)
        period.start = end
        assert period.is_dirty() is True

    def test_values_update_after_reassignment(self, year_bounds):
        """The next read rebuilds the steps"""
        _, end = year_bounds
        period = create_period("d", *year_bounds)
        before = period.get_value_as_objects()

        period.start = end
        after = period.get_value_as_objects()

        assert len(before) == 365
        assert len(after) == 1
        assert period.is_dirty() is False

    def test_reassigned_values_are_coerced(self):
        """Reassigned values are coerced to instants"""
        period = create_period("d", "2015-01-01", "2015-01-31")
        period.end = "2015-01-10"
        assert period.end == utc(2015, 1, 10)
        assert len(period.get_value_as_objects()) == 10


class TestPeriodLabels:
    """Test label accessors"""

    def test_quarter_label(self):
        """Quarter placeholders are filled in labels"""
        period = create_period("q", "2015-02-17", "2015-11-03")
        assert period.get_long_string_for_start() == "Q1 2015"
        assert period.get_long_string_for_end() == "Q4 2015"
        assert period.get_long_period_label() == "Q1 2015 - Q4 2015"

    def test_month_label(self):
        """Long labels use month names"""
        period = create_period("m", "2015-03-17", "2015-05-03")
        assert period.get_long_period_label() == "März 2015 - Mai 2015"

    def test_week_label(self):
        """A range over two weeks names both"""
        period = create_period("w", "2015-02-15", "2015-02-17")
        assert period.get_long_period_label() == "KW 7 2015 - KW 8 2015"

    def test_week_labels_match_boundaries(self):
        """Week boundaries, steps and labels agree on the ISO week"""
        period = create_period("w", "2015-02-15", "2015-02-21", locale=CalendarLocale(language="en"))
        assert period.start == utc(2015, 2, 9)
        assert period.end == utc(2015, 2, 22)
        assert [entry.key for entry in period.get_value_as_objects()] == ["KW 7 '15", "KW 8 '15"]
        week = create_period("w", "2015-02-09", "2015-02-15", locale=CalendarLocale(language="en"))
        assert [entry.key for entry in week.get_value_as_objects()] == ["KW 7 '15"]
        assert week.get_long_period_label() == "KW 7 2015 - KW 7 2015"

    def test_format_getters(self):
        """Format getters return the raw templates"""
        period = create_period("q", "2015-02-17", "2015-11-03")
        assert period.get_long_string_format() == "[Q%Q%] YYYY"
        assert period.get_short_string_format() == "[Q.%Q%] 'YY"
        assert period.get_group_string_format() == "[Quartal] Q YYYY"

    def test_total_label_is_empty(self):
        """Totals have empty labels on both sides"""
        period = create_period("t", "2015-02-17", "2015-11-03")
        assert period.get_long_period_label() == " - "


# ============================================================================
# Time helpers
# ============================================================================

class TestTimeHelpers:
    """Test calendar numbers read from UTC timestamps"""

    def test_halfyear_no(self, sample_times):
        """Half year from epoch milliseconds"""
        assert get_halfyear_no_from_time(sample_times["march21_2015"]) == 1
        assert get_halfyear_no_from_time(sample_times["june1_2015"]) == 1
        assert get_halfyear_no_from_time(sample_times["july23_2015"]) == 2

    def test_quarter_no(self, sample_times):
        """Quarter from epoch milliseconds"""
        assert get_quarter_no_from_time(sample_times["march21_2015"]) == 1
        assert get_quarter_no_from_time(sample_times["june1_2015"]) == 2
        assert get_quarter_no_from_time(sample_times["july23_2015"]) == 3

    def test_iso_week_year(self, sample_times):
        """ISO week-year, full and two-digit"""
        assert get_iso_week_year_from_time(sample_times["march21_2015"]) == 2015
        assert get_iso_week_year_from_time(sample_times["december29_2014"]) == 2015
        assert get_iso_week_year_from_time(sample_times["december29_2014"], short=True) == 15

    def test_iso_week_no(self, sample_times):
        """ISO week number"""
        assert get_iso_week_no_from_time(sample_times["march21_2015"]) == 12
        assert get_iso_week_no_from_time(sample_times["december29_2014"]) == 1
