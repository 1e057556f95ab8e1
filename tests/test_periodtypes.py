"""Tests for the period variants.

Covers boundary predicates, half-open containment, calendar-aware navigation,
display labels and the containment helpers.

Run with: pytest tests/test_periodtypes.py -v
"""

import pytest
from datetime import datetime, timedelta, timezone

from dateutil import tz

from eventcalendar import (
    Event,
    InvalidBoundary,
    Period,
    Minute,
    Hour,
    Day,
    Week,
    Month,
    Year,
    SUNDAY,
)


# ============================================================================
# Boundary Predicates
# ============================================================================

class TestBoundaries:
    """Test direct construction and is_valid"""

    def test_day_rejects_time_of_day(self):
        """Test Day built from 10:30 fails with InvalidBoundary"""
        with pytest.raises(InvalidBoundary) as excinfo:
            Day(datetime(2024, 3, 15, 10, 30))
        assert excinfo.value.period_type == "day"
        assert excinfo.value.instant == datetime(2024, 3, 15, 10, 30)

    def test_invalid_boundary_is_value_error(self):
        """Test InvalidBoundary can be caught as ValueError"""
        with pytest.raises(ValueError):
            Month(datetime(2024, 3, 2))

    def test_day_accepts_midnight(self):
        """Test Day built from midnight"""
        day = Day(datetime(2024, 3, 15))
        assert day.begin == datetime(2024, 3, 15)
        assert day.end == datetime(2024, 3, 16)

    def test_is_valid_per_variant(self):
        """Test boundary predicate of each variant"""
        assert Minute.is_valid(datetime(2024, 3, 15, 10, 30))
        assert not Minute.is_valid(datetime(2024, 3, 15, 10, 30, 5))
        assert Hour.is_valid(datetime(2024, 3, 15, 10))
        assert not Hour.is_valid(datetime(2024, 3, 15, 10, 1))
        assert Day.is_valid(datetime(2024, 3, 15))
        assert not Day.is_valid(datetime(2024, 3, 15, 0, 0, 0, 1))
        assert Month.is_valid(datetime(2024, 3, 1))
        assert not Month.is_valid(datetime(2024, 3, 15))
        assert Year.is_valid(datetime(2024, 1, 1))
        assert not Year.is_valid(datetime(2024, 2, 1))

    def test_week_boundary_depends_on_first_weekday(self):
        """Test Week begins on the configured first weekday"""
        monday = datetime(2024, 3, 11)
        sunday = datetime(2024, 3, 10)
        assert Week.is_valid(monday)
        assert not Week.is_valid(sunday)
        assert Week.is_valid(sunday, SUNDAY)

        with pytest.raises(InvalidBoundary):
            Week(sunday)
        assert Week(sunday, SUNDAY).end == datetime(2024, 3, 17)

    def test_base_period_is_abstract(self):
        """Test the base class has no boundary rule"""
        with pytest.raises(NotImplementedError):
            Period(datetime(2024, 1, 1))


# ============================================================================
# Containment
# ============================================================================

class TestContainment:
    """Test half-open containment and inclusion"""

    def test_contains_is_half_open(self):
        """Test begin is contained and end is not"""
        day = Day(datetime(2024, 3, 15))
        assert day.contains(datetime(2024, 3, 15))
        assert day.contains(datetime(2024, 3, 15, 23, 59, 59))
        assert not day.contains(datetime(2024, 3, 16))
        assert not day.contains(datetime(2024, 3, 14, 23, 59))

    def test_includes_strict(self):
        """Test strict inclusion of sub-periods"""
        month = Month(datetime(2024, 3, 1))
        assert month.includes(Day(datetime(2024, 3, 31)))
        assert not month.includes(Day(datetime(2024, 4, 1)))
        # Week of Feb 26 - Mar 3 straddles the month
        assert not month.includes(Week(datetime(2024, 2, 26)))

    def test_includes_non_strict(self):
        """Test non-strict inclusion accepts overlap"""
        month = Month(datetime(2024, 3, 1))
        assert month.includes(Week(datetime(2024, 2, 26)), strict=False)
        assert not month.includes(Week(datetime(2024, 2, 19)), strict=False)

    def test_contains_event(self, sample_events):
        """Test event overlap"""
        day = Day(datetime(2024, 3, 15))
        assert day.contains_event(sample_events["standup"])
        assert day.contains_event(sample_events["offsite"])  # spans the day
        assert not day.contains_event(sample_events["review"])

    def test_contains_point_event(self):
        """Test zero-length events count only when their instant is contained"""
        day = Day(datetime(2024, 3, 15))
        assert day.contains_event(Event("a", datetime(2024, 3, 15)))
        assert not day.contains_event(Event("b", datetime(2024, 3, 16)))

    def test_event_ending_at_begin_is_excluded(self):
        """Test an event ending exactly at the period begin does not overlap"""
        day = Day(datetime(2024, 3, 15))
        event = Event("late", datetime(2024, 3, 14, 22), datetime(2024, 3, 15))
        assert not day.contains_event(event)

    def test_is_current(self):
        """Test is_current against an explicit now"""
        day = Day(datetime(2024, 3, 15))
        assert day.is_current(datetime(2024, 3, 15, 8))
        assert not day.is_current(datetime(2024, 3, 16, 8))


# ============================================================================
# Navigation
# ============================================================================

class TestNavigation:
    """Test next/previous with calendar arithmetic"""

    def test_month_lengths(self):
        """Test month ends vary with the calendar"""
        jan = Month(datetime(2024, 1, 1))
        feb = jan.get_next()
        assert feb.begin == datetime(2024, 2, 1)
        assert feb.end == datetime(2024, 3, 1)
        assert feb.get_days_count() == 29
        assert Month(datetime(2023, 2, 1)).get_days_count() == 28

    def test_year_previous(self):
        """Test previous year"""
        year = Year(datetime(2024, 1, 1))
        assert year.get_previous() == Year(datetime(2023, 1, 1))
        assert year.is_leap()
        assert not year.get_previous().is_leap()

    def test_next_then_previous_round_trip(self):
        """Test get_next().get_previous() is the same period for every variant"""
        periods = [
            Minute(datetime(2024, 12, 31, 23, 59)),
            Hour(datetime(2024, 12, 31, 23)),
            Day(datetime(2024, 2, 29)),
            Week(datetime(2024, 12, 30)),
            Month(datetime(2024, 12, 1)),
            Year(datetime(2024, 1, 1)),
        ]
        for period in periods:
            assert period.get_next().get_previous() == period
            assert period.get_previous().get_next() == period

    def test_next_is_adjacent(self):
        """Test the next period begins where the current one ends"""
        week = Week(datetime(2024, 12, 30))
        assert week.get_next().begin == week.end
        assert week.get_next().begin == datetime(2025, 1, 6)

    def test_day_across_dst_change(self):
        """Test a Day spans 23 hours when clocks go forward"""
        paris = tz.gettz("Europe/Paris")
        day = Day(datetime(2024, 3, 31, tzinfo=paris))
        assert day.end == datetime(2024, 4, 1, tzinfo=paris)
        span = day.end.astimezone(timezone.utc) - day.begin.astimezone(timezone.utc)
        assert span == timedelta(hours=23)

    def test_navigation_preserves_first_weekday(self):
        """Test next week keeps the Sunday start"""
        week = Week(datetime(2024, 3, 10), SUNDAY)
        assert week.get_next().first_weekday == SUNDAY
        assert week.get_next().begin == datetime(2024, 3, 17)


# ============================================================================
# Display and Identity
# ============================================================================

class TestDisplay:
    """Test display labels and formatting"""

    def test_labels(self):
        """Test variant-specific display strings"""
        assert str(Minute(datetime(2024, 3, 15, 10, 30))) == "10:30"
        assert str(Hour(datetime(2024, 3, 15, 10))) == "10:00"
        assert str(Day(datetime(2024, 3, 15))) == "Friday"
        assert str(Week(datetime(2024, 3, 11))) == "Week 11"
        assert str(Month(datetime(2024, 3, 1))) == "March"
        assert str(Year(datetime(2024, 1, 1))) == "2024"

    def test_week_number(self):
        """Test ISO week number of the week's first day"""
        assert Week(datetime(2024, 12, 30)).get_number() == 1
        assert Week(datetime(2024, 3, 11)).get_number() == 11

    def test_format(self):
        """Test strftime formatting of the begin instant"""
        assert Day(datetime(2024, 3, 15)).format("%Y/%m/%d") == "2024/03/15"

    def test_repr(self):
        """Test repr shows variant and begin"""
        assert repr(Day(datetime(2024, 3, 15))) == "Day(2024-03-15T00:00:00)"


class TestIdentity:
    """Test equality and hashing"""

    def test_equal_periods(self):
        """Test periods with the same variant and bounds are equal"""
        assert Day(datetime(2024, 3, 15)) == Day(datetime(2024, 3, 15))
        assert len({Day(datetime(2024, 3, 15)), Day(datetime(2024, 3, 15))}) == 1

    def test_different_variants_not_equal(self):
        """Test Day and Month beginning on the same instant differ"""
        assert Day(datetime(2024, 3, 1)) != Month(datetime(2024, 3, 1))

    def test_accessors(self):
        """Test get_begin/get_end mirror the attributes"""
        hour = Hour(datetime(2024, 3, 15, 10))
        assert hour.get_begin() == hour.begin
        assert hour.get_end() == datetime(2024, 3, 15, 11)
