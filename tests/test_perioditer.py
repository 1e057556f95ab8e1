"""Tests for the period iteration protocol.

Run with: pytest tests/test_perioditer.py -v
"""

import pytest
from datetime import datetime

from eventcalendar import PeriodCursor, PeriodFactory, Minute, Hour, Day, Week, Month, Year, SUNDAY
from eventcalendar.period.perioditer import NOT_STARTED, POSITIONED, EXHAUSTED


# ============================================================================
# Children per Granularity
# ============================================================================

class TestChildren:
    """Test the children each granularity yields"""

    def test_year_yields_twelve_months(self):
        """Test a Year yields 12 Months starting on the 1st, spanning the year"""
        year = Year(datetime(2024, 1, 1))
        months = list(year)
        assert len(months) == 12
        assert all(isinstance(month, Month) for month in months)
        assert [month.begin for month in months] == [datetime(2024, m, 1) for m in range(1, 13)]

        # Contiguous and covering exactly the year
        assert months[0].begin == year.begin
        assert months[-1].end == year.end
        for current, following in zip(months, months[1:]):
            assert current.end == following.begin

    def test_day_yields_24_hours(self):
        """Test a Day yields 24 Hours keyed 0..23"""
        day = Day(datetime(2024, 3, 15))
        pairs = list(day.children().items())
        assert [key for key, _ in pairs] == list(range(24))
        assert all(isinstance(hour, Hour) for _, hour in pairs)
        assert pairs[-1][1].end == day.end

    def test_leap_february(self):
        """Test February 2024 yields 29 days, February 2023 yields 28"""
        assert len(list(Month(datetime(2024, 2, 1)))) == 29
        assert len(list(Month(datetime(2023, 2, 1)))) == 28

    def test_month_keys_are_days_of_month(self):
        """Test Month -> Day keys"""
        keys = [key for key, _ in Month(datetime(2024, 4, 1)).children().items()]
        assert keys == list(range(1, 31))

    def test_week_keys_are_iso_weekdays(self):
        """Test Week -> Day keys with Monday and Sunday starts"""
        monday_week = Week(datetime(2024, 3, 11))
        assert [key for key, _ in monday_week.children().items()] == [1, 2, 3, 4, 5, 6, 7]

        sunday_week = Week(datetime(2024, 3, 10), SUNDAY)
        days = list(sunday_week)
        assert [key for key, _ in sunday_week.children().items()] == [7, 1, 2, 3, 4, 5, 6]
        assert days[0].begin == datetime(2024, 3, 10)
        assert days[-1].begin == datetime(2024, 3, 16)

    def test_week_across_month_end(self):
        """Test a week straddling two months still yields 7 days"""
        days = list(Week(datetime(2024, 2, 26)))
        assert len(days) == 7
        assert days[-1].begin == datetime(2024, 3, 3)

    def test_hour_yields_minutes(self):
        """Test Hour -> Minute"""
        pairs = list(Hour(datetime(2024, 3, 15, 10)).children().items())
        assert len(pairs) == 60
        assert pairs[0][0] == 0 and pairs[-1][0] == 59
        assert isinstance(pairs[0][1], Minute)

    def test_minute_has_no_children(self):
        """Test the finest granularity yields an empty sequence"""
        minute = Minute(datetime(2024, 3, 15, 10, 30))
        assert list(minute) == []
        cursor = minute.children()
        cursor.rewind()
        assert cursor.state == EXHAUSTED
        assert not cursor.valid()
        assert cursor.key is None


# ============================================================================
# Cursor State Machine
# ============================================================================

class TestCursorStates:
    """Test NOT_STARTED -> POSITIONED -> EXHAUSTED"""

    def test_new_cursor_not_started(self):
        """Test a new cursor has no current child"""
        cursor = PeriodCursor(Day(datetime(2024, 3, 15)))
        assert cursor.state == NOT_STARTED
        assert cursor.current is None
        assert not cursor.valid()

    def test_advance_through_to_exhausted(self):
        """Test advancing past the last child exhausts the cursor"""
        cursor = PeriodCursor(Day(datetime(2024, 3, 15)))
        cursor.advance()
        assert cursor.state == POSITIONED
        assert cursor.key == 0
        for _ in range(23):
            cursor.advance()
        assert cursor.key == 23
        cursor.advance()
        assert cursor.state == EXHAUSTED
        assert cursor.current is None

        # Exhausted is terminal until rewind
        cursor.advance()
        assert cursor.state == EXHAUSTED

    def test_rewind_positions_on_first_child(self):
        """Test rewind restarts and positions on child_0 immediately"""
        cursor = PeriodCursor(Year(datetime(2024, 1, 1)))
        for _ in range(5):
            cursor.advance()
        cursor.rewind()
        assert cursor.valid()
        assert cursor.key == 1
        assert cursor.current == Month(datetime(2024, 1, 1))

    def test_python_iteration_restarts(self):
        """Test iter() on a cursor starts from the first child every time"""
        cursor = PeriodCursor(Week(datetime(2024, 3, 11)))
        first = list(cursor)
        second = list(cursor)
        assert first == second
        assert len(first) == 7

    def test_independent_traversals(self):
        """Test two cursors over equal periods do not share state"""
        first = PeriodCursor(Day(datetime(2024, 3, 15)))
        second = PeriodCursor(Day(datetime(2024, 3, 15)))
        first.rewind()
        first.advance()
        second.rewind()
        assert first.key == 1
        assert second.key == 0

    def test_iterating_period_twice(self):
        """Test a period yields the same children on each iteration"""
        month = Month(datetime(2024, 3, 1))
        assert list(month) == list(month)

    def test_explicit_factory(self):
        """Test children are built with the factory handed to the cursor"""
        month = Month(datetime(2024, 3, 1))
        days = list(month.children(PeriodFactory(first_weekday=SUNDAY)))
        assert all(day.first_weekday == SUNDAY for day in days)
        assert month.first_weekday != SUNDAY

    def test_repr(self):
        """Test cursor repr shows parent and state"""
        cursor = PeriodCursor(Day(datetime(2024, 3, 15)))
        assert "not_started" in repr(cursor)


@pytest.mark.parametrize(
    "period, expected",
    [
        (Year(datetime(2023, 1, 1)), 12),
        (Month(datetime(2024, 1, 1)), 31),
        (Month(datetime(2024, 11, 1)), 30),
        (Week(datetime(2024, 3, 11)), 7),
        (Day(datetime(2024, 3, 15)), 24),
        (Hour(datetime(2024, 3, 15, 10)), 60),
    ],
)
def test_child_counts(period, expected):
    """Test number of children per period"""
    assert len(list(period)) == expected
