"""Period Types
------------

Calendar periods as half-open ``[begin, end)`` spans of a fixed granularity.

Variants (coarse to fine):
  - Year:   begins on Jan 1 at 00:00:00, spans 365/366 days
  - Month:  begins on day 1 at 00:00:00, spans 28-31 days
  - Week:   begins on the configured first weekday at 00:00:00, spans 7 days
  - Day:    begins at 00:00:00, spans one calendar day
  - Hour:   begins at HH:00:00
  - Minute: begins at HH:MM:00 (finest granularity, has no children)

Key Design Principles:
  1. Periods are immutable; a period only carries configuration (the first
     weekday), never a back-reference to the factory that built it
  2. Building a period from a non-boundary instant raises InvalidBoundary;
     PeriodFactory is the place that normalizes instants
  3. Navigation uses calendar arithmetic (dateutil relativedelta), never
     fixed-duration timedeltas, so month lengths, leap years and wall-clock
     DST shifts come out right
  4. Iterating a period returns a fresh PeriodCursor each time

Examples:
    >>> from datetime import datetime
    >>> day = Day(datetime(2024, 3, 15))
    >>> day.end
    datetime.datetime(2024, 3, 16, 0, 0)
    >>> str(day)
    'Friday'
    >>> [hour.begin.hour for hour in day][:3]
    [0, 1, 2]
"""

from __future__ import annotations
import calendar
from datetime import datetime
from typing import Optional

try:
    from dateutil.relativedelta import relativedelta
except ImportError as e:
    raise ImportError("python-dateutil not installed. pip install python-dateutil") from e

try:
    from isoweek import Week as IsoWeek
except ImportError as e:
    raise ImportError("isoweek not installed. pip install isoweek") from e

from eventcalendar.period.periodexceptions import InvalidBoundary


# Weekday numbering follows datetime.weekday(): Monday = 0 ... Sunday = 6
MONDAY = calendar.MONDAY
TUESDAY = calendar.TUESDAY
WEDNESDAY = calendar.WEDNESDAY
THURSDAY = calendar.THURSDAY
FRIDAY = calendar.FRIDAY
SATURDAY = calendar.SATURDAY
SUNDAY = calendar.SUNDAY

WEEKDAY_NAMES = {
    "monday": MONDAY,
    "tuesday": TUESDAY,
    "wednesday": WEDNESDAY,
    "thursday": THURSDAY,
    "friday": FRIDAY,
    "saturday": SATURDAY,
    "sunday": SUNDAY,
}


def _is_midnight(dt: datetime) -> bool:
    return dt.hour == 0 and dt.minute == 0 and dt.second == 0 and dt.microsecond == 0


def align_instant(instant: datetime, reference: datetime) -> datetime:
    """Give ``instant`` the same awareness as ``reference``.

    A naive instant compared with an aware reference is read as wall-clock
    time in the reference's zone. An aware instant compared with a naive
    reference keeps its wall-clock time and drops the zone.

    Examples:
        >>> from dateutil import tz
        >>> paris = datetime(2024, 3, 15, tzinfo=tz.gettz("Europe/Paris"))
        >>> align_instant(datetime(2024, 3, 15, 10), paris).tzinfo is paris.tzinfo
        True
    """
    if instant.tzinfo is None and reference.tzinfo is not None:
        return instant.replace(tzinfo=reference.tzinfo)
    if instant.tzinfo is not None and reference.tzinfo is None:
        return instant.replace(tzinfo=None)
    return instant


# ---- Base Period ----

class Period:
    """A contiguous ``[begin, end)`` span of one granularity.

    Subclasses define the boundary predicate (``is_valid``), the canonical
    span (``get_date_interval``), the display label (``__str__``) and, for
    everything but the finest granularity, the key reported for each child
    during iteration (``child_key``).

    Args:
        begin: First instant of the period; must satisfy ``is_valid``
        first_weekday: Weekday a week starts on (MONDAY..SUNDAY)

    Raises:
        InvalidBoundary: If ``begin`` is not a boundary instant
    """

    granularity: str = "period"
    child_granularity: Optional[str] = None

    def __init__(self, begin: datetime, first_weekday: int = MONDAY):
        if not self.is_valid(begin, first_weekday):
            raise InvalidBoundary(begin, self.granularity)
        self._begin = begin
        self._end = begin + self.get_date_interval()
        self._first_weekday = first_weekday

    # ---- Variant rules ----

    @classmethod
    def is_valid(cls, start: datetime, first_weekday: int = MONDAY) -> bool:
        """Return True if ``start`` can be the begin of this period type."""
        raise NotImplementedError

    @classmethod
    def get_date_interval(cls) -> relativedelta:
        """Return the calendar interval one period of this type spans."""
        raise NotImplementedError

    def child_key(self, child: "Period"):
        """Return the iteration key for one of this period's children."""
        return None

    # ---- Accessors ----

    @property
    def begin(self) -> datetime:
        return self._begin

    @property
    def end(self) -> datetime:
        return self._end

    @property
    def first_weekday(self) -> int:
        return self._first_weekday

    def get_begin(self) -> datetime:
        return self._begin

    def get_end(self) -> datetime:
        return self._end

    # ---- Containment ----

    def _align(self, instant: datetime) -> datetime:
        return align_instant(instant, self._begin)

    def contains(self, instant: datetime) -> bool:
        """Return True iff ``begin <= instant < end``.

        Naive instants are compared as wall-clock time in this period's zone.
        """
        return self._begin <= self._align(instant) < self._end

    def includes(self, other: "Period", strict: bool = True) -> bool:
        """Check whether another period lies inside this one.

        Args:
            other: Period to test
            strict: If True, ``other`` must fit entirely inside this period.
                    If False, any overlap is enough.
        """
        begin, end = self._align(other.begin), self._align(other.end)
        if strict:
            return self._begin <= begin and end <= self._end
        return self._begin < end and begin < self._end

    def contains_event(self, event) -> bool:
        """Check whether an event happens (at least partly) during this period.

        Zero-length events count when their instant is contained.
        """
        if event.begin == event.end:
            return self.contains(event.begin)
        return self._align(event.begin) < self._end and self._align(event.end) > self._begin

    def is_current(self, now: Optional[datetime] = None) -> bool:
        """Return True if ``now`` (default: current time) falls in this period."""
        if now is None:
            now = datetime.now(self._begin.tzinfo)
        return self.contains(now)

    # ---- Navigation ----

    def get_next(self) -> "Period":
        return type(self)(self._begin + self.get_date_interval(), self._first_weekday)

    def get_previous(self) -> "Period":
        return type(self)(self._begin - self.get_date_interval(), self._first_weekday)

    # ---- Iteration ----

    def children(self, factory=None):
        """Return a new cursor over this period's immediate sub-periods.

        Args:
            factory: PeriodFactory used to build children. Defaults to a
                     factory configured with this period's first weekday.
        """
        from eventcalendar.period.perioditer import PeriodCursor

        return PeriodCursor(self, factory)

    def __iter__(self):
        return iter(self.children())

    # ---- Formatting ----

    def format(self, pattern: str) -> str:
        """Format the begin instant with a strftime pattern."""
        return self._begin.strftime(pattern)

    def __str__(self) -> str:
        return self._begin.isoformat()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._begin.isoformat()})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Period):
            return NotImplemented
        return type(self) is type(other) and self._begin == other.begin and self._end == other.end

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._begin, self._end))


# ---- Variants ----

class Minute(Period):
    """A single minute. Finest granularity: iterating it yields nothing."""

    granularity = "minute"

    @classmethod
    def is_valid(cls, start: datetime, first_weekday: int = MONDAY) -> bool:
        return start.second == 0 and start.microsecond == 0

    @classmethod
    def get_date_interval(cls) -> relativedelta:
        return relativedelta(minutes=1)

    def __str__(self) -> str:
        return self.format("%H:%M")


class Hour(Period):
    """An hour of a day. Children are Minutes keyed by minute (0-59)."""

    granularity = "hour"
    child_granularity = "minute"

    @classmethod
    def is_valid(cls, start: datetime, first_weekday: int = MONDAY) -> bool:
        return start.minute == 0 and start.second == 0 and start.microsecond == 0

    @classmethod
    def get_date_interval(cls) -> relativedelta:
        return relativedelta(hours=1)

    def child_key(self, child: Period) -> int:
        return child.begin.minute

    def __str__(self) -> str:
        return self.format("%H:%M")


class Day(Period):
    """A calendar day. Children are Hours keyed by hour of day (0-23)."""

    granularity = "day"
    child_granularity = "hour"

    @classmethod
    def is_valid(cls, start: datetime, first_weekday: int = MONDAY) -> bool:
        return _is_midnight(start)

    @classmethod
    def get_date_interval(cls) -> relativedelta:
        return relativedelta(days=1)

    def child_key(self, child: Period) -> int:
        return child.begin.hour

    def __str__(self) -> str:
        return self.format("%A")


class Week(Period):
    """Seven days starting on the configured first weekday.

    Children are Days keyed by ISO weekday (1 = Monday ... 7 = Sunday).
    """

    granularity = "week"
    child_granularity = "day"

    @classmethod
    def is_valid(cls, start: datetime, first_weekday: int = MONDAY) -> bool:
        return _is_midnight(start) and start.weekday() == first_weekday

    @classmethod
    def get_date_interval(cls) -> relativedelta:
        return relativedelta(weeks=1)

    def child_key(self, child: Period) -> int:
        return child.begin.isoweekday()

    def get_number(self) -> int:
        """ISO 8601 week number of the week's first day."""
        return IsoWeek.withdate(self._begin.date()).week

    def __str__(self) -> str:
        return f"Week {self.get_number()}"


class Month(Period):
    """A calendar month. Children are Days keyed by day of month (1-31)."""

    granularity = "month"
    child_granularity = "day"

    @classmethod
    def is_valid(cls, start: datetime, first_weekday: int = MONDAY) -> bool:
        return start.day == 1 and _is_midnight(start)

    @classmethod
    def get_date_interval(cls) -> relativedelta:
        return relativedelta(months=1)

    def child_key(self, child: Period) -> int:
        return child.begin.day

    def get_days_count(self) -> int:
        return calendar.monthrange(self._begin.year, self._begin.month)[1]

    def __str__(self) -> str:
        return self.format("%B")


class Year(Period):
    """A calendar year. Children are Months keyed by month number (1-12)."""

    granularity = "year"
    child_granularity = "month"

    @classmethod
    def is_valid(cls, start: datetime, first_weekday: int = MONDAY) -> bool:
        return start.month == 1 and start.day == 1 and _is_midnight(start)

    @classmethod
    def get_date_interval(cls) -> relativedelta:
        return relativedelta(years=1)

    def child_key(self, child: Period) -> int:
        return child.begin.month

    def is_leap(self) -> bool:
        return calendar.isleap(self._begin.year)

    def __str__(self) -> str:
        return self.format("%Y")


# Coarse to fine; PeriodFactory only builds these
PERIOD_TYPES = {
    "year": Year,
    "month": Month,
    "week": Week,
    "day": Day,
    "hour": Hour,
    "minute": Minute,
}


__all__ = [
    "Period",
    "Minute",
    "Hour",
    "Day",
    "Week",
    "Month",
    "Year",
    "PERIOD_TYPES",
    "align_instant",
    "WEEKDAY_NAMES",
    "MONDAY",
    "TUESDAY",
    "WEDNESDAY",
    "THURSDAY",
    "FRIDAY",
    "SATURDAY",
    "SUNDAY",
]
