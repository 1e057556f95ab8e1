"""Period Factory
--------------

Builds periods from arbitrary instants.

The factory is the only place where instants are normalized: a raw instant is
truncated to the boundary of the requested granularity before the period is
constructed, so ``create_period`` never fails for a valid instant. Direct
construction of a period (``Day(datetime(2024, 3, 15, 10, 30))``) raises
InvalidBoundary instead.

The factory holds configuration only (first weekday, optional time zone for
naive instants) and is safe to share.

Examples:
    >>> factory = PeriodFactory()
    >>> factory.create_period("day", datetime(2024, 3, 15, 10, 30)).begin
    datetime.datetime(2024, 3, 15, 0, 0)
    >>> factory.create_week(datetime(2024, 3, 15)).begin  # Monday
    datetime.datetime(2024, 3, 11, 0, 0)
"""

from __future__ import annotations
import logging
from datetime import date, datetime, time, tzinfo
from typing import Optional, Union

try:
    from dateutil import parser as dateutil_parser
    from dateutil import tz as dateutil_tz
    from dateutil.relativedelta import relativedelta
except ImportError as e:
    raise ImportError("python-dateutil not installed. pip install python-dateutil") from e

try:
    from isoweek import Week as IsoWeek
except ImportError as e:
    raise ImportError("isoweek not installed. pip install isoweek") from e

from eventcalendar.period.periodexceptions import InvalidGranularity
from eventcalendar.period.periodtypes import (
    PERIOD_TYPES,
    MONDAY,
    WEEKDAY_NAMES,
    Period,
    Minute,
    Hour,
    Day,
    Week,
    Month,
    Year,
)

logger = logging.getLogger(__name__)

Instant = Union[datetime, date, str]


def resolve_weekday(day: Union[int, str]) -> int:
    """Turn a weekday number (0=Monday..6=Sunday) or English name into a number.

    Raises:
        ValueError: If the value is not a known weekday
    """
    if isinstance(day, str):
        key = day.strip().lower()
        if key not in WEEKDAY_NAMES:
            raise ValueError(f"Unknown weekday: {day!r}. Expected one of: {', '.join(WEEKDAY_NAMES)}")
        return WEEKDAY_NAMES[key]
    if isinstance(day, int) and 0 <= day <= 6:
        return day
    raise ValueError(f"Weekday must be 0 (Monday) to 6 (Sunday), got {day!r}")


def resolve_timezone(zone: Union[str, tzinfo, None]) -> Optional[tzinfo]:
    """Return a tzinfo for an IANA name (via dateutil), pass tzinfo/None through.

    Raises:
        ValueError: If the name is not a known time zone
    """
    if zone is None or isinstance(zone, tzinfo):
        return zone
    resolved = dateutil_tz.gettz(zone)
    if resolved is None:
        raise ValueError(f"Unknown time zone: {zone!r}")
    return resolved


class PeriodFactory:
    """Create and navigate periods.

    Args:
        first_weekday: Day weeks start on, as a number (MONDAY..SUNDAY) or an
                       English weekday name (default: Monday)
        tz: Time zone attached to naive instants, as a tzinfo or IANA name.
            Aware instants are kept as they are. Default: leave naive.
    """

    def __init__(self, first_weekday: Union[int, str] = MONDAY, tz: Union[str, tzinfo, None] = None):
        self.first_weekday = resolve_weekday(first_weekday)
        self.tz = resolve_timezone(tz)

    # ---- Granularity lookup ----

    @staticmethod
    def granularities() -> list[str]:
        """Registered granularity names, coarse to fine."""
        return list(PERIOD_TYPES)

    def get_period_class(self, granularity) -> type:
        """Resolve a granularity name or period class to a registered class.

        Raises:
            InvalidGranularity: If the granularity is not registered
        """
        if isinstance(granularity, type) and granularity in PERIOD_TYPES.values():
            return granularity
        if isinstance(granularity, str):
            period_class = PERIOD_TYPES.get(granularity.strip().lower())
            if period_class is not None:
                return period_class
        raise InvalidGranularity(granularity, PERIOD_TYPES)

    # ---- Normalization ----

    def to_datetime(self, instant: Instant) -> datetime:
        """Coerce a datetime, date or ISO-like string into a datetime.

        Naive results get the factory time zone when one is configured.
        """
        if isinstance(instant, datetime):
            value = instant
        elif isinstance(instant, date):
            value = datetime.combine(instant, time())
        elif isinstance(instant, str):
            value = dateutil_parser.parse(instant)
        else:
            raise TypeError(f"Expected datetime, date or str, got {type(instant).__name__}")

        if value.tzinfo is None and self.tz is not None:
            value = value.replace(tzinfo=self.tz)
        return value

    def find_first_day_of_week(self, instant: Instant) -> datetime:
        """Return midnight of the first weekday on or before ``instant``."""
        value = self.to_datetime(instant)
        midnight = value.replace(hour=0, minute=0, second=0, microsecond=0)
        offset = (midnight.weekday() - self.first_weekday) % 7
        return midnight - relativedelta(days=offset)

    def normalize(self, granularity, instant: Instant) -> datetime:
        """Truncate an instant to the begin of the period of that granularity."""
        period_class = self.get_period_class(granularity)
        value = self.to_datetime(instant)

        if period_class is Minute:
            return value.replace(second=0, microsecond=0)
        if period_class is Hour:
            return value.replace(minute=0, second=0, microsecond=0)
        if period_class is Week:
            return self.find_first_day_of_week(value)

        value = value.replace(hour=0, minute=0, second=0, microsecond=0)
        if period_class is Month:
            return value.replace(day=1)
        if period_class is Year:
            return value.replace(month=1, day=1)
        return value

    # ---- Construction ----

    def create_period(self, granularity, instant: Instant) -> Period:
        """Create the period of ``granularity`` that contains ``instant``.

        Args:
            granularity: Name ("minute", "hour", "day", "week", "month",
                         "year") or period class
            instant: datetime, date or ISO-like string

        Returns:
            Period whose span contains the instant

        Raises:
            InvalidGranularity: If the granularity is not registered

        Examples:
            >>> PeriodFactory().create_period("month", "2024-02-10")
            Month(2024-02-01T00:00:00)
        """
        period_class = self.get_period_class(granularity)
        begin = self.normalize(period_class, instant)
        logger.debug(f"Normalized {instant!r} to {period_class.granularity} begin {begin.isoformat()}")
        return period_class(begin, self.first_weekday)

    def create_minute(self, instant: Instant) -> Minute:
        return self.create_period(Minute, instant)

    def create_hour(self, instant: Instant) -> Hour:
        return self.create_period(Hour, instant)

    def create_day(self, instant: Instant) -> Day:
        return self.create_period(Day, instant)

    def create_week(self, instant: Instant) -> Week:
        return self.create_period(Week, instant)

    def create_month(self, instant: Instant) -> Month:
        return self.create_period(Month, instant)

    def create_year(self, instant: Instant) -> Year:
        return self.create_period(Year, instant)

    def create_week_number(self, year: int, week: int) -> Week:
        """Create the week holding the Monday of ISO week ``week`` of ``year``.

        With a first weekday other than Monday, the week starts on the closest
        first weekday on or before that Monday.

        Raises:
            ValueError: If the year has no such ISO week
        """
        iso_week = IsoWeek(year, week)
        if iso_week.year != year or iso_week.week != week:
            raise ValueError(f"{year} has no ISO week {week}")
        return self.create_week(iso_week.monday())

    def create_next(self, period: Period) -> Period:
        """Return the period of the same granularity right after ``period``."""
        return period.get_next()

    def create_previous(self, period: Period) -> Period:
        """Return the period of the same granularity right before ``period``."""
        return period.get_previous()

    def create_child(self, period: Period) -> Optional[Period]:
        """Return the first sub-period of ``period``, or None at the finest granularity."""
        if period.child_granularity is None:
            return None
        return self.create_period(period.child_granularity, period.begin)

    def __repr__(self) -> str:
        return f"PeriodFactory(first_weekday={self.first_weekday}, tz={self.tz!r})"


__all__ = [
    "PeriodFactory",
    "resolve_weekday",
    "resolve_timezone",
]
