"""Period module for calendar arithmetic.

Periods are half-open ``[begin, end)`` spans of a fixed granularity (minute,
hour, day, week, month, year). PeriodFactory normalizes instants and builds
periods; iterating a period yields its immediate sub-periods.

Public API:
    PeriodFactory(first_weekday=MONDAY, tz=None)
        create_period(granularity, instant), create_day(instant), ...,
        create_next(period), create_previous(period)

    period_identifier(text, factory=None, asof_ts=None) -> Period | None
        Resolve a period label ("Mar 2025", "2025-W11", "last month")

    format_period_display(period) -> str
        Format period for human-readable display

    list_periods(period) -> pd.DataFrame
        Children of a period as a DataFrame

Examples:
    >>> from eventcalendar.period import PeriodFactory
    >>> factory = PeriodFactory()
    >>> year = factory.create_year("2024-06-01")
    >>> [str(month) for month in year][:2]
    ['January', 'February']
    >>> len(list(factory.create_month("2024-02-10")))
    29
"""

from eventcalendar.period.periodexceptions import (
    InvalidBoundary,
    InvalidGranularity,
)
from eventcalendar.period.periodtypes import (
    Period,
    Minute,
    Hour,
    Day,
    Week,
    Month,
    Year,
    MONDAY,
    TUESDAY,
    WEDNESDAY,
    THURSDAY,
    FRIDAY,
    SATURDAY,
    SUNDAY,
)
from eventcalendar.period.periodfactory import PeriodFactory
from eventcalendar.period.perioditer import PeriodCursor
from eventcalendar.period.periodapi import (
    period_identifier,
    format_period_display,
    list_periods,
)

__all__ = [
    "InvalidBoundary",
    "InvalidGranularity",
    "Period",
    "Minute",
    "Hour",
    "Day",
    "Week",
    "Month",
    "Year",
    "MONDAY",
    "TUESDAY",
    "WEDNESDAY",
    "THURSDAY",
    "FRIDAY",
    "SATURDAY",
    "SUNDAY",
    "PeriodFactory",
    "PeriodCursor",
    "period_identifier",
    "format_period_display",
    "list_periods",
]
