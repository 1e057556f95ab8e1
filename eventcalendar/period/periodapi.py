"""Period resolution API.

Public API for turning period labels into Period objects and for presenting
periods to people and to pandas.
"""

from __future__ import annotations
import logging
from datetime import datetime
from typing import Optional

import pandas as pd

try:
    from isoweek import Week as IsoWeek
except ImportError as e:
    raise ImportError("isoweek not installed. pip install isoweek") from e

from eventcalendar.period.periodfactory import PeriodFactory
from eventcalendar.period.periodnormalize import (
    normalize_period_text,
    extract_year,
    extract_year_month,
    extract_date,
    extract_time,
    extract_month_name,
    extract_iso_week,
    is_relative_period,
    extract_relative,
)
from eventcalendar.period.periodtypes import Period, Minute, Hour, Day, Week, Month, Year

logger = logging.getLogger(__name__)


def _resolve_relative(text_norm: str, factory: PeriodFactory, asof_ts: datetime) -> Optional[Period]:
    relative = extract_relative(text_norm)
    if relative is None:
        return None

    offset, granularity = relative
    period = factory.create_period(granularity, asof_ts)
    for _ in range(abs(offset)):
        period = period.get_next() if offset > 0 else period.get_previous()
    return period


def _resolve_date(text_norm: str, factory: PeriodFactory) -> Optional[Period]:
    ymd = extract_date(text_norm)
    if ymd is None:
        return None

    try:
        day = datetime(*ymd)
    except ValueError:
        return None

    time_of_day = extract_time(text_norm)
    if time_of_day is None:
        return factory.create_day(day)

    hour, minute = time_of_day
    if minute:
        return factory.create_minute(day.replace(hour=hour, minute=minute))
    return factory.create_hour(day.replace(hour=hour))


def period_identifier(
    text: str,
    *,
    factory: Optional[PeriodFactory] = None,
    asof_ts: Optional[datetime] = None,
) -> Optional[Period]:
    """
    Resolve a period label to a Period.

    Supports:
      - Years: "2025", "FY 2025"
      - Months: "2025-03", "Mar 2025", "March 2025", "Febuary 2024" (fuzzy)
      - ISO weeks: "2025-W11", "2025W11", "W11 2025"
      - Days: "2025-03-15"
      - Hours: "2025-03-15 10:00", "2025-03-15 10h"
      - Minutes: "2025-03-15 10:30"
      - Relative: "today", "yesterday", "tomorrow",
        "last|this|next minute|hour|day|week|month|year"

    Resolution Strategy:
      1. Normalize text (lowercase, dashes, whitespace)
      2. Relative labels, anchored on asof_ts
      3. ISO week
      4. Full date, with optional time of day
      5. Numeric year-month
      6. Month name + year
      7. Year only

    Args:
        text: Period label
        factory: Factory used to build the period (default: Monday weeks, naive)
        asof_ts: Reference instant for relative labels (default: now)

    Returns:
        Period, or None if the label cannot be resolved

    Examples:
        >>> period_identifier("Mar 2025")
        Month(2025-03-01T00:00:00)

        >>> period_identifier("2025-W11")
        Week(2025-03-10T00:00:00)

        >>> period_identifier("last month", asof_ts=datetime(2025, 1, 15))
        Month(2024-12-01T00:00:00)
    """
    if not text or not text.strip():
        return None

    factory = factory or PeriodFactory()
    text_norm = normalize_period_text(text)

    if is_relative_period(text_norm):
        if asof_ts is None:
            asof_ts = datetime.now(factory.tz)
        result = _resolve_relative(text_norm, factory, asof_ts)
        if result is not None:
            logger.debug(f"Resolved relative label {text!r} to {result!r}")
            return result

    iso_year, iso_week = extract_iso_week(text_norm)
    if iso_year and iso_week:
        try:
            return factory.create_week_number(iso_year, iso_week)
        except ValueError:
            return None

    # A date that does not exist ("2025-02-30") must not fall back to its year
    if extract_date(text_norm) is not None:
        return _resolve_date(text_norm, factory)

    year, month = extract_year_month(text_norm)
    if year and month:
        return factory.create_month(datetime(year, month, 1))

    year = extract_year(text_norm)
    if year:
        month = extract_month_name(text_norm)
        if month:
            return factory.create_month(datetime(year, month, 1))
        return factory.create_year(datetime(year, 1, 1))

    return None


def format_period_display(period: Optional[Period]) -> str:
    """
    Format a period for human-readable display.

    Examples:
        >>> factory = PeriodFactory()
        >>> format_period_display(factory.create_month("2025-03-15"))
        'March 2025'

        >>> format_period_display(factory.create_week("2025-03-15"))
        'W11 2025 (Mar 10 - Mar 16, 2025)'

        >>> format_period_display(factory.create_day("2025-03-15"))
        'Saturday, Mar 15, 2025'
    """
    if period is None:
        return ""

    begin = period.begin

    if isinstance(period, Year):
        return str(period)

    elif isinstance(period, Month):
        return begin.strftime("%B %Y")

    elif isinstance(period, Week):
        iso_week = IsoWeek.withdate(begin.date())
        last = period.end - Day.get_date_interval()
        return (
            f"W{iso_week.week:02d} {iso_week.year} "
            f"({begin:%b} {begin.day} - {last:%b} {last.day}, {last.year})"
        )

    elif isinstance(period, Day):
        return f"{begin:%A}, {begin:%b} {begin.day}, {begin.year}"

    elif isinstance(period, (Hour, Minute)):
        return begin.strftime("%Y-%m-%d %H:%M")

    return str(period)


def list_periods(period: Period, factory: Optional[PeriodFactory] = None) -> pd.DataFrame:
    """
    List a period's immediate children as a DataFrame.

    Columns:
      - key: iteration key (month number, day of month, hour, ...)
      - period_type: child granularity name
      - begin, end: child boundaries
      - label: child display string

    Examples:
        >>> df = list_periods(PeriodFactory().create_year("2024"))
        >>> len(df), df["key"].tolist()[:3]
        (12, [1, 2, 3])
    """
    rows = [
        {
            "key": key,
            "period_type": child.granularity,
            "begin": child.begin,
            "end": child.end,
            "label": str(child),
        }
        for key, child in period.children(factory).items()
    ]
    return pd.DataFrame(rows, columns=["key", "period_type", "begin", "end", "label"])


__all__ = [
    "period_identifier",
    "format_period_display",
    "list_periods",
]
