"""Calendar facade.

Ties a PeriodFactory and an EventManager together behind one object, the way
callers usually want them: "give me March 2024" and "what happens in it".

Examples:
    >>> cal = Calendar.from_config({"periods": {"first_weekday": "sunday"}})
    >>> cal.get_week(2024, 11).begin  # Sunday before ISO week 11's Monday
    datetime.datetime(2024, 3, 10, 0, 0)
    >>> cal.event_manager.add_provider(BasicProvider([Event("a", datetime(2024, 3, 15, 10))]))
    0
    >>> [e.uid for e in cal.get_events(cal.get_day(2024, 3, 15))]
    ['a']
"""

from __future__ import annotations
import logging
from datetime import datetime
from functools import partial
from pathlib import Path
from typing import Optional, Union

from eventcalendar.event.eventcollection import IndexedCollection, get_index_function
from eventcalendar.event.eventmanager import EventManager
from eventcalendar.period.periodfactory import PeriodFactory
from eventcalendar.period.periodtypes import Period, Minute, Hour, Day, Week, Month, Year
from eventcalendar.utils.config import CalendarConfig, load_config

logger = logging.getLogger(__name__)


class Calendar:
    """Period lookups and event queries in one place.

    Args:
        factory: Period factory (default: Monday weeks, naive instants)
        event_manager: Event manager (default: empty manager)
    """

    def __init__(self, factory: Optional[PeriodFactory] = None, event_manager: Optional[EventManager] = None):
        self.factory = factory or PeriodFactory()
        self.event_manager = event_manager or EventManager()

    @classmethod
    def from_config(cls, source: Union[str, Path, dict, CalendarConfig, None] = None) -> "Calendar":
        """Build a calendar from a YAML path, dict or CalendarConfig."""
        config = load_config(source)
        factory = PeriodFactory(first_weekday=config.first_weekday, tz=config.timezone)
        index_function = get_index_function(config.index)
        manager = EventManager(collection_factory=partial(IndexedCollection, index_function=index_function))
        logger.debug(f"Built calendar from config: {config}")
        return cls(factory, manager)

    # ---- Configuration ----

    def get_first_weekday(self) -> int:
        return self.factory.first_weekday

    def set_first_weekday(self, day: Union[int, str]) -> None:
        """Change the week start; periods created afterwards use it."""
        self.factory = PeriodFactory(first_weekday=day, tz=self.factory.tz)

    # ---- Period lookups ----

    def get_year(self, year: Union[int, datetime]) -> Year:
        if isinstance(year, datetime):
            return self.factory.create_year(year)
        return self.factory.create_year(datetime(year, 1, 1))

    def get_month(self, year: Union[int, datetime], month: Optional[int] = None) -> Month:
        if isinstance(year, datetime):
            return self.factory.create_month(year)
        return self.factory.create_month(datetime(year, month, 1))

    def get_week(self, year: Union[int, datetime], week: Optional[int] = None) -> Week:
        """Return a week by ISO 8601 number, or the week containing a datetime.

        Raises:
            ValueError: If the year has no such ISO week
        """
        if isinstance(year, datetime):
            return self.factory.create_week(year)
        return self.factory.create_week_number(year, week)

    def get_day(self, year: Union[int, datetime], month: Optional[int] = None, day: Optional[int] = None) -> Day:
        if isinstance(year, datetime):
            return self.factory.create_day(year)
        return self.factory.create_day(datetime(year, month, day))

    def get_hour(
        self,
        year: Union[int, datetime],
        month: Optional[int] = None,
        day: Optional[int] = None,
        hour: int = 0,
    ) -> Hour:
        if isinstance(year, datetime):
            return self.factory.create_hour(year)
        return self.factory.create_hour(datetime(year, month, day, hour))

    def get_minute(
        self,
        year: Union[int, datetime],
        month: Optional[int] = None,
        day: Optional[int] = None,
        hour: int = 0,
        minute: int = 0,
    ) -> Minute:
        if isinstance(year, datetime):
            return self.factory.create_minute(year)
        return self.factory.create_minute(datetime(year, month, day, hour, minute))

    # ---- Events ----

    def get_events(self, period: Period, options: Optional[dict] = None):
        """Collect events of every registered provider during ``period``."""
        return self.event_manager.find(period, options)


__all__ = [
    "Calendar",
]
