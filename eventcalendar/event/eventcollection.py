"""Event Collections
-----------------

Containers for events returned by providers and the event manager.

  - BasicCollection:   plain list, lookups scan every event
  - IndexedCollection: events bucketed by an index function applied to their
                       begin instant, lookups hit a single bucket

Index functions map an instant to a bucket key. The default buckets by
calendar date ("2024-03-15"); ``get_index_function`` resolves the names used
in configuration ("hour", "day", "month", "year").

Examples:
    >>> events = IndexedCollection([Event("a", datetime(2024, 3, 15, 10))])
    >>> [e.uid for e in events.find("2024-03-15")]
    ['a']
    >>> events.find(datetime(2024, 3, 16))
    []
"""

from __future__ import annotations
from datetime import date, datetime, time
from typing import Callable, Dict, Iterable, Iterator, List, Optional

from eventcalendar.period.periodtypes import Period

IndexFunction = Callable[[datetime], str]


# ---- Index functions ----

def index_by_hour(instant: datetime) -> str:
    return instant.strftime("%Y-%m-%d %H")


def index_by_day(instant: datetime) -> str:
    return instant.strftime("%Y-%m-%d")


def index_by_month(instant: datetime) -> str:
    return instant.strftime("%Y-%m")


def index_by_year(instant: datetime) -> str:
    return instant.strftime("%Y")


INDEX_FUNCTIONS: Dict[str, IndexFunction] = {
    "hour": index_by_hour,
    "day": index_by_day,
    "month": index_by_month,
    "year": index_by_year,
}


def get_index_function(name: str) -> IndexFunction:
    """Look up a named index function.

    Raises:
        ValueError: If the name is unknown
    """
    key = name.strip().lower()
    if key not in INDEX_FUNCTIONS:
        raise ValueError(f"Unknown index function: {name!r}. Expected one of: {', '.join(INDEX_FUNCTIONS)}")
    return INDEX_FUNCTIONS[key]


# ---- Collections ----

class BasicCollection:
    """List-backed collection.

    ``find`` accepts a period (events the period contains) or an instant
    (events in progress at that instant).
    """

    def __init__(self, events: Iterable = ()):
        self._events: List = []
        for event in events:
            self.add(event)

    def add(self, event) -> None:
        self._events.append(event)

    def remove(self, event) -> bool:
        """Remove the first event with the same uid. Returns False on a miss."""
        for position, stored in enumerate(self._events):
            if stored.uid == event.uid:
                del self._events[position]
                return True
        return False

    def find(self, index) -> list:
        if isinstance(index, Period):
            return [event for event in self._events if index.contains_event(event)]
        if isinstance(index, date) and not isinstance(index, datetime):
            index = datetime.combine(index, time())
        return [event for event in self._events if event.begin == index or event.contains(index)]

    def has(self, index) -> bool:
        return len(self.find(index)) > 0

    def all(self) -> list:
        return list(self._events)

    def count(self) -> int:
        return len(self._events)

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator:
        return iter(self.all())


class IndexedCollection:
    """Events bucketed by an index function of their begin instant.

    Invariants:
      - every event sits in bucket ``index_function(event.begin)``
      - ``count()`` equals the total number of stored events

    Args:
        events: Events to add up front
        index_function: Callable mapping a datetime to a bucket key
                        (default: calendar date, "%Y-%m-%d")
    """

    def __init__(self, events: Iterable = (), index_function: Optional[IndexFunction] = None):
        self.index_function = index_function if callable(index_function) else index_by_day
        self._events: Dict[str, list] = {}
        self._count = 0
        for event in events:
            self.add(event)

    def compute_index(self, value) -> str:
        """Bucket key for an event, a period, a datetime or a date."""
        if isinstance(value, Period):
            value = value.begin
        elif isinstance(value, datetime):
            pass
        elif isinstance(value, date):
            value = datetime.combine(value, time())
        else:
            value = value.begin
        return self.index_function(value)

    def add(self, event) -> None:
        """Append an event to its bucket."""
        self._events.setdefault(self.compute_index(event), []).append(event)
        self._count += 1

    def remove(self, event) -> bool:
        """Remove an event from its own bucket.

        Only the bucket ``index_function(event.begin)`` is scanned and only the
        first entry with a matching uid is removed. Removing an event that is
        not stored is a no-op.

        Returns:
            True if an event was removed, False otherwise
        """
        index = self.compute_index(event)
        bucket = self._events.get(index)
        if not bucket:
            return False

        for position, stored in enumerate(bucket):
            if stored.uid == event.uid:
                del bucket[position]
                self._count -= 1
                if not bucket:
                    del self._events[index]
                return True
        return False

    def find(self, index) -> list:
        """Return the events of one bucket.

        Args:
            index: Raw bucket key, a Period (looked up by its begin instant),
                   or a datetime/date (re-indexed)

        Returns:
            Events of the bucket in insertion order; [] for an unknown key
        """
        if isinstance(index, (Period, date)):
            index = self.compute_index(index)
        return list(self._events.get(index, []))

    def has(self, index) -> bool:
        return len(self.find(index)) > 0

    def all(self) -> list:
        """Flatten every bucket, in bucket creation order."""
        return [event for bucket in self._events.values() for event in bucket]

    def keys(self) -> list:
        return list(self._events)

    def count(self) -> int:
        return self._count

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator:
        return iter(self.all())


__all__ = [
    "BasicCollection",
    "IndexedCollection",
    "index_by_hour",
    "index_by_day",
    "index_by_month",
    "index_by_year",
    "get_index_function",
]
