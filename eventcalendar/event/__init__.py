"""Event module: event records, collections, providers and the event manager.

Public API:
    Event(uid, begin, end=None, title="", data={})

    IndexedCollection(events=(), index_function=None)
        add(event), remove(event), find(key | period | datetime), has(...),
        all(), count()

    EventManager(providers=None)
        add_provider(provider, alias=None), find(period, options=None)

    events_to_frame(events) -> pd.DataFrame

Examples:
    >>> from datetime import datetime
    >>> from eventcalendar.event import Event, IndexedCollection, index_by_month
    >>> events = IndexedCollection(index_function=index_by_month)
    >>> events.add(Event("a", datetime(2024, 3, 1)))
    >>> events.add(Event("b", datetime(2024, 3, 20)))
    >>> [e.uid for e in events.find("2024-03")]
    ['a', 'b']
"""

from eventcalendar.event.eventrecord import Event
from eventcalendar.event.eventcollection import (
    BasicCollection,
    IndexedCollection,
    index_by_hour,
    index_by_day,
    index_by_month,
    index_by_year,
    get_index_function,
)
from eventcalendar.event.eventprovider import (
    EventProvider,
    BasicProvider,
)
from eventcalendar.event.eventmanager import EventManager
from eventcalendar.event.eventapi import events_to_frame

__all__ = [
    "Event",
    "BasicCollection",
    "IndexedCollection",
    "index_by_hour",
    "index_by_day",
    "index_by_month",
    "index_by_year",
    "get_index_function",
    "EventProvider",
    "BasicProvider",
    "EventManager",
    "events_to_frame",
]
