"""Event providers.

A provider supplies the events that happen between two instants. The event
manager fans period queries out to every registered provider, so a provider
can be backed by memory or by a remote store.
"""

from __future__ import annotations
from datetime import datetime
from typing import Iterable, Optional

from eventcalendar.event.eventcollection import IndexedCollection, IndexFunction
from eventcalendar.period.periodtypes import align_instant


class EventProvider:
    """Base class for event providers."""

    def get_events(self, begin: datetime, end: datetime, options: Optional[dict] = None) -> list:
        """Return events overlapping ``[begin, end)``.

        Args:
            begin: Start of the queried range, inclusive
            end: End of the queried range, exclusive
            options: Provider-specific query options
        """
        raise NotImplementedError


class BasicProvider(EventProvider):
    """In-memory provider storing its events in an IndexedCollection.

    Args:
        events: Events to load up front
        index_function: Bucket key function for the underlying collection
    """

    def __init__(self, events: Iterable = (), index_function: Optional[IndexFunction] = None):
        self.collection = IndexedCollection(events, index_function)

    def add(self, event) -> None:
        self.collection.add(event)

    def remove(self, event) -> bool:
        return self.collection.remove(event)

    def get_events(self, begin: datetime, end: datetime, options: Optional[dict] = None) -> list:
        """Return stored events overlapping ``[begin, end)``.

        Scans every stored event: an event spanning several buckets is only
        filed under the bucket of its begin, so no bucket range bounds the
        overlapping events. The collection provides storage and uid removal.
        Naive event instants are read in the zone of ``begin``.
        """
        found = []
        for event in self.collection.all():
            event_begin = align_instant(event.begin, begin)
            event_end = align_instant(event.end, begin)
            if (begin <= event_begin < end) or (event_begin < end and event_end > begin):
                found.append(event)
        return found

    def __len__(self) -> int:
        return len(self.collection)


__all__ = [
    "EventProvider",
    "BasicProvider",
]
