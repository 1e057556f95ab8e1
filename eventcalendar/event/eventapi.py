"""Event tabular API.

Helpers to hand events over to pandas.
"""

from __future__ import annotations
from typing import Iterable, Optional

import pandas as pd

from eventcalendar.event.eventcollection import IndexFunction, IndexedCollection, index_by_day


def events_to_frame(events: Iterable, index_function: Optional[IndexFunction] = None) -> pd.DataFrame:
    """
    Build a DataFrame with one row per event.

    Columns:
      - uid, begin, end: event fields
      - index: bucket key of the event's begin instant

    Args:
        events: Any iterable of events, including collections
        index_function: Bucket key function. Defaults to the collection's own
                        index function when ``events`` is an IndexedCollection,
                        else calendar date.

    Examples:
        >>> df = events_to_frame([Event("a", datetime(2024, 3, 15, 10))])
        >>> df[["uid", "index"]].values.tolist()
        [['a', '2024-03-15']]
    """
    if index_function is None:
        if isinstance(events, IndexedCollection):
            index_function = events.index_function
        else:
            index_function = index_by_day

    rows = [
        {
            "uid": event.uid,
            "begin": event.begin,
            "end": event.end,
            "index": index_function(event.begin),
        }
        for event in events
    ]
    return pd.DataFrame(rows, columns=["uid", "begin", "end", "index"])


__all__ = [
    "events_to_frame",
]
