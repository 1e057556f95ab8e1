"""Event records.

An event is anything with a unique identifier and a ``[begin, end)`` span.
Collections and providers only read ``uid``, ``begin`` and ``end``, so any
object exposing those attributes can be stored alongside ``Event``.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional

from eventcalendar.period.periodtypes import align_instant


@dataclass
class Event:
    """A calendar event.

    Args:
        uid: Unique identifier, used to remove the event from collections
        begin: Start instant
        end: End instant, exclusive (default: same as begin, a point event)
        title: Optional display title
        data: Free-form payload for the caller
    """

    uid: str
    begin: datetime
    end: Optional[datetime] = None
    title: str = ""
    data: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if self.end is None:
            self.end = self.begin
        if self.end < self.begin:
            raise ValueError(f"Event {self.uid!r} ends ({self.end}) before it begins ({self.begin})")

    def contains(self, instant: datetime) -> bool:
        """Return True if the instant falls within the event."""
        return self.begin <= align_instant(instant, self.begin) < self.end

    def contains_period(self, period) -> bool:
        """Return True if the whole period happens during the event."""
        begin, end = align_instant(period.begin, self.begin), align_instant(period.end, self.begin)
        return self.begin <= begin and end <= self.end

    def is_during(self, period) -> bool:
        """Return True if the whole event happens during the period."""
        begin, end = align_instant(self.begin, period.begin), align_instant(self.end, period.begin)
        return period.begin <= begin and end <= period.end


__all__ = [
    "Event",
]
