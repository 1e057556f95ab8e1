"""Period Iteration
----------------

External cursor over the immediate children of a period.

States:
    NOT_STARTED --advance()--> POSITIONED(child_0) --advance()--> ...
    POSITIONED(child_n) --advance()--> EXHAUSTED

Each cursor owns its position, so two traversals of the same (or an equal)
period never interfere. A single cursor is not safe for concurrent use.

Child keys per pairing:
    Year  -> Month : month number (1-12)
    Month -> Day   : day of month (1-31)
    Week  -> Day   : ISO weekday (1 = Monday ... 7 = Sunday)
    Day   -> Hour  : hour of day (0-23)
    Hour  -> Minute: minute (0-59)
    Minute         : no children, the sequence is empty

Examples:
    >>> cursor = PeriodCursor(Day(datetime(2024, 3, 15)))
    >>> cursor.rewind()
    >>> cursor.key, cursor.current
    (0, Hour(2024-03-15T00:00:00))
    >>> [key for key, hour in cursor.items()][-1]
    23
"""

from __future__ import annotations
from typing import Iterator, Optional

from eventcalendar.period.periodfactory import PeriodFactory
from eventcalendar.period.periodtypes import Period

NOT_STARTED = "not_started"
POSITIONED = "positioned"
EXHAUSTED = "exhausted"


class PeriodCursor:
    """Lazy, finite, restartable sequence of a period's sub-periods.

    Args:
        period: Parent period
        factory: Factory used to build the first child. Defaults to one
                 configured with the parent's first weekday.
    """

    def __init__(self, period: Period, factory: Optional[PeriodFactory] = None):
        self.period = period
        self.factory = factory or PeriodFactory(first_weekday=period.first_weekday)
        self.state = NOT_STARTED
        self._current: Optional[Period] = None

    @property
    def current(self) -> Optional[Period]:
        """Child the cursor is positioned on, None unless POSITIONED."""
        return self._current

    @property
    def key(self):
        """Granularity-specific key of the current child (see module doc)."""
        if self._current is None:
            return None
        return self.period.child_key(self._current)

    def valid(self) -> bool:
        return self.state == POSITIONED

    def advance(self) -> None:
        """Move to the next child, or to EXHAUSTED past the last one."""
        if self.state == EXHAUSTED:
            return

        if self.state == NOT_STARTED:
            self._current = self.factory.create_child(self.period)
        else:
            successor = self._current.get_next()
            self._current = successor if self.period.contains(successor.begin) else None

        self.state = POSITIONED if self._current is not None else EXHAUSTED

    def reset(self) -> None:
        """Go back to NOT_STARTED."""
        self.state = NOT_STARTED
        self._current = None

    def rewind(self) -> None:
        """Restart and position on the first child straight away."""
        self.reset()
        self.advance()

    def __iter__(self) -> Iterator[Period]:
        self.reset()
        return self

    def __next__(self) -> Period:
        self.advance()
        if self._current is None:
            raise StopIteration
        return self._current

    def items(self) -> Iterator[tuple]:
        """Yield ``(key, child)`` pairs from the first child onwards."""
        self.rewind()
        while self.valid():
            yield self.key, self._current
            self.advance()

    def __repr__(self) -> str:
        return f"PeriodCursor({self.period!r}, state={self.state})"


__all__ = [
    "PeriodCursor",
    "NOT_STARTED",
    "POSITIONED",
    "EXHAUSTED",
]
