"""Period errors.

Both errors subclass ValueError so callers that already guard period
construction with ``except ValueError`` keep working.
"""

from __future__ import annotations
from datetime import datetime
from typing import Iterable


class InvalidBoundary(ValueError):
    """Raised when a period is built directly from a non-boundary instant."""

    def __init__(self, instant: datetime, period_type: str):
        self.instant = instant
        self.period_type = period_type
        super().__init__(
            f"{instant.isoformat()} is not a valid begin for a {period_type} period. "
            f"Use PeriodFactory.create_{period_type}() to normalize it."
        )


class InvalidGranularity(ValueError):
    """Raised when the factory is asked for a period type it does not know."""

    def __init__(self, granularity, known: Iterable[str] = ()):
        self.granularity = granularity
        self.known = list(known)
        super().__init__(
            f"Unknown period granularity: {granularity!r}. "
            f"Expected one of: {', '.join(self.known)}"
        )


__all__ = [
    "InvalidBoundary",
    "InvalidGranularity",
]
