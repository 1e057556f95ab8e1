"""Event Calendar - calendar periods and the events that happen in them

Public API for period arithmetic, period iteration and event lookup.

Usage:
    from eventcalendar import Calendar, PeriodFactory, Event, BasicProvider

    # Build periods from any instant
    factory = PeriodFactory()
    day = factory.create_day("2024-03-15T10:30")  # Day(2024-03-15T00:00:00)

    # Walk a period's children
    for month in factory.create_year("2024"):
        print(month)                             # January, February, ...

    # Index events by bucket
    events = IndexedCollection([Event("standup", datetime(2024, 3, 15, 10))])
    events.find(day)                             # [Event(uid='standup', ...)]

    # Query providers through a calendar
    cal = Calendar.from_config("calendar.yaml")
    cal.event_manager.add_provider(BasicProvider(events), alias="team")
    cal.get_events(cal.get_month(2024, 3))

    # Resolve labels
    period_identifier("2025-W11")                # Week(2025-03-10T00:00:00)
"""

__version__ = "0.1.0"

# ============================================================================
# Period API
# ============================================================================

from .period.periodexceptions import (
    InvalidBoundary,         # Direct construction from a non-boundary instant
    InvalidGranularity,      # Unknown period type requested from the factory
)

from .period.periodtypes import (
    Period,                  # Base [begin, end) span
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

from .period.periodfactory import PeriodFactory   # Normalize instants, build periods
from .period.perioditer import PeriodCursor       # Iterate a period's children

from .period.periodapi import (
    period_identifier,       # Resolve a period label to a Period
    format_period_display,   # Format period for display
    list_periods,            # Children of a period as a DataFrame
)

# ============================================================================
# Event API
# ============================================================================

from .event.eventrecord import Event

from .event.eventcollection import (
    BasicCollection,         # List-backed collection
    IndexedCollection,       # Bucketed by index function
    index_by_hour,
    index_by_day,
    index_by_month,
    index_by_year,
    get_index_function,      # Resolve an index function by name
)

from .event.eventprovider import (
    EventProvider,           # Provider base class
    BasicProvider,           # In-memory provider
)

from .event.eventmanager import EventManager      # Fan queries out to providers
from .event.eventapi import events_to_frame       # Events as a DataFrame

# ============================================================================
# Calendar facade and configuration
# ============================================================================

from .calendarapi import Calendar

from .utils.config import (
    CalendarConfig,
    load_config,
)

__all__ = [
    # Version
    "__version__",

    # ========================================================================
    # PRIMARY APIS - Start here!
    # ========================================================================
    "Calendar",             # Periods + events in one object
    "PeriodFactory",        # Build periods from instants
    "IndexedCollection",    # Store and look up events by bucket
    "period_identifier",    # Resolve period labels

    # ========================================================================
    # Periods
    # ========================================================================
    "Period",
    "Minute",
    "Hour",
    "Day",
    "Week",
    "Month",
    "Year",
    "PeriodCursor",
    "InvalidBoundary",
    "InvalidGranularity",
    "MONDAY",
    "TUESDAY",
    "WEDNESDAY",
    "THURSDAY",
    "FRIDAY",
    "SATURDAY",
    "SUNDAY",
    "format_period_display",
    "list_periods",

    # ========================================================================
    # Events
    # ========================================================================
    "Event",
    "BasicCollection",
    "index_by_hour",
    "index_by_day",
    "index_by_month",
    "index_by_year",
    "get_index_function",
    "EventProvider",
    "BasicProvider",
    "EventManager",
    "events_to_frame",

    # ========================================================================
    # Configuration
    # ========================================================================
    "CalendarConfig",
    "load_config",
]
