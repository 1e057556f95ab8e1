"""Shared test fixtures for eventcalendar tests."""

import pytest
from datetime import datetime

from eventcalendar import Event, PeriodFactory, SUNDAY


@pytest.fixture
def factory():
    """Default factory: Monday weeks, naive instants."""
    return PeriodFactory()


@pytest.fixture
def sunday_factory():
    """Factory whose weeks start on Sunday."""
    return PeriodFactory(first_weekday=SUNDAY)


@pytest.fixture
def sample_events():
    """A handful of events around mid-March 2024.

    Returns a dict of uid -> Event.
    """
    events = [
        Event("standup", datetime(2024, 3, 15, 10, 0), datetime(2024, 3, 15, 10, 15)),
        Event("lunch", datetime(2024, 3, 15, 12, 30), datetime(2024, 3, 15, 13, 30)),
        Event("review", datetime(2024, 3, 16, 9, 0), datetime(2024, 3, 16, 11, 0)),
        Event("offsite", datetime(2024, 3, 14, 9, 0), datetime(2024, 3, 17, 18, 0)),
        Event("release", datetime(2024, 4, 2, 8, 0)),
    ]
    return {event.uid: event for event in events}


@pytest.fixture
def config_yaml(tmp_path):
    """Write a calendar YAML file and return its path."""
    path = tmp_path / "calendar.yaml"
    path.write_text(
        "periods:\n"
        "  first_weekday: sunday\n"
        "  timezone: Europe/Paris\n"
        "events:\n"
        "  index: month\n"
    )
    return path
