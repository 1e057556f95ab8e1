"""Shared utilities for the eventcalendar package."""

from eventcalendar.utils.config import (
    CalendarConfig,
    load_yaml_file,
    load_config,
)

__all__ = [
    # Configuration
    "CalendarConfig",
    "load_yaml_file",
    "load_config",
]
