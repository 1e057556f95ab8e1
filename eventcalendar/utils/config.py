"""
Calendar Configuration
----------------------

Loads calendar settings from YAML files or plain dicts.

YAML layout:

    periods:
      first_weekday: monday      # name or 0 (Monday) .. 6 (Sunday)
      timezone: Europe/Paris     # attached to naive instants
    events:
      index: day                 # hour | day | month | year

Flat keys (``first_weekday``, ``timezone``, ``index``) are accepted too.

Functions:
  - load_yaml_file: Load and parse YAML file
  - load_config: Build a CalendarConfig from a path, dict or CalendarConfig
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from eventcalendar.event.eventcollection import get_index_function
from eventcalendar.period.periodfactory import resolve_timezone, resolve_weekday
from eventcalendar.period.periodtypes import MONDAY

logger = logging.getLogger(__name__)

KNOWN_SECTIONS = {"periods", "events"}
KNOWN_KEYS = {"first_weekday", "timezone", "index"}


@dataclass
class CalendarConfig:
    """Settings used to build a Calendar."""

    first_weekday: Union[int, str] = MONDAY  # Weekday number or English name
    timezone: Optional[str] = None  # IANA name for naive instants
    index: str = "day"  # Index function name for event collections

    def __post_init__(self):
        # Fail early on bad values instead of at first use
        self.first_weekday = resolve_weekday(self.first_weekday)
        resolve_timezone(self.timezone)
        get_index_function(self.index)


def load_yaml_file(path: Path) -> dict:
    """
    Load and parse YAML file.

    Args:
        path: Path to YAML file

    Returns:
        Parsed YAML data as dictionary (empty dict for an empty file)

    Raises:
        FileNotFoundError: If file does not exist

    Examples:
        >>> data = load_yaml_file(Path("calendar.yaml"))
        >>> data['periods']['first_weekday']
        'monday'
    """
    import yaml

    if not path.exists():
        raise FileNotFoundError(f"Required file not found: {path}")

    with open(path, 'r') as f:
        return yaml.safe_load(f) or {}


def _flatten(data: dict) -> dict:
    flat = {}
    for key, value in data.items():
        if key in KNOWN_SECTIONS and isinstance(value, dict):
            flat.update(value)
        else:
            flat[key] = value

    ignored = sorted(str(key) for key in set(flat) - KNOWN_KEYS)
    if ignored:
        logger.warning(f"Ignoring unknown calendar config keys: {', '.join(ignored)}")
    return {key: value for key, value in flat.items() if key in KNOWN_KEYS}


def load_config(source: Union[str, Path, dict, CalendarConfig, None] = None) -> CalendarConfig:
    """
    Build a CalendarConfig.

    Args:
        source: Path to a YAML file, a dict (nested or flat), an existing
                CalendarConfig, or None for defaults

    Returns:
        CalendarConfig

    Raises:
        FileNotFoundError: If a path is given and does not exist
        ValueError: If a setting has an invalid value
    """
    if source is None:
        return CalendarConfig()
    if isinstance(source, CalendarConfig):
        return source
    if isinstance(source, (str, Path)):
        data = load_yaml_file(Path(source))
    elif isinstance(source, dict):
        data = source
    else:
        raise TypeError(f"Unsupported config source: {type(source).__name__}")

    return CalendarConfig(**_flatten(data))


__all__ = [
    "CalendarConfig",
    "load_yaml_file",
    "load_config",
]
