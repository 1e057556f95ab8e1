"""Event manager.

Collects events for a period from every registered provider.

Providers are registered under their alias when one is given, otherwise under
their registration position (0, 1, 2, ...). Registration order is kept and is
the order providers are queried in.

Examples:
    >>> manager = EventManager()
    >>> manager.add_provider(BasicProvider())
    0
    >>> manager.add_provider(BasicProvider(), alias="holidays")
    'holidays'
    >>> list(manager.providers)
    [0, 'holidays']
"""

from __future__ import annotations
import logging
from typing import Callable, Dict, Hashable, Iterable, Mapping, Optional, Union

from eventcalendar.event.eventcollection import IndexedCollection
from eventcalendar.event.eventprovider import EventProvider
from eventcalendar.period.periodtypes import Period

logger = logging.getLogger(__name__)


class EventManager:
    """Fan period queries out to event providers and merge the results.

    Args:
        providers: Providers to register, as a sequence (registered by
                   position) or a mapping of alias to provider
        collection_factory: Callable returning an empty collection for the
                            results of ``find`` (default: IndexedCollection)
    """

    def __init__(
        self,
        providers: Union[Iterable[EventProvider], Mapping[str, EventProvider], None] = None,
        collection_factory: Optional[Callable[[], object]] = None,
    ):
        self._providers: Dict[Hashable, EventProvider] = {}
        self.collection_factory = collection_factory or IndexedCollection
        if providers:
            self.add_providers(providers)

    @property
    def providers(self) -> Dict[Hashable, EventProvider]:
        return dict(self._providers)

    def add_provider(self, provider: EventProvider, alias: Optional[str] = None) -> Hashable:
        """Register a provider.

        Args:
            provider: Event provider
            alias: Name to register it under. Without one, the provider is
                   referenced by its registration position.

        Returns:
            The name the provider was registered under
        """
        name = alias if alias else len(self._providers)
        if name in self._providers:
            logger.warning(f"Replacing event provider registered as {name!r}")
        self._providers[name] = provider
        logger.debug(f"Registered event provider {type(provider).__name__} as {name!r}")
        return name

    def add_providers(self, providers: Union[Iterable[EventProvider], Mapping[str, EventProvider]]) -> list:
        """Register several providers; mapping keys are used as aliases."""
        if isinstance(providers, Mapping):
            return [self.add_provider(provider, alias) for alias, provider in providers.items()]
        return [self.add_provider(provider) for provider in providers]

    def get_provider(self, name: Hashable) -> EventProvider:
        """Return a registered provider.

        Raises:
            KeyError: If no provider is registered under that name
        """
        if name not in self._providers:
            raise KeyError(f"No event provider registered as {name!r}")
        return self._providers[name]

    def find(self, period: Period, options: Optional[dict] = None):
        """Collect the events that happen during a period.

        Args:
            period: Period to query
            options: Query options, passed on to each provider. The
                     ``providers`` key (a name or list of names) restricts
                     the query to those providers.

        Returns:
            A fresh collection (``collection_factory()``) with every event
            the period contains

        Raises:
            TypeError: If ``period`` is not a Period
            KeyError: If ``options["providers"]`` names an unknown provider
        """
        if not isinstance(period, Period):
            raise TypeError(f"EventManager.find() expects a Period, got {type(period).__name__}")

        options = dict(options or {})
        names = options.get("providers")
        if names is None:
            selected = list(self._providers.values())
        else:
            if isinstance(names, (str, int)):
                names = [names]
            selected = [self.get_provider(name) for name in names]

        collection = self.collection_factory()
        for provider in selected:
            for event in provider.get_events(period.begin, period.end, options):
                if period.contains_event(event):
                    collection.add(event)

        logger.debug(f"Found {len(collection)} events for {period!r} across {len(selected)} providers")
        return collection

    def __len__(self) -> int:
        return len(self._providers)


__all__ = [
    "EventManager",
]
