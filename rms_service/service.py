"""
Menu Selector Service - zone picker + "give me one" orchestration.

This module provides the MenuSelectorService class which connects the
zone catalogs, the random selector, and the observable selection state
the UI layer binds to.

Flow:
    user action → give_me_one() → pick() → SelectionState.select()
                                            ↓
                                 observers (UI, SelectionPublisher)

Thread Safety:
- _lock (reentrant) is held across pick+select, check+choose and
  switch+clear, so a selection always belongs to the active catalog
- rng: guarded by _lock (numpy Generators are not thread-safe)
- Notification order: SelectionState delivers changes in commit order
"""

import logging
import threading
from typing import List, Optional, Tuple

from rms_zone import (
    Catalog,
    CatalogCollection,
    Observer,
    RandomSource,
    SelectionState,
    Subscription,
    UnknownZoneError,
    Zone,
    make_rng,
    pick,
)
from rms_mqtt.publishers import SelectionPublisher
from rms_mqtt.schemas import SelectionEvent
from rms_service.config import AppConfig
from rms_service.registry import CommandRegistry

logger = logging.getLogger(__name__)


class MenuSelectorService:
    """
    Random menu selector.

    Usage:
        config = AppConfig.from_yaml("config/rms_config.yaml")
        service = MenuSelectorService(config)
        service.subscribe(lambda zone: print(f"Zone: {zone}"))

        service.give_me_one()          # random zone from the active catalog
        service.choose("sector2")      # manual picker selection
        service.use_catalog("zones_kr")
        service.clear()
    """

    def __init__(
        self,
        config: AppConfig,
        publisher: Optional[SelectionPublisher] = None,
        rng: Optional[RandomSource] = None,
    ):
        """
        Initialize the service.

        Args:
            config: Application configuration
            publisher: Optional publisher notified on every selection change
            rng: Randomness source (default: numpy Generator seeded from config)

        Raises:
            InvalidCatalogError: If a configured catalog is invalid
        """
        self.config = config
        self.publisher = publisher
        self.rng = rng if rng is not None else make_rng(config.selector.seed)

        self.catalogs = CatalogCollection.from_mapping(config.catalogs)
        self.state = SelectionState()

        self._active: Catalog = self.catalogs.get_catalog(config.default_catalog)
        self._lock = threading.RLock()

        self._publisher_subscription: Optional[Subscription] = None
        if publisher is not None:
            self._publisher_subscription = self.state.subscribe(self._publish_change)

        logger.info(
            f"MenuSelectorService initialized for service_id={config.service_id} "
            f"(catalogs={self.catalogs.list_catalogs()}, active={self._active.name})"
        )

    @property
    def active_catalog(self) -> Catalog:
        with self._lock:
            return self._active

    def zones(self) -> Tuple[Zone, ...]:
        return self.active_catalog.zones()

    def catalog_names(self) -> List[str]:
        return self.catalogs.list_catalogs()

    def current(self) -> Optional[Zone]:
        return self.state.current()

    def give_me_one(self) -> Zone:
        """
        Pick a random zone from the active catalog and select it.

        With selector.avoid_repeat, the current selection is excluded
        (unless it is the only zone).

        Raises:
            EmptyCatalogError: If the active catalog is empty
        """
        with self._lock:
            catalog = self._active
            exclude = self.state.current() if self.config.selector.avoid_repeat else None
            zone = pick(
                catalog,
                self.rng,
                exclude=exclude,
                max_redraws=self.config.selector.max_redraws,
            )
            logger.debug(f"Picked '{zone}' from catalog '{catalog.name}' (exclude={exclude!r})")
            self.state.select(zone)
        return zone

    def choose(self, zone: Zone) -> None:
        """
        Select a zone explicitly (picker).

        Raises:
            UnknownZoneError: If the zone is not in the active catalog
        """
        with self._lock:
            catalog = self._active
            if not catalog.contains(zone):
                raise UnknownZoneError(
                    f"Zone '{zone}' is not in catalog '{catalog.name}'"
                )
            self.state.select(zone)

    def clear(self) -> None:
        with self._lock:
            self.state.clear()

    def use_catalog(self, name: str) -> Catalog:
        """
        Switch the active catalog.

        Clears the selection when it does not belong to the new catalog.
        The clear is reported under the outgoing catalog.

        Raises:
            CatalogNotFoundError: If no catalog has that name
        """
        catalog = self.catalogs.get_catalog(name)
        with self._lock:
            current = self.state.current()
            try:
                if current is not None and not catalog.contains(current):
                    self.state.clear()
            finally:
                self._active = catalog

        logger.info(f"Active catalog set to '{name}' ({catalog.size()} zones)")
        return catalog

    def subscribe(self, observer: Observer) -> Subscription:
        return self.state.subscribe(observer)

    def unsubscribe(self, handle: Subscription) -> bool:
        return self.state.unsubscribe(handle)

    def close(self) -> None:
        """Detach and disconnect the publisher, if any."""
        if self._publisher_subscription is not None:
            self.state.unsubscribe(self._publisher_subscription)
            self._publisher_subscription = None
        if self.publisher is not None:
            self.publisher.disconnect()

    def _publish_change(self, zone: Optional[Zone]) -> None:
        event = SelectionEvent.for_zone(
            zone,
            service_id=self.config.service_id,
            catalog=self.active_catalog.name,
        )
        if not self.publisher.publish_selection(event):
            logger.warning(f"Selection change not published (zone={zone!r})")

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def register_commands(self, registry: CommandRegistry) -> None:
        """Register the user-facing commands of the selector."""
        registry.register('pick', self._cmd_pick, "Pick a random zone")
        registry.register('choose', self._cmd_choose, "Select a zone by name: choose <zone>")
        registry.register('clear', self._cmd_clear, "Clear the selection")
        registry.register('current', self._cmd_current, "Show the current selection")
        registry.register('zones', self._cmd_zones, "List zones of the active catalog")
        registry.register('catalogs', self._cmd_catalogs, "List catalogs")
        registry.register('use', self._cmd_use, "Switch catalog: use <catalog>")

    def _cmd_pick(self, args: List[str]) -> str:
        return self.give_me_one()

    def _cmd_choose(self, args: List[str]) -> str:
        if not args:
            raise ValueError("Usage: choose <zone>")
        zone = " ".join(args)
        self.choose(zone)
        return zone

    def _cmd_clear(self, args: List[str]) -> None:
        self.clear()

    def _cmd_current(self, args: List[str]) -> str:
        current = self.current()
        return current if current is not None else "(none)"

    def _cmd_zones(self, args: List[str]) -> str:
        return "\n".join(self.zones())

    def _cmd_catalogs(self, args: List[str]) -> str:
        active = self.active_catalog.name
        return "\n".join(
            f"{'*' if name == active else ' '} {name}" for name in self.catalog_names()
        )

    def _cmd_use(self, args: List[str]) -> str:
        if len(args) != 1:
            raise ValueError("Usage: use <catalog>")
        return self.use_catalog(args[0]).name
