"""
Zone Catalog Module
===================

Immutable ordered catalogs of selectable zones.

Design:
- A Zone is its display label (exact string identity)
- Catalog order is display order
- No add/remove after construction
- CatalogCollection keeps several named catalogs (thread-safe)
"""

import threading
from typing import Dict, Iterable, Iterator, List, Tuple

Zone = str


class InvalidCatalogError(ValueError):
    """Raised when a catalog is built from invalid input."""
    pass


class UnknownZoneError(ValueError):
    """Raised when a zone is not part of the catalog it is chosen from."""
    pass


class CatalogNotFoundError(KeyError):
    """Raised when a named catalog is not in the collection."""

    def __str__(self) -> str:
        # KeyError repr()s its argument; keep the message readable
        return str(self.args[0]) if self.args else ""


class Catalog:
    """
    Immutable ordered list of zones.

    Invariants:
        - Every entry is a non-empty string
        - No duplicates
        - Non-empty unless built with require_non_empty=False

    Usage:
        catalog = Catalog(["sector1", "sector2"], name="sectors")
        catalog.zones()          # ('sector1', 'sector2')
        catalog.contains("sector2")
    """

    __slots__ = ("_name", "_zones")

    def __init__(
        self,
        zones: Iterable[Zone],
        name: str = "default",
        require_non_empty: bool = True
    ):
        """
        Build a catalog.

        Args:
            zones: Zone labels in display order
            name: Catalog name (used in logs and messages)
            require_non_empty: Reject empty input

        Raises:
            InvalidCatalogError: If input is empty (when required), has
                duplicates, or contains non-string/empty entries
        """
        if isinstance(zones, str):
            raise InvalidCatalogError(
                f"Catalog '{name}' expects a sequence of zones, got a single string"
            )

        entries: Tuple[Zone, ...] = tuple(zones)

        if require_non_empty and not entries:
            raise InvalidCatalogError(f"Catalog '{name}' cannot be empty")

        seen = set()
        for position, zone in enumerate(entries):
            if not isinstance(zone, str):
                raise InvalidCatalogError(
                    f"Catalog '{name}' entry {position} must be a string, "
                    f"got {type(zone).__name__}"
                )
            if not zone:
                raise InvalidCatalogError(
                    f"Catalog '{name}' entry {position} is an empty string"
                )
            if zone in seen:
                raise InvalidCatalogError(
                    f"Catalog '{name}' has duplicate zone '{zone}'"
                )
            seen.add(zone)

        self._name = name
        self._zones = entries

    @property
    def name(self) -> str:
        return self._name

    def zones(self) -> Tuple[Zone, ...]:
        """Zones in display order."""
        return self._zones

    def size(self) -> int:
        return len(self._zones)

    def contains(self, zone: Zone) -> bool:
        return zone in self._zones

    def __len__(self) -> int:
        return len(self._zones)

    def __iter__(self) -> Iterator[Zone]:
        return iter(self._zones)

    def __contains__(self, zone: object) -> bool:
        return zone in self._zones

    def __getitem__(self, index: int) -> Zone:
        return self._zones[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Catalog):
            return NotImplemented
        return self._name == other._name and self._zones == other._zones

    def __hash__(self) -> int:
        return hash((self._name, self._zones))

    def __repr__(self) -> str:
        return f"Catalog(name={self._name!r}, zones={list(self._zones)!r})"


class CatalogCollection:
    """
    Thread-safe collection of named catalogs.

    Catalogs are stored in insertion order. set_catalog() inserts or
    replaces, so a reloaded configuration can swap a catalog in place.

    Usage:
        collection = CatalogCollection()
        collection.set_catalog("sectors", Catalog(["sector1", "sector2"]))
        catalog = collection.get_catalog("sectors")
    """

    def __init__(self):
        self._catalogs: Dict[str, Catalog] = {}
        self._lock = threading.Lock()

    @classmethod
    def from_mapping(cls, catalogs: Dict[str, Iterable[Zone]]) -> "CatalogCollection":
        """
        Build a collection from {name: [zone, ...]}.

        Raises:
            InvalidCatalogError: If any catalog is invalid
        """
        collection = cls()
        for name, zones in catalogs.items():
            collection.set_catalog(name, Catalog(zones, name=name))
        return collection

    def set_catalog(self, name: str, catalog: Catalog) -> None:
        if not name:
            raise ValueError("Catalog name cannot be empty")
        with self._lock:
            self._catalogs[name] = catalog

    def get_catalog(self, name: str) -> Catalog:
        """
        Look up a catalog by name.

        Raises:
            CatalogNotFoundError: If no catalog has that name
        """
        with self._lock:
            catalog = self._catalogs.get(name)
            available = list(self._catalogs)

        if catalog is None:
            raise CatalogNotFoundError(
                f"Catalog '{name}' not found. "
                f"Available catalogs: {', '.join(available) or '(none)'}"
            )
        return catalog

    def remove_catalog(self, name: str) -> None:
        with self._lock:
            if name not in self._catalogs:
                raise CatalogNotFoundError(f"Catalog '{name}' not found")
            del self._catalogs[name]

    def list_catalogs(self) -> List[str]:
        with self._lock:
            return list(self._catalogs)

    def __len__(self) -> int:
        with self._lock:
            return len(self._catalogs)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._catalogs
