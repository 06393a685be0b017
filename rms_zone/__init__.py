"""
RMS Zone
========

Bounded Context: Zone catalogs, random selection, and selection state.

Architecture:

    rms_zone/
    ├── catalog.py    # Catalog, CatalogCollection (immutable, read-only)
    ├── selector.py   # pick() (pure, injected randomness)
    └── state.py      # SelectionState (observable, lock-guarded)

Usage:

    from rms_zone import Catalog, SelectionState, make_rng, pick

    catalog = Catalog(["sector1", "sector2", "sector3"], name="sectors")
    state = SelectionState()
    state.subscribe(lambda zone: print(f"Zone: {zone}"))

    rng = make_rng(seed=42)
    state.select(pick(catalog, rng, exclude=state.current()))
"""

from rms_zone.catalog import (
    Zone,
    Catalog,
    CatalogCollection,
    InvalidCatalogError,
    CatalogNotFoundError,
    UnknownZoneError,
)
from rms_zone.selector import (
    MAX_REDRAWS,
    EmptyCatalogError,
    RandomSource,
    make_rng,
    pick,
)
from rms_zone.state import Observer, SelectionState, Subscription

__all__ = [
    # Catalog
    "Zone",
    "Catalog",
    "CatalogCollection",
    "InvalidCatalogError",
    "CatalogNotFoundError",
    "UnknownZoneError",
    # Selector
    "MAX_REDRAWS",
    "EmptyCatalogError",
    "RandomSource",
    "make_rng",
    "pick",
    # State
    "Observer",
    "SelectionState",
    "Subscription",
]

__version__ = "1.0.0"
