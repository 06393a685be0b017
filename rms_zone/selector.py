"""
Zone Selector Module
====================

Random selection of one zone from a catalog.

Design:
- Pure function: no state, randomness is injected
- numpy Generator is the production randomness source
- Bounded redraw loop, then linear-scan fallback (always terminates)
"""

import logging
from typing import Optional, Protocol

import numpy as np

from rms_zone.catalog import Catalog, Zone

logger = logging.getLogger(__name__)

MAX_REDRAWS = 1000


class EmptyCatalogError(Exception):
    """Raised when picking from a catalog with no zones."""
    pass


class RandomSource(Protocol):
    """Randomness source (subset of numpy.random.Generator)."""

    def integers(self, low: int, high: int) -> int:
        """Return an integer drawn from [low, high)."""
        ...


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """
    Create the default randomness source.

    Args:
        seed: Optional seed for reproducible picks

    Returns:
        numpy Generator (PCG64)
    """
    return np.random.default_rng(seed)


def pick(
    catalog: Catalog,
    rng: RandomSource,
    exclude: Optional[Zone] = None,
    max_redraws: int = MAX_REDRAWS
) -> Zone:
    """
    Pick one zone from the catalog.

    Each call is independent: a uniform index in [0, size) is drawn from rng.
    If the drawn zone equals `exclude`, the draw is repeated up to
    `max_redraws` times, then the first non-excluded zone in catalog order
    is returned.

    Args:
        catalog: Catalog to pick from
        rng: Randomness source exposing integers(low, high)
        exclude: Zone that must not be returned. Ignored if not in the
            catalog. Returned anyway when it is the only zone.
        max_redraws: Attempts before the linear-scan fallback

    Returns:
        A zone of the catalog

    Raises:
        EmptyCatalogError: If the catalog has no zones
        ValueError: If max_redraws < 1

    Example:
        >>> catalog = Catalog(["A", "B", "C"])
        >>> pick(catalog, make_rng(7), exclude="B") in {"A", "C"}
        True
    """
    if max_redraws < 1:
        raise ValueError(f"max_redraws must be >= 1, got {max_redraws}")

    size = catalog.size()
    if size == 0:
        raise EmptyCatalogError(f"Cannot pick from empty catalog '{catalog.name}'")

    zones = catalog.zones()

    # Nothing to avoid: one draw
    if exclude is None or size == 1 or not catalog.contains(exclude):
        return zones[_draw_index(rng, size)]

    for _ in range(max_redraws):
        zone = zones[_draw_index(rng, size)]
        if zone != exclude:
            return zone

    logger.warning(
        f"Redraw limit reached for catalog '{catalog.name}' "
        f"(max_redraws={max_redraws}, exclude={exclude!r}); using linear scan"
    )
    for zone in zones:
        if zone != exclude:
            return zone

    # size > 1 with unique zones always has a non-excluded entry
    raise AssertionError("unreachable: no non-excluded zone")


def _draw_index(rng: RandomSource, size: int) -> int:
    index = int(rng.integers(0, size))
    if not 0 <= index < size:
        raise ValueError(
            f"Randomness source returned index {index} outside [0, {size})"
        )
    return index
