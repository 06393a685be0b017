"""
Tests for pick(): membership, exclusion, fallback, and errors.
"""

from collections import Counter

import numpy as np
import pytest

from rms_zone import (
    MAX_REDRAWS,
    Catalog,
    EmptyCatalogError,
    SelectionState,
    make_rng,
    pick,
)


@pytest.fixture
def abc():
    return Catalog(["A", "B", "C"], name="abc")


def test_pick_returns_member_for_many_seeds(abc):
    for seed in range(50):
        assert abc.contains(pick(abc, make_rng(seed)))


def test_pick_uses_drawn_index(abc, fixed_source):
    assert pick(abc, fixed_source(1)) == "B"
    assert pick(abc, fixed_source(0)) == "A"
    assert pick(abc, fixed_source(2)) == "C"


def test_pick_never_returns_excluded_zone(abc):
    for zone in abc.zones():
        rng = make_rng(123)
        for _ in range(200):
            assert pick(abc, rng, exclude=zone) != zone


def test_pick_redraws_when_excluded_zone_is_drawn(abc, sequence_source):
    rng = sequence_source([1, 1, 2])

    assert pick(abc, rng, exclude="B") == "C"
    assert rng.calls == 3


def test_pick_falls_back_to_linear_scan(abc, fixed_source):
    rng = fixed_source(1)  # always "B"

    result = pick(abc, rng, exclude="B")

    assert result == "A"
    assert rng.calls == MAX_REDRAWS


def test_pick_fallback_skips_excluded_first_entry(abc, fixed_source):
    rng = fixed_source(0)  # always "A"

    assert pick(abc, rng, exclude="A", max_redraws=5) == "B"
    assert rng.calls == 5


def test_pick_single_zone_catalog_returns_excluded_zone(fixed_source):
    only = Catalog(["z"])

    assert pick(only, fixed_source(0), exclude="z") == "z"


def test_pick_ignores_exclude_outside_catalog(abc, fixed_source):
    rng = fixed_source(1)

    assert pick(abc, rng, exclude="not-a-zone") == "B"
    assert rng.calls == 1


def test_pick_empty_catalog_raises(fixed_source):
    empty = Catalog([], name="empty", require_non_empty=False)

    with pytest.raises(EmptyCatalogError):
        pick(empty, fixed_source(0))


def test_pick_rejects_invalid_max_redraws(abc, fixed_source):
    with pytest.raises(ValueError):
        pick(abc, fixed_source(0), exclude="A", max_redraws=0)


def test_pick_rejects_out_of_range_index(abc, sequence_source):
    with pytest.raises(ValueError):
        pick(abc, sequence_source([7]))


def test_seeded_rng_is_reproducible(abc):
    rng_a, rng_b = make_rng(99), make_rng(99)
    first = [pick(abc, rng_a) for _ in range(20)]
    second = [pick(abc, rng_b) for _ in range(20)]

    assert first == second


def test_make_rng_returns_numpy_generator():
    assert isinstance(make_rng(1), np.random.Generator)


def test_pick_is_roughly_uniform_over_non_excluded():
    catalog = Catalog([f"sector{i}" for i in range(1, 5)])
    rng = make_rng(2024)

    counts = Counter(pick(catalog, rng, exclude="sector1") for _ in range(6000))

    assert "sector1" not in counts
    assert set(counts) == {"sector2", "sector3", "sector4"}
    for zone in ("sector2", "sector3", "sector4"):
        assert 1700 < counts[zone] < 2300


def test_scenario_pick_then_exclude(fixed_source):
    """Catalog A,B,C with a source fixed on index 1."""
    catalog = Catalog(["A", "B", "C"])
    rng = fixed_source(1)
    state = SelectionState()

    zone = pick(catalog, rng)
    assert zone == "B"

    state.select(zone)
    assert state.current() == "B"

    again = pick(catalog, rng, exclude=state.current())
    assert again in {"A", "C"}
