"""Shared fixtures: deterministic randomness sources."""

import pytest


class FixedIndexSource:
    """Always returns the same index (clamped to the requested range)."""

    def __init__(self, index: int):
        self.index = index
        self.calls = 0

    def integers(self, low: int, high: int) -> int:
        self.calls += 1
        return min(self.index, high - 1)


class SequenceSource:
    """Returns indices from a list, cycling when exhausted."""

    def __init__(self, indices):
        self.indices = list(indices)
        self.calls = 0

    def integers(self, low: int, high: int) -> int:
        index = self.indices[self.calls % len(self.indices)]
        self.calls += 1
        return index


@pytest.fixture
def fixed_source():
    return FixedIndexSource


@pytest.fixture
def sequence_source():
    return SequenceSource
