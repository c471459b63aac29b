"""Unit tests for the geometric level generator."""
import random

import pytest

from pyskiplist import GeometricLevelGenerator


class ScriptedRandom:
    """Random source replaying a fixed list of floats."""

    def __init__(self, values):
        self._values = list(values)

    def random(self):
        return self._values.pop(0)


def test_defaults():
    """Test the default configuration."""
    lg = GeometricLevelGenerator()
    assert lg.total() == 16
    assert lg.p == 0.5


def test_scripted_levels():
    """Test that each draw below p climbs one level."""
    lg = GeometricLevelGenerator(4, 0.5, ScriptedRandom([0.1, 0.2, 0.9]))
    assert lg.random() == 2

    lg = GeometricLevelGenerator(4, 0.5, ScriptedRandom([0.7]))
    assert lg.random() == 0


def test_level_is_capped():
    """Test that levels never exceed total - 1."""
    rng = ScriptedRandom([0.0] * 10)
    lg = GeometricLevelGenerator(4, 0.5, rng)
    assert lg.random() == 3
    # The cap stops drawing once reached.
    assert len(rng._values) == 7


def test_single_level_never_draws():
    """Test that a one-level generator always yields level 0."""
    lg = GeometricLevelGenerator(1, 0.5, ScriptedRandom([]))
    assert lg.random() == 0


def test_distribution_is_geometric():
    """Test that roughly half of the levels reach level 1 and a quarter level 2."""
    lg = GeometricLevelGenerator(16, 0.5, random.Random(42))
    levels = [lg.random() for _ in range(10000)]
    assert all(0 <= lvl < 16 for lvl in levels)
    at_least_one = sum(lvl >= 1 for lvl in levels) / len(levels)
    at_least_two = sum(lvl >= 2 for lvl in levels) / len(levels)
    assert 0.45 < at_least_one < 0.55
    assert 0.20 < at_least_two < 0.30


@pytest.mark.parametrize(
    "capacity, expected",
    [(0, 1), (1, 1), (2, 1), (3, 1), (4, 2), (100, 6), (1024, 10), (1_000_000, 19)],
)
def test_from_capacity(capacity, expected):
    """Test that capacity sizing uses floor(log2(capacity)) bounded below by 1."""
    assert GeometricLevelGenerator.from_capacity(capacity).total() == expected


@pytest.mark.parametrize("total, p", [(0, 0.5), (-1, 0.5), (4, 0.0), (4, 1.0), (4, 1.5)])
def test_invalid_configuration(total, p):
    """Test that nonsensical configurations are rejected."""
    with pytest.raises(ValueError):
        GeometricLevelGenerator(total, p)


def test_negative_capacity():
    """Test that a negative capacity is rejected."""
    with pytest.raises(ValueError):
        GeometricLevelGenerator.from_capacity(-1)
