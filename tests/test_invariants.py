"""Tests for the structural invariant checker."""
import random

import pytest

from pyskiplist import GeometricLevelGenerator, InvariantError, SkipList, check_invariants


@pytest.fixture
def skiplist():
    lg = GeometricLevelGenerator(6, 0.5, random.Random(7))
    return SkipList(range(50), level_generator=lg)


def _tallest(skiplist):
    """Return the first real node with the highest level."""
    best = node = skiplist._head.links[0]
    while node is not None:
        if node.level > best.level:
            best = node
        node = node.links[0]
    return best


def test_valid_structure(skiplist):
    check_invariants(skiplist)


def test_detects_bad_span(skiplist):
    """Test that a span that no longer sums to the rank is reported."""
    node = _tallest(skiplist)
    node.links_len[-1] += 1
    with pytest.raises(InvariantError, match="level"):
        check_invariants(skiplist)


def test_detects_zero_span(skiplist):
    skiplist._head.links_len[0] = 0
    with pytest.raises(InvariantError, match="span 0 < 1"):
        check_invariants(skiplist)


def test_detects_wrong_length(skiplist):
    skiplist._len += 1
    with pytest.raises(InvariantError, match="len=51"):
        check_invariants(skiplist)


def test_detects_broken_prev(skiplist):
    skiplist._head.links[0].links[0].prev = skiplist._head
    with pytest.raises(InvariantError, match="prev"):
        check_invariants(skiplist)


def test_detects_mismatched_links(skiplist):
    node = skiplist._head.links[0]
    node.links_len.append(1)
    with pytest.raises(InvariantError, match="links"):
        check_invariants(skiplist)


def test_detects_short_head():
    sl = SkipList(level_generator=GeometricLevelGenerator(4))
    sl._level_generator = GeometricLevelGenerator(5)
    with pytest.raises(InvariantError, match="head level"):
        check_invariants(sl)
