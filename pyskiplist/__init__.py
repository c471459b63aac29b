"""pyskiplist: an indexed skip list with logarithmic positional access.

The package exposes the sequence container via `pyskiplist.SkipList` while
keeping its building blocks (level generator, node graph, invariant checks)
importable on their own for testing and experimentation.
"""

from __future__ import annotations

__all__ = [
    "SkipList",
    "ItemRef",
    "SkipNode",
    "GeometricLevelGenerator",
    "InvariantError",
    "check_invariants",
]

from .invariants import InvariantError, check_invariants
from .level import GeometricLevelGenerator
from .node import SkipNode
from .skiplist import ItemRef, SkipList
