"""Geometric level generator used to size skip-list nodes.

Every inserted node draws its level independently: level ``k`` is reached
with probability ``p ** k`` and the result is capped at ``total - 1`` so no
node ever outgrows the sentinel head.

The random source is injectable so tests can replay a fixed sequence of
levels.
"""
from __future__ import annotations

import logging
import math
import random as _random
from typing import Optional, Protocol

__all__ = ["GeometricLevelGenerator", "DEFAULT_MAX_LEVEL", "DEFAULT_P"]

logger = logging.getLogger(__name__)

DEFAULT_MAX_LEVEL = 16  # Plenty for > 65k elements on average.
DEFAULT_P = 0.5


class RandomSource(Protocol):
    def random(self) -> float: ...


class GeometricLevelGenerator:
    """Samples node levels from a capped geometric distribution.

    Parameters
    ----------
    total: int
        Number of levels available; sampled levels lie in ``[0, total - 1]``.
    p: float
        Probability of climbing one more level, in ``(0, 1)``.
    rng: RandomSource | None
        Object exposing ``random() -> float``. Defaults to the ``random`` module.
    """

    __slots__ = ("_total", "_p", "_rng")

    def __init__(self, total: int = DEFAULT_MAX_LEVEL, p: float = DEFAULT_P, rng: Optional[RandomSource] = None):
        if total < 1:
            raise ValueError(f"total must be >= 1, got {total}")
        if not 0.0 < p < 1.0:
            raise ValueError(f"p must lie in (0, 1), got {p}")
        self._total = total
        self._p = p
        self._rng = rng if rng is not None else _random

    @classmethod
    def from_capacity(cls, capacity: int, p: float = DEFAULT_P, rng: Optional[RandomSource] = None) -> "GeometricLevelGenerator":
        """Create a generator with ``floor(log2(capacity))`` levels (at least one)."""
        if capacity < 0:
            raise ValueError(f"capacity must be >= 0, got {capacity}")
        levels = max(1, math.floor(math.log2(capacity))) if capacity > 0 else 1
        logger.debug("Sized level generator for capacity %d: %d levels", capacity, levels)
        return cls(levels, p, rng)

    # ------------------------------------------------------------------
    # API
    # ------------------------------------------------------------------
    def random(self) -> int:
        lvl = 0
        while lvl < self._total - 1 and self._rng.random() < self._p:
            lvl += 1
        return lvl

    def total(self) -> int:
        return self._total

    @property
    def p(self) -> float:
        return self._p

    def __repr__(self) -> str:
        return f"GeometricLevelGenerator(total={self._total}, p={self._p})"
