"""Skip-list nodes and the index-aware traversal algorithms.

A node of level ``n`` carries ``n + 1`` forward links. ``links[0]`` forms the
plain singly linked chain of elements; higher links are shortcuts. Next to
every link the node stores its *span*: the number of level-0 steps the link
jumps over. A link pointing past the last element (``None``) spans up to the
virtual position right after the tail, so spans are never zero.

The sentinel head owns the traversals::

    head.advance(rank)          # O(log n) lookup, rank is 1-based
    head.insert_at(node, index) # splice ``node`` in at 0-based ``index``
    head.remove_at(index)       # splice the node at ``index`` out

Bounds are the caller's job (see :class:`pyskiplist.SkipList`).
"""
from __future__ import annotations

import logging
from typing import Generic, Optional, TypeVar

from .invariants import InvariantError

__all__ = ["SkipNode"]

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SkipNode(Generic[T]):
    __slots__ = ("item", "level", "prev", "links", "links_len")

    def __init__(self, item: Optional[T], level: int):
        self.item = item
        self.level = level
        self.prev: Optional[SkipNode[T]] = None
        self.links: list[Optional[SkipNode[T]]] = [None] * (level + 1)
        self.links_len: list[int] = [1] * (level + 1)

    @classmethod
    def head(cls, total: int) -> "SkipNode[T]":
        """Create an empty sentinel spanning ``total`` levels."""
        return cls(None, total - 1)

    @property
    def is_head(self) -> bool:
        return self.prev is None

    def __repr__(self) -> str:  # pragma: no cover
        if self.is_head:
            return f"SkipNode<head level={self.level}>"
        return f"SkipNode<{self.item!r} level={self.level}>"

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------
    def advance(self, rank: int) -> Optional["SkipNode[T]"]:
        """Return the node ``rank`` steps ahead of this one, or ``None``."""
        node = self
        traveled = 0
        for lvl in reversed(range(self.level + 1)):
            while (nxt := node.links[lvl]) is not None and traveled + node.links_len[lvl] <= rank:
                traveled += node.links_len[lvl]
                node = nxt
            if traveled == rank:
                return node
        return None

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def _predecessors(self, index: int) -> tuple[list["SkipNode[T]"], list[int]]:
        """Return, per level, the last node at rank <= ``index`` and its rank."""
        update: list[SkipNode[T]] = [self] * (self.level + 1)
        ranks = [0] * (self.level + 1)
        node = self
        traveled = 0
        for lvl in reversed(range(self.level + 1)):
            while (nxt := node.links[lvl]) is not None and traveled + node.links_len[lvl] <= index:
                traveled += node.links_len[lvl]
                node = nxt
            update[lvl] = node
            ranks[lvl] = traveled
        return update, ranks

    def insert_at(self, new_node: "SkipNode[T]", index: int) -> None:
        """Splice ``new_node`` in so that it ends up at 0-based ``index``.

        Every link at or below the new node's level that crosses the insertion
        point is split in two; every higher link crossing it grows by one.
        """
        if new_node.level > self.level:
            raise InvariantError(
                f"Node level {new_node.level} exceeds head level {self.level}"
            )
        update, ranks = self._predecessors(index)
        if ranks[0] != index:
            logger.error("No insertion position at index %d (reached rank %d)", index, ranks[0])
            raise InvariantError("No insertion position is found!")

        for lvl in range(self.level + 1):
            pred = update[lvl]
            if lvl <= new_node.level:
                steps = index - ranks[lvl]
                new_node.links[lvl] = pred.links[lvl]
                new_node.links_len[lvl] = pred.links_len[lvl] - steps
                pred.links[lvl] = new_node
                pred.links_len[lvl] = steps + 1
            else:
                pred.links_len[lvl] += 1

        new_node.prev = update[0]
        if (succ := new_node.links[0]) is not None:
            succ.prev = new_node

    def remove_at(self, index: int) -> Optional["SkipNode[T]"]:
        """Unlink and return the node at 0-based ``index``, or ``None``."""
        update, _ = self._predecessors(index)
        target = update[0].links[0]
        if target is None:
            return None

        for lvl in range(self.level + 1):
            pred = update[lvl]
            if pred.links[lvl] is target:
                pred.links[lvl] = target.links[lvl]
                pred.links_len[lvl] += target.links_len[lvl] - 1
            else:
                pred.links_len[lvl] -= 1

        if (succ := target.links[0]) is not None:
            succ.prev = update[0]
        # Detach so the returned node no longer references the chain.
        target.prev = None
        target.links = [None] * (target.level + 1)
        target.links_len = [1] * (target.level + 1)
        return target
