"""Structural invariant checks for :class:`pyskiplist.SkipList`.

These walk the whole node graph and are meant for tests and debugging, not
for the hot path.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .skiplist import SkipList

__all__ = ["InvariantError", "check_invariants"]


class InvariantError(AssertionError):
    """Raised when the skip-list node graph is internally inconsistent."""


def check_invariants(skiplist: SkipList) -> None:
    """Validate the node graph of *skiplist*, raising on the first failure."""
    head = skiplist._head
    total = skiplist._level_generator.total()

    if head.level != total - 1:
        raise InvariantError(f"Invariant failed: head level {head.level} != {total - 1}")
    if not head.is_head:
        raise InvariantError("Invariant failed: head has a prev reference")

    # Level 0 gives every node its rank.
    ranks = {id(head): 0}
    node = head
    count = 0
    while (nxt := node.links[0]) is not None:
        count += 1
        if nxt.prev is not node:
            raise InvariantError(f"Invariant failed: prev of rank {count} does not point at rank {count - 1}")
        if nxt.level > head.level:
            raise InvariantError(f"Invariant failed: node at rank {count} has level {nxt.level} > {head.level}")
        ranks[id(nxt)] = count
        node = nxt

    if count != len(skiplist):
        raise InvariantError(f"Invariant failed: len={len(skiplist)} but {count} nodes are linked")

    node = head
    while node is not None:
        if not len(node.links) == len(node.links_len) == node.level + 1:
            raise InvariantError(
                f"Invariant failed: node at rank {ranks[id(node)]} has {len(node.links)} links, "
                f"{len(node.links_len)} spans and level {node.level}"
            )
        node = node.links[0]

    for lvl in range(head.level + 1):
        node = head
        rank = 0
        while True:
            span = node.links_len[lvl]
            if span < 1:
                raise InvariantError(f"Invariant failed: span {span} < 1 at level {lvl}, rank {rank}")
            rank += span
            nxt = node.links[lvl]
            if nxt is None:
                if rank != count + 1:
                    raise InvariantError(
                        f"Invariant failed: level {lvl} ends at rank {rank}, expected {count + 1}"
                    )
                break
            if nxt.level < lvl:
                raise InvariantError(f"Invariant failed: level {lvl} links a node of level {nxt.level}")
            if ranks.get(id(nxt)) != rank:
                raise InvariantError(
                    f"Invariant failed: level {lvl} reaches rank {ranks.get(id(nxt))} after summing {rank}"
                )
            node = nxt
