"""Indexed skip list: a sequence with O(log n) positional access.

Unlike a sorted skip list, element order is purely positional: ``insert``
places a value at an index and shifts everything after it, exactly like
``list.insert``, but the cost is logarithmic instead of linear.

Complexities (average case):
    • get / set     – O(log n)
    • insert        – O(log n)
    • remove        – O(log n)
    • iterate       – O(n)
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence
from typing import Generic, Optional, TypeVar

from .invariants import InvariantError
from .level import GeometricLevelGenerator
from .node import SkipNode

__all__ = ["SkipList", "ItemRef"]

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ItemRef(Generic[T]):
    """Writable view on the value held by one skip-list node."""

    __slots__ = ("_node",)

    def __init__(self, node: SkipNode[T]):
        self._node = node

    @property
    def value(self) -> T:
        return self._node.item  # type: ignore[return-value]

    @value.setter
    def value(self, v: T) -> None:
        self._node.item = v

    def __repr__(self) -> str:
        return f"ItemRef({self._node.item!r})"


class SkipList(Generic[T]):
    """Sequence container backed by a skip list with span counters."""

    def __init__(self, iterable: Optional[Iterable[T]] = None, *, level_generator: Optional[GeometricLevelGenerator] = None):
        self._level_generator = level_generator if level_generator is not None else GeometricLevelGenerator()
        self._head: SkipNode[T] = SkipNode.head(self._level_generator.total())
        self._len = 0
        logger.debug("Created skiplist with %r", self._level_generator)
        if iterable is not None:
            self.extend(iterable)

    @classmethod
    def with_capacity(cls, capacity: int) -> "SkipList[T]":
        """Create an empty skiplist whose height suits about ``capacity`` items."""
        return cls(level_generator=GeometricLevelGenerator.from_capacity(capacity))

    # ------------------------------------------------------------------
    # Size
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return self._len

    def is_empty(self) -> bool:
        return self._len == 0

    def __bool__(self) -> bool:
        return self._len != 0

    def clear(self) -> None:
        """Remove every element. The dropped chain is left to the GC."""
        self._len = 0
        self._head = SkipNode.head(self._level_generator.total())
        logger.debug("Cleared skiplist")

    # ------------------------------------------------------------------
    # Mutation API
    # ------------------------------------------------------------------
    def insert(self, value: T, index: int) -> None:
        """Insert ``value`` at ``index``, shifting later elements right.

        Raises ``IndexError`` if ``index`` is negative or greater than ``len``.
        """
        if index < 0 or index > self._len:
            raise IndexError("Index out of bounds")
        new_node: SkipNode[T] = SkipNode(value, self._level_generator.random())
        self._head.insert_at(new_node, index)
        self._len += 1

    def remove(self, index: int) -> T:
        """Remove and return the value at ``index``.

        Raises ``IndexError`` if ``index`` is negative or not below ``len``.
        """
        if index < 0 or index >= self._len:
            raise IndexError("Index out of bounds.")
        node = self._head.remove_at(index)
        if node is None:
            logger.error("No node at index %d although len is %d", index, self._len)
            raise InvariantError(f"No node found at index {index}")
        self._len -= 1
        return node.item  # type: ignore[return-value]

    def append(self, value: T) -> None:
        self.insert(value, self._len)

    def extend(self, iterable: Iterable[T]) -> None:
        for value in iterable:
            self.insert(value, self._len)

    def pop(self, index: int = -1) -> T:
        if not self._len:
            raise IndexError("pop from empty skiplist")
        return self.remove(self._normalize(index, "pop index out of range"))

    # ------------------------------------------------------------------
    # Query API
    # ------------------------------------------------------------------
    def get(self, index: int) -> Optional[T]:
        """Return the value at ``index`` or ``None`` when out of range."""
        node = self._get_index(index)
        return None if node is None else node.item

    def get_mut(self, index: int) -> Optional[ItemRef[T]]:
        """Return a writable :class:`ItemRef` for ``index`` or ``None``."""
        node = self._get_index(index)
        return None if node is None else ItemRef(node)

    def _get_index(self, index: int) -> Optional[SkipNode[T]]:
        if index < 0 or index >= self._len:
            return None
        return self._head.advance(index + 1)

    # ------------------------------------------------------------------
    # Sequence protocol
    # ------------------------------------------------------------------
    def _normalize(self, index: int, msg: str = "skiplist index out of range") -> int:
        if isinstance(index, slice):
            raise TypeError("skiplist indices must be integers, not slice")
        if index < 0:
            index += self._len
        if index < 0 or index >= self._len:
            raise IndexError(msg)
        return index

    def __getitem__(self, index: int) -> T:
        return self._head.advance(self._normalize(index) + 1).item  # type: ignore[union-attr,return-value]

    def __setitem__(self, index: int, value: T) -> None:
        self._head.advance(self._normalize(index) + 1).item = value  # type: ignore[union-attr]

    def __delitem__(self, index: int) -> None:
        self.remove(self._normalize(index))

    def __iter__(self) -> Iterator[T]:
        node = self._head.links[0]
        while node is not None:
            yield node.item  # type: ignore[misc]
            node = node.links[0]

    def __reversed__(self) -> Iterator[T]:
        if not self._len:
            return
        node = self._head.advance(self._len)
        while node is not None and not node.is_head:
            yield node.item  # type: ignore[misc]
            node = node.prev

    def __contains__(self, value: object) -> bool:
        return any(item == value for item in self)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SkipList) or (isinstance(other, Sequence) and not isinstance(other, (str, bytes))):
            return len(self) == len(other) and all(a == b for a, b in zip(self, other))
        return NotImplemented

    def __repr__(self) -> str:
        return f"SkipList({list(self)!r})"
