"""A doubly linked list with Python-style negative indexing."""

from __future__ import annotations

import operator
from itertools import chain, islice
from typing import Any, Iterable, Iterator, Optional


class _Node:
    __slots__ = ("item", "prev", "next")

    def __init__(self, item: Any) -> None:
        self.item = item
        self.prev: Optional[_Node] = None
        self.next: Optional[_Node] = None


class LinkedList:
    """Doubly linked list; index ``i`` is valid when ``-len <= i < len``."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self._begin: Optional[_Node] = None
        self._end: Optional[_Node] = None
        self._length = 0
        if items is not None:
            for item in items:
                self.append(item)

    def _check(self, index: Any) -> int:
        index = operator.index(index)
        if not -self._length <= index < self._length:
            raise IndexError("list index out of range")
        return index

    def _positive(self, index: int) -> int:
        return self._length + index if index < 0 else index

    def _access(self, index: int) -> _Node:
        if index < 0:
            node = self._end
            for _ in range(-index - 1):
                node = node.prev
        else:
            node = self._begin
            for _ in range(index):
                node = node.next
        return node

    def _nodes(self) -> Iterator[_Node]:
        node = self._begin
        while node is not None:
            yield node
            node = node.next

    def append(self, item: Any) -> None:
        """Add an item at the end."""
        node = _Node(item)
        if self._end is None:
            self._begin = node
        else:
            node.prev = self._end
            self._end.next = node
        self._end = node
        self._length += 1

    def delete(self, index: int) -> None:
        """Remove the item at ``index``."""
        node = self._access(self._check(index))
        if node.prev is None:
            self._begin = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._end = node.prev
        else:
            node.next.prev = node.prev
        self._length -= 1

    def clear(self) -> None:
        """Remove every item."""
        self._begin = None
        self._end = None
        self._length = 0

    def fill(self, item: Any) -> None:
        """Replace every item with ``item``."""
        for node in self._nodes():
            node.item = item

    def get(self, index: int) -> Any:
        """Return the item at ``index``."""
        return self._access(self._check(index)).item

    def set(self, index: int, item: Any) -> None:
        """Replace the item at ``index``."""
        self._access(self._check(index)).item = item

    def insert(self, index: int, item: Any) -> None:
        """Insert ``item`` before the existing item at ``index``."""
        following = self._access(self._check(index))
        node = _Node(item)
        node.prev = following.prev
        node.next = following
        if following.prev is None:
            self._begin = node
        else:
            following.prev.next = node
        following.prev = node
        self._length += 1

    def pop(self, index: int) -> Any:
        """Remove the item at ``index`` and return it."""
        item = self.get(index)
        self.delete(index)
        return item

    def split(self, index: int) -> "LinkedList":
        """Cut the list at ``index``; return the tail, keep the head."""
        position = self._positive(self._check(index))
        node = self._access(position)
        tail = LinkedList()
        tail._begin = node
        tail._end = self._end
        tail._length = self._length - position
        self._end = node.prev
        if node.prev is None:
            self._begin = None
        else:
            node.prev.next = None
        node.prev = None
        self._length = position
        return tail

    def join(self, other: "LinkedList") -> "LinkedList":
        """Return a new list holding this list's items followed by ``other``'s."""
        return LinkedList(chain(self, other))

    def slice(self, begin: int, end: int) -> "LinkedList":
        """Return a new list of the items from ``begin`` up to ``end``."""
        start = self._positive(self._check(begin))
        stop = self._positive(self._check(end))
        return LinkedList(islice(self, start, max(start, stop)))

    def copy(self) -> "LinkedList":
        """Return a new list with the same items."""
        return LinkedList(self)

    def find(self, item: Any) -> int:
        """Return the index of the first matching item, or -1."""
        for position, current in enumerate(self):
            if current is item or current == item:
                return position
        return -1

    def reverse(self) -> None:
        """Reverse the list in place."""
        node = self._begin
        while node is not None:
            node.prev, node.next = node.next, node.prev
            node = node.prev
        self._begin, self._end = self._end, self._begin

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.item

    def __getitem__(self, index: int) -> Any:
        return self.get(index)

    def __setitem__(self, index: int, item: Any) -> None:
        self.set(index, item)

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"