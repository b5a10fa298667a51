"""Doubly linked list ordering entries from most to least recently used.

Nodes double as handles: the cache index stores the ``Node`` itself, so
promotion and removal never scan the list. A single sentinel node closes
the ring, which keeps every splice branch-free.
"""

from __future__ import annotations

from typing import Generic, Iterator, Optional, TypeVar, cast

T = TypeVar("T")


class Node(Generic[T]):
    __slots__ = ("value", "prev", "next", "_owner")

    def __init__(self, value: T) -> None:
        self.value = value
        # Linked nodes always point at a neighbour (or the sentinel)
        self.prev: Node[T] = self
        self.next: Node[T] = self
        self._owner: Optional[LinkedList[T]] = None


class LinkedList(Generic[T]):
    """Front = most recently used, back = least recently used."""

    def __init__(self) -> None:
        self._root: Node[T] = Node(cast(T, None))
        self._len = 0

    def __len__(self) -> int:
        return self._len

    def __iter__(self) -> Iterator[T]:
        node = self._root.next
        while node is not self._root:
            yield node.value
            node = node.next

    def front(self) -> Optional[Node[T]]:
        return None if self._len == 0 else self._root.next

    def back(self) -> Optional[Node[T]]:
        return None if self._len == 0 else self._root.prev

    def push_front(self, value: T) -> Node[T]:
        node = Node(value)
        self._insert_after(node, self._root)
        return node

    def move_to_front(self, node: Node[T]) -> None:
        self._check_owner(node)
        if self._root.next is node:
            return
        self._unlink(node)
        self._insert_after(node, self._root)

    def remove(self, node: Node[T]) -> T:
        self._check_owner(node)
        self._unlink(node)
        self._detach(node)
        return node.value

    def pop_back(self) -> Optional[T]:
        node = self.back()
        if node is None:
            return None
        return self.remove(node)

    def clear(self) -> None:
        # Detach nodes so stale handles cannot be reused against this list
        node = self._root.next
        while node is not self._root:
            nxt = node.next
            self._detach(node)
            node = nxt
        self._root.prev = self._root
        self._root.next = self._root
        self._len = 0

    def iter_back_to_front(self) -> Iterator[Node[T]]:
        # Safe against removal of the yielded node
        node = self._root.prev
        while node is not self._root:
            prev = node.prev
            yield node
            node = prev

    def _insert_after(self, node: Node[T], at: Node[T]) -> None:
        nxt = at.next
        node.prev = at
        node.next = nxt
        at.next = node
        nxt.prev = node
        node._owner = self
        self._len += 1

    def _unlink(self, node: Node[T]) -> None:
        node.prev.next = node.next
        node.next.prev = node.prev
        self._len -= 1

    @staticmethod
    def _detach(node: Node[T]) -> None:
        node.prev = node
        node.next = node
        node._owner = None

    def _check_owner(self, node: Node[T]) -> None:
        if node._owner is not self:
            raise ValueError("node does not belong to this list")
