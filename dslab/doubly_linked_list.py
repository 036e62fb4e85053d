"""A doubly linked list of values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional


@dataclass(eq=False)
class _Node:
    value: Any
    prev: Optional["_Node"] = None
    next: Optional["_Node"] = None


class DoublyLinkedList:
    """A doubly linked list with positional insertion and removal."""

    def __init__(self, values: Optional[Iterable[Any]] = None) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        for value in values or ():
            self.append(value)

    def _forward(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _backward(self) -> Iterator[_Node]:
        node = self._tail
        while node is not None:
            yield node
            node = node.prev

    def _normalise(self, index: int) -> int:
        if index < 0:
            index += self._size
        if not 0 <= index < self._size:
            raise IndexError("list index out of range")
        return index

    def _node_at(self, index: int) -> _Node:
        index = self._normalise(index)
        if index <= self._size // 2:
            walk, steps = self._forward(), index
        else:
            walk, steps = self._backward(), self._size - 1 - index
        for position, node in enumerate(walk):
            if position == steps:
                return node
        raise IndexError("list index out of range")

    def _unlink(self, node: _Node) -> Any:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        self._size -= 1
        return node.value

    def append(self, value: Any) -> None:
        """Add ``value`` at the end of the list."""
        node = _Node(value, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def prepend(self, value: Any) -> None:
        """Add ``value`` at the front of the list."""
        node = _Node(value, next=self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def insert(self, index: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at position ``index``.

        Valid positions run from 0 to the current length; any other raises
        IndexError.
        """
        if index == 0:
            self.prepend(value)
            return
        if index == self._size:
            self.append(value)
            return
        if not 0 < index < self._size:
            raise IndexError("invalid position")
        after = self._node_at(index)
        node = _Node(value, prev=after.prev, next=after)
        after.prev.next = node
        after.prev = node
        self._size += 1

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        for node in self._forward():
            yield node.value

    def __reversed__(self) -> Iterator[Any]:
        for node in self._backward():
            yield node.value

    def __contains__(self, value: object) -> bool:
        return any(item == value for item in self)

    def __getitem__(self, index: int) -> Any:
        return self._node_at(index).value

    def index(self, value: Any) -> int:
        """Return the position of the first occurrence of ``value``."""
        for position, item in enumerate(self):
            if item == value:
                return position
        raise ValueError(f"{value!r} is not in list")

    def pop_front(self) -> Any:
        """Remove the first value and return it."""
        if self._head is None:
            raise IndexError("pop from empty list")
        return self._unlink(self._head)

    def pop_back(self) -> Any:
        """Remove the last value and return it."""
        if self._tail is None:
            raise IndexError("pop from empty list")
        return self._unlink(self._tail)

    def remove_at(self, index: int) -> Any:
        """Remove the value at position ``index`` and return it."""
        return self._unlink(self._node_at(index))

    def reverse(self) -> None:
        """Reverse the order of the nodes in place."""
        for node in list(self._forward()):
            node.prev, node.next = node.next, node.prev
        self._head, self._tail = self._tail, self._head

    def sort(self) -> None:
        """Sort the values in ascending order, keeping the nodes in place."""
        nodes = list(self._forward())
        for node, value in zip(nodes, sorted(node.value for node in nodes)):
            node.value = value

    def __str__(self) -> str:
        return " ".join(str(value) for value in self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"