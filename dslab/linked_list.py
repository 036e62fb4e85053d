"""A singly linked list of values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional


@dataclass(eq=False)
class ListNode:
    """One link of a singly linked list."""

    value: Any
    next: Optional["ListNode"] = None


class SinglyLinkedList:
    """A singly linked list with positional insertion and removal.

    The chain of nodes starts at ``head``; its length is counted by walking it,
    so code that relinks nodes directly keeps the list consistent.
    """

    def __init__(self, values: Optional[Iterable[Any]] = None) -> None:
        self.head: Optional[ListNode] = None
        for value in values or ():
            self.append(value)

    def _nodes(self) -> Iterator[ListNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def _tail(self) -> Optional[ListNode]:
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def _normalise(self, index: int) -> int:
        size = len(self)
        if index < 0:
            index += size
        if not 0 <= index < size:
            raise IndexError("list index out of range")
        return index

    def _node_at(self, index: int) -> ListNode:
        index = self._normalise(index)
        for position, node in enumerate(self._nodes()):
            if position == index:
                return node
        raise IndexError("list index out of range")

    def append(self, value: Any) -> None:
        """Add ``value`` at the end of the list."""
        node = ListNode(value)
        tail = self._tail()
        if tail is None:
            self.head = node
        else:
            tail.next = node

    def prepend(self, value: Any) -> None:
        """Add ``value`` at the front of the list."""
        self.head = ListNode(value, self.head)

    def insert(self, index: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at position ``index``.

        Valid positions run from 0 to the current length; any other raises
        IndexError.
        """
        if index == 0:
            self.prepend(value)
            return
        size = len(self)
        if not 0 < index <= size:
            raise IndexError("invalid position")
        before = self._node_at(index - 1)
        before.next = ListNode(value, before.next)

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.value

    def __contains__(self, value: object) -> bool:
        return any(item == value for item in self)

    def __getitem__(self, index: int) -> Any:
        return self._node_at(index).value

    def __setitem__(self, index: int, value: Any) -> None:
        self._node_at(index).value = value

    def index(self, value: Any) -> int:
        """Return the position of the first occurrence of ``value``."""
        for position, item in enumerate(self):
            if item == value:
                return position
        raise ValueError(f"{value!r} is not in list")

    def pop_front(self) -> Any:
        """Remove the first value and return it."""
        if self.head is None:
            raise IndexError("pop from empty list")
        node = self.head
        self.head = node.next
        return node.value

    def pop_back(self) -> Any:
        """Remove the last value and return it."""
        if self.head is None:
            raise IndexError("pop from empty list")
        if self.head.next is None:
            return self.pop_front()
        previous = self.head
        while previous.next is not None and previous.next.next is not None:
            previous = previous.next
        last = previous.next
        previous.next = None
        return last.value

    def remove_at(self, index: int) -> Any:
        """Remove the value at position ``index`` and return it."""
        index = self._normalise(index)
        if index == 0:
            return self.pop_front()
        before = self._node_at(index - 1)
        removed = before.next
        before.next = removed.next
        return removed.value

    def reverse(self) -> None:
        """Reverse the order of the nodes in place."""
        previous = None
        node = self.head
        while node is not None:
            following = node.next
            node.next = previous
            previous = node
            node = following
        self.head = previous

    def sort(self) -> None:
        """Sort the values in ascending order, keeping the nodes in place."""
        nodes = list(self._nodes())
        for node, value in zip(nodes, sorted(node.value for node in nodes)):
            node.value = value

    def __str__(self) -> str:
        return " ".join(str(value) for value in self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"