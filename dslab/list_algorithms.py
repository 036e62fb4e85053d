"""Algorithms that work on a singly linked list in place."""

from __future__ import annotations

from typing import Any, Callable, Iterator, Optional

from dslab.linked_list import ListNode, SinglyLinkedList


def _nodes(lst: SinglyLinkedList) -> Iterator[ListNode]:
    node = lst.head
    while node is not None:
        yield node
        node = node.next


def _filter_in_place(lst: SinglyLinkedList, keep: Callable[[Any], bool]) -> None:
    """Unlink every node whose value fails ``keep``."""
    anchor = ListNode(None, lst.head)
    previous = anchor
    while previous.next is not None:
        if keep(previous.next.value):
            previous = previous.next
        else:
            previous.next = previous.next.next
    lst.head = anchor.next


def remove_negatives(lst: SinglyLinkedList) -> None:
    """Unlink every node that holds a negative value."""
    _filter_in_place(lst, lambda value: value >= 0)


def minimum(lst: SinglyLinkedList) -> Any:
    """Return the smallest value in the list."""
    if lst.head is None:
        raise ValueError("minimum of an empty list")
    smallest = lst.head.value
    for node in _nodes(lst):
        if node.value < smallest:
            smallest = node.value
    return smallest


def remove_adjacent_duplicates(lst: SinglyLinkedList) -> None:
    """Collapse each run of equal neighbouring values into one node."""
    node: Optional[ListNode] = lst.head
    while node is not None:
        while node.next is not None and node.next.value == node.value:
            node.next = node.next.next
        node = node.next


def keep_evens(lst: SinglyLinkedList) -> None:
    """Unlink every node that holds an odd value."""
    _filter_in_place(lst, lambda value: value % 2 == 0)


def is_palindrome(lst: SinglyLinkedList) -> bool:
    """Tell whether the values read the same in both directions."""
    values = [node.value for node in _nodes(lst)]
    return values == values[::-1]


def rotate(lst: SinglyLinkedList, k: int) -> None:
    """Move the first ``k`` nodes to the end of the list."""
    size = len(lst)
    if size == 0:
        return
    k %= size
    if k == 0:
        return
    last_moved = lst.head
    for _ in range(k - 1):
        last_moved = last_moved.next
    new_head = last_moved.next
    last_moved.next = None
    tail = new_head
    while tail.next is not None:
        tail = tail.next
    tail.next = lst.head
    lst.head = new_head


def swap(lst: SinglyLinkedList, i: int, j: int) -> None:
    """Exchange the values at positions ``i`` and ``j``."""
    lst[i], lst[j] = lst[j], lst[i]