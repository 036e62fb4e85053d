"""A last-in, first-out stack."""

from __future__ import annotations

from typing import Any, Iterator, List


class Stack:
    """A stack whose top is the most recently pushed value."""

    def __init__(self) -> None:
        self._items: List[Any] = []

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        self._items.append(value)

    def pop(self) -> Any:
        """Remove the top value and return it."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if not self._items:
            raise IndexError("peek at empty stack")
        return self._items[-1]

    def is_empty(self) -> bool:
        """Tell whether the stack holds no values."""
        return not self._items

    def clear(self) -> None:
        """Remove every value."""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Yield the values from the top down."""
        return reversed(self._items)

    def __str__(self) -> str:
        return " ".join(str(value) for value in self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"