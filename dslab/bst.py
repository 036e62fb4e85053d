"""A binary search tree that keeps equal values to the right."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Sequence


@dataclass(eq=False)
class _Node:
    value: Any
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None


class BinarySearchTree:
    """A binary search tree; a value equal to a node's goes to its right."""

    def __init__(self, values: Optional[Iterable[Any]] = None) -> None:
        self._root: Optional[_Node] = None
        for value in values or ():
            self.insert(value)

    def insert(self, value: Any) -> None:
        """Add ``value`` to the tree."""
        node = _Node(value)
        if self._root is None:
            self._root = node
            return
        current = self._root
        while True:
            if value >= current.value:
                if current.right is None:
                    current.right = node
                    return
                current = current.right
            else:
                if current.left is None:
                    current.left = node
                    return
                current = current.left

    def preorder(self) -> List[Any]:
        """Return the values in node, left, right order."""
        result: List[Any] = []
        pending = [self._root] if self._root is not None else []
        while pending:
            node = pending.pop()
            result.append(node.value)
            if node.right is not None:
                pending.append(node.right)
            if node.left is not None:
                pending.append(node.left)
        return result

    def inorder(self) -> List[Any]:
        """Return the values in ascending order."""
        result: List[Any] = []
        pending: List[_Node] = []
        node = self._root
        while pending or node is not None:
            while node is not None:
                pending.append(node)
                node = node.left
            node = pending.pop()
            result.append(node.value)
            node = node.right
        return result

    def postorder(self) -> List[Any]:
        """Return the values in left, right, node order."""
        result: List[Any] = []
        pending = [self._root] if self._root is not None else []
        while pending:
            node = pending.pop()
            result.append(node.value)
            if node.left is not None:
                pending.append(node.left)
            if node.right is not None:
                pending.append(node.right)
        result.reverse()
        return result

    def _find(self, value: Any) -> Optional[_Node]:
        node = self._root
        while node is not None and node.value != value:
            node = node.left if value < node.value else node.right
        return node

    def __contains__(self, value: object) -> bool:
        return self._find(value) is not None

    def minimum(self) -> Any:
        """Return the smallest value."""
        if self._root is None:
            raise ValueError("minimum of an empty tree")
        node = self._root
        while node.left is not None:
            node = node.left
        return node.value

    def maximum(self) -> Any:
        """Return the largest value."""
        if self._root is None:
            raise ValueError("maximum of an empty tree")
        node = self._root
        while node.right is not None:
            node = node.right
        return node.value

    def delete(self, value: Any) -> None:
        """Remove one node holding ``value``; do nothing if there is none."""
        parent: Optional[_Node] = None
        node = self._root
        while node is not None and node.value != value:
            parent = node
            node = node.left if value < node.value else node.right
        if node is None:
            return
        if node.left is not None and node.right is not None:
            successor_parent, successor = node, node.right
            while successor.left is not None:
                successor_parent, successor = successor, successor.left
            node.value = successor.value
            if successor_parent is node:
                successor_parent.right = successor.right
            else:
                successor_parent.left = successor.right
            return
        child = node.left if node.left is not None else node.right
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child

    def height(self) -> int:
        """Return the number of levels; an empty tree has height 0."""
        levels = 0
        level = [self._root] if self._root is not None else []
        while level:
            levels += 1
            level = [
                child
                for node in level
                for child in (node.left, node.right)
                if child is not None
            ]
        return levels

    @staticmethod
    def _walk(node: Optional[_Node], end: Any) -> List[Any]:
        visited: List[Any] = []
        while node is not None:
            visited.append(node.value)
            if node.value == end:
                return visited
            node = node.left if end < node.value else node.right
        raise ValueError(f"{end!r} is not in tree")

    def path_to(self, end: Any) -> List[Any]:
        """Return the values on the way from the root down to ``end``."""
        return self._walk(self._root, end)

    def path(self, start: Any, end: Any) -> List[Any]:
        """Return the values on the way from ``start`` down to ``end``."""
        node = self._find(start)
        if node is None:
            raise ValueError(f"{start!r} is not in tree")
        return self._walk(node, end)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Build a sample tree and print what the tree operations give."""
    out = sys.stdout
    tree = BinarySearchTree([20, 30, 40, 50, 60, 70, 80, 90])

    def line(text: Any = "") -> None:
        out.write(f"{text}\n")

    def spaced(values: Iterable[Any]) -> str:
        return " ".join(str(value) for value in values)

    line("inorder ")
    for value in tree.inorder():
        line(value)
    line("preorder ")
    line(spaced(tree.preorder()))
    line("postorder ")
    line(spaced(tree.postorder()))
    line("height is ")
    line(tree.height())
    line("Path is ")
    line(spaced(tree.path_to(50)))
    line("smallest val ")
    line(tree.minimum())
    line()
    line("largest val ")
    line(tree.maximum())
    line()
    if 40 in tree:
        line("node found")
        line(40)
        line()
    tree.delete(90)
    for value in tree.inorder():
        line(value)
    line()
    return 0


if __name__ == "__main__":
    sys.exit(main())