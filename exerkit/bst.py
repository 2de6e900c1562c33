"""An unbalanced binary search tree that ignores duplicate elements."""

from __future__ import annotations

import argparse
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any


@dataclass
class _Node:
    elem: Any
    left: _Node | None = None
    right: _Node | None = None


def _remove_from(node: _Node | None, value: Any) -> _Node | None:
    if node is None:
        return None
    if value < node.elem:
        node.left = _remove_from(node.left, value)
        return node
    if value > node.elem:
        node.right = _remove_from(node.right, value)
        return node

    left, right = node.left, node.right
    if left is None:
        return right
    if right is None:
        return left
    # Hang the right subtree under the rightmost node of the left subtree.
    rightmost = left
    while rightmost.right is not None:
        rightmost = rightmost.right
    rightmost.right = right
    return left


class Tree:
    """Binary search tree of mutually comparable elements."""

    def __init__(self, elem: Any = None) -> None:
        self._root: _Node | None = None if elem is None else _Node(elem)

    def add(self, elem: Any) -> None:
        """Insert ``elem``; an element already present is left as is."""
        if self._root is None:
            self._root = _Node(elem)
            return
        node = self._root
        while True:
            if elem < node.elem:
                if node.left is None:
                    node.left = _Node(elem)
                    return
                node = node.left
            elif elem > node.elem:
                if node.right is None:
                    node.right = _Node(elem)
                    return
                node = node.right
            else:
                return

    def pop_greatest(self) -> Any:
        """Remove and return the greatest element, or ``None`` if the tree is empty."""
        if self._root is None:
            return None
        parent: _Node | None = None
        node = self._root
        while node.right is not None:
            parent, node = node, node.right
        if parent is None:
            self._root = node.left
        else:
            parent.right = node.left
        return node.elem

    def remove(self, value: Any) -> None:
        """Remove ``value`` if present."""
        self._root = _remove_from(self._root, value)

    def sorted_elements(self) -> list[Any]:
        """Return the elements in ascending order."""
        return list(self)

    def __iter__(self) -> Iterator[Any]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.elem
            node = node.right

    def __repr__(self) -> str:
        return f"Tree({self.sorted_elements()!r})"


def main(argv: Sequence[str] | None = None) -> int:
    """Build a sample tree, remove from it and print the result."""
    parser = argparse.ArgumentParser(description="Demonstrate the binary search tree.")
    parser.parse_args(argv)

    tree = Tree()
    for value in (6, 2, 3, 2, 5, 9, 12, 1):
        tree.add(value)
    print(f"Maior elemento: {tree.pop_greatest()}")
    tree.remove(6)
    print(f"Elementos Ordenados: {tree.sorted_elements()}")
    print(tree)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())